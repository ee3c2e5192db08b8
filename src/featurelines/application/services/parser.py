"""Parser service: URI[:LINE]* text → FeatureWithLines.

Splits text into locator and trailing line markers, delegates the locator
to a LocatorResolverPort and the markers to the line set builder.
FAIL-FIRST: MalformedIdentifierError on any invalid part.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from featurelines.domain.exceptions import FeatureLinesError, MalformedIdentifierError
from featurelines.domain.model.feature_with_lines import FeatureWithLines
from featurelines.domain.model.line_set import parse_lines
from featurelines.domain.model.selection import FeatureSelection
from featurelines.infrastructure.resolvers import FeatureIdentifierResolver

if TYPE_CHECKING:
    from collections.abc import Iterable

    from featurelines.domain.model.feature_uri import FeatureUri
    from featurelines.domain.ports.locator_resolver import LocatorResolverPort

logger = logging.getLogger(__name__)

# Lazy locator, then the longest tail made only of digits and colons.
# A locator that itself ends in ":<digits>" is always read as line markers.
FEATURE_COLON_LINE_PATTERN = re.compile(r"(.*?):([0-9:]+)")


class FeatureWithLinesParser:
    """Parse feature identifiers with a given locator resolver.

    Stateless apart from the resolver, safe to share.
    """

    def __init__(self, resolver: LocatorResolverPort | None = None) -> None:
        """Initialize parser.

        Args:
            resolver: Locator resolver. Uses FeatureIdentifierResolver if None.
        """
        self._resolver = resolver or FeatureIdentifierResolver()

    def create(self, uri: FeatureUri, lines: Iterable[int] = ()) -> FeatureWithLines:
        """Create from already resolved URI. Never fails on lines."""
        return FeatureWithLines.create(uri, lines)

    def parse_with_lines(self, locator: str, lines: Iterable[int] = ()) -> FeatureWithLines:
        """Resolve locator and attach explicit lines.

        Args:
            locator: Locator text without line markers.
            lines: Line numbers, unordered and possibly duplicated.

        Returns:
            FeatureWithLines with normalized lines.

        Raises:
            ValueError: Resolver failure, not wrapped.
        """
        return FeatureWithLines.create(self._resolver.resolve(locator), lines)

    def parse(self, text: str) -> FeatureWithLines:
        """Parse URI[:LINE]* text.

        Examples:
            "features/a.feature" → file:///cwd/features/a.feature
            "features/a.feature:3:7:3" → file:///cwd/features/a.feature:3:7

        Args:
            text: Full identifier text.

        Returns:
            FeatureWithLines.

        Raises:
            MalformedIdentifierError: Empty locator, unresolvable locator or
                invalid line segment. Original error kept in __cause__.
        """
        match = FEATURE_COLON_LINE_PATTERN.fullmatch(text)

        if match is None:
            try:
                return self.parse_with_lines(text)
            except (FeatureLinesError, ValueError) as e:
                raise MalformedIdentifierError(text) from e

        locator, digits = match.groups()
        if not locator:
            raise MalformedIdentifierError(text)

        try:
            uri = self._resolver.resolve(locator)
            lines = parse_lines(digits)
        except (FeatureLinesError, ValueError) as e:
            raise MalformedIdentifierError(text) from e

        logger.debug("Parsed %r as %s with lines %s", text, uri, lines)
        return FeatureWithLines(uri=uri, lines=lines)

    def parse_many(self, text: str) -> FeatureSelection:
        """Parse rerun text: one identifier per non-blank line.

        Args:
            text: Rerun file content.

        Returns:
            FeatureSelection merged per URI.

        Raises:
            MalformedIdentifierError: First invalid line.
        """
        identifiers = [self.parse(line.strip()) for line in text.splitlines() if line.strip()]
        return FeatureSelection.of(identifiers)


_default_parser = FeatureWithLinesParser()


def parse_feature_with_lines(text: str) -> FeatureWithLines:
    """Parse URI[:LINE]* text with the default resolver."""
    return _default_parser.parse(text)


def parse_feature_with_explicit_lines(locator: str, lines: Iterable[int] = ()) -> FeatureWithLines:
    """Resolve locator with the default resolver and attach lines."""
    return _default_parser.parse_with_lines(locator, lines)


def create_feature_with_lines(uri: FeatureUri, lines: Iterable[int] = ()) -> FeatureWithLines:
    """Create from an already resolved URI."""
    return FeatureWithLines.create(uri, lines)


def parse_rerun(text: str) -> FeatureSelection:
    """Parse rerun text with the default resolver."""
    return _default_parser.parse_many(text)
