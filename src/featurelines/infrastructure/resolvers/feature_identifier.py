"""Feature identifier resolver: file path or URI → FeatureUri.

Rules:
    - Text that starts like a URI (scheme followed by ':') is taken as a URI.
    - Anything else is a file system path, anchored at base_dir and
      converted to a file:/// URI. The file system is never touched.
    - The resulting URI must reference a single feature file.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from urllib.parse import urlsplit

from featurelines.domain.exceptions import InvalidFeatureLocatorError
from featurelines.domain.model.configuration import ResolverConfig
from featurelines.domain.model.feature_uri import FeatureUri
from featurelines.domain.ports.locator_resolver import LocatorResolverPort

logger = logging.getLogger(__name__)

_PROBABLE_URI = re.compile(r"^[a-zA-Z+.\-]+:")
_WINDOWS_DRIVE = re.compile(r"^[a-zA-Z]:[\\/]")

# Characters that may never appear unescaped in a URI
_ILLEGAL_URI_CHARS = frozenset(' "<>\\^`{|}')


class FeatureIdentifierResolver(LocatorResolverPort):
    """Default locator resolver.

    Stateless apart from its configuration, safe to share.
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        """Initialize resolver.

        Args:
            config: Resolver configuration. Uses defaults if None.
        """
        self._config = config or ResolverConfig()

    @property
    def config(self) -> ResolverConfig:
        """Active configuration."""
        return self._config

    def resolve(self, locator: str) -> FeatureUri:
        """Resolve locator to a feature URI.

        Args:
            locator: File path or URI.

        Returns:
            Absolute feature URI.

        Raises:
            InvalidFeatureLocatorError: Empty or malformed locator, or
                locator not referencing a single feature file.
        """
        if not locator:
            raise InvalidFeatureLocatorError(locator, "must be non-empty")

        uri = self._to_uri(locator)
        if not uri.is_feature(self._config.feature_suffix):
            raise InvalidFeatureLocatorError(
                locator,
                f"does not reference a single feature file: {uri}",
            )

        logger.debug("Resolved %r to %s", locator, uri)
        return uri

    def _to_uri(self, locator: str) -> FeatureUri:
        """Dispatch on path vs URI shape."""
        if os.sep != "/" and os.sep in locator:
            return self._from_path(locator)
        if os.name == "nt" and _WINDOWS_DRIVE.match(locator):
            return self._from_path(locator)
        if _PROBABLE_URI.match(locator):
            return self._from_uri(locator)
        return self._from_path(locator)

    def _from_path(self, locator: str) -> FeatureUri:
        """Convert file system path to file:/// URI."""
        path = Path(locator)
        if not path.is_absolute():
            base_dir = self._config.base_dir or Path.cwd()
            path = base_dir / path
        return FeatureUri.from_string(path.as_uri())

    def _from_uri(self, locator: str) -> FeatureUri:
        """Validate and normalize URI text."""
        illegal = {c for c in locator if c in _ILLEGAL_URI_CHARS or ord(c) < 0x20 or ord(c) == 0x7F}
        if illegal:
            raise InvalidFeatureLocatorError(
                locator,
                f"contains characters not allowed in a URI: {sorted(illegal)}",
            )

        try:
            urlsplit(locator)
        except ValueError as e:
            raise InvalidFeatureLocatorError(locator, str(e)) from e

        try:
            return FeatureUri.from_string(locator)
        except ValueError as e:
            raise InvalidFeatureLocatorError(locator, "expected scheme-specific part") from e
