"""Feature with lines: identifies scenarios and examples in a feature.

Structure URI[:LINE]* is a feature URI followed by a sequence of line
numbers, each preceded by a colon.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from featurelines.domain.model.line_set import format_lines, normalize_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from featurelines.domain.model.feature_uri import FeatureUri


@dataclass(frozen=True, slots=True)
class FeatureWithLines:
    """Feature URI plus the lines selected in it.

    Immutable value, safe as dict key. Lines are normalized at construction
    (ascending, duplicates dropped), so two values built from permuted or
    repeated lines compare and hash equal.

    Attributes:
        uri: Resolved feature resource
        lines: Ascending line numbers, empty = whole feature
    """

    uri: FeatureUri
    lines: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.uri is None:
            raise TypeError("uri must not be None")
        object.__setattr__(self, "lines", normalize_lines(self.lines))

    @classmethod
    def create(cls, uri: FeatureUri, lines: Iterable[int] = ()) -> FeatureWithLines:
        """Create from resolved URI and any collection of lines.

        Args:
            uri: Already resolved feature URI.
            lines: Line numbers, unordered and possibly duplicated.

        Returns:
            FeatureWithLines with normalized lines.
        """
        return cls(uri=uri, lines=tuple(lines))

    @property
    def has_lines(self) -> bool:
        """Check if specific lines are selected."""
        return bool(self.lines)

    def with_lines(self, lines: Iterable[int]) -> FeatureWithLines:
        """Return copy selecting the union of own and given lines."""
        return FeatureWithLines(uri=self.uri, lines=(*self.lines, *lines))

    def __str__(self) -> str:
        """Format as uri[:line]*."""
        return f"{self.uri}{format_lines(self.lines)}"
