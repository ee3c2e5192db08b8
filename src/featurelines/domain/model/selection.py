"""Feature selection: many identifiers merged per feature."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from featurelines.domain.model.feature_uri import FeatureUri
    from featurelines.domain.model.feature_with_lines import FeatureWithLines


@dataclass(frozen=True, slots=True)
class FeatureSelection:
    """Immutable set of selected features, one entry per URI.

    Entries for the same URI are merged by uniting their lines. A feature
    given once without lines and once with lines ends up with those lines:
    line filters narrow, they never widen back to the whole feature.

    Attributes:
        features: Merged identifiers, ordered by URI
    """

    features: tuple[FeatureWithLines, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "features", tuple(self.features))
        uris = [feature.uri for feature in self.features]
        if len(uris) != len(set(uris)):
            raise ValueError("features must have unique uris, use FeatureSelection.of() to merge")
        if uris != sorted(uris):
            raise ValueError("features must be ordered by uri")

    @classmethod
    def of(cls, identifiers: Iterable[FeatureWithLines]) -> FeatureSelection:
        """Merge identifiers into a selection.

        Args:
            identifiers: Identifiers in any order, URIs may repeat.

        Returns:
            FeatureSelection with one entry per URI.
        """
        merged: dict[FeatureUri, FeatureWithLines] = {}
        for identifier in identifiers:
            existing = merged.get(identifier.uri)
            merged[identifier.uri] = (
                identifier if existing is None else existing.with_lines(identifier.lines)
            )
        return cls(features=tuple(merged[uri] for uri in sorted(merged)))

    @property
    def uris(self) -> tuple[FeatureUri, ...]:
        """Selected feature URIs in order."""
        return tuple(feature.uri for feature in self.features)

    @property
    def line_filters(self) -> Mapping[FeatureUri, tuple[int, ...]]:
        """URI → lines, only for features restricted to specific lines."""
        return MappingProxyType(
            {feature.uri: feature.lines for feature in self.features if feature.has_lines},
        )

    def __iter__(self) -> Iterator[FeatureWithLines]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __contains__(self, uri: object) -> bool:
        return any(feature.uri == uri for feature in self.features)

    def __str__(self) -> str:
        """Format as one identifier per line (rerun format)."""
        return "\n".join(str(feature) for feature in self.features)
