"""Reporter protocol: contract for all selection reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from featurelines.domain.model.selection import FeatureSelection


class ReporterProtocol(Protocol):
    """Protocol for feature selection reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, selection: FeatureSelection) -> str:
        """Format selection as string.

        Args:
            selection: Selection to format.

        Returns:
            Formatted string representation.
        """
        ...
