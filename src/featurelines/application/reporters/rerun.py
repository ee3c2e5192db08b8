"""Rerun reporter: selection → rerun file text.

Stdlib-only. Output is read back by FeatureWithLinesParser.parse_many().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from featurelines.domain.model.selection import FeatureSelection


class RerunReporter:
    """One canonical identifier per line, newline terminated."""

    def report(self, selection: FeatureSelection) -> str:
        """Format selection as rerun text. Empty selection → empty string."""
        if not selection:
            return ""
        return f"{selection}\n"
