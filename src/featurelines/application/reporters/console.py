"""Console reporter: FeatureSelection → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from featurelines.domain.model.selection import FeatureSelection


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Header rule text.
        width: Console width in characters.
        show_summary: Show feature/line counts under the header.
    """

    title: str = "FEATURE SELECTION"
    width: int = 120
    show_summary: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, selection: FeatureSelection) -> str:
        """Format selection as rich table.

        Args:
            selection: Selection to format.

        Returns:
            Formatted string with colors and a table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        console.print()
        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print()

        if self._config.show_summary:
            self._render_summary(console, selection)

        if selection:
            console.print(self._build_table(selection))
            console.print()

        return output.getvalue()

    def _render_summary(self, console: Console, selection: FeatureSelection) -> None:
        """Render feature and line counts."""
        line_count = sum(len(lines) for lines in selection.line_filters.values())
        console.print(
            f"[bold]Features:[/bold] {len(selection)} "
            f"[bold]Filtered:[/bold] {len(selection.line_filters)} "
            f"[bold]Lines:[/bold] {line_count}",
        )
        console.print()

    def _build_table(self, selection: FeatureSelection) -> Table:
        """One row per feature."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Feature", style="cyan")
        table.add_column("Lines", style="green")

        for feature in selection:
            lines = ", ".join(str(line) for line in feature.lines) if feature.has_lines else "[dim]all[/dim]"
            table.add_row(escape(str(feature.uri)), lines)

        return table
