"""Console reporter: SelectorBuilder → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from selectorkit.application.reporters._rows import COMBINATOR_KIND, part_rows

if TYPE_CHECKING:
    from selectorkit.domain.model.selector import SelectorBuilder


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_parts: Show table of appended parts and combinators.
        width: Console width in characters (must be > 0).
    """

    show_parts: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


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

    def report(self, builder: SelectorBuilder) -> str:
        """Format selector as rich formatted string.

        Args:
            builder: Selector to describe.

        Returns:
            Formatted string with colors and table.
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False
        )

        self._render_header(console, builder)
        if self._config.show_parts and not builder.is_empty:
            self._render_parts(console, builder)

        return output.getvalue()

    def _render_header(self, console: Console, builder: SelectorBuilder) -> None:
        """Render rule and rendered selector."""
        console.print()
        console.rule("[bold]SELECTOR[/bold]")
        console.print()
        if builder.is_empty:
            console.print("[dim](empty)[/dim]")
        else:
            console.print(f"[bold cyan]{escape(builder.stringify())}[/bold cyan]")
        console.print()

    def _render_parts(self, console: Console, builder: SelectorBuilder) -> None:
        """Render table of parts in append order."""
        table = Table(title="Parts")
        table.add_column("#", justify="right")
        table.add_column("Kind")
        table.add_column("Value")
        table.add_column("Fragment")

        for row in part_rows(builder):
            kind = f"[yellow]{row.kind}[/yellow]" if row.kind == COMBINATOR_KIND else row.kind
            table.add_row(str(row.index), kind, escape(repr(row.value)), escape(row.fragment))

        console.print(table)
        console.print()
