"""Console reporter: filter decisions → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tagfilter.application.services.evaluator import FilterDecision


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_reasons: Show the reason column.
        color: Emit ANSI styling. False = plain text.
        width: Console width in characters.
        max_rows: Max decisions to list. None = unlimited. Summary always
            counts every decision.
    """

    show_reasons: bool = True
    color: bool = True
    width: int = 120
    max_rows: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.max_rows is not None and self.max_rows < 1:
            raise ValueError(f"max_rows must be >= 1, got {self.max_rows}")


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

    def report(self, decisions: Sequence[FilterDecision]) -> str:
        """Format decisions as a table with a summary line.

        Args:
            decisions: Decisions to format, in display order.

        Returns:
            Formatted string.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, decisions)
        if decisions:
            self._render_table(console, decisions)

        return output.getvalue()

    def _render_header(self, console: Console, decisions: Sequence[FilterDecision]) -> None:
        """Render header with summary."""
        included_count = sum(1 for d in decisions if d.included)
        excluded_count = len(decisions) - included_count

        console.print()
        console.rule("[bold]TAG FILTER[/bold]")
        console.print()
        console.print(
            f"[bold]Descriptors:[/bold] {len(decisions)} "
            f"([green]included: {included_count}[/green], "
            f"[red]excluded: {excluded_count}[/red])"
        )
        console.print()

    def _render_table(self, console: Console, decisions: Sequence[FilterDecision]) -> None:
        """Render one row per decision."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Descriptor")
        table.add_column("Tags")
        table.add_column("Decision")
        if self._config.show_reasons:
            table.add_column("Reason", style="dim")

        shown = decisions
        if self._config.max_rows is not None:
            shown = decisions[: self._config.max_rows]

        for decision in shown:
            tags = ", ".join(sorted(tag.name for tag in decision.descriptor.tags))
            verdict = "[green]included[/green]" if decision.included else "[red]excluded[/red]"
            row = [escape(decision.descriptor.display_name), escape(tags) or "-", verdict]
            if self._config.show_reasons:
                row.append(escape(decision.result.reason or "-"))
            table.add_row(*row)

        console.print(table)

        hidden = len(decisions) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]")
