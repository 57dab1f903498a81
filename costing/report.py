"""
Rich-based rendering for cost services and strategy comparisons.

The service itself never prints; callers that want a display pass it here.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from costing import config
from costing.service import CostService


def _money(value: float) -> str:
    return f"{value:,.2f} {config.CURRENCY_LABEL}"


def print_summary(
    service: CostService,
    title: str = "Cost Summary",
    console: Console | None = None,
) -> None:
    """Print one row per strategy followed by the total."""
    console = console or Console()

    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Strategy", style="cyan")
    table.add_column("Details")
    table.add_column("Cost", justify="right", style="green")

    # single snapshot: rows and total cover the same strategies
    strategies = service.strategies
    total = 0.0
    for idx, strategy in enumerate(strategies, 1):
        cost = strategy.compute_cost()
        total += cost
        table.add_row(
            str(idx),
            getattr(strategy, "variant", "") or type(strategy).__name__,
            strategy.describe(),
            _money(cost),
        )

    table.add_section()
    table.add_row("", "[bold]Total[/]", f"{len(strategies)} strategies", f"[bold]{_money(total)}[/]")
    console.print(table)


def print_comparison(
    quotes: list[tuple[str, float]],
    console: Console | None = None,
) -> None:
    """Print a leaderboard of (name, cost) quotes, as from compare_strategies()."""
    console = console or Console()

    if not quotes:
        console.print("[yellow]No strategies to compare.[/]")
        return

    cheapest = quotes[0][1]
    table = Table(title="Strategy Comparison")
    table.add_column("Rank", justify="right")
    table.add_column("Strategy", style="cyan")
    table.add_column("Cost", justify="right", style="green")
    table.add_column("vs cheapest", justify="right")

    for rank, (name, cost) in enumerate(quotes, 1):
        diff = cost - cheapest
        diff_str = "-" if diff == 0 else f"[red]+{_money(diff)}[/]"
        table.add_row(str(rank), name, _money(cost), diff_str)

    console.print(table)
