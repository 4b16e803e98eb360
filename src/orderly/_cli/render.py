"""Rich rendering utilities for ordering commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from .ordering import CheckReport


def render_order_table(order: Sequence[str], console: Console) -> None:
    """Render a flat ordering as a Rich table.

    Args:
        order: Sorted elements.
        console: Rich Console to output to.

    """
    if not order:
        console.print("[dim]No elements to sort[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Element", style="bold")

    for position, element in enumerate(order, start=1):
        table.add_row(str(position), escape(element))

    console.print(table)
    console.print(f"\n[dim]Total: {len(order)} elements[/dim]")


def render_regions_table(regions: Sequence[Sequence[str]], console: Console) -> None:
    """Render regions as a Rich table, one row per region.

    Args:
        regions: Sorted regions.
        console: Rich Console to output to.

    """
    if not regions:
        console.print("[dim]No elements to sort[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Region", justify="right", style="dim")
    table.add_column("Size", justify="right", style="yellow")
    table.add_column("Elements")

    for index, region in enumerate(regions):
        table.add_row(str(index), str(len(region)), ", ".join(escape(element) for element in region))

    console.print(table)
    console.print(f"\n[dim]Total: {len(regions)} regions[/dim]")


def render_unsatisfiable(elements: Sequence[object], console: Console) -> None:
    """Render the elements left over by a failed sort."""
    console.print("[red]✗ Cyclic or external dependencies for elements:[/red]")
    for element in elements:
        console.print(f"  [red]•[/red] {escape(str(element))}")


def render_check_report(report: CheckReport, console: Console) -> None:
    """Render the outcome of a check.

    Args:
        report: CheckReport to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Elements", str(report.element_count))
    table.add_row("Dependency edges", str(report.edge_count))
    table.add_row("Include dependencies", "yes" if report.include_dependencies else "no")

    console.print(Panel(table, title="[bold]Dependency graph[/bold]", border_style="cyan"))

    if report.external:
        console.print()
        console.print("[yellow]⚠ Dependencies outside the sorted elements:[/yellow]")
        for element, missing in report.external.items():
            console.print(f"  [yellow]•[/yellow] {escape(element)} -> {escape(', '.join(missing))}")

    if not report.satisfiable:
        console.print()
        render_unsatisfiable(report.remaining, console)
