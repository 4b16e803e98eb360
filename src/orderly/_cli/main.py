import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from orderly._errors import UnsatisfiableDependencyGraph
from orderly._io import (
    GraphDocument,
    GraphDocumentError,
    export_order_to_toml,
    export_regions_to_toml,
    load_graph_document,
)

from .config import ConfigError, OrderlyConfig, get_config
from .ordering import (
    check_document,
    region_sort_document,
    resolve_include_dependencies,
    sort_document,
)
from .render import render_check_report, render_order_table, render_regions_table, render_unsatisfiable

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to the TOML graph document (defaults to the graph configured in pyproject.toml)"),
]
IncludeOption = Annotated[
    bool,
    typer.Option(
        "--include-dependencies",
        help="Transitively include dependencies that are not listed as elements",
    ),
]
AsGivenOption = Annotated[
    bool,
    typer.Option("--as-given", help="Sort only the listed elements, even if the document includes dependencies"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("-o", "--output", help="Path to output TOML file"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Orderly CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> OrderlyConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _include_flag(include_dependencies: bool, as_given: bool) -> bool | None:  # noqa: FBT001
    """Turn the two command line switches into an explicit choice, if any."""
    if include_dependencies and as_given:
        err_console.print("[red]Error: --include-dependencies and --as-given are mutually exclusive[/red]")
        raise typer.Exit(code=1)
    if include_dependencies:
        return True
    if as_given:
        return False
    return None


def _load_document(graph: Path | None, config: OrderlyConfig) -> GraphDocument:
    """Load the graph document named on the command line or in the config."""
    if graph is None:
        graph = config.graph
    if graph is None:
        err_console.print("[red]Error: No graph document given and no \\[tool.orderly].graph configured[/red]")
        raise typer.Exit(code=1)
    if not graph.exists():
        err_console.print(f"[red]Error: Graph document not found: {escape(str(graph))}[/red]")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {escape(str(graph))}")
    try:
        return load_graph_document(graph)
    except GraphDocumentError as e:
        logger.debug("Graph document rejected", exc_info=True)
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def sort(
    graph: GraphArgument = None,
    *,
    include_dependencies: IncludeOption = False,
    as_given: AsGivenOption = False,
    output: OutputOption = None,
) -> None:
    """Sort the elements of a graph so that dependencies come first."""
    config = _load_config()
    document = _load_document(graph, config)
    include = resolve_include_dependencies(_include_flag(include_dependencies, as_given), document, config)

    try:
        order = sort_document(document, include_dependencies=include)
    except UnsatisfiableDependencyGraph as e:
        render_unsatisfiable(e.elements, err_console)
        raise typer.Exit(code=1) from e

    render_order_table(order, out_console)

    output = output or config.output
    if output is not None:
        err_console.print(f"[cyan]Exporting order to:[/cyan] {escape(str(output))}")
        export_order_to_toml(order, output)


@app.command()
def regions(
    graph: GraphArgument = None,
    *,
    include_dependencies: IncludeOption = False,
    as_given: AsGivenOption = False,
    output: OutputOption = None,
) -> None:
    """Sort the elements of a graph into regions of independent elements."""
    config = _load_config()
    document = _load_document(graph, config)
    include = resolve_include_dependencies(_include_flag(include_dependencies, as_given), document, config)

    try:
        result = region_sort_document(document, include_dependencies=include)
    except UnsatisfiableDependencyGraph as e:
        render_unsatisfiable(e.elements, err_console)
        raise typer.Exit(code=1) from e

    render_regions_table(result, out_console)

    output = output or config.output
    if output is not None:
        err_console.print(f"[cyan]Exporting regions to:[/cyan] {escape(str(output))}")
        export_regions_to_toml(result, output)


@app.command()
def check(
    graph: GraphArgument = None,
    *,
    include_dependencies: IncludeOption = False,
    as_given: AsGivenOption = False,
) -> None:
    """Check that a graph can be ordered without sorting it."""
    config = _load_config()
    document = _load_document(graph, config)
    include = resolve_include_dependencies(_include_flag(include_dependencies, as_given), document, config)

    report = check_document(document, include_dependencies=include)
    err_console.print()
    render_check_report(report, err_console)
    err_console.print()

    if not report.satisfiable:
        raise typer.Exit(code=1)

    err_console.print("[green]✓ Graph is satisfiable[/green]")
    err_console.print()


def main() -> None:
    app()
