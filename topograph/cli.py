"""Command-line interface for topograph."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from topograph.config import TOPOLOGY_TYPES, load_config, parse_topology_params
from topograph.core import GraphContext

app = typer.Typer(
    name="topograph",
    help="topograph: interconnection-network topologies and distance metrics",
    add_completion=False
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    """Route library warnings through rich; INFO only when verbose."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def _topology_options(
    topology_type: str,
    nodes: Optional[int],
    skip: Optional[int],
    rows: Optional[int],
    cols: Optional[int],
    dimension: Optional[int],
    use_3d: bool,
) -> Dict[str, Any]:
    """Collect the options that apply to ``topology_type`` into a params mapping."""
    topology_type = topology_type.lower()
    if topology_type not in TOPOLOGY_TYPES:
        raise ValueError(
            f"Unknown topology type: {topology_type}. "
            f"Choose from {', '.join(TOPOLOGY_TYPES)}"
        )

    data: Dict[str, Any] = {"type": topology_type}
    if topology_type == "ring":
        candidates = {"nodes": nodes, "skip": skip}
    elif topology_type in ("mesh", "torus"):
        candidates = {"rows": rows, "cols": cols}
        if topology_type == "torus":
            data["use_3d"] = use_3d
    else:
        candidates = {"dimension": dimension}

    data.update({key: value for key, value in candidates.items() if value is not None})
    return data


@app.command()
def generate(
    topology_type: str = typer.Argument(..., help="Topology type (ring/mesh/torus/hypercube)"),
    nodes: Optional[int] = typer.Option(None, "--nodes", "-n", help="Ring: number of nodes"),
    skip: Optional[int] = typer.Option(None, "--skip", "-s", help="Ring: chord skip distance"),
    rows: Optional[int] = typer.Option(None, "--rows", "-r", help="Mesh/torus: grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", "-c", help="Mesh/torus: grid columns"),
    dimension: Optional[int] = typer.Option(None, "--dimension", "-d", help="Hypercube: dimension"),
    use_3d: bool = typer.Option(False, "--use-3d", help="Torus: ask the renderer for a 3D layout"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write graph and metrics as JSON"),
    verbose: bool = typer.Option(False, "--verbose/--quiet", help="Enable verbose output"),
):
    """Generate a topology and report its metrics.

    Example:
        topograph generate ring --nodes 12 --skip 3
        topograph generate hypercube -d 4 -o cube.json
    """
    _setup_logging(verbose)
    try:
        params = parse_topology_params(
            _topology_options(topology_type, nodes, skip, rows, cols, dimension, use_3d)
        )
        context = GraphContext.build(params)
        _display_metrics(context)

        if output is not None:
            output.write_text(json.dumps(context.to_dict(), indent=2), encoding="utf-8")
            console.print(f"[bold green]Graph written to:[/bold green] {output}")

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to configuration file (YAML/JSON)"),
    verbose: bool = typer.Option(False, "--verbose/--quiet", help="Enable verbose output"),
):
    """Build the topology described by a config file and analyse it.

    Example:
        topograph run configs/torus.yaml
    """
    _setup_logging(verbose)
    try:
        console.print(f"[bold blue]Loading configuration from:[/bold blue] {config_path}")
        config = load_config(config_path)
        if config.analysis.verbose and not verbose:
            _setup_logging(True)

        console.print(f"\n[bold]Run:[/bold] {config.name}")
        context = GraphContext.from_config(config)
        _display_metrics(context)

        if config.analysis.highlight_paths:
            source = config.analysis.source
            _display_paths(source, context.highlight_paths(source))

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def path(
    topology_type: str = typer.Argument(..., help="Topology type (ring/mesh/torus/hypercube)"),
    source: int = typer.Argument(..., help="Source node id"),
    target: int = typer.Argument(..., help="Target node id"),
    nodes: Optional[int] = typer.Option(None, "--nodes", "-n", help="Ring: number of nodes"),
    skip: Optional[int] = typer.Option(None, "--skip", "-s", help="Ring: chord skip distance"),
    rows: Optional[int] = typer.Option(None, "--rows", "-r", help="Mesh/torus: grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", "-c", help="Mesh/torus: grid columns"),
    dimension: Optional[int] = typer.Option(None, "--dimension", "-d", help="Hypercube: dimension"),
):
    """Print one shortest path between two nodes.

    Example:
        topograph path ring 0 6 --nodes 12
    """
    _setup_logging(False)
    try:
        params = parse_topology_params(
            _topology_options(topology_type, nodes, skip, rows, cols, dimension, False)
        )
        context = GraphContext.build(params)
        route = context.shortest_path(source, target)
        if route is None:
            console.print(f"[yellow]Node {target} is unreachable from node {source}[/yellow]")
            raise typer.Exit(1)
        console.print(f"[bold]Path ({len(route) - 1} hops):[/bold] {' -> '.join(map(str, route))}")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def list_components():
    """List available topologies.

    Example:
        topograph list-components
    """
    console.print("[bold]Available Topologies:[/bold]")
    console.print("  • ring - Cycle with optional chords (--nodes, --skip)")
    console.print("  • mesh - 2D grid without wraparound (--rows, --cols)")
    console.print("  • torus - 2D grid with wraparound (--rows, --cols, --use-3d)")
    console.print("  • hypercube - Binary hypercube, 2^d nodes (--dimension)")


def _display_metrics(context: GraphContext) -> None:
    """Display graph metrics in a table."""
    metrics = context.metrics.to_dict()

    table = Table(title=f"{context.params.type.capitalize()} Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Nodes", str(metrics["num_nodes"]))
    table.add_row("Edges", str(metrics["num_edges"]))
    table.add_row("Diameter", str(metrics["diameter"]))
    table.add_row("Avg Path Length", str(metrics["avg_path_length"]))
    table.add_row(
        "Connected",
        "[green]yes[/green]" if metrics["is_connected"] else "[red]no[/red]",
    )

    console.print(table)


def _display_paths(source: int, paths: List[List[int]]) -> None:
    """Display the longest shortest paths from ``source``."""
    if not paths:
        console.print(f"[yellow]Node {source} has no other reachable node[/yellow]")
        return

    table = Table(title=f"Farthest paths from node {source}")
    table.add_column("Target", style="cyan")
    table.add_column("Hops", style="yellow")
    table.add_column("Path", style="green")

    for route in paths:
        table.add_row(str(route[-1]), str(len(route) - 1), " -> ".join(map(str, route)))

    console.print(table)


if __name__ == "__main__":
    app()
