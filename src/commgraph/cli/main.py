"""
The Command-Line Interface (CLI).

This module is the user-facing entry point for commgraph. It uses Typer to
expose the analyses as commands:

1. `analyze`: degree centrality (all three kinds), betweenness and PageRank.
2. `degree`: a single degree-centrality ranking.
3. `betweenness`: the BFS discovery-count ranking.
4. `pagerank`: the PageRank ranking.

Every command reads an interaction log, builds the graph and prints the top-k
nodes of each ranking as a table.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple
from typing_extensions import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

# --- Local Imports from the `commgraph` package ---
from ..analysis.pagerank import PageRankEngine
from ..config import AnalysisSettings
from ..errors import CommGraphError
from ..graph.core import DEGREE_KINDS, WeightedDigraph
from ..ingestion.reader import load_graph
from ..report.ranking import render_ranking

# --- CLI Application Initialization ---
app = typer.Typer(
    name="commgraph",
    help="commgraph: rank the nodes of an interaction graph by centrality and PageRank.",
    add_completion=False,
    rich_markup_mode="markdown",
)

console = Console()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# --- Shared Option Types ---
InputPath = Annotated[Path, typer.Argument(
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    resolve_path=True,
    help="Path to the delimited interaction log (source;target;...).",
)]
NodesOption = Annotated[Optional[int], typer.Option(
    "--nodes", "-n", help="Number of nodes. Defaults to the largest id in the log plus one."
)]
WeightOption = Annotated[Optional[int], typer.Option(
    "--weight", "-w", help="Weight added to an edge for every record."
)]
TopOption = Annotated[Optional[int], typer.Option(
    "--top", "-k", help="How many nodes to show per ranking."
)]
DelimiterOption = Annotated[Optional[str], typer.Option(
    "--delimiter", "-d", help="Field separator of the log."
)]
HeaderOption = Annotated[bool, typer.Option(
    "--header/--no-header", help="Whether the first line of the log is a header."
)]
DampingOption = Annotated[Optional[float], typer.Option(
    "--damping", help="PageRank damping factor, strictly between 0 and 1."
)]
IterationsOption = Annotated[Optional[int], typer.Option(
    "--iterations", "-i", help="Number of PageRank iterations."
)]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """Configures logging for every command."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


# --- Helpers ---

def _fail(message: str):
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


def _prepare(input_path: Path, header: bool, **overrides) -> Tuple[AnalysisSettings, WeightedDigraph]:
    """Builds the settings and loads the graph, turning library errors into exit code 1."""
    try:
        settings = AnalysisSettings.from_env(skip_header=header, **overrides)
    except ValidationError as e:
        _fail(f"Invalid settings: {e}")
    try:
        graph = load_graph(input_path, settings)
    except (CommGraphError, FileNotFoundError) as e:
        _fail(str(e))
    console.print(f"   - Loaded graph from [cyan]{input_path}[/cyan] with {graph.node_count} nodes.")
    return settings, graph


def _show_degree(graph: WeightedDigraph, kind: str, top: int):
    try:
        degrees = graph.degree_centrality(kind)
    except CommGraphError as e:
        _fail(str(e))
    render_ranking(console, f"Top {top} nodes by number of emails ({kind})", degrees, top)


def _show_betweenness(graph: WeightedDigraph, top: int):
    centralities = graph.simple_betweenness_centrality()
    render_ranking(console, f"Top {top} nodes by simple betweenness centrality", centralities, top)


def _show_pagerank(graph: WeightedDigraph, settings: AnalysisSettings):
    engine = PageRankEngine(graph, settings.damping_factor, settings.iterations)
    render_ranking(
        console, f"Top {settings.top_k} nodes by PageRank", engine.run(), settings.top_k, precision=6
    )


# --- CLI Commands ---

@app.command()
def analyze(
    input_path: InputPath,
    nodes: NodesOption = None,
    weight: WeightOption = None,
    top: TopOption = None,
    delimiter: DelimiterOption = None,
    header: HeaderOption = True,
    damping: DampingOption = None,
    iterations: IterationsOption = None,
):
    """
    Runs every analysis on INPUT_PATH: degree centrality, betweenness and PageRank.
    """
    console.print(Panel("[bold green]📊 Analyzing interaction graph[/bold green]"))
    settings, graph = _prepare(
        input_path, header,
        node_count=nodes, record_weight=weight, top_k=top, delimiter=delimiter,
        damping_factor=damping, iterations=iterations,
    )

    for kind in DEGREE_KINDS:
        _show_degree(graph, kind, settings.top_k)
    _show_betweenness(graph, settings.top_k)
    _show_pagerank(graph, settings)

    console.print(Panel("[bold green]✅ Analysis complete![/bold green]"))


@app.command()
def degree(
    input_path: InputPath,
    kind: Annotated[str, typer.Option(
        "--kind", help="One of 'in-degree', 'out-degree' or 'combined'."
    )] = "combined",
    nodes: NodesOption = None,
    weight: WeightOption = None,
    top: TopOption = None,
    delimiter: DelimiterOption = None,
    header: HeaderOption = True,
):
    """
    Ranks the nodes of INPUT_PATH by weighted degree.
    """
    settings, graph = _prepare(
        input_path, header, node_count=nodes, record_weight=weight, top_k=top, delimiter=delimiter
    )
    _show_degree(graph, kind, settings.top_k)


@app.command()
def betweenness(
    input_path: InputPath,
    nodes: NodesOption = None,
    weight: WeightOption = None,
    top: TopOption = None,
    delimiter: DelimiterOption = None,
    header: HeaderOption = True,
):
    """
    Ranks the nodes of INPUT_PATH by approximate (BFS discovery-count) betweenness.
    """
    settings, graph = _prepare(
        input_path, header, node_count=nodes, record_weight=weight, top_k=top, delimiter=delimiter
    )
    _show_betweenness(graph, settings.top_k)


@app.command()
def pagerank(
    input_path: InputPath,
    nodes: NodesOption = None,
    weight: WeightOption = None,
    top: TopOption = None,
    delimiter: DelimiterOption = None,
    header: HeaderOption = True,
    damping: DampingOption = None,
    iterations: IterationsOption = None,
):
    """
    Ranks the nodes of INPUT_PATH by PageRank.
    """
    settings, graph = _prepare(
        input_path, header,
        node_count=nodes, record_weight=weight, top_k=top, delimiter=delimiter,
        damping_factor=damping, iterations=iterations,
    )
    _show_pagerank(graph, settings)


# --- Main Execution Guard ---
if __name__ == "__main__":
    app()
