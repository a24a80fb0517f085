"""
Ranking and Reporting Module.

This module turns the raw `(node_id, score)` sequences produced by the
analyses into ordered top-k listings and renders them as `rich` tables.

The analyses themselves only guarantee a deterministic order for betweenness
and PageRank; degree centrality comes back in node-index order. `rank_scores`
applies the same rule everywhere: highest score first, ties broken by the
lower node id.
"""

from typing import List, Optional, Sequence, Tuple, Union

from rich.console import Console
from rich.table import Table

Score = Union[int, float]


def rank_scores(pairs: Sequence[Tuple[int, Score]]) -> List[Tuple[int, Score]]:
    """Sorts `(node_id, score)` pairs by score descending, then node id ascending."""
    return sorted(pairs, key=lambda item: (-item[1], item[0]))


def top_k(pairs: Sequence[Tuple[int, Score]], k: int) -> List[Tuple[int, Score]]:
    """Returns the `k` highest-scoring pairs (fewer if there are not enough)."""
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}.")
    return rank_scores(pairs)[:k]


def _format_score(score: Score, precision: Optional[int]) -> str:
    if precision is None:
        return str(score)
    return f"{score:.{precision}f}"


def build_ranking_table(
    title: str, pairs: Sequence[Tuple[int, Score]], k: int, precision: Optional[int] = None
) -> Table:
    """Builds a table of the top `k` nodes with their rank and score."""
    table = Table(title=title)
    table.add_column("Rank", justify="right", style="yellow")
    table.add_column("Node", justify="right", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right", style="green")

    for position, (node_id, score) in enumerate(top_k(pairs, k), start=1):
        table.add_row(str(position), str(node_id), _format_score(score, precision))
    return table


def render_ranking(
    console: Console,
    title: str,
    pairs: Sequence[Tuple[int, Score]],
    k: int,
    precision: Optional[int] = None,
):
    """Prints the top `k` nodes as a table, or a notice when there are none."""
    if not pairs:
        console.print(f"No nodes to rank for '[italic]{title}[/italic]'.")
        return
    console.print(build_ranking_table(title, pairs, k, precision))
