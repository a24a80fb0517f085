"""
commgraph: structural importance scores for interaction graphs.

The package turns pairwise interaction records (e.g. e-mail logs) into a
directed, edge-weighted graph and ranks its nodes by degree centrality, an
approximate BFS-based betweenness, and PageRank.
"""

from .graph.core import WeightedDigraph
from .analysis.pagerank import PageRankEngine
from .errors import (
    CommGraphError,
    NodeIndexError,
    InvalidDegreeKindError,
    InvalidParameterError,
    RecordParseError,
)

__all__ = [
    "WeightedDigraph",
    "PageRankEngine",
    "CommGraphError",
    "NodeIndexError",
    "InvalidDegreeKindError",
    "InvalidParameterError",
    "RecordParseError",
]

__version__ = "0.1.0"
