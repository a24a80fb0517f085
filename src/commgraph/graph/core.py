"""
Core Data Model for the Interaction Graph.

This module defines the `WeightedDigraph` class, the in-memory representation
of who-talks-to-whom. Nodes are the integers `0..n-1`, fixed when the graph is
created; every directed pair carries an accumulated integer weight, where zero
means "no edge".

Storage is a sparse adjacency map built on `networkx.DiGraph`: only pairs that
have been written hold an edge, and absent pairs read back as weight 0. The
class also hosts the two structural analyses that only need the weights:
degree centrality and the BFS discovery-count approximation of betweenness.
"""

import logging
from collections import deque
from typing import Dict, Iterable, List, Tuple

import networkx as nx

from ..errors import InvalidDegreeKindError, NodeIndexError

logger = logging.getLogger(__name__)

DEGREE_KINDS = ("in-degree", "out-degree", "combined")


class WeightedDigraph:
    """A fixed-size, directed graph with accumulated integer edge weights."""

    def __init__(self, n: int):
        """Registers nodes `0..n-1` with no edges between them."""
        if n < 0:
            raise ValueError(f"Node count must be non-negative, got {n}.")
        self._n = n
        self.graph = nx.DiGraph()
        self.graph.add_nodes_from(range(n))

    @property
    def node_count(self) -> int:
        return self._n

    def _check_node(self, node_id: int):
        if not 0 <= node_id < self._n:
            raise NodeIndexError(node_id, self._n)

    # --- Mutation ---

    def add_weight(self, start: int, end: int, weight: int):
        """Adds `weight` to the edge `start -> end`, creating it if needed."""
        self._check_node(start)
        self._check_node(end)
        if self.graph.has_edge(start, end):
            self.graph[start][end]["weight"] += weight
        else:
            self.graph.add_edge(start, end, weight=weight)

    def add_interactions(self, pairs: Iterable[Tuple[int, int]], weight: int):
        """Adds `weight` once for every (source, target) pair."""
        for start, end in pairs:
            self.add_weight(start, end, weight)

    # --- Queries ---

    def get_weight(self, start: int, end: int) -> int:
        """Returns the accumulated weight of `start -> end`, or 0 if absent."""
        self._check_node(start)
        self._check_node(end)
        data = self.graph.get_edge_data(start, end)
        return data["weight"] if data else 0

    def in_degree(self, node_id: int) -> int:
        """Sum of the weights on all edges pointing at `node_id`."""
        self._check_node(node_id)
        return sum(w for _, _, w in self.graph.in_edges(node_id, data="weight"))

    def out_degree(self, node_id: int) -> int:
        """Sum of the weights on all edges leaving `node_id`."""
        self._check_node(node_id)
        return sum(w for _, _, w in self.graph.out_edges(node_id, data="weight"))

    def total_weight(self) -> int:
        return sum(w for _, _, w in self.graph.edges(data="weight"))

    def successors(self, node_id: int) -> List[int]:
        """Returns the nodes reachable over a positive-weight edge, ascending."""
        self._check_node(node_id)
        return sorted(
            target for _, target, w in self.graph.out_edges(node_id, data="weight") if w > 0
        )

    # --- Analyses ---

    def degree_centrality(self, kind: str) -> List[Tuple[int, int]]:
        """
        Computes the weighted degree of every node.

        Args:
            kind: One of "in-degree", "out-degree" or "combined" (in + out).

        Returns:
            A list of `(node_id, degree)` pairs in node-index order. Ranking is
            left to the caller.

        Raises:
            InvalidDegreeKindError: If `kind` is not a recognised value.
        """
        if kind not in DEGREE_KINDS:
            raise InvalidDegreeKindError(kind)

        degrees = []
        for node_id in range(self._n):
            in_degree = self.in_degree(node_id)
            out_degree = self.out_degree(node_id)
            if kind == "in-degree":
                degree = in_degree
            elif kind == "out-degree":
                degree = out_degree
            else:
                degree = in_degree + out_degree
            degrees.append((node_id, degree))
        return degrees

    def simple_betweenness_centrality(self) -> List[Tuple[int, int]]:
        """
        Approximates betweenness by counting BFS discoveries.

        A breadth-first traversal is run from every node over positive-weight
        edges. Each time a node is reached for the first time within a
        traversal, its global counter goes up by one. This is a cheap proxy
        ("how often is this node freshly reached from somewhere else"), not
        shortest-path betweenness.

        Returns:
            `(node_id, count)` pairs sorted by count descending, then node id
            ascending. Nodes that were never discovered are omitted.
        """
        centrality: Dict[int, int] = {}
        adjacency = {node_id: self.successors(node_id) for node_id in range(self._n)}

        for source in range(self._n):
            visited = {source}
            queue = deque([source])
            while queue:
                node = queue.popleft()
                for neighbour in adjacency[node]:
                    if neighbour not in visited:
                        visited.add(neighbour)
                        queue.append(neighbour)
                        centrality[neighbour] = centrality.get(neighbour, 0) + 1

        logger.debug(f"Betweenness traversal discovered {len(centrality)} of {self._n} nodes.")
        return sorted(centrality.items(), key=lambda item: (-item[1], item[0]))
