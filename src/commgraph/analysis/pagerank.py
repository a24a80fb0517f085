"""
PageRank over a WeightedDigraph.

`PageRankEngine` runs classic power-iteration PageRank for a fixed number of
iterations. Edge weights decide two things only: whether an edge exists
(weight > 0), and the out-degree denominator of its source node. A source
with rank `r` and out-degree `d_out` sends `r / d_out` across each of its
positive edges.

No correction is made for dangling nodes (zero out-degree); their rank mass
simply leaves the system, so the ranks need not sum to exactly 1.
"""

import logging
from typing import Dict, List, Tuple

from ..errors import InvalidParameterError
from ..graph.core import WeightedDigraph

logger = logging.getLogger(__name__)

DEFAULT_DAMPING_FACTOR = 0.85
DEFAULT_ITERATIONS = 100


class PageRankEngine:
    """Fixed-iteration PageRank over a frozen `WeightedDigraph` snapshot."""

    def __init__(
        self,
        graph: WeightedDigraph,
        damping_factor: float = DEFAULT_DAMPING_FACTOR,
        iterations: int = DEFAULT_ITERATIONS,
    ):
        """
        Initializes the engine.

        Args:
            graph: The graph to rank. It must not be mutated afterwards.
            damping_factor: Probability of following an edge, in (0, 1).
            iterations: Exact number of power iterations to run, >= 0.
        """
        if not 0.0 < damping_factor < 1.0:
            raise InvalidParameterError(
                f"Damping factor must lie strictly between 0 and 1, got {damping_factor}."
            )
        if iterations < 0:
            raise InvalidParameterError(f"Iterations must be non-negative, got {iterations}.")
        self.graph = graph
        self.damping_factor = damping_factor
        self.iterations = iterations

    def scores(self) -> Dict[int, float]:
        """Returns the final rank of every node, keyed by node id."""
        num_nodes = self.graph.node_count
        if num_nodes == 0:
            logger.warning("PageRank requested on an empty graph; nothing to rank.")
            return {}

        logger.debug(
            f"Running PageRank on {num_nodes} nodes "
            f"(damping={self.damping_factor}, iterations={self.iterations})."
        )

        # The graph is frozen, so in-edges and out-degrees are fixed for the run.
        in_neighbours = {i: [] for i in range(num_nodes)}
        out_degrees = [float(self.graph.out_degree(j)) for j in range(num_nodes)]
        for j in range(num_nodes):
            successors = self.graph.successors(j)
            # Each positive edge carries rank / out_degree, so out_degree must cover them all.
            if successors and out_degrees[j] < len(successors):
                raise InvalidParameterError(
                    f"Node {j} has {len(successors)} positive out-edges but a total out-weight of "
                    f"{self.graph.out_degree(j)}; negative weights cannot be ranked."
                )
            for i in successors:
                in_neighbours[i].append(j)

        teleport = (1.0 - self.damping_factor) / num_nodes
        pagerank = [1.0 / num_nodes] * num_nodes

        for _ in range(self.iterations):
            new_pagerank = [0.0] * num_nodes
            for i in range(num_nodes):
                accumulated = 0.0
                for j in in_neighbours[i]:
                    accumulated += pagerank[j] / out_degrees[j]
                new_pagerank[i] = teleport + self.damping_factor * accumulated
            pagerank = new_pagerank

        return dict(enumerate(pagerank))

    def run(self) -> List[Tuple[int, float]]:
        """
        Runs PageRank.

        Returns:
            `(node_id, rank)` pairs sorted by rank descending, ties broken by
            ascending node id. An empty graph yields an empty list.
        """
        return sorted(self.scores().items(), key=lambda item: (-item[1], item[0]))
