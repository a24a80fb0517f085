"""
Exception hierarchy for commgraph.

Every error raised by the library derives from `CommGraphError`, so a host
application can catch the whole family in one place. Each concrete error also
inherits from the matching built-in (`IndexError`, `ValueError`) so that
callers written against plain Python semantics keep working.
"""


class CommGraphError(Exception):
    """Base class for all commgraph errors."""


class NodeIndexError(CommGraphError, IndexError):
    """A node id lies outside the `[0, n)` range of the graph."""

    def __init__(self, node_id: int, node_count: int):
        self.node_id = node_id
        self.node_count = node_count
        super().__init__(f"Node {node_id} is out of range for a graph with {node_count} nodes.")


class InvalidDegreeKindError(CommGraphError, ValueError):
    """An unrecognised degree-centrality kind was requested."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            f"Invalid type '{kind}', must be 'in-degree', 'out-degree', or 'combined'"
        )


class InvalidParameterError(CommGraphError, ValueError):
    """A PageRank parameter is out of range, or the graph weights cannot be ranked."""


class RecordParseError(CommGraphError, ValueError):
    """An interaction record could not be parsed into a (source, target) pair."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number}: {reason} ({line!r})")
