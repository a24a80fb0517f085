"""
Interaction Log Ingestion.

Reads delimited interaction logs (one record per line, e.g.
`sender;recipient;timestamp`) and turns them into a `WeightedDigraph`.

Only the first two fields of each record are used; they must be non-negative
integer node ids. Every record adds a fixed weight to its edge, so repeated
messages between the same pair accumulate.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..config import AnalysisSettings
from ..errors import RecordParseError
from ..graph.core import WeightedDigraph

reader_logger = logging.getLogger(__name__)

DEFAULT_RECORD_WEIGHT = 5


def _parse_node_id(field: str, line_number: int, line: str) -> int:
    try:
        node_id = int(field.strip())
    except ValueError:
        raise RecordParseError(line_number, line, f"node id {field.strip()!r} is not an integer") from None
    if node_id < 0:
        raise RecordParseError(line_number, line, f"node id {node_id} is negative")
    return node_id


def read_interactions(
    file_path: Path, delimiter: str = ";", skip_header: bool = True
) -> Iterator[Tuple[int, int]]:
    """
    Yields `(source, target)` pairs from a delimited interaction log.

    Args:
        file_path: Path of the log file.
        delimiter: Field separator.
        skip_header: Whether the first line is a header to ignore.

    Raises:
        FileNotFoundError: If the file does not exist.
        RecordParseError: If a record has fewer than two fields, bad ids, or
            is not valid UTF-8.
    """
    # Decoded line by line so an encoding error can be tied to its line.
    with open(file_path, "rb") as f:
        for line_number, raw_bytes in enumerate(f, start=1):
            if skip_header and line_number == 1:
                continue
            try:
                line = raw_bytes.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError as e:
                raise RecordParseError(
                    line_number, raw_bytes.decode("utf-8", errors="replace").rstrip("\r\n"), f"not valid UTF-8 ({e.reason})"
                ) from None
            if not line.strip():
                continue
            fields = line.split(delimiter)
            if len(fields) < 2:
                raise RecordParseError(line_number, line, f"expected at least 2 fields separated by {delimiter!r}")
            source = _parse_node_id(fields[0], line_number, line)
            target = _parse_node_id(fields[1], line_number, line)
            yield source, target


def build_graph(
    pairs: Iterable[Tuple[int, int]],
    node_count: Optional[int] = None,
    weight: int = DEFAULT_RECORD_WEIGHT,
) -> WeightedDigraph:
    """
    Builds a graph from `(source, target)` pairs.

    The graph is sized to `node_count` when given, otherwise to the largest id
    seen plus one. Each pair adds `weight` to its edge.

    Raises:
        NodeIndexError: If a pair references an id >= `node_count`.
    """
    records: List[Tuple[int, int]] = list(pairs)
    if node_count is None:
        node_count = max((max(s, t) for s, t in records), default=-1) + 1

    graph = WeightedDigraph(node_count)
    graph.add_interactions(records, weight)

    reader_logger.info(f"Loaded {len(records)} records into a graph with {node_count} nodes.")
    return graph


def load_graph(file_path: Path, settings: Optional[AnalysisSettings] = None) -> WeightedDigraph:
    """Reads an interaction log and builds its graph according to `settings`."""
    settings = settings or AnalysisSettings()
    reader_logger.info(f"Reading interaction records from {file_path}")
    pairs = read_interactions(file_path, delimiter=settings.delimiter, skip_header=settings.skip_header)
    return build_graph(pairs, node_count=settings.node_count, weight=settings.record_weight)
