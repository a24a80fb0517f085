# tests/test_ingestion.py

"""
Unit Tests for Interaction Log Ingestion.

Verifies that delimited logs are parsed into (source, target) pairs, that
malformed records are reported with their line number, and that graphs are
sized and weighted correctly.
"""

from pathlib import Path

import pytest

from commgraph.config import AnalysisSettings
from commgraph.errors import NodeIndexError, RecordParseError
from commgraph.ingestion.reader import build_graph, load_graph, read_interactions

# --- Test Fixtures ---

@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    """Writes a small e-mail log with a header, extra columns and a blank line."""
    path = tmp_path / "communication.csv"
    path.write_text(
        "From;To;EventDate\n"
        "0;1;2015-01-01 10:00:00\n"
        "0;1;2015-01-01 11:00:00\n"
        "\n"
        "1;2;2015-01-02 09:30:00\n"
        "2;0;2015-01-03 08:15:00\n",
        encoding="utf-8",
    )
    return path

# --- read_interactions ---

def test_read_interactions_skips_header_and_blank_lines(log_file: Path):
    assert list(read_interactions(log_file)) == [(0, 1), (0, 1), (1, 2), (2, 0)]

def test_read_interactions_without_header(tmp_path: Path):
    path = tmp_path / "plain.csv"
    path.write_text("3,4\n4,3\n", encoding="utf-8")
    assert list(read_interactions(path, delimiter=",", skip_header=False)) == [(3, 4), (4, 3)]

def test_read_interactions_tolerates_whitespace(tmp_path: Path):
    path = tmp_path / "spaced.csv"
    path.write_text("a;b\n 1 ; 2 \r\n", encoding="utf-8")
    assert list(read_interactions(path)) == [(1, 2)]

@pytest.mark.parametrize("bad_line", ["7", "x;1", "1;y", "-1;2", "1.5;2"])
def test_read_interactions_reports_bad_records(tmp_path: Path, bad_line: str):
    path = tmp_path / "bad.csv"
    path.write_text(f"From;To\n0;1\n{bad_line}\n", encoding="utf-8")
    with pytest.raises(RecordParseError, match="Line 3") as excinfo:
        list(read_interactions(path))
    assert excinfo.value.line_number == 3

def test_read_interactions_reports_invalid_utf8(tmp_path: Path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"From;To\n0;1\n1;\xe92\n")
    with pytest.raises(RecordParseError, match="Line 3: not valid UTF-8") as excinfo:
        list(read_interactions(path))
    assert excinfo.value.line_number == 3

def test_read_interactions_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        list(read_interactions(tmp_path / "nope.csv"))

# --- build_graph / load_graph ---

def test_build_graph_infers_node_count():
    graph = build_graph([(0, 5), (2, 1)])
    assert graph.node_count == 6
    assert graph.get_weight(0, 5) == 5

def test_build_graph_with_no_records():
    assert build_graph([]).node_count == 0

def test_build_graph_rejects_ids_beyond_node_count():
    with pytest.raises(NodeIndexError):
        build_graph([(0, 1), (1, 4)], node_count=4)

def test_load_graph_accumulates_record_weight(log_file: Path):
    graph = load_graph(log_file)
    assert graph.node_count == 3
    assert graph.get_weight(0, 1) == 10
    assert graph.get_weight(1, 2) == 5
    assert graph.get_weight(2, 0) == 5
    assert graph.total_weight() == 20

def test_load_graph_honours_settings(log_file: Path):
    settings = AnalysisSettings(record_weight=1, node_count=10)
    graph = load_graph(log_file, settings)
    assert graph.node_count == 10
    assert graph.get_weight(0, 1) == 2
