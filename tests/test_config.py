# tests/test_config.py

"""
Unit Tests for AnalysisSettings.
"""

import pytest
from pydantic import ValidationError

from commgraph.config import AnalysisSettings


@pytest.fixture(autouse=True)
def clean_env(isolated_env):
    """Every settings test runs without ambient COMMGRAPH_* configuration."""
    return isolated_env


def test_defaults():
    settings = AnalysisSettings()
    assert settings.damping_factor == 0.85
    assert settings.iterations == 100
    assert settings.record_weight == 5
    assert settings.delimiter == ";"
    assert settings.skip_header is True
    assert settings.node_count is None
    assert settings.top_k == 5

@pytest.mark.parametrize("field, value", [
    ("damping_factor", 0.0),
    ("damping_factor", 1.0),
    ("iterations", -1),
    ("record_weight", 0),
    ("delimiter", ""),
    ("delimiter", ";;"),
    ("top_k", 0),
    ("node_count", -3),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        AnalysisSettings(**{field: value})

def test_from_env_reads_prefixed_variables(monkeypatch):
    monkeypatch.setenv("COMMGRAPH_DAMPING", "0.9")
    monkeypatch.setenv("COMMGRAPH_ITERATIONS", "20")
    monkeypatch.setenv("COMMGRAPH_NODES", "168")
    settings = AnalysisSettings.from_env()
    assert settings.damping_factor == 0.9
    assert settings.iterations == 20
    assert settings.node_count == 168

def test_from_env_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("COMMGRAPH_WEIGHT=2\n", encoding="utf-8")
    assert AnalysisSettings.from_env().record_weight == 2

def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("COMMGRAPH_TOP_K", "3")
    assert AnalysisSettings.from_env(top_k=7).top_k == 7
    assert AnalysisSettings.from_env(top_k=None).top_k == 3
