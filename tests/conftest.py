# tests/conftest.py

"""
Shared pytest fixtures.
"""

import os

import pytest

from commgraph.config import ENV_FIELDS, ENV_PREFIX


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Isolates a test from real COMMGRAPH_* variables and any local .env file."""
    names = [ENV_PREFIX + suffix for suffix in ENV_FIELDS]
    saved = {name: os.environ.pop(name) for name in names if name in os.environ}
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    # load_dotenv writes straight into os.environ, so undo it here.
    for name in names:
        os.environ.pop(name, None)
    os.environ.update(saved)
