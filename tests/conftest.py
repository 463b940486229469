"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from pathlight.graph.indexer import index_edges


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def decision_source() -> str:
    """Return a small diagram with one node of each category."""
    return "S1-->|go|D1\nD1-->|yes|E1\nD1-->|no|S1\n"


@pytest.fixture
def duplicate_source() -> str:
    """Return a diagram where the same edge appears at indices 2 and 5."""
    return """flowchart TD
    S1 -->|a| D1
    D1 -->|b| X1
    X1 -->|dup| E1
    X1 -->|c| D1
    D1 -->|d| E2
    X1 -->|dup| E1
"""


@pytest.fixture
def decision_index(decision_source):
    """Return the index built from the decision source."""
    return index_edges(decision_source)


@pytest.fixture
def duplicate_index(duplicate_source):
    """Return the index built from the duplicate source."""
    return index_edges(duplicate_source)
