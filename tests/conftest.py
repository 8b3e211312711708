"""Shared test fixtures."""

import pytest

from sim.core.graph import AdjacencyGraph
from tests.fakes import Counter


@pytest.fixture()
def counter() -> Counter:
    return Counter()


@pytest.fixture()
def graph() -> AdjacencyGraph[int]:
    """간선 (1, 2, 7) 하나가 있는 그래프"""
    g: AdjacencyGraph[int] = AdjacencyGraph()
    g.add_edge(1, 2, 7)
    return g
