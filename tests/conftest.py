"""Shared test fixtures."""

import pytest

from nodal.core.graph import Graph, WeightedGraph


@pytest.fixture
def graph() -> Graph:
    """Fixture providing a graph with nodes A, B and C and no edges."""
    graph = Graph()
    for value in ("A", "B", "C"):
        graph.insert_node(value)
    return graph


@pytest.fixture
def weighted_graph() -> WeightedGraph:
    """Fixture providing a weighted graph with nodes A, B and C and no edges."""
    graph = WeightedGraph()
    for value in ("A", "B", "C"):
        graph.insert_node(value)
    return graph


@pytest.fixture
def triangle() -> Graph:
    """Fixture providing nodes 0, A, B joined by undirected edges 0-B, B-A, A-0."""
    graph = Graph()
    zero, a, b = (graph.insert_node(value) for value in ("0", "A", "B"))
    graph.insert_edge(zero, b)
    graph.insert_edge(b, a)
    graph.insert_edge(a, zero)
    return graph
