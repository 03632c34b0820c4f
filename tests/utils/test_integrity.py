"""
Tests for graph integrity validation.
"""

import pytest

from nodal.core.exceptions import ValidationError
from nodal.core.graph import Graph
from nodal.core.models import Edge, Node
from nodal.utils.validation import GraphIntegrityValidator


def test_valid_graph(graph):
    """Test a graph built through its own operations."""
    a, b, c = graph.nodes
    graph.insert_edge(a, b, directed=True)
    graph.insert_edge(b, c)
    graph.insert_edge(c, a, directed=True)

    result = GraphIntegrityValidator.validate_graph(graph)

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []
    assert result.context == {"graph_type": "Graph", "nodes": 3, "edges": 3}


def test_isolated_nodes_are_warnings(graph):
    a, b, _ = graph.nodes
    graph.insert_edge(a, b)

    result = GraphIntegrityValidator.validate_graph(graph)

    assert result.is_valid
    assert result.warnings == ["Node 'C' has no edges"]


def test_single_node_has_no_warnings():
    result = GraphIntegrityValidator.validate_graph(Graph("A"))
    assert result.is_valid
    assert result.warnings == []


def test_duplicate_node_values(graph):
    graph.nodes.append(Node("A"))

    result = GraphIntegrityValidator.validate_graph(graph)

    assert not result.is_valid
    assert "Duplicate node value: 'A'" in result.errors


def test_unlinked_edge(graph):
    """Test an edge appended to the edge list without touching adjacency."""
    a, b, _ = graph.nodes
    graph.edges.append(Edge(a, b, directed=True))

    errors = GraphIntegrityValidator.validate_graph(graph).errors

    assert "Edge Directed: A ---> B missing from tail outgoing list" in errors
    assert "Edge Directed: A ---> B missing from head incoming list" in errors


def test_undirected_edge_missing_reverse_entries(graph):
    a, b, _ = graph.nodes
    edge = graph.insert_edge(a, b, directed=True)
    edge.set_directed(False)

    errors = GraphIntegrityValidator.validate_graph(graph).errors

    assert len(errors) == 2
    assert all(error.startswith("Undirected edge") for error in errors)


def test_directed_edge_with_reverse_entries(graph):
    a, b, _ = graph.nodes
    edge = graph.insert_edge(a, b)
    edge.set_directed(True)

    errors = GraphIntegrityValidator.validate_graph(graph).errors

    assert "Directed edge Directed: A ---> B listed in tail incoming list" in errors
    assert "Directed edge Directed: A ---> B listed in head outgoing list" in errors


def test_stray_back_reference(graph):
    a, b, _ = graph.nodes
    a.add_outgoing(Edge(a, b))

    errors = GraphIntegrityValidator.validate_graph(graph).errors

    assert errors == ["Node 'A' outgoing list references unknown edge Undirected: A <---> B"]


def test_foreign_endpoint(graph):
    a = graph.nodes[0]
    stranger = Node("Z")
    edge = Edge(a, stranger, directed=True)
    graph.edges.append(edge)
    a.add_outgoing(edge)
    stranger.add_incoming(edge)

    errors = GraphIntegrityValidator.validate_graph(graph).errors

    assert errors == ["Edge Directed: A ---> Z has a head not owned by the graph"]


def test_duplicate_edges(graph):
    a, b, _ = graph.nodes
    graph.insert_edge(a, b, directed=True)
    duplicate = Edge(b, a, directed=True)
    graph.edges.append(duplicate)
    b.add_outgoing(duplicate)
    a.add_incoming(duplicate)

    errors = GraphIntegrityValidator.validate_graph(graph).errors

    assert errors == ["Edge Directed: B ---> A duplicates an earlier edge"]


def test_plain_edge_in_weighted_graph(weighted_graph):
    a, b, _ = weighted_graph.nodes
    edge = Edge(a, b)
    weighted_graph.edges.append(edge)
    a.add_edge(edge)
    b.add_edge(edge)

    result = GraphIntegrityValidator.validate_graph(weighted_graph)

    assert result.errors == ["Edge Undirected: A <---> B is not a WeightedEdge"]
    assert result.context["graph_type"] == "WeightedGraph"


def test_assert_consistent(graph):
    a, b, _ = graph.nodes
    graph.insert_edge(a, b)
    GraphIntegrityValidator.assert_consistent(graph)

    graph.nodes.append(Node("B"))
    with pytest.raises(ValidationError, match="Duplicate node value"):
        GraphIntegrityValidator.assert_consistent(graph)
