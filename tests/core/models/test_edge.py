"""
Tests for edge models.
"""

import math

import pytest

from nodal.core.models import Edge, Node, WeightedEdge


@pytest.fixture
def nodes():
    """Fixture providing three unattached nodes."""
    return Node("A"), Node("B"), Node("C")


def test_edge_creation(nodes):
    """Test basic edge creation and properties."""
    a, b, _ = nodes
    edge = Edge(a, b)

    assert edge.tail is a
    assert edge.head is b
    assert not edge.directed
    assert not edge.is_directed()


def test_directed_edge_creation(nodes):
    a, b, _ = nodes
    assert Edge(a, b, directed=True).is_directed()


def test_edge_does_not_touch_adjacency(nodes):
    """Test that creating an edge leaves the endpoints' lists alone."""
    a, b, _ = nodes
    Edge(a, b)
    assert a.outgoing == [] and b.incoming == []


def test_edge_requires_distinct_nodes(nodes):
    a, _, _ = nodes
    with pytest.raises(ValueError, match="different nodes"):
        Edge(a, a)


def test_edge_rejects_nodes_with_equal_values():
    with pytest.raises(ValueError):
        Edge(Node("A"), Node("A"))


@pytest.mark.parametrize("tail, head", [(None, Node("B")), (Node("A"), None)])
def test_edge_requires_endpoints(tail, head):
    with pytest.raises(TypeError, match="required"):
        Edge(tail, head)


def test_edge_requires_node_endpoints(nodes):
    a, _, _ = nodes
    with pytest.raises(TypeError, match="Node instances"):
        Edge(a, "B")


def test_edge_requires_bool_direction(nodes):
    a, b, _ = nodes
    with pytest.raises(TypeError, match="directed must be a bool"):
        Edge(a, b, "yes")


def test_set_directed(nodes):
    a, b, _ = nodes
    edge = Edge(a, b)

    edge.set_directed(True)
    assert edge.is_directed()
    edge.set_directed(False)
    assert not edge.is_directed()

    with pytest.raises(TypeError):
        edge.set_directed(1)


def test_compare_same_object(nodes):
    a, b, _ = nodes
    edge = Edge(a, b, directed=True)
    assert edge.compare(edge)
    assert edge.compare(edge, ignore_direction=True)


def test_compare_respecting_direction(nodes):
    """Test matching with the direction flags taken into account."""
    a, b, c = nodes
    directed_ab = Edge(a, b, directed=True)

    assert directed_ab.compare(Edge(a, b, directed=True))
    assert directed_ab.compare(Edge(b, a, directed=True))
    assert not directed_ab.compare(Edge(a, b))
    assert not directed_ab.compare(Edge(a, c, directed=True))

    undirected_ab = Edge(a, b)
    assert undirected_ab.compare(Edge(b, a))
    assert not undirected_ab.compare(Edge(b, a, directed=True))


def test_compare_ignoring_direction(nodes):
    a, b, c = nodes
    directed_ab = Edge(a, b, directed=True)

    assert directed_ab.compare(Edge(a, b), ignore_direction=True)
    assert directed_ab.compare(Edge(b, a), ignore_direction=True)
    assert not directed_ab.compare(Edge(b, c), ignore_direction=True)


def test_compare_uses_node_values(nodes):
    """Test that endpoints match by value, not identity."""
    a, b, _ = nodes
    assert Edge(a, b).compare(Edge(Node("A"), Node("B")))


def test_compare_requires_other(nodes):
    a, b, _ = nodes
    with pytest.raises(TypeError):
        Edge(a, b).compare(None)


def test_demote_to_undirected(nodes):
    """Test that demotion fills in the missing adjacency entries exactly once."""
    a, b, _ = nodes
    edge = Edge(a, b, directed=True)
    a.add_outgoing(edge)
    b.add_incoming(edge)

    edge.demote_to_undirected()

    assert not edge.directed
    assert a.outgoing == [edge]
    assert a.incoming == [edge]
    assert b.outgoing == [edge]
    assert b.incoming == [edge]

    edge.demote_to_undirected()
    assert len(a.outgoing) == len(a.incoming) == len(b.outgoing) == len(b.incoming) == 1


def test_edge_string_forms(nodes):
    a, b, _ = nodes
    assert str(Edge(a, b, directed=True)) == "Directed: A ---> B"
    assert str(Edge(a, b)) == "Undirected: A <---> B"


def test_weighted_edge_creation(nodes):
    """Test weighted edge creation and properties."""
    a, b, _ = nodes
    edge = WeightedEdge(a, b, True, weight=3)

    assert edge.weight == pytest.approx(3.0)
    assert isinstance(edge.weight, float)
    assert edge.is_directed()
    assert isinstance(edge, Edge)


def test_weighted_edge_accepts_zero(nodes):
    a, b, _ = nodes
    assert WeightedEdge(a, b, weight=0).weight == 0.0


def test_weighted_edge_requires_weight(nodes):
    a, b, _ = nodes
    with pytest.raises(TypeError):
        WeightedEdge(a, b)
    with pytest.raises(TypeError, match="weight is required"):
        WeightedEdge(a, b, weight=None)


@pytest.mark.parametrize("weight", ["1", True, [1]])
def test_weighted_edge_rejects_non_numeric_weight(nodes, weight):
    a, b, _ = nodes
    with pytest.raises(TypeError, match="weight must be a number"):
        WeightedEdge(a, b, weight=weight)


@pytest.mark.parametrize("weight", [math.inf, -math.inf, math.nan])
def test_weighted_edge_rejects_non_finite_weight(nodes, weight):
    a, b, _ = nodes
    with pytest.raises(ValueError, match="finite"):
        WeightedEdge(a, b, weight=weight)


def test_weighted_edge_rejects_negative_weight(nodes):
    a, b, _ = nodes
    with pytest.raises(ValueError, match="non-negative"):
        WeightedEdge(a, b, weight=-0.5)


def test_weighted_edge_still_checks_endpoints(nodes):
    a, _, _ = nodes
    with pytest.raises(ValueError):
        WeightedEdge(a, a, weight=1)


def test_weight_ignored_by_compare(nodes):
    a, b, _ = nodes
    assert WeightedEdge(a, b, weight=1).compare(WeightedEdge(b, a, weight=9))


def test_is_weighted(nodes):
    a, b, _ = nodes
    assert WeightedEdge.is_weighted(WeightedEdge(a, b, weight=1)) is True
    assert WeightedEdge.is_weighted(Edge(a, b)) is False
    assert WeightedEdge.is_weighted("edge") is None


def test_weighted_edge_string_forms(nodes):
    a, b, _ = nodes
    assert str(WeightedEdge(a, b, True, weight=2.5)) == "Directed: A ---> B; Weight: 2.5"
    assert str(WeightedEdge(a, b, weight=4)) == "Undirected: A <---> B; Weight: 4"


@pytest.mark.parametrize(
    "weight, rendered",
    [(1234567, "1234567"), (0.1234567, "0.1234567"), (1234567.5, "1234567.5")],
)
def test_weighted_edge_string_keeps_every_digit(nodes, weight, rendered):
    a, b, _ = nodes
    assert str(WeightedEdge(a, b, weight=weight)) == f"Undirected: A <---> B; Weight: {rendered}"
