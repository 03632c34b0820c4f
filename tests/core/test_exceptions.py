"""
Tests for custom exceptions.
"""

import pytest

from nodal.core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from nodal.core.graph import Graph
from nodal.core.models import Node


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_not_found_hierarchy():
    assert issubclass(NodeNotFoundError, ResourceNotFoundError)
    assert str(ConfigurationError("bad")) == "bad"


def test_foreign_endpoint_raises_node_not_found():
    graph = Graph("A")
    with pytest.raises(ResourceNotFoundError, match="'B' is not part of this graph"):
        graph.insert_edge(graph.nodes[0], Node("B"))
