"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import NOT_FOUND, Edge, Node, WeightedEdge
from .graph import Graph, WeightedGraph
from .graph_operations.snapshot import GraphSnapshot

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "GraphOperationError",
    "GraphSnapshot",
    "InvalidOperationError",
    "NOT_FOUND",
    "Node",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "ValidationError",
    "WeightedEdge",
    "WeightedGraph",
]
