"""
Graph module for the nodal package.

This module provides the graph implementations:
- Graph: nodes joined by directed or undirected edges
- WeightedGraph: the same structure restricted to weighted edges
"""

from .base import Graph
from .weighted import WeightedGraph

__all__ = ["Graph", "WeightedGraph"]
