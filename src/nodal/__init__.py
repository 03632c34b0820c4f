"""
nodal - In-memory mutable graphs with directed, undirected and weighted edges

This package provides a small graph abstract data type:

- Nodes identified by value, each keeping outgoing/incoming edge back-references
- Edges that can be directed or undirected, and a weighted variant
- Graph and WeightedGraph, which own nodes and edges and reconcile directed and
  undirected edges joining the same pair of nodes
- A text-field console and a command line front end for editing a graph

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "nodal Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("nodal requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.graph import Graph, WeightedGraph
from .core.models import Edge, Node, WeightedEdge

__all__ = [
    "Graph",
    "WeightedGraph",
    "Node",
    "Edge",
    "WeightedEdge",
]
