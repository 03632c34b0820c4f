"""Render snapshots of a graph.

This module turns the current state of a graph into plain data for a
network-diagram widget. The graph has no change notifications, so a renderer
takes a fresh snapshot after every mutation.

Snapshot layout:
- ``nodes``: ``{"id", "label"}`` per node, in insertion order
- ``edges``: ``{"from", "to", "arrows"}`` per edge, plus ``"weight"`` and
  ``"label"`` for weighted edges
"""

from typing import Any, Dict, List

from ..exceptions import GraphOperationError
from ..graph import Graph
from ..models import Edge, WeightedEdge, format_weight

_ARROW = {"enabled": True}


class GraphSnapshot:
    """Builds render snapshots of a graph."""

    def __init__(self, graph: Graph):
        """Initialize snapshot builder.

        Args:
            graph: Graph to take snapshots of

        Raises:
            GraphOperationError: If an edge refers to a node the graph does not hold
        """
        self.graph = graph
        self._validate_data()

    def _validate_data(self) -> None:
        nodes = self.graph.nodes
        for edge in self.graph.edges:
            for endpoint in (edge.tail, edge.head):
                if not any(node is endpoint for node in nodes):
                    raise GraphOperationError(
                        f"Edge {edge} references node '{endpoint.value}' outside the graph"
                    )

    @staticmethod
    def _edge_to_dict(edge: Edge) -> Dict[str, Any]:
        if edge.is_directed():
            data = {
                "from": edge.tail.value,
                "to": edge.head.value,
                "arrows": {"to": dict(_ARROW)},
            }
        else:
            # Undirected edges are drawn head to tail with arrows at both ends.
            data = {
                "from": edge.head.value,
                "to": edge.tail.value,
                "arrows": {"to": dict(_ARROW), "from": dict(_ARROW)},
            }

        if isinstance(edge, WeightedEdge):
            data["weight"] = edge.weight
            data["label"] = format_weight(edge.weight)
        return data

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Convert the graph to snapshot format.

        Returns:
            Dictionary with ``nodes`` and ``edges`` lists; both empty for an empty graph
        """
        self._validate_data()
        return {
            "nodes": [{"id": node.value, "label": str(node.value)} for node in self.graph.nodes],
            "edges": [self._edge_to_dict(edge) for edge in self.graph.edges],
        }
