"""
Weighted variant of the graph.

A WeightedGraph only holds WeightedEdge instances. Weights are validated when
an edge is created but play no part in matching: the insertion conflict
protocol and edge removal behave exactly as in the base graph.
"""

import logging
from typing import List, Optional, Type

from ..models.edge import Edge, WeightedEdge
from ..models.node import Node
from .base import Graph

logger = logging.getLogger(__name__)


class WeightedGraph(Graph):
    """Graph that only accepts weighted edges."""

    edge_type: Type[Edge] = WeightedEdge

    @Graph.edges.setter
    def edges(self, value: List[Edge]) -> None:
        """
        Replace the edge list.

        Raises:
            TypeError: If any member is not a WeightedEdge
        """
        for edge in value:
            if not WeightedEdge.is_weighted(edge):
                raise TypeError("WeightedGraph.edges only accepts WeightedEdge members")
        self._edges = value

    def create_edge(
        self, tail: Node, head: Node, weight: float, directed: bool = False
    ) -> WeightedEdge:
        """
        Create a weighted edge without adding it to the graph.

        Raises:
            TypeError: If an endpoint is not a Node or the weight is not a number
            ValueError: If tail equals head, or the weight is negative or not finite
        """
        return WeightedEdge(tail, head, directed, weight=weight)

    def insert_edge(
        self, tail: Node, head: Node, weight: float, directed: bool = False
    ) -> Optional[Edge]:
        return self.insert_edge_object(self.create_edge(tail, head, weight, directed))

    def insert_edge_object(self, edge: Edge) -> Optional[Edge]:
        """
        Insert a weighted edge; plain edges are rejected with None.

        See ``Graph.insert_edge_object`` for the conflict protocol.
        """
        if not WeightedEdge.is_weighted(edge):
            logger.debug("Rejected unweighted edge %s", edge)
            return None
        return super().insert_edge_object(edge)

    def remove_edge(self, tail: Node, head: Node, weight: float, directed: bool = False) -> bool:
        """
        Remove the edge joining two nodes.

        The weight must be valid but does not need to match the stored weight.
        """
        return self.remove_edge_object(self.create_edge(tail, head, weight, directed))
