"""
Edge models for the graph system.

This module defines the connections between nodes: the plain ``Edge`` and the
``WeightedEdge`` that additionally carries a non-negative, finite weight.

An edge always joins two distinct nodes, its tail (origin) and its head
(destination). The ``directed`` flag can change after construction; the graph
uses that to turn a directed edge into an undirected one in place when a
conflicting insertion arrives for the same pair of nodes.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ...utils.validation import validate_dataclass
from .base import format_weight, validate_flag, validate_required, validate_weight
from .node import Node


@validate_dataclass
@dataclass(eq=False)
class Edge:
    """
    Connection between two nodes of the same graph.

    Attributes:
        tail (Node): Origin node
        head (Node): Destination node, distinct from ``tail``
        directed (bool): Whether the edge only goes from tail to head
    """

    tail: Node
    head: Node
    directed: bool = False

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_required("tail", self.tail)
        validate_required("head", self.head)
        if not isinstance(self.tail, Node) or not isinstance(self.head, Node):
            raise TypeError("tail and head must be Node instances")
        if self.tail is self.head or self.tail.compare(self.head):
            raise ValueError("tail and head must be different nodes")
        validate_flag("directed", self.directed)

    def is_directed(self) -> bool:
        return self.directed

    def set_directed(self, directed: bool) -> None:
        """
        Overwrite the direction flag.

        Only the flag changes; the endpoints' adjacency lists are left as they
        are. Use ``demote_to_undirected`` or go through the graph to keep them
        consistent.
        """
        validate_flag("directed", directed)
        self.directed = directed

    def compare(self, other: "Edge", ignore_direction: bool = False) -> bool:
        """
        Check whether ``other`` describes the same connection as this edge.

        Endpoints are compared by node value. With ``ignore_direction`` the
        endpoints may match in either order regardless of the direction flags;
        otherwise they may still match in either order but the flags must agree.

        Args:
            other (Edge): Edge to compare against
            ignore_direction (bool): Ignore the direction flags

        Returns:
            bool: True if both edges join the same nodes under the chosen rule

        Raises:
            TypeError: If ``other`` is None
        """
        validate_required("other", other)
        if other is self:
            return True

        same_order = self.tail.compare(other.tail) and self.head.compare(other.head)
        swapped = self.tail.compare(other.head) and self.head.compare(other.tail)
        if ignore_direction:
            return same_order or swapped
        return (same_order or swapped) and self.directed == other.directed

    def demote_to_undirected(self) -> None:
        """
        Turn this edge into an undirected edge in place.

        Clears the direction flag and lists the edge in every adjacency list an
        undirected edge belongs to (both lists of both endpoints), skipping the
        ones that already hold it.
        """
        self.directed = False
        for adjacency in (
            self.tail.outgoing,
            self.tail.incoming,
            self.head.outgoing,
            self.head.incoming,
        ):
            if self not in adjacency:
                adjacency.append(self)

    def __str__(self) -> str:
        if self.directed:
            return f"Directed: {self.tail.value} ---> {self.head.value}"
        return f"Undirected: {self.tail.value} <---> {self.head.value}"


@validate_dataclass
@dataclass(eq=False)
class WeightedEdge(Edge):
    """
    Edge carrying a weight.

    The weight is required, must be a finite number and must not be negative.
    It is stored as a float. It takes no part in ``compare``: two weighted edges
    joining the same nodes are the same connection whatever their weights.

    Attributes:
        weight (float): Non-negative, finite weight (keyword-only)
    """

    weight: float = field(kw_only=True)

    def __post_init__(self):
        """Validate weight, then the inherited edge fields."""
        self.weight = validate_weight(self.weight)
        super().__post_init__()

    @staticmethod
    def is_weighted(value: Any) -> Optional[bool]:
        """
        Tell weighted edges apart from plain ones.

        Returns:
            Optional[bool]: True for a WeightedEdge, False for any other Edge,
            None for values that are not edges at all
        """
        if isinstance(value, Edge):
            return isinstance(value, WeightedEdge)
        return None

    def __str__(self) -> str:
        return f"{super().__str__()}; Weight: {format_weight(self.weight)}"
