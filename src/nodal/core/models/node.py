"""
Node model for the graph system.

This module defines the vertex of the graph. A node holds a single value that
identifies it inside its graph, plus two lists of back-references to the edges
that touch it: the edges it leaves from (outgoing) and the edges it arrives at
(incoming). An undirected edge is listed in both lists of both endpoints.

The lists are not owned by the node. Only the graph keeps them consistent with
its edge collection; direct mutation bypasses that bookkeeping.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List

from .base import normalize_value, validate_required, values_match

if TYPE_CHECKING:
    from .edge import Edge


NOT_FOUND = -1


@dataclass(eq=False)
class Node:
    """
    Vertex of the graph, identified by its value.

    Attributes:
        value (Any): Identifying value; strings are stored trimmed
        outgoing (List[Edge]): Edges where this node is the origin
        incoming (List[Edge]): Edges where this node is the destination
    """

    value: Any
    outgoing: List["Edge"] = field(default_factory=list)
    incoming: List["Edge"] = field(default_factory=list)

    def __post_init__(self):
        """Validate node after initialization."""
        validate_required("value", self.value)
        if isinstance(self.value, Node):
            raise TypeError("value must not be a Node")
        self.value = normalize_value(self.value)

    def outgoing_index(self, head: Any) -> int:
        """
        Find the position of the first outgoing edge arriving at ``head``.

        Args:
            head: Node or node value to look for

        Returns:
            int: Index in ``outgoing``, or ``NOT_FOUND`` (-1)
        """
        for index, edge in enumerate(self.outgoing):
            if edge.head.compare(head):
                return index
        return NOT_FOUND

    def incoming_index(self, tail: Any) -> int:
        """
        Find the position of the first incoming edge leaving from ``tail``.

        Args:
            tail: Node or node value to look for

        Returns:
            int: Index in ``incoming``, or ``NOT_FOUND`` (-1)
        """
        for index, edge in enumerate(self.incoming):
            if edge.tail.compare(tail):
                return index
        return NOT_FOUND

    def add_outgoing(self, edge: "Edge") -> None:
        self.outgoing.append(edge)

    def add_incoming(self, edge: "Edge") -> None:
        self.incoming.append(edge)

    def add_edge(self, edge: "Edge") -> None:
        """Append ``edge`` to both adjacency lists."""
        self.outgoing.append(edge)
        self.incoming.append(edge)

    def remove_outgoing(self, index: int) -> "Edge":
        return self.outgoing.pop(index)

    def remove_incoming(self, index: int) -> "Edge":
        return self.incoming.pop(index)

    def compare(self, other: Any) -> bool:
        """
        Check whether ``other`` designates this node.

        ``other`` may be a node (same object, or same value) or a bare value.
        String values are trimmed before comparison, and booleans never
        match numbers.

        Raises:
            TypeError: If ``other`` is None
        """
        validate_required("other", other)
        if other is self:
            return True
        if isinstance(other, Node):
            return values_match(other.value, self.value)
        return values_match(normalize_value(other), self.value)

    def is_connected(self) -> bool:
        """Local degree check: True when at least one edge touches this node."""
        return len(self.outgoing) > 0 or len(self.incoming) > 0

    def is_adjacent_to(self, other: Any) -> bool:
        """True when an outgoing edge arrives at ``other`` or an incoming edge leaves from it."""
        return self.outgoing_index(other) != NOT_FOUND or self.incoming_index(other) != NOT_FOUND

    def __str__(self) -> str:
        return f"Node: {self.value}"

    def __repr__(self) -> str:
        return (
            f"Node(value={self.value!r}, outgoing={len(self.outgoing)}, "
            f"incoming={len(self.incoming)})"
        )
