"""
Core graph data structure with per-node adjacency lists.

This module provides the Graph class. The graph owns an insertion-ordered list
of nodes and a list of edges; every node keeps back-references to the edges
that touch it, split into outgoing and incoming lists. A directed edge is
listed in its tail's outgoing list and its head's incoming list; an undirected
edge is listed in both lists of both endpoints.

The graph is the only component that keeps those lists consistent with the
edge collection. Edge insertion follows a conflict protocol for edges joining
nodes that are already connected:

- a directed edge repeating an existing directed edge is rejected;
- a directed edge opposing an existing directed edge, or an undirected edge
  arriving on an existing directed edge, turns the existing edge into an
  undirected edge in place and discards the new one;
- anything arriving on an existing undirected edge is rejected.

Rejections return None and leave the graph untouched.
"""

import logging
from typing import Any, List, Optional, Type

from ..exceptions import NodeNotFoundError
from ..models.base import validate_required
from ..models.edge import Edge
from ..models.node import Node

logger = logging.getLogger(__name__)


class Graph:
    """
    Mutable graph of uniquely-valued nodes joined by directed or undirected edges.

    Attributes:
        edge_type (Type[Edge]): Edge class this graph creates and accepts
        _nodes (List[Node]): Owned nodes, in insertion order
        _edges (List[Edge]): Owned edges, in insertion order
    """

    edge_type: Type[Edge] = Edge

    def __init__(self, seed: Any = None):
        """
        Initialize a graph.

        Args:
            seed: None for an empty graph, a Node to become the only node, or
                any other value to create the only node from
        """
        if seed is None:
            self._nodes: List[Node] = []
        elif isinstance(seed, Node):
            self._nodes = [seed]
        else:
            self._nodes = [Node(seed)]
        self._edges: List[Edge] = []

    @property
    def nodes(self) -> List[Node]:
        """Internal node list. Mutating it bypasses the graph's bookkeeping."""
        return self._nodes

    @nodes.setter
    def nodes(self, value: List[Node]) -> None:
        self._nodes = value

    @property
    def edges(self) -> List[Edge]:
        """Internal edge list. Mutating it bypasses the graph's bookkeeping."""
        return self._edges

    @edges.setter
    def edges(self, value: List[Edge]) -> None:
        self._edges = value

    def size(self) -> int:
        """Get the number of nodes in the graph."""
        return len(self._nodes)

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return len(self._nodes) == 0

    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return len(self._edges)

    def is_connected(self) -> bool:
        """
        Check that every node has at least one edge.

        This is a per-node degree check, not a reachability test: two separate
        components each with edges still count as connected. Graphs with fewer
        than two nodes are never connected.
        """
        if len(self._nodes) <= 1:
            return False
        return all(node.is_connected() for node in self._nodes)

    def is_digraph(self) -> bool:
        """Check whether any edge is directed."""
        return any(edge.is_directed() for edge in self._edges)

    def find_node(self, value: Any) -> Optional[Node]:
        """
        Get the node designated by a value or node.

        Args:
            value: Node value (strings are trimmed) or Node

        Returns:
            Optional[Node]: The first matching node, None if there is none

        Raises:
            TypeError: If value is None
        """
        validate_required("value", value)
        for node in self._nodes:
            if node.compare(value):
                return node
        return None

    def contains_node(self, value: Any) -> bool:
        return self.find_node(value) is not None

    def find_edge(self, tail: Node, head: Node, directed: Optional[bool] = None) -> Optional[Edge]:
        """
        Get the edge joining two nodes.

        Args:
            tail (Node): One endpoint
            head (Node): The other endpoint
            directed (Optional[bool]): None to match regardless of direction,
                otherwise the direction flag the edge must have

        Returns:
            Optional[Edge]: The matching edge, None if there is none

        Raises:
            TypeError: If an endpoint is not a Node
            ValueError: If tail and head are the same node
        """
        probe = Edge(tail, head, bool(directed))
        ignore_direction = directed is None
        for edge in self._edges:
            if edge.compare(probe, ignore_direction=ignore_direction):
                return edge
        return None

    def contains_edge(self, tail: Node, head: Node, directed: Optional[bool] = None) -> bool:
        return self.find_edge(tail, head, directed) is not None

    def create_node(self, value: Any) -> Node:
        """
        Create a node without adding it to the graph.

        Uniqueness is not checked here; use ``insert_node`` for that.

        Raises:
            TypeError: If value is None or already a Node
        """
        validate_required("value", value)
        if isinstance(value, Node):
            raise TypeError("value is already a Node")
        return Node(value)

    def insert_node(self, value: Any) -> Optional[Node]:
        """
        Add a node for ``value`` unless one already exists.

        Returns:
            Optional[Node]: The new node, or None if the value was taken
        """
        if self.find_node(value) is not None:
            logger.debug("Node %r already exists, not inserted", value)
            return None

        node = self.create_node(value)
        self._nodes.append(node)
        logger.debug("Inserted node %r", node.value)
        return node

    def create_edge(self, tail: Node, head: Node, directed: bool = False) -> Edge:
        """
        Create an edge without adding it to the graph.

        Raises:
            TypeError: If an endpoint is missing or not a Node
            ValueError: If tail and head are the same node
        """
        return Edge(tail, head, directed)

    def insert_edge(self, tail: Node, head: Node, directed: bool = False) -> Optional[Edge]:
        """Create an edge and insert it; see ``insert_edge_object``."""
        return self.insert_edge_object(self.create_edge(tail, head, directed))

    def _check_owned(self, node: Node) -> None:
        if not any(owned is node for owned in self._nodes):
            raise NodeNotFoundError(f"Node '{node.value}' is not part of this graph")

    def _link(self, edge: Edge) -> None:
        edge.tail.add_outgoing(edge)
        edge.head.add_incoming(edge)
        if not edge.directed:
            edge.tail.add_incoming(edge)
            edge.head.add_outgoing(edge)

    def insert_edge_object(self, edge: Edge) -> Optional[Edge]:
        """
        Insert an edge, reconciling it with any edge already joining its nodes.

        Args:
            edge (Edge): Edge whose endpoints are nodes of this graph

        Returns:
            Optional[Edge]: ``edge`` itself if it was added; the existing edge
            if that edge was turned undirected instead; None if the insertion
            conflicted and nothing changed

        Raises:
            NodeNotFoundError: If an endpoint is not a node of this graph
        """
        self._check_owned(edge.tail)
        self._check_owned(edge.head)

        existing = None
        for candidate in self._edges:
            if candidate.compare(edge, ignore_direction=True):
                existing = candidate
                break

        if existing is None:
            self._edges.append(edge)
            self._link(edge)
            logger.debug("Inserted edge %s", edge)
            return edge

        if existing.directed and (not edge.directed or not existing.head.compare(edge.head)):
            existing.demote_to_undirected()
            logger.debug("Edge %s downgraded to undirected", existing)
            return existing

        logger.debug("Edge %s conflicts with existing edge %s", edge, existing)
        return None

    def remove_edge(self, tail: Node, head: Node, directed: bool = False) -> bool:
        """Remove the edge joining two nodes; see ``remove_edge_object``."""
        return self.remove_edge_object(self.create_edge(tail, head, directed))

    @staticmethod
    def _index_of(items: List[Any], item: Any) -> int:
        for index, candidate in enumerate(items):
            if candidate is item:
                return index
        return -1

    def _unlink(self, edge: Edge) -> None:
        for node in (edge.tail, edge.head):
            index = self._index_of(node.outgoing, edge)
            if index != -1:
                node.remove_outgoing(index)
            index = self._index_of(node.incoming, edge)
            if index != -1:
                node.remove_incoming(index)

    def remove_edge_object(self, probe: Edge) -> bool:
        """
        Remove the edge joining the same nodes as ``probe``, in either direction.

        Returns:
            bool: True if an edge was removed, False if none matched
        """
        for index, edge in enumerate(self._edges):
            if edge.compare(probe, ignore_direction=True):
                self._unlink(edge)
                del self._edges[index]
                logger.debug("Removed edge %s", edge)
                return True

        logger.debug("No edge matching %s to remove", probe)
        return False

    def remove_node(self, node: Any) -> bool:
        """
        Remove a node and every edge touching it.

        Args:
            node: Node or node value; None is accepted and removes nothing

        Returns:
            bool: True if the node was removed, False if it was not found
        """
        if node is None:
            return False

        target = self.find_node(node)
        if target is None:
            logger.debug("Node %r not found, nothing removed", node)
            return False

        # Back to front so removals do not shift the entries still to visit.
        for index in range(len(self._edges) - 1, -1, -1):
            edge = self._edges[index]
            if edge.tail is target or edge.head is target:
                self.remove_edge_object(edge)

        del self._nodes[self._index_of(self._nodes, target)]
        logger.debug("Removed node %r", target.value)
        return True

    def __str__(self) -> str:
        lines = [
            f"Nodes: {self.size()}",
            f"Edges: {self.edge_count()}",
            f"Connected: {self.is_connected()}",
            f"Digraph: {self.is_digraph()}",
        ]
        lines.extend(str(node) for node in self._nodes)
        lines.extend(str(edge) for edge in self._edges)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.size()}, edges={self.edge_count()})"
