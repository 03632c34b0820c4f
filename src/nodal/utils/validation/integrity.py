"""
Graph Integrity Validation Components

This module checks that a graph's adjacency bookkeeping agrees with its edge
collection. The graph keeps this consistent as long as every change goes
through its own insert/remove operations; direct assignment to node or edge
attributes can break it, and this validator is how such breakage is found.

The module validates:
- Uniqueness of node values
- Ownership of edge endpoints
- Membership of each edge in the adjacency lists its direction implies
- Absence of stray back-references to edges the graph does not hold
- Absence of two edges joining the same pair of nodes
- Edge type (weighted graphs hold weighted edges only)
"""

from typing import TYPE_CHECKING, List

from ...core.exceptions import ValidationError
from .base import ValidationResult

if TYPE_CHECKING:
    from ...core.graph import Graph
    from ...core.models import Edge, Node


class GraphIntegrityValidator:
    """
    Validator for the global consistency of a graph.

    All methods are static; the validator holds no state.
    """

    @staticmethod
    def _contains(items: List, item: object) -> bool:
        return any(candidate is item for candidate in items)

    @staticmethod
    def _validate_nodes(nodes: List["Node"]) -> List[str]:
        """Ensure no two nodes share a value."""
        errors = []
        for index, node in enumerate(nodes):
            if any(node.compare(previous) for previous in nodes[:index]):
                errors.append(f"Duplicate node value: {node.value!r}")
        return errors

    @staticmethod
    def _validate_edge(graph: "Graph", edge: "Edge") -> List[str]:
        """Ensure one edge is owned, typed and linked as its direction requires."""
        errors = []
        contains = GraphIntegrityValidator._contains

        if not isinstance(edge, graph.edge_type):
            errors.append(f"Edge {edge} is not a {graph.edge_type.__name__}")

        for role, node in (("tail", edge.tail), ("head", edge.head)):
            if not contains(graph.nodes, node):
                errors.append(f"Edge {edge} has a {role} not owned by the graph")

        if not contains(edge.tail.outgoing, edge):
            errors.append(f"Edge {edge} missing from tail outgoing list")
        if not contains(edge.head.incoming, edge):
            errors.append(f"Edge {edge} missing from head incoming list")

        reverse_lists = (
            ("tail incoming", edge.tail.incoming),
            ("head outgoing", edge.head.outgoing),
        )
        for label, adjacency in reverse_lists:
            listed = contains(adjacency, edge)
            if edge.directed and listed:
                errors.append(f"Directed edge {edge} listed in {label} list")
            elif not edge.directed and not listed:
                errors.append(f"Undirected edge {edge} missing from {label} list")

        return errors

    @staticmethod
    def _validate_back_references(graph: "Graph") -> List[str]:
        """Ensure every adjacency entry points at a held edge touching that node."""
        errors = []
        contains = GraphIntegrityValidator._contains
        for node in graph.nodes:
            for label, adjacency in (("outgoing", node.outgoing), ("incoming", node.incoming)):
                for edge in adjacency:
                    if not contains(graph.edges, edge):
                        errors.append(
                            f"Node {node.value!r} {label} list references unknown edge {edge}"
                        )
                    elif edge.tail is not node and edge.head is not node:
                        errors.append(
                            f"Node {node.value!r} {label} list references foreign edge {edge}"
                        )
        return errors

    @staticmethod
    def _validate_duplicate_edges(edges: List["Edge"]) -> List[str]:
        errors = []
        for index, edge in enumerate(edges):
            if any(edge.compare(previous, ignore_direction=True) for previous in edges[:index]):
                errors.append(f"Edge {edge} duplicates an earlier edge")
        return errors

    @staticmethod
    def validate_graph(graph: "Graph") -> ValidationResult:
        """
        Validate the consistency of a graph.

        Isolated nodes are reported as warnings, not errors.

        Args:
            graph: Graph or WeightedGraph instance to validate

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        errors = []
        warnings = []

        errors.extend(GraphIntegrityValidator._validate_nodes(graph.nodes))
        for edge in graph.edges:
            errors.extend(GraphIntegrityValidator._validate_edge(graph, edge))
        errors.extend(GraphIntegrityValidator._validate_back_references(graph))
        errors.extend(GraphIntegrityValidator._validate_duplicate_edges(graph.edges))

        if graph.size() > 1:
            for node in graph.nodes:
                if not node.is_connected():
                    warnings.append(f"Node {node.value!r} has no edges")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={
                "graph_type": type(graph).__name__,
                "nodes": graph.size(),
                "edges": graph.edge_count(),
            },
        )

    @staticmethod
    def assert_consistent(graph: "Graph") -> None:
        """
        Validate a graph and raise on the first batch of errors.

        Raises:
            ValidationError: If the graph is inconsistent
        """
        result = GraphIntegrityValidator.validate_graph(graph)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))
