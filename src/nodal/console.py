"""
Graph console: text-field front end for a graph.

The console plays the part of an input form. It receives raw text fields
(node value, edge endpoints, direction flag, weight), trims and validates
them, resolves endpoint values to nodes, calls the graph and reports what
happened as an OperationOutcome carrying a status and a human-readable
message. It never raises for bad input; problems become INVALID or NOT_FOUND
outcomes.

Example:
    >>> console = GraphConsole()
    >>> console.insert_node("A").status
    <OutcomeStatus.INSERTED: 'inserted'>
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .config import ConsoleConfig
from .core.exceptions import (
    ConfigurationError,
    InvalidOperationError,
    NodeNotFoundError,
    ValidationError,
)
from .core.graph import Graph, WeightedGraph
from .core.graph_operations.snapshot import GraphSnapshot
from .core.models import Edge, Node, validate_weight
from .utils.validation import GraphIntegrityValidator, RequiredRule

logger = logging.getLogger(__name__)

DUMP_HEADER = "GRAPH:\n======\n"


class OutcomeStatus(Enum):
    """Result categories of console operations."""

    INSERTED = "inserted"
    DOWNGRADED = "downgraded"
    CONFLICT = "conflict"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    SHOWN = "shown"


@dataclass
class OperationOutcome:
    """
    Outcome of a console operation.

    Attributes:
        status: What happened
        message: Human-readable report
        subject: Node, edge or snapshot the operation produced, if any
    """

    status: OutcomeStatus
    message: str
    subject: Any = None

    @property
    def succeeded(self) -> bool:
        return self.status in (
            OutcomeStatus.INSERTED,
            OutcomeStatus.DOWNGRADED,
            OutcomeStatus.REMOVED,
            OutcomeStatus.SHOWN,
        )


class GraphConsole:
    """
    Console driving a Graph or WeightedGraph from text fields.

    Attributes:
        config (ConsoleConfig): Session configuration
        graph (Graph): Graph being edited
    """

    def __init__(self, config: Optional[ConsoleConfig] = None, graph: Optional[Graph] = None):
        """
        Initialize a console.

        Args:
            config: Session configuration (defaults to an unweighted session)
            graph: Existing graph to edit; a new empty one is created if omitted

        Raises:
            ConfigurationError: If the graph type does not match ``config.weighted``
        """
        self.config = config or ConsoleConfig()
        if graph is None:
            graph = WeightedGraph() if self.config.weighted else Graph()
        if isinstance(graph, WeightedGraph) != self.config.weighted:
            raise ConfigurationError(
                f"{type(graph).__name__} does not match weighted={self.config.weighted}"
            )
        self.graph = graph
        self._required = RequiredRule("A value is required")

    @staticmethod
    def _field(value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def _report(self, status: OutcomeStatus, message: str, subject: Any = None) -> OperationOutcome:
        if status in (OutcomeStatus.INVALID, OutcomeStatus.NOT_FOUND):
            logger.warning(message)
        else:
            logger.info(message)
        return OperationOutcome(status=status, message=message, subject=subject)

    def _after_mutation(self) -> None:
        if self.config.check_integrity:
            GraphIntegrityValidator.assert_consistent(self.graph)

    def insert_node(self, value: Any) -> OperationOutcome:
        """Insert a node from a value field."""
        value = self._field(value)
        if not self._required.validate(value):
            return self._report(
                OutcomeStatus.INVALID, "Error inserting node. Every node must have a value."
            )

        node = self.graph.insert_node(value)
        if node is None:
            return self._report(
                OutcomeStatus.CONFLICT, f"Error inserting node. Node '{value}' already exists."
            )

        self._after_mutation()
        return self._report(OutcomeStatus.INSERTED, f"Node '{value}' inserted.", node)

    def remove_node(self, value: Any) -> OperationOutcome:
        """Remove a node, and every edge touching it, from a value field."""
        value = self._field(value)
        if not self._required.validate(value):
            return self._report(
                OutcomeStatus.INVALID, "Error removing node. A node value is required."
            )

        if not self.graph.remove_node(self.graph.find_node(value)):
            return self._report(
                OutcomeStatus.NOT_FOUND, f"Error removing node. Node '{value}' does not exist."
            )

        self._after_mutation()
        return self._report(OutcomeStatus.REMOVED, f"Node '{value}' removed.")

    def _resolve_endpoints(self, tail: Any, head: Any) -> Tuple[Node, Node]:
        """
        Resolve endpoint fields to nodes of the graph.

        Raises:
            ValidationError: If a field is empty
            NodeNotFoundError: If a field names no node
            InvalidOperationError: If both fields name the same node
        """
        if not self._required.validate(tail):
            raise ValidationError("Every edge must have an origin node.")
        if not self._required.validate(head):
            raise ValidationError("Every edge must have a destination node.")

        tail_node = self.graph.find_node(tail)
        if tail_node is None:
            raise NodeNotFoundError(f"Origin node '{tail}' does not exist.")
        head_node = self.graph.find_node(head)
        if head_node is None:
            raise NodeNotFoundError(f"Destination node '{head}' does not exist.")
        if tail_node.compare(head_node):
            raise InvalidOperationError(
                "The origin node cannot be the destination node of the same edge."
            )
        return tail_node, head_node

    def _parse_weight(self, weight: Any) -> Optional[float]:
        """
        Parse the weight field for the current session.

        Raises:
            ValidationError: If the field is missing, malformed or out of range
                in a weighted session, or present in an unweighted one
        """
        weight = self._field(weight)
        if not self.config.weighted:
            if self._required.validate(weight):
                raise ValidationError("Edge weights are only accepted by a weighted graph.")
            return None

        if not self._required.validate(weight):
            raise ValidationError("Every weighted edge must have a weight.")
        if isinstance(weight, str):
            try:
                weight = float(weight)
            except ValueError:
                raise ValidationError(f"Weight '{weight}' is not a number.")
        try:
            return validate_weight(weight)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e))

    def _build_edge(self, tail: Any, head: Any, directed: bool, weight: Any) -> Edge:
        tail_node, head_node = self._resolve_endpoints(self._field(tail), self._field(head))
        parsed_weight = self._parse_weight(weight)
        if self.config.weighted:
            return self.graph.create_edge(tail_node, head_node, parsed_weight, bool(directed))
        return self.graph.create_edge(tail_node, head_node, bool(directed))

    def insert_edge(
        self, tail: Any, head: Any, directed: bool = False, weight: Any = None
    ) -> OperationOutcome:
        """
        Insert an edge between the nodes named by two endpoint fields.

        Reports INSERTED for a new edge, DOWNGRADED when an existing directed
        edge was turned undirected instead, and CONFLICT when nothing changed.
        """
        try:
            edge = self._build_edge(tail, head, directed, weight)
        except NodeNotFoundError as e:
            return self._report(OutcomeStatus.NOT_FOUND, f"Error inserting edge. {e}")
        except (ValidationError, InvalidOperationError) as e:
            message = e.args[0] if e.args else str(e)
            return self._report(OutcomeStatus.INVALID, f"Error inserting edge. {message}")

        names = f"'{edge.tail.value}' and '{edge.head.value}'"
        result = self.graph.insert_edge_object(edge)
        if result is None:
            return self._report(
                OutcomeStatus.CONFLICT,
                "Error inserting edge. The new edge conflicts with an existing edge.",
            )

        self._after_mutation()
        if result is edge:
            return self._report(
                OutcomeStatus.INSERTED, f"Edge between nodes {names} inserted.", result
            )
        return self._report(
            OutcomeStatus.DOWNGRADED,
            f"Edge between nodes {names} was converted into an undirected edge.",
            result,
        )

    def remove_edge(
        self, tail: Any, head: Any, directed: bool = False, weight: Any = None
    ) -> OperationOutcome:
        """Remove the edge between the nodes named by two endpoint fields, in either direction."""
        try:
            probe = self._build_edge(tail, head, directed, weight)
        except NodeNotFoundError as e:
            return self._report(OutcomeStatus.NOT_FOUND, f"Error removing edge. {e}")
        except (ValidationError, InvalidOperationError) as e:
            message = e.args[0] if e.args else str(e)
            return self._report(OutcomeStatus.INVALID, f"Error removing edge. {message}")

        names = f"'{probe.tail.value}' and '{probe.head.value}'"
        if not self.graph.remove_edge_object(probe):
            return self._report(
                OutcomeStatus.NOT_FOUND, f"Error removing edge. No edge between nodes {names}."
            )

        self._after_mutation()
        return self._report(OutcomeStatus.REMOVED, f"Edge between nodes {names} removed.")

    def dump(self) -> str:
        """Human-readable dump of the graph for debugging."""
        return DUMP_HEADER + str(self.graph)

    def snapshot(self) -> Dict[str, Any]:
        """Fresh render snapshot of the graph."""
        return GraphSnapshot(self.graph).to_dict()

    def apply(self, operation: Dict[str, Any]) -> OperationOutcome:
        """
        Apply one script operation.

        Args:
            operation: Mapping with an ``op`` key (``insert_node``, ``remove_node``,
                ``insert_edge``, ``remove_edge``, ``dump`` or ``snapshot``) and the
                fields that operation needs

        Returns:
            OperationOutcome; ``dump`` and ``snapshot`` report SHOWN with the
            text or snapshot as subject
        """
        op = operation.get("op")
        if op == "insert_node":
            return self.insert_node(operation.get("value"))
        if op == "remove_node":
            return self.remove_node(operation.get("value"))
        if op in ("insert_edge", "remove_edge"):
            action = self.insert_edge if op == "insert_edge" else self.remove_edge
            return action(
                operation.get("tail"),
                operation.get("head"),
                directed=operation.get("directed", False),
                weight=operation.get("weight"),
            )
        if op == "dump":
            text = self.dump()
            return OperationOutcome(OutcomeStatus.SHOWN, text, text)
        if op == "snapshot":
            return OperationOutcome(OutcomeStatus.SHOWN, "Snapshot taken.", self.snapshot())
        return self._report(OutcomeStatus.INVALID, f"Unknown operation '{op}'.")
