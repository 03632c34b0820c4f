"""
Custom exceptions for the graph system.

This module defines the hierarchy of custom exceptions used throughout the package.
Operational conflicts (a duplicate node, a rejected edge, a missing edge on removal)
are reported through return values and never raise; the exceptions below cover
contract violations and the failures of the outer layers (console, command line).
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as a malformed command script or a graph whose adjacency
    bookkeeping no longer matches its edge collection.

    Examples:
        * Script document not matching its JSON schema
        * Edge missing from one of its endpoints' adjacency lists
        * Two nodes sharing the same value
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an operation on the graph structure cannot be
    carried out at all, as opposed to being rejected as a conflict.

    Examples:
        * Invalid node operations
        * Edge creation failures
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown logging level name
        * Graph type not matching the weighted setting of a console
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Edge endpoint referring to a value with no node
        * Edge endpoint that belongs to a different graph
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Edge whose origin and destination are the same node
    """
