"""
Core domain models package for the graph system.

This package provides the node and edge models and the helpers they share.
"""

from .base import (
    format_weight,
    normalize_value,
    validate_flag,
    validate_required,
    validate_weight,
    values_match,
)
from .node import NOT_FOUND, Node
from .edge import Edge, WeightedEdge

__all__ = [
    # Base utilities
    "format_weight",
    "normalize_value",
    "validate_flag",
    "validate_required",
    "validate_weight",
    "values_match",
    # Node models
    "NOT_FOUND",
    "Node",
    # Edge models
    "Edge",
    "WeightedEdge",
]
