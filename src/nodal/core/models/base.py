"""
Core domain models base module for the graph system.

This module provides the common validation helpers used by the node and edge
models: value normalization and comparison, weight checking and formatting.
"""

import math
from typing import Any


def normalize_value(value: Any) -> Any:
    """Trim surrounding whitespace from string values; other values pass through."""
    if isinstance(value, str):
        return value.strip()
    return value


def validate_required(name: str, value: Any) -> None:
    """Validate that a required constructor argument is present."""
    if value is None:
        raise TypeError(f"{name} is required")


def validate_flag(name: str, value: Any) -> None:
    """Validate that a flag is a real boolean."""
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool")


def validate_weight(value: Any) -> float:
    """
    Validate an edge weight and return it as a float.

    Raises:
        TypeError: If the weight is missing or not a number
        ValueError: If the weight is infinite, NaN or negative
    """
    validate_required("weight", value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"weight must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"weight value {value} must be finite")
    if value < 0:
        raise ValueError(f"weight value {value} must be non-negative")
    return float(value)


def format_weight(weight: float) -> str:
    """Render a weight without losing digits; integral weights drop the trailing ``.0``."""
    if weight.is_integer():
        return str(int(weight))
    return repr(weight)


def values_match(left: Any, right: Any) -> bool:
    """
    Compare two node values.

    Booleans only match booleans, so ``True`` and ``1`` designate different nodes.
    """
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right
