"""
Validation package for the nodal graph package.

This package provides validation utilities: rule classes and the dataclass
type checker used by the models, the graph integrity validator, and the JSON
schema validator for command scripts.
"""

from .base import (
    ValidationResult,
    ValidationRule,
    RequiredRule,
    DataclassRule,
    validate_dataclass,
)
from .integrity import GraphIntegrityValidator
from .schema import SCRIPT_SCHEMA, ScriptSchemaValidator

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RequiredRule",
    "DataclassRule",
    "validate_dataclass",
    "GraphIntegrityValidator",
    "SCRIPT_SCHEMA",
    "ScriptSchemaValidator",
]
