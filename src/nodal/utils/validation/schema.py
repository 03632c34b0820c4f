"""
Schema Validation Components for command scripts

This module provides JSON schema-based validation for the command scripts
accepted by the command line front end. A script lists console operations
(insert/remove node, insert/remove edge, dump, snapshot) and is checked in
full before any of its operations runs.
"""

from typing import Any, Dict

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

_NODE_VALUE = {"type": ["string", "number"]}

NODE_OPERATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "op": {"enum": ["insert_node", "remove_node"]},
        "value": _NODE_VALUE,
    },
    "required": ["op", "value"],
    "additionalProperties": False,
}

EDGE_OPERATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "op": {"enum": ["insert_edge", "remove_edge"]},
        "tail": _NODE_VALUE,
        "head": _NODE_VALUE,
        "directed": {"type": "boolean"},
        "weight": {"type": "number", "minimum": 0},
    },
    "required": ["op", "tail", "head"],
    "additionalProperties": False,
}

VIEW_OPERATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {"op": {"enum": ["dump", "snapshot"]}},
    "required": ["op"],
    "additionalProperties": False,
}

SCRIPT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "weighted": {"type": "boolean"},
        "operations": {
            "type": "array",
            "items": {
                "oneOf": [
                    NODE_OPERATION_SCHEMA,
                    EDGE_OPERATION_SCHEMA,
                    VIEW_OPERATION_SCHEMA,
                ]
            },
        },
    },
    "required": ["operations"],
    "additionalProperties": False,
}


class ScriptSchemaValidator:
    """
    JSON Schema-based validator for command scripts.

    Attributes:
        schema (Dict[str, Any]): Schema every script must satisfy
    """

    def __init__(self, schema: Dict[str, Any] = SCRIPT_SCHEMA):
        self.schema = schema

    def validate_script(self, document: Any) -> ValidationResult:
        """
        Validate a parsed script document against the schema.

        Scripts with no operations are valid but produce a warning.

        Args:
            document: Parsed JSON document

        Returns:
            ValidationResult containing validation details and any errors or warnings

        Example:
            >>> validator = ScriptSchemaValidator()
            >>> result = validator.validate_script(
            ...     {"operations": [{"op": "insert_node", "value": "A"}]}
            ... )
            >>> print(result.is_valid)
            True
        """
        errors = []
        warnings = []

        try:
            json_validate(instance=document, schema=self.schema)
        except JsonSchemaError as e:
            location = "/".join(str(part) for part in e.absolute_path) or "<root>"
            errors.append(f"Schema validation failed at {location}: {e.message}")
        else:
            if not document["operations"]:
                warnings.append("Script contains no operations")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"schema": "script"},
        )
