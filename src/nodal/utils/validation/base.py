"""
Base Validation Components for the nodal graph package

This module provides the foundational validation components used throughout the package.
It includes the ValidationResult class for reporting validation outcomes and a small
hierarchy of ValidationRule classes.

The module supports:
- Validation results with errors, warnings, and context
- Required field validation (used for console input fields)
- Dataclass field validation (used by the edge models)
"""

from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    Base class for all validation rules.

    Subclasses override validate() to implement specific validation logic.

    Attributes:
        error_message (str): Message to display when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")


class RequiredRule(ValidationRule):
    """
    Rule for validating required fields.

    A value passes when it is not None and, if it's a string, not empty after
    stripping whitespace.
    """

    def validate(self, value: Any) -> bool:
        if isinstance(value, str):
            return bool(value.strip())
        return value is not None


class DataclassRule(ValidationRule):
    """
    Rule for validating dataclass fields.

    Ensures that the fields of a dataclass instance match their type hints.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        super().__init__(error_message or f"Invalid value for {dataclass_type.__name__}")
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        if expected_type is Any:
            return True

        origin = get_origin(expected_type)

        # Optional[...] and other unions
        if origin is Union:
            return any(self._validate_type(value, arg) for arg in get_args(expected_type))

        if value is None:
            return expected_type is type(None)

        if origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            return all(self._validate_type(item, args[0]) for item in value)
        elif origin is dict:
            if not isinstance(value, dict):
                return False
            args = get_args(expected_type)
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._validate_type(k, key_type) and self._validate_type(v, val_type)
                for k, v in value.items()
            )
        elif origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def validate(self, value: Any) -> bool:
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if not self._validate_type(getattr(value, field_name), field_type):
                return False

        return True


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The class's own ``__post_init__`` runs first, so it can normalize or reject
    values before the field types are checked.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        if original_post_init:
            original_post_init(self)

        validator = DataclassRule(cls)
        if not validator.validate(self):
            raise TypeError(f"Invalid field types in {cls.__name__}")

    cls.__post_init__ = validated_post_init
    return cls
