"""
Tests for command script schema validation.
"""

import pytest

from nodal.utils.validation import ScriptSchemaValidator


@pytest.fixture
def validator():
    return ScriptSchemaValidator()


def test_valid_script(validator):
    """Test a script using every operation."""
    document = {
        "weighted": True,
        "operations": [
            {"op": "insert_node", "value": "A"},
            {"op": "insert_node", "value": 2},
            {"op": "insert_edge", "tail": "A", "head": 2, "directed": True, "weight": 1.5},
            {"op": "remove_edge", "tail": 2, "head": "A", "weight": 0},
            {"op": "remove_node", "value": "A"},
            {"op": "dump"},
            {"op": "snapshot"},
        ],
    }

    result = validator.validate_script(document)

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_empty_script_warns(validator):
    result = validator.validate_script({"operations": []})
    assert result.is_valid
    assert result.warnings == ["Script contains no operations"]


def test_missing_operations(validator):
    result = validator.validate_script({"weighted": False})
    assert not result.is_valid
    assert result.errors[0].startswith("Schema validation failed at <root>")


def test_unknown_operation(validator):
    result = validator.validate_script({"operations": [{"op": "merge"}]})
    assert not result.is_valid
    assert result.errors[0].startswith("Schema validation failed at operations/0")


@pytest.mark.parametrize(
    "operation",
    [
        {"op": "insert_node"},
        {"op": "insert_node", "value": None},
        {"op": "insert_edge", "tail": "A"},
        {"op": "insert_edge", "tail": "A", "head": "B", "weight": -1},
        {"op": "insert_edge", "tail": "A", "head": "B", "directed": "yes"},
        {"op": "dump", "value": "A"},
    ],
)
def test_invalid_operations(validator, operation):
    result = validator.validate_script({"operations": [operation]})
    assert not result.is_valid
    assert len(result.errors) == 1


def test_rejects_non_object_document(validator):
    assert not validator.validate_script([]).is_valid
    assert not validator.validate_script({"operations": [], "extra": 1}).is_valid
