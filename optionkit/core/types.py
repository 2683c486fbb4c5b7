"""
Declared option types, strictness levels and runtime value inspection
"""
from enum import Enum, IntEnum
from typing import Any, Dict, List, Union

# Runtime value representation. ``list`` is a sequential array, ``dict`` an associative one.
Value = Union[str, bool, int, float, List[Any], Dict[str, Any], None]


class DeclaredType(str, Enum):
    """Option value types a schema may declare"""
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    FLOAT = "float"  # Legacy alias kept for schemas written against the float type
    ARRAY = "array"


class Strictness(IntEnum):
    """How values are handled when they do not match the declared type"""
    COERCIVE = 0  # Best-effort conversion, degrades to None
    STRICT = 1  # Exact type required, raises on mismatch


class OptionScope(str, Enum):
    """Which store an option lives in"""
    SITE = "site"
    NETWORK = "network"


def is_integer(value: Any) -> bool:
    """True for ints that are not bools"""
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """True for ints and floats that are not bools"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, dict))


def matches_type(declared: DeclaredType, value: Any) -> bool:
    """Check a runtime value against a declared type without any coercion"""
    if declared is DeclaredType.STRING:
        return isinstance(value, str)
    if declared is DeclaredType.BOOLEAN:
        return isinstance(value, bool)
    if declared is DeclaredType.INTEGER:
        return is_integer(value)
    if declared in (DeclaredType.NUMBER, DeclaredType.FLOAT):
        return is_number(value)
    if declared is DeclaredType.ARRAY:
        return is_array(value)
    raise ValueError(f"Unknown declared type: {declared!r}")


def describe_type(value: Any) -> str:
    """
    Describe the runtime kind of a value for error messages

    Objects without a primitive kind are described by their class name.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number (float)"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array (sequential)"
    if isinstance(value, dict):
        return "array (associative)"
    return type(value).__name__


def json_kind(value: Any) -> str:
    """JSON schema type name of a runtime value"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "string"
