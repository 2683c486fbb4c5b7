"""
Exceptions raised while validating, casting and registering options
"""
from typing import Any, Dict, Union

from optionkit.core.types import DeclaredType, describe_type


class OptionError(Exception):
    """Base class for all optionkit errors"""


class OptionTypeError(OptionError, TypeError):
    """A value does not have the runtime type its option declares"""

    def __init__(self, expected: Union[DeclaredType, str], value: Any):
        self.expected = DeclaredType(expected) if not isinstance(expected, DeclaredType) else expected
        self.actual = describe_type(value)
        self.value = value
        super().__init__(f"Value must be of type {self.expected.value}, {self.actual} given.")

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "error": "type",
            "expected": self.expected.value,
            "actual": self.actual,
            "message": str(self),
        }


class ConstraintError(OptionError, ValueError):
    """A value failed one of the constraints attached to its option"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {"error": "constraint", "message": self.message}


class ConfigurationError(OptionError, ValueError):
    """An option schema cannot be registered"""
