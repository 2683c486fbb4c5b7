"""
Base caster and shared parsing helpers
"""
import math
import re
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from optionkit.core.exceptions import OptionTypeError
from optionkit.core.types import DeclaredType, Strictness, matches_type

# Decimal literal with optional sign, fraction and exponent, e.g. "12", "-1.5", ".5", "1e3"
_NUMERIC_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')
_INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')


def parse_numeric(value: str) -> Optional[Union[int, float]]:
    """
    Parse a numeric string

    Integer literals give an ``int``, decimal or exponent literals a ``float``.
    Returns None when the string is not numeric.
    """
    text = value.strip()
    if not _NUMERIC_PATTERN.match(text):
        return None
    if _INTEGER_PATTERN.match(text):
        return int(text)
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def truncate(value: float) -> Optional[int]:
    """Truncate a float toward zero; None for nan and infinities"""
    if not math.isfinite(value):
        return None
    return int(value)


class Caster(ABC):
    """
    Casts a value to a declared type

    Strict mode requires the value to match the declared type already and raises
    ``OptionTypeError`` otherwise. Coercive mode never raises.
    """

    declared_type: DeclaredType

    def cast(self, value: Any, strict: Union[Strictness, int] = Strictness.COERCIVE) -> Any:
        if value is None:
            return None
        if Strictness(strict) is Strictness.STRICT:
            return self.cast_strict(value)
        return self.coerce(value)

    def cast_strict(self, value: Any) -> Any:
        if not matches_type(self.declared_type, value):
            raise OptionTypeError(self.declared_type, value)
        return value

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """Best-effort conversion of a non-null value"""
