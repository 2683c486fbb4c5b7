"""
Integer caster
"""
from typing import Any, Optional

from optionkit.casters.base import Caster, parse_numeric, truncate
from optionkit.core.types import DeclaredType


class IntegerCaster(Caster):
    """
    Cast a value to an integer

    Floats and numeric strings are truncated toward zero. Arrays and objects
    have no integer form and give None.
    """

    declared_type = DeclaredType.INTEGER

    def coerce(self, value: Any) -> Optional[int]:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return truncate(value)
        if isinstance(value, str):
            number = parse_numeric(value)
            if number is None:
                return None
            return number if isinstance(number, int) else truncate(number)
        return None
