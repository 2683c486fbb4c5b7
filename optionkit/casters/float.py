"""
Float caster for the legacy float type
"""
from typing import Any, Optional

from optionkit.casters.base import Caster, parse_numeric
from optionkit.core.types import DeclaredType


class FloatCaster(Caster):
    """Cast a value to a float"""

    declared_type = DeclaredType.FLOAT

    def coerce(self, value: Any) -> Optional[float]:
        if isinstance(value, (bool, int, float)):
            return float(value)
        if isinstance(value, str):
            number = parse_numeric(value)
            return None if number is None else float(number)
        return None
