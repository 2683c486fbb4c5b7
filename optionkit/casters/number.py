"""
Number caster, integer or float
"""
from typing import Any, Optional, Union

from optionkit.casters.base import Caster, parse_numeric
from optionkit.core.types import DeclaredType


class NumberCaster(Caster):
    """
    Cast a value to a number

    Numeric strings keep the form of their literal: "12" gives 12, "1.2" gives 1.2.
    """

    declared_type = DeclaredType.NUMBER

    def coerce(self, value: Any) -> Optional[Union[int, float]]:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            return parse_numeric(value)
        return None
