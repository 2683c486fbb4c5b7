"""
Boolean caster
"""
from typing import Any

from optionkit.casters.base import Caster
from optionkit.core.types import DeclaredType


class BooleanCaster(Caster):
    """
    Cast a value to a boolean

    Coercion follows plain truthiness: empty strings, zero, empty arrays are
    False and everything else, negative numbers included, is True.
    """

    declared_type = DeclaredType.BOOLEAN

    def coerce(self, value: Any) -> bool:
        return bool(value)
