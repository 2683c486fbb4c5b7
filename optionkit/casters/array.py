"""
Array caster
"""
from typing import Any, Dict, List, Union

from optionkit.casters.base import Caster
from optionkit.core.types import DeclaredType


class ArrayCaster(Caster):
    """
    Cast a value to an array

    Lists and dicts pass through untouched; any other value is wrapped in a
    single-element list.
    """

    declared_type = DeclaredType.ARRAY

    def coerce(self, value: Any) -> Union[List[Any], Dict[str, Any]]:
        if isinstance(value, (list, dict)):
            return value
        return [value]
