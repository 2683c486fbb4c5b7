"""
Type casters, one per declared option type
"""
from typing import Any, Dict, Union

from optionkit.casters.array import ArrayCaster
from optionkit.casters.base import Caster, parse_numeric
from optionkit.casters.boolean import BooleanCaster
from optionkit.casters.float import FloatCaster
from optionkit.casters.integer import IntegerCaster
from optionkit.casters.number import NumberCaster
from optionkit.casters.string import StringCaster, to_string
from optionkit.core.types import DeclaredType, Strictness

CASTERS: Dict[DeclaredType, Caster] = {
    DeclaredType.STRING: StringCaster(),
    DeclaredType.BOOLEAN: BooleanCaster(),
    DeclaredType.INTEGER: IntegerCaster(),
    DeclaredType.NUMBER: NumberCaster(),
    DeclaredType.FLOAT: FloatCaster(),
    DeclaredType.ARRAY: ArrayCaster(),
}

_missing = [declared.value for declared in DeclaredType if declared not in CASTERS]
if _missing:
    raise RuntimeError(f"No caster registered for declared types: {', '.join(_missing)}")


def get_caster(declared_type: Union[DeclaredType, str]) -> Caster:
    """Get the caster for a declared type"""
    return CASTERS[DeclaredType(declared_type)]


def cast(value: Any, declared_type: Union[DeclaredType, str], strict: Union[Strictness, int] = Strictness.COERCIVE) -> Any:
    """Cast a value to the declared type"""
    return get_caster(declared_type).cast(value, strict)


__all__ = [
    "ArrayCaster",
    "BooleanCaster",
    "CASTERS",
    "Caster",
    "FloatCaster",
    "IntegerCaster",
    "NumberCaster",
    "StringCaster",
    "cast",
    "get_caster",
    "parse_numeric",
    "to_string",
]
