"""
Read-side resolution of stored values
"""
from typing import Any, Union

from optionkit.casters import get_caster
from optionkit.core.types import DeclaredType, Strictness
from optionkit.support.sanitizer import unwrap


class OutputResolver:
    """
    Unwraps a stored value and casts it to the declared type

    ``None`` is returned as is; casters never see it.
    """

    def __init__(self, declared_type: Union[DeclaredType, str], strict: Union[Strictness, int] = Strictness.COERCIVE):
        self.declared_type = DeclaredType(declared_type)
        self.strict = Strictness(strict)
        self._caster = get_caster(self.declared_type)

    def resolve(self, value: Any) -> Any:
        value = unwrap(value)
        if value is None:
            return None
        return self._caster.cast(value, self.strict)
