"""
String caster
"""
import json
import math
from typing import Any, Optional

from optionkit.casters.base import Caster
from optionkit.core.logging_config import LoggingConfig
from optionkit.core.types import DeclaredType

logger = LoggingConfig.get_logger(__name__)


def format_float(value: float) -> str:
    """Render a float without locale and without a trailing ``.0`` for integral values"""
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def to_string(value: Any) -> Optional[str]:
    """
    Convert a value to a string

    Returns None when the value has no string form: containers holding
    non-JSON values (NaN and infinities included), and objects that do not
    define ``__str__``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, (list, dict)):
        if not value:
            return ""
        try:
            return json.dumps(value, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError):
            return None
    if type(value).__str__ is object.__str__:
        return None
    try:
        return str(value)
    except (TypeError, ValueError):
        return None


class StringCaster(Caster):
    """
    Cast a value to a string

    Strict mode performs no type check: the value is returned as is.
    """

    declared_type = DeclaredType.STRING

    def cast_strict(self, value: Any) -> Any:
        return value

    def coerce(self, value: Any) -> Optional[str]:
        result = to_string(value)
        if result is None:
            logger.debug(
                "Unable to convert value to string",
                extra={"value_type": type(value).__name__}
            )
        return result
