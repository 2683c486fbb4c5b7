"""
Envelope wrapping for values written to the store
"""
from typing import Any, Dict

ENVELOPE_MARKER = "__optionkit"


def is_envelope(value: Any) -> bool:
    """Whether the value is already wrapped"""
    return isinstance(value, dict) and ENVELOPE_MARKER in value


def unwrap(value: Any) -> Any:
    """Return the wrapped value, or the value itself when it is not an envelope"""
    if is_envelope(value):
        return value[ENVELOPE_MARKER]
    return value


class InputSanitizer:
    """
    Wraps every value before it reaches the store

    The store cannot tell a stored ``None``, ``False`` or empty value apart from
    a missing row. Inside the envelope those values stay distinguishable.
    """

    def sanitize(self, value: Any) -> Dict[str, Any]:
        if is_envelope(value):
            return value
        return {ENVELOPE_MARKER: value}

    def __call__(self, value: Any, *args: Any) -> Dict[str, Any]:
        return self.sanitize(value)
