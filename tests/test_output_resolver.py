"""
Tests for the output resolver
"""
import pytest

from optionkit.casters import cast
from optionkit.core.exceptions import OptionTypeError
from optionkit.core.types import DeclaredType, Strictness
from optionkit.support.resolver import OutputResolver
from optionkit.support.sanitizer import InputSanitizer

VALUES = [False, True, 0, -1, 1.5, "", "12", "foo", [], ["a"], {"a": 1}]


def outcome(func, *args):
    """Result of a call, or the runtime kind reported by its type error"""
    try:
        return ("value", func(*args))
    except OptionTypeError as exc:
        return ("error", exc.actual)


class TestOutputResolver:
    """Tests for OutputResolver"""

    @pytest.mark.parametrize("declared", list(DeclaredType))
    @pytest.mark.parametrize("strict", [Strictness.COERCIVE, Strictness.STRICT])
    @pytest.mark.parametrize("value", VALUES)
    def test_envelope_is_transparent(self, declared, strict, value):
        """Test resolving a wrapped value equals casting the plain value"""
        resolver = OutputResolver(declared, strict)

        resolved = outcome(resolver.resolve, InputSanitizer().sanitize(value))

        assert resolved == outcome(cast, value, declared, strict)

    @pytest.mark.parametrize("declared", list(DeclaredType))
    @pytest.mark.parametrize("strict", [Strictness.COERCIVE, Strictness.STRICT])
    def test_null_propagation(self, declared, strict):
        resolver = OutputResolver(declared, strict)

        assert resolver.resolve(None) is None
        assert resolver.resolve(InputSanitizer().sanitize(None)) is None

    def test_plain_value_passes_through_caster(self):
        assert OutputResolver("integer").resolve("12") == 12

    def test_strict_mismatch_propagates(self):
        resolver = OutputResolver(DeclaredType.INTEGER, Strictness.STRICT)

        with pytest.raises(OptionTypeError):
            resolver.resolve(InputSanitizer().sanitize("12"))

    def test_strict_wrapped_match(self):
        resolver = OutputResolver(DeclaredType.BOOLEAN, Strictness.STRICT)

        assert resolver.resolve(InputSanitizer().sanitize(False)) is False

    def test_accepts_int_strictness(self):
        assert OutputResolver("array", 1).strict is Strictness.STRICT
