"""
Tests for network option registration
"""
import pytest

from optionkit.core.exceptions import ConfigurationError, OptionTypeError
from optionkit.core.schema import OptionSchema
from optionkit.core.types import Strictness
from optionkit.registries.network_option_registry import NetworkOptionRegistry


def register(network_store, schema, strict=Strictness.COERCIVE, pending=None, prefix=""):
    registry = NetworkOptionRegistry(schema, network_store, strict, pending)
    registry.set_prefix(prefix)
    registry.register()
    return registry


class TestDefaultReads:
    """Reads of options that are not stored"""

    def test_boolean_without_default_gives_none(self, network_store):
        """Test the store's False placeholder does not leak out as a value"""
        register(network_store, OptionSchema.network("foo", "boolean"))

        assert network_store.get("foo") is None

    def test_boolean_schema_default(self, network_store):
        register(network_store, OptionSchema.network("foo", "boolean", default=True))

        assert network_store.get("foo") is True

    def test_repeated_reads(self, network_store):
        """Test reads served from the not-option cache resolve the same way"""
        register(network_store, OptionSchema.network("foo", "integer", default="3"))

        assert network_store.get("foo") == 3
        assert network_store.get("foo") == 3

    def test_caller_default(self, network_store):
        register(network_store, OptionSchema.network("foo", "integer", default=3))

        assert network_store.get("foo", "7") == 7

    def test_boolean_caller_default_true(self, network_store):
        """Test a caller default of True comes back unchanged"""
        register(network_store, OptionSchema.network("foo", "boolean", default=False))

        assert network_store.get("foo", True) is True

    def test_other_network(self, network_store):
        register(network_store, OptionSchema.network("foo", "integer", default=3))
        network_store.add("foo", 4)

        assert network_store.get("foo") == 4
        assert network_store.get("foo", network_id=2) == 3


class TestAdd:
    """Adds of network options"""

    def test_add_with_schema_default(self, network_store, pending):
        """Test a schema default does not make the add think the option exists"""
        register(network_store, OptionSchema.network("foo", "integer", default=5), pending=pending)

        assert network_store.add("foo", 3) is True
        assert network_store.get("foo") == 3
        assert len(pending) == 0

    def test_add_after_read(self, network_store):
        register(network_store, OptionSchema.network("foo", "integer", default=5))
        assert network_store.get("foo") == 5

        assert network_store.add("foo", 3) is True
        assert network_store.get("foo") == 3

    def test_nested_read_during_add(self, network_store, hooks, pending):
        """Test a read made while adding sees the raw placeholder"""
        register(network_store, OptionSchema.network("foo", "integer", default=5), pending=pending)
        seen = []

        def read_during_add(value, *args):
            seen.append((pending.is_adding("foo"), network_store.get("foo")))
            return value

        hooks.add_filter("pre_add_site_option_foo", read_during_add, 100)

        assert network_store.add("foo", 3) is True
        assert seen == [(True, False)]
        assert not pending.is_adding("foo")
        assert network_store.get("foo") == 3

    def test_stored_false(self, network_store):
        register(network_store, OptionSchema.network("foo", "boolean", default=True))

        assert network_store.add("foo", False) is True
        assert network_store.get("foo") is False

    def test_existing_row(self, network_store):
        register(network_store, OptionSchema.network("foo", "string"))
        network_store.add("foo", "a")

        assert network_store.add("foo", "b") is False
        assert network_store.get("foo") == "a"

    def test_strict_rejects_and_clears_pending(self, network_store, pending):
        register(network_store, OptionSchema.network("foo", "integer", default=5), Strictness.STRICT, pending)

        with pytest.raises(OptionTypeError):
            network_store.add("foo", "3")

        assert len(pending) == 0
        assert network_store.get("foo") == 5


class TestUpdate:
    """Updates of network options"""

    def test_update_of_missing_row_adds(self, network_store):
        register(network_store, OptionSchema.network("foo", "array", default=["x"]))

        assert network_store.update("foo", "a") is True
        assert network_store.get("foo") == ["a"]

    def test_update_existing(self, network_store):
        register(network_store, OptionSchema.network("foo", "number"))
        network_store.add("foo", 1)

        assert network_store.update("foo", "2.5") is True
        assert network_store.get("foo") == 2.5

    def test_strict_update_rejects(self, network_store):
        register(network_store, OptionSchema.network("foo", "number"), Strictness.STRICT)
        network_store.add("foo", 1)

        with pytest.raises(OptionTypeError):
            network_store.update("foo", "2.5")

        assert network_store.get("foo") == 1


class TestRegistration:
    """Binding and removal of callbacks"""

    def test_bound_events(self, network_store):
        registry = register(network_store, OptionSchema.network("foo", "string"), prefix="my_")

        assert registry.bound_events == [
            "pre_add_site_option_my_foo",
            "pre_update_site_option_my_foo",
            "add_site_option_my_foo",
            "after_add_site_option_my_foo",
            "default_site_option_my_foo",
            "site_option_my_foo",
        ]

    def test_missing_type(self, network_store):
        schema = OptionSchema.network("foo", "string").model_copy(update={"type": None})

        with pytest.raises(ConfigurationError):
            register(network_store, schema)

    def test_deregister(self, network_store, hooks):
        registry = register(network_store, OptionSchema.network("foo", "integer", default=5))
        network_store.add("foo", 1)

        registry.deregister()

        assert network_store.get("foo") is False
        assert not hooks.has_filter("site_option_foo")
        assert not hooks.has_action("after_add_site_option_foo")
