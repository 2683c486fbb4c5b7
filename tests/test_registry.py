"""
Tests for the Registry orchestrator
"""
import pytest

from optionkit.core.config import get_settings
from optionkit.core.exceptions import ConfigurationError
from optionkit.core.schema import OptionSchema
from optionkit.core.types import Strictness
from optionkit.host.store import NetworkOptionStore, OptionStore
from optionkit.registries.registry import Registry


@pytest.fixture
def options():
    return [
        OptionSchema.site("enabled", "boolean", default=True),
        OptionSchema.site("title", "string", default="Hello"),
        OptionSchema.network("limit", "integer", default=10),
    ]


@pytest.fixture
def registry(options, hooks, site_store, network_store):
    return Registry(options, hooks=hooks, site_store=site_store, network_store=network_store)


class TestRegistry:
    """Tests for Registry"""

    def test_register_site_and_network(self, registry, site_store, network_store):
        registry.register()

        assert site_store.get("enabled") is True
        assert site_store.get("title") == "Hello"
        assert network_store.get("limit") == 10

    def test_to_dict(self, registry, site_store, network_store):
        registry.register()
        site_store.add("title", "World")
        network_store.add("limit", "25")

        assert registry.to_dict() == {
            "options": {"enabled": True, "title": "World"},
            "network_options": {"limit": 25},
        }

    def test_prefix(self, registry, site_store, network_store):
        registry.set_prefix(" acme_ ")
        registry.register()

        assert registry.registered == ["acme_enabled", "acme_title", "acme_limit"]
        assert site_store.get("acme_title") == "Hello"
        assert network_store.get("acme_limit") == 10
        assert site_store.get("title") is False

    def test_deregister(self, registry, site_store, network_store, hooks):
        registry.register()
        site_store.add("enabled", False)
        network_store.add("limit", 3)

        registry.deregister()

        assert site_store.get("enabled") is False
        assert site_store.get("title") is False
        assert network_store.get("limit") is False
        assert not hooks.has_filter("option_title")
        assert registry.registered == []

    def test_deregister_before_register(self, registry):
        registry.deregister()

        assert registry.registered == []

    def test_setting_group_only_covers_site_options(self, registry, site_store):
        registry.register("general")

        settings = site_store.registered_settings()

        assert sorted(settings) == ["enabled", "title"]
        assert {setting["group"] for setting in settings.values()} == {"general"}

    def test_deregister_setting_group(self, registry, site_store):
        registry.register("general")
        registry.deregister("general")

        assert site_store.registered_settings() == {}

    def test_strict(self, options, hooks, site_store, network_store):
        registry = Registry(
            options, strict=Strictness.STRICT, hooks=hooks, site_store=site_store, network_store=network_store
        )
        registry.register()

        with pytest.raises(TypeError):
            site_store.add("title", 1)
        with pytest.raises(TypeError):
            network_store.add("limit", "25")

    def test_registration_error_propagates(self, hooks, site_store, network_store):
        registry = Registry(
            [OptionSchema(name="untyped")], hooks=hooks, site_store=site_store, network_store=network_store
        )

        with pytest.raises(ConfigurationError):
            registry.register()

    def test_rejects_non_schema(self):
        with pytest.raises(ConfigurationError):
            Registry([{"name": "foo", "type": "string"}])

    def test_creates_missing_collaborators(self, options):
        registry = Registry(options)

        assert isinstance(registry.site_store, OptionStore)
        assert isinstance(registry.network_store, NetworkOptionStore)
        assert registry.site_store.hooks is registry.hooks
        assert registry.network_store.hooks is registry.hooks

    def test_hooks_taken_from_store(self, options, site_store):
        registry = Registry(options, site_store=site_store)

        assert registry.hooks is site_store.hooks

    def test_defaults_from_settings(self, options, monkeypatch):
        monkeypatch.setenv("OPTIONKIT_DEFAULT_STRICT", "1")
        monkeypatch.setenv("OPTIONKIT_OPTION_PREFIX", "env_")
        get_settings.cache_clear()

        registry = Registry(options)

        assert registry.strict is Strictness.STRICT
        assert registry.prefix == "env_"


class TestRegistryBookkeeping:
    """Repeated registration and settings groups"""

    def test_register_twice_then_deregister(self, registry, site_store, network_store, hooks):
        registry.register()
        registry.register()

        assert len(registry.registered) == 3

        registry.deregister()

        assert not hooks.has_filter("option_title")
        assert not hooks.has_filter("default_option_title")
        assert not hooks.has_filter("site_option_limit")
        assert site_store.get("title") is False
        assert network_store.get("limit") is False

    def test_duplicate_names_rejected(self):
        with pytest.raises(ConfigurationError):
            Registry([OptionSchema.site("foo", "string"), OptionSchema.site("foo", "integer")])

    def test_same_name_in_both_scopes(self, hooks, site_store, network_store):
        registry = Registry(
            [OptionSchema.site("foo", "string", default="a"), OptionSchema.network("foo", "integer", default=1)],
            hooks=hooks, site_store=site_store, network_store=network_store,
        )
        registry.register()

        assert site_store.get("foo") == "a"
        assert network_store.get("foo") == 1

    def test_deregister_uses_registration_group(self, registry, site_store, hooks):
        registry.register("general")

        registry.deregister()

        assert site_store.registered_settings() == {}
        assert not hooks.has_filter("sanitize_option_title")

    def test_deregister_keeps_registered_names(self, registry, site_store, hooks):
        registry.register()
        registry.set_prefix("other_")

        registry.deregister()

        assert not hooks.has_filter("option_title")
        assert registry.registered == []
