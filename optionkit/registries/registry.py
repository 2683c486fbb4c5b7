"""
Registry - registers a set of option schemas with the host stores
"""
from typing import Any, Dict, Iterable, List, Optional, Union

from optionkit.core.config import get_settings
from optionkit.core.exceptions import ConfigurationError
from optionkit.core.logging_config import LoggingConfig
from optionkit.core.schema import OptionSchema
from optionkit.core.types import OptionScope, Strictness
from optionkit.host.hooks import Hooks
from optionkit.host.store import NetworkOptionStore, OptionStore
from optionkit.registries.network_option_registry import NetworkOptionRegistry
from optionkit.registries.option_registry import OptionRegistry
from optionkit.support.default_resolution import PendingState

logger = LoggingConfig.get_logger(__name__)


class Registry:
    """
    Registers option schemas with the site and network stores

    Site-scoped schemas get an ``OptionRegistry``, network-scoped ones a
    ``NetworkOptionRegistry``. All network registries share one
    ``PendingState``. Stores and hooks are created on demand when not given;
    pass the stores the application reads from to see the resolved values.
    """

    def __init__(
        self,
        options: Iterable[OptionSchema],
        strict: Optional[Union[Strictness, int]] = None,
        hooks: Optional[Hooks] = None,
        site_store: Optional[OptionStore] = None,
        network_store: Optional[NetworkOptionStore] = None,
        pending: Optional[PendingState] = None,
    ):
        settings = get_settings()

        self.options: List[OptionSchema] = list(options)
        seen = set()
        for option in self.options:
            if not isinstance(option, OptionSchema):
                raise ConfigurationError(f"Expected an OptionSchema, got {type(option).__name__}")
            if (option.scope, option.name) in seen:
                raise ConfigurationError(f"Option '{option.name}' is declared more than once for scope {option.scope.value}")
            seen.add((option.scope, option.name))

        self.strict = Strictness(settings.default_strict if strict is None else strict)

        if hooks is None:
            hooks = site_store.hooks if site_store is not None else (
                network_store.hooks if network_store is not None else Hooks()
            )
        self.hooks = hooks
        self.site_store = site_store if site_store is not None else OptionStore(hooks)
        self.network_store = network_store if network_store is not None else NetworkOptionStore(hooks)
        self.pending = pending if pending is not None else PendingState()

        self.prefix = settings.option_prefix
        self._site_registries: Dict[str, OptionRegistry] = {}
        self._network_registries: Dict[str, NetworkOptionRegistry] = {}

    def set_prefix(self, prefix: str = "") -> None:
        """Set the prefix prepended to every option name at registration"""
        self.prefix = prefix.strip()

    def option_name(self, option: OptionSchema) -> str:
        return self.prefix + option.name

    def register(self, setting_group: Optional[str] = None) -> None:
        """
        Register every option

        Args:
            setting_group: When given, site options are also recorded in the site
                store's settings registry under this group. Network options are
                not part of any settings group.

        Raises:
            ConfigurationError: If an option has no name or no type
        """
        LoggingConfig.set_context(prefix=self.prefix, strict=int(self.strict))
        try:
            for option in self.options:
                if self.is_registered(option):
                    logger.debug(f"Option {option.name} is already registered", extra={"option": option.name})
                    continue

                if option.scope is OptionScope.NETWORK:
                    network_registry = NetworkOptionRegistry(option, self.network_store, self.strict, self.pending)
                    network_registry.set_prefix(self.prefix)
                    network_registry.register()
                    self._network_registries[option.name] = network_registry
                    continue

                registry = OptionRegistry(option, self.site_store, self.strict)
                registry.set_setting_group(setting_group)
                registry.set_prefix(self.prefix)
                registry.register()
                self._site_registries[option.name] = registry

            logger.info(
                f"Registered {len(self._site_registries)} site and {len(self._network_registries)} network options",
                extra={"setting_group": setting_group}
            )
        finally:
            LoggingConfig.clear_context()

    def is_registered(self, option: OptionSchema) -> bool:
        if option.scope is OptionScope.NETWORK:
            return option.name in self._network_registries
        return option.name in self._site_registries

    def deregister(self, setting_group: Optional[str] = None) -> None:
        """
        Remove every option's callbacks and delete the stored values

        Options keep the names and the setting group they were registered
        with; a later ``set_prefix`` does not change what is removed.

        Args:
            setting_group: Settings group to remove the site options from.
                Defaults to the group given at registration.
        """
        LoggingConfig.set_context(prefix=self.prefix, strict=int(self.strict))
        try:
            for option in self.options:
                if option.scope is OptionScope.NETWORK:
                    network_registry = self._network_registries.pop(option.name, None)
                    if network_registry is None:
                        continue
                    network_registry.deregister()
                    continue

                registry = self._site_registries.pop(option.name, None)
                if registry is None:
                    continue
                if setting_group is not None:
                    registry.set_setting_group(setting_group)
                registry.deregister()

            logger.info(f"Deregistered {len(self.options)} options", extra={"setting_group": setting_group})
        finally:
            LoggingConfig.clear_context()

    @property
    def registered(self) -> List[str]:
        """Names, with prefix, of the currently registered options"""
        names = [registry.option_name for registry in self._site_registries.values()]
        names.extend(registry.option_name for registry in self._network_registries.values())
        return names

    def to_dict(self) -> Dict[str, Any]:
        """Current values of the options, read through the stores"""
        site: Dict[str, Any] = {}
        network: Dict[str, Any] = {}
        for option in self.options:
            name = self.option_name(option)
            if option.scope is OptionScope.NETWORK:
                network[name] = self.network_store.get(name)
            else:
                site[name] = self.site_store.get(name)
        return {"options": site, "network_options": network}
