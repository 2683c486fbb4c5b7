"""
Binds one site-scoped option to the host hooks
"""
from typing import Any, Callable, List, Optional, Tuple, Union

from optionkit.core.logging_config import LoggingConfig
from optionkit.core.schema import OptionSchema
from optionkit.core.types import Strictness
from optionkit.host.store import OptionStore
from optionkit.registries.events import site_events
from optionkit.support.resolver import OutputResolver
from optionkit.support.sanitizer import InputSanitizer
from optionkit.support.validator import InputValidator

logger = LoggingConfig.get_logger(__name__)

# (kind, event, callback, priority)
Binding = Tuple[str, str, Callable[..., Any], int]


class BindingsMixin:
    """Keeps track of bound callbacks so they can be removed again"""

    def _init_bindings(self) -> None:
        self._bindings: List[Binding] = []

    def _add_filter(self, event: str, callback: Callable[..., Any], priority: int) -> None:
        self.hooks.add_filter(event, callback, priority)
        self._bindings.append(("filter", event, callback, priority))

    def _add_action(self, event: str, callback: Callable[..., Any], priority: int) -> None:
        self.hooks.add_action(event, callback, priority)
        self._bindings.append(("action", event, callback, priority))

    def _remove_bindings(self) -> None:
        for kind, event, callback, priority in self._bindings:
            if kind == "filter":
                self.hooks.remove_filter(event, callback, priority)
            else:
                self.hooks.remove_action(event, callback, priority)
        self._bindings = []

    @property
    def bound_events(self) -> List[str]:
        return [event for _, event, _, _ in self._bindings]


class OptionRegistry(BindingsMixin):
    """
    Site-scoped option registration

    The store tells its default filter whether the caller passed a default, so
    no transient state is needed: a passed default is resolved, otherwise the
    schema default is.
    """

    def __init__(self, option: OptionSchema, store: OptionStore, strict: Union[Strictness, int] = Strictness.COERCIVE):
        self.option = option
        self.store = store
        self.hooks = store.hooks
        self.strict = Strictness(strict)
        self.option_name = option.name
        self.setting_group: Optional[str] = None
        self._registered_group: Optional[str] = None
        self._init_bindings()

    def set_prefix(self, prefix: str = "") -> None:
        self.option_name = prefix.strip() + self.option.name

    def set_setting_group(self, setting_group: Optional[str] = None) -> None:
        self.setting_group = setting_group

    def register(self) -> None:
        """
        Bind the option's callbacks

        Raises:
            ConfigurationError: If the option has no name or no type
        """
        self.option.check_registrable(self.option_name)

        option_name = self.option_name
        priority = self.option.priority
        events = site_events(option_name)

        sanitizer = InputSanitizer()
        resolver = OutputResolver(self.option.type, self.strict)

        def resolve_default(default: Any, name: str = option_name, passed_default: bool = False, *args: Any) -> Any:
            return resolver.resolve(default if passed_default else self.option.default)

        def resolve_value(value: Any, *args: Any) -> Any:
            return resolver.resolve(value)

        def sanitize(value: Any, *args: Any) -> Any:
            return sanitizer.sanitize(value)

        self._add_filter(events.resolve_default, resolve_default, priority)
        self._add_filter(events.resolve_value, resolve_value, priority)

        if self.setting_group:
            self.store.register_setting(
                self.setting_group,
                option_name,
                {**self.option.setting_args(option_name), "sanitize_callback": sanitize, "priority": priority},
            )
            self._registered_group = self.setting_group
        else:
            self._add_filter(events.sanitize_on_write, sanitize, priority)

        if self.strict is Strictness.STRICT:
            validator = InputValidator(self.option.type, self.option.constraints)

            def validate_on_add(name: str, value: Any, *args: Any) -> None:
                if name == option_name:
                    validator.validate(value)

            def validate_on_update(name: str, old_value: Any, value: Any, *args: Any) -> None:
                if name == option_name:
                    validator.validate(value)

            self._add_action(events.validate_on_add, validate_on_add, priority)
            self._add_action(events.validate_on_update, validate_on_update, priority)

        logger.debug(
            f"Registered option {option_name}",
            extra={"option": option_name, "events": self.bound_events, "strict": int(self.strict)}
        )

    def deregister(self) -> None:
        """
        Remove the option's callbacks and delete its stored value

        The setting is removed from the group set with ``set_setting_group``,
        or else from the group the option was registered with.
        """
        self.option.check_registrable(self.option_name)

        setting_group = self.setting_group or self._registered_group
        if setting_group:
            self.store.unregister_setting(setting_group, self.option_name)
            self._registered_group = None

        self._remove_bindings()
        self.store.delete(self.option_name)
        logger.debug(f"Deregistered option {self.option_name}", extra={"option": self.option_name})
