"""
Binds one network-scoped option to the host hooks
"""
from typing import Any, Optional, Union

from optionkit.core.logging_config import LoggingConfig
from optionkit.core.schema import OptionSchema
from optionkit.core.types import Strictness
from optionkit.host.store import NetworkOptionStore
from optionkit.registries.events import network_events
from optionkit.registries.option_registry import BindingsMixin
from optionkit.support.default_resolution import DefaultResolutionState, PendingState
from optionkit.support.resolver import OutputResolver
from optionkit.support.sanitizer import InputSanitizer
from optionkit.support.validator import InputValidator

logger = LoggingConfig.get_logger(__name__)


class NetworkOptionRegistry(BindingsMixin):
    """
    Network-scoped option registration

    The network store reads with a ``False`` default it cannot tell apart from
    a caller's default, so the read filters go through a
    ``DefaultResolutionState`` and the add filters mark the option as pending.
    """

    def __init__(
        self,
        option: OptionSchema,
        store: NetworkOptionStore,
        strict: Union[Strictness, int] = Strictness.COERCIVE,
        pending: Optional[PendingState] = None,
    ):
        self.option = option
        self.store = store
        self.hooks = store.hooks
        self.strict = Strictness(strict)
        self.pending = pending if pending is not None else PendingState()
        self.option_name = option.name
        self.state: Optional[DefaultResolutionState] = None
        self._init_bindings()

    def set_prefix(self, prefix: str = "") -> None:
        self.option_name = prefix.strip() + self.option.name

    def register(self) -> None:
        """
        Bind the option's callbacks

        Raises:
            ConfigurationError: If the option has no name or no type
        """
        self.option.check_registrable(self.option_name)

        option_name = self.option_name
        priority = self.option.priority
        events = network_events(option_name)
        strict = self.strict is Strictness.STRICT

        sanitizer = InputSanitizer()
        validator = InputValidator(self.option.type, self.option.constraints)
        resolver = OutputResolver(self.option.type, self.strict)
        state = DefaultResolutionState(
            option_name,
            resolver,
            self.option.default,
            self.store.not_options,
            self.pending,
        )
        self.state = state

        def pre_add(value: Any, *args: Any) -> Any:
            self.pending.begin_add(option_name)
            if strict:
                validator.validate(value)
            return sanitizer.sanitize(value)

        def pre_update(value: Any, *args: Any) -> Any:
            if strict:
                validator.validate(value)
            return sanitizer.sanitize(value)

        def clear_pending(*args: Any) -> None:
            self.pending.complete_add(option_name)

        def resolve_default(default: Any, name: str = option_name, network_id: Optional[int] = None, *args: Any) -> Any:
            return state.resolve_default(default, network_id)

        def resolve_value(value: Any, name: str = option_name, network_id: Optional[int] = None, *args: Any) -> Any:
            return state.resolve_value(value, network_id)

        self._add_filter(events.validate_on_add, pre_add, priority)
        self._add_filter(events.validate_on_update, pre_update, priority)
        self._add_action(events.add_succeeded, clear_pending, priority)
        self._add_action(events.add_finished, clear_pending, priority)
        self._add_filter(events.resolve_default, resolve_default, priority)
        self._add_filter(events.resolve_value, resolve_value, priority)

        logger.debug(
            f"Registered network option {option_name}",
            extra={"option": option_name, "events": self.bound_events, "strict": int(self.strict)}
        )

    def deregister(self) -> None:
        """Remove the option's callbacks and delete its stored value"""
        self.option.check_registrable(self.option_name)

        self._remove_bindings()
        self.pending.complete_add(self.option_name)
        self.store.delete(self.option_name)
        logger.debug(f"Deregistered network option {self.option_name}", extra={"option": self.option_name})
