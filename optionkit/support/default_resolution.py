"""
Default resolution for stores whose default read cannot tell "absent" from "falsy"

A network-scoped store answers a read of a missing row with a placeholder
default, ``False`` unless the caller passed another one, and shares one
negative cache between the default read and the value read. The state kept
here lets the read filters decide whether the placeholder should be replaced
by the schema default, resolved as a caller default, or left alone because an
add is in progress.
"""
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from optionkit.core.logging_config import LoggingConfig
from optionkit.core.types import DeclaredType
from optionkit.support.resolver import OutputResolver

logger = LoggingConfig.get_logger(__name__)

# Returns the store's not-option cache of a scope (None for the store's own): name -> True when no row exists
NotOptionLookup = Callable[[Optional[Any]], Mapping[str, bool]]

# The store's own "nothing here" default
STORE_PLACEHOLDER = False


class PendingStatus(str, Enum):
    """Transient state of an option name"""
    IDLE = "idle"
    ADDING = "adding"


class PendingState:
    """
    Per-option-name pending state

    Entries exist only between the start and the completion of an add. The
    host runs that sequence non-reentrantly per name; share one instance
    between concurrent requests only with external synchronization.
    """

    def __init__(self):
        self._states: Dict[str, PendingStatus] = {}

    def begin_add(self, name: str) -> None:
        self._states[name] = PendingStatus.ADDING

    def complete_add(self, name: str) -> None:
        self._states.pop(name, None)

    def status(self, name: str) -> PendingStatus:
        return self._states.get(name, PendingStatus.IDLE)

    def is_adding(self, name: str) -> bool:
        return self.status(name) is PendingStatus.ADDING

    @contextmanager
    def adding(self, name: str) -> Iterator[None]:
        """Mark a name as being added for the duration of the block"""
        self.begin_add(name)
        try:
            yield
        finally:
            self.complete_add(name)

    def __len__(self) -> int:
        return len(self._states)


class DefaultResolutionState:
    """
    Read filters for one network-scoped option

    ``resolve_default`` handles the store's default read, ``resolve_value``
    the read of a fetched value.
    """

    def __init__(
        self,
        option_name: str,
        resolver: OutputResolver,
        schema_default: Any,
        not_options: NotOptionLookup,
        pending: PendingState,
    ):
        self.option_name = option_name
        self.resolver = resolver
        self.schema_default = schema_default
        self.not_options = not_options
        self.pending = pending

    @property
    def declared_type(self) -> DeclaredType:
        return self.resolver.declared_type

    def is_not_option(self, scope_id: Optional[Any] = None) -> bool:
        """Whether the store knows there is no row for this option"""
        return self.not_options(scope_id).get(self.option_name) is True

    def resolve_default(self, placeholder: Any, scope_id: Optional[Any] = None) -> Any:
        # While adding, the host reads the option to check it does not exist yet.
        # Anything but its own placeholder would make it skip the add.
        if self.pending.is_adding(self.option_name):
            return placeholder

        if not self.is_not_option(scope_id):
            return placeholder

        if self.declared_type is DeclaredType.BOOLEAN:
            # Known limitation: a caller default of True cannot be told apart
            # from a placeholder of True.
            if placeholder is True:
                return True
            if not isinstance(placeholder, bool):
                return self.resolver.resolve(placeholder)
            return self._resolve_schema_default()

        if placeholder is not STORE_PLACEHOLDER:
            return self.resolver.resolve(placeholder)

        return self._resolve_schema_default()

    def resolve_value(self, value: Any, scope_id: Optional[Any] = None) -> Any:
        # A missing row already went through resolve_default
        if self.is_not_option(scope_id):
            return value
        return self.resolver.resolve(value)

    def _resolve_schema_default(self) -> Any:
        logger.debug(
            f"Falling back to schema default for {self.option_name}",
            extra={"option": self.option_name}
        )
        return self.resolver.resolve(self.schema_default)
