"""
Synchronous filter/action hook registry
"""
from typing import Any, Callable, Dict, List, Optional

from optionkit.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

DEFAULT_PRIORITY = 10

Callback = Callable[..., Any]


class Hooks:
    """
    Filters and actions keyed by event name

    Callbacks run inline in ascending priority order, and in registration
    order within one priority. A filter callback receives the current value
    followed by the event's extra arguments and returns the new value; an
    action callback receives the event's arguments and its return value is
    ignored. Exceptions raised by callbacks propagate to the caller.
    """

    def __init__(self):
        self._filters: Dict[str, Dict[int, List[Callback]]] = {}
        self._actions: Dict[str, Dict[int, List[Callback]]] = {}

    @staticmethod
    def _add(table: Dict[str, Dict[int, List[Callback]]], event: str, callback: Callback, priority: int) -> None:
        table.setdefault(event, {}).setdefault(priority, []).append(callback)

    @staticmethod
    def _remove(table: Dict[str, Dict[int, List[Callback]]], event: str, callback: Callback, priority: int) -> bool:
        callbacks = table.get(event, {}).get(priority)
        if not callbacks or callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            del table[event][priority]
        if not table[event]:
            del table[event]
        return True

    @staticmethod
    def _has(table: Dict[str, Dict[int, List[Callback]]], event: str, callback: Optional[Callback]) -> bool:
        priorities = table.get(event)
        if not priorities:
            return False
        if callback is None:
            return True
        return any(callback in callbacks for callbacks in priorities.values())

    @staticmethod
    def _ordered(table: Dict[str, Dict[int, List[Callback]]], event: str) -> List[Callback]:
        priorities = table.get(event, {})
        ordered: List[Callback] = []
        for priority in sorted(priorities):
            ordered.extend(priorities[priority])
        return ordered

    def add_filter(self, event: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> None:
        self._add(self._filters, event, callback, priority)
        logger.debug(f"Added filter {event} at priority {priority}")

    def remove_filter(self, event: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> bool:
        return self._remove(self._filters, event, callback, priority)

    def has_filter(self, event: str, callback: Optional[Callback] = None) -> bool:
        return self._has(self._filters, event, callback)

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        """Pass a value through every filter registered for the event"""
        for callback in self._ordered(self._filters, event):
            value = callback(value, *args)
        return value

    def add_action(self, event: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> None:
        self._add(self._actions, event, callback, priority)
        logger.debug(f"Added action {event} at priority {priority}")

    def remove_action(self, event: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> bool:
        return self._remove(self._actions, event, callback, priority)

    def has_action(self, event: str, callback: Optional[Callback] = None) -> bool:
        return self._has(self._actions, event, callback)

    def do_action(self, event: str, *args: Any) -> None:
        """Run every action registered for the event"""
        for callback in self._ordered(self._actions, event):
            callback(*args)

    def remove_all(self, event: Optional[str] = None) -> None:
        """Remove every callback, or every callback of one event"""
        if event is None:
            self._filters.clear()
            self._actions.clear()
            return
        self._filters.pop(event, None)
        self._actions.pop(event, None)
