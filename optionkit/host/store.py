"""
In-memory option stores

Both stores follow the read and write sequences of a host whose option API
cannot report whether an option exists: a read of a missing row records the
name in a not-option cache and answers with a default passed through the
default filter. Values are deep-copied on the way in and out, so callers never
share state with the stored rows.
"""
import copy
import json
from typing import Any, Dict, Optional

from optionkit.core.config import get_settings
from optionkit.core.logging_config import LoggingConfig
from optionkit.host.hooks import DEFAULT_PRIORITY, Hooks

logger = LoggingConfig.get_logger(__name__)

# Marks "no default argument passed" on site reads
NOT_PASSED = object()


def _serialized(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=repr)


class OptionStore:
    """
    Site-scoped option store

    Reads of a missing row go through ``default_option_{name}`` with a flag
    telling whether the caller passed a default; stored values go through
    ``option_{name}``.
    """

    def __init__(self, hooks: Hooks):
        self.hooks = hooks
        self._rows: Dict[str, Any] = {}
        self._not_options: Dict[str, bool] = {}
        self._settings: Dict[str, Dict[str, Any]] = {}

    def not_options(self) -> Dict[str, bool]:
        """Snapshot of the not-option cache"""
        return dict(self._not_options)

    def get(self, name: str, default: Any = NOT_PASSED) -> Any:
        passed_default = default is not NOT_PASSED
        if not passed_default:
            default = False

        if self._not_options.get(name):
            return self.hooks.apply_filters(f"default_option_{name}", default, name, passed_default)

        if name not in self._rows:
            self._not_options[name] = True
            return self.hooks.apply_filters(f"default_option_{name}", default, name, passed_default)

        value = copy.deepcopy(self._rows[name])
        return self.hooks.apply_filters(f"option_{name}", value, name)

    def add(self, name: str, value: Any) -> bool:
        name = name.strip()
        if not name:
            return False

        value = self._sanitize(name, value)

        if name in self._rows:
            return False

        self.hooks.do_action("add_option", name, value)

        self._rows[name] = copy.deepcopy(value)
        self._not_options.pop(name, None)

        self.hooks.do_action(f"add_option_{name}", name, value)
        self.hooks.do_action("added_option", name, value)
        logger.debug(f"Added option {name}")
        return True

    def update(self, name: str, value: Any) -> bool:
        name = name.strip()
        if not name:
            return False

        value = self._sanitize(name, value)
        old_value = self.get(name)

        value = self.hooks.apply_filters(f"pre_update_option_{name}", value, old_value, name)

        if name not in self._rows:
            # The value is already sanitized; add sanitizes it a second time
            return self.add(name, value)

        if _serialized(self._rows[name]) == _serialized(value):
            return False

        self.hooks.do_action("update_option", name, old_value, value)

        self._rows[name] = copy.deepcopy(value)

        self.hooks.do_action(f"update_option_{name}", old_value, value, name)
        self.hooks.do_action("updated_option", name, old_value, value)
        logger.debug(f"Updated option {name}")
        return True

    def delete(self, name: str) -> bool:
        name = name.strip()
        if name not in self._rows:
            return False

        self.hooks.do_action("delete_option", name)
        del self._rows[name]
        self._not_options[name] = True
        self.hooks.do_action(f"delete_option_{name}", name)
        logger.debug(f"Deleted option {name}")
        return True

    def register_setting(self, group: str, name: str, args: Optional[Dict[str, Any]] = None) -> None:
        """
        Record a setting; its sanitize callback becomes a sanitize filter

        The filter is added at ``args["priority"]``, or the hooks' default priority.
        """
        args = dict(args or {})
        args.setdefault("priority", DEFAULT_PRIORITY)
        sanitize_callback = args.get("sanitize_callback")
        if sanitize_callback is not None:
            self.hooks.add_filter(f"sanitize_option_{name}", sanitize_callback, args["priority"])
        self._settings[name] = {**args, "group": group}

    def unregister_setting(self, group: str, name: str) -> bool:
        setting = self._settings.get(name)
        if setting is None or setting["group"] != group:
            return False
        sanitize_callback = setting.get("sanitize_callback")
        if sanitize_callback is not None:
            self.hooks.remove_filter(f"sanitize_option_{name}", sanitize_callback, setting["priority"])
        del self._settings[name]
        return True

    def registered_settings(self) -> Dict[str, Dict[str, Any]]:
        return {name: dict(args) for name, args in self._settings.items()}

    def _sanitize(self, name: str, value: Any) -> Any:
        return self.hooks.apply_filters(f"sanitize_option_{name}", value, name, value)


class NetworkOptionStore:
    """
    Network-scoped option store

    Reads always default to ``False`` and cannot tell whether the caller passed
    that default. A read of a missing row passes the default through
    ``default_site_option_{name}`` and then, on the first miss only, through
    ``site_option_{name}`` as well.
    """

    def __init__(self, hooks: Hooks, network_id: Optional[int] = None):
        self.hooks = hooks
        self.network_id = network_id if network_id is not None else get_settings().network_id
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._not_options: Dict[int, Dict[str, bool]] = {}

    def _scope(self, network_id: Optional[int]) -> int:
        return self.network_id if network_id is None else network_id

    def not_options(self, network_id: Optional[int] = None) -> Dict[str, bool]:
        """Snapshot of the not-option cache of one network"""
        return dict(self._not_options.get(self._scope(network_id), {}))

    def get(self, name: str, default: Any = False, network_id: Optional[int] = None) -> Any:
        scope = self._scope(network_id)
        not_options = self._not_options.setdefault(scope, {})

        if not_options.get(name):
            return self.hooks.apply_filters(f"default_site_option_{name}", default, name, scope)

        rows = self._rows.setdefault(scope, {})
        if name in rows:
            value = copy.deepcopy(rows[name])
        else:
            not_options[name] = True
            value = self.hooks.apply_filters(f"default_site_option_{name}", default, name, scope)

        return self.hooks.apply_filters(f"site_option_{name}", value, name, scope)

    def add(self, name: str, value: Any, network_id: Optional[int] = None) -> bool:
        scope = self._scope(network_id)
        value = self.hooks.apply_filters(f"sanitize_option_{name}", value, name, value)

        try:
            value = self.hooks.apply_filters(f"pre_add_site_option_{name}", value, name, scope)

            not_options = self._not_options.setdefault(scope, {})
            if not not_options.get(name):
                if self.get(name, False, scope) is not False:
                    return False

            rows = self._rows.setdefault(scope, {})
            if name in rows:
                return False

            rows[name] = copy.deepcopy(value)
            self._not_options.setdefault(scope, {}).pop(name, None)

            self.hooks.do_action(f"add_site_option_{name}", name, value, scope)
            self.hooks.do_action("add_site_option", name, value, scope)
            logger.debug(f"Added network option {name}", extra={"network_id": scope})
            return True
        finally:
            self.hooks.do_action(f"after_add_site_option_{name}", name, scope)

    def update(self, name: str, value: Any, network_id: Optional[int] = None) -> bool:
        scope = self._scope(network_id)
        old_value = self.get(name, False, scope)

        value = self.hooks.apply_filters(f"sanitize_option_{name}", value, name, value)
        value = self.hooks.apply_filters(f"pre_update_site_option_{name}", value, old_value, name, scope)

        rows = self._rows.setdefault(scope, {})
        if name not in rows:
            # The value is already sanitized; add sanitizes it a second time
            return self.add(name, value, scope)

        if _serialized(rows[name]) == _serialized(value):
            return False

        rows[name] = copy.deepcopy(value)
        self._not_options.setdefault(scope, {}).pop(name, None)

        self.hooks.do_action(f"update_site_option_{name}", name, value, old_value, scope)
        self.hooks.do_action("update_site_option", name, value, old_value, scope)
        logger.debug(f"Updated network option {name}", extra={"network_id": scope})
        return True

    def delete(self, name: str, network_id: Optional[int] = None) -> bool:
        scope = self._scope(network_id)
        rows = self._rows.setdefault(scope, {})
        if name not in rows:
            return False

        self.hooks.do_action(f"pre_delete_site_option_{name}", name, scope)
        del rows[name]
        self._not_options.setdefault(scope, {})[name] = True
        self.hooks.do_action(f"delete_site_option_{name}", name, scope)
        self.hooks.do_action("delete_site_option", name, scope)
        logger.debug(f"Deleted network option {name}", extra={"network_id": scope})
        return True
