"""
In-memory host: hook registry and option stores
"""
from optionkit.host.hooks import DEFAULT_PRIORITY, Hooks
from optionkit.host.store import NOT_PASSED, NetworkOptionStore, OptionStore

__all__ = ["DEFAULT_PRIORITY", "Hooks", "NOT_PASSED", "NetworkOptionStore", "OptionStore"]
