"""
optionkit - typed option values over an untyped key/value store
"""
from optionkit.casters import cast
from optionkit.core.config import Settings, get_settings
from optionkit.core.exceptions import ConfigurationError, ConstraintError, OptionError, OptionTypeError
from optionkit.core.schema import OptionSchema
from optionkit.core.types import DeclaredType, OptionScope, Strictness
from optionkit.host import Hooks, NetworkOptionStore, OptionStore
from optionkit.registries import NetworkOptionRegistry, OptionRegistry, Registry
from optionkit.support import (
    DefaultResolutionState,
    InputSanitizer,
    InputValidator,
    OutputResolver,
    PendingState,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConstraintError",
    "DeclaredType",
    "DefaultResolutionState",
    "Hooks",
    "InputSanitizer",
    "InputValidator",
    "NetworkOptionRegistry",
    "NetworkOptionStore",
    "OptionError",
    "OptionRegistry",
    "OptionSchema",
    "OptionScope",
    "OptionStore",
    "OptionTypeError",
    "OutputResolver",
    "PendingState",
    "Registry",
    "Settings",
    "Strictness",
    "cast",
    "get_settings",
]
