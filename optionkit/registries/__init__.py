"""
Binding of option schemas to the host hooks
"""
from optionkit.registries.events import OptionEvents, network_events, site_events
from optionkit.registries.network_option_registry import NetworkOptionRegistry
from optionkit.registries.option_registry import OptionRegistry
from optionkit.registries.registry import Registry

__all__ = [
    "NetworkOptionRegistry",
    "OptionEvents",
    "OptionRegistry",
    "Registry",
    "network_events",
    "site_events",
]
