"""
Host event names bound for each registered option
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OptionEvents:
    """Events one option's callbacks are bound to"""
    validate_on_add: str
    validate_on_update: str
    sanitize_on_write: str
    resolve_default: str
    resolve_value: str
    # Network scope only: successful add, and end of every add attempt
    add_succeeded: Optional[str] = None
    add_finished: Optional[str] = None


def site_events(name: str) -> OptionEvents:
    # Validation actions are shared by all options and receive the option name first
    return OptionEvents(
        validate_on_add="add_option",
        validate_on_update="update_option",
        sanitize_on_write=f"sanitize_option_{name}",
        resolve_default=f"default_option_{name}",
        resolve_value=f"option_{name}",
    )


def network_events(name: str) -> OptionEvents:
    # Validation and sanitizing share the pre-add and pre-update filters
    return OptionEvents(
        validate_on_add=f"pre_add_site_option_{name}",
        validate_on_update=f"pre_update_site_option_{name}",
        sanitize_on_write=f"pre_add_site_option_{name}",
        resolve_default=f"default_site_option_{name}",
        resolve_value=f"site_option_{name}",
        add_succeeded=f"add_site_option_{name}",
        add_finished=f"after_add_site_option_{name}",
    )
