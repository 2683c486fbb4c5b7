"""
Option schema model

Schemas are immutable: every ``with_*`` method returns a new schema and leaves
the one it was called on untouched.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from optionkit.core.config import get_settings
from optionkit.core.exceptions import ConfigurationError
from optionkit.core.types import DeclaredType, OptionScope, json_kind


def _as_constraints(value: Any) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


class OptionSchema(BaseModel):
    """Declared name, type, default and write constraints of one option"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Option name, without prefix")
    type: Optional[DeclaredType] = Field(default=None, description="Declared value type")
    default: Any = Field(default=None, description="Value returned when the option is not stored")
    priority: int = Field(
        default_factory=lambda: get_settings().default_priority,
        description="Hook priority of the option's callbacks"
    )
    constraints: Tuple[Any, ...] = Field(default_factory=tuple, description="Constraints checked in strict mode")
    description: Optional[str] = Field(default=None, description="Human readable description")
    show_in_rest: Union[bool, Dict[str, Any]] = Field(default=False, description="REST API exposure")
    scope: OptionScope = Field(default=OptionScope.SITE, description="Store the option lives in")

    @field_validator("constraints", mode="before")
    @classmethod
    def normalize_constraints(cls, v: Any) -> Tuple[Any, ...]:
        """Accept a single constraint or a sequence of them"""
        return _as_constraints(v)

    @classmethod
    def site(cls, name: str, type: Union[DeclaredType, str], **kwargs: Any) -> OptionSchema:
        """Create a site-scoped option schema"""
        return cls(name=name, type=type, scope=OptionScope.SITE, **kwargs)

    @classmethod
    def network(cls, name: str, type: Union[DeclaredType, str], **kwargs: Any) -> OptionSchema:
        """Create a network-scoped option schema"""
        return cls(name=name, type=type, scope=OptionScope.NETWORK, **kwargs)

    @classmethod
    def from_mapping(cls, name: str, payload: Optional[Mapping[str, Any]]) -> OptionSchema:
        """
        Build a schema from a plain mapping, e.g. ``{"type": "boolean", "default": True}``

        Raises:
            ConfigurationError: If the mapping is not a valid schema
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ConfigurationError(f"Schema for option '{name}' must be a mapping, got {type(payload)!r}")
        try:
            return cls.model_validate({**payload, "name": name})
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid schema for option '{name}': {exc}") from exc

    def with_default(self, value: Any) -> OptionSchema:
        return self.model_copy(update={"default": value})

    def with_priority(self, value: int) -> OptionSchema:
        """
        Set the priority of the option's hook callbacks

        Rarely needed; useful when other code hooks into the same option events
        and must run before or after these callbacks.
        """
        return self.model_copy(update={"priority": int(value)})

    def with_constraints(self, *constraints: Any) -> OptionSchema:
        if len(constraints) == 1:
            return self.model_copy(update={"constraints": _as_constraints(constraints[0])})
        return self.model_copy(update={"constraints": tuple(constraints)})

    def with_description(self, value: str) -> OptionSchema:
        return self.model_copy(update={"description": value})

    def with_rest(self, value: Union[bool, Dict[str, Any]] = True) -> OptionSchema:
        """
        Expose the option through the REST settings endpoint

        Raises:
            NotImplementedError: For network options, which the settings endpoint does not support
        """
        if self.scope is OptionScope.NETWORK:
            raise NotImplementedError("Network options cannot be included in the REST API.")
        return self.model_copy(update={"show_in_rest": value})

    def check_registrable(self, name: Optional[str] = None) -> None:
        """
        Check the schema can be registered under the given (prefixed) name

        Raises:
            ConfigurationError: If the name is blank or no type is declared
        """
        option_name = self.name if name is None else name
        if not option_name or not option_name.strip():
            raise ConfigurationError("Unable to register an option without a name.")
        if self.type is None:
            raise ConfigurationError(f"Option '{option_name}' must declare a type.")

    def rest_schema(self) -> Dict[str, Any]:
        """
        JSON schema fragment describing the option value

        Array options whose default is a mapping are described as objects, one
        property per key.
        """
        if self.type is None:
            raise ConfigurationError(f"Option '{self.name}' must declare a type.")
        if self.type is DeclaredType.ARRAY and isinstance(self.default, dict):
            return {
                "type": "object",
                "properties": {
                    str(key): {"type": json_kind(value), "default": value}
                    for key, value in self.default.items()
                },
            }
        if self.type is DeclaredType.FLOAT:
            return {"type": DeclaredType.NUMBER.value}
        return {"type": self.type.value}

    def setting_args(self, name: Optional[str] = None) -> Dict[str, Any]:
        """Arguments describing the option to the store's settings registry"""
        rest_schema = self.rest_schema()
        args: Dict[str, Any] = {
            "type": rest_schema["type"],
            "default": self.default,
        }
        if self.description is not None:
            args["description"] = self.description
        if self.show_in_rest:
            if self.show_in_rest is True:
                args["show_in_rest"] = {
                    "name": self.name if name is None else name,
                    "schema": rest_schema,
                }
            else:
                args["show_in_rest"] = self.show_in_rest
        return args
