"""
Strict-mode validation of values written to the store
"""
from typing import Annotated, Any, Callable, Dict, List, Optional, Sequence, Union

import annotated_types
from pydantic import TypeAdapter, ValidationError

from optionkit.core.exceptions import ConfigurationError, ConstraintError, OptionTypeError
from optionkit.core.logging_config import LoggingConfig
from optionkit.core.types import DeclaredType, matches_type
from optionkit.support.sanitizer import unwrap

logger = LoggingConfig.get_logger(__name__)

DEFAULT_CONSTRAINT_MESSAGE = "Value does not match the given constraints."

# A constraint check returns the first violation message, or None when the value passes
ConstraintCheck = Callable[[Any], Optional[str]]


def _is_annotated_metadata(constraint: Any) -> bool:
    if isinstance(constraint, annotated_types.BaseMetadata):
        return True
    return bool(getattr(constraint, "__is_annotated_types_grouped_metadata__", False))


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if errors:
        return str(errors[0].get("msg", DEFAULT_CONSTRAINT_MESSAGE))
    return str(exc)


def _adapter_check(adapter: TypeAdapter) -> ConstraintCheck:
    def check(value: Any) -> Optional[str]:
        try:
            adapter.validate_python(value)
        except ValidationError as exc:
            return _first_error(exc)
        return None
    return check


def _metadata_check(metadata: Any) -> ConstraintCheck:
    # One adapter per runtime type; the type gate has already run, so the value's
    # own type is the declared type's concrete form (list vs dict, int vs float).
    adapters: Dict[type, TypeAdapter] = {}

    def check(value: Any) -> Optional[str]:
        value_type = type(value)
        adapter = adapters.get(value_type)
        if adapter is None:
            adapter = TypeAdapter(Annotated[value_type, metadata])
            adapters[value_type] = adapter
        try:
            adapter.validate_python(value)
        except ValidationError as exc:
            return _first_error(exc)
        return None
    return check


def _callable_check(func: Callable[[Any], Any]) -> ConstraintCheck:
    def check(value: Any) -> Optional[str]:
        result = func(value)
        if result is False:
            return DEFAULT_CONSTRAINT_MESSAGE
        if isinstance(result, (list, tuple)) and result:
            return str(result[0])
        return None
    return check


def compile_constraint(constraint: Any) -> ConstraintCheck:
    """
    Turn a constraint into a check function

    Supported constraints:
    - ``pydantic.TypeAdapter``: the first validation error message is the violation
    - ``annotated_types`` metadata (``Ge``, ``MaxLen``, ``Interval``, ``Predicate``...)
    - callables returning ``False`` or a list of violation messages

    Raises:
        ConfigurationError: If the constraint is of an unsupported kind
    """
    if isinstance(constraint, TypeAdapter):
        return _adapter_check(constraint)
    if _is_annotated_metadata(constraint):
        return _metadata_check(constraint)
    if callable(constraint):
        return _callable_check(constraint)
    raise ConfigurationError(f"Unsupported constraint: {constraint!r}")


def normalize_constraints(constraints: Any) -> List[Any]:
    """Accept None, a single constraint, or a sequence of constraints"""
    if constraints is None:
        return []
    if isinstance(constraints, (list, tuple)):
        return list(constraints)
    return [constraints]


class InputValidator:
    """
    Validates values against the declared type and the option's constraints

    Only used in strict mode. Constraints run in declaration order and the first
    failure stops the validation.
    """

    def __init__(self, declared_type: Union[DeclaredType, str], constraints: Optional[Union[Any, Sequence[Any]]] = None):
        self.declared_type = DeclaredType(declared_type)
        self.constraints = normalize_constraints(constraints)
        self._checks = [compile_constraint(constraint) for constraint in self.constraints]

    def validate(self, value: Any) -> None:
        """
        Validate a value, wrapped or not

        Raises:
            OptionTypeError: If the value does not match the declared type
            ConstraintError: If a constraint rejects the value
        """
        value = unwrap(value)

        if value is None:
            return

        if not matches_type(self.declared_type, value):
            logger.warning(
                f"Value rejected, expected {self.declared_type.value}",
                extra={"expected": self.declared_type.value, "value_type": type(value).__name__}
            )
            raise OptionTypeError(self.declared_type, value)

        for check in self._checks:
            message = check(value)
            if message is not None:
                logger.warning(
                    f"Value rejected by constraint: {message}",
                    extra={"expected": self.declared_type.value}
                )
                raise ConstraintError(message)
