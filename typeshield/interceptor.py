"""
Method interception - enforces a call contract before the method body runs.

Usage:
    @required_function_parameters(schema, ['width'], {'length': None})
    def resize(self, args):
        ...

The replacement method:
1. Checks required parameters are keys of the argument mapping
2. Validates required attributes on the instance (all of them, no short-circuit)
3. Calls the original and wraps its return value in a MethodCallResult

The argument mapping is the single positional argument, or the keyword
arguments when the method is called without one. A call with no arguments
at all has no mapping and fails the required-parameter check.
"""

import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Sequence

from .config import EnforcementMode, get_mode
from .errors import InvalidArgumentError
from .results import MethodCallResult, ValidationResult
from .schema import Schema


logger = logging.getLogger('typeshield.interceptor')

# Marks a replacement so it is never intercepted twice
INTERCEPTED_ATTR = '__typeshield_contract__'


def required_function_parameters(
    schema: Any,
    required_params: Optional[Sequence[str]] = None,
    required_attributes: Optional[Mapping] = None,
    mode: Optional[EnforcementMode] = None,
) -> Callable[[Callable], Callable]:
    """
    Build a decorator enforcing a method's call contract.

    Args:
        schema: Schema or schema mapping; attribute validators are looked up here
        required_params: Ordered names expected in the argument mapping
        required_attributes: Attribute name -> optional accessor(value) -> value
        mode: Pinned enforcement mode (None: resolved per call)

    Returns:
        Decorator that turns a method into its intercepted replacement
    """
    schema = Schema.from_mapping(schema)
    required_params = list(required_params) if required_params is not None else None
    required_attributes = dict(required_attributes or {})

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(target, *args, **kwargs) -> MethodCallResult:
            argument = args[0] if args else (kwargs or None)

            if required_params is not None:
                if not isinstance(argument, Mapping):
                    raise InvalidArgumentError(
                        'Must pass a valid object to the function.',
                        received_value=argument,
                    )
                missing = [name for name in required_params if name not in argument]
                if missing:
                    logger.debug(f"{func.__qualname__}: parameters missing {missing}")
                    return MethodCallResult.missing_parameters(missing)

            if required_attributes:
                failures = _validate_attributes(target, schema, required_attributes)
                if failures:
                    if get_mode(mode) == EnforcementMode.STRICT:
                        return MethodCallResult.invalid_attributes(failures)
                    _log_violation(func.__qualname__, failures)

            return MethodCallResult.passed(func(target, *args, **kwargs))

        setattr(wrapper, INTERCEPTED_ATTR, (required_params, required_attributes))
        return wrapper
    return decorator


def is_intercepted(func: Any) -> bool:
    """True if func is a replacement built by required_function_parameters."""
    return hasattr(func, INTERCEPTED_ATTR)


def _validate_attributes(
    target: Any,
    schema: Schema,
    required_attributes: Dict[str, Optional[Callable[[Any], Any]]],
) -> Dict[str, ValidationResult]:
    """Validate every required attribute; collect failures keyed by name."""
    failures: Dict[str, ValidationResult] = {}
    for name, accessor in required_attributes.items():
        value = getattr(target, name, None)
        if callable(accessor):
            value = accessor(value)
        result = schema.attribute_validator(name)(value).validate()
        if result.error:
            failures[name] = result
    return failures


def _log_violation(method: str, failures: Dict[str, ValidationResult]) -> None:
    """Log an attribute violation that WARN mode let through."""
    logger.warning(
        f"Contract violation: method={method} stage=attributes "
        f"attributes={', '.join(failures)}",
        extra={
            "event": "contract_violation",
            "method": method,
            "stage": "attributes",
            "details": {name: result.to_dict() for name, result in failures.items()},
        }
    )
