"""
Constructor argument validation.

Checks, in order:
1. The argument is a mapping (raises InvalidArgumentError)
2. Every required constructor parameter is present (raises MissingConstructorParameters)
3. Every supplied key with a field validator passes it (returned, not raised)

Keys the schema declares but the argument omits are skipped unless they are
required constructor parameters.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict

from .errors import InvalidArgumentError, MissingConstructorParameters
from .results import ConstructorValidationResult, ValidationResult
from .schema import Schema


logger = logging.getLogger('typeshield.construction')


def validate_object_construction(constructor_argument: Any, schema: Any) -> ConstructorValidationResult:
    """
    Validate a constructor argument mapping against a schema.

    Args:
        constructor_argument: Mapping passed to the wrapped factory
        schema: Schema or schema mapping

    Returns:
        ConstructorValidationResult with failing fields in error_payload

    Raises:
        InvalidArgumentError: If the argument is not a mapping
        MissingConstructorParameters: If a required constructor key is absent
    """
    schema = Schema.from_mapping(schema)

    if not isinstance(constructor_argument, Mapping):
        raise InvalidArgumentError(
            'Must pass a valid object to the constructor function.',
            received_value=constructor_argument,
        )

    supplied = list(constructor_argument.keys())
    if schema.requires_constructor_parameters:
        missing = [name for name in schema.constructor_parameters if name not in constructor_argument]
        if missing:
            logger.debug(f"Constructor parameters missing: {missing}")
            raise MissingConstructorParameters(
                expected=list(schema.constructor_parameters),
                received=supplied,
            )

    error_payload: Dict[str, ValidationResult] = {}
    for name in supplied:
        producer = schema.get_field(name)
        if producer is None:
            continue
        result = producer(constructor_argument[name]).validate()
        if result.error:
            error_payload[name] = result

    return ConstructorValidationResult(error=bool(error_payload), error_payload=error_payload)
