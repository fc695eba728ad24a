"""
Field validators.

A producer turns a rule configuration into a callable that, given a
candidate value, returns a fresh validator instance:

    length = NumberType({"range": [1, 100]})
    length(50).validate()   -> ValidationResult(error=False, ...)
    length(150).validate()  -> ValidationResult(error=True, payload={300: [1, 100]})

Validator instances are created per validation call and never retained.
"""

from collections.abc import Sized
from numbers import Real
from types import SimpleNamespace
from typing import Any, Mapping, Optional

from .codes import ErrorCode, IssueKind
from .results import Issue, ValidationResult
from .rules import NumberRule, StringRule


class NumberValidator:
    """Validates a single value against a NumberRule."""

    def __init__(self, value: Any, rule: NumberRule):
        self.value = value
        self.rule = rule

    def validate(self) -> ValidationResult:
        value = self.value
        is_number = isinstance(value, Real) and not isinstance(value, bool)
        if not is_number:
            return ValidationResult(
                error=True,
                payload={ErrorCode.NULL_OR_UNDEFINED: None},
                issues=(Issue(IssueKind.NULL_OR_UNDEFINED),),
            )

        # NaN is the only value that is not equal to itself
        is_not_nan = value == value
        bounds = self.rule.range
        is_in_range = bounds[0] <= value < bounds[1] if bounds is not None else True

        checks = (
            (is_not_nan, Issue(IssueKind.NOT_A_NUMBER)),
            (is_in_range, Issue(IssueKind.OUT_OF_RANGE, bounds)),
        )
        issues = tuple(issue for passed, issue in checks if not passed)
        if issues:
            return ValidationResult(
                error=True,
                payload={issue.code: issue.data for issue in issues},
                issues=issues,
            )

        return ValidationResult(error=False)


class StringValidator:
    """Validates a single value against a StringRule."""

    def __init__(self, value: Any, rule: StringRule):
        self.value = value
        self.rule = rule

    def validate(self) -> ValidationResult:
        value = self.value
        min_length = self.rule.min_length
        one_of = self.rule.one_of

        is_in_range = (
            isinstance(value, Sized) and len(value) >= min_length
            if min_length
            else True
        )
        is_one_of = value in one_of if one_of is not None else True
        payload = {'isInRange': is_in_range, 'isOneOf': is_one_of}

        if is_in_range and is_one_of:
            return ValidationResult(error=False, payload=payload)

        issues = []
        if not is_in_range:
            issues.append(Issue(IssueKind.OUT_OF_STRING_RANGE, min_length))
        if not is_one_of:
            issues.append(Issue(IssueKind.NOT_IN_ALLOW_LIST, one_of))

        return ValidationResult(
            error=True,
            payload=payload,
            issues=tuple(issues),
            valid_string_types=None if is_one_of else one_of,
        )


class PresenceValidator:
    """Fails only when the value is None. Used for attributes with no field rule."""

    def __init__(self, value: Any):
        self.value = value

    def validate(self) -> ValidationResult:
        if self.value is None:
            return ValidationResult(
                error=True,
                payload={ErrorCode.NULL_OR_UNDEFINED: None},
                issues=(Issue(IssueKind.NULL_OR_UNDEFINED),),
            )
        return ValidationResult(error=False)


class ValidatorProducer:
    """Callable returned by NumberType/StringType: value -> validator."""

    def __init__(self, validator_cls, rule):
        self.validator_cls = validator_cls
        self.rule = rule

    def __call__(self, value: Any):
        return self.validator_cls(value, self.rule)

    def __repr__(self):
        return f"{type(self.rule).__name__}({self.rule.model_dump(exclude_none=True)})"


def NumberType(config: Optional[Mapping] = None, **kwargs) -> ValidatorProducer:
    """
    Signature function for defining a number field.

    Example:
        schema = {
            'length': NumberType({'range': [1, 100]}),
            'breadth': NumberType(),
        }

    Args:
        config: optional mapping with key 'range' ([min, max), half-open)

    Returns:
        Producer: value -> NumberValidator

    Raises:
        pydantic.ValidationError: If the configuration is malformed
    """
    return ValidatorProducer(NumberValidator, NumberRule.coerce(config, **kwargs))


def StringType(config: Optional[Mapping] = None, **kwargs) -> ValidatorProducer:
    """
    Signature function for defining a string field.

    Example:
        schema = {
            'color': StringType({'oneOf': ['RED', 'GREEN']}),
            'name': StringType({'minLength': 3}),
        }

    Args:
        config: optional mapping with keys 'minLength' and 'oneOf'

    Returns:
        Producer: value -> StringValidator
    """
    return ValidatorProducer(StringValidator, StringRule.coerce(config, **kwargs))


def FunctionType(config: Mapping) -> Mapping:
    """
    Signature function for a method contract. Returns its argument unchanged.

    Recognised keys: 'requiredParams' (list of names) and 'requiredAttributes'
    (name -> optional accessor). See FunctionContract.
    """
    return config


def presence_producer(value: Any) -> PresenceValidator:
    return PresenceValidator(value)


# Grouped export for `from typeshield import Types`
Types = SimpleNamespace(
    NumberType=NumberType,
    StringType=StringType,
    FunctionType=FunctionType,
)

__all__ = [
    'NumberType',
    'StringType',
    'FunctionType',
    'Types',
    'NumberValidator',
    'StringValidator',
    'PresenceValidator',
    'ValidatorProducer',
]
