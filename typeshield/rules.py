"""
Pydantic models for rule configurations.

Key features:
- frozen=True: a rule cannot change after the producer captured it
- populate_by_name=True: accept both camelCase schema keys and snake_case
- extra='forbid': a misspelled rule key is a configuration error, not a no-op
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import SchemaError


Number = Union[int, float]


def keep_configured(raw: Any, validated: Any) -> Any:
    """
    Return the caller's own list/tuple when validation left its items unchanged.

    Diagnostic payloads echo rule values back, so [0, 100] stays [0, 100]
    instead of becoming (0, 100).
    """
    if isinstance(raw, (list, tuple)) and validated is not None and list(raw) == list(validated):
        return raw
    return validated


class BaseRuleModel(BaseModel):
    """Base model for all rule configurations."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='forbid',
    )

    @classmethod
    def coerce(cls, config: Any = None, **kwargs):
        """
        Build a rule from a mapping, an existing rule, or keyword arguments.

        Examples:
            NumberRule.coerce({"range": [1, 100]})
            NumberRule.coerce(range=(1, 100))
            NumberRule.coerce(None) -> NumberRule()
        """
        if isinstance(config, cls) and not kwargs:
            return config
        if config is None:
            config = {}
        elif isinstance(config, BaseRuleModel):
            config = config.model_dump(by_alias=True, exclude_none=True)
        if not isinstance(config, Mapping):
            raise SchemaError(
                f"{cls.__name__} expects a mapping, got {type(config).__name__}"
            )
        return cls.model_validate({**config, **kwargs})


class NumberRule(BaseRuleModel):
    """Numeric rule: optional half-open range [min, max)."""
    range: Optional[Tuple[Number, Number]] = None

    @field_validator('range', mode='wrap')
    @classmethod
    def check_bounds(cls, v, handler):
        validated = handler(v)
        if validated is not None and validated[0] > validated[1]:
            raise ValueError(
                f"range lower bound {validated[0]} exceeds upper bound {validated[1]}"
            )
        return keep_configured(v, validated)


class StringRule(BaseRuleModel):
    """String rule: optional minimum length and optional allow-list."""
    min_length: Optional[int] = Field(default=None, alias='minLength', ge=0)
    one_of: Optional[List[str]] = Field(default=None, alias='oneOf')

    @field_validator('one_of', mode='wrap')
    @classmethod
    def keep_allow_list(cls, v, handler):
        return keep_configured(v, handler(v))


class FunctionContract(BaseRuleModel):
    """
    Call contract for a single method.

    required_params: names that must be keys of the call's argument mapping.
    required_attributes: attribute name -> optional accessor applied to the
    live instance value before it is validated.
    """
    required_params: Optional[List[str]] = Field(default=None, alias='requiredParams')
    required_attributes: Optional[Dict[str, Optional[Callable[[Any], Any]]]] = Field(
        default=None, alias='requiredAttributes'
    )

    @field_validator('required_attributes', mode='before')
    @classmethod
    def names_to_mapping(cls, v):
        """Accept a plain list of attribute names: ["a", "b"] -> {"a": None, "b": None}."""
        if isinstance(v, (list, tuple)):
            return {name: None for name in v}
        return v

    @classmethod
    def from_entry(cls, entry: Any) -> "FunctionContract":
        """Interpret a schema entry that sits on a method name."""
        try:
            return cls.coerce(entry)
        except SchemaError as e:
            raise SchemaError(
                f"Method contract must be a mapping or FunctionContract, "
                f"got {type(entry).__name__}"
            ) from e
