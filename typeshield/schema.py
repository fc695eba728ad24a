"""
Schema - interpreted form of a schema mapping.

A schema mapping holds:
- field name -> validator producer (NumberType(...), StringType(...), any
  callable value -> object with validate())
- method name -> call contract (FunctionType({...}), a plain mapping, or a
  FunctionContract)
- CONSTRUCTOR_PARAMETERS_KEY -> ordered list of required constructor keys
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .errors import SchemaError
from .rules import FunctionContract
from .validators import presence_producer


CONSTRUCTOR_PARAMETERS_KEY = '__constructorParameters'


@dataclass(frozen=True)
class Schema:
    """Fields, method contracts and required constructor parameters."""
    fields: Dict[str, Callable[[Any], Any]] = field(default_factory=dict)
    contracts: Dict[str, FunctionContract] = field(default_factory=dict)
    constructor_parameters: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_mapping(cls, mapping: Any) -> "Schema":
        """
        Interpret a schema mapping.

        Raises:
            SchemaError: If the mapping or one of its entries is malformed
        """
        if isinstance(mapping, Schema):
            return mapping
        if not isinstance(mapping, Mapping):
            raise SchemaError(f"Schema must be a mapping, got {type(mapping).__name__}")

        fields: Dict[str, Callable[[Any], Any]] = {}
        contracts: Dict[str, FunctionContract] = {}
        for key, entry in mapping.items():
            if key == CONSTRUCTOR_PARAMETERS_KEY:
                continue
            if isinstance(entry, (Mapping, FunctionContract)):
                contracts[key] = FunctionContract.from_entry(entry)
            elif callable(entry):
                fields[key] = entry
            else:
                raise SchemaError(
                    f"Schema entry '{key}' must be a validator producer or a "
                    f"method contract, got {type(entry).__name__}",
                    key=key,
                )

        return cls(
            fields=fields,
            contracts=contracts,
            constructor_parameters=parse_constructor_parameters(
                mapping.get(CONSTRUCTOR_PARAMETERS_KEY)
            ),
        )

    def __contains__(self, name: str) -> bool:
        return name in self.fields or name in self.contracts

    def __iter__(self) -> Iterator[str]:
        yield from self.fields
        yield from self.contracts

    def get_field(self, name: str) -> Optional[Callable[[Any], Any]]:
        """Get the validator producer for a field, or None."""
        return self.fields.get(name)

    def get_contract(self, name: str) -> Optional[FunctionContract]:
        """Get the call contract for a method, or None."""
        return self.contracts.get(name)

    def attribute_validator(self, name: str) -> Callable[[Any], Any]:
        """Producer used for a contract's required attribute."""
        return self.fields.get(name, presence_producer)

    @property
    def requires_constructor_parameters(self) -> bool:
        return self.constructor_parameters is not None


def parse_constructor_parameters(raw: Any) -> Optional[Tuple[str, ...]]:
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)):
        raise SchemaError(
            f"'{CONSTRUCTOR_PARAMETERS_KEY}' must be a list of names, "
            f"got {type(raw).__name__}",
            key=CONSTRUCTOR_PARAMETERS_KEY,
        )
    names: List[str] = []
    for name in raw:
        if not isinstance(name, str):
            raise SchemaError(
                f"Constructor parameter names must be strings, got {name!r}",
                key=CONSTRUCTOR_PARAMETERS_KEY,
            )
        names.append(name)
    return tuple(names)
