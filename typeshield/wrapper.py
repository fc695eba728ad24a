"""
Type wrapping - composes construction validation and method interception.

Usage:
    class Area:
        def __init__(self, args):
            self.length = args['length']
            self.breadth = args['breadth']

        def calculate_area(self):
            return self.length * self.breadth

    Area = wrap_with_type({
        'length': NumberType({'range': [1, 100]}),
        'breadth': NumberType(),
        'calculate_area': FunctionType({
            'requiredAttributes': {'length': None, 'breadth': None},
        }),
    })(Area)

    area = Area({'length': 5, 'breadth': 4})
    area.calculate_area().result  # 20

Or with explicit registration:
    Area = (
        TypeBuilder(Area)
        .field('length', NumberType({'range': [1, 100]}))
        .method('calculate_area', {'requiredAttributes': ['length']})
        .build()
    )

Wrapping never mutates the class it is given. The factory builds instances
of a generated subclass whose contracted methods are intercepted.
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Sequence

from .config import EnforcementMode, get_mode
from .construction import validate_object_construction
from .errors import ConstructionRejected, InvalidArgumentError, SchemaError
from .interceptor import is_intercepted, required_function_parameters
from .results import ConstructorValidationResult
from .rules import FunctionContract
from .schema import Schema, parse_constructor_parameters


logger = logging.getLogger('typeshield.wrapper')

# Set on every generated subclass; holds its Schema
WRAPPED_MARKER = '__typeshield_schema__'

_MISSING = object()


class WrappedType:
    """
    Factory for instances of a wrapped class.

    Calling it validates the argument mapping, then constructs an instance
    of ``wrapped_class`` (a subclass of ``original``) with that mapping.
    """

    def __init__(
        self,
        original: type,
        wrapped_class: type,
        schema: Schema,
        mode: Optional[EnforcementMode] = None,
    ):
        self.original = original
        self.wrapped_class = wrapped_class
        self.schema = schema
        self.mode = mode
        self.__name__ = original.__name__
        self.__qualname__ = original.__qualname__
        self.__doc__ = original.__doc__

    def __call__(self, args: Any = _MISSING, **kwargs) -> Any:
        if args is _MISSING:
            args = kwargs
        elif kwargs:
            raise InvalidArgumentError(
                'Pass either an argument mapping or keyword arguments, not both.',
                received_value=args,
            )

        if self._needs_validation(args):
            result = validate_object_construction(args, self.schema)
            if result.error:
                if get_mode(self.mode) == EnforcementMode.STRICT:
                    raise ConstructionRejected(result)
                _log_violation(self.__qualname__, result)

        return self.wrapped_class(args)

    def _needs_validation(self, args: Any) -> bool:
        # An empty mapping with no required parameters has nothing to check
        if self.schema.requires_constructor_parameters:
            return True
        return not isinstance(args, Mapping) or len(args) > 0

    def is_instance(self, obj: Any) -> bool:
        """True if obj was built by this factory."""
        return isinstance(obj, self.wrapped_class)

    def __repr__(self):
        return f"<WrappedType {self.original.__module__}.{self.__qualname__}>"


class TypeBuilder:
    """
    Explicit registration of fields, method contracts and constructor
    parameters for one class. ``build()`` returns a WrappedType.
    """

    def __init__(self, cls: type, mode: Optional[EnforcementMode] = None):
        if isinstance(cls, WrappedType):
            raise SchemaError(f"{cls.__qualname__} is already wrapped")
        if not inspect.isclass(cls):
            raise SchemaError(f"Can only wrap a class, got {type(cls).__name__}")
        if WRAPPED_MARKER in vars(cls):
            raise SchemaError(f"{cls.__qualname__} is already wrapped")

        self._cls = cls
        self._mode = mode
        self._fields: Dict[str, Callable[[Any], Any]] = {}
        self._contracts: Dict[str, FunctionContract] = {}
        self._constructor_parameters = None

    def field(self, name: str, producer: Callable[[Any], Any]) -> "TypeBuilder":
        """Register a validator producer for a field/attribute."""
        if not callable(producer):
            raise SchemaError(
                f"Field '{name}' needs a validator producer, got {type(producer).__name__}",
                key=name,
            )
        self._fields[name] = producer
        return self

    def method(self, name: str, contract: Any = None) -> "TypeBuilder":
        """
        Register a call contract for a method defined on the class.

        Raises:
            SchemaError: If the class has no such plain method, or the
                method is already intercepted
        """
        member = inspect.getattr_static(self._cls, name, None)
        if not inspect.isfunction(member):
            raise SchemaError(f"{self._cls.__qualname__} has no method '{name}'", key=name)
        if is_intercepted(member):
            raise SchemaError(
                f"{self._cls.__qualname__}.{name} is already intercepted", key=name
            )
        self._contracts[name] = FunctionContract.from_entry(contract)
        return self

    def constructor_parameters(self, names: Sequence[str]) -> "TypeBuilder":
        """Declare constructor keys that must always be supplied."""
        self._constructor_parameters = parse_constructor_parameters(list(names))
        return self

    def schema(self) -> Schema:
        return Schema(
            fields=dict(self._fields),
            contracts=dict(self._contracts),
            constructor_parameters=self._constructor_parameters,
        )

    def build(self) -> WrappedType:
        cls = self._cls
        schema = self.schema()

        namespace = {
            '__module__': cls.__module__,
            '__qualname__': cls.__qualname__,
            '__doc__': cls.__doc__,
            WRAPPED_MARKER: schema,
        }
        for name, contract in schema.contracts.items():
            original = inspect.getattr_static(cls, name)
            namespace[name] = required_function_parameters(
                schema,
                contract.required_params,
                contract.required_attributes,
                mode=self._mode,
            )(original)

        wrapped_class = type(cls)(cls.__name__, (cls,), namespace)
        logger.debug(
            f"Wrapped {cls.__qualname__}: intercepted={list(schema.contracts)} "
            f"fields={list(schema.fields)}"
        )
        return WrappedType(cls, wrapped_class, schema, mode=self._mode)


def wrap_with_type(schema: Any, mode: Optional[EnforcementMode] = None) -> Callable[[type], WrappedType]:
    """
    Wrap a class so construction and contracted methods are validated.

    Every method defined directly on the class whose name is a schema key is
    intercepted with that entry's contract. A key holding a field producer
    gives its method an empty contract. All field producers are kept for
    constructor and attribute validation.

    Args:
        schema: Schema mapping (or Schema)
        mode: Pinned enforcement mode (None: resolved per call)

    Returns:
        Function: class -> WrappedType. Usable as a class decorator.

    Raises:
        SchemaError: If the schema is malformed
    """
    schema = Schema.from_mapping(schema)

    def decorator(cls: type) -> WrappedType:
        builder = TypeBuilder(cls, mode=mode)
        for name, producer in schema.fields.items():
            builder.field(name, producer)

        own_methods = [
            name for name, member in vars(cls).items()
            if inspect.isfunction(member) and not _is_dunder(name)
        ]
        for name in own_methods:
            if name in schema.contracts:
                builder.method(name, schema.contracts[name])
            elif name in schema.fields:
                # Still a field for construction; the method gets an empty contract
                logger.debug(f"{cls.__qualname__}.{name}: field rule on a method, no call checks")
                builder.method(name)

        unmatched = [name for name in schema.contracts if name not in own_methods]
        if unmatched:
            logger.debug(f"{cls.__qualname__}: contracts with no matching method {unmatched}")

        if schema.requires_constructor_parameters:
            builder.constructor_parameters(schema.constructor_parameters)
        return builder.build()
    return decorator


def _log_violation(type_name: str, result: ConstructorValidationResult) -> None:
    """Log a constructor violation that WARN mode let through."""
    logger.warning(
        f"Contract violation: type={type_name} stage=constructor "
        f"fields={', '.join(result.error_payload)}",
        extra={
            "event": "contract_violation",
            "type_name": type_name,
            "stage": "constructor",
            "details": result.to_dict()["errorPayload"],
        }
    )


def _is_dunder(name: str) -> bool:
    return name.startswith('__') and name.endswith('__')
