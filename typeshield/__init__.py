"""
Runtime schema validation and method guarding for classes.

Provides the field producers (NumberType, StringType), the FunctionType
contract marker, and wrap_with_type / TypeBuilder to wrap a class.
"""

from .codes import ErrorCode, IssueKind
from .config import EnforcementMode, get_mode, set_global_mode, reset_global_mode
from .errors import (
    TypeShieldError,
    SchemaError,
    InvalidArgumentError,
    MissingConstructorParameters,
    ConstructionRejected,
)
from .rules import NumberRule, StringRule, FunctionContract
from .results import (
    Issue,
    ValidationResult,
    ConstructorValidationResult,
    MethodCallResult,
)
from .validators import NumberType, StringType, FunctionType, Types
from .schema import Schema, CONSTRUCTOR_PARAMETERS_KEY
from .construction import validate_object_construction
from .interceptor import required_function_parameters
from .wrapper import wrap_with_type, TypeBuilder, WrappedType

__all__ = [
    'ErrorCode',
    'IssueKind',
    'EnforcementMode',
    'get_mode',
    'set_global_mode',
    'reset_global_mode',
    'TypeShieldError',
    'SchemaError',
    'InvalidArgumentError',
    'MissingConstructorParameters',
    'ConstructionRejected',
    'NumberRule',
    'StringRule',
    'FunctionContract',
    'Issue',
    'ValidationResult',
    'ConstructorValidationResult',
    'MethodCallResult',
    'NumberType',
    'StringType',
    'FunctionType',
    'Types',
    'Schema',
    'CONSTRUCTOR_PARAMETERS_KEY',
    'validate_object_construction',
    'required_function_parameters',
    'wrap_with_type',
    'TypeBuilder',
    'WrappedType',
]
