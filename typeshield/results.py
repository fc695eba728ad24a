"""
Validation result types.

Every result carries a uniform view of its failures (``issues``, a tuple of
Issue) next to the payload mapping callers already inspect. ``to_dict()``
renders the mapping shape:

    ValidationResult             {"error", "payload"?, "validStringTypes"?}
    ConstructorValidationResult  {"error", "errorPayload"}
    MethodCallResult             {"error", "errorPayload"}            (code 400)
                                 {"error", "code", "errorPayload"}    (code 500)
                                 {"error", "result"}                  (passed)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .codes import ErrorCode, IssueKind, PARAMETERS_MISSING_MESSAGE


@dataclass(frozen=True)
class Issue:
    """A single validation failure."""
    kind: IssueKind
    data: Any = None

    @property
    def code(self) -> Optional[ErrorCode]:
        return self.kind.code


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value."""
    error: bool
    payload: Optional[Dict[Any, Any]] = None
    issues: Tuple[Issue, ...] = ()
    valid_string_types: Optional[List[str]] = None

    @property
    def kinds(self) -> Tuple[IssueKind, ...]:
        return tuple(issue.kind for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"error": self.error}
        if self.payload is not None:
            result["payload"] = dict(self.payload)
        if self.valid_string_types is not None:
            result["validStringTypes"] = self.valid_string_types
        return result


@dataclass(frozen=True)
class ConstructorValidationResult:
    """Aggregate outcome of validating a constructor argument mapping."""
    error: bool
    error_payload: Dict[str, ValidationResult] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error,
            "errorPayload": {
                name: result.to_dict() for name, result in self.error_payload.items()
            },
        }


@dataclass(frozen=True)
class MethodCallResult:
    """Outcome of calling an intercepted method."""
    error: bool
    code: Optional[ErrorCode] = None
    error_payload: Optional[Dict[str, Any]] = None
    result: Any = None

    @classmethod
    def passed(cls, result: Any) -> "MethodCallResult":
        return cls(error=False, result=result)

    @classmethod
    def missing_parameters(cls, missing: List[str]) -> "MethodCallResult":
        return cls(
            error=True,
            code=ErrorCode.MISMATCH_PARAMETERS,
            error_payload={
                "code": ErrorCode.MISMATCH_PARAMETERS,
                "data": list(missing),
                "message": PARAMETERS_MISSING_MESSAGE,
            },
        )

    @classmethod
    def invalid_attributes(cls, failures: Dict[str, ValidationResult]) -> "MethodCallResult":
        return cls(
            error=True,
            code=ErrorCode.UNDEFINED_OR_NULL_ATTRIBUTES,
            error_payload=dict(failures),
        )

    def to_dict(self) -> Dict[str, Any]:
        if not self.error:
            return {"error": False, "result": self.result}
        if self.code == ErrorCode.MISMATCH_PARAMETERS:
            return {"error": True, "errorPayload": dict(self.error_payload)}
        return {
            "error": True,
            "code": self.code,
            "errorPayload": {
                name: result.to_dict() for name, result in self.error_payload.items()
            },
        }
