"""
Exception hierarchy.

Two failure channels exist:
- Raised exceptions (this module) for structural misuse: a non-mapping
  argument, missing required constructor parameters, a malformed schema.
- Returned result objects (typeshield.results) for data-shape violations.

The one crossover is ConstructionRejected: the wrapped factory raises it
with the full constructor validation result attached.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class TypeShieldError(Exception):
    """Base class for every error raised by typeshield."""


class SchemaError(TypeShieldError, ValueError):
    """Raised when a schema or a builder registration is malformed."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class InvalidArgumentError(TypeShieldError, TypeError):
    """Raised when a constructor or method receives a non-mapping argument."""

    def __init__(self, message: str, received_value: Any = None):
        super().__init__(message)
        self.received_value = received_value


class MissingConstructorParameters(TypeShieldError, ValueError):
    """Raised when required constructor parameters are absent."""

    def __init__(self, expected: List[str], received: List[str]):
        self.expected = list(expected)
        self.received = list(received)
        self.missing = [name for name in self.expected if name not in self.received]
        super().__init__(
            f"Mismatch constructor argument. Expected {', '.join(map(str, self.expected))} "
            f"but only got {', '.join(map(str, self.received))}."
        )


@dataclass
class ConstructionRejected(TypeShieldError):
    """Raised by a wrapped factory when field validation fails."""
    result: Any
    message: str = "Constructor argument failed validation."
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.details:
            self.details = {"fields": sorted(self.result.error_payload)}

    def __str__(self):
        return f"{self.message} Invalid fields: {', '.join(self.details.get('fields', []))}."

    def to_dict(self) -> Dict[str, Any]:
        """Mapping shape of the constructor validation result."""
        return self.result.to_dict()
