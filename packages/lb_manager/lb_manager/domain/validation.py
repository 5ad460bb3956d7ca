"""Collected field-level validation results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ValidationError


@dataclass(frozen=True)
class FieldError:
    """A single failed check on one input field.

    Attributes:
        field: Name of the offending input field
        code: Machine-readable error code (e.g. ``stack.matchesNewStack``)
        message: Human-readable description
    """

    field: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return a plain dictionary representation."""
        return {"field": self.field, "code": self.code, "message": self.message}


@dataclass
class ValidationResult:
    """Accumulates field errors instead of stopping at the first one."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no errors were recorded."""
        return not self.errors

    def add(self, field_name: str, code: str, message: str) -> None:
        """Record an error for a field."""
        self.errors.append(FieldError(field=field_name, code=code, message=message))

    def extend(self, other: ValidationResult | Iterable[FieldError]) -> None:
        """Merge errors from another result or iterable of errors."""
        if isinstance(other, ValidationResult):
            self.errors.extend(other.errors)
        else:
            self.errors.extend(other)

    def errors_for(self, field_name: str) -> list[FieldError]:
        """Return the errors recorded against a single field."""
        return [error for error in self.errors if error.field == field_name]

    def has_error(self, field_name: str, code: str | None = None) -> bool:
        """Check whether a field (optionally with a given code) failed."""
        return any(code is None or error.code == code for error in self.errors_for(field_name))

    def summary(self) -> str:
        """Join all messages into one line."""
        return "; ".join(f"{error.field}: {error.message}" for error in self.errors)

    def raise_if_invalid(self, message: str = "Validation failed", command: Any = None) -> None:
        """Raise ValidationError carrying every collected error.

        Raises:
            ValidationError: If any errors were recorded
        """
        if self.errors:
            raise ValidationError(
                f"{message}: {self.summary()}",
                field_errors=self.errors,
                command=command,
            )
