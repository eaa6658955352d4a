"""
Validation rule input and the structured result of validating a value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationRule(BaseModel):
    """Declared constraints for one property.

    Every field is stored exactly as given, without coercion: an odd type tag
    is reported by the type check, bounds are judged by the numeric and
    length checks, and only ``required is False`` enables the empty shortcut.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Any = Field(None, description="Type tag, e.g. 'TEXT' or 'INTEGER'")
    min: Any = Field(None, description="Lower bound (value or length)")
    max: Any = Field(None, description="Upper bound (value or length)")
    required: Any = Field(None, description="Only False (not 0 or \"false\") allows empty values")


@dataclass(frozen=True)
class ValidationMessage:
    message: str
    value: Any


@dataclass
class ValidationResult:
    """Outcome of validating one value.

    ``status`` only ever goes from True to False, through ``fail``.
    """
    status: bool = True
    messages: list[ValidationMessage] = field(default_factory=list)

    def fail(self, message: str, value: Any) -> None:
        self.status = False
        self.messages.append(ValidationMessage(message=message, value=value))

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "messages": [{"message": m.message, "value": m.value} for m in self.messages],
        }
