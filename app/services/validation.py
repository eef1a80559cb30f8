# app/services/validation.py
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from app.models.task import UPDATABLE_FIELDS

TITLE_REQUIRED = "Title is required"


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ValidationResult":
        return cls(ok=False, error=error)


def validate_title(raw: Any) -> ValidationResult:
    if not isinstance(raw, str) or not raw.strip():
        return ValidationResult.failure(TITLE_REQUIRED)
    return ValidationResult.success(raw.strip())


def validate_patch(patch: Mapping[str, Any]) -> ValidationResult:
    """Keep only the updatable fields of ``patch``, checking each one.

    Unknown keys are dropped and ``None`` values count as absent.
    """
    fields: Dict[str, Any] = {}
    for name in UPDATABLE_FIELDS:
        value = patch.get(name)
        if value is None:
            continue
        if name == "title":
            result = validate_title(value)
            if not result.ok:
                return result
            value = result.value
        elif name == "completed" and not isinstance(value, bool):
            return ValidationResult.failure("completed must be a boolean")
        fields[name] = value
    return ValidationResult.success(fields)
