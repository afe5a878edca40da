"""Validation schemas for the equipment and maintenance forms.

Both forms are validated by pure functions that take the raw field values and
return a :class:`ValidationResult`: either the cleaned payload or a mapping of
field name to a message suitable for showing next to that field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .exceptions import EquipmentValidationError
from .models.dto import STATUS_VALUES

T = TypeVar("T", bound=BaseModel)


def _required(value: Any, message: str) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise PydanticCustomError("required", message)
    return text.strip()


def _iso_date(value: Any, message: str) -> str:
    text = _required(value, message)
    try:
        parsed = datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        raise PydanticCustomError("invalid_date", "Enter a valid date (YYYY-MM-DD)")
    return parsed.date().isoformat()


class EquipmentInput(BaseModel):
    name: Any = None
    type_name: Any = None
    status: Any = None
    last_cleaned_date: Any = None

    @field_validator("name")
    @classmethod
    def name_required(cls, value: Any) -> str:
        return _required(value, "Name is required")

    @field_validator("type_name")
    @classmethod
    def type_required(cls, value: Any) -> str:
        return _required(value, "Type is required")

    @field_validator("status")
    @classmethod
    def known_status(cls, value: Any) -> str:
        text = "" if value is None else str(value)
        if text not in STATUS_VALUES:
            raise PydanticCustomError("status", "Please select a valid status")
        return text

    @field_validator("last_cleaned_date")
    @classmethod
    def cleaned_date(cls, value: Any) -> str:
        return _iso_date(value, "Please select the last cleaned date")


class MaintenanceInput(BaseModel):
    maintenance_date: Any = None
    notes: Any = None
    performed_by: Any = None

    @field_validator("maintenance_date")
    @classmethod
    def maintenance_date_valid(cls, value: Any) -> str:
        return _iso_date(value, "Please select a date")

    @field_validator("notes")
    @classmethod
    def notes_required(cls, value: Any) -> str:
        return _required(value, "Please add some notes")

    @field_validator("performed_by")
    @classmethod
    def performer_required(cls, value: Any) -> str:
        return _required(value, "Please specify who performed it")


@dataclass
class ValidationResult(Generic[T]):
    """Outcome of validating one form."""

    value: Optional[T] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> T:
        if not self.ok:
            raise EquipmentValidationError(self.errors)
        return self.value  # type: ignore[return-value]


def _validate(model: type[T], values: Mapping[str, Any]) -> ValidationResult[T]:
    data = {name: values.get(name) for name in model.model_fields}
    try:
        return ValidationResult(value=model.model_validate(data))
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            loc = err.get("loc") or ("__root__",)
            errors.setdefault(str(loc[0]), err["msg"])
        return ValidationResult(errors=errors)


def validate_equipment(values: Mapping[str, Any]) -> ValidationResult[EquipmentInput]:
    return _validate(EquipmentInput, values)


def validate_maintenance(values: Mapping[str, Any]) -> ValidationResult[MaintenanceInput]:
    return _validate(MaintenanceInput, values)


__all__ = [
    "EquipmentInput",
    "MaintenanceInput",
    "ValidationResult",
    "validate_equipment",
    "validate_maintenance",
]
