"""Custom exceptions for the Equipment module."""
from __future__ import annotations

from typing import Dict, Optional


class EquipmentError(RuntimeError):
    """Base exception for equipment operations."""


class ApiError(EquipmentError):
    """Raised when the equipment API answers with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"Request failed with status {status_code}")
        self.status_code = status_code
        self.message = message


class EquipmentValidationError(EquipmentError):
    """Raised when unwrapping a validation result that carries field errors."""

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = dict(errors)


__all__ = [
    "EquipmentError",
    "ApiError",
    "EquipmentValidationError",
]
