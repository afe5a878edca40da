"""Data transfer objects and enums for the Equipment module.

These dataclasses are intentionally lightweight so they can be reused by the
controllers, widgets and tests without pulling in any Qt dependencies.  Dates
are kept as the ISO strings received from the API; parsing only happens when a
value is rendered.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class EquipmentStatus(str, Enum):
    """Known operational states for a piece of equipment."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNDER_MAINTENANCE = "Under Maintenance"


STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in EquipmentStatus)


@dataclass(frozen=True, slots=True)
class Equipment:
    """A tracked physical asset as returned by the server.

    ``status`` is stored verbatim so an unexpected value from the server can
    still be displayed.
    """

    id: int
    name: str
    type_name: str
    status: str
    last_cleaned_date: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Equipment":
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            type_name=str(data.get("type_name") or ""),
            status=str(data.get("status") or ""),
            last_cleaned_date=str(data.get("last_cleaned_date") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MaintenanceEntry:
    equipment_id: int
    maintenance_date: str
    notes: str
    performed_by: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MaintenanceEntry":
        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            equipment_id=int(data["equipment_id"]),
            maintenance_date=str(data.get("maintenance_date") or ""),
            notes=str(data.get("notes") or ""),
            performed_by=str(data.get("performed_by") or ""),
        )


@dataclass(frozen=True, slots=True)
class StatusBadge:
    """Display tag for an equipment status."""

    label: str
    tone: str


__all__ = [
    "EquipmentStatus",
    "STATUS_VALUES",
    "Equipment",
    "MaintenanceEntry",
    "StatusBadge",
]
