from .dto import STATUS_VALUES, Equipment, EquipmentStatus, MaintenanceEntry, StatusBadge
from .selection import (
    CLOSED,
    Closed,
    Creating,
    Editing,
    LoggingMaintenance,
    Selection,
    ViewingHistory,
    selected_equipment,
)

__all__ = [
    "STATUS_VALUES",
    "Equipment",
    "EquipmentStatus",
    "MaintenanceEntry",
    "StatusBadge",
    "CLOSED",
    "Closed",
    "Creating",
    "Editing",
    "LoggingMaintenance",
    "Selection",
    "ViewingHistory",
    "selected_equipment",
]
