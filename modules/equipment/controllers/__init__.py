from .board import DELETE_PROMPT, EquipmentBoard, EquipmentRow, status_label
from .equipment_form import EquipmentFormController
from .history_viewer import MaintenanceHistoryViewer
from .maintenance_form import MaintenanceFormController

__all__ = [
    "DELETE_PROMPT",
    "EquipmentBoard",
    "EquipmentRow",
    "status_label",
    "EquipmentFormController",
    "MaintenanceHistoryViewer",
    "MaintenanceFormController",
]
