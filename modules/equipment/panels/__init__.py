"""Qt widgets for the equipment board (PySide6 only)."""

from .board_window import EquipmentBoardWindow
from .dialogs import EquipmentFormDialog, MaintenanceFormDialog, MaintenanceHistoryDialog
from .toast import QtConfirmer, ToastNotifier

__all__ = [
    "EquipmentBoardWindow",
    "EquipmentFormDialog",
    "MaintenanceFormDialog",
    "MaintenanceHistoryDialog",
    "QtConfirmer",
    "ToastNotifier",
]
