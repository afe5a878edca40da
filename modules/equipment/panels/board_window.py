"""Equipment board window: the equipment table plus its dialogs."""
from __future__ import annotations

import logging
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from ..controllers.board import EquipmentBoard, EquipmentRow
from ..controllers.equipment_form import EquipmentFormController
from ..controllers.history_viewer import MaintenanceHistoryViewer
from ..controllers.maintenance_form import MaintenanceFormController
from ..models.selection import CLOSED, selected_equipment
from .dialogs import EquipmentFormDialog, MaintenanceFormDialog, MaintenanceHistoryDialog
from .tasks import spawn

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading equipment..."
EMPTY_TEXT = "No equipment found. Add some to get started."

_TONE_COLORS = {
    "success": ("#10b981", "#ffffff"),
    "secondary": ("#e5e5e5", "#171717"),
    "destructive": ("#ef4444", "#ffffff"),
    "default": ("#171717", "#ffffff"),
}


class EquipmentBoardWindow(QtWidgets.QWidget):
    """Table of equipment with per-row actions.

    The window never changes board state itself; buttons call the board and
    the board's change listener re-renders the table and opens or closes the
    dialog that matches the current selection.
    """

    COLUMNS = ("Name", "Type", "Status", "Last Cleaned", "Actions")

    closed = QtCore.Signal()

    def __init__(self, board: EquipmentBoard, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.board = board
        self.dialog: Optional[QtWidgets.QDialog] = None
        self._dialog_selection = CLOSED
        self.setWindowTitle("Equipment Management")
        self.resize(1100, 640)

        title = QtWidgets.QLabel("Equipment Management")
        font = title.font()
        font.setPointSize(font.pointSize() + 8)
        font.setBold(True)
        title.setFont(font)
        subtitle = QtWidgets.QLabel("Track and manage your facility equipment and maintenance logs.")
        subtitle.setStyleSheet("color: #737373;")
        self.add_button = QtWidgets.QPushButton("Add Equipment")
        self.add_button.clicked.connect(lambda _=False: self.board.open_create())

        header = QtWidgets.QHBoxLayout()
        titles = QtWidgets.QVBoxLayout()
        titles.addWidget(title)
        titles.addWidget(subtitle)
        header.addLayout(titles)
        header.addStretch(1)
        header.addWidget(self.add_button)

        self.table = QtWidgets.QTableWidget(0, len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels(list(self.COLUMNS))
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.NoSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.placeholder = QtWidgets.QLabel(LOADING_TEXT)
        self.placeholder.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.placeholder.setMinimumHeight(96)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addLayout(header)
        layout.addWidget(self.table)
        layout.addWidget(self.placeholder)

        self.board.add_listener(self._on_board_changed)
        self.render()

    def start(self):
        """Mount the board; must be called with the event loop running."""
        return spawn(self.board.mount())

    # ---- Rendering --------------------------------------------------------
    def render(self) -> None:
        state = self.board.view_state
        rows = self.board.rows() if state == "ready" else []
        self.placeholder.setText(LOADING_TEXT if state == "loading" else EMPTY_TEXT)
        self.placeholder.setVisible(state != "ready")
        self.table.setRowCount(len(rows))
        for index, row in enumerate(rows):
            self._render_row(index, row)

    def _render_row(self, index: int, row: EquipmentRow) -> None:
        name = QtWidgets.QTableWidgetItem(row.name)
        font = name.font()
        font.setBold(True)
        name.setFont(font)
        self.table.setItem(index, 0, name)
        self.table.setItem(index, 1, QtWidgets.QTableWidgetItem(row.type_name))

        badge = QtWidgets.QTableWidgetItem(row.badge.label)
        background, foreground = _TONE_COLORS.get(row.badge.tone, _TONE_COLORS["default"])
        badge.setBackground(QtGui.QColor(background))
        badge.setForeground(QtGui.QColor(foreground))
        self.table.setItem(index, 2, badge)
        self.table.setItem(index, 3, QtWidgets.QTableWidgetItem(row.last_cleaned))

        item = row.equipment
        actions = QtWidgets.QWidget()
        box = QtWidgets.QHBoxLayout(actions)
        box.setContentsMargins(0, 0, 0, 0)
        box.addStretch(1)
        for text, slot in (
            ("Log Maintenance", lambda _=False, it=item: self.board.open_maintenance(it)),
            ("View History", lambda _=False, it=item: self.board.open_history(it)),
            ("Edit", lambda _=False, it=item: self.board.open_edit(it)),
            ("Delete", lambda _=False, it=item: self.delete(it.id)),
        ):
            button = QtWidgets.QPushButton(text)
            button.setFlat(True)
            button.setObjectName(f"{text.lower().replace(' ', '_')}_{item.id}")
            button.clicked.connect(slot)
            box.addWidget(button)
        self.table.setCellWidget(index, 4, actions)

    def delete(self, equipment_id: int):
        return spawn(self.board.request_delete(equipment_id))

    # ---- Dialog sync ------------------------------------------------------
    def _on_board_changed(self) -> None:
        self.render()
        self._sync_dialog()

    def _sync_dialog(self) -> None:
        selection = self.board.selection
        if selection is self._dialog_selection:
            return
        if self.dialog is not None:
            self.dialog.dismiss()  # type: ignore[attr-defined]
            self.dialog.deleteLater()
            self.dialog = None
        self._dialog_selection = selection

        child = self.board.active
        equipment = selected_equipment(selection)
        name = equipment.name if equipment is not None else ""
        if isinstance(child, EquipmentFormController):
            self.dialog = EquipmentFormDialog(child, self)
        elif isinstance(child, MaintenanceFormController):
            self.dialog = MaintenanceFormDialog(child, name, self)
        elif isinstance(child, MaintenanceHistoryViewer):
            dialog = MaintenanceHistoryDialog(child, name, self, on_close=self.board.close_any)
            self.dialog = dialog
            spawn(dialog.load())
        if self.dialog is not None:
            logger.debug("[board-window] opening %s", type(self.dialog).__name__)
            self.dialog.open()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # type: ignore[override]
        self.board.remove_listener(self._on_board_changed)
        self.board.unmount()
        if self.dialog is not None:
            self.dialog.dismiss()  # type: ignore[attr-defined]
            self.dialog = None
        self.closed.emit()
        super().closeEvent(event)


__all__ = ["EquipmentBoardWindow", "LOADING_TEXT", "EMPTY_TEXT"]
