"""Dialogs for adding/editing equipment, logging maintenance and history."""
from __future__ import annotations

from typing import Dict, Optional

from PySide6 import QtCore, QtWidgets

from utils.timefmt import format_display_date

from ..controllers.base import FormController
from ..controllers.equipment_form import EquipmentFormController
from ..controllers.history_viewer import MaintenanceHistoryViewer
from ..controllers.maintenance_form import MaintenanceFormController
from ..models.dto import STATUS_VALUES
from .tasks import spawn

_ERROR_STYLE = "color: #dc2626; font-size: 11px;"


class _BoardDialog(QtWidgets.QDialog):
    """Dialog whose lifetime is owned by the board window.

    Closing it from the window (``dismiss``) does not report a cancel back to
    the controller; closing it by the user does.
    """

    def __init__(self, title: str, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setMinimumWidth(420)
        self._dismissed = False
        self.finished.connect(self._on_finished)

    def dismiss(self) -> None:
        self._dismissed = True
        self.done(QtWidgets.QDialog.DialogCode.Rejected)

    def _on_finished(self, _result: int) -> None:
        if not self._dismissed:
            self._dismissed = True
            self.user_closed()

    def user_closed(self) -> None:
        pass


class _FormDialog(_BoardDialog):
    submit_text = "Save"
    pending_text = "Saving..."

    def __init__(
        self,
        title: str,
        form: FormController,
        parent: QtWidgets.QWidget | None = None,
        submit_text: Optional[str] = None,
    ) -> None:
        super().__init__(title, parent)
        if submit_text:
            self.submit_text = submit_text
        self.form = form
        self.inputs: Dict[str, QtWidgets.QWidget] = {}
        self.error_labels: Dict[str, QtWidgets.QLabel] = {}

        layout = QtWidgets.QVBoxLayout(self)
        self._fields = QtWidgets.QFormLayout()
        layout.addLayout(self._fields)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addStretch(1)
        self.cancel_button = QtWidgets.QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)
        self.submit_button = QtWidgets.QPushButton(self.submit_text)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self.submit)
        buttons.addWidget(self.cancel_button)
        buttons.addWidget(self.submit_button)
        layout.addLayout(buttons)

    def _add_field(self, name: str, label: str, widget: QtWidgets.QWidget) -> None:
        error = QtWidgets.QLabel("")
        error.setStyleSheet(_ERROR_STYLE)
        error.setVisible(False)
        column = QtWidgets.QVBoxLayout()
        column.setSpacing(2)
        column.addWidget(widget)
        column.addWidget(error)
        self._fields.addRow(label, column)
        self.inputs[name] = widget
        self.error_labels[name] = error

    def _read(self, name: str) -> str:
        widget = self.inputs[name]
        if isinstance(widget, QtWidgets.QComboBox):
            return widget.currentText()
        return widget.text()  # type: ignore[attr-defined]

    def _push_fields(self) -> None:
        for name in self.inputs:
            self.form.set_field(name, self._read(name))

    def render_state(self) -> None:
        for name, label in self.error_labels.items():
            message = self.form.errors.get(name, "")
            label.setText(message)
            label.setVisible(bool(message))
        self.submit_button.setEnabled(not self.form.pending)
        self.submit_button.setText(self.pending_text if self.form.pending else self.submit_text)

    def submit(self):
        """Copy the widgets into the form and submit it on the event loop."""
        if self.form.pending:
            return None
        self._push_fields()
        return spawn(self._submit())

    async def _submit(self) -> bool:
        self.submit_button.setEnabled(False)
        self.submit_button.setText(self.pending_text)
        try:
            return await self.form.submit()
        finally:
            if not self._dismissed:
                self.render_state()

    def user_closed(self) -> None:
        spawn(self.form.cancel())


class EquipmentFormDialog(_FormDialog):
    def __init__(self, form: EquipmentFormController, parent: QtWidgets.QWidget | None = None) -> None:
        title = "Edit Equipment" if form.is_edit else "Add New Equipment"
        submit_text = "Update Equipment" if form.is_edit else "Add Equipment"
        super().__init__(title, form, parent, submit_text=submit_text)

        name = QtWidgets.QLineEdit(form.values["name"])
        name.setPlaceholderText("Equipment name")
        type_name = QtWidgets.QLineEdit(form.values["type_name"])
        type_name.setPlaceholderText("e.g. Pump, Compressor")
        status = QtWidgets.QComboBox()
        status.addItems(list(STATUS_VALUES))
        if form.values["status"] and form.values["status"] not in STATUS_VALUES:
            status.addItem(form.values["status"])
        status.setCurrentText(form.values["status"])
        cleaned = QtWidgets.QLineEdit(form.values["last_cleaned_date"])
        cleaned.setPlaceholderText("YYYY-MM-DD")

        self._add_field("name", "Name", name)
        self._add_field("type_name", "Type", type_name)
        self._add_field("status", "Status", status)
        self._add_field("last_cleaned_date", "Last Cleaned", cleaned)
        self.render_state()


class MaintenanceFormDialog(_FormDialog):
    submit_text = "Log Maintenance"
    pending_text = "Logging..."

    def __init__(
        self,
        form: MaintenanceFormController,
        equipment_name: str,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(f"Log Maintenance: {equipment_name}", form, parent)
        date = QtWidgets.QLineEdit(form.values["maintenance_date"])
        date.setPlaceholderText("YYYY-MM-DD")
        notes = QtWidgets.QLineEdit(form.values["notes"])
        notes.setPlaceholderText("Maintenance details")
        performed_by = QtWidgets.QLineEdit(form.values["performed_by"])
        performed_by.setPlaceholderText("Name of technician")

        self._add_field("maintenance_date", "Maintenance Date", date)
        self._add_field("notes", "Notes", notes)
        self._add_field("performed_by", "Performed By", performed_by)
        self.render_state()


class MaintenanceHistoryDialog(_BoardDialog):
    COLUMNS = ("Date", "Performed By", "Notes")

    def __init__(
        self,
        viewer: MaintenanceHistoryViewer,
        equipment_name: str,
        parent: QtWidgets.QWidget | None = None,
        on_close=None,
    ) -> None:
        super().__init__(f"Maintenance History: {equipment_name}", parent)
        self.setMinimumWidth(640)
        self.viewer = viewer
        self._on_close = on_close

        layout = QtWidgets.QVBoxLayout(self)
        self.placeholder = QtWidgets.QLabel("")
        self.placeholder.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.table = QtWidgets.QTableWidget(0, len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels(list(self.COLUMNS))
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.placeholder)
        layout.addWidget(self.table)
        self.render_state()

    async def load(self) -> None:
        await self.viewer.load()
        if not self.viewer.closed:
            self.render_state()

    def render_state(self) -> None:
        state = self.viewer.state
        messages = {
            "loading": "Loading history...",
            "empty": "No maintenance records found.",
            "unavailable": "Maintenance history is unavailable right now.",
        }
        self.placeholder.setText(messages.get(state, ""))
        self.placeholder.setVisible(state in messages)
        self.table.setVisible(state == "ready")
        self.table.setRowCount(len(self.viewer.entries))
        for row, entry in enumerate(self.viewer.entries):
            values = (format_display_date(entry.maintenance_date), entry.performed_by, entry.notes)
            for col, value in enumerate(values):
                self.table.setItem(row, col, QtWidgets.QTableWidgetItem(value))

    def user_closed(self) -> None:
        if self._on_close is not None:
            self._on_close()


__all__ = [
    "EquipmentFormDialog",
    "MaintenanceFormDialog",
    "MaintenanceHistoryDialog",
]
