"""Qt implementations of the notification sink and delete confirmation."""

from __future__ import annotations

import asyncio
import time
from typing import Any, Dict, List, Optional

from PySide6 import QtCore, QtWidgets

from ..notifications import LoggingNotifier

_STYLES = {
    "success": "background-color: #10b981; color: white;",
    "error": "background-color: #ef4444; color: white;",
    "warning": "background-color: #f59e0b; color: #171717;",
    "info": "background-color: #171717; color: white;",
}


class ToastNotifier(QtCore.QObject):
    """Short-lived toast popups in the top-right corner of an anchor widget."""

    showToast = QtCore.Signal(dict)

    def __init__(self, anchor: Optional[QtWidgets.QWidget] = None, duration_ms: int = 4500) -> None:
        super().__init__()
        self._anchor = anchor
        self.duration_ms = duration_ms
        self.recent: List[Dict[str, Any]] = []
        self._throttle: Dict[tuple[str, str], float] = {}
        self._log = LoggingNotifier()

    def attach(self, anchor: QtWidgets.QWidget) -> None:
        self._anchor = anchor

    def notify(self, kind: str, message: str) -> None:
        key = (kind, message)
        now = time.monotonic()
        if key in self._throttle and now - self._throttle[key] < 2:
            return
        self._throttle[key] = now

        self._log.notify(kind, message)
        payload = {"severity": kind, "message": message, "toast_duration_ms": self.duration_ms}
        self.recent.append(payload)
        self.showToast.emit(payload)
        if self._anchor is not None:
            self._show_popup(payload)

    def _show_popup(self, payload: Dict[str, Any]) -> None:
        label = QtWidgets.QLabel(payload["message"], self._anchor)
        label.setStyleSheet(
            _STYLES.get(payload["severity"], _STYLES["info"]) + " padding: 8px 14px; border-radius: 6px;"
        )
        label.adjustSize()
        anchor = self._anchor
        label.move(max(0, anchor.width() - label.width() - 16), 16)
        label.show()
        label.raise_()
        QtCore.QTimer.singleShot(self.duration_ms, label.deleteLater)


class QtConfirmer:
    """Yes/No prompt that resolves a future instead of blocking the loop."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        self.parent = parent

    def confirm(self, message: str) -> "asyncio.Future[bool]":
        future: "asyncio.Future[bool]" = asyncio.get_running_loop().create_future()
        box = QtWidgets.QMessageBox(
            QtWidgets.QMessageBox.Icon.Question,
            "Confirm",
            message,
            QtWidgets.QMessageBox.StandardButton.Yes | QtWidgets.QMessageBox.StandardButton.No,
            self.parent,
        )
        box.setDefaultButton(QtWidgets.QMessageBox.StandardButton.No)
        yes = box.button(QtWidgets.QMessageBox.StandardButton.Yes)

        def _done(_result: int) -> None:
            if not future.done():
                future.set_result(box.clickedButton() is yes)
            box.deleteLater()

        box.finished.connect(_done)
        box.open()
        return future


__all__ = ["ToastNotifier", "QtConfirmer"]
