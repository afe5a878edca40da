"""Equipment board: the collection, the loading flag and the open dialog.

The board is the only writer of shared state.  Child controllers receive an
identifier or initial record and report back through their completion
callbacks; the board then closes the dialog and, after a confirmed mutation,
re-fetches the whole collection from the server.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional, Protocol, Union

from utils.timefmt import format_display_date

from ..api.client import REQUEST_ERRORS, EquipmentApiClient
from ..exceptions import ApiError
from ..models.dto import Equipment, EquipmentStatus, StatusBadge
from ..models.selection import (
    CLOSED,
    Creating,
    Editing,
    LoggingMaintenance,
    Selection,
    ViewingHistory,
)
from ..notifications import NotificationSink
from .equipment_form import EquipmentFormController
from .history_viewer import MaintenanceHistoryViewer
from .maintenance_form import MaintenanceFormController

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this equipment?"

_STATUS_TONES = {
    EquipmentStatus.ACTIVE.value: "success",
    EquipmentStatus.INACTIVE.value: "secondary",
    EquipmentStatus.UNDER_MAINTENANCE.value: "destructive",
}

Child = Union[EquipmentFormController, MaintenanceFormController, MaintenanceHistoryViewer]


class Confirmer(Protocol):
    def confirm(self, message: str) -> Union[bool, Awaitable[bool]]:
        ...


def status_label(status: object) -> StatusBadge:
    """Map a status to its badge; unknown values are shown as-is."""
    text = "" if status is None else str(status)
    return StatusBadge(label=text, tone=_STATUS_TONES.get(text, "default"))


@dataclass(frozen=True, slots=True)
class EquipmentRow:
    equipment: Equipment
    name: str
    type_name: str
    badge: StatusBadge
    last_cleaned: str


class EquipmentBoard:
    def __init__(
        self,
        client: EquipmentApiClient,
        notifier: NotificationSink,
        confirmer: Confirmer,
    ) -> None:
        self._client = client
        self._notifier = notifier
        self._confirmer = confirmer
        self._listeners: List[Callable[[], None]] = []
        self.collection: List[Equipment] = []
        self.loading = True
        self.selection: Selection = CLOSED
        self.active: Optional[Child] = None
        self.mounted = False

    # ---- Change notification ---------------------------------------------
    def add_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self) -> None:
        for callback in list(self._listeners):
            try:
                callback()
            except Exception as e:
                logger.warning("[board] listener failed: %s", e)

    # ---- Lifecycle --------------------------------------------------------
    async def mount(self) -> None:
        self.mounted = True
        await self.refresh()

    def unmount(self) -> None:
        self.mounted = False
        self._set_selection(CLOSED, None)

    # ---- Collection -------------------------------------------------------
    async def refresh(self) -> None:
        """Replace the collection with the server's current list."""
        try:
            items = await self._client.list_equipment()
        except REQUEST_ERRORS as e:
            logger.warning("[board] failed to load equipment: %s", e)
            if not self.mounted:
                return
            self._notifier.notify("error", "Failed to load equipment")
        else:
            if not self.mounted:
                logger.debug("[board] unmounted, dropping %d fetched rows", len(items))
                return
            self.collection = list(items)
        self.loading = False
        self._changed()

    async def request_delete(self, equipment_id: int) -> bool:
        answer = self._confirmer.confirm(DELETE_PROMPT)
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.debug("[board] delete of %s declined", equipment_id)
            return False

        try:
            await self._client.delete_equipment(equipment_id)
        except ApiError as e:
            logger.warning("[board] delete of %s rejected: %s", equipment_id, e)
            if self.mounted:
                self._notifier.notify("error", "Failed to delete equipment")
            return False
        except REQUEST_ERRORS as e:
            logger.warning("[board] delete of %s failed: %s", equipment_id, e)
            if self.mounted:
                self._notifier.notify("error", "Error deleting equipment")
            return False

        if not self.mounted:
            logger.debug("[board] unmounted, dropping delete result for %s", equipment_id)
            return True
        self._notifier.notify("success", "Equipment deleted")
        await self.refresh()
        return True

    @property
    def view_state(self) -> str:
        if self.loading:
            return "loading"
        return "ready" if self.collection else "empty"

    def rows(self) -> List[EquipmentRow]:
        return [
            EquipmentRow(
                equipment=item,
                name=item.name,
                type_name=item.type_name,
                badge=status_label(item.status),
                last_cleaned=format_display_date(item.last_cleaned_date),
            )
            for item in self.collection
        ]

    status_label = staticmethod(status_label)

    # ---- Selection --------------------------------------------------------
    def _set_selection(self, selection: Selection, child: Optional[Child]) -> None:
        if isinstance(self.active, MaintenanceHistoryViewer):
            self.active.close()
        self.selection = selection
        self.active = child
        self._changed()

    def _completion(self, selection: Selection):
        async def on_success() -> None:
            if self.selection is selection:
                self._set_selection(CLOSED, None)
            await self.refresh()

        async def on_cancel() -> None:
            if self.selection is selection:
                self._set_selection(CLOSED, None)

        return on_success, on_cancel

    def open_create(self) -> EquipmentFormController:
        selection = Creating()
        on_success, on_cancel = self._completion(selection)
        form = EquipmentFormController(
            self._client, self._notifier, on_success=on_success, on_cancel=on_cancel
        )
        self._set_selection(selection, form)
        return form

    def open_edit(self, item: Equipment) -> EquipmentFormController:
        selection = Editing(item)
        on_success, on_cancel = self._completion(selection)
        form = EquipmentFormController(
            self._client, self._notifier, item, on_success=on_success, on_cancel=on_cancel
        )
        self._set_selection(selection, form)
        return form

    def open_maintenance(self, item: Equipment) -> MaintenanceFormController:
        selection = LoggingMaintenance(item)
        on_success, on_cancel = self._completion(selection)
        form = MaintenanceFormController(
            self._client, self._notifier, item.id, on_success=on_success, on_cancel=on_cancel
        )
        self._set_selection(selection, form)
        return form

    def open_history(self, item: Equipment) -> MaintenanceHistoryViewer:
        viewer = MaintenanceHistoryViewer(self._client, item.id, self._notifier)
        self._set_selection(ViewingHistory(item), viewer)
        return viewer

    def close_any(self) -> None:
        if self.selection is not CLOSED:
            self._set_selection(CLOSED, None)


__all__ = [
    "DELETE_PROMPT",
    "Confirmer",
    "EquipmentBoard",
    "EquipmentRow",
    "status_label",
]
