from __future__ import annotations

import logging
from typing import List, Optional

from ..api.client import REQUEST_ERRORS, EquipmentApiClient
from ..models.dto import MaintenanceEntry
from ..notifications import NotificationSink

logger = logging.getLogger(__name__)


class MaintenanceHistoryViewer:
    """Read-only list of maintenance entries for one equipment id.

    ``state`` is one of ``loading``, ``empty``, ``ready`` or ``unavailable``.
    A failed fetch leaves an empty list in the ``unavailable`` state instead
    of raising into the dialog that hosts the viewer.
    """

    def __init__(
        self,
        client: EquipmentApiClient,
        equipment_id: int,
        notifier: Optional[NotificationSink] = None,
    ) -> None:
        self._client = client
        self._notifier = notifier
        self.equipment_id = equipment_id
        self.entries: List[MaintenanceEntry] = []
        self.state = "loading"
        self.closed = False

    async def load(self) -> None:
        try:
            entries = await self._client.list_maintenance(self.equipment_id)
        except REQUEST_ERRORS as e:
            logger.warning("[history] failed to load history for %s: %s", self.equipment_id, e)
            if self.closed:
                return
            self.entries = []
            self.state = "unavailable"
            if self._notifier is not None:
                self._notifier.notify("error", "Failed to load maintenance history")
            return

        if self.closed:
            logger.debug("[history] viewer closed, dropping result for %s", self.equipment_id)
            return
        self.entries = list(entries)
        self.state = "ready" if self.entries else "empty"

    def close(self) -> None:
        self.closed = True


__all__ = ["MaintenanceHistoryViewer"]
