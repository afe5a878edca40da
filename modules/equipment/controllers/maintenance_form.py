from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from utils.timefmt import today_iso

from ..api.client import EquipmentApiClient
from ..notifications import NotificationSink
from ..validators import ValidationResult, validate_maintenance
from .base import Callback, FormController

logger = logging.getLogger(__name__)


class MaintenanceFormController(FormController):
    """Log one maintenance entry against a fixed equipment id."""

    FIELDS = ("maintenance_date", "notes", "performed_by")
    generic_error = "Failed to log maintenance"
    success_message = "Maintenance logged successfully"

    def __init__(
        self,
        client: EquipmentApiClient,
        notifier: NotificationSink,
        equipment_id: int,
        on_success: Optional[Callback] = None,
        on_cancel: Optional[Callback] = None,
        today: Optional[str] = None,
    ) -> None:
        self.equipment_id = equipment_id
        initial = {"maintenance_date": today or today_iso(), "notes": "", "performed_by": ""}
        super().__init__(client, notifier, initial, on_success=on_success, on_cancel=on_cancel)

    def _validate(self) -> ValidationResult:
        return validate_maintenance(self.values)

    async def _send(self, payload: Dict[str, Any]) -> None:
        payload = {**payload, "equipment_id": self.equipment_id}
        logger.info("[maintenance-form] logging maintenance for equipment %s", self.equipment_id)
        await self._client.log_maintenance(payload)


__all__ = ["MaintenanceFormController"]
