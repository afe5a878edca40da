"""Controller for the add/edit equipment dialog."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..api.client import EquipmentApiClient
from ..models.dto import Equipment, EquipmentStatus
from ..notifications import NotificationSink
from ..validators import ValidationResult, validate_equipment
from .base import Callback, FormController

logger = logging.getLogger(__name__)


class EquipmentFormController(FormController):
    """Create a new record, or update ``equipment`` when one is passed in."""

    FIELDS = ("name", "type_name", "status", "last_cleaned_date")
    generic_error = "Failed to save equipment"

    def __init__(
        self,
        client: EquipmentApiClient,
        notifier: NotificationSink,
        equipment: Optional[Equipment] = None,
        on_success: Optional[Callback] = None,
        on_cancel: Optional[Callback] = None,
    ) -> None:
        self.equipment = equipment
        if equipment is not None:
            initial: Dict[str, Any] = equipment.to_dict()
        else:
            initial = {"status": EquipmentStatus.ACTIVE.value}
        super().__init__(client, notifier, initial, on_success=on_success, on_cancel=on_cancel)

    @property
    def is_edit(self) -> bool:
        return self.equipment is not None

    @property
    def success_message(self) -> str:  # type: ignore[override]
        return "Equipment updated" if self.is_edit else "Equipment added"

    def _validate(self) -> ValidationResult:
        return validate_equipment(self.values)

    async def _send(self, payload: Dict[str, Any]) -> None:
        if self.equipment is not None:
            logger.info("[equipment-form] updating equipment %s", self.equipment.id)
            await self._client.update_equipment(self.equipment.id, payload)
        else:
            logger.info("[equipment-form] creating equipment %r", payload.get("name"))
            await self._client.create_equipment(payload)


__all__ = ["EquipmentFormController"]
