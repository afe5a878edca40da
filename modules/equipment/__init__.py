"""Facility equipment tracking module.

The controllers, validators and API client import without Qt so they can be
driven from tests and scripts.  The widgets live in :mod:`.panels`.
"""

from __future__ import annotations

from .api.client import EquipmentApiClient
from .controllers.board import EquipmentBoard
from .notifications import LoggingNotifier

__all__ = ["EquipmentApiClient", "EquipmentBoard", "LoggingNotifier"]
