"""Notification sink used by the equipment controllers.

Controllers only depend on the :class:`NotificationSink` protocol, a single
``notify(kind, message)`` method.  The desktop shell plugs in a Qt toast
implementation; headless runs use :class:`LoggingNotifier`.
"""

from __future__ import annotations

import logging
from typing import Literal, Protocol

Severity = Literal["info", "success", "warning", "error"]

logger = logging.getLogger(__name__)

_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class NotificationSink(Protocol):
    def notify(self, kind: Severity, message: str) -> None:
        ...


class LoggingNotifier:
    """Write notifications to the application log."""

    def notify(self, kind: Severity, message: str) -> None:
        logger.log(_LEVELS.get(kind, logging.INFO), "[notify:%s] %s", kind, message)


__all__ = ["Severity", "NotificationSink", "LoggingNotifier"]
