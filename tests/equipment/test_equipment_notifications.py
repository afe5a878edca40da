from __future__ import annotations

import logging

import pytest

from modules.equipment.notifications import LoggingNotifier


@pytest.mark.parametrize(
    "kind, level",
    [("error", logging.ERROR), ("warning", logging.WARNING), ("success", logging.INFO), ("info", logging.INFO)],
)
def test_logging_notifier_maps_kind_to_level(caplog, kind, level):
    caplog.set_level(logging.DEBUG, logger="modules.equipment.notifications")
    LoggingNotifier().notify(kind, "Failed to load equipment")
    (record,) = caplog.records
    assert record.levelno == level
    assert record.getMessage() == f"[notify:{kind}] Failed to load equipment"
