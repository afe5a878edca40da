"""Which modal interaction the equipment board currently shows.

The board holds exactly one of these values, so opening one interaction
always replaces whatever was open before.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .dto import Equipment


@dataclass(frozen=True, slots=True)
class Closed:
    pass


@dataclass(frozen=True, slots=True)
class Creating:
    pass


@dataclass(frozen=True, slots=True)
class Editing:
    equipment: Equipment


@dataclass(frozen=True, slots=True)
class LoggingMaintenance:
    equipment: Equipment


@dataclass(frozen=True, slots=True)
class ViewingHistory:
    equipment: Equipment


Selection = Union[Closed, Creating, Editing, LoggingMaintenance, ViewingHistory]

CLOSED = Closed()


def selected_equipment(selection: Selection) -> Optional[Equipment]:
    """Return the equipment a selection targets, if any."""

    return getattr(selection, "equipment", None)


__all__ = [
    "Closed",
    "Creating",
    "Editing",
    "LoggingMaintenance",
    "ViewingHistory",
    "Selection",
    "CLOSED",
    "selected_equipment",
]
