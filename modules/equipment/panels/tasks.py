"""Fire-and-forget scheduling of board coroutines from Qt slots."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Set

logger = logging.getLogger(__name__)

# Strong references so running tasks are not garbage collected mid-flight.
_TASKS: Set["asyncio.Task[Any]"] = set()


def _finished(task: "asyncio.Task[Any]") -> None:
    _TASKS.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("[tasks] background task failed", exc_info=exc)


def spawn(coro: Coroutine[Any, Any, Any]) -> "asyncio.Task[Any]":
    """Schedule ``coro`` on the running loop (the Qt loop under QtAsyncio)."""
    task = asyncio.ensure_future(coro)
    _TASKS.add(task)
    task.add_done_callback(_finished)
    return task


__all__ = ["spawn"]
