"""Shared submit protocol for the equipment and maintenance forms."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import httpx

from ..api.client import EquipmentApiClient
from ..exceptions import ApiError
from ..notifications import NotificationSink
from ..validators import ValidationResult

logger = logging.getLogger(__name__)

Callback = Callable[[], Union[None, Awaitable[None]]]


async def run_callback(callback: Optional[Callback]) -> None:
    """Invoke a completion callback, awaiting it when it is a coroutine."""
    if callback is None:
        return
    result = callback()
    if inspect.isawaitable(result):
        await result


class FormController:
    """Field state, validation and a guarded submit for one dialog form.

    Subclasses provide ``FIELDS``, ``_validate`` and ``_send``; everything else
    (pending guard, error surfacing, completion callback) lives here.
    """

    FIELDS: tuple[str, ...] = ()
    generic_error = "Request failed"
    success_message = "Saved"

    def __init__(
        self,
        client: EquipmentApiClient,
        notifier: NotificationSink,
        initial: Mapping[str, Any],
        on_success: Optional[Callback] = None,
        on_cancel: Optional[Callback] = None,
    ) -> None:
        self._client = client
        self._notifier = notifier
        self._on_success = on_success
        self._on_cancel = on_cancel
        self.values: Dict[str, str] = {name: str(initial.get(name) or "") for name in self.FIELDS}
        self.errors: Dict[str, str] = {}
        self.submit_error: Optional[str] = None
        self.pending = False

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.FIELDS:
            raise KeyError(name)
        self.values[name] = "" if value is None else str(value)
        self.errors.pop(name, None)

    def _validate(self) -> ValidationResult:
        raise NotImplementedError

    async def _send(self, payload: Dict[str, Any]) -> None:
        raise NotImplementedError

    async def submit(self) -> bool:
        """Validate and send the form; returns ``True`` once the server accepted it."""
        if self.pending:
            logger.debug("[form] submit ignored while a request is pending")
            return False

        result = self._validate()
        self.errors = dict(result.errors)
        if not result.ok:
            logger.debug("[form] validation blocked submit: %s", self.errors)
            return False

        self.pending = True
        self.submit_error = None
        try:
            await self._send(result.unwrap().model_dump())
        except ApiError as e:
            self.submit_error = e.message or self.generic_error
            self._notifier.notify("error", self.submit_error)
            return False
        except httpx.HTTPError as e:
            logger.warning("[form] transport error: %s", e)
            self.submit_error = self.generic_error
            self._notifier.notify("error", self.submit_error)
            return False
        finally:
            self.pending = False

        self._notifier.notify("success", self.success_message)
        await run_callback(self._on_success)
        return True

    async def cancel(self) -> None:
        await run_callback(self._on_cancel)


__all__ = ["Callback", "FormController", "run_callback"]
