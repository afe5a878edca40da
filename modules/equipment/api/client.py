from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

import httpx

from ..exceptions import ApiError
from ..models.dto import Equipment, MaintenanceEntry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

# Everything a caller has to handle for one API call.
REQUEST_ERRORS = (ApiError, httpx.HTTPError)

T = TypeVar("T")


def _error_message(response: httpx.Response) -> Optional[str]:
    """Pull the server supplied error text out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        for key in ("error", "detail", "message"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return None


class EquipmentApiClient:
    """Thin async wrapper around httpx for the equipment REST API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0)),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug("[api] %s %s", method, url)
        response = await self._client.request(method, url, **kwargs)
        if response.is_error:
            message = _error_message(response)
            logger.warning("[api] %s %s -> %s %s", method, url, response.status_code, message or "")
            raise ApiError(response.status_code, message)
        return response

    @staticmethod
    def _parse(response: httpx.Response, parser: Callable[[Any], T]) -> T:
        try:
            return parser(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("[api] unexpected payload from %s: %s", response.request.url, e)
            raise ApiError(response.status_code, "Unexpected response from server") from e

    @staticmethod
    def _parse_record(response: httpx.Response, parser: Callable[[Any], T]) -> Optional[T]:
        """Parse the echoed record of a mutation, if the server sent one.

        The status code alone decides success; a missing or partial body
        yields ``None``.
        """
        if not response.content:
            return None
        try:
            return parser(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.debug("[api] %s %s returned no usable record: %s", response.request.method, response.request.url, e)
            return None

    async def list_equipment(self) -> List[Equipment]:
        response = await self._request("GET", "/api/equipment")
        return self._parse(response, lambda body: [Equipment.from_dict(row) for row in body or []])

    async def create_equipment(self, payload: Mapping[str, Any]) -> Optional[Equipment]:
        response = await self._request("POST", "/api/equipment", json=dict(payload))
        return self._parse_record(response, Equipment.from_dict)

    async def update_equipment(self, equipment_id: int, payload: Mapping[str, Any]) -> Optional[Equipment]:
        response = await self._request("PUT", f"/api/equipment/{equipment_id}", json=dict(payload))
        return self._parse_record(response, Equipment.from_dict)

    async def delete_equipment(self, equipment_id: int) -> None:
        await self._request("DELETE", f"/api/equipment/{equipment_id}")

    async def log_maintenance(self, payload: Mapping[str, Any]) -> Optional[MaintenanceEntry]:
        response = await self._request("POST", "/api/maintenance", json=dict(payload))
        return self._parse_record(response, MaintenanceEntry.from_dict)

    async def list_maintenance(self, equipment_id: int) -> List[MaintenanceEntry]:
        params: Dict[str, Any] = {"equipment_id": equipment_id}
        response = await self._request("GET", "/api/maintenance", params=params)
        return self._parse(response, lambda body: [MaintenanceEntry.from_dict(row) for row in body or []])

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["EquipmentApiClient", "DEFAULT_TIMEOUT", "REQUEST_ERRORS"]
