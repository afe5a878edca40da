from __future__ import annotations

import os

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from modules.equipment.api.client import EquipmentApiClient


class FakeEquipmentApi:
    """In-memory stand-in for the equipment REST API.

    ``fail`` maps ``(method, path)`` to ``(status, body)`` and is consumed on
    first use; ``offline`` makes every request raise a transport error.
    """

    def __init__(self) -> None:
        self.equipment: List[Dict[str, Any]] = []
        self.maintenance: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []
        self.fail: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.offline = False
        self._next_id = 1

    def seed(self, **fields: Any) -> Dict[str, Any]:
        row = {
            "id": fields.pop("id", self._next_id),
            "name": "Boiler",
            "type_name": "Heating",
            "status": "Active",
            "last_cleaned_date": "2024-01-01",
        }
        row.update(fields)
        self._next_id = max(self._next_id, row["id"]) + 1
        self.equipment.append(row)
        return row

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("server unreachable", request=request)
        key = (request.method, request.url.path)
        if key in self.fail:
            status, body = self.fail.pop(key)
            return httpx.Response(status, json=body)

        parts = request.url.path.strip("/").split("/")
        if parts[:2] == ["api", "equipment"]:
            return self._equipment(request, parts[2] if len(parts) > 2 else None)
        if parts == ["api", "maintenance"]:
            return self._maintenance(request)
        return httpx.Response(404, json={"error": "Not found"})

    def _find(self, equipment_id: str) -> Optional[Dict[str, Any]]:
        for row in self.equipment:
            if str(row["id"]) == equipment_id:
                return row
        return None

    def _equipment(self, request: httpx.Request, equipment_id: Optional[str]) -> httpx.Response:
        if equipment_id is None:
            if request.method == "GET":
                return httpx.Response(200, json=list(self.equipment))
            if request.method == "POST":
                return httpx.Response(201, json=self.seed(**json.loads(request.content)))
            return httpx.Response(405)
        row = self._find(equipment_id)
        if row is None:
            return httpx.Response(404, json={"error": "Equipment not found"})
        if request.method == "PUT":
            row.update(json.loads(request.content))
            return httpx.Response(200, json=row)
        if request.method == "DELETE":
            self.equipment.remove(row)
            return httpx.Response(204)
        return httpx.Response(405)

    def _maintenance(self, request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            entry = json.loads(request.content)
            entry["id"] = len(self.maintenance) + 1
            self.maintenance.append(entry)
            return httpx.Response(201, json=entry)
        wanted = request.url.params.get("equipment_id")
        rows = [m for m in self.maintenance if str(m["equipment_id"]) == wanted]
        return httpx.Response(200, json=rows)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []

    def notify(self, kind: str, message: str) -> None:
        self.messages.append((kind, message))

    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.messages]


class ScriptedConfirmer:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.prompts: List[str] = []

    async def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer


@pytest.fixture
def api() -> FakeEquipmentApi:
    return FakeEquipmentApi()


@pytest.fixture
def client(api: FakeEquipmentApi) -> EquipmentApiClient:
    return EquipmentApiClient("http://equipment.test", transport=httpx.MockTransport(api.handler))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def confirmer() -> ScriptedConfirmer:
    return ScriptedConfirmer()
