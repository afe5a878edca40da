from __future__ import annotations

import json

import httpx
import pytest

from modules.equipment.api.client import EquipmentApiClient
from modules.equipment.exceptions import ApiError
from modules.equipment.models.dto import Equipment, MaintenanceEntry


@pytest.mark.asyncio
async def test_list_equipment_keeps_server_order(api, client):
    api.seed(id=3, name="Zeta")
    api.seed(id=1, name="Alpha")
    items = await client.list_equipment()
    assert [i.name for i in items] == ["Zeta", "Alpha"]
    assert all(isinstance(i, Equipment) for i in items)


@pytest.mark.asyncio
async def test_unknown_status_survives_parsing(api, client):
    api.seed(status="Decommissioned")
    (item,) = await client.list_equipment()
    assert item.status == "Decommissioned"


@pytest.mark.asyncio
async def test_create_and_update_use_expected_methods(api, client):
    payload = {"name": "Pump A", "type_name": "Pump", "status": "Active", "last_cleaned_date": "2024-01-15"}
    created = await client.create_equipment(payload)
    assert created.name == "Pump A"

    updated = await client.update_equipment(created.id, {**payload, "status": "Inactive"})
    assert updated.status == "Inactive"
    assert [r.method for r in api.requests] == ["POST", "PUT"]
    assert api.requests[1].url.path == f"/api/equipment/{created.id}"


@pytest.mark.asyncio
async def test_server_error_message_is_extracted(api, client):
    api.fail[("POST", "/api/equipment")] = (400, {"error": "Name already in use"})
    with pytest.raises(ApiError) as info:
        await client.create_equipment({"name": "Dup"})
    assert info.value.status_code == 400
    assert info.value.message == "Name already in use"


@pytest.mark.asyncio
async def test_error_without_body_has_no_message(api, client):
    api.fail[("DELETE", "/api/equipment/9")] = (500, None)
    with pytest.raises(ApiError) as info:
        await client.delete_equipment(9)
    assert info.value.message is None
    assert "500" in str(info.value)


@pytest.mark.asyncio
async def test_maintenance_round_trip_filters_by_equipment(api, client):
    await client.log_maintenance(
        {"equipment_id": 7, "maintenance_date": "2024-02-01", "notes": "Replaced seal", "performed_by": "J. Lee"}
    )
    await client.log_maintenance(
        {"equipment_id": 8, "maintenance_date": "2024-02-02", "notes": "Oiled", "performed_by": "K. Ito"}
    )
    history = await client.list_maintenance(7)
    assert history == [
        MaintenanceEntry(
            id=1, equipment_id=7, maintenance_date="2024-02-01", notes="Replaced seal", performed_by="J. Lee"
        )
    ]
    assert api.requests[-1].url.params["equipment_id"] == "7"


@pytest.mark.asyncio
async def test_malformed_payload_becomes_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    client = EquipmentApiClient("http://equipment.test", transport=httpx.MockTransport(handler))
    with pytest.raises(ApiError) as info:
        await client.list_equipment()
    assert info.value.message == "Unexpected response from server"
    await client.aclose()


@pytest.mark.asyncio
async def test_transport_errors_propagate(api, client):
    api.offline = True
    with pytest.raises(httpx.ConnectError):
        await client.list_equipment()


@pytest.mark.asyncio
async def test_create_sends_json_body(api, client):
    await client.create_equipment({"name": "Fan", "type_name": "HVAC", "status": "Active", "last_cleaned_date": "2024-03-01"})
    body = json.loads(api.requests[0].content)
    assert body == {"name": "Fan", "type_name": "HVAC", "status": "Active", "last_cleaned_date": "2024-03-01"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, content",
    [(201, b""), (204, b""), (200, b"ok")],
)
async def test_mutations_succeed_on_any_2xx(status, content):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=content)

    client = EquipmentApiClient("http://equipment.test", transport=httpx.MockTransport(handler))
    assert await client.log_maintenance({"equipment_id": 7}) is None
    assert await client.update_equipment(4, {"name": "Chiller"}) is None
    await client.aclose()


@pytest.mark.asyncio
async def test_created_record_is_returned_when_sent(api, client):
    entry = await client.log_maintenance(
        {"equipment_id": 7, "maintenance_date": "2024-02-01", "notes": "n", "performed_by": "p"}
    )
    assert entry == MaintenanceEntry(id=1, equipment_id=7, maintenance_date="2024-02-01", notes="n", performed_by="p")
