"""API tests for entry endpoints."""

import httpx
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bagelbot.api.entries.dependencies import get_entry_service
from bagelbot.main import app
from bagelbot.models import Entry
from bagelbot.services.exceptions import DatastoreError


class _FailingEntryService:
    async def create_entry(self, **kwargs: object) -> None:
        raise DatastoreError("connection to 10.0.0.5 refused")

    async def list_entries(self, **kwargs: object) -> None:
        raise DatastoreError("relation entries does not exist")

    async def update_status(self, entry_id: int, status: str | None) -> None:
        raise DatastoreError("deadlock detected")


async def _entry_count(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Entry))).scalar_one()


class TestRoot:
    async def test_banner(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "BagelBot backend is running"}


class TestSubmit:
    async def test_round_trip(self, client: httpx.AsyncClient) -> None:
        response = await client.post(
            "/submit",
            json={"name": "Alice", "phoneNumber": "555-1234", "message": "2 everything bagels"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        entry = data["entry"]
        assert entry["message"] == "2 everything bagels"
        assert entry["name"] == "Alice"
        assert entry["phoneNumber"] == "555-1234"
        assert entry["orderNumber"] >= 100
        assert entry["status"] == "New"
        assert isinstance(entry["id"], int)
        assert "created_at" in entry
        assert "order_number" not in entry
        assert "phone_number" not in entry

    async def test_first_order_of_day_is_100(self, client: httpx.AsyncClient) -> None:
        first = await client.post("/submit", json={"message": "plain"})
        second = await client.post("/submit", json={"message": "sesame"})

        assert first.json()["entry"]["orderNumber"] == 100
        assert second.json()["entry"]["orderNumber"] == 101

    async def test_missing_message(self, client: httpx.AsyncClient, session: AsyncSession) -> None:
        response = await client.post("/submit", json={"name": "Alice", "phoneNumber": "555-1234"})

        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}
        assert await _entry_count(session) == 0

    async def test_empty_message(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/submit", json={"message": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}

    async def test_malformed_body(self, client: httpx.AsyncClient) -> None:
        response = await client.post(
            "/submit", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_overlong_phone_number(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/submit", json={"phoneNumber": "5" * 21, "message": "bialy"})

        assert response.status_code == 400
        assert "phoneNumber" in response.json()["error"]

    async def test_datastore_error_is_not_leaked(self, client: httpx.AsyncClient) -> None:
        app.dependency_overrides[get_entry_service] = _FailingEntryService

        response = await client.post("/submit", json={"message": "everything"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to submit entry"}


class TestListEntries:
    async def test_filter_by_status(self, client: httpx.AsyncClient) -> None:
        ids = []
        for message in ("one", "two", "three"):
            response = await client.post("/submit", json={"message": message})
            ids.append(response.json()["entry"]["id"])
        await client.put(f"/entries/{ids[0]}/status", json={"status": "Completed"})

        all_entries = (await client.get("/entries")).json()["entries"]
        new_entries = (await client.get("/entries", params={"status": "New"})).json()["entries"]

        assert [e["id"] for e in all_entries] == list(reversed(ids))
        assert [e["id"] for e in new_entries] == [ids[2], ids[1]]
        assert all(e["status"] == "New" for e in new_entries)

    async def test_empty_status_means_no_filter(self, client: httpx.AsyncClient) -> None:
        await client.post("/submit", json={"message": "one"})

        response = await client.get("/entries", params={"status": ""})

        assert len(response.json()["entries"]) == 1

    async def test_datastore_error(self, client: httpx.AsyncClient) -> None:
        app.dependency_overrides[get_entry_service] = _FailingEntryService

        response = await client.get("/entries")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch entries"}


class TestUpdateStatus:
    async def test_update(self, client: httpx.AsyncClient) -> None:
        created = (await client.post("/submit", json={"message": "cinnamon raisin"})).json()["entry"]

        response = await client.put(f"/entries/{created['id']}/status", json={"status": "Ready"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["entry"]["id"] == created["id"]
        assert data["entry"]["orderNumber"] == created["orderNumber"]
        assert data["entry"]["status"] == "Ready"

    async def test_unknown_id(self, client: httpx.AsyncClient) -> None:
        created = (await client.post("/submit", json={"message": "pumpernickel"})).json()["entry"]

        response = await client.put(f"/entries/{created['id'] + 99}/status", json={"status": "Ready"})

        assert response.status_code == 404
        assert response.json() == {"error": "Entry not found"}
        entries = (await client.get("/entries")).json()["entries"]
        assert [e["status"] for e in entries] == ["New"]

    async def test_id_beyond_integer_range(self, client: httpx.AsyncClient) -> None:
        await client.post("/submit", json={"message": "egg"})

        response = await client.put("/entries/99999999999999999999/status", json={"status": "Ready"})

        assert response.status_code == 404
        assert response.json() == {"error": "Entry not found"}

    async def test_missing_status(self, client: httpx.AsyncClient) -> None:
        created = (await client.post("/submit", json={"message": "salt"})).json()["entry"]

        response = await client.put(f"/entries/{created['id']}/status", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Status is required"}

    async def test_datastore_error(self, client: httpx.AsyncClient) -> None:
        app.dependency_overrides[get_entry_service] = _FailingEntryService

        response = await client.put("/entries/1/status", json={"status": "Ready"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update entry"}
