"""
Rodrise School Management Backend — /api/classes Integration Tests
===================================================================

What:  End-to-end tests through the FastAPI app against a SQLite database.
How:   `test_client` from conftest.py; every test gets an empty database.

What we test:
    ✅ Create → list round trip with camelCase fields
    ✅ Duplicate (name, level) rejected regardless of case
    ✅ Same name at a different level is allowed
    ✅ Fixed 400 messages for missing and malformed input
    ✅ List only returns active classes, ordered by level
    ✅ A failing database answers 500 with the fixed per-operation message
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from app.database import get_db_session
from app.main import app
from app.models.school_class import SchoolClass


async def _create(client, **body):
    return await client.post("/api/classes", json=body)


def _use_unreachable_database():
    """Route requests to a session whose every query fails; test_client clears it."""
    session = AsyncMock()
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
    )

    async def override_get_db_session():
        yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return session


class TestCreateClassEndpoint:

    @pytest.mark.asyncio
    async def test_create_then_list(self, test_client):
        response = await _create(test_client, name="Grade 1", level=1, capacity=30)

        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Grade 1"
        assert created["level"] == 1
        assert created["capacity"] == 30
        assert created["isActive"] is True
        assert "createdAt" in created and "updatedAt" in created

        listed = (await test_client.get("/api/classes")).json()
        assert [c["id"] for c in listed] == [created["id"]]

    @pytest.mark.asyncio
    async def test_string_numbers_are_coerced(self, test_client):
        response = await _create(test_client, name="Grade 3", level="3", capacity="25")

        assert response.status_code == 201
        assert response.json()["level"] == 3
        assert response.json()["capacity"] == 25

    @pytest.mark.asyncio
    async def test_capacity_defaults_to_40(self, test_client):
        response = await _create(test_client, name="Grade 2", level=2)

        assert response.status_code == 201
        assert response.json()["capacity"] == 40

    @pytest.mark.asyncio
    async def test_empty_capacity_string_defaults_to_40(self, test_client):
        response = await _create(test_client, name="Grade 2", level=2, capacity="")

        assert response.status_code == 201
        assert response.json()["capacity"] == 40

    @pytest.mark.parametrize("capacity", [0, "0"])
    @pytest.mark.asyncio
    async def test_zero_capacity_rejected(self, test_client, capacity):
        response = await _create(test_client, name="Grade 2", level=2, capacity=capacity)

        assert response.status_code == 400
        assert response.json() == {"error": "Level and capacity must be positive whole numbers"}
        assert (await test_client.get("/api/classes")).json() == []

    @pytest.mark.asyncio
    async def test_database_failure(self, test_client):
        session = _use_unreachable_database()

        response = await _create(test_client, name="Grade 1", level=1)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create class"}
        session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_is_case_insensitive(self, test_client):
        assert (await _create(test_client, name="Grade 1", level=1)).status_code == 201

        response = await _create(test_client, name="grade 1", level=1)

        assert response.status_code == 400
        assert response.json() == {"error": "Class with this name and level already exists"}

        listed = (await test_client.get("/api/classes")).json()
        assert len(listed) == 1

    @pytest.mark.asyncio
    async def test_same_name_other_level_allowed(self, test_client):
        assert (await _create(test_client, name="Stream A", level=1)).status_code == 201
        assert (await _create(test_client, name="Stream A", level=2)).status_code == 201

    @pytest.mark.asyncio
    async def test_empty_name(self, test_client):
        response = await _create(test_client, name="", level=1)

        assert response.status_code == 400
        assert response.json() == {"error": "Name and level are required"}

    @pytest.mark.asyncio
    async def test_missing_level(self, test_client):
        response = await _create(test_client, name="Grade 1")

        assert response.status_code == 400
        assert response.json() == {"error": "Name and level are required"}

    @pytest.mark.asyncio
    async def test_non_numeric_level(self, test_client):
        response = await _create(test_client, name="Grade 1", level="first")

        assert response.status_code == 400
        assert response.json() == {"error": "Level and capacity must be positive whole numbers"}

    @pytest.mark.asyncio
    async def test_malformed_json(self, test_client):
        response = await test_client.post(
            "/api/classes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}


class TestListClassesEndpoint:

    @pytest.mark.asyncio
    async def test_empty(self, test_client):
        response = await test_client.get("/api/classes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_ordered_by_level(self, test_client):
        for name, level in [("Grade 3", 3), ("Grade 1", 1), ("Grade 2", 2)]:
            await _create(test_client, name=name, level=level)

        listed = (await test_client.get("/api/classes")).json()

        assert [c["level"] for c in listed] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_inactive_classes_hidden(self, test_client, session_factory):
        async with session_factory() as session:
            session.add(SchoolClass(name="Old Grade", level=9, capacity=40, is_active=False))
            await session.commit()

        await _create(test_client, name="Grade 1", level=1)

        listed = (await test_client.get("/api/classes")).json()
        assert [c["name"] for c in listed] == ["Grade 1"]

    @pytest.mark.asyncio
    async def test_inactive_class_still_blocks_duplicate(self, test_client, session_factory):
        async with session_factory() as session:
            session.add(SchoolClass(name="Grade 1", level=1, capacity=40, is_active=False))
            await session.commit()

        response = await _create(test_client, name="GRADE 1", level=1)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_database_failure(self, test_client):
        _use_unreachable_database()

        response = await test_client.get("/api/classes")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch classes"}

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api/classes", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"
