"""
Rodrise School Management Backend — /api/fee-structures Integration Tests
==========================================================================

What:  Fee structure list/create/update through the FastAPI app against a
       SQLite database.
"""

import uuid
from decimal import Decimal

import pytest


async def _reference(client, path, body, key=None):
    response = await client.post(path, json=body)
    assert response.status_code == 201
    data = response.json()
    return data[key]["id"] if key else data["id"]


async def _seed(client):
    """One academic year, two classes, two fee types."""
    return {
        "year": await _reference(
            client, "/api/academic-years", {"year": "2024/2025"}, "academicYear"
        ),
        "grade1": await _reference(client, "/api/classes", {"name": "Grade 1", "level": 1}),
        "grade2": await _reference(client, "/api/classes", {"name": "Grade 2", "level": 2}),
        "tuition": await _reference(client, "/api/fee-types", {"name": "Tuition"}, "feeType"),
        "lunch": await _reference(client, "/api/fee-types", {"name": "Lunch"}, "feeType"),
    }


def _structure(ids, class_key="grade1", fee_key="tuition", **extra):
    body = {
        "academicYearId": ids["year"],
        "classId": ids[class_key],
        "feeTypeId": ids[fee_key],
        "amount": 1500,
        "term1Amount": 500,
        "term2Amount": 500,
        "term3Amount": 500,
    }
    body.update(extra)
    return body


class TestCreateFeeStructure:

    @pytest.mark.asyncio
    async def test_create(self, test_client):
        ids = await _seed(test_client)

        response = await test_client.post("/api/fee-structures", json=_structure(ids))

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Fee structure created successfully"
        created = body["feeStructure"]
        assert Decimal(created["amount"]) == Decimal("1500")
        assert Decimal(created["term3Amount"]) == Decimal("500")
        assert created["isActive"] is True
        assert created["class"]["name"] == "Grade 1"
        assert created["feeType"]["name"] == "Tuition"
        assert created["academicYear"]["year"] == "2024/2025"

    @pytest.mark.asyncio
    async def test_term_amounts_default_to_zero(self, test_client):
        ids = await _seed(test_client)
        body = {key: value for key, value in _structure(ids).items() if "term" not in key}

        response = await test_client.post("/api/fee-structures", json=body)

        assert response.status_code == 201
        assert Decimal(response.json()["feeStructure"]["term1Amount"]) == 0

    @pytest.mark.asyncio
    async def test_duplicate_triple(self, test_client):
        ids = await _seed(test_client)
        await test_client.post("/api/fee-structures", json=_structure(ids))

        response = await test_client.post("/api/fee-structures", json=_structure(ids, amount=900))

        assert response.status_code == 400
        assert response.json() == {
            "error": "Fee structure already exists for this class, academic year, "
            "and fee type combination"
        }

    @pytest.mark.asyncio
    async def test_validation_details(self, test_client):
        response = await test_client.post(
            "/api/fee-structures",
            json={"academicYearId": "nope", "classId": str(uuid.uuid4()), "amount": -5},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        fields = {d["field"] for d in body["details"]}
        assert fields == {"academicYearId", "feeTypeId", "amount"}

    @pytest.mark.asyncio
    async def test_unknown_reference(self, test_client):
        ids = await _seed(test_client)
        ids["tuition"] = str(uuid.uuid4())

        response = await test_client.post("/api/fee-structures", json=_structure(ids))

        assert response.status_code == 400
        assert response.json() == {"error": "Unknown feeTypeId"}


class TestListFeeStructures:

    @pytest.mark.asyncio
    async def test_ordered_by_class_level_then_fee_type(self, test_client):
        ids = await _seed(test_client)
        for class_key, fee_key in [("grade2", "tuition"), ("grade1", "tuition"), ("grade1", "lunch")]:
            await test_client.post(
                "/api/fee-structures", json=_structure(ids, class_key, fee_key)
            )

        listed = (await test_client.get("/api/fee-structures")).json()["feeStructures"]

        assert [(s["class"]["level"], s["feeType"]["name"]) for s in listed] == [
            (1, "Lunch"),
            (1, "Tuition"),
            (2, "Tuition"),
        ]

    @pytest.mark.asyncio
    async def test_filters(self, test_client):
        ids = await _seed(test_client)
        await test_client.post("/api/fee-structures", json=_structure(ids, "grade1"))
        await test_client.post(
            "/api/fee-structures", json=_structure(ids, "grade2", isActive=False)
        )

        by_class = (
            await test_client.get(f"/api/fee-structures?classId={ids['grade2']}")
        ).json()["feeStructures"]
        active = (
            await test_client.get("/api/fee-structures?isActive=true")
        ).json()["feeStructures"]

        assert [s["classId"] for s in by_class] == [ids["grade2"]]
        assert [s["classId"] for s in active] == [ids["grade1"]]


class TestUpdateFeeStructure:

    @pytest.mark.asyncio
    async def test_update_amounts(self, test_client):
        ids = await _seed(test_client)
        await test_client.post("/api/fee-structures", json=_structure(ids))

        response = await test_client.put(
            "/api/fee-structures",
            json={
                "academicYearId": ids["year"],
                "classId": ids["grade1"],
                "feeTypeId": ids["tuition"],
                "amount": 1800,
                "isActive": False,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Fee structure updated successfully"
        assert Decimal(body["feeStructure"]["amount"]) == Decimal("1800")
        assert Decimal(body["feeStructure"]["term1Amount"]) == Decimal("500")
        assert body["feeStructure"]["isActive"] is False

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        ids = await _seed(test_client)

        response = await test_client.put("/api/fee-structures", json=_structure(ids))

        assert response.status_code == 404
        assert response.json() == {"error": "Fee structure not found"}
