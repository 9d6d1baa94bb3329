"""
Rodrise School Management Backend — Reference Data Integration Tests
=====================================================================

What:  /api/academic-years, /api/payment-methods and /api/fee-types through
       the FastAPI app against a SQLite database.
"""

import pytest

from app.models.payment_method import PaymentMethod


class TestAcademicYears:

    @pytest.mark.asyncio
    async def test_create(self, test_client):
        response = await test_client.post(
            "/api/academic-years",
            json={"year": "2024/2025", "isActive": True, "startDate": "2024-09-01"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Academic year created successfully"
        assert body["academicYear"]["year"] == "2024/2025"
        assert body["academicYear"]["isActive"] is True
        assert body["academicYear"]["startDate"] == "2024-09-01"
        assert body["academicYear"]["endDate"] is None

    @pytest.mark.asyncio
    async def test_year_required(self, test_client):
        response = await test_client.post("/api/academic-years", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Year is required"}

    @pytest.mark.asyncio
    async def test_duplicate(self, test_client):
        await test_client.post("/api/academic-years", json={"year": "2024/2025"})

        response = await test_client.post("/api/academic-years", json={"year": "2024/2025"})

        assert response.status_code == 400
        assert response.json() == {"error": "Academic year already exists"}

    @pytest.mark.asyncio
    async def test_bad_date(self, test_client):
        response = await test_client.post(
            "/api/academic-years", json={"year": "2025/2026", "endDate": "soon"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_newest_first_and_active_filter(self, test_client):
        await test_client.post("/api/academic-years", json={"year": "2023/2024"})
        await test_client.post(
            "/api/academic-years", json={"year": "2024/2025", "isActive": True}
        )

        everything = (await test_client.get("/api/academic-years")).json()["academicYears"]
        assert [y["year"] for y in everything] == ["2024/2025", "2023/2024"]

        active = (await test_client.get("/api/academic-years?isActive=true")).json()
        assert [y["year"] for y in active["academicYears"]] == ["2024/2025"]


class TestPaymentMethods:

    @pytest.mark.asyncio
    async def test_create_and_list_alphabetical(self, test_client):
        for name in ["Mobile Money", "Cash", "Bank Transfer"]:
            response = await test_client.post("/api/payment-methods", json={"name": name})
            assert response.status_code == 201

        listed = (await test_client.get("/api/payment-methods")).json()

        assert [m["name"] for m in listed] == ["Bank Transfer", "Cash", "Mobile Money"]

    @pytest.mark.asyncio
    async def test_name_required(self, test_client):
        response = await test_client.post("/api/payment-methods", json={"description": "x"})

        assert response.status_code == 400
        assert response.json() == {"error": "Payment method name is required"}

    @pytest.mark.asyncio
    async def test_duplicate_is_case_insensitive(self, test_client):
        await test_client.post("/api/payment-methods", json={"name": "Cash"})

        response = await test_client.post("/api/payment-methods", json={"name": "CASH"})

        assert response.status_code == 400
        assert response.json() == {"error": "Payment method with this name already exists"}

    @pytest.mark.asyncio
    async def test_inactive_hidden(self, test_client, session_factory):
        async with session_factory() as session:
            session.add(PaymentMethod(name="Cheque", is_active=False))
            await session.commit()

        assert (await test_client.get("/api/payment-methods")).json() == []


class TestFeeTypes:

    @pytest.mark.asyncio
    async def test_create_with_defaults(self, test_client):
        response = await test_client.post("/api/fee-types", json={"name": "Tuition"})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Fee type created successfully"
        assert body["feeType"]["frequency"] == "TERM"
        assert body["feeType"]["isMandatory"] is True
        assert body["feeType"]["isRecurring"] is True

    @pytest.mark.asyncio
    async def test_validation_details(self, test_client):
        response = await test_client.post(
            "/api/fee-types", json={"name": "", "frequency": "WEEKLY"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        fields = {d["field"] for d in body["details"]}
        assert fields == {"name", "frequency"}

    @pytest.mark.asyncio
    async def test_duplicate(self, test_client):
        await test_client.post("/api/fee-types", json={"name": "Library"})

        response = await test_client.post("/api/fee-types", json={"name": "library"})

        assert response.status_code == 400
        assert response.json() == {"error": "Fee type name already exists"}

    @pytest.mark.asyncio
    async def test_filter_by_frequency(self, test_client):
        await test_client.post("/api/fee-types", json={"name": "Admission", "frequency": "ONCE"})
        await test_client.post("/api/fee-types", json={"name": "Tuition"})

        response = await test_client.get("/api/fee-types?frequency=ONCE")

        assert [f["name"] for f in response.json()["feeTypes"]] == ["Admission"]

    @pytest.mark.asyncio
    async def test_unknown_frequency_filter(self, test_client):
        response = await test_client.get("/api/fee-types?frequency=WEEKLY")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid frequency 'WEEKLY'"}
