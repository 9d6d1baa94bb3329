"""
Rodrise School Management Backend — /api/students Integration Tests
====================================================================

What:  Student CRUD through the FastAPI app against a SQLite database.

What we test:
    ✅ Create returns the student with its class and academic year
    ✅ Admission numbers are unique on create and update
    ✅ Unknown classId / academicYearId answer 400, not a database error
    ✅ Search, status filter and pagination on the listing
    ✅ Unknown or malformed ids answer 404 "Student not found"
    ✅ Update changes only the keys sent
    ✅ Delete is refused while the student has payments
"""

import uuid

import pytest


async def _seed_references(client):
    """Create one class and one academic year; return their ids."""
    school_class = (
        await client.post("/api/classes", json={"name": "Grade 4", "level": 4})
    ).json()
    year = (
        await client.post("/api/academic-years", json={"year": "2024/2025", "isActive": True})
    ).json()["academicYear"]
    return school_class["id"], year["id"]


async def _create_student(client, class_id, year_id, **overrides):
    body = {
        "admissionNumber": "ADM-001",
        "firstName": "Amina",
        "lastName": "Okello",
        "classId": class_id,
        "academicYearId": year_id,
        "parentName": "Grace Okello",
    }
    body.update(overrides)
    return await client.post("/api/students", json=body)


class TestCreateStudent:

    @pytest.mark.asyncio
    async def test_create(self, test_client):
        class_id, year_id = await _seed_references(test_client)

        response = await _create_student(
            test_client, class_id, year_id, dateOfBirth="2015-03-14", gender="F"
        )

        assert response.status_code == 201
        body = response.json()
        assert body["admissionNumber"] == "ADM-001"
        assert body["status"] == "ACTIVE"
        assert body["dateOfBirth"] == "2015-03-14"
        assert body["class"]["id"] == class_id
        assert body["class"]["name"] == "Grade 4"
        assert body["academicYear"]["year"] == "2024/2025"

    @pytest.mark.asyncio
    async def test_missing_fields(self, test_client):
        response = await test_client.post(
            "/api/students", json={"admissionNumber": "ADM-001", "firstName": "Amina"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    @pytest.mark.asyncio
    async def test_duplicate_admission_number(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        await _create_student(test_client, class_id, year_id)

        response = await _create_student(test_client, class_id, year_id, firstName="Brian")

        assert response.status_code == 400
        assert response.json() == {"error": "Admission number already exists"}

    @pytest.mark.asyncio
    async def test_unknown_class(self, test_client):
        _, year_id = await _seed_references(test_client)

        response = await _create_student(test_client, str(uuid.uuid4()), year_id)

        assert response.status_code == 400
        assert response.json() == {"error": "Unknown classId"}

    @pytest.mark.asyncio
    async def test_invalid_status(self, test_client):
        class_id, year_id = await _seed_references(test_client)

        response = await _create_student(test_client, class_id, year_id, status="EXPELLED")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid status 'EXPELLED'"}


class TestListStudents:

    @pytest.mark.asyncio
    async def test_search_matches_names_and_parent(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        await _create_student(test_client, class_id, year_id)
        await _create_student(
            test_client, class_id, year_id,
            admissionNumber="ADM-002", firstName="Brian", lastName="Mugisha",
            parentName="Peter Mugisha",
        )

        by_parent = (await test_client.get("/api/students?search=grace")).json()
        by_number = (await test_client.get("/api/students?search=adm-002")).json()

        assert [s["firstName"] for s in by_parent["students"]] == ["Amina"]
        assert [s["firstName"] for s in by_number["students"]] == ["Brian"]

    @pytest.mark.asyncio
    async def test_status_filter(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        await _create_student(test_client, class_id, year_id)
        await _create_student(
            test_client, class_id, year_id, admissionNumber="ADM-002", status="graduated"
        )

        graduated = (await test_client.get("/api/students?status=GRADUATED")).json()
        everyone = (await test_client.get("/api/students?status=all")).json()

        assert [s["admissionNumber"] for s in graduated["students"]] == ["ADM-002"]
        assert everyone["pagination"]["total"] == 2

    @pytest.mark.asyncio
    async def test_pagination(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        for n in range(3):
            await _create_student(test_client, class_id, year_id, admissionNumber=f"ADM-00{n}")

        response = await test_client.get("/api/students?page=2&limit=2")

        assert response.status_code == 200
        body = response.json()
        assert len(body["students"]) == 1
        assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "pages": 2}

    @pytest.mark.asyncio
    async def test_bad_page(self, test_client):
        response = await test_client.get("/api/students?page=zero")

        assert response.status_code == 400
        assert response.json() == {"error": "Page and limit must be positive whole numbers"}


class TestGetStudent:

    @pytest.mark.asyncio
    async def test_get_includes_payment_list(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        student = (await _create_student(test_client, class_id, year_id)).json()

        response = await test_client.get(f"/api/students/{student['id']}")

        assert response.status_code == 200
        assert response.json()["admissionNumber"] == "ADM-001"
        assert response.json()["feePayments"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("student_id", [str(uuid.uuid4()), "not-a-uuid"])
    async def test_not_found(self, test_client, student_id):
        response = await test_client.get(f"/api/students/{student_id}")

        assert response.status_code == 404
        assert response.json() == {"error": "Student not found"}


class TestUpdateStudent:

    @pytest.mark.asyncio
    async def test_only_sent_keys_change(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        student = (
            await _create_student(test_client, class_id, year_id, dateOfBirth="2015-03-14")
        ).json()

        response = await test_client.put(
            f"/api/students/{student['id']}",
            json={"status": "GRADUATED", "graduationDate": "2025-07-01"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "GRADUATED"
        assert body["graduationDate"] == "2025-07-01"
        assert body["dateOfBirth"] == "2015-03-14"
        assert body["firstName"] == "Amina"

    @pytest.mark.asyncio
    async def test_admission_number_taken(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        await _create_student(test_client, class_id, year_id)
        other = (
            await _create_student(test_client, class_id, year_id, admissionNumber="ADM-002")
        ).json()

        response = await test_client.put(
            f"/api/students/{other['id']}", json={"admissionNumber": "ADM-001"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Admission number already exists"}

    @pytest.mark.asyncio
    async def test_required_field_cannot_be_blanked(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        student = (await _create_student(test_client, class_id, year_id)).json()

        response = await test_client.put(f"/api/students/{student['id']}", json={"firstName": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        response = await test_client.put(
            f"/api/students/{uuid.uuid4()}", json={"firstName": "Nobody"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Student not found"}


class TestDeleteStudent:

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        student = (await _create_student(test_client, class_id, year_id)).json()

        response = await test_client.delete(f"/api/students/{student['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Student deleted successfully"}
        assert (await test_client.get(f"/api/students/{student['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_refused_with_payments(self, test_client):
        class_id, year_id = await _seed_references(test_client)
        student = (await _create_student(test_client, class_id, year_id)).json()
        fee_type = (await test_client.post("/api/fee-types", json={"name": "Tuition"})).json()
        paid = await test_client.post(
            "/api/payments",
            json={
                "studentId": student["id"],
                "academicYearId": year_id,
                "paymentDate": "2024-09-05",
                "receiptNumber": "RCT-0001",
                "amountPaid": 500,
                "paymentDetails": [{"feeTypeId": fee_type["feeType"]["id"], "amount": 500}],
            },
        )
        assert paid.status_code == 201

        response = await test_client.delete(f"/api/students/{student['id']}")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Cannot delete student with existing payments or balances"
        }

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        response = await test_client.delete("/api/students/12345")

        assert response.status_code == 404
        assert response.json() == {"error": "Student not found"}
