# Services package init
"""
Rodrise School Management Backend — Services Layer
===================================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services receive a session and a parsed body, apply validation and
       duplicate checks, and raise domain exceptions from app.exceptions.

Service Inventory:
    - ClassService:          classes (validate → duplicate check → insert)
    - AcademicYearService:   academic years
    - PaymentMethodService:  payment methods
    - FeeTypeService:        fee types (schema-validated bodies)
    - StudentService:        student CRUD, search and pagination
    - FeeStructureService:   per class/year/fee type amounts
    - PaymentService:        payments with per-fee-type detail lines
    - lookups:               existence checks for referenced ids
    - coercion:              shared int/date/uuid/amount/paging parsing

Why services are separate from routes:
    1. Testability: services are unit-tested with a mocked session
    2. Single responsibility: routes handle HTTP; services handle rules
"""
