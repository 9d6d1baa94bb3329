# Schemas package init
"""
Rodrise School Management Backend — Pydantic Schemas
=====================================================

What:  The API contract: request bodies and JSON response shapes.
Why:   Kept separate from the ORM models so the wire format (camelCase keys)
       can differ from the table layout (snake_case columns).

Schema Inventory:
    - common.py:          CamelModel base, ErrorResponse, HealthResponse
    - school_class.py:    /api/classes
    - academic_year.py:   /api/academic-years
    - payment_method.py:  /api/payment-methods
    - fee_type.py:        /api/fee-types
"""
