# Routes package init
"""
Rodrise School Management Backend — Routes Package
===================================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - classes.py:          GET/POST /api/classes
    - academic_years.py:   GET/POST /api/academic-years
    - payment_methods.py:  GET/POST /api/payment-methods
    - fee_types.py:        GET/POST /api/fee-types
    - students.py:         GET/POST /api/students, GET/PUT/DELETE /api/students/{id}
    - fee_structures.py:   GET/POST/PUT /api/fee-structures
    - payments.py:         GET/POST /api/payments
    - health.py:           GET /health
    - pages.py:            GET /, POST /theme  (server-rendered shell)

Design Principle:
    Routes are THIN — they parse the request, call a service and return the
    result with the right status code. Validation, duplicate checks and
    error translation live in the services and the global handlers.
"""
