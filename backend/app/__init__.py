"""
Rodrise School Management Backend — Application Package Initializer
===================================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest,
      uvicorn and the seed script.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │   Routes (API + page shell)         │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Business Logic)         │  ← Validation, duplicate checks
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls, services raise domain exceptions,
    and the global handlers in main.py turn those into status codes.
"""

__version__ = "1.0.0"
