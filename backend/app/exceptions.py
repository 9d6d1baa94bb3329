"""
Rodrise School Management Backend — Custom Exception Hierarchy
===============================================================

What:  Application-specific exceptions for the error scenarios of the API.
Why:   Custom exceptions enable targeted error handling with the right HTTP
       status code and a fixed, caller-safe message.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": message}` bodies.
Who:   Raised by services; caught by the global handlers.

Exception Hierarchy:
    RodriseError (base)
    ├── ValidationError   → 400 Bad Request (missing or malformed field)
    ├── ConflictError     → 400 Bad Request (duplicate record)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (opaque to caller)

Security:
    `message` is returned to the client; `context` is logged server-side only.
"""

from typing import Any, Dict, List, Optional


class RodriseError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RodriseError):
    """
    Raised when client input fails validation.

    When:    Required field missing or empty, number not parseable, bad date.
    HTTP:    400 Bad Request

    `details` carries field-level errors (from a Pydantic schema) that ARE
    returned to the caller, unlike `context`.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field
        self.details = details


class ConflictError(RodriseError):
    """
    Raised when a create would duplicate an existing record.

    When:    The pre-insert duplicate check finds a match, or the database
             unique index rejects the insert (two concurrent creates).
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Record already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(RodriseError):
    """
    Raised when a record addressed by id does not exist.

    When:    GET/PUT/DELETE /api/students/{id}, a payment for an unknown
             student, an update of a fee structure that was never created.
    HTTP:    404 Not Found

    The message is "<Resource> not found"; the id goes to `context` only.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(RodriseError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, any driver error.
    HTTP:    500 Internal Server Error

    The message is one fixed string per operation ("Failed to create class");
    the driver error type goes into `context` and the server log only.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
