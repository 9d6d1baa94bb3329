# Middleware package init
"""
Rodrise School Management Backend — Middleware Package
=======================================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Session] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and the X-Request-ID header
    2. Logging: method, path, status and duration, tagged with the request ID
    3. Session: signed-cookie session read by the page shell
    4. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
"""
