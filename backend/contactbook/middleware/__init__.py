# Middleware package init
"""
Contact Book Backend — Middleware Package
===========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)

    The order is reversed for responses, so the logging middleware sees the
    final status code and the request ID header is always present.
"""
