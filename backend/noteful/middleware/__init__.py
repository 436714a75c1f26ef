# Middleware package init
"""
Noteful Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error reports
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: FastAPI's stock middleware

    The order is reversed for responses, so the logging middleware sees the
    final status code and the request ID lands in the response headers.
"""
