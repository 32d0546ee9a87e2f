# Middleware package init
"""
Haste Store — Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Dispatch

    1. Request ID first: every later log line can carry the correlation ID
    2. Logging: records status and duration once the response exists
    3. GZip / CORS: FastAPI built-ins
"""
