# Middleware package init
"""
GameStore Backend - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID runs first so the access log line carries the id
    - Logging measures the full handler duration and final status
"""
