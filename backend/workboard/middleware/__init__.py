"""
Workboard Backend: Middleware Package
=======================================

Middleware Chain (outermost first):
    Request → [CORS] → [Request ID] → [Logging] → Route Handler

    - CORS: permissive policy, answers preflight OPTIONS requests itself
    - Request ID: correlation ID in a ContextVar and the X-Request-ID header
    - Logging: access line with status and duration, tagged with the ID
"""
