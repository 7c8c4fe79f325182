# Middleware package init
"""
JSON Validator Backend — Middleware Package
============================================

Middleware Chain:
    Request → [Request ID] → [Metrics] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: correlation ID in a ContextVar and the X-Request-ID header
    - Metrics: counts every HTTP request
    - Logging: one access line per request with status and duration
"""
