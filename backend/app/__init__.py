"""
JSON Validator Backend — Application Package Initializer
=========================================================

What: Marks the `app` directory as a Python package.
Who:  Used by uvicorn (`app.main:app`), `python -m app`, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (format / minify)      │  ← Pure transformations
    ├─────────────────────────────────────┤
    │        Schemas (API contract)       │  ← Pydantic envelopes
    └─────────────────────────────────────┘

    There is no persistence layer: every request is handled in isolation.
    The only process-wide state is the metrics counter set, owned by the
    application factory.
"""

__version__ = "1.0.0"
