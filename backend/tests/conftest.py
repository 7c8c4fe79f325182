"""
JSON Validator Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the test suite.

Fixtures (function-scoped):
    ├── service: JsonService with the default indent
    ├── request_metrics: Fresh RequestMetrics counter set
    ├── test_app: App from create_app() wired to request_metrics
    └── test_client: HTTPX AsyncClient bound to test_app
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Fixed environment for every test, before any app import reads settings
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEFAULT_INDENT"] = "2"
os.environ["SERVICE_NAME"] = "json-validator"

from app.main import create_app  # noqa: E402
from app.services.json_service import JsonService  # noqa: E402
from app.services.metrics import RequestMetrics  # noqa: E402


@pytest.fixture
def service():
    return JsonService(default_indent=2)


@pytest.fixture
def request_metrics():
    return RequestMetrics()


@pytest.fixture
def test_app(request_metrics):
    return create_app(request_metrics=request_metrics)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
