"""
JSON Validator Backend — HTTP Endpoint Tests
=============================================

What:  End-to-end tests through the ASGI app (middleware, routing, schemas).

What we test:
    ✅ /api/format and /api/minify envelopes, always HTTP 200 for bad JSON
    ✅ 422 for malformed request bodies
    ✅ /health payload, /metrics exposition and counter movement
    ✅ GET / demo page, X-Request-ID propagation, 500 catch-all
"""

import json

import pytest
from httpx import AsyncClient, ASGITransport

from app.services.metrics import ERRORS, FORMAT_REQUESTS, HTTP_REQUESTS, MINIFY_REQUESTS


def _counter(text: str, name: str) -> int:
    for line in text.splitlines():
        if line.startswith(f"{name} "):
            return int(line.split()[1])
    raise AssertionError(f"{name} missing from exposition")


class TestFormatEndpoint:

    @pytest.mark.asyncio
    async def test_format_success(self, test_client):
        response = await test_client.post("/api/format", json={"json_text": '{"name":"Jo","age":1}'})
        assert response.status_code == 200
        body = response.json()
        assert body == {
            "success": True,
            "formatted_json": '{\n  "name": "Jo",\n  "age": 1\n}',
            "is_valid": True,
        }

    @pytest.mark.asyncio
    async def test_format_invalid_json_is_200(self, test_client):
        response = await test_client.post("/api/format", json={"json_text": '{"a": }'})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["is_valid"] is False
        assert body["error_message"].startswith("Invalid JSON: ")
        assert "formatted_json" not in body

    @pytest.mark.asyncio
    async def test_format_empty(self, test_client):
        response = await test_client.post("/api/format", json={"json_text": "   "})
        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "error_message": "Empty JSON input",
            "is_valid": False,
        }

    @pytest.mark.asyncio
    async def test_format_indent_size(self, test_client):
        response = await test_client.post(
            "/api/format", json={"json_text": '{"a":1}', "indent_size": 4}
        )
        assert response.json()["formatted_json"] == '{\n    "a": 1\n}'

    @pytest.mark.asyncio
    async def test_format_serialization_failure(self, test_client):
        response = await test_client.post("/api/format", json={"json_text": "[1e999]"})
        body = response.json()
        assert response.status_code == 200
        assert body["success"] is False
        assert body["is_valid"] is True
        assert body["error_message"].startswith("Formatting error: ")

    @pytest.mark.asyncio
    async def test_missing_json_text_is_422(self, test_client):
        response = await test_client.post("/api/format", json={"indent_size": 2})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_indent_out_of_range_is_422(self, test_client):
        response = await test_client.post("/api/format", json={"json_text": "{}", "indent_size": 99})
        assert response.status_code == 422


class TestMinifyEndpoint:

    @pytest.mark.asyncio
    async def test_minify_array(self, test_client):
        response = await test_client.post("/api/minify", json={"json_text": "[1, 2, 3]"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "formatted_json": "[1,2,3]", "is_valid": True}

    @pytest.mark.asyncio
    async def test_minify_ignores_indent_size(self, test_client):
        response = await test_client.post(
            "/api/minify", json={"json_text": '{ "a" : [ 1 ] }', "indent_size": 8}
        )
        assert response.json()["formatted_json"] == '{"a":[1]}'

    @pytest.mark.asyncio
    async def test_minify_invalid(self, test_client):
        response = await test_client.post("/api/minify", json={"json_text": "[1,"})
        body = response.json()
        assert response.status_code == 200
        assert (body["success"], body["is_valid"]) == (False, False)
        assert body["error_message"].startswith("Invalid JSON: ")

    @pytest.mark.asyncio
    async def test_minify_of_formatted_matches(self, test_client):
        document = '{"b": [true, null, {"c": "d"}], "a": 1.5}'
        formatted = (await test_client.post("/api/format", json={"json_text": document})).json()
        direct = (await test_client.post("/api/minify", json={"json_text": document})).json()
        via_format = (
            await test_client.post("/api/minify", json={"json_text": formatted["formatted_json"]})
        ).json()
        assert via_format["formatted_json"] == direct["formatted_json"]
        assert json.loads(direct["formatted_json"]) == json.loads(document)


class TestAuxiliaryEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        first = await test_client.get("/health")
        second = await test_client.get("/health")
        assert first.status_code == 200
        body = first.json()
        assert body["status"] == "healthy"
        assert body["service"] == "json-validator"
        assert isinstance(body["timestamp"], int)
        assert second.json()["timestamp"] >= body["timestamp"]

    @pytest.mark.asyncio
    async def test_metrics_content_type(self, test_client):
        response = await test_client.get("/metrics")
        assert response.status_code == 200
        assert response.headers["content-type"] == "text/plain; version=0.0.4; charset=utf-8"
        assert f"# TYPE {FORMAT_REQUESTS} counter" in response.text

    @pytest.mark.asyncio
    async def test_metrics_count_requests(self, test_client):
        await test_client.post("/api/format", json={"json_text": "{}"})
        await test_client.post("/api/format", json={"json_text": "{"})
        await test_client.post("/api/minify", json={"json_text": ""})
        text = (await test_client.get("/metrics")).text

        assert _counter(text, FORMAT_REQUESTS) == 2
        assert _counter(text, MINIFY_REQUESTS) == 1
        assert _counter(text, ERRORS) == 2
        # the scrape itself is counted
        assert _counter(text, HTTP_REQUESTS) == 4

    @pytest.mark.asyncio
    async def test_metrics_never_decrease(self, test_client):
        before = (await test_client.get("/metrics")).text
        await test_client.post("/api/minify", json={"json_text": "[]"})
        after = (await test_client.get("/metrics")).text
        for name in (HTTP_REQUESTS, FORMAT_REQUESTS, MINIFY_REQUESTS, ERRORS):
            assert _counter(after, name) >= _counter(before, name)

    @pytest.mark.asyncio
    async def test_index_page(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/api/format" in response.text

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 8


@pytest.mark.asyncio
async def test_unexpected_error_returns_500(test_app, request_metrics):
    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "internal_server_error"
    assert "kaboom" not in body["message"]
    assert "request_id" in body
    assert request_metrics.snapshot()[ERRORS] == 1
