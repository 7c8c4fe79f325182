"""
JSON Validator Backend — Format & Minify Route Handlers
========================================================

What:  POST /api/format and POST /api/minify.
How:   The request body is validated into JsonRequest by FastAPI, the text is
       handed to JsonService, and the resulting envelope is returned as-is.

Status codes:
    200: Always, for any json_text content. Malformed JSON is an expected
         outcome reported in the body (success=false), not a server fault.
    422: The request envelope itself is malformed (json_text missing or not a
         string, indent_size out of range). Produced by FastAPI.
"""

import logging

from fastapi import APIRouter, Depends

from app.schemas.json_document import JsonRequest, JsonResponse
from app.services.json_service import json_service
from app.services.metrics import RequestMetrics, get_metrics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["JSON"])


def _record_outcome(metrics: RequestMetrics, result: JsonResponse) -> None:
    if not result.success:
        metrics.record_error()


@router.post(
    "/format",
    response_model=JsonResponse,
    response_model_exclude_none=True,
    summary="Validate and pretty-print JSON",
    description=(
        "Parses json_text and re-serializes it with indentation. "
        "indent_size sets the indent width (default 2). "
        "Invalid input is reported in the body with success=false."
    ),
)
async def format_json(
    body: JsonRequest,
    metrics: RequestMetrics = Depends(get_metrics),
) -> JsonResponse:
    metrics.record_format()
    result = json_service.format(body.json_text, indent_size=body.indent_size)
    _record_outcome(metrics, result)
    return result


@router.post(
    "/minify",
    response_model=JsonResponse,
    response_model_exclude_none=True,
    summary="Validate and minify JSON",
    description=(
        "Parses json_text and re-serializes it without insignificant whitespace. "
        "indent_size is accepted and ignored."
    ),
)
async def minify_json(
    body: JsonRequest,
    metrics: RequestMetrics = Depends(get_metrics),
) -> JsonResponse:
    metrics.record_minify()
    result = json_service.minify(body.json_text)
    _record_outcome(metrics, result)
    return result
