"""
JSON Validator Backend — Metrics Route
=======================================

What:  GET /metrics, the Prometheus-compatible text exposition of the
       request counters.
"""

from fastapi import APIRouter, Depends, Response

from app.services.metrics import CONTENT_TYPE, RequestMetrics, get_metrics

router = APIRouter(tags=["Monitoring"])


@router.get("/metrics", summary="Request counters (Prometheus text format)")
async def metrics_endpoint(metrics: RequestMetrics = Depends(get_metrics)) -> Response:
    return Response(content=metrics.render(), media_type=CONTENT_TYPE)
