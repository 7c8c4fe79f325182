"""
JSON Validator Backend — Health Check Route
============================================

What:  Liveness endpoint for load balancers and container health checks.
How:   The service has no dependencies to probe, so a process able to answer
       is healthy. The timestamp is taken at call time.
"""

import time

from fastapi import APIRouter

from app.config import settings
from app.schemas.json_document import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=int(time.time()),
        service=settings.service_name,
    )
