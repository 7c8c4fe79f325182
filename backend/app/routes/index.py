"""
JSON Validator Backend — Demo Page Route
=========================================

What:  Serves the self-contained HTML demo UI at GET /.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter(tags=["UI"])

INDEX_PATH = Path(__file__).resolve().parent.parent / "static" / "index.html"


@router.get("/", include_in_schema=False)
async def serve_index() -> FileResponse:
    return FileResponse(
        path=str(INDEX_PATH),
        media_type="text/html; charset=utf-8",
        headers={"Cache-Control": "public, max-age=300"},
    )
