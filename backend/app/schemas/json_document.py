"""
JSON Validator Backend — Pydantic Request/Response Schemas
===========================================================

What:  Pydantic models defining the API contract of the JSON endpoints.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   Used by route handlers and by JsonService to build envelopes.

Envelope contract (JsonResponse):
    success=true   → formatted_json set, error_message unset, is_valid=true
    success=false  → error_message set, formatted_json unset
    is_valid=false → success=false
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class JsonRequest(BaseModel):
    """
    Body of POST /api/format and POST /api/minify.

    indent_size:
        Honoured by /api/format as the indent width (0-16 spaces). When
        omitted the configured default (2) applies. /api/minify ignores it.
    """
    json_text: str = Field(description="Raw JSON text to validate and transform")
    indent_size: Optional[int] = Field(
        default=None,
        ge=0,
        le=16,
        description="Indent width for /api/format; ignored by /api/minify",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class JsonResponse(BaseModel):
    """
    Uniform envelope returned by both transformation endpoints.

    is_valid is independent of success: it reports whether the input parsed,
    so a value that parsed but could not be re-encoded has
    success=false, is_valid=true.
    """
    success: bool = Field(description="True iff the transformation completed")
    formatted_json: Optional[str] = Field(
        default=None,
        description="Transformed JSON text (present only on success)",
    )
    error_message: Optional[str] = Field(
        default=None,
        description="Diagnostic (present only on failure)",
    )
    is_valid: bool = Field(description="True iff the input parsed as JSON")

    @model_validator(mode="after")
    def check_envelope(self) -> "JsonResponse":
        """Exactly one of formatted_json / error_message, and no success without validity."""
        if self.success:
            if self.formatted_json is None or self.error_message is not None:
                raise ValueError("successful response must carry formatted_json only")
            if not self.is_valid:
                raise ValueError("successful response must have is_valid=true")
        elif self.error_message is None or self.formatted_json is not None:
            raise ValueError("failed response must carry error_message only")
        return self

    @classmethod
    def ok(cls, text: str) -> "JsonResponse":
        return cls(success=True, formatted_json=text, is_valid=True)

    @classmethod
    def failure(cls, message: str, is_valid: bool) -> "JsonResponse":
        return cls(success=False, error_message=message, is_valid=is_valid)


class HealthResponse(BaseModel):
    """Payload of GET /health."""
    status: str = Field(description="Always 'healthy' while the process serves requests")
    timestamp: int = Field(description="Unix time (seconds) when the check ran")
    service: str = Field(description="Static service identifier")


class ErrorResponse(BaseModel):
    """Body of unexpected server errors (HTTP 500)."""
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Correlation ID")
