"""
JSON Validator Backend — JSON Service (validate / format / minify)
===================================================================

What:  Parses raw JSON text and re-serializes it pretty-printed or minified.
How:   The standard library `json` module does the parsing and encoding;
       this module trims input, maps each failure stage to its exception,
       and folds the outcome into the JsonResponse envelope.
Who:   Called by the /api/format and /api/minify route handlers.

Pipeline:
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌────────────┐
    │   Trim   │───▶│    Parse     │───▶│   Encode     │───▶│  Envelope  │
    │          │    │ (validate)   │    │ pretty/mini  │    │            │
    └──────────┘    └──────────────┘    └──────────────┘    └────────────┘
         │                 │                   │
    EmptyInputError  InvalidJsonError   SerializationError
     is_valid=false   is_valid=false      is_valid=true

Strictness:
    - NaN / Infinity / -Infinity literals are rejected at parse time.
    - Number literals that overflow to a non-finite float (e.g. 1e999) parse,
      then fail encoding because non-finite floats are not JSON.
    - Nesting deep enough to exhaust the interpreter stack is a parse error.
    - Object key order is preserved end-to-end; keys are never sorted.
"""

import json
import logging
from typing import Any, Callable, Optional

from app.config import settings
from app.exceptions import (
    EmptyInputError,
    InvalidJsonError,
    SerializationError,
)
from app.schemas.json_document import JsonResponse

logger = logging.getLogger(__name__)

MINIFY_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> Any:
    raise InvalidJsonError(f"non-standard constant '{name}' is not allowed")


class JsonService:
    """
    Stateless JSON transformations.

    Responsibilities:
        - validate(): trim and parse, raising on empty or malformed input
        - format():   pretty-print with the requested or default indent
        - minify():   compact encoding without insignificant whitespace

    format() and minify() never raise for bad input; every failure becomes
    a JsonResponse with success=false.
    """

    def __init__(self, default_indent: Optional[int] = None):
        self._default_indent = default_indent

    @property
    def default_indent(self) -> int:
        if self._default_indent is not None:
            return self._default_indent
        return settings.default_indent

    def validate(self, json_text: str) -> Any:
        """
        Parse trimmed input into a generic JSON value.

        Raises:
            EmptyInputError: input is empty or whitespace only
            InvalidJsonError: input is not valid JSON; the parser diagnostic
                is kept verbatim after the "Invalid JSON: " prefix
        """
        text = json_text.strip()
        if not text:
            raise EmptyInputError()

        try:
            return json.loads(text, parse_constant=_reject_constant)
        except RecursionError:
            raise InvalidJsonError("recursion limit exceeded", context={"length": len(text)})
        except ValueError as e:
            # JSONDecodeError and the int digit-limit error both land here
            raise InvalidJsonError(str(e), context={"length": len(text)})

    def format(self, json_text: str, indent_size: Optional[int] = None) -> JsonResponse:
        """Pretty-print JSON text. indent_size overrides the default indent width."""
        indent = self.default_indent if indent_size is None else indent_size
        return self._transform(
            json_text,
            operation="Formatting",
            encode=lambda value: json.dumps(
                value, indent=indent, ensure_ascii=False, allow_nan=False
            ),
        )

    def minify(self, json_text: str) -> JsonResponse:
        """Re-encode JSON text with no insignificant whitespace."""
        return self._transform(
            json_text,
            operation="Minification",
            encode=lambda value: json.dumps(
                value, separators=MINIFY_SEPARATORS, ensure_ascii=False, allow_nan=False
            ),
        )

    def _transform(
        self,
        json_text: str,
        operation: str,
        encode: Callable[[Any], str],
    ) -> JsonResponse:
        try:
            value = self.validate(json_text)
            result = self._encode(value, operation, encode)
        except (EmptyInputError, InvalidJsonError) as e:
            logger.debug("%s rejected input: %s", operation, e.message)
            return JsonResponse.failure(e.message, is_valid=False)
        except SerializationError as e:
            logger.warning("%s failed for valid input: %s", operation, e.detail)
            return JsonResponse.failure(e.message, is_valid=True)

        logger.debug("%s succeeded: %d chars out", operation, len(result))
        return JsonResponse.ok(result)

    @staticmethod
    def _encode(value: Any, operation: str, encode: Callable[[Any], str]) -> str:
        try:
            text = encode(value)
            # Lone surrogates survive decoding but cannot be sent as UTF-8
            text.encode("utf-8")
        except RecursionError:
            raise SerializationError(operation, "recursion limit exceeded")
        except (ValueError, TypeError) as e:
            # UnicodeEncodeError is a ValueError
            raise SerializationError(operation, str(e))
        return text


# ── Singleton Instance ────────────────────────────────────────────────────
json_service = JsonService()
