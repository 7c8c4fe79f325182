"""
JSON Validator Backend — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the failure modes of a transformation.
How:   Each exception class carries a message and optional context dict.
       JsonService raises the input/serialization errors internally and folds
       them into the JsonResponse envelope, so they never reach the HTTP layer.
       ConfigurationError is raised during process startup only.

Exception Hierarchy:
    JsonValidatorError (base)
    ├── EmptyInputError        → envelope: is_valid=false, "Empty JSON input"
    ├── InvalidJsonError       → envelope: is_valid=false, "Invalid JSON: ..."
    ├── SerializationError     → envelope: is_valid=true,  "<operation> error: ..."
    └── ConfigurationError     → startup aborted, non-zero exit
"""

from typing import Any, Dict, Optional


class JsonValidatorError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, not returned to clients)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class EmptyInputError(JsonValidatorError):
    """Raised when the input is empty or whitespace only."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Empty JSON input", context=context)


class InvalidJsonError(JsonValidatorError):
    """
    Raised when the input text is not syntactically valid JSON.

    The parser diagnostic is kept verbatim in `detail`; the message carries
    the "Invalid JSON: " prefix callers match on.
    """

    def __init__(
        self,
        detail: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=f"Invalid JSON: {detail}", context=context)
        self.detail = detail


class SerializationError(JsonValidatorError):
    """
    Raised when a parsed value cannot be re-encoded.

    Reachable only through pathological values, e.g. a number literal large
    enough to overflow to infinity.
    """

    def __init__(
        self,
        operation: str,
        detail: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=f"{operation} error: {detail}", context=context)
        self.operation = operation
        self.detail = detail


class ConfigurationError(JsonValidatorError):
    """Raised when the process cannot start with the given configuration."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
