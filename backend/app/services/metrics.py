"""
JSON Validator Backend — Request Metrics
=========================================

What:  Process-wide monotonically increasing counters and their
       Prometheus text exposition (format version 0.0.4).
How:   One RequestMetrics instance is built by create_app(), stored on
       app.state.metrics and injected into handlers with Depends(get_metrics).
       Increments are serialized by a lock, so concurrent requests in the
       threadpool and on the event loop never lose updates.

Exposition (per counter):
    # HELP <name> <help text>
    # TYPE <name> counter
    <name> <value>
"""

import threading
from typing import Dict, Tuple

from starlette.requests import Request

# Counters wrap at 2**64 like an unsigned 64-bit integer
COUNTER_MODULUS = 1 << 64

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

HTTP_REQUESTS = "json_validator_http_requests_total"
FORMAT_REQUESTS = "json_validator_format_requests_total"
MINIFY_REQUESTS = "json_validator_minify_requests_total"
ERRORS = "json_validator_errors_total"

COUNTERS: Tuple[Tuple[str, str], ...] = (
    (HTTP_REQUESTS, "Total number of HTTP requests received"),
    (FORMAT_REQUESTS, "Total number of JSON format requests"),
    (MINIFY_REQUESTS, "Total number of JSON minify requests"),
    (ERRORS, "Total number of failed requests"),
)


class RequestMetrics:
    """
    Thread-safe counter set.

    There is no reset operation; a counter only ever moves forward (modulo 2**64).
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._values: Dict[str, int] = {name: 0 for name, _ in COUNTERS}

    def increment(self, name: str, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError("counters can only increase")
        with self._lock:
            if name not in self._values:
                raise KeyError(f"unknown counter '{name}'")
            self._values[name] = (self._values[name] + amount) % COUNTER_MODULUS

    def record_http_request(self) -> None:
        self.increment(HTTP_REQUESTS)

    def record_format(self) -> None:
        self.increment(FORMAT_REQUESTS)

    def record_minify(self) -> None:
        self.increment(MINIFY_REQUESTS)

    def record_error(self) -> None:
        self.increment(ERRORS)

    def snapshot(self) -> Dict[str, int]:
        """Consistent copy of every counter value."""
        with self._lock:
            return dict(self._values)

    def render(self) -> str:
        """Prometheus text exposition of the current values."""
        values = self.snapshot()
        lines = []
        for name, help_text in COUNTERS:
            lines.append(f"# HELP {name} {help_text}")
            lines.append(f"# TYPE {name} counter")
            lines.append(f"{name} {values[name]}")
        return "\n".join(lines) + "\n"


def get_metrics(request: Request) -> RequestMetrics:
    """FastAPI dependency returning the app-owned counter set."""
    return request.app.state.metrics
