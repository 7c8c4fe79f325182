# Routes package init
"""
JSON Validator Backend — API Routes Package
============================================

Route Inventory:
    - index.py:       GET  /              (demo page)
    - json_tools.py:  POST /api/format    (pretty-print)
                      POST /api/minify    (minify)
    - health.py:      GET  /health        (liveness)
    - metrics.py:     GET  /metrics       (Prometheus text exposition)

Routes stay thin: extract the body, call JsonService, record metrics.
"""
