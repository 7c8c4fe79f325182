# Services package init
"""
JSON Validator Backend — Services Layer
========================================

What:  Business logic sitting between routes (HTTP) and the JSON library.

Service Inventory:
    - JsonService: validate / format / minify, folding failures into JsonResponse
    - RequestMetrics: process-wide request counters with text exposition
"""
