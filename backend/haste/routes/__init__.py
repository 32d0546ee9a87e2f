# Routes package init
"""
Haste Store — Routes Package
==============================

What:  HTTP entry points and the handlers they call.

Route Inventory:
    - health.py:    GET /health                       (service health check)
    - dispatch.py:  /{anything}                       (single catch-all entry point)
    - router.py:    classify(method, path) → Route    (pure routing rules)
    - documents.py: create / get / get raw handlers   (paste API)
    - static.py:    static asset + SPA fallback       (everything else)

Design Principle:
    Handlers stay THIN: read the request, call DocumentStore or AssetService,
    shape the response. Key generation and storage rules live in services.
"""
