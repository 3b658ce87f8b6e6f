"""API Layer: FastAPI routes, request wiring and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to action services (functional core, imperative shell)
"""
