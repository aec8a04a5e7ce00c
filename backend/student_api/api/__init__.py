"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Controllers reach routes only through api/dependencies.py

Design Decisions:
    - Thin routes delegate to controllers in services/
"""
