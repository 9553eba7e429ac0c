"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Errors rendered by the global handlers in error_handlers.py

Design Decisions:
    - Thin routes delegate to core/ functions and repositories
"""
