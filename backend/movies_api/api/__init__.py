"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints except GET / return JSON

Design Decisions:
    - Thin routes delegate to services
"""
