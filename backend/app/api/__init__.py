"""API Layer — FastAPI routes, service wiring, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to services; the route decides what a zero affected count means
"""
