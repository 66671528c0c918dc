"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas are API contracts, models are persistence
    - Request schemas are typed but unconstrained; validators decide client errors
"""
