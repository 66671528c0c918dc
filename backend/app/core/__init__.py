"""Core Layer — domain types, errors, boundary protocols, and validation. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/ at runtime
    - Validators are pure and deterministic
"""
