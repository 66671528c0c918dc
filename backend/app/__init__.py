"""Reports Application Package — Company and Position CRUD backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
