"""Database Primitives — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - Engine and session lifecycle live in infrastructure/database.py, not here
"""
