"""Infrastructure Layer — database access, repositories, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports infrastructure
    - All SQLAlchemy failures surface as core/errors.DatabaseError or a zero affected count
"""
