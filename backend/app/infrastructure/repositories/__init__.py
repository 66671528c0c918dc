"""SQL Repositories — AsyncSession-backed implementations of core/repository_protocols.

Invariants:
    - One query class and one command class per entity
    - Each command commits its own unit of work and returns the affected-row count
"""
