"""Services Layer — use-case orchestration for companies and positions.

Invariants:
    - One service class per entity
    - Services depend on core/ Protocols, never on concrete repositories
"""
