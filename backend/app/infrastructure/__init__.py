"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Adapters implement core protocols; core never imports from here
    - All driver exceptions mapped to core DatabaseError

Design Decisions:
    - One adapter per backing store (ADR: single responsibility)
"""
