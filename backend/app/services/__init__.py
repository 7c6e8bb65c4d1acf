"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services receive their storage through protocol-typed parameters
    - Business decisions delegated to core/ pure functions

Design Decisions:
    - Plain async functions over service classes: no state survives a call
"""
