"""Core Layer — pure domain logic and contracts, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validation functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
