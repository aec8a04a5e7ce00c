"""Pydantic Schemas — API contracts for OpenAPI documentation.

Invariants:
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain values
"""
