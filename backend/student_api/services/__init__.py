"""Services Layer — controllers and CreateStudent implementations.

Invariants:
    - Controllers depend on core protocols, never on concrete use cases

Design Decisions:
    - Use cases injected through constructors, wired in api/dependencies.py
"""
