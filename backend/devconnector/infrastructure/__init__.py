"""Infrastructure Layer — database sessions, password hashing, logging setup.

Invariants:
    - Library exceptions mapped to core/errors.py types at this boundary
"""
