"""Services Layer — imperative shell around the pure core.

Invariants:
    - Every aggregate mutation is scoped to the authenticated owner id
    - Services raise core/errors.py types; they never build HTTP responses

Design Decisions:
    - One service class per aggregate, constructed per request with an AsyncSession
"""
