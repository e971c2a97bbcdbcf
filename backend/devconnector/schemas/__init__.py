"""Pydantic Schemas — request shapes for API endpoints.

Invariants:
    - Schemas check types at the boundary; required-field rules live in core/
      so the error messages match the {"errors": [...]} wire contract

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
