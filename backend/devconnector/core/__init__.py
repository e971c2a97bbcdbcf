"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or client/
    - Functions never mutate their inputs

Design Decisions:
    - Functional core separated from imperative shell: services load, call core, persist
"""
