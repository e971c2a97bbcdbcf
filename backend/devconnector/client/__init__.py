"""Client Layer — async action dispatcher, pure reducers, store and alert queue.

Invariants:
    - No module in client/ imports from services/, api/, models/ or infrastructure/
    - Talks to the API only over HTTP (httpx)
    - One Store per client session, passed explicitly; no module-level state

Design Decisions:
    - Actions are async methods awaiting one request each, reducers are pure functions
"""
