"""Nested Entries — pure list operations for ordered sub-records of an aggregate.

Invariants:
    - Inputs are never mutated; every function returns a new list
    - insert_at_head puts the new entry at index 0 (newest first)
    - remove_by_id removes exactly one entry whose own "id" matches
    - No match → EntryNotFoundError, caller's list untouched

Design Decisions:
    - Entries are plain dicts stored in JSON columns: the aggregate is one document
    - Generated ids are uuid4 strings, unique within the parent list
    - Shared by Profile (experience, education) and Post (likes, comments)
"""

import uuid

from devconnector.core.errors import EntryNotFoundError


def new_entry_id() -> str:
    return str(uuid.uuid4())


def insert_at_head(entries: list[dict], entry: dict) -> list[dict]:
    """Return a new list with entry first."""
    return [dict(entry), *entries]


def find_index(entries: list[dict], entry_id: str, key: str = "id") -> int:
    """Index of the first entry whose key equals entry_id, or -1."""
    for i, entry in enumerate(entries):
        if str(entry.get(key)) == str(entry_id):
            return i
    return -1


def remove_by_id(
    entries: list[dict], entry_id: str, collection: str, key: str = "id",
) -> list[dict]:
    """Return a new list without the entry matching entry_id."""
    index = find_index(entries, entry_id, key)
    if index < 0:
        raise EntryNotFoundError(collection, entry_id)
    return entries[:index] + entries[index + 1:]
