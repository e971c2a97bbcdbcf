"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Profile and Post are aggregate roots; nested entries live inside their rows

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from devconnector.models.identity import Identity  # noqa: F401
from devconnector.models.profile import Profile  # noqa: F401
from devconnector.models.post import Post  # noqa: F401
