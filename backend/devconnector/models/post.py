"""Post ORM — a message with nested likes and comments.

Invariants:
    - likes: JSON list of {"user": <id>}, at most one per identity, newest first
    - comments: JSON list of comment dicts with their own "id", newest first
    - name/avatar denormalized from the author at creation time

Design Decisions:
    - owner_id is not a foreign key: posts outlive a deleted account
    - Same versioned whole-document write as Profile
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from devconnector.db.base import Base


class Post(Base):
    """Post aggregate — owns its likes and comments."""
    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    likes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    comments: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "user": str(self.owner_id),
            "text": self.text,
            "name": self.name,
            "avatar": self.avatar,
            "likes": list(self.likes or []),
            "comments": list(self.comments or []),
            "date": self.date.isoformat(),
        }
