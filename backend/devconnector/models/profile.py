"""Profile ORM — the aggregate root for an identity's public profile.

Invariants:
    - owner_id unique: at most one Profile per Identity
    - experience/education are JSON lists of entry dicts, newest first
    - version increments on every UPDATE (optimistic concurrency)

Design Decisions:
    - Nested lists stored as JSON on the row: the aggregate is read and written as one document
    - version_id_col: a stale read-modify-write fails with StaleDataError instead of
      overwriting a concurrent change (last-write-wins is detected, not merged)
    - Lists are always reassigned, never mutated in place, so change tracking sees them
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from devconnector.db.base import Base


class Profile(Base):
    """Profile aggregate — owns experience and education entries."""
    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False, unique=True, index=True,
    )
    company: Mapped[str | None] = mapped_column(String(200), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(100), nullable=False)
    github_username: Mapped[str | None] = mapped_column(String(100), nullable=True)
    skills: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    social: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    experience: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    education: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    owner: Mapped["Identity"] = relationship(
        "Identity", lazy="joined",
    )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "user": {
                "id": str(self.owner_id),
                "name": self.owner.name if self.owner else None,
                "avatar": self.owner.avatar if self.owner else None,
            },
            "company": self.company,
            "website": self.website,
            "location": self.location,
            "bio": self.bio,
            "status": self.status,
            "github_username": self.github_username,
            "skills": list(self.skills or []),
            "social": dict(self.social or {}),
            "experience": list(self.experience or []),
            "education": list(self.education or []),
            "date": self.date.isoformat(),
            "version": self.version,
        }
