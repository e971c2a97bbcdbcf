"""Identity ORM — a registered account.

Invariants:
    - id is UUID primary key, immutable
    - email is unique and stored lower-cased
    - password_hash never leaves the service layer
    - Deleting an Identity deletes its Profile (FK ondelete CASCADE; services delete explicitly)

Design Decisions:
    - avatar stored, not computed per request: gravatar URL fixed at registration
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from devconnector.db.base import Base


class Identity(Base):
    """Identity — owner of at most one Profile."""
    __tablename__ = "identities"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(100), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_public(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "avatar": self.avatar,
            "date": self.date.isoformat(),
        }
