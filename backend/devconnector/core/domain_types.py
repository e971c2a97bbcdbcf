"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - IdentityId wraps the UUID of an account; nested entry ids stay plain str
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

IdentityId = NewType("IdentityId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class NestedCollection(str, Enum):
    """The two ordered nested lists owned by a Profile."""
    EXPERIENCE = "experience"
    EDUCATION = "education"


class SocialPlatform(str, Enum):
    """Platforms accepted in Profile.social."""
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"


class AlertSeverity(str, Enum):
    """Client alert severities (CSS class names on the UI side)."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_ALERT_TIMEOUT_MS = 5000
SKILLS_DELIMITER = ","
PROFILE_SCALAR_FIELDS = (
    "company", "website", "location", "bio", "status", "github_username",
)
