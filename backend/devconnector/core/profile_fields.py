"""Profile Fields — pure validation and sparse-update construction for the Profile aggregate.

Invariants:
    - status and skills are required and non-empty on every upsert
    - All violations are collected and raised together (one ValidationFailedError)
    - skills: comma-separated input → trimmed, non-empty, de-duplicated, order kept
    - Sparse update: only supplied, non-empty fields appear in the change set
    - Social links merge per platform; unsupplied platforms keep their prior value

Design Decisions:
    - Validation runs before any store access (services call these first)
    - Input is the wire dict (aliases applied), output is a plain change dict
"""

from devconnector.core.domain_types import (
    PROFILE_SCALAR_FIELDS, SKILLS_DELIMITER, SocialPlatform,
)
from devconnector.core.errors import ErrorList
from devconnector.core.nested_entries import new_entry_id


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def parse_skills(raw: str | list[str]) -> list[str]:
    """Split a delimiter-separated string into trimmed unique skills."""
    parts = raw if isinstance(raw, list) else raw.split(SKILLS_DELIMITER)
    skills: list[str] = []
    for part in parts:
        skill = part.strip()
        if skill and skill not in skills:
            skills.append(skill)
    return skills


# ─── Profile upsert ──────────────────────────────────────────────

def validate_profile_input(data: dict) -> None:
    """Raise ValidationFailedError listing every missing required field."""
    errors = ErrorList()
    if not _present(data.get("status")):
        errors.add("Status is required", "status")
    skills = data.get("skills")
    if not _present(skills) or not parse_skills(skills):
        errors.add("Skills is required", "skills")
    errors.raise_if_any()


def build_profile_changes(data: dict) -> dict:
    """Build the sparse change set from validated input.

    Returns {"fields": {...}, "skills": list | None, "social": {...}}.
    """
    fields = {
        name: data[name].strip() if isinstance(data[name], str) else data[name]
        for name in PROFILE_SCALAR_FIELDS
        if _present(data.get(name))
    }
    skills = parse_skills(data["skills"]) if _present(data.get("skills")) else None
    social = {
        p.value: data[p.value].strip()
        for p in SocialPlatform
        if _present(data.get(p.value))
    }
    return {"fields": fields, "skills": skills, "social": social}


def merge_social(existing: dict | None, changes: dict) -> dict:
    return {**(existing or {}), **changes}


# ─── Nested entries ──────────────────────────────────────────────

EXPERIENCE_REQUIRED = (
    ("title", "Title is required"),
    ("company", "Company is required"),
    ("from", "From date is required"),
)
EDUCATION_REQUIRED = (
    ("school", "School is required"),
    ("degree", "Degree is required"),
    ("field_of_study", "Field of study is required"),
    ("from", "From date is required"),
)
EXPERIENCE_KEYS = (
    "title", "company", "location", "from", "to", "current", "description",
)
EDUCATION_KEYS = (
    "school", "degree", "field_of_study", "from", "to", "current", "description",
)


def _validate_required(data: dict, required: tuple) -> None:
    errors = ErrorList()
    for name, msg in required:
        if not _present(data.get(name)):
            errors.add(msg, name)
    errors.raise_if_any()


def _build_entry(data: dict, keys: tuple) -> dict:
    entry = {"id": new_entry_id()}
    for key in keys:
        entry[key] = data.get(key)
    entry["current"] = bool(entry.get("current"))
    return entry


def build_experience_entry(data: dict) -> dict:
    """Validate experience input and return a new entry with a generated id."""
    _validate_required(data, EXPERIENCE_REQUIRED)
    return _build_entry(data, EXPERIENCE_KEYS)


def build_education_entry(data: dict) -> dict:
    """Validate education input and return a new entry with a generated id."""
    _validate_required(data, EDUCATION_REQUIRED)
    return _build_entry(data, EDUCATION_KEYS)
