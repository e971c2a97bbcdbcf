"""Profile Schemas — Pydantic models for the profile aggregate API boundary.

Invariants:
    - Fields optional at the type level: status/skills and entry rules are checked in
      core/profile_fields.py so all violations are reported together
    - Wire names: "from", "to" for dates; field_of_study also accepted as fieldofstudy/fieldOfStudy
    - to_input() returns the wire dict consumed by core, without unset fields

Design Decisions:
    - Aliases over renamed keys: "from" is a Python keyword
    - skills accepts a comma-separated string or a list
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProfileUpsert(BaseModel):
    """Create-or-update body; absent fields are left untouched on update."""
    company: str | None = Field(None, max_length=200)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=200)
    bio: str | None = Field(None, max_length=5000)
    status: str | None = Field(None, max_length=100)
    github_username: str | None = Field(
        None, max_length=100,
        validation_alias=AliasChoices("github_username", "githubusername"),
    )
    skills: str | list[str] | None = None
    youtube: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    linkedin: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)

    def to_input(self) -> dict:
        return self.model_dump(exclude_unset=True)


class _EntryBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_date: str | None = Field(None, alias="from")
    to_date: str | None = Field(None, alias="to")
    current: bool = False
    description: str | None = Field(None, max_length=5000)

    def to_input(self) -> dict:
        return self.model_dump(by_alias=True)


class ExperienceCreate(_EntryBase):
    title: str | None = Field(None, max_length=200)
    company: str | None = Field(None, max_length=200)
    location: str | None = Field(None, max_length=200)


class EducationCreate(_EntryBase):
    school: str | None = Field(None, max_length=200)
    degree: str | None = Field(None, max_length=200)
    field_of_study: str | None = Field(
        None, max_length=200,
        validation_alias=AliasChoices("field_of_study", "fieldofstudy", "fieldOfStudy"),
    )
