"""Post Schemas — post and comment request bodies."""

from pydantic import BaseModel, Field


class TextBody(BaseModel):
    """Body for both posts and comments."""
    text: str | None = Field(None, max_length=10_000)
