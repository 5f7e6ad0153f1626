from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from forumhub.db.models import TITLE_MAX_LENGTH
from forumhub.schemas.base import APIModel

_REQUIRED_MESSAGES = {
    "title": "Title is required",
    "content": "Content is required",
}


class TopicIn(BaseModel):
    """Body of create and update. Only title and content are accepted from clients."""

    title: str | None = Field(default=None, validate_default=True)
    content: str | None = Field(default=None, validate_default=True)

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str | None, info: ValidationInfo) -> str:
        if value is None or not value.strip():
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return value

    @field_validator("title")
    @classmethod
    def _title_length(cls, value: str) -> str:
        if len(value) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
        return value


class TopicOut(APIModel):
    id: int
    title: str
    content: str
    hidden: bool
