"""Session journal models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from soloquest.models.base import RecordModel
from soloquest.models.enums import JournalTagType


class JournalTag(BaseModel):
    """A categorized tag attached to a journal entry (e.g. location=Waterdeep)."""

    type: JournalTagType = JournalTagType.GENERAL
    value: str


class JournalEntry(RecordModel):
    """A session note stored in the ``journal`` collection."""

    id: str
    character_id: str
    timestamp: str
    title: str
    content: str = ""
    tags: list[JournalTag] = Field(default_factory=list)
    session_number: int | None = Field(default=None, ge=0)

    def has_tag(self, tag_type: JournalTagType | str, value: str | None = None) -> bool:
        """Check whether the entry carries a tag of a type (and optional value)."""
        return any(
            tag.type == tag_type and (value is None or tag.value == value) for tag in self.tags
        )


__all__ = ["JournalTag", "JournalEntry"]
