"""Shared base model and timestamp helpers for persisted records."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def isoformat_utc(moment: datetime | None = None) -> str:
    """Format a moment as ISO 8601 UTC with millisecond precision.

    The output matches the timestamps already found in stored collections,
    e.g. ``2026-01-01T00:00:00.000Z``.

    Args:
        moment: Timestamp to format. Naive values are treated as UTC.
            Defaults to now.

    Returns:
        The formatted timestamp.
    """
    if moment is None:
        moment = datetime.now(tz=UTC)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecordModel(BaseModel):
    """Base class for models that round-trip through the JSON collections.

    Field names are snake_case in Python and camelCase on disk. Unknown keys
    are kept so that a read-modify-write cycle never drops data written by a
    newer version.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        validate_assignment=True,
    )

    @classmethod
    def from_record(cls, raw: dict[str, Any]) -> Self:
        """Build a model from a stored JSON object."""
        return cls.model_validate(raw)

    def to_record(self) -> dict[str, Any]:
        """Dump the model into its stored JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["RecordModel", "isoformat_utc"]
