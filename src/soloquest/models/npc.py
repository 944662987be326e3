"""NPC library models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from soloquest.models.base import RecordModel
from soloquest.models.enums import NPCType


class NPCAbility(BaseModel):
    """A special ability or action an NPC can perform."""

    name: str
    description: str = ""


class NPC(RecordModel):
    """A non-player character stored in the ``npcs`` collection.

    ``hit_points`` doubles as current and max HP when the NPC joins combat.
    """

    id: str
    name: str
    type: NPCType = NPCType.NEUTRAL
    hit_points: int | float = Field(ge=0)
    armor_class: int | float = Field(ge=0)
    initiative_bonus: int | float | None = None
    abilities: list[NPCAbility] | None = None
    notes: str | None = None
    created_at: str


__all__ = ["NPCAbility", "NPC"]
