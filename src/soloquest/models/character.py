"""Character sheet models for D&D 5E.

These models mirror the stored ``characters`` collection: a system-neutral
envelope (:class:`CharacterRecord`) around a D&D 5E sheet
(:class:`DnD5eCharacter`).

Example:
    >>> scores = AbilityScores(strength=16, dexterity=14)
    >>> scores.modifier(Ability.STR)
    3
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from soloquest.core.constants import (
    MAX_CHARACTER_LEVEL,
    MAX_DEATH_SAVES,
    MAX_EXHAUSTION_LEVEL,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
    PC_ABILITY_SCORE_CAP,
    SPELL_SLOT_LEVELS,
)
from soloquest.models.base import RecordModel
from soloquest.models.enums import (
    Ability,
    EquipmentSlot,
    GameSystem,
    ItemSourceType,
    SkillProficiencyLevel,
)


# =============================================================================
# Ability Scores
# =============================================================================


class AbilityScores(BaseModel):
    """The six core ability scores.

    Scores are not bounded by the model; every helper that produces a new
    score set clamps to the player-character range instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    def get(self, ability: Ability | str) -> int:
        """Get the score for an ability."""
        return getattr(self, Ability(ability).value)

    def modifier(self, ability: Ability | str) -> int:
        """Get the modifier for an ability: ``(score - 10) // 2``."""
        return (self.get(ability) - 10) // 2

    def with_score(self, ability: Ability | str, value: int) -> AbilityScores:
        """Return a copy with one score replaced, clamped to 1-20."""
        clamped = min(PC_ABILITY_SCORE_CAP, max(MIN_ABILITY_SCORE, value))
        return self.model_copy(update={Ability(ability).value: clamped})

    def clamped(self) -> AbilityScores:
        """Return a copy with every score clamped to 1-20."""
        return AbilityScores(
            **{
                ability.value: min(PC_ABILITY_SCORE_CAP, max(MIN_ABILITY_SCORE, self.get(ability)))
                for ability in Ability
            }
        )


# =============================================================================
# Spell Slots
# =============================================================================


class SlotState(BaseModel):
    """Remaining and maximum slots for one spell level."""

    model_config = ConfigDict(frozen=True)

    current: int = Field(default=0, ge=0)
    max: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_current_within_max(self) -> SlotState:
        """Ensure ``current`` never exceeds ``max``."""
        if self.current > self.max:
            msg = f"current slots ({self.current}) exceed max ({self.max})"
            raise ValueError(msg)
        return self


class SpellSlots(BaseModel):
    """Spell slots for levels 1-9, stored as ``level1`` ... ``level9``."""

    model_config = ConfigDict(frozen=True)

    level1: SlotState = Field(default_factory=SlotState)
    level2: SlotState = Field(default_factory=SlotState)
    level3: SlotState = Field(default_factory=SlotState)
    level4: SlotState = Field(default_factory=SlotState)
    level5: SlotState = Field(default_factory=SlotState)
    level6: SlotState = Field(default_factory=SlotState)
    level7: SlotState = Field(default_factory=SlotState)
    level8: SlotState = Field(default_factory=SlotState)
    level9: SlotState = Field(default_factory=SlotState)

    @classmethod
    def from_maxima(cls, maxima: list[int] | tuple[int, ...]) -> SpellSlots:
        """Build full slots from a sequence of per-level maxima (level 1 first)."""
        values = {
            f"level{index + 1}": SlotState(current=value, max=value)
            for index, value in enumerate(maxima[:SPELL_SLOT_LEVELS])
        }
        return cls(**values)

    def slot(self, level: int) -> SlotState:
        """Get the slot state for a spell level (1-9)."""
        if not 1 <= level <= SPELL_SLOT_LEVELS:
            msg = f"Spell level must be between 1 and {SPELL_SLOT_LEVELS}, got {level}"
            raise ValueError(msg)
        return getattr(self, f"level{level}")

    def maxima(self) -> list[int]:
        """Get the maximum slots per level, level 1 first."""
        return [self.slot(level).max for level in range(1, SPELL_SLOT_LEVELS + 1)]


# =============================================================================
# Sheet Components
# =============================================================================


class HitPoints(BaseModel):
    """Current and maximum hit points."""

    current: int = 0
    max: int = 0


class HitDice(BaseModel):
    """Hit dice available for short rest healing."""

    current: int = Field(default=1, ge=0)
    max: int = Field(default=1, ge=1)


class DeathSaves(BaseModel):
    """Death saving throw progress while at 0 HP."""

    successes: int = Field(default=0, ge=0, le=MAX_DEATH_SAVES)
    failures: int = Field(default=0, ge=0, le=MAX_DEATH_SAVES)


class InventoryItem(RecordModel):
    """An item carried by a character."""

    id: str
    source_item_id: str | None = None
    source_item_type: ItemSourceType | None = None
    name: str
    quantity: int = Field(default=1, ge=0)
    weight: float = Field(default=0, ge=0)
    description: str | None = None
    equipped: bool = False
    equipment_slot: EquipmentSlot | None = None


class PreparedSpell(RecordModel):
    """A spell prepared or known by a character.

    ``source_spell_id`` links back to the compendium entry when known.
    """

    id: str
    source_spell_id: str | None = None
    name: str
    level: int = Field(default=0, ge=0, le=9)
    school: str = ""
    casting_time: str = ""
    range: str = ""
    components: str = ""
    duration: str = ""
    description: str = ""


# =============================================================================
# Character Sheet
# =============================================================================


class DnD5eCharacter(RecordModel):
    """A complete D&D 5E character sheet (the ``data`` of a record)."""

    id: str
    class_id: str | None = None
    race_id: str | None = None
    name: str
    race: str
    class_name: str = Field(alias="class")
    level: int = Field(default=MIN_CHARACTER_LEVEL, ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL)
    ability_scores: AbilityScores = Field(default_factory=AbilityScores)
    alignment: str | None = None
    background: str | None = None
    experience_points: int = Field(default=0, ge=0)
    hit_points: HitPoints = Field(default_factory=HitPoints)
    hit_dice: HitDice | None = None
    death_saves: DeathSaves | None = None
    conditions: list[str] | None = None
    exhaustion_level: int | None = Field(default=None, ge=0, le=MAX_EXHAUSTION_LEVEL)
    inventory: list[InventoryItem] = Field(default_factory=list)
    skills: dict[str, SkillProficiencyLevel] | None = None
    saving_throws: dict[str, bool] | None = None
    spell_slots: SpellSlots | None = None
    prepared_spells: list[PreparedSpell] | None = None
    spellcasting_ability: Ability | None = None

    def skill_level(self, skill: str) -> SkillProficiencyLevel:
        """Get the proficiency level for a skill, defaulting to none."""
        if not self.skills:
            return SkillProficiencyLevel.NONE
        return self.skills.get(skill, SkillProficiencyLevel.NONE)

    def is_save_proficient(self, ability: Ability | str) -> bool:
        """Check saving throw proficiency for an ability."""
        if not self.saving_throws:
            return False
        return bool(self.saving_throws.get(Ability(ability).value, False))


class CharacterRecord(RecordModel):
    """System-neutral envelope stored in the ``characters`` collection.

    Attributes:
        id: Unique identifier (UUID string).
        system: Game system of the sheet in ``data``.
        created_at: ISO 8601 creation timestamp.
        updated_at: ISO 8601 timestamp of the last save.
        data: The system-specific sheet.
    """

    id: str
    system: GameSystem = GameSystem.DND5E
    created_at: str
    updated_at: str
    data: DnD5eCharacter

    def replace_data(self, **updates: Any) -> CharacterRecord:
        """Return a copy whose sheet has the given fields replaced."""
        return self.model_copy(update={"data": self.data.model_copy(update=updates)})


__all__ = [
    "AbilityScores",
    "SlotState",
    "SpellSlots",
    "HitPoints",
    "HitDice",
    "DeathSaves",
    "InventoryItem",
    "PreparedSpell",
    "DnD5eCharacter",
    "CharacterRecord",
]
