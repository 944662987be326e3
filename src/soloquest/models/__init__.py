"""Pydantic V2 models for SoloQuest records.

Submodules:
    enums: Abilities, skills, proficiency levels, record vocabularies.
    base: RecordModel base class and timestamp helpers.
    character: Character sheets and the stored character envelope.
    npc: NPC library entries.
    journal: Session journal entries.

Example:
    >>> from soloquest.models import CharacterRecord
    >>> record = CharacterRecord.from_record(raw)
    >>> record.data.class_name
    'Wizard'
"""

from __future__ import annotations

from soloquest.models.base import RecordModel, isoformat_utc
from soloquest.models.character import (
    AbilityScores,
    CharacterRecord,
    DeathSaves,
    DnD5eCharacter,
    HitDice,
    HitPoints,
    InventoryItem,
    PreparedSpell,
    SlotState,
    SpellSlots,
)
from soloquest.models.enums import (
    SKILL_ABILITIES,
    Ability,
    EquipmentSlot,
    GameSystem,
    ItemSourceType,
    JournalTagType,
    NPCType,
    Skill,
    SkillAction,
    SkillProficiencyLevel,
    SpellSchool,
)
from soloquest.models.journal import JournalEntry, JournalTag
from soloquest.models.npc import NPC, NPCAbility


__all__ = [
    # Base
    "RecordModel",
    "isoformat_utc",
    # Enums
    "Ability",
    "Skill",
    "SKILL_ABILITIES",
    "SkillProficiencyLevel",
    "SkillAction",
    "GameSystem",
    "NPCType",
    "JournalTagType",
    "EquipmentSlot",
    "ItemSourceType",
    "SpellSchool",
    # Character
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
    # NPC
    "NPC",
    "NPCAbility",
    # Journal
    "JournalEntry",
    "JournalTag",
]
