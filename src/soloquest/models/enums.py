"""Enumeration types for SoloQuest.

Ability scores, skills, proficiency levels, and the small vocabularies used
by persisted records. Values match the strings stored in the JSON
collections, so enum members compare equal to raw stored values.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """D&D 5E ability scores, valued by their stored key."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability (e.g., 'Strength')."""
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g., 'STR')."""
        return self.name


class Skill(StrEnum):
    """The eighteen D&D 5E skills, valued by their display name.

    Character sheets key skill proficiencies by these names.
    """

    ACROBATICS = "Acrobatics"
    ANIMAL_HANDLING = "Animal Handling"
    ARCANA = "Arcana"
    ATHLETICS = "Athletics"
    DECEPTION = "Deception"
    HISTORY = "History"
    INSIGHT = "Insight"
    INTIMIDATION = "Intimidation"
    INVESTIGATION = "Investigation"
    MEDICINE = "Medicine"
    NATURE = "Nature"
    PERCEPTION = "Perception"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"
    RELIGION = "Religion"
    SLEIGHT_OF_HAND = "Sleight of Hand"
    STEALTH = "Stealth"
    SURVIVAL = "Survival"

    @property
    def ability(self) -> Ability:
        """Get the ability score that governs this skill."""
        return SKILL_ABILITIES[self]


SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ACROBATICS: Ability.DEX,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.ARCANA: Ability.INT,
    Skill.ATHLETICS: Ability.STR,
    Skill.DECEPTION: Ability.CHA,
    Skill.HISTORY: Ability.INT,
    Skill.INSIGHT: Ability.WIS,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.INVESTIGATION: Ability.INT,
    Skill.MEDICINE: Ability.WIS,
    Skill.NATURE: Ability.INT,
    Skill.PERCEPTION: Ability.WIS,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
    Skill.RELIGION: Ability.INT,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.SURVIVAL: Ability.WIS,
}


class SkillProficiencyLevel(StrEnum):
    """Training in a skill: none, proficient, or expert (double bonus)."""

    NONE = "none"
    PROFICIENT = "proficient"
    EXPERT = "expert"


class SkillAction(StrEnum):
    """Interactions that change a skill's proficiency level."""

    TOGGLE_PROFICIENT = "toggle_proficient"
    TOGGLE_EXPERTISE = "toggle_expertise"


class GameSystem(StrEnum):
    """Supported tabletop systems. Only D&D 5e is fully modeled."""

    DND5E = "dnd5e"
    DRAGONBANE = "dragonbane"
    CYBERPUNK = "cyberpunk"


class NPCType(StrEnum):
    """Relationship of an NPC to the party."""

    ENEMY = "enemy"
    ALLY = "ally"
    NEUTRAL = "neutral"


class JournalTagType(StrEnum):
    """Categories for journal entry tags."""

    LOCATION = "location"
    NPC = "npc"
    QUEST = "quest"
    COMBAT = "combat"
    LOOT = "loot"
    GENERAL = "general"


class EquipmentSlot(StrEnum):
    """Slots an inventory item can occupy when equipped."""

    MAIN_HAND = "mainHand"
    OFF_HAND = "offHand"
    ARMOR = "armor"
    HELMET = "helmet"
    CLOAK = "cloak"
    BOOTS = "boots"
    RING1 = "ring1"
    RING2 = "ring2"
    AMULET = "amulet"
    NONE = "none"


class ItemSourceType(StrEnum):
    """Compendium equipment categories an inventory item may reference."""

    WEAPON = "weapon"
    ARMOR = "armor"
    ADVENTURING_GEAR = "adventuringGear"


class SpellSchool(StrEnum):
    """The eight schools of magic."""

    ABJURATION = "Abjuration"
    CONJURATION = "Conjuration"
    DIVINATION = "Divination"
    ENCHANTMENT = "Enchantment"
    EVOCATION = "Evocation"
    ILLUSION = "Illusion"
    NECROMANCY = "Necromancy"
    TRANSMUTATION = "Transmutation"


__all__ = [
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
]
