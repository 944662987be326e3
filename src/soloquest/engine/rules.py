"""D&D 5E rules calculator.

Pure functions that turn raw character inputs (ability scores, class, level)
into derived values: modifiers, proficiency bonus, spell DCs, hit points,
spell slots and ability score improvements. Nothing here touches storage or
global state; randomness is injected.

Example:
    >>> ability_modifier(15)
    2
    >>> spell_save_dc(level=5, spellcasting_ability_score=16)
    14
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Annotated, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from soloquest.core.constants import (
    MAX_CHARACTER_LEVEL,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
    PC_ABILITY_SCORE_CAP,
    SPELL_SLOT_LEVELS,
)
from soloquest.core.exceptions import ValidationError
from soloquest.models.character import AbilityScores, DnD5eCharacter, SpellSlots
from soloquest.models.enums import (
    SKILL_ABILITIES,
    Ability,
    Skill,
    SkillAction,
    SkillProficiencyLevel,
)


if TYPE_CHECKING:
    from soloquest.compendium.provider import ReferenceDataProvider


class RandomSource(Protocol):
    """Anything that can draw a uniform integer, e.g. ``random.Random``."""

    def randint(self, a: int, b: int) -> int: ...


_default_rng = random.Random()


# =============================================================================
# Clamping
# =============================================================================


def clamp_level(level: int) -> int:
    """Clamp a character level to 1-20."""
    return min(MAX_CHARACTER_LEVEL, max(MIN_CHARACTER_LEVEL, level))


def clamp_ability_score(score: int) -> int:
    """Clamp an ability score to the player-character range 1-20."""
    return min(PC_ABILITY_SCORE_CAP, max(MIN_ABILITY_SCORE, score))


# =============================================================================
# Modifiers and Proficiency
# =============================================================================


def ability_modifier(score: int) -> int:
    """Calculate the modifier for an ability score: ``(score - 10) // 2``.

    Applies to any integer; no clamping.

    Example:
        >>> ability_modifier(7)
        -2
    """
    return (score - 10) // 2


def proficiency_bonus(level: int) -> int:
    """Calculate the proficiency bonus for a character level.

    Levels outside 1-20 are clamped first, so level 0 yields +2 and level 25
    yields +6. Every proficiency-based value in this module goes through
    this one formula.

    Args:
        level: Character level.

    Returns:
        ``(level - 1) // 4 + 2``.
    """
    return (clamp_level(level) - 1) // 4 + 2


def format_modifier(value: int) -> str:
    """Format a modifier with an explicit sign (``+3``, ``-1``, ``+0``)."""
    return f"+{value}" if value >= 0 else str(value)


def saving_throw_modifier(ability_score: int, is_proficient: bool, level: int) -> int:
    """Calculate a saving throw modifier."""
    bonus = proficiency_bonus(level) if is_proficient else 0
    return ability_modifier(ability_score) + bonus


def skill_modifier(
    ability_score: int,
    proficiency_level: SkillProficiencyLevel | str,
    level: int,
) -> int:
    """Calculate a skill check modifier.

    Proficient skills add the proficiency bonus; expert skills add it twice.

    Args:
        ability_score: Score of the ability governing the skill.
        proficiency_level: ``none``, ``proficient`` or ``expert``.
        level: Character level.

    Returns:
        The total skill modifier.
    """
    multiplier = {
        SkillProficiencyLevel.NONE: 0,
        SkillProficiencyLevel.PROFICIENT: 1,
        SkillProficiencyLevel.EXPERT: 2,
    }[SkillProficiencyLevel(proficiency_level)]
    return ability_modifier(ability_score) + multiplier * proficiency_bonus(level)


def character_skill_modifiers(sheet: DnD5eCharacter) -> dict[Skill, int]:
    """Compute every skill modifier for a character sheet.

    Each skill uses its governing ability from ``SKILL_ABILITIES`` and the
    proficiency level recorded on the sheet.
    """
    return {
        skill: skill_modifier(
            sheet.ability_scores.get(ability), sheet.skill_level(skill), sheet.level
        )
        for skill, ability in SKILL_ABILITIES.items()
    }


def spell_save_dc(level: int, spellcasting_ability_score: int) -> int:
    """Calculate spell save DC: 8 + proficiency bonus + ability modifier."""
    return 8 + proficiency_bonus(level) + ability_modifier(spellcasting_ability_score)


def spell_attack_bonus(level: int, spellcasting_ability_score: int) -> int:
    """Calculate spell attack bonus: proficiency bonus + ability modifier."""
    return proficiency_bonus(level) + ability_modifier(spellcasting_ability_score)


# =============================================================================
# Hit Points
# =============================================================================


def level_one_hit_points(hit_die_size: int, constitution_score: int) -> int:
    """Max HP at level 1: the full hit die plus CON modifier, minimum 1."""
    return max(1, hit_die_size + ability_modifier(constitution_score))


def average_hp_gain(hit_die_size: int, con_modifier: int) -> int:
    """HP gained on level up when taking the fixed average, minimum 1.

    Example:
        >>> average_hp_gain(8, 0)
        5
    """
    return max(1, hit_die_size // 2 + 1 + con_modifier)


def roll_hp_gain(
    hit_die_size: int,
    con_modifier: int,
    rng: RandomSource | None = None,
) -> int:
    """Roll a hit die for HP on level up, minimum 1.

    Consumes exactly one draw from ``rng``.

    Args:
        hit_die_size: Number of faces on the class hit die.
        con_modifier: Constitution modifier added to the roll.
        rng: Random source; defaults to a module-level ``random.Random``.

    Returns:
        HP gained.
    """
    source = rng if rng is not None else _default_rng
    roll = source.randint(1, hit_die_size)
    return max(1, roll + con_modifier)


# =============================================================================
# Ability Score Improvements
# =============================================================================


class SingleASI(BaseModel):
    """+2 to one ability."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["single"] = "single"
    ability: Ability


class SplitASI(BaseModel):
    """+1 to each of two different abilities."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["split"] = "split"
    ability1: Ability
    ability2: Ability

    @model_validator(mode="after")
    def validate_distinct(self) -> SplitASI:
        if self.ability1 == self.ability2:
            raise ValidationError(
                "A split ability score improvement needs two different abilities",
                field_name="ability2",
                invalid_value=self.ability2.value,
            )
        return self


ASIChoice = Annotated[SingleASI | SplitASI, Field(discriminator="mode")]

_asi_adapter: TypeAdapter[SingleASI | SplitASI] = TypeAdapter(ASIChoice)


def parse_asi_choice(raw: object) -> SingleASI | SplitASI:
    """Parse a tagged ASI choice such as ``{"mode": "single", "ability": "strength"}``."""
    if isinstance(raw, SingleASI | SplitASI):
        return raw
    return _asi_adapter.validate_python(raw)


def apply_asi(scores: AbilityScores, choice: SingleASI | SplitASI | dict[str, str]) -> AbilityScores:
    """Apply an ability score improvement, capping each score at 20.

    The input is never mutated; a new score set is returned.

    Args:
        scores: Current ability scores.
        choice: Single (+2) or split (+1/+1) improvement.

    Returns:
        The improved ability scores.
    """
    parsed = parse_asi_choice(choice)
    if isinstance(parsed, SingleASI):
        increases = {parsed.ability: 2}
    else:
        increases = {parsed.ability1: 1, parsed.ability2: 1}
    return scores.model_copy(
        update={
            ability.value: min(PC_ABILITY_SCORE_CAP, scores.get(ability) + amount)
            for ability, amount in increases.items()
        }
    )


# =============================================================================
# Skill Proficiency Transitions
# =============================================================================


def transition_skill(
    current: SkillProficiencyLevel | str,
    action: SkillAction | str,
) -> SkillProficiencyLevel:
    """Apply a proficiency checkbox interaction to a skill.

    Expertise can only be granted to a skill that is already proficient;
    removing proficiency from an expert skill clears it entirely.

    Args:
        current: The skill's current proficiency level.
        action: Which checkbox was toggled.

    Returns:
        The new proficiency level.
    """
    level = SkillProficiencyLevel(current)
    if SkillAction(action) is SkillAction.TOGGLE_PROFICIENT:
        if level is SkillProficiencyLevel.NONE:
            return SkillProficiencyLevel.PROFICIENT
        return SkillProficiencyLevel.NONE

    if level is SkillProficiencyLevel.PROFICIENT:
        return SkillProficiencyLevel.EXPERT
    if level is SkillProficiencyLevel.EXPERT:
        return SkillProficiencyLevel.PROFICIENT
    return level


# =============================================================================
# Spell Slots (PHB p.113, p.107)
# =============================================================================

FULL_CASTER_SLOTS: dict[int, tuple[int, ...]] = {
    1: (2, 0, 0, 0, 0, 0, 0, 0, 0),
    2: (3, 0, 0, 0, 0, 0, 0, 0, 0),
    3: (4, 2, 0, 0, 0, 0, 0, 0, 0),
    4: (4, 3, 0, 0, 0, 0, 0, 0, 0),
    5: (4, 3, 2, 0, 0, 0, 0, 0, 0),
    6: (4, 3, 3, 0, 0, 0, 0, 0, 0),
    7: (4, 3, 3, 1, 0, 0, 0, 0, 0),
    8: (4, 3, 3, 2, 0, 0, 0, 0, 0),
    9: (4, 3, 3, 3, 1, 0, 0, 0, 0),
    10: (4, 3, 3, 3, 2, 0, 0, 0, 0),
    11: (4, 3, 3, 3, 2, 1, 0, 0, 0),
    12: (4, 3, 3, 3, 2, 1, 0, 0, 0),
    13: (4, 3, 3, 3, 2, 1, 1, 0, 0),
    14: (4, 3, 3, 3, 2, 1, 1, 0, 0),
    15: (4, 3, 3, 3, 2, 1, 1, 1, 0),
    16: (4, 3, 3, 3, 2, 1, 1, 1, 0),
    17: (4, 3, 3, 3, 2, 1, 1, 1, 1),
    18: (4, 3, 3, 3, 3, 1, 1, 1, 1),
    19: (4, 3, 3, 3, 3, 2, 1, 1, 1),
    20: (4, 3, 3, 3, 3, 2, 2, 1, 1),
}

# Half casters: Paladin, Ranger
HALF_CASTER_SLOTS: dict[int, tuple[int, ...]] = {
    1: (0, 0, 0, 0, 0),
    2: (2, 0, 0, 0, 0),
    3: (3, 0, 0, 0, 0),
    4: (3, 0, 0, 0, 0),
    5: (4, 2, 0, 0, 0),
    6: (4, 2, 0, 0, 0),
    7: (4, 3, 0, 0, 0),
    8: (4, 3, 0, 0, 0),
    9: (4, 3, 2, 0, 0),
    10: (4, 3, 2, 0, 0),
    11: (4, 3, 3, 0, 0),
    12: (4, 3, 3, 0, 0),
    13: (4, 3, 3, 1, 0),
    14: (4, 3, 3, 1, 0),
    15: (4, 3, 3, 2, 0),
    16: (4, 3, 3, 2, 0),
    17: (4, 3, 3, 3, 1),
    18: (4, 3, 3, 3, 1),
    19: (4, 3, 3, 3, 2),
    20: (4, 3, 3, 3, 2),
}

# Warlock pact magic: level -> (number of slots, slot level)
WARLOCK_PACT_SLOTS: dict[int, tuple[int, int]] = {
    1: (1, 1),
    2: (2, 1),
    3: (2, 2),
    4: (2, 2),
    5: (2, 3),
    6: (2, 3),
    7: (2, 4),
    8: (2, 4),
    9: (2, 5),
    10: (2, 5),
    11: (3, 5),
    12: (3, 5),
    13: (3, 5),
    14: (3, 5),
    15: (3, 5),
    16: (3, 5),
    17: (4, 5),
    18: (4, 5),
    19: (4, 5),
    20: (4, 5),
}

HALF_CASTER_CLASSES = frozenset({"paladin", "ranger"})
PACT_CASTER_CLASSES = frozenset({"warlock"})


def create_empty_spell_slots() -> SpellSlots:
    """Spell slots with zero current and max at every level."""
    return SpellSlots()


def default_spell_slots(
    class_name: str,
    level: int,
    provider: ReferenceDataProvider | None = None,
) -> SpellSlots:
    """Full spell slots for a class at a level.

    Non-casting (or unknown) classes get empty slots. Warlocks get their pact
    slots at the pact slot level. Levels are clamped to 1-20.

    Args:
        class_name: Class name as shown on the sheet.
        level: Character level.
        provider: Reference data used to decide whether the class casts.
            Defaults to the bundled compendium.

    Returns:
        Spell slots with ``current`` equal to ``max``.
    """
    if provider is None:
        from soloquest.compendium.provider import get_compendium

        provider = get_compendium()

    found = provider.get_class_by_name(class_name)
    if found is None or found.spellcasting is None:
        return create_empty_spell_slots()

    clamped = clamp_level(level)
    lower = class_name.strip().lower()
    if lower in PACT_CASTER_CLASSES:
        count, slot_level = WARLOCK_PACT_SLOTS[clamped]
        maxima = [0] * SPELL_SLOT_LEVELS
        maxima[slot_level - 1] = count
        return SpellSlots.from_maxima(maxima)
    if lower in HALF_CASTER_CLASSES:
        return SpellSlots.from_maxima(HALF_CASTER_SLOTS[clamped])
    return SpellSlots.from_maxima(FULL_CASTER_SLOTS[clamped])


def highest_slot_level(slots: SpellSlots) -> int:
    """Highest spell level with at least one slot, or 0 if none."""
    for level in range(SPELL_SLOT_LEVELS, 0, -1):
        if slots.slot(level).max > 0:
            return level
    return 0


__all__ = [
    "RandomSource",
    "SKILL_ABILITIES",
    "clamp_level",
    "clamp_ability_score",
    "ability_modifier",
    "proficiency_bonus",
    "format_modifier",
    "saving_throw_modifier",
    "skill_modifier",
    "character_skill_modifiers",
    "spell_save_dc",
    "spell_attack_bonus",
    "level_one_hit_points",
    "average_hp_gain",
    "roll_hp_gain",
    "SingleASI",
    "SplitASI",
    "ASIChoice",
    "parse_asi_choice",
    "apply_asi",
    "transition_skill",
    "FULL_CASTER_SLOTS",
    "HALF_CASTER_SLOTS",
    "WARLOCK_PACT_SLOTS",
    "create_empty_spell_slots",
    "default_spell_slots",
    "highest_slot_level",
]
