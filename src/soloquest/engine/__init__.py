"""Rules engine for D&D 5E characters.

Submodules:
    rules: Modifiers, proficiency, spell DCs, HP, spell slots, ASIs
    progression: XP thresholds, level features, ASI levels, HP on level up
    characters: Character assembly from drafts and level up commits

Example:
    >>> from soloquest.engine import xp_progress, level_up_character
    >>>
    >>> xp_progress(450).percentage
    25
    >>> result = level_up_character(record, get_compendium(), use_average=True)
    >>> result.hp_gained
    5
"""

from __future__ import annotations

# =============================================================================
# Rules Calculator
# =============================================================================
from soloquest.engine.rules import (
    FULL_CASTER_SLOTS,
    HALF_CASTER_SLOTS,
    WARLOCK_PACT_SLOTS,
    ASIChoice,
    RandomSource,
    SingleASI,
    SplitASI,
    ability_modifier,
    apply_asi,
    average_hp_gain,
    character_skill_modifiers,
    clamp_ability_score,
    clamp_level,
    create_empty_spell_slots,
    default_spell_slots,
    format_modifier,
    highest_slot_level,
    level_one_hit_points,
    parse_asi_choice,
    proficiency_bonus,
    roll_hp_gain,
    saving_throw_modifier,
    skill_modifier,
    spell_attack_bonus,
    spell_save_dc,
    transition_skill,
)

# =============================================================================
# Progression
# =============================================================================
from soloquest.engine.progression import (
    MAX_LEVEL,
    XP_THRESHOLDS,
    HPGain,
    XPProgress,
    asi_levels_from_features,
    can_level_up,
    hit_dice_max,
    is_asi_level,
    level_from_xp,
    new_features_at_level,
    new_max_hp,
    xp_for_level,
    xp_progress,
)

# =============================================================================
# Character Assembly
# =============================================================================
from soloquest.engine.characters import (
    CharacterDraft,
    LevelUpResult,
    create_character_record,
    level_up_character,
    touch,
)


__all__ = [
    # Rules
    "RandomSource",
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
    "clamp_level",
    "clamp_ability_score",
    "FULL_CASTER_SLOTS",
    "HALF_CASTER_SLOTS",
    "WARLOCK_PACT_SLOTS",
    "create_empty_spell_slots",
    "default_spell_slots",
    "highest_slot_level",
    # Progression
    "MAX_LEVEL",
    "XP_THRESHOLDS",
    "XPProgress",
    "HPGain",
    "level_from_xp",
    "xp_for_level",
    "xp_progress",
    "can_level_up",
    "hit_dice_max",
    "asi_levels_from_features",
    "is_asi_level",
    "new_features_at_level",
    "new_max_hp",
    # Characters
    "CharacterDraft",
    "LevelUpResult",
    "create_character_record",
    "touch",
    "level_up_character",
]
