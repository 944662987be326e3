"""Application-wide constants for SoloQuest.

D&D 5E rules limits and storage naming shared by the engine and the
persistence layer.
"""

from __future__ import annotations

# =============================================================================
# D&D 5E Rules Constants
# =============================================================================

PC_ABILITY_SCORE_CAP = 20
"""Maximum ability score for player characters (RAW D&D 5E)."""

MIN_ABILITY_SCORE = 1
"""Minimum ability score."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

DEFAULT_HIT_DIE = 8
"""Hit die used when a class cannot be found in the compendium."""

ASI_FEATURE_NAME = "Ability Score Improvement"
"""Class feature name that marks an ability score improvement level."""

SPELL_SLOT_LEVELS = 9
"""Number of spell slot levels (1-9)."""

MAX_DEATH_SAVES = 3
"""Maximum death saving throws (3 successes = stable, 3 failures = dead)."""

MAX_EXHAUSTION_LEVEL = 6
"""Exhaustion level at which a creature dies."""

# =============================================================================
# Storage
# =============================================================================

DEFAULT_KEY_PREFIX = "soloquest_"
"""Prefix applied to every collection key in the key-value store."""

CORRUPT_BACKUP_INFIX = "_corrupt_"
"""Separator between a collection key and its corruption timestamp."""


__all__ = [
    "PC_ABILITY_SCORE_CAP",
    "MIN_ABILITY_SCORE",
    "MAX_CHARACTER_LEVEL",
    "MIN_CHARACTER_LEVEL",
    "DEFAULT_HIT_DIE",
    "ASI_FEATURE_NAME",
    "SPELL_SLOT_LEVELS",
    "MAX_DEATH_SAVES",
    "MAX_EXHAUSTION_LEVEL",
    "DEFAULT_KEY_PREFIX",
    "CORRUPT_BACKUP_INFIX",
]
