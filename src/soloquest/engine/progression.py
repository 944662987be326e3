"""D&D 5E level progression.

XP thresholds (PHB p.15), feature-at-level lookup, ASI level detection,
hit dice pool size and max HP on level up. The engine only answers "can I
level up" and "what changes at this level"; committing a level up is done by
:func:`soloquest.engine.characters.level_up_character`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from soloquest.core.constants import ASI_FEATURE_NAME, MAX_CHARACTER_LEVEL
from soloquest.engine.rules import RandomSource, average_hp_gain, clamp_level, roll_hp_gain


MAX_LEVEL = MAX_CHARACTER_LEVEL

# =============================================================================
# XP Thresholds (PHB p.15)
# =============================================================================

# Index 0 is level 1.
XP_THRESHOLDS: tuple[int, ...] = (
    0,
    300,
    900,
    2700,
    6500,
    14000,
    23000,
    34000,
    48000,
    64000,
    85000,
    100000,
    120000,
    140000,
    165000,
    195000,
    225000,
    265000,
    305000,
    355000,
)


class Feature(Protocol):
    """Anything with a feature name and the level it is gained at."""

    @property
    def name(self) -> str: ...

    @property
    def level(self) -> int: ...


FeatureT = TypeVar("FeatureT", bound=Feature)


@dataclass(frozen=True)
class XPProgress:
    """Progress through the current level, for progress bars.

    Attributes:
        level: Level implied by the XP total.
        current: XP earned since reaching ``level``.
        total: XP span of ``level``.
        percentage: ``current / total`` as an integer percent, 0-100.
        xp_to_next: XP still needed for the next level (0 at level 20).
    """

    level: int
    current: int
    total: int
    percentage: int
    xp_to_next: int

    def to_dict(self) -> dict[str, int]:
        """Serialize with the camelCase keys used by the sheet."""
        return {
            "level": self.level,
            "current": self.current,
            "total": self.total,
            "percentage": self.percentage,
            "xpToNext": self.xp_to_next,
        }


@dataclass(frozen=True)
class HPGain:
    """Result of adding one level's worth of hit points."""

    new_max_hp: int
    hp_gained: int


# =============================================================================
# XP
# =============================================================================


def level_from_xp(xp: int) -> int:
    """Determine character level from total XP.

    Negative XP maps to level 1.

    Example:
        >>> level_from_xp(899)
        2
    """
    for level in range(MAX_LEVEL, 0, -1):
        if xp >= XP_THRESHOLDS[level - 1]:
            return level
    return 1


def xp_for_level(level: int) -> int:
    """Get the XP needed to reach a level (clamped to 1-20)."""
    return XP_THRESHOLDS[clamp_level(level) - 1]


def xp_progress(xp: int) -> XPProgress:
    """Get progress through the level implied by ``xp``.

    At level 20 the bar is full: ``current`` and ``total`` both equal ``xp``.

    Args:
        xp: Total experience points.

    Returns:
        The derived progress view.
    """
    level = level_from_xp(xp)
    if level >= MAX_LEVEL:
        return XPProgress(level=level, current=xp, total=xp, percentage=100, xp_to_next=0)

    level_start = XP_THRESHOLDS[level - 1]
    level_end = XP_THRESHOLDS[level]
    current = xp - level_start
    total = level_end - level_start
    percentage = max(0, min(100, current * 100 // total))
    return XPProgress(
        level=level,
        current=current,
        total=total,
        percentage=percentage,
        xp_to_next=max(0, level_end - xp),
    )


def can_level_up(current_level: int, xp: int) -> bool:
    """Check whether ``xp`` reaches the threshold for ``current_level + 1``."""
    if current_level >= MAX_LEVEL:
        return False
    return xp >= XP_THRESHOLDS[max(current_level, 1)]


def hit_dice_max(level: int) -> int:
    """Size of the hit dice pool: one die per level, at least one."""
    return max(1, level)


# =============================================================================
# Features
# =============================================================================


def asi_levels_from_features(features: Iterable[Feature]) -> list[int]:
    """Collect the levels that grant an Ability Score Improvement.

    Args:
        features: A class's feature list.

    Returns:
        Unique ASI levels in ascending order.
    """
    return sorted({feature.level for feature in features if feature.name == ASI_FEATURE_NAME})


def is_asi_level(features: Iterable[Feature], level: int) -> bool:
    """Check whether reaching ``level`` grants an Ability Score Improvement."""
    return any(
        feature.name == ASI_FEATURE_NAME and feature.level == level for feature in features
    )


def new_features_at_level(features: Iterable[FeatureT], level: int) -> list[FeatureT]:
    """Get the features gained at exactly ``level``, in source order."""
    return [feature for feature in features if feature.level == level]


# =============================================================================
# Hit Points
# =============================================================================


def new_max_hp(
    current_max_hp: int,
    hit_die_size: int,
    con_modifier: int,
    use_average: bool,
    rng: RandomSource | None = None,
) -> HPGain:
    """Calculate max HP after gaining a level.

    Args:
        current_max_hp: Max HP before the level up.
        hit_die_size: The class hit die.
        con_modifier: Constitution modifier.
        use_average: Take the fixed average instead of rolling.
        rng: Random source for the roll; ignored when ``use_average``.

    Returns:
        The new max HP and the amount gained.
    """
    if use_average:
        gained = average_hp_gain(hit_die_size, con_modifier)
    else:
        gained = roll_hp_gain(hit_die_size, con_modifier, rng)
    return HPGain(new_max_hp=current_max_hp + gained, hp_gained=gained)


__all__ = [
    "MAX_LEVEL",
    "XP_THRESHOLDS",
    "Feature",
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
]
