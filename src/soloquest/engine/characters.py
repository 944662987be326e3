"""Character assembly and level up.

Turns an in-progress character draft into a complete ``dnd5e``
:class:`CharacterRecord` using rules outputs (starting HP, hit dice, default
spell slots, class saving throws), and commits level ups. Records are never
mutated; every operation returns a new record (full-record replacement).

Example:
    >>> record = create_character_record(
    ...     {"name": "Lia", "race": "Elf", "class": "Wizard"},
    ...     get_compendium(),
    ... )
    >>> record.data.hit_points.max
    6
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from pydantic import Field

from soloquest.compendium.provider import (
    ClassFeature,
    ReferenceDataProvider,
    class_saving_throws,
)
from soloquest.core.config import get_settings
from soloquest.core.exceptions import ProgressionError, ValidationError
from soloquest.core.logging import get_logger
from soloquest.engine.progression import (
    MAX_LEVEL,
    hit_dice_max,
    is_asi_level,
    new_features_at_level,
    new_max_hp,
)
from soloquest.engine.rules import (
    RandomSource,
    SingleASI,
    SplitASI,
    apply_asi,
    average_hp_gain,
    clamp_level,
    default_spell_slots,
    level_one_hit_points,
    parse_asi_choice,
)
from soloquest.models.base import RecordModel, isoformat_utc
from soloquest.models.character import (
    AbilityScores,
    CharacterRecord,
    DnD5eCharacter,
    HitDice,
    HitPoints,
    InventoryItem,
    PreparedSpell,
    SlotState,
    SpellSlots,
)
from soloquest.models.enums import Ability, GameSystem, SkillProficiencyLevel


logger = get_logger(__name__)


class CharacterDraft(RecordModel):
    """A character being built in the creation wizard.

    Only ``name``, ``race`` and ``class`` are required to assemble a record;
    everything else is derived when missing.
    """

    name: str = ""
    race: str = ""
    class_name: str = Field(default="", alias="class")
    level: int | None = None
    ability_scores: AbilityScores | None = None
    alignment: str | None = None
    background: str | None = None
    experience_points: int = Field(default=0, ge=0)
    skills: dict[str, SkillProficiencyLevel] | None = None
    saving_throws: dict[str, bool] | None = None
    spell_slots: SpellSlots | None = None
    prepared_spells: list[PreparedSpell] | None = None
    inventory: list[InventoryItem] | None = None


@dataclass(frozen=True)
class LevelUpResult:
    """Outcome of committing a level up."""

    record: CharacterRecord
    new_level: int
    hp_gained: int
    new_max_hp: int
    new_features: list[ClassFeature] = field(default_factory=list)
    asi_applied: bool = False


def _class_saving_throws(class_name: str, provider: ReferenceDataProvider) -> dict[str, bool]:
    found = provider.get_class_by_name(class_name)
    return {ability.value: True for ability in class_saving_throws(found)}


def _spellcasting_ability(class_name: str, provider: ReferenceDataProvider) -> Ability | None:
    found = provider.get_class_by_name(class_name)
    if found is None or found.spellcasting is None:
        return None
    return found.spellcasting.ability


def create_character_record(
    draft: CharacterDraft | dict[str, Any],
    provider: ReferenceDataProvider,
    *,
    now: datetime | None = None,
    id_factory: Callable[[], str] | None = None,
) -> CharacterRecord:
    """Assemble a complete D&D 5E character record from a draft.

    Ability scores are clamped to 1-20. Max HP is the level 1 value (full hit
    die plus CON modifier) plus the fixed average for every level above 1.
    Saving throws default to the class proficiencies when the draft has none.

    Args:
        draft: The draft, as a model or a camelCase dict.
        provider: Reference data for class and species lookups.
        now: Creation time; defaults to the current UTC time.
        id_factory: Generates the record id; defaults to ``uuid4``.

    Returns:
        A new character record.

    Raises:
        ValidationError: If name, race or class is missing.
    """
    if not isinstance(draft, CharacterDraft):
        draft = CharacterDraft.model_validate(draft)

    for field_name, value in (("name", draft.name), ("race", draft.race), ("class", draft.class_name)):
        if not value.strip():
            raise ValidationError(
                "Please complete all required fields",
                field_name=field_name,
                invalid_value=value,
            )

    make_id = id_factory or (lambda: str(uuid4()))
    level = clamp_level(draft.level or 1)
    scores = (draft.ability_scores or AbilityScores()).clamped()
    hit_die = provider.get_class_hit_die(draft.class_name)
    con_modifier = scores.modifier(Ability.CON)
    max_hp = level_one_hit_points(hit_die, scores.constitution)
    max_hp += (level - 1) * average_hp_gain(hit_die, con_modifier)

    selected_class = provider.get_class_by_name(draft.class_name)
    selected_race = provider.get_race_by_name(draft.race)
    saving_throws = draft.saving_throws or _class_saving_throws(draft.class_name, provider)

    record_id = make_id()
    timestamp = isoformat_utc(now)
    sheet = DnD5eCharacter(
        id=record_id,
        class_id=selected_class.id if selected_class else None,
        race_id=selected_race.id if selected_race else None,
        name=draft.name,
        race=draft.race,
        class_name=draft.class_name,
        level=level,
        ability_scores=scores,
        alignment=draft.alignment,
        background=draft.background,
        experience_points=draft.experience_points,
        hit_points=HitPoints(current=max_hp, max=max_hp),
        hit_dice=HitDice(current=hit_dice_max(level), max=hit_dice_max(level)),
        skills=draft.skills,
        saving_throws=saving_throws,
        spell_slots=draft.spell_slots or default_spell_slots(draft.class_name, level, provider),
        spellcasting_ability=_spellcasting_ability(draft.class_name, provider),
        prepared_spells=list(draft.prepared_spells or []),
        inventory=list(draft.inventory or []),
    )

    logger.debug(
        "Character assembled",
        character_id=record_id,
        character_class=draft.class_name,
        level=level,
        max_hp=max_hp,
    )
    return CharacterRecord(
        id=record_id,
        system=GameSystem.DND5E,
        created_at=timestamp,
        updated_at=timestamp,
        data=sheet,
    )


def touch(record: CharacterRecord, *, now: datetime | None = None) -> CharacterRecord:
    """Return a copy of ``record`` with ``updatedAt`` refreshed."""
    return record.model_copy(update={"updated_at": isoformat_utc(now)})


def _refresh_slots(previous: SpellSlots | None, refreshed: SpellSlots) -> SpellSlots:
    """Raise slot maxima to the new level while keeping spent slots spent."""
    if previous is None:
        return refreshed
    levels: dict[str, SlotState] = {}
    for index, new_max in enumerate(refreshed.maxima(), start=1):
        old = previous.slot(index)
        current = old.current + max(0, new_max - old.max)
        levels[f"level{index}"] = SlotState(current=max(0, min(current, new_max)), max=new_max)
    return SpellSlots(**levels)


def level_up_character(
    record: CharacterRecord,
    provider: ReferenceDataProvider,
    *,
    use_average: bool | None = None,
    asi: SingleASI | SplitASI | dict[str, str] | None = None,
    rng: RandomSource | None = None,
    now: datetime | None = None,
) -> LevelUpResult:
    """Commit a single level up.

    HP gained uses the class hit die and the pre-improvement CON modifier,
    and is added to both current and max HP. One hit die is added to the
    pool. Spell slot maxima follow the new level.

    Args:
        record: The character to level.
        provider: Reference data for class features and hit die.
        use_average: Take the fixed average HP instead of rolling. Defaults
            to the `game.use_average_hp` setting.
        asi: Ability score improvement, only allowed at ASI levels.
        rng: Random source for the HP roll.
        now: Time stamped into ``updatedAt``.

    Returns:
        The new record and a summary of what changed.

    Raises:
        ProgressionError: If the character is already level 20, or an ASI is
            given at a level that does not grant one.
    """
    if use_average is None:
        use_average = get_settings().game.use_average_hp

    sheet = record.data
    if sheet.level >= MAX_LEVEL:
        raise ProgressionError(
            f"{sheet.name} is already at the maximum level",
            current_level=sheet.level,
            target_level=sheet.level + 1,
        )

    target_level = sheet.level + 1
    selected_class = provider.get_class_by_name(sheet.class_name)
    features = list(selected_class.features) if selected_class else []

    scores = sheet.ability_scores
    asi_applied = False
    if asi is not None:
        if not is_asi_level(features, target_level):
            raise ProgressionError(
                f"Level {target_level} {sheet.class_name} does not grant an Ability Score Improvement",
                current_level=sheet.level,
                target_level=target_level,
            )
        scores = apply_asi(scores, parse_asi_choice(asi))
        asi_applied = True

    gain = new_max_hp(
        sheet.hit_points.max,
        provider.get_class_hit_die(sheet.class_name),
        sheet.ability_scores.modifier(Ability.CON),
        use_average,
        rng,
    )

    hit_dice = sheet.hit_dice or HitDice(current=sheet.level, max=sheet.level)
    new_pool = hit_dice_max(target_level)
    spell_slots = _refresh_slots(
        sheet.spell_slots, default_spell_slots(sheet.class_name, target_level, provider)
    )

    updated = record.replace_data(
        level=target_level,
        ability_scores=scores,
        hit_points=HitPoints(
            current=sheet.hit_points.current + gain.hp_gained, max=gain.new_max_hp
        ),
        hit_dice=HitDice(current=min(new_pool, hit_dice.current + 1), max=new_pool),
        spell_slots=spell_slots,
    )
    updated = touch(updated, now=now)

    logger.info(
        "Character leveled up",
        character_id=record.id,
        new_level=target_level,
        hp_gained=gain.hp_gained,
        asi_applied=asi_applied,
    )
    return LevelUpResult(
        record=updated,
        new_level=target_level,
        hp_gained=gain.hp_gained,
        new_max_hp=gain.new_max_hp,
        new_features=new_features_at_level(features, target_level),
        asi_applied=asi_applied,
    )


__all__ = [
    "CharacterDraft",
    "LevelUpResult",
    "create_character_record",
    "touch",
    "level_up_character",
]
