"""Read-only reference data provider.

The rules engine and the storage migrations only need a handful of lookups
(class by name, race by name, class hit die, all spells). Those are captured
by the :class:`ReferenceDataProvider` protocol so tests and callers can swap
in their own data; :class:`Compendium` is the default implementation backed
by the bundled SRD data.

Example:
    >>> compendium = get_compendium()
    >>> compendium.get_class_hit_die("wizard")
    6
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import Any, Literal, Protocol, runtime_checkable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from soloquest.compendium import data
from soloquest.core.constants import DEFAULT_HIT_DIE
from soloquest.core.exceptions import ReferenceDataError
from soloquest.models.character import PreparedSpell
from soloquest.models.enums import Ability, SpellSchool


# =============================================================================
# Reference Models
# =============================================================================


class ClassFeature(BaseModel):
    """A feature gained by a class at a given level."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=20)
    name: str
    description: str = ""


class SkillChoices(BaseModel):
    """How many skills a class picks, and from which list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    choose: int = 0
    options: list[str] = Field(default_factory=list, alias="from")


class ClassSpellcasting(BaseModel):
    """Spellcasting details for a casting class."""

    model_config = ConfigDict(frozen=True)

    ability: Ability
    ritual_casting: bool = False
    spellcasting_focus: str | None = None


class CompendiumClass(BaseModel):
    """A character class from the compendium."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    hit_die: int = Field(ge=4, le=12)
    primary_ability: list[str] = Field(default_factory=list)
    saving_throws: list[str] = Field(default_factory=list)
    skill_choices: SkillChoices = Field(default_factory=SkillChoices)
    spellcasting: ClassSpellcasting | None = None
    features: list[ClassFeature] = Field(default_factory=list)
    subclasses: list[str] = Field(default_factory=list)


class RaceTrait(BaseModel):
    """A species trait."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class Race(BaseModel):
    """A playable species."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    size: Literal["Small", "Medium"] = "Medium"
    speed: int = 30
    creature_type: str = "Humanoid"
    traits: list[RaceTrait] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)


class MaterialComponent(BaseModel):
    """A material component with a described item."""

    model_config = ConfigDict(frozen=True)

    required: bool = True
    components: str = ""


class SpellComponents(BaseModel):
    """Verbal, somatic and material components of a spell."""

    model_config = ConfigDict(frozen=True)

    verbal: bool = False
    somatic: bool = False
    material: bool | MaterialComponent = False


class Spell(BaseModel):
    """A spell from the compendium."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    level: int = Field(ge=0, le=9)
    school: SpellSchool
    casting_time: str
    range: str
    components: SpellComponents
    duration: str
    concentration: bool = False
    ritual: bool = False
    description: str = ""
    higher_levels: str | None = None
    classes: list[str] = Field(default_factory=list)


# =============================================================================
# Provider Protocol
# =============================================================================


@runtime_checkable
class ReferenceDataProvider(Protocol):
    """Lookups the rules engine and storage migrations depend on."""

    def get_class_by_name(self, name: str) -> CompendiumClass | None: ...

    def get_race_by_name(self, name: str) -> Race | None: ...

    def get_class_hit_die(self, name: str) -> int: ...

    def get_all_spells(self) -> list[Spell]: ...


def normalize_name(value: str) -> str:
    """Normalize a name for lookups: trimmed and lower-cased."""
    return value.strip().lower()


def class_saving_throws(found: CompendiumClass | None) -> list[Ability]:
    """Abilities a class is proficient in for saving throws; unknown labels are skipped."""
    if found is None:
        return []
    abilities: list[Ability] = []
    for label in found.saving_throws:
        try:
            abilities.append(Ability(normalize_name(label)))
        except ValueError:
            continue
    return abilities


def build_spell_index(spells: Iterable[Spell]) -> dict[str, str]:
    """Map normalized spell names to spell ids."""
    return {normalize_name(spell.name): spell.id for spell in spells}


def format_spell_components(components: SpellComponents) -> str:
    """Format components for a character sheet, e.g. ``V, S, M (bat guano)``."""
    parts: list[str] = []
    if components.verbal:
        parts.append("V")
    if components.somatic:
        parts.append("S")
    material = components.material
    if isinstance(material, MaterialComponent):
        parts.append(f"M ({material.components})" if material.components else "M")
    elif material:
        parts.append("M")
    return ", ".join(parts)


# =============================================================================
# Compendium
# =============================================================================


class Compendium:
    """In-memory compendium of classes, species and spells.

    Names are matched case-insensitively after trimming whitespace.

    Args:
        classes: Raw class definitions. Defaults to the bundled data.
        races: Raw species definitions. Defaults to the bundled data.
        spells: Raw spell definitions. Defaults to the bundled data.
    """

    def __init__(
        self,
        *,
        classes: list[dict[str, Any]] | None = None,
        races: list[dict[str, Any]] | None = None,
        spells: list[dict[str, Any]] | None = None,
    ) -> None:
        self._classes = [
            CompendiumClass.model_validate(entry)
            for entry in (data.CLASSES if classes is None else classes)
        ]
        self._races = [
            Race.model_validate(entry) for entry in (data.RACES if races is None else races)
        ]
        self._spells = [
            Spell.model_validate(entry) for entry in (data.SPELLS if spells is None else spells)
        ]
        self._classes_by_name = {normalize_name(entry.name): entry for entry in self._classes}
        self._races_by_name = {normalize_name(entry.name): entry for entry in self._races}

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_all_classes(self) -> list[CompendiumClass]:
        return list(self._classes)

    def get_all_races(self) -> list[Race]:
        return list(self._races)

    def get_all_spells(self) -> list[Spell]:
        return list(self._spells)

    def get_class_by_name(self, name: str) -> CompendiumClass | None:
        return self._classes_by_name.get(normalize_name(name))

    def get_race_by_name(self, name: str) -> Race | None:
        return self._races_by_name.get(normalize_name(name))

    def require_class(self, name: str) -> CompendiumClass:
        """Look up a class that must exist.

        Raises:
            ReferenceDataError: If no class has this name.
        """
        found = self.get_class_by_name(name)
        if found is None:
            raise ReferenceDataError(f"Unknown class: {name}", name=name)
        return found

    # -------------------------------------------------------------------------
    # Class Helpers
    # -------------------------------------------------------------------------

    def get_class_hit_die(self, name: str) -> int:
        """Get a class's hit die size, defaulting to d8 for unknown classes."""
        found = self.get_class_by_name(name)
        return found.hit_die if found else DEFAULT_HIT_DIE

    def get_class_spellcasting_ability(self, name: str) -> Ability | None:
        found = self.get_class_by_name(name)
        if found is None or found.spellcasting is None:
            return None
        return found.spellcasting.ability

    def is_spellcasting_class(self, name: str) -> bool:
        return self.get_class_spellcasting_ability(name) is not None

    def get_class_saving_throws(self, name: str) -> list[Ability]:
        """Get the abilities a class is proficient in for saving throws."""
        return class_saving_throws(self.get_class_by_name(name))

    def get_class_features(self, name: str) -> list[ClassFeature]:
        found = self.get_class_by_name(name)
        return list(found.features) if found else []

    def get_class_skill_choices(self, name: str) -> SkillChoices:
        found = self.get_class_by_name(name)
        return found.skill_choices if found else SkillChoices()

    # -------------------------------------------------------------------------
    # Spell Helpers
    # -------------------------------------------------------------------------

    def get_class_spells(self, name: str) -> list[Spell]:
        """Get the spells available to a class, ordered by level then name."""
        normalized = normalize_name(name)
        matching = [
            spell
            for spell in self._spells
            if any(normalize_name(entry) == normalized for entry in spell.classes)
        ]
        return sorted(matching, key=lambda spell: (spell.level, spell.name))

    def spell_index(self) -> dict[str, str]:
        """Map normalized spell names to compendium spell ids."""
        return build_spell_index(self._spells)

    @staticmethod
    def to_prepared_spell(spell: Spell, spell_id: str | None = None) -> PreparedSpell:
        """Copy a compendium spell onto a character sheet."""
        return PreparedSpell(
            id=spell_id or str(uuid4()),
            source_spell_id=spell.id,
            name=spell.name,
            level=spell.level,
            school=spell.school.value,
            casting_time=spell.casting_time,
            range=spell.range,
            components=format_spell_components(spell.components),
            duration=spell.duration,
            description=spell.description,
        )


@lru_cache(maxsize=1)
def get_compendium() -> Compendium:
    """Get the shared compendium built from the bundled data."""
    return Compendium()


__all__ = [
    "ClassFeature",
    "SkillChoices",
    "ClassSpellcasting",
    "CompendiumClass",
    "RaceTrait",
    "Race",
    "MaterialComponent",
    "SpellComponents",
    "Spell",
    "ReferenceDataProvider",
    "Compendium",
    "get_compendium",
    "normalize_name",
    "class_saving_throws",
    "build_spell_index",
    "format_spell_components",
]
