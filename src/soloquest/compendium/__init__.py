"""Compendium reference data: classes, species and spells.

The default :class:`Compendium` is built from the bundled SRD data in
:mod:`soloquest.compendium.data`.
"""

from soloquest.compendium.provider import (
    ClassFeature,
    ClassSpellcasting,
    Compendium,
    CompendiumClass,
    MaterialComponent,
    Race,
    RaceTrait,
    ReferenceDataProvider,
    SkillChoices,
    Spell,
    SpellComponents,
    format_spell_components,
    get_compendium,
    normalize_name,
)

__all__ = [
    "ClassFeature",
    "ClassSpellcasting",
    "Compendium",
    "CompendiumClass",
    "MaterialComponent",
    "Race",
    "RaceTrait",
    "ReferenceDataProvider",
    "SkillChoices",
    "Spell",
    "SpellComponents",
    "format_spell_components",
    "get_compendium",
    "normalize_name",
]
