"""SoloQuest - D&D 5E character rules engine and record storage.

Python owns the rules: modifiers, proficiency, spell slots, hit points and
level progression are computed here, and persisted collections are guarded
against corrupt or outdated data on every read.

Example:
    >>> from soloquest import create_character_record, get_compendium, get_record_storage
    >>>
    >>> hero = create_character_record(
    ...     {"name": "Thorin", "race": "Dwarf", "class": "Fighter", "level": 3},
    ...     get_compendium(),
    ... )
    >>> storage = get_record_storage()
    >>> storage.write_characters([*storage.read_characters(), hero])

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 record models and enums.
    compendium: Reference data for classes, species and spells.
    engine: Rules calculator, progression and character assembly.
    storage: Key-value backends, validators, migrations, record storage.
"""

from __future__ import annotations

# Core
from soloquest.core.config import Settings, get_settings
from soloquest.core.exceptions import SoloQuestError
from soloquest.core.logging import configure_logging, get_logger

# Reference data
from soloquest.compendium import Compendium, get_compendium

# Models
from soloquest.models import CharacterRecord, DnD5eCharacter, JournalEntry, NPC

# Engine
from soloquest.engine import (
    create_character_record,
    level_up_character,
    xp_progress,
)

# Storage
from soloquest.storage import MemoryStore, RecordStorage, SQLiteStore, get_record_storage


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "SoloQuestError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Reference data
    "Compendium",
    "get_compendium",
    # Models
    "CharacterRecord",
    "DnD5eCharacter",
    "NPC",
    "JournalEntry",
    # Engine
    "create_character_record",
    "level_up_character",
    "xp_progress",
    # Storage
    "MemoryStore",
    "SQLiteStore",
    "RecordStorage",
    "get_record_storage",
]
