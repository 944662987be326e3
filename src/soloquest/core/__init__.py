"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        SoloQuestError: Base exception for all application errors.
        ConfigurationError, ValidationError, RulesError, ProgressionError,
        ReferenceDataError, StorageError, CorruptDataError.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
        log_context: Bind logging context for one block.
"""

from __future__ import annotations

from soloquest.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from soloquest.core.exceptions import (
    ConfigurationError,
    CorruptDataError,
    ProgressionError,
    ReferenceDataError,
    RulesError,
    SoloQuestError,
    StorageError,
    ValidationError,
)
from soloquest.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    log_context,
)


__all__ = [
    # Exceptions
    "SoloQuestError",
    "ConfigurationError",
    "ValidationError",
    "RulesError",
    "ProgressionError",
    "ReferenceDataError",
    "StorageError",
    "CorruptDataError",
    # Configuration
    "Settings",
    "StorageSettings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "log_context",
]
