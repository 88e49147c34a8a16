"""
Contract Validation Module

Модуль для валидации JSON документов сохранённых профилей.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    SAVED_PROFILE_SCHEMA,
    ContractValidator,
    SavedProfileValidator,
    SchemaLoader,
    saved_profile_validator,
    validate_saved_profile,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    "SAVED_PROFILE_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SavedProfileValidator",
    # Functions
    "saved_profile_validator",
    "validate_saved_profile",
]
