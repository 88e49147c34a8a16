"""
Domain models and value objects.

Contains the persisted calculator profile record.
"""

from src.core.domain.profile import PROFILE_SCHEMA_VERSION, SavedProfile

__all__ = [
    "PROFILE_SCHEMA_VERSION",
    "SavedProfile",
]
