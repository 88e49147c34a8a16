"""Profiles - хранение именованных конфигураций калькулятора.

Файловое хранилище: один JSON документ на профиль,
контракт contracts/schema/saved_profile.json.
"""

from .store import (
    InvalidProfileNameError,
    ProfileCorruptedError,
    ProfileNotFoundError,
    ProfileStore,
    ProfileStoreConfig,
    ProfileStoreError,
)

__all__ = [
    "ProfileStore",
    "ProfileStoreConfig",
    "ProfileStoreError",
    "ProfileNotFoundError",
    "InvalidProfileNameError",
    "ProfileCorruptedError",
]
