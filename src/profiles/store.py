"""Profile Store - именованные конфигурации калькулятора на диске.

Один профиль = один JSON документ <directory>/<name>.json (контракт
saved_profile.json). Значения полей хранятся сырым текстом и разбираются
кодеком (src.core.codec) уже после загрузки.

Операции:
- list_profiles: отсортированные имена профилей
- save_profile: создать или перезаписать профиль
- load_profile / load_record: прочитать профиль
- delete_profile: удалить профиль

Файлы старого формата (голый объект "поле": "текст" без schema_version)
читаются как inputs; время сохранения берётся из mtime файла. Пишется
всегда текущий формат.

Блокировок нет: при конкурентной записи побеждает последний writer.
"""

import json
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jsonschema import ValidationError
from pydantic import ValidationError as ModelValidationError

from src.core.contracts import validate_saved_profile
from src.core.domain.profile import SavedProfile

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ProfileStoreError(Exception):
    """Базовая ошибка хранилища профилей."""


class ProfileNotFoundError(ProfileStoreError, LookupError):
    """Профиль с таким именем не существует."""

    def __init__(self, name: str):
        super().__init__(f"Profile '{name}' not found")
        self.name = name


class InvalidProfileNameError(ProfileStoreError, ValueError):
    """Имя профиля пустое или не может быть именем файла."""


class ProfileCorruptedError(ProfileStoreError):
    """Документ профиля не читается как JSON или нарушает контракт."""


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ProfileStoreConfig:
    """Конфигурация хранилища профилей."""
    directory: Path = Path(".rentobuy_profiles")
    file_suffix: str = ".json"
    json_indent: int = 2


def _is_legacy_document(document: object) -> bool:
    """Старый формат: голый объект поле → сырой текст, без обёртки контракта."""
    return (
        isinstance(document, dict)
        and "schema_version" not in document
        and all(isinstance(value, str) for value in document.values())
    )


# =============================================================================
# STORE
# =============================================================================


class ProfileStore:
    """Файловое хранилище именованных профилей."""

    def __init__(self, config: Optional[ProfileStoreConfig] = None):
        self.config = config or ProfileStoreConfig()

    @property
    def directory(self) -> Path:
        return Path(self.config.directory)

    def _ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path_for(self, name: str) -> Path:
        return self.directory / f"{name}{self.config.file_suffix}"

    @staticmethod
    def _normalize_name(name: str) -> str:
        """Проверка имени профиля.

        Имя обрезается по краям; пустое, с разделителем пути или
        начинающееся с точки отвергается.
        """
        normalized = name.strip()
        if not normalized:
            raise InvalidProfileNameError("Profile name cannot be empty")

        separators = {"/", "\\", os.sep}
        if os.altsep:
            separators.add(os.altsep)
        if any(sep in normalized for sep in separators) or normalized.startswith("."):
            raise InvalidProfileNameError(f"Invalid profile name: {name!r}")

        return normalized

    def list_profiles(self) -> list[str]:
        """Отсортированный список имён профилей (без расширения)."""
        self._ensure_directory()

        suffix = self.config.file_suffix
        names = [
            entry.name[: -len(suffix)]
            for entry in self.directory.iterdir()
            if entry.is_file() and entry.name.endswith(suffix)
        ]
        return sorted(name for name in names if self._is_profile_name(name))

    @classmethod
    def _is_profile_name(cls, stem: str) -> bool:
        """Имя файла без расширения, которое load_profile откроет как есть."""
        try:
            return cls._normalize_name(stem) == stem
        except InvalidProfileNameError:
            return False

    def exists(self, name: str) -> bool:
        return self._path_for(self._normalize_name(name)).is_file()

    def save_profile(self, name: str, inputs: dict[str, str]) -> SavedProfile:
        """Сохранение профиля (существующий перезаписывается).

        Args:
            name: Имя профиля
            inputs: Сырые значения полей ввода

        Returns:
            Сохранённая запись

        Raises:
            InvalidProfileNameError: Если имя недопустимо
        """
        normalized = self._normalize_name(name)
        record = SavedProfile(
            name=normalized,
            inputs=dict(inputs),
            saved_at_utc_ms=int(time.time() * 1000),
        )
        document = record.model_dump()
        validate_saved_profile(document)

        self._ensure_directory()
        path = self._path_for(normalized)
        path.write_text(
            json.dumps(document, indent=self.config.json_indent, ensure_ascii=False),
            encoding="utf-8",
        )

        logger.info("Profile '%s' saved to %s", normalized, path)
        return record

    def load_record(self, name: str) -> SavedProfile:
        """Загрузка полной записи профиля.

        Документ старого формата оборачивается в SavedProfile с именем
        профиля и mtime файла.

        Raises:
            ProfileNotFoundError: Если профиля нет
            ProfileCorruptedError: Если документ не читается или нарушает контракт
        """
        normalized = self._normalize_name(name)
        path = self._path_for(normalized)
        if not path.is_file():
            raise ProfileNotFoundError(normalized)

        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Profile '%s' is not valid JSON: %s", normalized, e)
            raise ProfileCorruptedError(f"Profile '{normalized}' is not valid JSON") from e

        if _is_legacy_document(document):
            logger.info("Profile '%s' has no schema_version, loading as bare inputs", normalized)
            return SavedProfile(
                name=normalized,
                inputs=document,
                saved_at_utc_ms=max(0, int(path.stat().st_mtime * 1000)),
            )

        try:
            validate_saved_profile(document)
            return SavedProfile.model_validate(document)
        except (ValidationError, ModelValidationError) as e:
            logger.warning("Profile '%s' violates saved_profile contract: %s", normalized, e)
            raise ProfileCorruptedError(
                f"Profile '{normalized}' violates saved_profile contract"
            ) from e

    def load_profile(self, name: str) -> dict[str, str]:
        """Загрузка сырых значений полей профиля."""
        return dict(self.load_record(name).inputs)

    def delete_profile(self, name: str) -> None:
        """Удаление профиля.

        Raises:
            ProfileNotFoundError: Если профиля нет
        """
        normalized = self._normalize_name(name)
        path = self._path_for(normalized)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise ProfileNotFoundError(normalized) from e

        logger.info("Profile '%s' deleted", normalized)
