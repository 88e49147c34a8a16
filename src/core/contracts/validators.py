"""
Saved Profile Contract

Проверка JSON документов профилей, которые хранилище пишет на диск и
читает обратно, по схемам из contracts/schema/ (jsonschema, Draft 2020-12).

Схема и валидатор загружаются один раз на процесс: хранилище вызывает
validate_saved_profile на каждом save и load.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# CONSTANTS
# =============================================================================

# <root>/src/core/contracts/validators.py → <root>/contracts/schema
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

SAVED_PROFILE_SCHEMA: Final[str] = "saved_profile"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Читает схемы из каталога и кэширует их по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Файла <schema_name>.json нет
            ValueError: Файл не проходит meta-валидацию Draft 2020-12
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор одного контракта: схема + скомпилированный Draft202012Validator."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """Raises ValidationError на первом нарушении."""
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)


class SavedProfileValidator(ContractValidator):
    """Контракт документа сохранённого профиля."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(SAVED_PROFILE_SCHEMA, loader)


_SAVED_PROFILE_VALIDATOR = SavedProfileValidator()


def saved_profile_validator() -> SavedProfileValidator:
    """Общий на процесс экземпляр валидатора saved_profile."""
    return _SAVED_PROFILE_VALIDATOR


def validate_saved_profile(data: Any) -> None:
    """
    Проверка документа saved_profile.

    Raises:
        ValidationError: Документ нарушает контракт
    """
    _SAVED_PROFILE_VALIDATOR.validate(data)
