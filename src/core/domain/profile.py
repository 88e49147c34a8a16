"""
SavedProfile - сохранённая конфигурация калькулятора

Immutable Pydantic модель одного именованного профиля.
Полная совместимость с JSON Schema (contracts/schema/saved_profile.json).

inputs хранит сырой текст полей ровно так, как его ввёл пользователь
("500k", "1y6m", "3,4,5"); разбор выполняется кодеком при загрузке.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

PROFILE_SCHEMA_VERSION: Final[str] = "1"


class SavedProfile(BaseModel):
    """
    Именованный набор входных данных калькулятора.

    Immutable модель (frozen=True).
    """

    schema_version: str = Field(
        PROFILE_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    name: str = Field(..., min_length=1, description="Имя профиля")
    inputs: dict[str, str] = Field(
        default_factory=dict, description="Сырые значения полей ввода"
    )
    saved_at_utc_ms: int = Field(..., ge=0, description="Время сохранения (UTC, ms)")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Имя не может состоять только из пробелов."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v
