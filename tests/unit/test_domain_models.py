"""
Тесты для доменной модели SavedProfile

Проверяет:
1. Значения по умолчанию
2. Immutability (frozen=True)
3. Валидацию имени, версии схемы и timestamp
"""

import pytest
from pydantic import ValidationError

from src.core.domain import PROFILE_SCHEMA_VERSION, SavedProfile


class TestSavedProfile:
    """Тесты SavedProfile"""

    def test_defaults(self) -> None:
        """schema_version и inputs заполняются по умолчанию"""
        record = SavedProfile(name="base", saved_at_utc_ms=0)
        assert record.schema_version == PROFILE_SCHEMA_VERSION == "1"
        assert record.inputs == {}

    def test_inputs_kept_as_raw_text(self) -> None:
        record = SavedProfile(
            name="base",
            inputs={"home_price": "500k", "appreciation_rates": "3,4,5"},
            saved_at_utc_ms=1,
        )
        assert record.inputs["home_price"] == "500k"
        assert record.inputs["appreciation_rates"] == "3,4,5"

    def test_frozen(self) -> None:
        """Модель immutable"""
        record = SavedProfile(name="base", saved_at_utc_ms=0)
        with pytest.raises(ValidationError):
            record.name = "other"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SavedProfile(name="", saved_at_utc_ms=0)

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be blank"):
            SavedProfile(name="   ", saved_at_utc_ms=0)

    def test_negative_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SavedProfile(name="base", saved_at_utc_ms=-5)

    def test_unknown_schema_version_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SavedProfile(schema_version="2", name="base", saved_at_utc_ms=0)

    def test_round_trip_through_dump(self) -> None:
        record = SavedProfile(name="base", inputs={"a": "1"}, saved_at_utc_ms=42)
        assert SavedProfile.model_validate(record.model_dump()) == record
