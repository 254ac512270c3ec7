"""
Tests for JSON Schema Contract Validators

Тестирование сохраняемой формы интервала:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и лишних полей
- Интеграция с Pydantic моделью IntervalRecord и Interval
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    IntervalRecordValidator,
    SchemaLoader,
    validate_interval_record,
)
from src.core.domain import IntervalRecord
from src.core.domain.errors import InvalidBounds
from src.interval import Interval


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_record():
    """Валидная JSON форма интервала."""
    return {"lower": 1, "upper": 10, "exclusive": True}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_load_interval_record_schema(self) -> None:
        schema = SchemaLoader().load_schema("interval_record")
        assert schema["title"] == "IntervalRecord"
        assert set(schema["required"]) == {"lower", "upper", "exclusive"}

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("interval_record") is loader.load_schema("interval_record")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATION
# =============================================================================


class TestIntervalRecordValidation:
    """Тесты для validate_interval_record"""

    def test_valid(self, valid_record) -> None:
        validate_interval_record(valid_record)

    @pytest.mark.parametrize(
        "lower, upper",
        [(0.5, 2.5), ("a", "z"), (-3, 7.25)],
    )
    def test_valid_bound_types(self, lower, upper) -> None:
        validate_interval_record({"lower": lower, "upper": upper, "exclusive": False})

    @pytest.mark.parametrize("missing", ["lower", "upper", "exclusive"])
    def test_missing_required(self, valid_record, missing: str) -> None:
        del valid_record[missing]
        with pytest.raises(ValidationError, match=missing):
            validate_interval_record(valid_record)

    def test_exclusive_must_be_boolean(self, valid_record) -> None:
        valid_record["exclusive"] = "yes"
        with pytest.raises(ValidationError):
            validate_interval_record(valid_record)

    def test_bound_type_violation(self, valid_record) -> None:
        valid_record["lower"] = [1, 2]
        with pytest.raises(ValidationError):
            validate_interval_record(valid_record)

    def test_additional_properties(self, valid_record) -> None:
        valid_record["step"] = 2
        with pytest.raises(ValidationError):
            validate_interval_record(valid_record)

    def test_is_valid_and_iter_errors(self, valid_record) -> None:
        validator = IntervalRecordValidator()
        assert validator.is_valid(valid_record)

        errors = list(validator.iter_errors({"lower": None}))
        assert len(errors) >= 2
        assert not validator.is_valid({"lower": None})


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestIntervalRecordModel:
    """Тесты для IntervalRecord и Interval.to_record/from_record"""

    def test_to_record(self) -> None:
        record = Interval(1, 10, True).to_record()
        assert record == IntervalRecord(lower=1, upper=10, exclusive=True)

    def test_record_is_frozen(self) -> None:
        record = IntervalRecord(lower=1, upper=2)
        with pytest.raises(PydanticValidationError):
            record.exclusive = True

    def test_record_forbids_extra(self) -> None:
        with pytest.raises(PydanticValidationError):
            IntervalRecord(lower=1, upper=2, exclusive=False, step=3)

    def test_record_json_matches_schema(self) -> None:
        """JSON форма Pydantic модели проходит JSON Schema контракт"""
        for interval in (Interval(1, 10), Interval(0.5, 1.5, True), Interval("a", "e")):
            data = json.loads(interval.to_record().model_dump_json())
            validate_interval_record(data)

    def test_from_record_restores_equal_interval(self) -> None:
        original = Interval("aa", "zz", True)
        restored = Interval.from_record(original.to_record())
        assert restored == original
        assert restored.is_equivalent(original)
        assert hash(restored) == hash(original)

    def test_from_mapping(self, valid_record) -> None:
        restored = Interval.from_record(valid_record)
        assert restored == Interval(1, 10, True)
        assert list(restored) == list(range(1, 10))

    def test_from_json_round_trip(self) -> None:
        original = Interval(0.25, 4.0)
        data = json.loads(original.to_record().model_dump_json())
        assert Interval.from_record(data) == original

    def test_from_invalid_mapping(self) -> None:
        with pytest.raises(ValidationError, match="upper"):
            Interval.from_record({"lower": 1, "exclusive": False})

    def test_from_mapping_checked_against_schema(self) -> None:
        """Mapping проходит JSON Schema контракт до Pydantic модели"""
        with pytest.raises(ValidationError):
            Interval.from_record({"lower": 1, "upper": 5})
        with pytest.raises(ValidationError):
            Interval.from_record({"lower": [1], "upper": [2], "exclusive": False})
        with pytest.raises(ValidationError):
            Interval.from_record({"lower": 1, "upper": 5, "exclusive": False, "step": 2})

    def test_from_record_model_skips_schema(self) -> None:
        """Готовая IntervalRecord не проходит JSON контракт повторно"""
        record = IntervalRecord(lower=(1,), upper=(2,))
        assert Interval.from_record(record) == Interval((1,), (2,))

    def test_from_record_incomparable_bounds(self) -> None:
        with pytest.raises(InvalidBounds):
            Interval.from_record({"lower": 1, "upper": "a", "exclusive": False})
