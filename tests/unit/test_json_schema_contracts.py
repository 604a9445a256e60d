"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Интеграция с Pydantic моделями (to_payload)
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as ModelValidationError

from src.dft.contracts import (
    SCHEMA_DIR,
    ComplexValueValidator,
    SchemaLoader,
    TwiddleTableValidator,
    dump_twiddle_table,
    load_complex_value,
    load_twiddle_table,
    validate_complex_value,
    validate_twiddle_table,
)
from src.dft.math import Complex, TwiddleTable, build_twiddle_table


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_complex_value():
    """Валидный complex_value для тестирования."""
    return {"real": 1.5, "imaginary": -2.0}


@pytest.fixture
def valid_twiddle_table():
    """Валидная twiddle_table для тестирования."""
    return {
        "size": 2,
        "inverse": True,
        "factors": [
            {"real": 1.0, "imaginary": 0.0},
            {"real": -1.0, "imaginary": 0.0},
        ],
    }


# =============================================================================
# TESTS: SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_schema_files_are_valid_json(self):
        """Файлы схем — корректный JSON с нужным title."""
        for name in ("complex_value", "twiddle_table"):
            with open(SCHEMA_DIR / f"{name}.json", "r", encoding="utf-8") as f:
                schema = json.load(f)
            assert schema["title"] == name

    def test_load_schema(self):
        loader = SchemaLoader()
        schema = loader.load_schema("complex_value")
        assert schema["type"] == "object"
        assert set(schema["required"]) == {"real", "imaginary"}

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("twiddle_table") is loader.load_schema("twiddle_table")

    def test_missing_schema(self):
        loader = SchemaLoader()
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            loader.load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_schema_without_id_rejected(self, tmp_path):
        (tmp_path / "anonymous.json").write_text(
            json.dumps({"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}),
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match=r"has no \$id"):
            SchemaLoader(tmp_path).load_schema("anonymous")

    def test_registry_contains_all_schemas(self):
        """Реестр разрешает $id обеих схем."""
        registry = SchemaLoader().registry()
        for name in ("complex_value", "twiddle_table"):
            schema = SchemaLoader().load_schema(name)
            assert registry[schema["$id"]].contents == schema


# =============================================================================
# TESTS: COMPLEX VALUE
# =============================================================================


class TestComplexValueContract:
    """Тесты complex_value контракта."""

    def test_valid(self, valid_complex_value):
        validate_complex_value(valid_complex_value)

    def test_integers_accepted(self):
        validate_complex_value({"real": 1, "imaginary": 0})

    def test_missing_imaginary(self, valid_complex_value):
        del valid_complex_value["imaginary"]
        with pytest.raises(ValidationError, match="'imaginary' is a required property"):
            validate_complex_value(valid_complex_value)

    def test_wrong_type(self, valid_complex_value):
        valid_complex_value["real"] = "1.5"
        with pytest.raises(ValidationError):
            validate_complex_value(valid_complex_value)

    def test_extra_property(self, valid_complex_value):
        valid_complex_value["phase"] = 0.0
        with pytest.raises(ValidationError):
            validate_complex_value(valid_complex_value)

    def test_is_valid_and_iter_errors(self):
        validator = ComplexValueValidator()
        assert validator.is_valid({"real": 0.0, "imaginary": 1.0})
        assert not validator.is_valid({"real": None})
        errors = list(validator.iter_errors({"real": None}))
        # null type + missing imaginary
        assert len(errors) == 2

    def test_model_payload_conforms(self):
        """Complex.to_payload соответствует контракту."""
        for z in (Complex(), Complex(3, -4), Complex.root_of_unity(8)):
            validate_complex_value(z.to_payload())


# =============================================================================
# TESTS: TWIDDLE TABLE
# =============================================================================


class TestTwiddleTableContract:
    """Тесты twiddle_table контракта."""

    def test_valid(self, valid_twiddle_table):
        validate_twiddle_table(valid_twiddle_table)

    def test_size_must_be_positive(self, valid_twiddle_table):
        valid_twiddle_table["size"] = 0
        with pytest.raises(ValidationError):
            validate_twiddle_table(valid_twiddle_table)

    def test_inverse_must_be_boolean(self, valid_twiddle_table):
        valid_twiddle_table["inverse"] = "yes"
        with pytest.raises(ValidationError):
            validate_twiddle_table(valid_twiddle_table)

    def test_empty_factors_rejected(self, valid_twiddle_table):
        valid_twiddle_table["factors"] = []
        with pytest.raises(ValidationError):
            validate_twiddle_table(valid_twiddle_table)

    def test_malformed_factor_rejected(self, valid_twiddle_table):
        valid_twiddle_table["factors"][1] = {"real": -1.0}
        with pytest.raises(ValidationError):
            validate_twiddle_table(valid_twiddle_table)

    @pytest.mark.parametrize("inverse", [True, False])
    def test_model_payload_conforms(self, inverse):
        """TwiddleTable.to_payload соответствует контракту."""
        table = build_twiddle_table(8, inverse=inverse)
        TwiddleTableValidator().validate(table.to_payload())


# =============================================================================
# TESTS: LOAD / DUMP
# =============================================================================


class TestComplexValueLoad:
    """Тесты payload → Complex."""

    def test_load(self, valid_complex_value):
        assert load_complex_value(valid_complex_value) == Complex(1.5, -2.0)

    def test_load_snaps_noise(self):
        """Шум в payload прижимается к нулю моделью."""
        z = load_complex_value({"real": 6.123233995736766e-17, "imaginary": 1.0})
        assert z == Complex(0, 1)

    def test_load_rejects_shape_before_model(self):
        with pytest.raises(ValidationError):
            load_complex_value({"real": "1.5", "imaginary": 0.0})


class TestTwiddleTableLoad:
    """Тесты payload ↔ TwiddleTable."""

    def test_load(self, valid_twiddle_table):
        table = load_twiddle_table(valid_twiddle_table)
        assert isinstance(table, TwiddleTable)
        assert table == build_twiddle_table(2)

    @pytest.mark.parametrize("inverse", [True, False])
    def test_dump_load_round_trip(self, inverse):
        table = build_twiddle_table(16, inverse=inverse)
        assert load_twiddle_table(dump_twiddle_table(table)) == table

    def test_tampered_factors_rejected(self, valid_twiddle_table):
        """Форма корректна, но factors не являются корнями из единицы."""
        valid_twiddle_table["factors"] = [
            {"real": 5.0, "imaginary": 5.0},
            {"real": 7.0, "imaginary": 7.0},
        ]
        validate_twiddle_table(valid_twiddle_table)
        with pytest.raises(ModelValidationError, match="factor 0"):
            load_twiddle_table(valid_twiddle_table)

    def test_wrong_direction_rejected(self):
        """Forward factors под флагом inverse отвергаются."""
        payload = build_twiddle_table(4, inverse=False).to_payload()
        payload["inverse"] = True
        with pytest.raises(ModelValidationError, match="factor 1"):
            load_twiddle_table(payload)

    def test_dump_wrong_type(self):
        with pytest.raises(TypeError, match="expects TwiddleTable"):
            TwiddleTableValidator().dump(Complex(1, 0))
