"""
Payload Contracts — JSON Schema for Complex Values and Twiddle Tables

Граница между JSON payload и моделями пакета:
- load_*: payload → проверка схемы (jsonschema) → модель (pydantic)
- dump_*: модель → payload → проверка схемы

Схема проверяет форму payload, модель — численные инварианты
(zero-snap, конечность компонент, factors[k] ≈ w^k).

Схемы поставляются внутри пакета (schema/*.json) и ссылаются друг на друга
по $id через общий referencing.Registry: элементы factors в
twiddle_table.json описаны ссылкой на complex_value.json.
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Final, Optional

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from src.dft.math.complex_number import Complex
from src.dft.math.twiddle import TwiddleTable

# Каталог схем внутри пакета (ставится как package data)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов и реестр их $id.

    Схемы кэшируются после первой загрузки; реестр строится один раз
    по всем *.json каталога.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Optional[Registry] = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema или без $id
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        # $id нужен реестру для межфайловых $ref
        if "$id" not in schema:
            raise ValueError(f"Schema {schema_name}.json has no $id")

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """Реестр всех схем каталога по их $id."""
        if self._registry is None:
            resources = []
            for path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(path.stem)
                resource = Resource.from_contents(schema, default_specification=DRAFT202012)
                resources.append((schema["$id"], resource))
            self._registry = Registry().with_resources(resources)
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACTS
# =============================================================================


class ContractValidator:
    """
    Контракт: JSON Schema + pydantic модель, которую она описывает.

    Подклассы задают schema_name и model.
    """

    schema_name: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema = loader.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema, registry=loader.registry())

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация payload против схемы.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности payload без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации схемы.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def load(self, data: Dict[str, Any]) -> Any:
        """
        payload → модель.

        Сначала форма (схема), затем численные инварианты (модель).

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            pydantic.ValidationError: Если значения нарушают инварианты модели
        """
        self.validate(data)
        return self.model.model_validate(data)

    def dump(self, instance: Any) -> Dict[str, Any]:
        """
        Модель → payload, проверенный схемой.

        Raises:
            TypeError: Если instance не является экземпляром model
        """
        if not isinstance(instance, self.model):
            raise TypeError(
                f"{self.schema_name} contract expects {self.model.__name__}, "
                f"got {type(instance).__name__}"
            )
        payload = instance.to_payload()
        self.validate(payload)
        return payload


class ComplexValueValidator(ContractValidator):
    """Контракт complex_value ↔ Complex."""

    schema_name = "complex_value"
    model = Complex


class TwiddleTableValidator(ContractValidator):
    """Контракт twiddle_table ↔ TwiddleTable."""

    schema_name = "twiddle_table"
    model = TwiddleTable


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_value(data: Dict[str, Any]) -> None:
    """
    Валидация формы complex_value payload.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ComplexValueValidator().validate(data)


def validate_twiddle_table(data: Dict[str, Any]) -> None:
    """
    Валидация формы twiddle_table payload.

    Соответствие factors корням из единицы схема не проверяет;
    для этого используйте load_twiddle_table.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    TwiddleTableValidator().validate(data)


def load_complex_value(data: Dict[str, Any]) -> Complex:
    """payload → Complex (схема + zero-snap и проверка конечности)."""
    return ComplexValueValidator().load(data)


def load_twiddle_table(data: Dict[str, Any]) -> TwiddleTable:
    """
    payload → TwiddleTable.

    Raises:
        jsonschema.ValidationError: Если payload не соответствует схеме
        pydantic.ValidationError: Если factors не совпадают с w^k
    """
    return TwiddleTableValidator().load(data)


def dump_twiddle_table(table: TwiddleTable) -> Dict[str, Any]:
    """TwiddleTable → payload, проверенный схемой."""
    return TwiddleTableValidator().dump(table)
