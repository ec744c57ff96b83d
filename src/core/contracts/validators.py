"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (contracts/schema/ в корне проекта):
- multisig_config.json — owners + quorum при конструировании кошелька
- transaction.json — запись Transaction.to_record()
- event_record.json — запись журнала событий (Deposit/Submit/Approve/Revoke/Executed)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'event_record')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все ошибки валидации в виде строк 'path: message', отсортированные по пути."""
        errors = sorted(self.iter_errors(data), key=lambda e: list(e.absolute_path))
        return [
            f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
            for e in errors
        ]


class MultiSigConfigValidator(ContractValidator):
    """Валидатор для multisig_config контракта."""

    def __init__(self):
        super().__init__("multisig_config")


class TransactionValidator(ContractValidator):
    """Валидатор для transaction контракта."""

    def __init__(self):
        super().__init__("transaction")


class EventRecordValidator(ContractValidator):
    """Валидатор для event_record контракта."""

    def __init__(self):
        super().__init__("event_record")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_multisig_config(data: Dict[str, Any]) -> None:
    """
    Валидация multisig_config данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MultiSigConfigValidator().validate(data)


def validate_transaction(data: Dict[str, Any]) -> None:
    """
    Валидация transaction данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TransactionValidator().validate(data)


def validate_event_record(data: Dict[str, Any]) -> None:
    """
    Валидация event_record данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EventRecordValidator().validate(data)
