"""
JSON Schema Contract Validators

Модуль для валидации сериализованных value types согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- base36_number.json (Base36Number: ключ в формате хранения)
- period.json (Period: открытые границы как null)
- encrypted_string.json (EncryptedString)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

# Схемы контрактов, поставляемые вместе с пакетом
_DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию берёт схемы из каталога schema/ рядом с этим модулем
    (поставляется как package data).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else _DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'base36_number')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
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

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class Base36NumberValidator(ContractValidator):
    """Валидатор для base36_number контракта."""

    def __init__(self):
        super().__init__("base36_number")


class PeriodValidator(ContractValidator):
    """Валидатор для period контракта."""

    def __init__(self):
        super().__init__("period")


class EncryptedStringValidator(ContractValidator):
    """Валидатор для encrypted_string контракта."""

    def __init__(self):
        super().__init__("encrypted_string")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_base36_number(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Base36Number.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Base36NumberValidator().validate(data)


def validate_period(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Period.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PeriodValidator().validate(data)


def validate_encrypted_string(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной EncryptedString.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EncryptedStringValidator().validate(data)
