"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных value types.
"""

from .validators import (
    Base36NumberValidator,
    ContractValidator,
    EncryptedStringValidator,
    PeriodValidator,
    SchemaLoader,
    validate_base36_number,
    validate_encrypted_string,
    validate_period,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Base36NumberValidator",
    "PeriodValidator",
    "EncryptedStringValidator",
    # Functions
    "validate_base36_number",
    "validate_period",
    "validate_encrypted_string",
]
