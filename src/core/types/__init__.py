"""
Value types.

Base36Number (ключи БД в кодировке base 36) и сопутствующие
value objects: Period, Gender, EncryptedString.
"""

from src.core.types.base36 import (
    ALPHABET,
    BASE,
    BASE36_NUMBER_PATTERN,
    PAD_CHAR,
    Base36Number,
    add_symbols,
    digit_hash,
    digit_value,
    encode_int,
)
from src.core.types.encrypted_string import EMPTY_STRING, EncryptedString
from src.core.types.errors import (
    Base36Error,
    CapacityExceeded,
    InvalidFormat,
    NegativeValue,
    Overflow,
)
from src.core.types.gender import Gender
from src.core.types.period import (
    UNLIMITED_PERIOD,
    DateStringRepresentation,
    Period,
)

__all__ = [
    # Base36 — Constants
    "ALPHABET",
    "BASE",
    "BASE36_NUMBER_PATTERN",
    "PAD_CHAR",
    # Base36 — Types
    "Base36Number",
    # Base36 — Functions
    "add_symbols",
    "digit_hash",
    "digit_value",
    "encode_int",
    # Base36 — Exceptions
    "Base36Error",
    "CapacityExceeded",
    "InvalidFormat",
    "NegativeValue",
    "Overflow",
    # Period
    "DateStringRepresentation",
    "Period",
    "UNLIMITED_PERIOD",
    # Gender
    "Gender",
    # EncryptedString
    "EMPTY_STRING",
    "EncryptedString",
]
