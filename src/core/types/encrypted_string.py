"""
EncryptedString — Непрозрачная обёртка над строкой

Хранит уже зашифрованное значение; шифрование/дешифрование
выполняется вне этого модуля. Значение может отсутствовать (None).
"""

from typing import Final, Optional

from pydantic import BaseModel, Field


class EncryptedString(BaseModel):
    """
    Immutable обёртка над зашифрованной строкой.

    Значение не выводится в repr(), чтобы не попадать в логи.
    """

    value: Optional[str] = Field(None, repr=False, description="Зашифрованное значение")

    model_config = {"frozen": True}

    @classmethod
    def copy_of(cls, other: "EncryptedString") -> "EncryptedString":
        """Копия другой EncryptedString."""
        if other is None:
            raise ValueError("other must not be None")
        return cls(value=other.value)

    def is_empty(self) -> bool:
        return self.value is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncryptedString):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        if self.value is None:
            return 0
        return hash(self.value)

    def __str__(self) -> str:
        return self.value if self.value is not None else ""


EMPTY_STRING: Final[EncryptedString] = EncryptedString(value=None)
