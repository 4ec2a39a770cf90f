"""Gender — Перечисление полов с человекочитаемым представлением"""

from enum import Enum


class Gender(str, Enum):
    """
    Пол.

    Значение enum — машинное имя (хранится в БД),
    str() — отображаемое имя.
    """

    MALE = "male"
    FEMALE = "female"
    THIRD_GENDER = "third_gender"
    UNKNOWN = "unknown"

    @property
    def gender_name(self) -> str:
        """Машинное имя, например 'third_gender'"""
        return self.value

    def __str__(self) -> str:
        return self.value.replace("_", " ").title()
