"""
Errors — Таксономия ошибок Base36 кодека

Все ошибки наследуются от Base36Error, чтобы вызывающий код мог
перехватить любую ошибку кодека одним except.

Ошибки валидации входа (InvalidFormat, CapacityExceeded, NegativeValue)
дополнительно являются ValueError. Overflow является OverflowError:
фиксированная ширина числа — часть контракта, переполнение никогда
не приводит к молчаливому wraparound.
"""


class Base36Error(Exception):
    """Базовый класс для всех ошибок Base36 кодека."""


class InvalidFormat(Base36Error, ValueError):
    """
    Строка не является корректным base 36 числом.

    Символ вне алфавита [0-9A-Z#], пустая строка, либо padding '#'
    стоит перед цифрой (допустим только в хвосте).
    """


class CapacityExceeded(Base36Error, ValueError):
    """Значение требует больше цифр, чем объявленная capacity."""


class NegativeValue(Base36Error, ValueError):
    """Отрицательные значения не поддерживаются."""


class Overflow(Base36Error, OverflowError):
    """
    Результат сложения не помещается в фиксированную ширину.

    Attributes:
        first: строковое представление первого слагаемого
        second: строковое представление второго слагаемого
    """

    def __init__(self, first: str, second: str):
        super().__init__(
            f"Maximum base 36 value exceeded when adding {second!r} to {first!r}"
        )
        self.first = first
        self.second = second
