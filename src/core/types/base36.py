"""
Base36Number — Число фиксированной ширины в кодировке base 36

Число хранится как строка символов алфавита [0-9A-Z], где '0' — наименьшее
значение цифры, '9' < 'A', а 'Z' — наибольшее (35). Класс используется как
первичный ключ в БД, поэтому порядок цифр ОБРАТНЫЙ естественному:
при чтении слева направо самая левая цифра имеет наименьший вес.

    "123#" больше, чем "3210###", так как у третьей цифры наибольший вес.

Символ '#' (padding) обозначает "незаписанную" старшую позицию. Арифметически
он равен нулю, но отличается от явной цифры '0'.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строковое представление = формат хранения (алфавит, '#', порядок цифр)
2. capacity (max_length) фиксируется при создании и не меняется
3. Padding допустим только в хвосте: [0-9A-Z]+#*
4. Переполнение при сложении → Overflow, никогда не wraparound
5. Экземпляры immutable: add/increment возвращают новый объект

Отрицательные значения не поддерживаются.
"""

import logging
import re
from typing import Any, Dict, Final, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.types.errors import (
    CapacityExceeded,
    InvalidFormat,
    NegativeValue,
    Overflow,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ КОДИРОВКИ
# =============================================================================

# Основание системы счисления
BASE: Final[int] = 36

# Все возможные значения одной цифры в их естественном порядке
ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Placeholder для незаписанных старших позиций.
# Совместим с persistence framework Avantis Unisuite.
PAD_CHAR: Final[str] = "#"

# Структура base 36 строки: минимум одна цифра, затем только padding
BASE36_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9A-Z]+#*")

# Разрядность целых для to_int / to_long (signed, с wraparound)
INT_BITS: Final[int] = 32
LONG_BITS: Final[int] = 64

_DIGIT_VALUES: Final[dict[str, int]] = {
    symbol: value for value, symbol in enumerate(ALPHABET)
}
_DIGIT_VALUES[PAD_CHAR] = 0

# Значение 1 в base 36 для increment()
_ONE: Final[str] = ALPHABET[1]


# =============================================================================
# ЦИФРОВЫЕ ПРИМИТИВЫ
# =============================================================================


def digit_value(symbol: str) -> int:
    """
    Числовое значение одного base 36 символа.

    Args:
        symbol: '0'-'9', 'A'-'Z' или PAD_CHAR

    Returns:
        Значение цифры [0, 35]; padding даёт 0

    Raises:
        InvalidFormat: Если символ не из алфавита
    """
    try:
        return _DIGIT_VALUES[symbol]
    except KeyError:
        raise InvalidFormat(f"Invalid base 36 digit: {symbol!r}") from None


def encode_int(value: int) -> str:
    """
    Минимальное base 36 представление целого (младшая цифра первой).

    Examples:
        >>> encode_int(0)
        '0'
        >>> encode_int(1106)
        'QU'

    Raises:
        NegativeValue: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0:
        raise NegativeValue(f"Negative values are not supported: {value}")

    symbols = []
    remains = value
    while True:
        remains, digit = divmod(remains, BASE)
        symbols.append(ALPHABET[digit])
        if remains == 0:
            break
    return "".join(symbols)


def add_symbols(first: str, second: str) -> str:
    """
    Поразрядное сложение двух base 36 строк с переносом.

    Длина результата = max(len(first), len(second)). Недостающие разряды
    и padding считаются нулём. После сложения старшие нули заменяются
    на PAD_CHAR вплоть до первой ненулевой цифры; индекс 0 никогда
    не заменяется, поэтому нулевой результат сохраняет '0' в младшем разряде.

    Args:
        first: Первое слагаемое (символы в порядке весов)
        second: Второе слагаемое (символы в порядке весов)

    Returns:
        Сумма как base 36 строка

    Raises:
        Overflow: Если остался перенос из старшего разряда
    """
    size = max(len(first), len(second))
    result = []

    carry = 0
    for i in range(size):
        first_digit = digit_value(first[i]) if i < len(first) else 0
        second_digit = digit_value(second[i]) if i < len(second) else 0
        carry, digit = divmod(first_digit + second_digit + carry, BASE)
        result.append(ALPHABET[digit])

    if carry > 0:
        logger.debug("Base36 overflow: %s + %s exceeds %d digits", first, second, size)
        raise Overflow(first, second)

    # Старшие нули → padding
    i = size - 1
    while i >= 1 and result[i] == ALPHABET[0]:
        result[i] = PAD_CHAR
        i -= 1

    return "".join(result)


def digit_hash(symbols: str) -> int:
    """
    Полиномиальный хэш по символам: h = 31 * h + ord(symbol), начиная с 1.

    Результат приведён к signed 32 bit, поэтому совпадает с хэшами,
    уже сохранёнными существующими системами.
    """
    h = 1
    for symbol in symbols:
        h = (31 * h + ord(symbol)) & 0xFFFFFFFF
    return _to_signed(h, INT_BITS)


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


# =============================================================================
# BASE36 NUMBER MODEL
# =============================================================================


class Base36Number(BaseModel):
    """
    Неотрицательное число фиксированной ширины в кодировке base 36.

    Immutable модель (frozen=True). Создаётся через фабрики:
    - parse(symbols, capacity=None) — из base 36 строки
    - from_int(value, capacity) — из целого
    - copy_of(other) — копия другого числа

    Порядок цифр обратный: symbols[0] — младший разряд.
    Равенство и сравнение не зависят от capacity, только от значения.
    """

    symbols: str = Field(
        ...,
        min_length=1,
        description="Цифры в порядке весов (младшая первой), с хвостовым padding '#'",
    )

    model_config = {"frozen": True}

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: str) -> str:
        """Проверка структуры: [0-9A-Z]+#*"""
        if BASE36_NUMBER_PATTERN.fullmatch(v) is None:
            raise ValueError(
                f"symbols {v!r} do not match pattern {BASE36_NUMBER_PATTERN.pattern}"
            )
        return v

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, symbols: str, capacity: Optional[int] = None) -> "Base36Number":
        """
        Создание числа из base 36 строки.

        Строка короче capacity выравнивается влево и дополняется PAD_CHAR.

        Args:
            symbols: Строка по шаблону [0-9A-Z]+#*
            capacity: Максимальное число цифр (default: длина строки)

        Returns:
            Base36Number с max_length == capacity

        Raises:
            InvalidFormat: Если строка не соответствует шаблону
            CapacityExceeded: Если строка длиннее capacity
        """
        if not isinstance(symbols, str):
            raise InvalidFormat(f"symbols must be a string, got {type(symbols).__name__}")
        if BASE36_NUMBER_PATTERN.fullmatch(symbols) is None:
            raise InvalidFormat(
                f"{symbols!r} is not a valid base 36 number "
                f"(pattern {BASE36_NUMBER_PATTERN.pattern})"
            )

        if capacity is None:
            capacity = len(symbols)
        if len(symbols) > capacity:
            raise CapacityExceeded(
                f"{symbols!r} has {len(symbols)} digits, maximum is {capacity}"
            )

        return cls(symbols=symbols.ljust(capacity, PAD_CHAR))

    @classmethod
    def from_int(cls, value: int, capacity: int) -> "Base36Number":
        """
        Создание числа из неотрицательного целого.

        Значение прибавляется к пустому (только padding) числу ширины capacity,
        поэтому компактизация старших нулей та же, что и при add().

        Examples:
            >>> str(Base36Number.from_int(1106, 3))
            'QU#'
            >>> str(Base36Number.from_int(36, 2))
            '01'

        Raises:
            NegativeValue: Если value < 0
            CapacityExceeded: Если значению нужно больше capacity цифр
        """
        encoded = encode_int(value)
        if len(encoded) > capacity:
            raise CapacityExceeded(
                f"{value} needs {len(encoded)} base 36 digits, maximum is {capacity}"
            )
        return cls(symbols=add_symbols(PAD_CHAR * capacity, encoded))

    @classmethod
    def copy_of(cls, other: "Base36Number") -> "Base36Number":
        """Независимая копия с теми же цифрами и capacity."""
        if other is None:
            raise ValueError("other must not be None")
        return cls(symbols=other.symbols)

    def model_copy(
        self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False
    ) -> "Base36Number":
        """
        Копия модели; update проходит ту же валидацию, что и конструктор.

        Raises:
            ValidationError: Если update содержит невалидные symbols
        """
        if update:
            return type(self).model_validate({**self.model_dump(), **update})
        return super().model_copy(deep=deep)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def max_length(self) -> int:
        """Максимальное число цифр (capacity)."""
        return len(self.symbols)

    @property
    def highest_digit_index(self) -> int:
        """
        Индекс старшей ненулевой цифры.

        Returns:
            Наибольший индекс с ненулевым значением, 0 если число нулевое
        """
        for i in range(len(self.symbols) - 1, -1, -1):
            if digit_value(self.symbols[i]) > 0:
                return i
        return 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Union["Base36Number", int, None]) -> "Base36Number":
        """
        Сложение с другим Base36Number или с неотрицательным целым.

        Ширина результата = max(ширина self, ширина слагаемого).
        None означает "нечего прибавлять" и возвращает self.

        Args:
            other: Base36Number, int >= 0 или None

        Returns:
            Новый Base36Number с суммой

        Raises:
            NegativeValue: Если other — отрицательное целое
            Overflow: Если сумма не помещается в ширину результата
        """
        if other is None:
            return self
        if isinstance(other, Base36Number):
            summand = other.symbols
        else:
            summand = encode_int(other)
        return Base36Number(symbols=add_symbols(self.symbols, summand))

    def increment(self) -> "Base36Number":
        """
        Увеличение на 1.

        Raises:
            Overflow: Если self уже максимальное значение своей ширины
        """
        return Base36Number(symbols=add_symbols(self.symbols, _ONE))

    def __add__(self, other):
        if other is None or isinstance(other, bool):
            return NotImplemented
        if not isinstance(other, (Base36Number, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    # -------------------------------------------------------------------------
    # Декодирование
    # -------------------------------------------------------------------------

    def to_long(self) -> int:
        """
        Значение как signed 64 bit целое.

        Для больших capacity значение не помещается и оборачивается
        (wraparound), как при накоплении в 64 bit регистре.
        """
        total = 0
        weight = 1
        for symbol in self.symbols:
            total += digit_value(symbol) * weight
            weight *= BASE
        return _to_signed(total, LONG_BITS)

    def to_int(self) -> int:
        """Значение to_long(), суженное до signed 32 bit (с wraparound)."""
        return _to_signed(self.to_long(), INT_BITS)

    def __int__(self) -> int:
        total = 0
        for symbol in reversed(self.symbols):
            total = total * BASE + digit_value(symbol)
        return total

    def __str__(self) -> str:
        # Порядок хранения, НЕ естественный порядок чтения
        return self.symbols

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _digit_at(self, index: int) -> int:
        if index < len(self.symbols):
            return digit_value(self.symbols[index])
        return 0

    def compare_to(self, other: "Base36Number") -> int:
        """
        Сравнение по значению, независимо от capacity.

        Цифры сравниваются от старшей заполненной позиции (max из двух чисел)
        к младшей; первая различающаяся пара определяет результат.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other

        Raises:
            ValueError: Если other is None
        """
        if other is None:
            raise ValueError("other must not be None")

        highest = max(self.highest_digit_index, other.highest_digit_index)
        for i in range(highest, -1, -1):
            this_digit = self._digit_at(i)
            other_digit = other._digit_at(i)
            if this_digit != other_digit:
                return 1 if this_digit > other_digit else -1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base36Number):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Base36Number):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Base36Number):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Base36Number):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Base36Number):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        # Только значимые цифры: равные по значению числа разной capacity
        # имеют одинаковый хэш
        return digit_hash(self.symbols[: self.highest_digit_index + 1])

    def raw_hash_code(self) -> int:
        """
        Хэш по всем хранимым символам, включая padding.

        Совпадает с хэшами, сохранёнными до введения канонического хэша.
        Для чисел без хвостовых нулей/padding равен hash(self).
        """
        return digit_hash(self.symbols)
