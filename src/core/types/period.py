"""
Period — Immutable временной интервал

Интервал с опционально открытыми границами: start=None означает
"с начала времён", end=None — "без окончания". Границы включительны.

Immutable Pydantic модель; все "изменения" создают новый экземпляр.
"""

from collections.abc import Iterable
from datetime import date, datetime
from enum import Enum
from typing import Final, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ФОРМАТЫ ДАТ
# =============================================================================

DATE_PATTERN: Final[str] = "%Y-%m-%d"
DATE_TIME_PATTERN: Final[str] = DATE_PATTERN + " %H:%M"
DATE_TIME_SECONDS_PATTERN: Final[str] = DATE_TIME_PATTERN + ":%S"

# Строковое представление открытой границы
OPEN_BOUND_LABEL: Final[str] = "null"


class DateStringRepresentation(str, Enum):
    """Формат дат в строковом представлении периода"""

    DATE = "DATE"
    DATE_TIME = "DATE_TIME"
    DATE_TIME_SECONDS = "DATE_TIME_SECONDS"
    TIMESTAMP = "TIMESTAMP"


def format_point_of_time(value: datetime, representation: DateStringRepresentation) -> str:
    """
    Форматирование момента времени.

    TIMESTAMP содержит миллисекунды: 2011-12-31 00:00:00.000

    Raises:
        ValueError: Если representation is None
    """
    if representation is None:
        raise ValueError("representation must not be None")

    representation = DateStringRepresentation(representation)
    if representation == DateStringRepresentation.DATE:
        return value.strftime(DATE_PATTERN)
    if representation == DateStringRepresentation.DATE_TIME:
        return value.strftime(DATE_TIME_PATTERN)
    if representation == DateStringRepresentation.DATE_TIME_SECONDS:
        return value.strftime(DATE_TIME_SECONDS_PATTERN)
    return f"{value.strftime(DATE_TIME_SECONDS_PATTERN)}.{value.microsecond // 1000:03d}"


def is_aware(value: datetime) -> bool:
    """datetime с часовым поясом (offset-aware)"""
    return value.tzinfo is not None and value.utcoffset() is not None


def _check_comparable(first: datetime, second: datetime) -> None:
    # naive и aware datetime несравнимы
    if is_aware(first) != is_aware(second):
        raise ValueError(
            f"Cannot compare offset-naive and offset-aware datetimes: {first!r}, {second!r}"
        )


# =============================================================================
# PERIOD MODEL
# =============================================================================


class Period(BaseModel):
    """
    Временной интервал [start, end] с опционально открытыми границами.

    Immutable модель (frozen=True).
    Инвариант: если обе границы заданы, start <= end.
    """

    start: Optional[datetime] = Field(None, description="Начало периода (None — открытое)")
    end: Optional[datetime] = Field(None, description="Конец периода (None — открытый)")

    model_config = {"frozen": True}

    @field_validator("start", "end", mode="before")
    @classmethod
    def promote_date(cls, v):
        """date без времени → datetime на полночь"""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day)
        return v

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "Period":
        """Проверка, что обе границы одного вида (naive/aware) и start не позже end"""
        if self.start is None or self.end is None:
            return self
        _check_comparable(self.start, self.end)
        if self.start > self.end:
            raise ValueError(f"start {self.start} must not be after end {self.end}")
        return self

    @classmethod
    def copy_of(cls, other: "Period") -> "Period":
        """Копия другого периода."""
        if other is None:
            raise ValueError("other must not be None")
        return cls(start=other.start, end=other.end)

    def has_open_beginning(self) -> bool:
        return self.start is None

    def has_open_end(self) -> bool:
        return self.end is None

    def is_enclosed(self, point_of_time: Union[datetime, date]) -> bool:
        """
        Проверка, что момент времени лежит внутри периода (границы включительно).

        Raises:
            ValueError: Если point_of_time is None или несравним с границами
                (naive против aware)
        """
        if point_of_time is None:
            raise ValueError("point_of_time must not be None")
        if isinstance(point_of_time, date) and not isinstance(point_of_time, datetime):
            point_of_time = datetime(point_of_time.year, point_of_time.month, point_of_time.day)

        for bound in (self.start, self.end):
            if bound is not None:
                _check_comparable(point_of_time, bound)

        if self.start is not None and point_of_time < self.start:
            return False
        if self.end is not None and point_of_time > self.end:
            return False
        return True

    def is_now_enclosed(self) -> bool:
        """Проверка, что текущий момент лежит внутри периода."""
        bound = self.start or self.end
        tz = bound.tzinfo if bound is not None else None
        return self.is_enclosed(datetime.now(tz))

    def starts_after(self, other: "Period") -> bool:
        """
        Период начинается не раньше окончания other.

        Открытое начало self или открытый конец other → False.
        """
        if other is None:
            raise ValueError("other must not be None")
        if self.start is None or other.end is None:
            return False
        _check_comparable(self.start, other.end)
        return self.start >= other.end

    def ends_before(self, other: "Period") -> bool:
        """
        Период заканчивается не позже начала other.

        Открытый конец self или открытое начало other → False.
        """
        if other is None:
            raise ValueError("other must not be None")
        if self.end is None or other.start is None:
            return False
        _check_comparable(self.end, other.start)
        return self.end <= other.start

    def overlaps(self, other: Union["Period", Iterable["Period"]]) -> bool:
        """
        Пересечение с другим периодом или с любым периодом из коллекции.

        Два периода НЕ пересекаются, если один начинается после окончания
        другого или заканчивается до его начала.

        Raises:
            ValueError: Если other is None
        """
        if other is None:
            raise ValueError("other must not be None")
        if isinstance(other, Period):
            return not (self.starts_after(other) or self.ends_before(other))
        return any(self.overlaps(period) for period in other)

    def get_overlapping_periods(self, periods: Iterable["Period"]) -> list["Period"]:
        """
        Все периоды коллекции, пересекающиеся с этим.

        Returns:
            Список в исходном порядке
        """
        if periods is None:
            raise ValueError("periods must not be None")
        return [period for period in periods if self.overlaps(period)]

    def to_string(
        self, representation: DateStringRepresentation = DateStringRepresentation.TIMESTAMP
    ) -> str:
        """
        Строковое представление: "Start: <start> End: <end>".

        Открытые границы выводятся как "null"; representation нужен только
        для заданных границ.

        Raises:
            ValueError: Если representation is None, а хотя бы одна граница задана
        """
        parts = []
        for label, bound in (("Start", self.start), ("End", self.end)):
            if bound is None:
                parts.append(f"{label}: {OPEN_BOUND_LABEL}")
            else:
                parts.append(f"{label}: {format_point_of_time(bound, representation)}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.to_string()


# Период без границ: пересекается со всеми и содержит любой момент
UNLIMITED_PERIOD: Final[Period] = Period(start=None, end=None)
