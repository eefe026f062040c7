"""Formatting primitives.

Two separate code paths render instants:

- Layout formatters (NumericDateFormat, NumericTimeFormat) play the part of a
  locale-aware numeric formatter. Field order and separator come from a
  layout object; the year is printed as a plain number, other fields are two
  digits.
- TemplateFormat renders fixed literal templates such as "YYYY-MM-DD" with
  every field zero-padded.

With the default layouts both paths produce the same text for four-digit
years. They are kept apart on purpose since they diverge as soon as a
non-default layout is configured or a year has fewer than four digits.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal, TypeAlias

from typing_extensions import override

from calops.instant import CalendarInstant

DateField: TypeAlias = Literal["year", "month", "day"]

_DATE_FIELDS: frozenset[str] = frozenset({"year", "month", "day"})


@dataclass(frozen=True, kw_only=True)
class DateLayout:
    """Field order and separator for numeric dates."""

    order: tuple[DateField, DateField, DateField] = ("year", "month", "day")
    separator: str = "-"

    def __post_init__(self) -> None:
        if sorted(self.order) != sorted(_DATE_FIELDS):
            valid = ", ".join(sorted(_DATE_FIELDS))
            raise ValueError(
                f"DateLayout order must name each field once: {valid}\n"
                f"Got: {self.order!r}"
            )


@dataclass(frozen=True, kw_only=True)
class TimeLayout:
    """Separator for 24-hour numeric times."""

    separator: str = ":"


DEFAULT_DATE_LAYOUT = DateLayout()
DEFAULT_TIME_LAYOUT = TimeLayout()


class Formatter(ABC):

    @abstractmethod
    def format(self, instant: CalendarInstant) -> str:
        pass


class NumericDateFormat(Formatter):
    """Numeric year, 2-digit month and day, arranged by a DateLayout."""

    def __init__(self, layout: DateLayout = DEFAULT_DATE_LAYOUT):
        self.layout: DateLayout = layout

    @override
    def format(self, instant: CalendarInstant) -> str:
        values = {
            "year": str(instant.year),
            "month": f"{instant.month:02d}",
            "day": f"{instant.day:02d}",
        }
        return self.layout.separator.join(values[f] for f in self.layout.order)


class NumericTimeFormat(Formatter):
    """2-digit 24-hour time, with or without seconds."""

    def __init__(
        self, seconds: bool = False, layout: TimeLayout = DEFAULT_TIME_LAYOUT
    ):
        self.seconds: bool = seconds
        self.layout: TimeLayout = layout

    @override
    def format(self, instant: CalendarInstant) -> str:
        parts = [instant.hour, instant.minute]
        if self.seconds:
            parts.append(instant.second)
        return self.layout.separator.join(f"{p:02d}" for p in parts)


class TemplateFormat(Formatter):
    """Literal template with YYYY, MM, DD, HH, mm and SS placeholders.

    Example:
        >>> TemplateFormat("YYYY-MM-DD HH:mm:SS").format(instant)
        '2024-05-15 09:05:00'
    """

    def __init__(self, template: str):
        self.template: str = template

    @override
    def format(self, instant: CalendarInstant) -> str:
        dt = instant.to_datetime()
        return (
            self.template.replace("YYYY", f"{dt.year:04d}")
            .replace("MM", f"{dt.month:02d}")
            .replace("DD", f"{dt.day:02d}")
            .replace("HH", f"{dt.hour:02d}")
            .replace("mm", f"{dt.minute:02d}")
            .replace("SS", f"{dt.second:02d}")
        )


ISO_DATE = TemplateFormat("YYYY-MM-DD")
ISO_TIME = TemplateFormat("HH:mm:SS")
ISO_DATE_TIME = TemplateFormat("YYYY-MM-DD HH:mm:SS")


def format_date(
    instant: CalendarInstant, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return NumericDateFormat(layout).format(instant)


def format_time(
    instant: CalendarInstant,
    seconds: bool = False,
    layout: TimeLayout = DEFAULT_TIME_LAYOUT,
) -> str:
    return NumericTimeFormat(seconds, layout).format(instant)
