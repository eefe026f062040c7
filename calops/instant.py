import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta

from calops import clock
from calops.util import DAY, HOUR, MINUTE, SECOND

# Origin of the millisecond count, on the local wall-clock timeline
EPOCH = datetime(1970, 1, 1)

_MIN_MILLIS = (datetime.min - EPOCH) // timedelta(milliseconds=1)
_MAX_MILLIS = (datetime.max - EPOCH) // timedelta(milliseconds=1)
_EPOCH_ORDINAL = EPOCH.toordinal()


def first_of_month_ordinal(year: int, month: int) -> int:
    """Proleptic Gregorian ordinal of the 1st of a month (0001-01-01 is 1).

    Valid for any integer year, unlike date.toordinal().
    """
    y = year - 1
    days = y * 365 + y // 4 - y // 100 + y // 400
    days += sum(calendar.mdays[1:month])
    if month > 2 and calendar.isleap(year):
        days += 1
    return days + 1


@dataclass(frozen=True, kw_only=True)
class CalendarInstant:
    """An immutable point on the local wall-clock timeline.

    Stored as whole milliseconds since 1970-01-01T00:00:00 local time. There
    is no timezone attached; instants compare and subtract as floating time.
    """

    millis: int

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise TypeError(
                f"CalendarInstant millis must be int, got {type(self.millis).__name__}"
            )
        if not (_MIN_MILLIS <= self.millis <= _MAX_MILLIS):
            raise ValueError(
                f"CalendarInstant millis ({self.millis}) outside representable "
                f"range [{_MIN_MILLIS}, {_MAX_MILLIS}] (years 1..9999)"
            )

    def __str__(self) -> str:
        return f"CalendarInstant({self.to_datetime().isoformat()})"

    def __sub__(self, other: "CalendarInstant") -> int:
        """Difference in milliseconds."""
        return self.millis - other.millis

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarInstant":
        """Build from a naive datetime, truncating below the millisecond."""
        if dt.tzinfo is not None:
            raise ValueError(
                f"CalendarInstant requires a naive (local) datetime.\n"
                f"Got aware datetime: {dt!r}\n"
                f"Hint: convert first with dt.astimezone().replace(tzinfo=None)"
            )
        return cls(millis=(dt - EPOCH) // timedelta(milliseconds=1))

    @classmethod
    def from_fields(
        cls,
        year: int,
        month_index: int,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "CalendarInstant":
        """Build from calendar fields that may be out of range.

        month_index is 0-based. Out-of-range fields roll over into the
        neighbouring unit instead of being rejected:

            >>> CalendarInstant.from_fields(2023, 1, 29)  # Feb 29 -> Mar 1
            >>> CalendarInstant.from_fields(2024, 3, 0)   # Apr 0 -> Mar 31
            >>> CalendarInstant.from_fields(2024, 12, 1)  # month 12 -> 2025-01
        """
        carry_years, month_index = divmod(month_index, 12)
        first = first_of_month_ordinal(year + carry_years, month_index + 1)
        days = first + day - 1
        return cls(
            millis=(days - _EPOCH_ORDINAL) * DAY
            + hour * HOUR
            + minute * MINUTE
            + second * SECOND
            + millisecond
        )

    @classmethod
    def now(cls) -> "CalendarInstant":
        return cls.from_datetime(clock.wall_clock())

    def to_datetime(self) -> datetime:
        return EPOCH + timedelta(milliseconds=self.millis)

    def shifted(self, millis: int) -> "CalendarInstant":
        """Return a new instant moved by a signed number of milliseconds."""
        return CalendarInstant(millis=self.millis + millis)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        """Month of year, 1-12."""
        return self.to_datetime().month

    @property
    def month_index(self) -> int:
        """Month of year, 0-11."""
        return self.to_datetime().month - 1

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.to_datetime().hour

    @property
    def minute(self) -> int:
        return self.to_datetime().minute

    @property
    def second(self) -> int:
        return self.to_datetime().second

    @property
    def millisecond(self) -> int:
        return self.millis % SECOND

    @property
    def weekday(self) -> int:
        """Day of week with Sunday = 0 through Saturday = 6."""
        return (self.to_datetime().weekday() + 1) % 7

    @property
    def day_start(self) -> "CalendarInstant":
        """Midnight at the start of this instant's calendar day."""
        return CalendarInstant(millis=self.millis - self.millis % DAY)
