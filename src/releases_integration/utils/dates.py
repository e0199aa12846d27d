"""Date helpers for release data and reporting periods.

Release payloads carry dates either as ISO 8601 timestamps or in one of a few
display formats (``MM/DD/YYYY``, ``YYYY-Mon``). Reporting works in calendar
years and in fiscal years that start in July by default.

Months are 1-based throughout (January is 1).
"""

from __future__ import annotations

import calendar
import re
from datetime import UTC, date, datetime, timedelta
from typing import Any

from releases_integration.utils.parse_entity import resolve

YYYY_MM_DD = "%Y-%m-%d"
MM_DD_YYYY = "%m/%d/%Y"
YYYY_MMM = "%Y-%b"
MMM_DD = "%b %d"
MMM = "%b"

FISCAL_YEAR_PREFIX = "FY"
CALENDAR_YEAR_PREFIX = "CY"

DEFAULT_FISCAL_YEAR_START_MONTH = 7
DEFAULT_FIRST_AVAILABLE_YEAR = 2004
DEFAULT_AVAILABLE_YEARS_AHEAD = 2
DEFAULT_DATE_WINDOW_DAYS = 60

# Tried after ISO 8601, in order.
_DISPLAY_FORMATS: tuple[str, ...] = (MM_DD_YYYY, YYYY_MMM)
_DATE_CHECK_FORMATS: tuple[str, ...] = (MM_DD_YYYY, YYYY_MM_DD, YYYY_MMM)

_YEAR_LABEL = re.compile(r"[\w\s]*(\d\d)")

DateLike = str | date | datetime


class InvalidDateError(ValueError):
    """Raised when a value cannot be parsed as a date."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unrecognised date: {value!r}")
        self.value = value


def _normalise(value: datetime, utc_mode: bool) -> datetime:
    if not utc_mode:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _parse_string(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DISPLAY_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_date(value: DateLike, utc_mode: bool = True) -> datetime:
    """Parse a date from a string, ``date`` or ``datetime``.

    Strings are tried as ISO 8601 first, then as ``MM/DD/YYYY`` and ``YYYY-Mon``.

    Args:
        value: Value to parse.
        utc_mode: If true, the result is timezone-aware UTC. Naive values are
            taken to already be in UTC.

    Raises:
        InvalidDateError: If the value is not a recognised date.
    """

    if isinstance(value, datetime):
        parsed: datetime | None = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_string(value)
    else:
        parsed = None

    if parsed is None:
        raise InvalidDateError(value)
    return _normalise(parsed, utc_mode)


def current_date(fmt: str = YYYY_MM_DD) -> str:
    return date.today().strftime(fmt)


def is_valid_date(value: Any, fmt: str, strict: bool = True) -> bool:
    """Return True if ``value`` is a string matching ``fmt``.

    Non-strict checking tolerates surrounding whitespace.
    """

    if not isinstance(value, str):
        return False
    text = value if strict else value.strip()
    try:
        datetime.strptime(text, fmt)
    except ValueError:
        return False
    return True


def is_date(value: Any, strict: bool = True) -> bool:
    return any(is_valid_date(value, fmt, strict) for fmt in _DATE_CHECK_FORMATS)


def get_year(value: DateLike) -> int:
    return parse_date(value).year


def get_month(value: DateLike) -> int:
    return parse_date(value).month


def get_day_of_month(value: DateLike) -> int:
    return parse_date(value).day


def get_month_name(value: DateLike) -> str:
    return calendar.month_name[get_month(value)]


def month_by_short_name(name: str) -> int | None:
    """Return the month number for an abbreviated name such as ``"Mar"``."""

    for number in range(1, 13):
        if calendar.month_abbr[number] == name:
            return number
    return None


def short_month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    return calendar.month_abbr[month]


def month_number(month: int | str) -> int | None:
    """Return the month number for a month name (full or short) or number."""

    if isinstance(month, bool):
        return None
    if isinstance(month, int):
        return month if 1 <= month <= 12 else None
    wanted = month.strip().lower()
    for number in range(1, 13):
        if wanted in (calendar.month_name[number].lower(), calendar.month_abbr[number].lower()):
            return number
    return None


def end_of_month(month: int, year: int | None = None) -> int:
    """Return the last day of ``month`` (current year unless ``year`` is given)."""

    return calendar.monthrange(year or date.today().year, month)[1]


def all_months(short: bool = True) -> list[str]:
    names = calendar.month_abbr if short else calendar.month_name
    return list(names)[1:]


def _compare(first: Any, second: Any) -> tuple[datetime, datetime] | None:
    if is_date(first) and is_date(second):
        return parse_date(first), parse_date(second)
    return None


def is_after(first: Any, second: Any) -> bool | None:
    """Return whether ``first`` is after ``second``, or None if either is not a date."""

    pair = _compare(first, second)
    return None if pair is None else pair[0] > pair[1]


def is_same_or_after(first: Any, second: Any) -> bool | None:
    pair = _compare(first, second)
    return None if pair is None else pair[0] >= pair[1]


def is_same_or_before(first: Any, second: Any) -> bool | None:
    pair = _compare(first, second)
    return None if pair is None else pair[0] <= pair[1]


def format_date(value: DateLike, fmt: str) -> str:
    return parse_date(value).strftime(fmt)


def to_iso_format(value: DateLike) -> str:
    return format_date(value, YYYY_MM_DD)


def to_month_day_year_format(value: DateLike, utc_mode: bool = True) -> str:
    return parse_date(value, utc_mode).strftime(MM_DD_YYYY)


def to_month_day_format(month: int, day: int) -> str:
    # 2000 is a leap year, so Feb 29 formats.
    return date(2000, month, day).strftime(MMM_DD)


def available_years(
    years_ahead: int = DEFAULT_AVAILABLE_YEARS_AHEAD,
    first_year: int = DEFAULT_FIRST_AVAILABLE_YEAR,
) -> list[int]:
    """Return selectable report years, newest first."""

    last_year = date.today().year + years_ahead - 1
    return list(range(last_year, first_year - 1, -1))


def _as_year(year: int | str) -> int:
    if isinstance(year, str):
        return int(year.strip())
    return int(year)


def fiscal_year_to_date_range(
    year: int | str,
    start_month: int = DEFAULT_FISCAL_YEAR_START_MONTH,
) -> tuple[str, str]:
    """Return the first and last day of a fiscal year as ``MM/DD/YYYY``.

    Fiscal year N ends in calendar year N. With the default July start, FY 2021
    runs from 07/01/2020 to 06/30/2021.
    """

    fiscal_year = _as_year(year)
    start_year = fiscal_year - 1 if start_month > 1 else fiscal_year
    date_from = date(start_year, start_month, 1)
    date_to = date(start_year + 1, start_month, 1) - timedelta(days=1)
    return date_from.strftime(MM_DD_YYYY), date_to.strftime(MM_DD_YYYY)


def calendar_year_to_date_range(year: int | str) -> tuple[str, str]:
    calendar_year = _as_year(year)
    return (
        date(calendar_year, 1, 1).strftime(MM_DD_YYYY),
        date(calendar_year, 12, 31).strftime(MM_DD_YYYY),
    )


def is_fiscal_year(label: Any) -> bool:
    return isinstance(label, str) and label.startswith(FISCAL_YEAR_PREFIX)


def is_calendar_year(label: Any) -> bool:
    return isinstance(label, str) and label.startswith(CALENDAR_YEAR_PREFIX)


def parse_year_from_label(label: Any) -> int | None:
    """Extract the year from a period label such as ``"FY 21"`` (gives 2021)."""

    if not isinstance(label, str):
        return None
    digits = resolve(lambda: _YEAR_LABEL.search(label).group(1))  # type: ignore[union-attr]
    if digits is None:
        return None
    return int("20" + digits)


def date_range_dates(start: DateLike, end: DateLike) -> list[str]:
    """Return every day from ``start`` to ``end`` inclusive, as ``MM/DD/YYYY``."""

    current = parse_date(start)
    last = parse_date(end)
    dates: list[str] = []
    while current <= last:
        dates.append(current.strftime(MM_DD_YYYY))
        current += timedelta(days=1)
    return dates


def date_range_years(start: DateLike, end: DateLike) -> list[int]:
    return list(range(get_year(start), get_year(end) + 1))


def date_range_subtract_from_now(days: int = DEFAULT_DATE_WINDOW_DAYS) -> dict[str, str]:
    """Return a window covering the last ``days`` days up to today."""

    date_to = date.today()
    date_from = date_to - timedelta(days=days)
    iso_from = date_from.strftime(YYYY_MM_DD)
    iso_to = date_to.strftime(YYYY_MM_DD)
    return {
        "date_from": iso_from,
        "date_to": iso_to,
        "label": f"{iso_from} - {iso_to}",
    }


def diff_days(date_to: DateLike, date_from: DateLike) -> int:
    """Return the whole days between two dates, truncated toward zero."""

    return int((parse_date(date_to) - parse_date(date_from)) / timedelta(days=1))
