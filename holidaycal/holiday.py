"""Holidays and the rules used to work out when they fall.

A :class:`Holiday` describes when a holiday occurs and which years it is
observed in. Its ``func`` rule computes the expected date for a year, and
:meth:`Holiday.calc` then applies year limits, exception years, a fixed
offset and weekend substitution rules.

Dates are plain :class:`datetime.date` values. All calculations assume the
proleptic Gregorian calendar. A holiday that does not occur in a year is
reported as ``None``.

Weekdays follow :meth:`datetime.date.weekday`: Monday is 0 and Sunday is 6,
matching the constants in the :mod:`calendar` module.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import IntEnum
from typing import Callable, Optional

HolidayFn = Callable[["Holiday", int], Optional[date]]


class ObservanceType(IntEnum):
    """The kind of holiday or special day being observed."""

    UNKNOWN = 0  # not set or not applicable
    PUBLIC = 1  # public / national / regional holiday
    BANK = 2  # bank holiday
    RELIGIOUS = 3  # religious holiday
    OTHER = 4  # everything else (school, work, ...)


@dataclass(frozen=True)
class AltDay:
    """Moves an observance by ``offset`` days when it falls on weekday ``day``."""

    day: int
    offset: int


@dataclass(frozen=True)
class Holiday:
    """The type and occurrence rules of a holiday.

    Which of the calculation fields matter depends on the ``func`` rule.
    """

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    start_year: int = 0
    end_year: int = 0
    except_years: Optional[tuple[int, ...]] = None

    month: int = 0
    day: int = 0
    weekday: int = 0
    offset: int = 0
    calc_offset: int = 0
    julian: bool = False
    observed: Optional[tuple[AltDay, ...]] = None
    func: Optional[HolidayFn] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.except_years is not None:
            object.__setattr__(self, "except_years", tuple(self.except_years))
        if self.observed is not None:
            object.__setattr__(self, "observed", tuple(self.observed))

    def clone(self, overrides: Optional[Holiday] = None) -> Holiday:
        """Return a copy, taking set fields from ``overrides`` if given.

        Only name, description, type, start_year, end_year, except_years and
        observed are taken from ``overrides``; a field counts as set when it is
        non-empty, non-zero or not ``None``.
        """
        if overrides is None:
            return dataclasses.replace(self)

        changes: dict[str, object] = {}
        if overrides.name:
            changes["name"] = overrides.name
        if overrides.description:
            changes["description"] = overrides.description
        if overrides.type != ObservanceType.UNKNOWN:
            changes["type"] = overrides.type
        if overrides.start_year > 0:
            changes["start_year"] = overrides.start_year
        if overrides.end_year > 0:
            changes["end_year"] = overrides.end_year
        if overrides.except_years is not None:
            changes["except_years"] = overrides.except_years
        if overrides.observed is not None:
            changes["observed"] = overrides.observed
        return dataclasses.replace(self, **changes)

    def calc(self, year: int) -> tuple[Optional[date], Optional[date]]:
        """Return the actual and observed dates of the holiday in ``year``.

        Both are ``None`` when the holiday is not observed that year.
        """
        if (
            (self.start_year > 0 and year < self.start_year)
            or (self.end_year > 0 and year > self.end_year)
            or self.func is None
        ):
            return None, None
        if self.except_years and year in self.except_years:
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None
        if self.calc_offset:
            actual += timedelta(days=self.calc_offset)

        weekday = actual.weekday()
        for alt in self.observed or ():
            if alt.day == weekday:
                return actual, actual + timedelta(days=alt.offset)
        return actual, actual


def _make_date(year: int, month: int, day: int) -> date:
    """Build a date, letting ``day`` run past either end of the month."""
    return date(year, month, 1) + timedelta(days=day - 1)


def weekday_n_from(start: date, weekday: int, n: int) -> Optional[date]:
    """Return the ``n``-th ``weekday`` on or after ``start``.

    A negative ``n`` counts backwards, on or before ``start``. ``n == 0``
    gives ``None``.
    """
    if n == 0:
        return None
    if n > 0:
        diff = (weekday - start.weekday()) % 7
        return start + timedelta(days=diff + (n - 1) * 7)
    diff = (start.weekday() - weekday) % 7
    return start - timedelta(days=diff) + timedelta(days=(n + 1) * 7)


def weekday_n(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """Return the ``n``-th ``weekday`` of a month.

    A negative ``n`` counts from the end of the month: -1 is the last such
    weekday. ``n == 0`` gives ``None``.
    """
    if n > 0:
        return weekday_n_from(date(year, month, 1), weekday, n)
    if n < 0:
        last = _make_date(year, month, 1) + timedelta(days=31)
        last = last.replace(day=1) - timedelta(days=1)
        return weekday_n_from(last, weekday, n)
    return None


def calc_day_of_month(h: Holiday, year: int) -> date:
    """A holiday on a fixed day of a month, such as 5 November."""
    return _make_date(year, h.month, h.day)


def calc_weekday_offset(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the n-th weekday of a month, such as the third Wednesday of July."""
    return weekday_n(year, h.month, h.weekday, h.offset)


def calc_weekday_from(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the n-th given weekday counted from a starting date."""
    return weekday_n_from(_make_date(year, h.month, h.day), h.weekday, h.offset)


def calc_easter_offset(h: Holiday, year: int) -> date:
    """A holiday a fixed number of days from Easter.

    Western Easter uses the Meeus/Jones/Butcher algorithm; when ``h.julian``
    is set, Orthodox Easter uses the Meeus Julian algorithm converted to the
    Gregorian calendar.
    """
    if h.julian:
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        month = (d + e + 114) // 31
        day = (d + e + 114) % 31 + 1 + 13
    else:
        a = year % 19
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        hh = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        ll = (32 + 2 * e + 2 * i - hh - k) % 7
        m = (a + 11 * hh + 22 * ll) // 451
        month = (hh + ll - 7 * m + 114) // 31
        day = (hh + ll - 7 * m + 114) % 31 + 1

    return _make_date(year, month, day + h.offset)