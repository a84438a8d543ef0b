"""Holiday definitions for the Republic of Ireland."""

import calendar
from datetime import date
from typing import Optional

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
    weekday_n,
)


def calc_if_first_falls_on_friday(h: Holiday, year: int) -> Optional[date]:
    """The 1st of the month if it is a Friday, else the n-th weekday of the month."""
    first_friday = weekday_n(year, h.month, calendar.FRIDAY, 1)
    if first_friday.day == 1:
        return first_friday
    return weekday_n(year, h.month, h.weekday, h.offset)


def _first_monday(name: str, month: int) -> Holiday:
    return Holiday(
        name=name,
        month=month,
        weekday=calendar.MONDAY,
        offset=1,
        func=calc_weekday_offset,
    )


# New Year's Day on 1-Jan
NEW_YEAR = Holiday(
    name="New Year's Day",
    type=ObservanceType.PUBLIC,
    month=1,
    day=1,
    func=calc_day_of_month,
)

# Saint Brigid's Day: 1-Feb if a Friday, otherwise the first Monday of February
SAINT_BRIGID_DAY = Holiday(
    name="Saint Brigid’s Day",
    month=2,
    weekday=calendar.MONDAY,
    offset=1,
    func=calc_if_first_falls_on_friday,
    start_year=2023,
)

# Extra public holiday on 18-Mar-2022
EXTRA_PUBLIC_HOLIDAY_2022 = Holiday(
    name="Extra Public Holiday 2022",
    month=3,
    day=18,
    start_year=2022,
    end_year=2022,
    func=calc_day_of_month,
)

# Saint Patrick's Day on 17-Mar
SAINT_PATRICK_DAY = Holiday(
    name="Saint Patrick's Day", month=3, day=17, func=calc_day_of_month
)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(
    name="Easter Monday", type=ObservanceType.PUBLIC, offset=1, func=calc_easter_offset
)

# First Monday in May
FIRST_MONDAY_MAY = _first_monday("First Monday in May", 5)

# First Monday in June
FIRST_MONDAY_JUNE = _first_monday("First Monday in June", 6)

# First Monday in August
FIRST_MONDAY_AUGUST = _first_monday("First Monday in August", 8)

# Last Monday in October
LAST_MONDAY_IN_OCTOBER = Holiday(
    name="Last Monday in October",
    type=ObservanceType.PUBLIC,
    month=10,
    weekday=calendar.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Christmas Day",
    type=ObservanceType.PUBLIC,
    month=12,
    day=25,
    func=calc_day_of_month,
)

# Saint Stephen's Day on 26-Dec
SAINT_STEPHEN_DAY = Holiday(
    name="Saint Stephen's Day",
    type=ObservanceType.PUBLIC,
    month=12,
    day=26,
    func=calc_day_of_month,
)

HOLIDAYS = [
    NEW_YEAR,
    EXTRA_PUBLIC_HOLIDAY_2022,
    SAINT_BRIGID_DAY,
    SAINT_PATRICK_DAY,
    EASTER_MONDAY,
    FIRST_MONDAY_MAY,
    FIRST_MONDAY_JUNE,
    FIRST_MONDAY_AUGUST,
    LAST_MONDAY_IN_OCTOBER,
    CHRISTMAS_DAY,
    SAINT_STEPHEN_DAY,
]