"""Holiday definitions for the United Kingdom."""

import calendar

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

# Standard UK weekend substitution: Saturdays and Sundays move to Monday.
_WEEKEND_ALT = (
    AltDay(day=calendar.SATURDAY, offset=2),
    AltDay(day=calendar.SUNDAY, offset=1),
)

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(
    name="New Year's Day",
    type=ObservanceType.BANK,
    month=1,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Good Friday, two days before Easter
GOOD_FRIDAY = Holiday(
    name="Good Friday", type=ObservanceType.BANK, offset=-2, func=calc_easter_offset
)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(
    name="Easter Monday", type=ObservanceType.BANK, offset=1, func=calc_easter_offset
)

# Early May bank holiday on the first Monday of May
EARLY_MAY = Holiday(
    name="Early May",
    type=ObservanceType.BANK,
    month=5,
    weekday=calendar.MONDAY,
    offset=1,
    func=calc_weekday_offset,
    except_years=(2020,),
)

# VE Day, the 75th anniversary of the end of WWII
VE_DAY = Holiday(
    name="VE Day",
    type=ObservanceType.BANK,
    month=5,
    day=8,
    func=calc_day_of_month,
    start_year=2020,
    end_year=2020,
)

# Coronation of King Charles III on 8-May-2023
CORONATION_DAY = Holiday(
    name="Coronation of King Charles III",
    type=ObservanceType.BANK,
    month=5,
    day=8,
    func=calc_day_of_month,
    start_year=2023,
    end_year=2023,
)

# Spring Bank Holiday on the last Monday of May
SPRING_HOLIDAY = Holiday(
    name="Spring Bank Holiday",
    type=ObservanceType.BANK,
    month=5,
    weekday=calendar.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
    except_years=(2022,),
)

# Spring Bank Holiday in 2022 only, on 2-Jun
SPRING_HOLIDAY_2022 = Holiday(
    name="Spring Bank Holiday",
    type=ObservanceType.BANK,
    month=6,
    day=2,
    func=calc_day_of_month,
    start_year=2022,
    end_year=2022,
)

# Platinum Jubilee Bank Holiday in 2022 only, on 3-Jun
PLATINUM_JUBILEE = Holiday(
    name="Platinum Jubilee Bank Holiday",
    type=ObservanceType.BANK,
    month=6,
    day=3,
    func=calc_day_of_month,
    start_year=2022,
    end_year=2022,
)

# Summer Bank Holiday in Scotland on the first Monday of August
SUMMER_HOLIDAY_SCOTLAND = Holiday(
    name="Summer Bank Holiday",
    type=ObservanceType.BANK,
    month=8,
    weekday=calendar.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Summer Bank Holiday on the last Monday of August
SUMMER_HOLIDAY = Holiday(
    name="Summer Bank Holiday",
    type=ObservanceType.BANK,
    month=8,
    weekday=calendar.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Christmas Day",
    type=ObservanceType.BANK,
    month=12,
    day=25,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Boxing Day on 26-Dec
BOXING_DAY = Holiday(
    name="Boxing Day",
    type=ObservanceType.BANK,
    month=12,
    day=26,
    observed=(
        AltDay(day=calendar.SATURDAY, offset=2),
        AltDay(day=calendar.SUNDAY, offset=2),
        AltDay(day=calendar.MONDAY, offset=1),
    ),
    func=calc_day_of_month,
)

HOLIDAYS = [
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    EARLY_MAY,
    VE_DAY,
    CORONATION_DAY,
    SPRING_HOLIDAY,
    SPRING_HOLIDAY_2022,
    PLATINUM_JUBILEE,
    SUMMER_HOLIDAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
]