# holidaycal

Rules for working out when holidays fall, plus ready-made holiday
definitions for several European countries.

All calculations use the proleptic Gregorian calendar and plain
`datetime.date` values. A holiday is described once (a fixed day of the
month, the nth weekday of a month, the nth weekday counted from a given
date, or an offset from Western or Orthodox Easter) and can then be
evaluated for any year.

## Installation

```
pip install holidaycal
```

The package has no runtime dependencies.

## Core concepts

The `holidaycal.holiday` module provides:

- `Holiday`: a frozen dataclass describing a holiday: its name,
  description, observance type, the years it applies to
  (`start_year`, `end_year`, `except_years`), the fields its rule
  needs (`month`, `day`, `weekday`, `offset`, `calc_offset`, `julian`),
  any substitution rules (`observed`) and the rule itself (`func`).
- `ObservanceType`: what kind of day is observed: `UNKNOWN`, `PUBLIC`,
  `BANK`, `RELIGIOUS` or `OTHER`.
- `AltDay`: a substitution rule. When the holiday falls on weekday
  `day`, its observance moves by `offset` days.
- Rule functions that compute the day a holiday occurs in a year:
  - `calc_day_of_month`: a fixed date, such as 1 August;
  - `calc_weekday_offset`: the nth weekday of a month, counted from
    the start (positive `offset`) or from the end (negative `offset`);
  - `calc_weekday_from`: the nth weekday on or after the date given by
    `month` and `day` (or on or before it, for a negative `offset`);
  - `calc_easter_offset`: a number of days from Western Easter, or
    from Orthodox Easter when `julian` is set.
- Helpers `weekday_n(year, month, weekday, n)` and
  `weekday_n_from(start, weekday, n)` for finding the nth occurrence of
  a weekday. Both return `None` when `n` is 0.

Weekdays follow `datetime.date.weekday()`: Monday is 0 and Sunday is 6,
the same numbering as the constants in the `calendar` module.

`Holiday.calc(year)` returns a pair `(actual, observed)`. The two differ
when a substitution rule applies, for instance when a holiday falling on
a Sunday is observed on Monday. For a year before `start_year`, after
`end_year`, listed in `except_years`, or for a holiday without a rule,
both values are `None`. A non-zero `calc_offset` shifts the computed
date before substitution rules are applied.

`Holiday.clone(overrides)` returns a copy of a holiday. When
`overrides` is given, its name, description, type, start and end year,
excepted years and substitution rules replace the original wherever
they are set (non-empty, non-zero or not `None`).

## Example

```python
import calendar

from holidaycal.holiday import AltDay, Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

easter_monday = Holiday(
    name="Easter Monday",
    type=ObservanceType.PUBLIC,
    offset=1,
    func=calc_easter_offset,
)
print(easter_monday.calc(2024))
# (datetime.date(2024, 4, 1), datetime.date(2024, 4, 1))

new_year = Holiday(
    name="New Year's Day",
    month=1,
    day=1,
    observed=(AltDay(day=calendar.SUNDAY, offset=1),),
    func=calc_day_of_month,
)
print(new_year.calc(2023))
# (datetime.date(2023, 1, 1), datetime.date(2023, 1, 2))
```

Ready-made definitions are module-level constants:

```python
from holidaycal import gb

for holiday in gb.HOLIDAYS:
    actual, observed = holiday.calc(2022)
    if actual is not None:
        print(holiday.name, actual, observed)
```

## Included definitions

Each of these modules defines the holidays of one country as `Holiday`
constants, together with a `HOLIDAYS` list of the standard national
holidays:

| Module            | Coverage                                                          |
|-------------------|-------------------------------------------------------------------|
| `holidaycal.ch`   | Switzerland, plus `HOLIDAYS_ZH`, `HOLIDAYS_BE`, … for each canton |
| `holidaycal.fr`   | France                                                            |
| `holidaycal.gb`   | United Kingdom, with weekend substitution and one-off bank holidays |
| `holidaycal.gr`   | Greece, with movable feasts based on Orthodox Easter              |
| `holidaycal.hr`   | Croatia                                                           |
| `holidaycal.ie`   | Republic of Ireland                                               |
| `holidaycal.it`   | Italy                                                             |

`holidaycal.gb` also defines `SUMMER_HOLIDAY_SCOTLAND` (the first Monday
of August), which is not part of its `HOLIDAYS` list.

`holidaycal.ie` also provides `calc_if_first_falls_on_friday`, the rule
for a holiday held on the first day of the month when that day is a
Friday, and otherwise on the nth chosen weekday of the month (used for
Saint Brigid's Day).

## What the package does not do

- It computes holiday dates only. It has no business-day or
  working-hours calendar: it does not count work days between dates,
  add work days to a date, or check whether a moment falls within
  working hours.
- It has holiday definitions only for the countries listed above.
  Holidays for other places can be written with `Holiday` and the rule
  functions.
- It has no command-line tool.

## Running the tests

From a checkout of the source:

```
pip install ".[test]"
pytest
```