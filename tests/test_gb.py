from datetime import date

import pytest

from holidaycal import gb
from holidaycal.holiday import Holiday


def _d(y, m, d):
    return date(y, m, d)


NONE = (None, None)

CASES = [
    (gb.NEW_YEAR, 2015, (_d(2015, 1, 1), _d(2015, 1, 1))),
    (gb.NEW_YEAR, 2016, (_d(2016, 1, 1), _d(2016, 1, 1))),
    (gb.NEW_YEAR, 2017, (_d(2017, 1, 1), _d(2017, 1, 2))),
    (gb.NEW_YEAR, 2018, (_d(2018, 1, 1), _d(2018, 1, 1))),
    (gb.NEW_YEAR, 2019, (_d(2019, 1, 1), _d(2019, 1, 1))),
    (gb.NEW_YEAR, 2020, (_d(2020, 1, 1), _d(2020, 1, 1))),
    (gb.NEW_YEAR, 2021, (_d(2021, 1, 1), _d(2021, 1, 1))),
    (gb.NEW_YEAR, 2022, (_d(2022, 1, 1), _d(2022, 1, 3))),
    (gb.GOOD_FRIDAY, 2015, (_d(2015, 4, 3), _d(2015, 4, 3))),
    (gb.GOOD_FRIDAY, 2016, (_d(2016, 3, 25), _d(2016, 3, 25))),
    (gb.GOOD_FRIDAY, 2017, (_d(2017, 4, 14), _d(2017, 4, 14))),
    (gb.GOOD_FRIDAY, 2018, (_d(2018, 3, 30), _d(2018, 3, 30))),
    (gb.GOOD_FRIDAY, 2019, (_d(2019, 4, 19), _d(2019, 4, 19))),
    (gb.GOOD_FRIDAY, 2020, (_d(2020, 4, 10), _d(2020, 4, 10))),
    (gb.GOOD_FRIDAY, 2021, (_d(2021, 4, 2), _d(2021, 4, 2))),
    (gb.GOOD_FRIDAY, 2022, (_d(2022, 4, 15), _d(2022, 4, 15))),
    (gb.EASTER_MONDAY, 2015, (_d(2015, 4, 6), _d(2015, 4, 6))),
    (gb.EASTER_MONDAY, 2016, (_d(2016, 3, 28), _d(2016, 3, 28))),
    (gb.EASTER_MONDAY, 2017, (_d(2017, 4, 17), _d(2017, 4, 17))),
    (gb.EASTER_MONDAY, 2018, (_d(2018, 4, 2), _d(2018, 4, 2))),
    (gb.EASTER_MONDAY, 2019, (_d(2019, 4, 22), _d(2019, 4, 22))),
    (gb.EASTER_MONDAY, 2020, (_d(2020, 4, 13), _d(2020, 4, 13))),
    (gb.EASTER_MONDAY, 2021, (_d(2021, 4, 5), _d(2021, 4, 5))),
    (gb.EASTER_MONDAY, 2022, (_d(2022, 4, 18), _d(2022, 4, 18))),
    (gb.EARLY_MAY, 2015, (_d(2015, 5, 4), _d(2015, 5, 4))),
    (gb.EARLY_MAY, 2016, (_d(2016, 5, 2), _d(2016, 5, 2))),
    (gb.EARLY_MAY, 2017, (_d(2017, 5, 1), _d(2017, 5, 1))),
    (gb.EARLY_MAY, 2018, (_d(2018, 5, 7), _d(2018, 5, 7))),
    (gb.EARLY_MAY, 2019, (_d(2019, 5, 6), _d(2019, 5, 6))),
    (gb.EARLY_MAY, 2020, NONE),
    (gb.EARLY_MAY, 2021, (_d(2021, 5, 3), _d(2021, 5, 3))),
    (gb.EARLY_MAY, 2022, (_d(2022, 5, 2), _d(2022, 5, 2))),
    (gb.VE_DAY, 2015, NONE),
    (gb.VE_DAY, 2016, NONE),
    (gb.VE_DAY, 2017, NONE),
    (gb.VE_DAY, 2018, NONE),
    (gb.VE_DAY, 2019, NONE),
    (gb.VE_DAY, 2020, (_d(2020, 5, 8), _d(2020, 5, 8))),
    (gb.VE_DAY, 2021, NONE),
    (gb.VE_DAY, 2022, NONE),
    (gb.CORONATION_DAY, 2017, NONE),
    (gb.CORONATION_DAY, 2018, NONE),
    (gb.CORONATION_DAY, 2019, NONE),
    (gb.CORONATION_DAY, 2020, NONE),
    (gb.CORONATION_DAY, 2021, NONE),
    (gb.CORONATION_DAY, 2022, NONE),
    (gb.CORONATION_DAY, 2023, (_d(2023, 5, 8), _d(2023, 5, 8))),
    (gb.CORONATION_DAY, 2024, NONE),
    (gb.SPRING_HOLIDAY, 2015, (_d(2015, 5, 25), _d(2015, 5, 25))),
    (gb.SPRING_HOLIDAY, 2016, (_d(2016, 5, 30), _d(2016, 5, 30))),
    (gb.SPRING_HOLIDAY, 2017, (_d(2017, 5, 29), _d(2017, 5, 29))),
    (gb.SPRING_HOLIDAY, 2018, (_d(2018, 5, 28), _d(2018, 5, 28))),
    (gb.SPRING_HOLIDAY, 2019, (_d(2019, 5, 27), _d(2019, 5, 27))),
    (gb.SPRING_HOLIDAY, 2020, (_d(2020, 5, 25), _d(2020, 5, 25))),
    (gb.SPRING_HOLIDAY, 2021, (_d(2021, 5, 31), _d(2021, 5, 31))),
    (gb.SPRING_HOLIDAY, 2022, NONE),
    (gb.SPRING_HOLIDAY, 2023, (_d(2023, 5, 29), _d(2023, 5, 29))),
    (gb.SPRING_HOLIDAY_2022, 2021, NONE),
    (gb.SPRING_HOLIDAY_2022, 2022, (_d(2022, 6, 2), _d(2022, 6, 2))),
    (gb.SPRING_HOLIDAY_2022, 2023, NONE),
    (gb.PLATINUM_JUBILEE, 2021, NONE),
    (gb.PLATINUM_JUBILEE, 2022, (_d(2022, 6, 3), _d(2022, 6, 3))),
    (gb.PLATINUM_JUBILEE, 2023, NONE),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2015, (_d(2015, 8, 3), _d(2015, 8, 3))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2016, (_d(2016, 8, 1), _d(2016, 8, 1))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2017, (_d(2017, 8, 7), _d(2017, 8, 7))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2018, (_d(2018, 8, 6), _d(2018, 8, 6))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2019, (_d(2019, 8, 5), _d(2019, 8, 5))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2020, (_d(2020, 8, 3), _d(2020, 8, 3))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2021, (_d(2021, 8, 2), _d(2021, 8, 2))),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2022, (_d(2022, 8, 1), _d(2022, 8, 1))),
    (gb.SUMMER_HOLIDAY, 2015, (_d(2015, 8, 31), _d(2015, 8, 31))),
    (gb.SUMMER_HOLIDAY, 2016, (_d(2016, 8, 29), _d(2016, 8, 29))),
    (gb.SUMMER_HOLIDAY, 2017, (_d(2017, 8, 28), _d(2017, 8, 28))),
    (gb.SUMMER_HOLIDAY, 2018, (_d(2018, 8, 27), _d(2018, 8, 27))),
    (gb.SUMMER_HOLIDAY, 2019, (_d(2019, 8, 26), _d(2019, 8, 26))),
    (gb.SUMMER_HOLIDAY, 2020, (_d(2020, 8, 31), _d(2020, 8, 31))),
    (gb.SUMMER_HOLIDAY, 2021, (_d(2021, 8, 30), _d(2021, 8, 30))),
    (gb.SUMMER_HOLIDAY, 2022, (_d(2022, 8, 29), _d(2022, 8, 29))),
    (gb.CHRISTMAS_DAY, 2015, (_d(2015, 12, 25), _d(2015, 12, 25))),
    (gb.CHRISTMAS_DAY, 2016, (_d(2016, 12, 25), _d(2016, 12, 26))),
    (gb.CHRISTMAS_DAY, 2017, (_d(2017, 12, 25), _d(2017, 12, 25))),
    (gb.CHRISTMAS_DAY, 2018, (_d(2018, 12, 25), _d(2018, 12, 25))),
    (gb.CHRISTMAS_DAY, 2019, (_d(2019, 12, 25), _d(2019, 12, 25))),
    (gb.CHRISTMAS_DAY, 2020, (_d(2020, 12, 25), _d(2020, 12, 25))),
    (gb.CHRISTMAS_DAY, 2021, (_d(2021, 12, 25), _d(2021, 12, 27))),
    (gb.CHRISTMAS_DAY, 2022, (_d(2022, 12, 25), _d(2022, 12, 26))),
    (gb.BOXING_DAY, 2015, (_d(2015, 12, 26), _d(2015, 12, 28))),
    (gb.BOXING_DAY, 2016, (_d(2016, 12, 26), _d(2016, 12, 27))),
    (gb.BOXING_DAY, 2017, (_d(2017, 12, 26), _d(2017, 12, 26))),
    (gb.BOXING_DAY, 2018, (_d(2018, 12, 26), _d(2018, 12, 26))),
    (gb.BOXING_DAY, 2019, (_d(2019, 12, 26), _d(2019, 12, 26))),
    (gb.BOXING_DAY, 2020, (_d(2020, 12, 26), _d(2020, 12, 28))),
    (gb.BOXING_DAY, 2021, (_d(2021, 12, 26), _d(2021, 12, 28))),
    (gb.BOXING_DAY, 2022, (_d(2022, 12, 26), _d(2022, 12, 27))),
]


@pytest.mark.parametrize("holiday, year, want", CASES)
def test_holidays(holiday, year, want):
    assert Holiday.calc(holiday, year) == want


def test_observed_never_falls_on_weekend():
    for holiday in (gb.NEW_YEAR, gb.CHRISTMAS_DAY, gb.BOXING_DAY):
        for year in range(2000, 2040):
            _, observed = holiday.calc(year)
            assert observed.weekday() < 5


def test_scotland_summer_holiday_not_in_national_list():
    assert gb.SUMMER_HOLIDAY_SCOTLAND not in gb.HOLIDAYS
    assert gb.SUMMER_HOLIDAY in gb.HOLIDAYS
    assert gb.SUMMER_HOLIDAY_SCOTLAND.calc(2020) != gb.SUMMER_HOLIDAY.calc(2020)
    assert gb.SUMMER_HOLIDAY_SCOTLAND.calc(2020) == (_d(2020, 8, 3), _d(2020, 8, 3))