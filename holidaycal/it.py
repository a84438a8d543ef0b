"""Holiday definitions for Italy."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(
        name=name,
        type=ObservanceType.PUBLIC,
        month=month,
        day=day,
        func=calc_day_of_month,
    )


# New Year's Day on 1-Jan
CAPODANNO = _fixed("Capodanno", 1, 1)

# Epiphany on 6-Jan
EPIFANIA = _fixed("Epifania", 1, 6)

# Easter Monday, the day after Easter
PASQUETTA = Holiday(
    name="Pasquetta", type=ObservanceType.PUBLIC, offset=1, func=calc_easter_offset
)

# Liberation Day on 25-Apr
FESTA_DELLA_LIBERAZIONE = _fixed("Festa della Liberazione", 4, 25)

# Labour Day on 1-May
FESTA_DEL_LAVORO = _fixed("Festa del Lavoro", 5, 1)

# Republic Day on 2-Jun
FESTA_DELLA_REPUBBLICA = _fixed("Festa della Repubblica", 6, 2)

# Assumption of Mary on 15-Aug
ASSUNZIONE = _fixed("Assunzione", 8, 15)

# All Saints' Day on 1-Nov
TUTTI_I_SANTI = _fixed("Tutti i santi", 11, 1)

# Immaculate Conception on 8-Dec
IMMACOLATA = _fixed("Immacolata Concezione", 12, 8)

# Christmas Day on 25-Dec
NATALE = _fixed("Natale", 12, 25)

# Saint Stephen's Day on 26-Dec
SANTO_STEFANO = _fixed("Santo Stefano", 12, 26)

HOLIDAYS = [
    CAPODANNO,
    EPIFANIA,
    PASQUETTA,
    FESTA_DELLA_LIBERAZIONE,
    FESTA_DEL_LAVORO,
    FESTA_DELLA_REPUBBLICA,
    ASSUNZIONE,
    TUTTI_I_SANTI,
    IMMACOLATA,
    NATALE,
    SANTO_STEFANO,
]