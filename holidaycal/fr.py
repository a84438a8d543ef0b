"""Holiday definitions for France."""

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


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(
        name=name, type=ObservanceType.PUBLIC, offset=offset, func=calc_easter_offset
    )


# New Year's Day on 1-Jan
NOUVEL_AN = _fixed("Nouvel an", 1, 1)

# Easter Monday, the day after Easter
LUNDI_DE_PAQUES = _easter("Lundi de Pâques", 1)

# Labour Day on 1-May
FETE_DU_TRAVAIL = _fixed("Fête du Travail", 5, 1)

# Victory in Europe Day on 8-May
FETE_DE_LA_VICTOIRE = _fixed("Fête de la Victoire", 5, 8)

# Ascension Day, the 39th day after Easter
ASCENSION = _easter("Ascension", 39)

# Pentecost Monday, the day after Pentecost (50 days after Easter)
LUNDI_DE_PENTECOTE = _easter("Lundi de Pentecôte", 50)

# Bastille Day on 14-Jul
FETE_NATIONALE = _fixed("Fête Nationale", 7, 14)

# Assumption of Mary on 15-Aug
ASSOMPTION = _fixed("Assomption", 8, 15)

# All Saints' Day on 1-Nov
TOUSSAINT = _fixed("Toussaint", 11, 1)

# Armistice Day on 11-Nov
ARMISTICE_1918 = _fixed("Armistice de 1918", 11, 11)

# Christmas Day on 25-Dec
NOEL = _fixed("Noël", 12, 25)

HOLIDAYS = [
    NOUVEL_AN,
    LUNDI_DE_PAQUES,
    FETE_DU_TRAVAIL,
    FETE_DE_LA_VICTOIRE,
    ASCENSION,
    LUNDI_DE_PENTECOTE,
    FETE_NATIONALE,
    ASSOMPTION,
    TOUSSAINT,
    ARMISTICE_1918,
    NOEL,
]