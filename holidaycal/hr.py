"""Holiday definitions for Croatia."""

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
NOVA_GODINA = _fixed("Nova godina", 1, 1)

# Epiphany on 6-Jan
SVETA_TRI_KRALJA = _fixed("Sveta tri kralja", 1, 6)

# Easter Sunday
USKRS = _easter("Uskrs", 0)

# Easter Monday
USKRSNJI_PONEDJELJAK = _easter("Uskrsni ponedjeljak", 1)

# Labour Day on 1-May
PRAZNIK_RADA = _fixed("Praznik rada", 5, 1)

# Statehood Day on 30-May
DAN_DRZAVNOSTI = _fixed("Dan državnosti", 5, 30)

# Corpus Christi, the 60th day after Easter
TIJELOVO = _easter("Tijelovo", 60)

# Anti-Fascist Struggle Day on 22-Jun
DAN_ANTIFASISTICKE_BORBE = _fixed("Dan antifašističke borbe", 6, 22)

# Victory and Homeland Thanksgiving Day on 5-Aug
DAN_POBJEDE_I_DOMOVINSKE_ZAHVALNOSTI = _fixed("Dan pobjede i domovinske zahvalnosti", 8, 5)

# Assumption of Mary on 15-Aug
VELIKA_GOSPA = _fixed("Velika Gospa", 8, 15)

# All Saints' Day on 1-Nov
DAN_SVIH_SVETIH = _fixed("Dan svih svetih", 11, 1)

# Remembrance Day for the victims of the Homeland War on 18-Nov
DAN_SJECANJA_NA_ZRTVE_DOMOVINSKOG_RATA = _fixed(
    "Dan sjećanja na žrtve Domovinskog rata", 11, 18
)

# Christmas Day on 25-Dec
BOZIC = _fixed("Božić", 12, 25)

# Saint Stephen's Day on 26-Dec
SVETI_STJEPAN = _fixed("Sveti Stjepan", 12, 26)

HOLIDAYS = [
    NOVA_GODINA,
    SVETA_TRI_KRALJA,
    USKRS,
    USKRSNJI_PONEDJELJAK,
    PRAZNIK_RADA,
    DAN_DRZAVNOSTI,
    TIJELOVO,
    DAN_ANTIFASISTICKE_BORBE,
    DAN_POBJEDE_I_DOMOVINSKE_ZAHVALNOSTI,
    VELIKA_GOSPA,
    DAN_SVIH_SVETIH,
    DAN_SJECANJA_NA_ZRTVE_DOMOVINSKOG_RATA,
    BOZIC,
    SVETI_STJEPAN,
]