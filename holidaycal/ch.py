"""Holiday definitions for Switzerland, nationally and by canton."""

from functools import partial

from holidaycal.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_fixed = partial(Holiday, type=ObservanceType.PUBLIC, func=calc_day_of_month)
_easter = partial(Holiday, type=ObservanceType.PUBLIC, func=calc_easter_offset)

NEUJAHR = _fixed(name="Neujahrstag", month=1, day=1)
BERCHTOLDSTAG = _fixed(name="Berchtoldstag", type=ObservanceType.UNKNOWN, month=1, day=2)
HEILIGE_DREI_KOENIGE = _fixed(name="Heilige Drei Könige", month=1, day=6)
JOSEFSTAG = _fixed(name="Josefstag", type=ObservanceType.UNKNOWN, month=3, day=19)
KARFREITAG = _easter(name="Karfreitag", offset=-2)
OSTERMONTAG = _easter(name="Ostermontag", offset=1)
TAG_DER_ARBEIT = _fixed(name="Tag der Arbeit", month=5, day=1)
AUFFAHRT = _easter(name="Auffahrt", offset=39)
PFINGSTMONTAG = _easter(name="Pfingstmontag", offset=50)
FRONLEICHNAM = _easter(name="Fronleichnam", offset=60)
BUNDESFEIERTAG = _fixed(name="Bundesfeiertag", month=8, day=1)
MARIA_HIMMELFAHRT = _fixed(name="Mariä Himmelfahrt", month=8, day=15)
ALLERHEILIGEN = _fixed(name="Allerheiligen", month=11, day=1)
MARIA_EMPFANGNIS = _fixed(
    name="Mariä Empfängnis", type=ObservanceType.RELIGIOUS, month=12, day=8
)
WEIHNACHTSTAG = _fixed(name="Weihnachtstag", month=12, day=25)
ZWEITER_WEIHNACHTSFEIERTAG = _fixed(name="Zweiter Weihnachtsfeiertag", month=12, day=26)

# Short codes used to spell out the cantonal lists below.
_CODES = {
    "NJ": NEUJAHR,
    "BT": BERCHTOLDSTAG,
    "HK": HEILIGE_DREI_KOENIGE,
    "JT": JOSEFSTAG,
    "KF": KARFREITAG,
    "OM": OSTERMONTAG,
    "TA": TAG_DER_ARBEIT,
    "AF": AUFFAHRT,
    "PM": PFINGSTMONTAG,
    "FL": FRONLEICHNAM,
    "BF": BUNDESFEIERTAG,
    "MH": MARIA_HIMMELFAHRT,
    "AH": ALLERHEILIGEN,
    "ME": MARIA_EMPFANGNIS,
    "WT": WEIHNACHTSTAG,
    "ZW": ZWEITER_WEIHNACHTSFEIERTAG,
}


def _canton(codes: str) -> list[Holiday]:
    return [_CODES[code] for code in codes.split()]


HOLIDAYS = _canton("NJ BT HK JT KF OM TA AF PM FL BF MH ME WT ZW")

HOLIDAYS_ZH = _canton("NJ KF OM TA AF PM BF WT ZW")  # Zurich
HOLIDAYS_BE = _canton("NJ BT KF OM AF PM BF WT ZW")  # Bern
HOLIDAYS_LU = _canton("NJ JT KF AF FL BF MH AH ME WT ZW")  # Lucerne
HOLIDAYS_UR = _canton("NJ HK JT KF OM AF PM FL BF MH AH ME WT ZW")  # Uri
HOLIDAYS_SZ = _canton("NJ HK JT KF OM AF PM FL BF MH AH ME WT ZW")  # Schwyz
HOLIDAYS_OW = _canton("NJ KF AF FL BF MH AH ME WT")  # Obwalden
HOLIDAYS_NW = _canton("NJ JT KF AF FL BF MH AH ME WT")  # Nidwalden
HOLIDAYS_GL = _canton("NJ KF OM AF PM BF AH WT ZW")  # Glarus
HOLIDAYS_ZG = _canton("NJ KF OM AF PM BF AH WT ZW")  # Zug
HOLIDAYS_FR = _canton("NJ KF TA AF FL BF MH AH WT")  # Fribourg
HOLIDAYS_SO = _canton("NJ KF TA AF PM FL BF MH AH WT ZW")  # Solothurn
HOLIDAYS_BS = _canton("NJ KF OM TA AF PM BF WT ZW")  # Basel-Stadt
HOLIDAYS_BL = _canton("NJ KF OM TA AF PM FL BF MH WT ZW")  # Basel-Landschaft
HOLIDAYS_SH = _canton("NJ KF OM TA AF PM BF WT ZW")  # Schaffhausen
HOLIDAYS_AR = _canton("NJ KF OM AF PM BF WT ZW")  # Appenzell Ausserrhoden
HOLIDAYS_AI = _canton("NJ KF OM AF PM FL BF MH AH ME WT ZW")  # Appenzell Innerrhoden
HOLIDAYS_SG = _canton("NJ KF OM AF PM BF AH WT ZW")  # St. Gallen
HOLIDAYS_GR = _canton("NJ HK JT KF OM AF PM FL BF MH AH ME WT ZW")  # Grisons
HOLIDAYS_AG = _canton("NJ BT KF OM AF PM FL BF MH AH ME WT ZW")  # Aargau
HOLIDAYS_TG = _canton("NJ BT KF OM TA AF PM BF WT ZW")  # Thurgau
HOLIDAYS_VD = _canton("NJ BT KF OM AF PM BF WT")  # Vaud
HOLIDAYS_TI = _canton("NJ HK JT OM TA AF PM FL BF MH AH ME WT ZW")  # Ticino
HOLIDAYS_VS = _canton("NJ JT AF FL BF MH AH ME WT")  # Valais
HOLIDAYS_NE = _canton("NJ KF TA AF FL BF WT")  # Neuchâtel
HOLIDAYS_GE = _canton("NJ KF OM AF PM FL BF WT")  # Geneva
HOLIDAYS_JU = _canton("NJ BT KF OM TA AF PM FL BF MH AH WT")  # Jura