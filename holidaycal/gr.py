"""Holiday definitions for Greece."""

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


def _orthodox_easter(name: str, offset: int) -> Holiday:
    return Holiday(
        name=name,
        type=ObservanceType.PUBLIC,
        offset=offset,
        julian=True,
        func=calc_easter_offset,
    )


# New Year's Day on 1-Jan
PROTOXRONIA = _fixed("Xristougenna", 1, 1)

# Epiphany on 6-Jan
THEOPHANIA = _fixed("Θεοφάνεια", 1, 6)

# Clean Monday, the first day of Lent
KATHARA_DEFTERA = _orthodox_easter("Καθαρά Δευτέρα", -48)

# Independence Day on 25-Mar
IKOSTI_PEMPTI_MARTIOU = _fixed("Εικοστή Πέμπτη Μαρτίου", 3, 25)

# Good Friday, two days before Orthodox Easter
MEGALI_PARASKEVI = _orthodox_easter("Μεγάλη Παρασκευή", -2)

# Easter Monday, the day after Orthodox Easter
DEFTERA_PASCHA = _orthodox_easter("Δευτέρα του Πάσχα", 1)

# Labour Day on 1-May
ERGATIKI_PROTOMAGIA = _fixed("Εργατική Πρωτομαγιά", 5, 1)

# Whit Monday, the day after Orthodox Pentecost
AGIOU_PREVMATOS = _orthodox_easter("Αγίου Πνεύματος", 50)

# Dormition of the Mother of God on 15-Aug
KIMISI_TIS_THEOTOKOU = _fixed("Κοίμηση της Θεοτόκου", 8, 15)

# Ochi Day on 28-Oct
IMERA_TOU_OCHI = _fixed("Ημέρα του Όχι", 10, 28)

# Christmas Day on 25-Dec
CHRISTOUGENNA = _fixed("Χριστούγεννα", 12, 25)

# Synaxis of the Theotokos on 26-Dec
SINAXIS_YPERAGIAS_THEOTOKOU = _fixed("Σύναξις Υπεραγίας Θεοτόκου Μαρίας", 12, 26)

HOLIDAYS = [
    PROTOXRONIA,
    THEOPHANIA,
    KATHARA_DEFTERA,
    IKOSTI_PEMPTI_MARTIOU,
    MEGALI_PARASKEVI,
    DEFTERA_PASCHA,
    ERGATIKI_PROTOMAGIA,
    AGIOU_PREVMATOS,
    KIMISI_TIS_THEOTOKOU,
    IMERA_TOU_OCHI,
    CHRISTOUGENNA,
    SINAXIS_YPERAGIAS_THEOTOKOU,
]