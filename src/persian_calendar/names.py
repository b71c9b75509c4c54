from enum import IntEnum

PERSIAN_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)
DARI_MONTHS = (
    "حمل", "ثور", "جوزا", "سرطان", "اسد", "سنبله",
    "میزان", "عقرب", "قوس", "جدی", "دلو", "حوت",
)
PERSIAN_WEEKDAYS = (
    "شنبه", "یک‌شنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه",
)
SHORT_WEEKDAYS = ("ش", "ی", "د", "س", "چ", "پ", "ج")
AM_PM_NAMES = ("قبل از ظهر", "بعد از ظهر")
SHORT_AM_PM_NAMES = ("ق.ظ", "ب.ظ")


class Month(IntEnum):
    """Month of the Persian year, Farvardin = 1. Dari names are aliases."""

    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    HAMAL = 1
    SUR = 2
    JAUZA = 3
    SARATAN = 4
    ASAD = 5
    SONBOLEH = 6
    MIZAN = 7
    AQRAB = 8
    QOS = 9
    JADY = 10
    DOLV = 11
    HUT = 12

    def __str__(self) -> str:
        return PERSIAN_MONTHS[self - 1]

    @property
    def dari(self) -> str:
        return DARI_MONTHS[self - 1]


class Weekday(IntEnum):
    """Day of the Persian week, Shanbe (Saturday) = 0."""

    SHANBE = 0
    YEKSHANBE = 1
    DOSHANBE = 2
    SESHANBE = 3
    CHARSHANBE = 4
    PANJSHANBE = 5
    JOMEH = 6

    def __str__(self) -> str:
        return PERSIAN_WEEKDAYS[self]

    @property
    def short(self) -> str:
        return SHORT_WEEKDAYS[self]

    @classmethod
    def from_python(cls, weekday: int) -> "Weekday":
        """Map ``datetime.weekday()`` (Monday = 0) onto the Persian week."""
        return cls((weekday + 2) % 7)


class AmPm(IntEnum):
    AM = 0
    PM = 1

    def __str__(self) -> str:
        return AM_PM_NAMES[self]

    @property
    def short(self) -> str:
        return SHORT_AM_PM_NAMES[self]
