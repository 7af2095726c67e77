"""
Western tropical zodiac lookup.

Maps a birth (month, day) to one of twelve fixed date-range sun signs.
There is no ephemeris here: sign boundaries are the conventional calendar
dates and do not shift from year to year.
"""

from dataclasses import dataclass


# ============================================================
# CONSTANTS
# ============================================================

@dataclass(frozen=True)
class ZodiacSign:
    name: str
    symbol: str
    element: str  # "Fire", "Earth", "Air" or "Water"
    start: tuple  # (month, day), inclusive
    end: tuple    # (month, day), inclusive

    @property
    def wraps_year(self) -> bool:
        """True for the one sign that spans December into January."""
        return self.start[0] > self.end[0]

    def contains(self, month: int, day: int) -> bool:
        if self.wraps_year:
            # Capricorn: tested as two sub-ranges, Dec 22 onward and up to Jan 19
            start_month, start_day = self.start
            end_month, end_day = self.end
            return (month == start_month and day >= start_day) or \
                   (month == end_month and day <= end_day)
        return self.start <= (month, day) <= self.end

    def to_dict(self):
        return {
            "name": self.name,
            "symbol": self.symbol,
            "element": self.element,
            "start": list(self.start),
            "end": list(self.end),
        }


# Calendar order starting at the vernal equinox
ZODIAC_SIGNS = (
    ZodiacSign("Aries", "♈", "Fire", (3, 21), (4, 19)),
    ZodiacSign("Taurus", "♉", "Earth", (4, 20), (5, 20)),
    ZodiacSign("Gemini", "♊", "Air", (5, 21), (6, 20)),
    ZodiacSign("Cancer", "♋", "Water", (6, 21), (7, 22)),
    ZodiacSign("Leo", "♌", "Fire", (7, 23), (8, 22)),
    ZodiacSign("Virgo", "♍", "Earth", (8, 23), (9, 22)),
    ZodiacSign("Libra", "♎", "Air", (9, 23), (10, 22)),
    ZodiacSign("Scorpio", "♏", "Water", (10, 23), (11, 21)),
    ZodiacSign("Sagittarius", "♐", "Fire", (11, 22), (12, 21)),
    ZodiacSign("Capricorn", "♑", "Earth", (12, 22), (1, 19)),
    ZodiacSign("Aquarius", "♒", "Air", (1, 20), (2, 18)),
    ZodiacSign("Pisces", "♓", "Water", (2, 19), (3, 20)),
)

SIGN_BY_NAME = {s.name: s for s in ZODIAC_SIGNS}


# ============================================================
# SIGN LOOKUP
# ============================================================

def compute_zodiac(month: int, day: int) -> ZodiacSign:
    """
    Return the sun sign whose date range contains (month, day).

    Signs are scanned in table order and the first match wins. The day is
    not validated; when nothing matches (e.g. month 13) the first sign,
    Aries, is returned.
    """
    for sign in ZODIAC_SIGNS:
        if sign.contains(month, day):
            return sign
    return ZODIAC_SIGNS[0]


def sign_by_name(name: str) -> ZodiacSign:
    """Look up a sign by its English name."""
    sign = SIGN_BY_NAME.get(name)
    if sign is None:
        raise ValueError(f"Unknown zodiac sign: {name!r}. "
                         f"Options: {list(SIGN_BY_NAME.keys())}")
    return sign
