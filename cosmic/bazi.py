"""
BaZi (Four Pillars) computation engine.

Handles:
- Stem/branch cycle tables and their element mappings
- Gregorian date + hour to Year/Month/Day/Hour pillar conversion
- Element tally across the pillars and dominant element selection

The pillar rules here are the simplified CosmicBase rules: months follow the
Gregorian calendar (no solar-term boundaries) and the day cycle is counted
from a fixed reference date. Results must stay reproducible, since profiles,
share cards and NFT attributes are all derived from them.

Design principle: every function is total over integer input. Out-of-range
values (day=35, negative years) go through the same modular arithmetic and
produce a structurally valid result instead of an error.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from enum import Enum

from cosmic.astro_calendar import days_between


# ============================================================
# FUNDAMENTAL DATA STRUCTURES
# ============================================================

class Polarity(Enum):
    YANG = "yang"
    YIN = "yin"


class Element(Enum):
    # Declaration order is the canonical order used for tie-breaks.
    WOOD = "Wood"
    FIRE = "Fire"
    EARTH = "Earth"
    METAL = "Metal"
    WATER = "Water"

    @classmethod
    def lookup(cls, value) -> "Element | None":
        """Accept an Element or its name ("Fire", "fire"); None if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for element in cls:
                if element.value.lower() == value.strip().lower():
                    return element
        return None


ELEMENTS = tuple(Element)


@dataclass(frozen=True)
class HeavenlyStem:
    chinese: str
    pinyin: str
    korean: str
    element: Element
    polarity: Polarity
    index: int  # 0-9 in the cycle

    def __str__(self):
        return f"{self.chinese} {self.pinyin} ({self.polarity.value} {self.element.value})"


@dataclass(frozen=True)
class EarthlyBranch:
    chinese: str
    pinyin: str
    korean: str
    animal: str
    element: Element
    polarity: Polarity
    index: int  # 0-11 in the cycle

    def __str__(self):
        return f"{self.chinese} {self.pinyin} ({self.animal})"


@dataclass(frozen=True)
class Pillar:
    stem: HeavenlyStem
    branch: EarthlyBranch
    position: str  # "year", "month", "day", "hour"

    @property
    def element(self) -> Element:
        """The pillar's element is its stem's element."""
        return self.stem.element

    def __str__(self):
        return f"{self.stem.chinese}{self.branch.chinese} ({self.stem.pinyin} {self.branch.pinyin}, {self.element.value})"

    def to_dict(self):
        return {
            "position": self.position,
            "stem": self.stem.chinese,
            "branch": self.branch.chinese,
            "element": self.element.value,
            "stem_detail": {
                "pinyin": self.stem.pinyin,
                "korean": self.stem.korean,
                "element": self.stem.element.value,
                "polarity": self.stem.polarity.value,
            },
            "branch_detail": {
                "pinyin": self.branch.pinyin,
                "korean": self.branch.korean,
                "animal": self.branch.animal,
                "element": self.branch.element.value,
                "polarity": self.branch.polarity.value,
            },
            "combined": f"{self.stem.chinese}{self.branch.chinese}",
            "description": str(self),
        }


@dataclass(frozen=True)
class FourPillarsResult:
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    dominant_element: Element
    # Element -> int, all five present, sums to 8
    element_counts: MappingProxyType = field(hash=False)

    @property
    def pillars(self) -> tuple:
        return (self.year, self.month, self.day, self.hour)

    def to_dict(self):
        return {
            "year": self.year.to_dict(),
            "month": self.month.to_dict(),
            "day": self.day.to_dict(),
            "hour": self.hour.to_dict(),
            "dominant_element": self.dominant_element.value,
            "element_counts": {e.value: self.element_counts[e] for e in ELEMENTS},
        }


# ============================================================
# STEM AND BRANCH DEFINITIONS
# ============================================================

HEAVENLY_STEMS = (
    HeavenlyStem("甲", "Jia", "갑", Element.WOOD, Polarity.YANG, 0),
    HeavenlyStem("乙", "Yi", "을", Element.WOOD, Polarity.YIN, 1),
    HeavenlyStem("丙", "Bing", "병", Element.FIRE, Polarity.YANG, 2),
    HeavenlyStem("丁", "Ding", "정", Element.FIRE, Polarity.YIN, 3),
    HeavenlyStem("戊", "Wu", "무", Element.EARTH, Polarity.YANG, 4),
    HeavenlyStem("己", "Ji", "기", Element.EARTH, Polarity.YIN, 5),
    HeavenlyStem("庚", "Geng", "경", Element.METAL, Polarity.YANG, 6),
    HeavenlyStem("辛", "Xin", "신", Element.METAL, Polarity.YIN, 7),
    HeavenlyStem("壬", "Ren", "임", Element.WATER, Polarity.YANG, 8),
    HeavenlyStem("癸", "Gui", "계", Element.WATER, Polarity.YIN, 9),
)

EARTHLY_BRANCHES = (
    EarthlyBranch("子", "Zi", "자", "Rat", Element.WATER, Polarity.YANG, 0),
    EarthlyBranch("丑", "Chou", "축", "Ox", Element.EARTH, Polarity.YIN, 1),
    EarthlyBranch("寅", "Yin", "인", "Tiger", Element.WOOD, Polarity.YANG, 2),
    EarthlyBranch("卯", "Mao", "묘", "Rabbit", Element.WOOD, Polarity.YIN, 3),
    EarthlyBranch("辰", "Chen", "진", "Dragon", Element.EARTH, Polarity.YANG, 4),
    EarthlyBranch("巳", "Si", "사", "Snake", Element.FIRE, Polarity.YIN, 5),
    EarthlyBranch("午", "Wu", "오", "Horse", Element.FIRE, Polarity.YANG, 6),
    EarthlyBranch("未", "Wei", "미", "Goat", Element.EARTH, Polarity.YIN, 7),
    EarthlyBranch("申", "Shen", "신", "Monkey", Element.METAL, Polarity.YANG, 8),
    EarthlyBranch("酉", "You", "유", "Rooster", Element.METAL, Polarity.YIN, 9),
    EarthlyBranch("戌", "Xu", "술", "Dog", Element.EARTH, Polarity.YANG, 10),
    EarthlyBranch("亥", "Hai", "해", "Pig", Element.WATER, Polarity.YIN, 11),
)

# Lookup helpers
STEM_BY_CHINESE = {s.chinese: s for s in HEAVENLY_STEMS}
BRANCH_BY_CHINESE = {b.chinese: b for b in EARTHLY_BRANCHES}

# Clock hour -> branch index. Each branch spans two hours and the boundary
# falls on odd hours, so Zi (0) covers 23:00-00:59.
HOUR_BRANCH = {
    23: 0, 0: 0, 1: 1, 2: 1, 3: 2, 4: 2, 5: 3, 6: 3,
    7: 4, 8: 4, 9: 5, 10: 5, 11: 6, 12: 6, 13: 7, 14: 7,
    15: 8, 16: 8, 17: 9, 18: 9, 19: 10, 20: 10, 21: 11, 22: 11,
}

# Day index 0 (Jia Zi) of the simplified day cycle.
DAY_CYCLE_EPOCH = (1900, 1, 31)


# ============================================================
# PILLAR COMPUTATION
# ============================================================

def year_pillar(year: int) -> Pillar:
    """
    Compute the Year Pillar.

    Year 4 CE is Jia Zi, the start of both cycles, so (year - 4) indexes
    the stems mod 10 and the branches mod 12. The Gregorian year is used
    as-is: there is no Li Chun adjustment.
    """
    stem_index = (year - 4) % 10
    branch_index = (year - 4) % 12

    return Pillar(
        stem=HEAVENLY_STEMS[stem_index],
        branch=EARTHLY_BRANCHES[branch_index],
        position="year"
    )


def month_pillar(year_stem_index: int, month: int) -> Pillar:
    """
    Compute the Month Pillar from the year stem and the Gregorian month.

    The month stem follows the five-cycle rule: years whose stems share
    index mod 5 start their months on the same stem, (index mod 5) * 2.
    The branch is offset by one so January lands on Yin (Tiger) rather
    than Zi.

    Args:
        year_stem_index: index of the year's heavenly stem (0-9)
        month: Gregorian month, 1 = January
    """
    start_stem = (year_stem_index % 5) * 2
    stem_index = (start_stem + month - 1) % 10
    branch_index = (month + 1) % 12

    return Pillar(
        stem=HEAVENLY_STEMS[stem_index],
        branch=EARTHLY_BRANCHES[branch_index],
        position="month"
    )


def day_pillar(year: int, month: int, day: int) -> Pillar:
    """
    Compute the Day Pillar by counting whole days from the cycle epoch.

    The count is a plain calendar-day difference against 1900-01-31 (day
    index 0). It ignores time zones and solar terms. Overflowing day or
    month values roll forward the way the day-number arithmetic does, so
    (1990, 1, 35) is the same day as (1990, 2, 4).
    """
    diff_days = days_between(DAY_CYCLE_EPOCH, (year, month, day))
    stem_index = diff_days % 10
    branch_index = diff_days % 12

    return Pillar(
        stem=HEAVENLY_STEMS[stem_index],
        branch=EARTHLY_BRANCHES[branch_index],
        position="day"
    )


def hour_pillar(day_stem_index: int, hour: int) -> Pillar:
    """
    Compute the Hour Pillar using the Five Rats rule.

    The Zi hour of a day starts on stem (day_stem_index mod 5) * 2 and the
    stem advances with each branch. Hours missing from HOUR_BRANCH fall
    back to the Zi branch.

    Args:
        day_stem_index: index of the day's heavenly stem (0-9)
        hour: clock hour, 0-23
    """
    branch_index = HOUR_BRANCH.get(hour, 0)
    start_stem = (day_stem_index % 5) * 2
    stem_index = (start_stem + branch_index) % 10

    return Pillar(
        stem=HEAVENLY_STEMS[stem_index],
        branch=EARTHLY_BRANCHES[branch_index],
        position="hour"
    )


# ============================================================
# ELEMENT ANALYSIS
# ============================================================

def element_counts(pillars) -> dict:
    """
    Tally element presence across pillars.

    Each pillar contributes twice: once for its stem's element and once
    for its branch's element. All five elements are present in the result,
    in canonical order.
    """
    counts = {e: 0 for e in ELEMENTS}
    for pillar in pillars:
        counts[pillar.stem.element] += 1
        counts[pillar.branch.element] += 1
    return counts


def dominant_element(counts: dict) -> Element:
    """
    Pick the element with the highest count.

    Scans in canonical order (Wood, Fire, Earth, Metal, Water) and only
    replaces the current pick on a strictly greater count, so the first
    tied element wins.
    """
    dominant = ELEMENTS[0]
    for element in ELEMENTS[1:]:
        if counts.get(element, 0) > counts.get(dominant, 0):
            dominant = element
    return dominant


# ============================================================
# FULL CHART COMPUTATION
# ============================================================

def compute_four_pillars(year: int, month: int, day: int, hour: int) -> FourPillarsResult:
    """
    Compute the Four Pillars for a birth date and clock hour.

    No input validation happens here; callers check birth-data ranges
    before calling.

    Returns:
        FourPillarsResult with the four pillars, the five-element tally
        and the dominant element.
    """
    yp = year_pillar(year)
    mp = month_pillar(yp.stem.index, month)
    dp = day_pillar(year, month, day)
    hp = hour_pillar(dp.stem.index, hour)

    counts = element_counts([yp, mp, dp, hp])

    return FourPillarsResult(
        year=yp,
        month=mp,
        day=dp,
        hour=hp,
        dominant_element=dominant_element(counts),
        element_counts=MappingProxyType(counts),
    )


def pillar_from_dict(data: dict) -> Pillar:
    """Rebuild a Pillar from its to_dict() form."""
    try:
        stem = STEM_BY_CHINESE[data["stem"]]
        branch = BRANCH_BY_CHINESE[data["branch"]]
    except KeyError as e:
        raise ValueError(f"Unknown stem or branch in pillar data: {e}") from e
    return Pillar(stem=stem, branch=branch, position=data.get("position", ""))


def four_pillars_from_dict(data: dict) -> FourPillarsResult:
    """Rebuild a FourPillarsResult from its to_dict() form."""
    pillars = {pos: pillar_from_dict(data[pos]) for pos in ("year", "month", "day", "hour")}
    dominant = Element.lookup(data.get("dominant_element"))
    if dominant is None:
        raise ValueError(f"Unknown dominant element: {data.get('dominant_element')!r}")
    counts = element_counts(pillars.values())
    return FourPillarsResult(dominant_element=dominant,
                             element_counts=MappingProxyType(counts), **pillars)


# ============================================================
# TEST / VERIFICATION
# ============================================================

if __name__ == "__main__":
    print("=" * 60)
    print("Four Pillars: January 1, 1990, 12:00")
    print("=" * 60)

    chart = compute_four_pillars(1990, 1, 1, 12)
    for p in chart.pillars:
        print(f"  {p.position.capitalize():6s}: {p}")

    print(f"\nElement Counts:")
    for element, count in chart.element_counts.items():
        print(f"  {element.value:6s}: {count} {'█' * count}")

    print(f"\nDominant: {chart.dominant_element.value}")
    print(f"Expected: 庚午 丙寅 丙戌 甲午, dominant Fire")
