"""
Compatibility scoring between two people.

Each person is reduced to their dominant element and sun sign. The element
score is a symmetric table lookup; the zodiac score looks up person2 in
person1's affinity list, so it is keyed by person1 only. The shipped
affinity table happens to be mutual, but a caller-supplied one need not be.
"""

import math
from dataclasses import dataclass
from typing import Optional

from cosmic.bazi import Element


# ============================================================
# AFFINITY TABLES
# ============================================================

ELEMENT_COMPAT = {
    Element.WOOD: {Element.WOOD: 70, Element.FIRE: 90, Element.EARTH: 40, Element.METAL: 30, Element.WATER: 85},
    Element.FIRE: {Element.WOOD: 90, Element.FIRE: 60, Element.EARTH: 85, Element.METAL: 40, Element.WATER: 30},
    Element.EARTH: {Element.WOOD: 40, Element.FIRE: 85, Element.EARTH: 70, Element.METAL: 90, Element.WATER: 50},
    Element.METAL: {Element.WOOD: 30, Element.FIRE: 40, Element.EARTH: 90, Element.METAL: 70, Element.WATER: 85},
    Element.WATER: {Element.WOOD: 85, Element.FIRE: 30, Element.EARTH: 50, Element.METAL: 85, Element.WATER: 70},
}

ZODIAC_COMPAT = {
    "Aries": ("Leo", "Sagittarius", "Gemini", "Aquarius"),
    "Taurus": ("Virgo", "Capricorn", "Cancer", "Pisces"),
    "Gemini": ("Libra", "Aquarius", "Aries", "Leo"),
    "Cancer": ("Scorpio", "Pisces", "Taurus", "Virgo"),
    "Leo": ("Aries", "Sagittarius", "Gemini", "Libra"),
    "Virgo": ("Taurus", "Capricorn", "Cancer", "Scorpio"),
    "Libra": ("Gemini", "Aquarius", "Leo", "Sagittarius"),
    "Scorpio": ("Cancer", "Pisces", "Virgo", "Capricorn"),
    "Sagittarius": ("Aries", "Leo", "Libra", "Aquarius"),
    "Capricorn": ("Taurus", "Virgo", "Scorpio", "Pisces"),
    "Aquarius": ("Gemini", "Libra", "Aries", "Sagittarius"),
    "Pisces": ("Cancer", "Scorpio", "Taurus", "Capricorn"),
}

DEFAULT_ELEMENT_SCORE = 50
AFFINITY_ZODIAC_SCORE = 85
SAME_SIGN_ZODIAC_SCORE = 70
DEFAULT_ZODIAC_SCORE = 50

# (minimum score, description), checked top-down
DESCRIPTION_TIERS = (
    (80, "🔥 Cosmic Soulmates! Exceptional compatibility."),
    (65, "✨ Strong Connection! Great potential together."),
    (50, "🌙 Balanced Match. Work together for harmony."),
)
LOWEST_TIER_DESCRIPTION = "🌊 Challenging but Growth-Oriented. Opposites can attract!"

FALLBACK_STRENGTH = "Balance of different energies can create growth"
FALLBACK_CHALLENGE = "Maintain individual space for harmony"


@dataclass(frozen=True)
class Person:
    element: object  # Element, or its name
    zodiac_name: str

    @property
    def element_name(self) -> str:
        element = Element.lookup(self.element)
        return element.value if element is not None else str(self.element)


@dataclass(frozen=True)
class CompatibilityResult:
    score: int
    element_score: int
    zodiac_score: int
    description: str
    strengths: tuple = ()
    challenges: tuple = ()

    def to_dict(self):
        return {
            "score": self.score,
            "element_score": self.element_score,
            "zodiac_score": self.zodiac_score,
            "description": self.description,
            "strengths": list(self.strengths),
            "challenges": list(self.challenges),
        }


# ============================================================
# SCORING
# ============================================================

def element_score(element1, element2) -> int:
    """Table score for two elements; 50 if either is not a known element."""
    e1, e2 = Element.lookup(element1), Element.lookup(element2)
    if e1 is None or e2 is None:
        return DEFAULT_ELEMENT_SCORE
    return ELEMENT_COMPAT[e1][e2]


def zodiac_score(sign1: str, sign2: str, affinities: Optional[dict] = None) -> int:
    """
    85 if sign2 is in sign1's affinity list, else 70 for the same sign,
    else 50. Only sign1's list is consulted.
    """
    if affinities is None:
        affinities = ZODIAC_COMPAT
    if sign2 in affinities.get(sign1, ()):
        return AFFINITY_ZODIAC_SCORE
    if sign1 == sign2:
        return SAME_SIGN_ZODIAC_SCORE
    return DEFAULT_ZODIAC_SCORE


def describe_score(score: int) -> str:
    for threshold, description in DESCRIPTION_TIERS:
        if score >= threshold:
            return description
    return LOWEST_TIER_DESCRIPTION


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_compatibility(person1: Person, person2: Person,
                          affinities: Optional[dict] = None) -> CompatibilityResult:
    """
    Score two people and explain the result.

    Args:
        person1: first person; their sign's affinity list is the one used
        person2: second person
        affinities: optional sign -> compatible signs table, defaults to
                    ZODIAC_COMPAT

    Returns:
        CompatibilityResult whose strengths and challenges are never empty.
    """
    e_score = element_score(person1.element, person2.element)
    z_score = zodiac_score(person1.zodiac_name, person2.zodiac_name, affinities)
    score = _round_half_up(e_score * 0.5 + z_score * 0.5)

    e1, e2 = person1.element_name, person2.element_name
    z1, z2 = person1.zodiac_name, person2.zodiac_name

    strengths = []
    challenges = []

    if e_score >= 80:
        strengths.append(f"{e1} and {e2} create powerful synergy")
    if z_score >= 80:
        strengths.append(f"{z1} and {z2} naturally understand each other")
    if e_score <= 40:
        challenges.append(f"{e1} and {e2} may clash - patience needed")
    if z_score <= 50 and z1 != z2:
        challenges.append(f"Different communication styles between {z1} and {z2}")

    if not strengths:
        strengths.append(FALLBACK_STRENGTH)
    if not challenges:
        challenges.append(FALLBACK_CHALLENGE)

    return CompatibilityResult(
        score=score,
        element_score=e_score,
        zodiac_score=z_score,
        description=describe_score(score),
        strengths=tuple(strengths),
        challenges=tuple(challenges),
    )
