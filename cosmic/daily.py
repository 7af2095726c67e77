"""
Daily horoscope messages.

Every value is selected by day-of-year, so a given (element, sign, day)
always produces the same horoscope. The day-of-year is a parameter: reading
the wall clock is the caller's job.
"""

from dataclasses import dataclass
from datetime import date
from typing import Union

from cosmic import astro_calendar
from cosmic.bazi import Element


DAILY_MESSAGES = {
    Element.WOOD: (
        "Growth energy surrounds you today. Plant seeds for future success.",
        "Your creative spirit is strong. Express yourself freely.",
        "Connect with nature to recharge your Wood element energy.",
    ),
    Element.FIRE: (
        "Your passion burns bright today. Lead with confidence.",
        "Transform challenges into opportunities with your inner fire.",
        "Share your warmth with others - your energy is contagious.",
    ),
    Element.EARTH: (
        "Stability is your strength today. Ground yourself in routine.",
        "Nurture your relationships - they need your steady presence.",
        "Trust your practical instincts for important decisions.",
    ),
    Element.METAL: (
        "Precision and clarity guide you today. Cut through confusion.",
        "Your determination is unshakeable. Pursue your goals.",
        "Refine your plans - details matter more than usual.",
    ),
    Element.WATER: (
        "Flow with changes today. Adaptability is your superpower.",
        "Your intuition is heightened. Trust your inner voice.",
        "Deep connections are possible. Open up to others.",
    ),
}

ZODIAC_DAILY = {
    "Aries": ("Bold moves pay off today.", "Your leadership shines.", "Take initiative in love."),
    "Taurus": ("Financial luck is strong.", "Comfort brings clarity.", "Patience rewards you."),
    "Gemini": ("Communication flows easily.", "New connections await.", "Share your ideas."),
    "Cancer": ("Home matters need attention.", "Emotional insights arrive.", "Nurture yourself."),
    "Leo": ("Spotlight finds you today.", "Creative projects thrive.", "Romance is favored."),
    "Virgo": ("Details reveal solutions.", "Health focus pays off.", "Organize for success."),
    "Libra": ("Balance brings peace.", "Partnerships strengthen.", "Beauty inspires you."),
    "Scorpio": ("Transformation accelerates.", "Hidden truths emerge.", "Power grows quietly."),
    "Sagittarius": ("Adventure calls you.", "Learning expands horizons.", "Optimism attracts luck."),
    "Capricorn": ("Career advances possible.", "Discipline creates results.", "Long-term plans solidify."),
    "Aquarius": ("Innovation strikes today.", "Community connections grow.", "Unique ideas succeed."),
    "Pisces": ("Dreams hold messages.", "Compassion opens doors.", "Artistic flow is strong."),
}

LUCKY_COLORS = ("Red", "Blue", "Green", "Gold", "Purple", "Silver", "Orange")


@dataclass(frozen=True)
class DailyHoroscope:
    element_message: str
    zodiac_message: str
    combined: str
    lucky_number: int
    lucky_color: str

    def to_dict(self):
        return {
            "element_message": self.element_message,
            "zodiac_message": self.zodiac_message,
            "combined": self.combined,
            "lucky_number": self.lucky_number,
            "lucky_color": self.lucky_color,
        }


def compute_daily_horoscope(element, zodiac_name: str, day_of_year: int) -> DailyHoroscope:
    """
    Horoscope for one calendar day.

    Unknown elements and signs fall back to the Fire and Aries messages.

    Args:
        element: Element, or its name
        zodiac_name: sun sign name
        day_of_year: 1 for January 1; any non-negative integer works
    """
    element_msgs = DAILY_MESSAGES.get(Element.lookup(element), DAILY_MESSAGES[Element.FIRE])
    zodiac_msgs = ZODIAC_DAILY.get(zodiac_name, ZODIAC_DAILY["Aries"])

    element_msg = element_msgs[day_of_year % len(element_msgs)]
    zodiac_msg = zodiac_msgs[day_of_year % len(zodiac_msgs)]

    return DailyHoroscope(
        element_message=element_msg,
        zodiac_message=zodiac_msg,
        combined=f"{element_msg} {zodiac_msg}",
        lucky_number=((day_of_year * 7) % 99) + 1,
        lucky_color=LUCKY_COLORS[day_of_year % len(LUCKY_COLORS)],
    )


def daily_horoscope_for_date(element, zodiac_name: str,
                             when: Union[date, str]) -> DailyHoroscope:
    """Shortcut: horoscope for a calendar date instead of a day-of-year."""
    return compute_daily_horoscope(element, zodiac_name, astro_calendar.day_of_year(when))
