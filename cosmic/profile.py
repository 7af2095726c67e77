"""
Cosmic profile composition.

Combines a Four Pillars result with a Western sun sign into a titled,
human-readable profile, and derives the public views of a profile: share
text and NFT metadata. NFT metadata only ever carries the two public
classifications (dominant element and sun sign), never birth data.
"""

import base64
import json
from dataclasses import dataclass

from cosmic.bazi import Element, FourPillarsResult, four_pillars_from_dict
from cosmic.western import ZodiacSign, sign_by_name


# ============================================================
# TRAIT TABLES
# ============================================================

ELEMENT_TRAITS = {
    Element.WOOD: "growth-oriented and creative",
    Element.FIRE: "passionate and dynamic",
    Element.EARTH: "stable and nurturing",
    Element.METAL: "determined and precise",
    Element.WATER: "intuitive and adaptable",
}

ZODIAC_TRAITS = {
    "Aries": "bold leadership",
    "Taurus": "steadfast determination",
    "Gemini": "versatile communication",
    "Cancer": "emotional depth",
    "Leo": "radiant confidence",
    "Virgo": "analytical precision",
    "Libra": "harmonious balance",
    "Scorpio": "intense transformation",
    "Sagittarius": "adventurous spirit",
    "Capricorn": "ambitious discipline",
    "Aquarius": "innovative vision",
    "Pisces": "empathic intuition",
}

TOKEN_URI_PREFIX = "data:application/json;base64,"


@dataclass(frozen=True)
class CosmicProfile:
    four_pillars: FourPillarsResult
    zodiac: ZodiacSign
    title: str
    description: str

    @property
    def element(self) -> Element:
        return self.four_pillars.dominant_element

    def to_dict(self):
        return {
            "title": self.title,
            "description": self.description,
            "four_pillars": self.four_pillars.to_dict(),
            "zodiac": self.zodiac.to_dict(),
        }


# ============================================================
# COMPOSITION
# ============================================================

def compose_cosmic_profile(four_pillars: FourPillarsResult, zodiac: ZodiacSign) -> CosmicProfile:
    """
    Build the profile title and description from the dominant element and
    sun sign. Pure string templating over the two trait tables.
    """
    element = four_pillars.dominant_element
    title = f"Cosmic {element.value} {zodiac.name}"
    description = (
        f"You are {ELEMENT_TRAITS[element]} with {ZODIAC_TRAITS[zodiac.name]}. "
        f"Your {element.value} energy from Eastern wisdom combines with "
        f"{zodiac.element} {zodiac.name} traits to create a unique cosmic signature."
    )
    return CosmicProfile(
        four_pillars=four_pillars,
        zodiac=zodiac,
        title=title,
        description=description,
    )


def profile_from_dict(data: dict) -> CosmicProfile:
    """
    Rebuild a profile from its to_dict() form.

    Pillars and sign are resolved against the fixed tables, so a stored
    profile comes back as the same values it was saved from.

    Raises:
        ValueError: if the data names an unknown stem, branch, element or sign
    """
    try:
        four_pillars = four_pillars_from_dict(data["four_pillars"])
        zodiac = sign_by_name(data["zodiac"]["name"])
        title = data["title"]
        description = data["description"]
    except KeyError as e:
        raise ValueError(f"Profile data is missing field {e}") from e
    return CosmicProfile(
        four_pillars=four_pillars,
        zodiac=zodiac,
        title=title,
        description=description,
    )


# ============================================================
# SHARING AND NFT METADATA
# ============================================================

def share_text(profile: CosmicProfile) -> str:
    return (
        f"✨ My Cosmic Profile: {profile.title}\n\n"
        f"🔮 {profile.element.value} Element + {profile.zodiac.name}\n\n"
        f"{profile.description}\n\n"
        f"Discover yours at CosmicBase! 🌟"
    )


def nft_metadata(profile: CosmicProfile) -> dict:
    """
    ERC-721 style metadata for minting a profile.

    Only the dominant element and sun sign are exposed as attributes.
    """
    return {
        "name": profile.title,
        "description": profile.description,
        "attributes": [
            {"trait_type": "Element", "value": profile.element.value},
            {"trait_type": "Zodiac", "value": profile.zodiac.name},
        ],
    }


def token_uri(metadata: dict) -> str:
    """Inline metadata as a base64 JSON data URI, used as the token URI."""
    payload = json.dumps(metadata, separators=(",", ":"), ensure_ascii=False)
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return TOKEN_URI_PREFIX + encoded
