"""
Tests for profile composition, sharing and NFT metadata.
"""

import base64
import json

import pytest

from cosmic.bazi import Element, compute_four_pillars
from cosmic.profile import (
    ELEMENT_TRAITS,
    TOKEN_URI_PREFIX,
    ZODIAC_TRAITS,
    compose_cosmic_profile,
    nft_metadata,
    profile_from_dict,
    share_text,
    token_uri,
)
from cosmic.western import ZODIAC_SIGNS, compute_zodiac


@pytest.fixture
def profile():
    """Profile for 1990-01-01 12:00: Fire dominant, Capricorn."""
    return compose_cosmic_profile(compute_four_pillars(1990, 1, 1, 12), compute_zodiac(1, 1))


class TestComposeCosmicProfile:

    def test_title(self, profile):
        assert profile.title == "Cosmic Fire Capricorn"

    def test_description(self, profile):
        assert profile.description == (
            "You are passionate and dynamic with ambitious discipline. "
            "Your Fire energy from Eastern wisdom combines with Earth Capricorn "
            "traits to create a unique cosmic signature."
        )

    def test_keeps_inputs(self, profile):
        assert profile.four_pillars == compute_four_pillars(1990, 1, 1, 12)
        assert profile.zodiac.name == "Capricorn"
        assert profile.element is Element.FIRE

    def test_trait_tables_are_complete(self):
        assert set(ELEMENT_TRAITS) == set(Element)
        assert set(ZODIAC_TRAITS) == {s.name for s in ZODIAC_SIGNS}

    def test_every_sign_composes(self):
        four_pillars = compute_four_pillars(2000, 6, 15, 8)
        for sign in ZODIAC_SIGNS:
            profile = compose_cosmic_profile(four_pillars, sign)
            assert profile.title.endswith(sign.name)
            assert ZODIAC_TRAITS[sign.name] in profile.description


class TestProfileSerialization:

    def test_round_trip(self, profile):
        data = json.loads(json.dumps(profile.to_dict()))
        assert profile_from_dict(data) == profile

    def test_missing_field(self, profile):
        data = profile.to_dict()
        del data["zodiac"]
        with pytest.raises(ValueError, match="missing field"):
            profile_from_dict(data)

    def test_unknown_sign(self, profile):
        data = profile.to_dict()
        data["zodiac"]["name"] = "Ophiuchus"
        with pytest.raises(ValueError, match="Unknown zodiac sign"):
            profile_from_dict(data)


class TestSharing:

    def test_share_text(self, profile):
        text = share_text(profile)
        assert text.startswith("✨ My Cosmic Profile: Cosmic Fire Capricorn\n\n")
        assert "🔮 Fire Element + Capricorn" in text
        assert profile.description in text
        assert text.endswith("Discover yours at CosmicBase! 🌟")


class TestNftMetadata:

    def test_public_attributes_only(self, profile):
        metadata = nft_metadata(profile)
        assert metadata == {
            "name": "Cosmic Fire Capricorn",
            "description": profile.description,
            "attributes": [
                {"trait_type": "Element", "value": "Fire"},
                {"trait_type": "Zodiac", "value": "Capricorn"},
            ],
        }

    def test_token_uri_decodes_to_metadata(self, profile):
        metadata = nft_metadata(profile)
        uri = token_uri(metadata)
        assert uri.startswith(TOKEN_URI_PREFIX)
        decoded = base64.b64decode(uri[len(TOKEN_URI_PREFIX):]).decode("utf-8")
        assert json.loads(decoded) == metadata
