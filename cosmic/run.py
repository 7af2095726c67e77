"""
CLI wrapper for the profile engine. Prints JSON to stdout.

Usage:
    python3 -m cosmic.run profile --year 1990 --month 1 --day 1 --hour 12 [--save NAME]
    python3 -m cosmic.run compat --element1 Fire --zodiac1 Aries --element2 Fire --zodiac2 Leo
    python3 -m cosmic.run daily --element Water --zodiac Pisces [--date YYYY-MM-DD]
    python3 -m cosmic.run daily --profile NAME
"""

import argparse
import json
import logging
import sys
from datetime import date

from cosmic.bazi import ELEMENTS, compute_four_pillars
from cosmic.compatibility import Person, compute_compatibility
from cosmic.daily import daily_horoscope_for_date
from cosmic.profile import compose_cosmic_profile, nft_metadata, share_text, token_uri
from cosmic.store import DEFAULT_PROFILE_KEY, load_profile, save_profile
from cosmic.western import SIGN_BY_NAME, compute_zodiac

logger = logging.getLogger(__name__)

ELEMENT_CHOICES = [e.value for e in ELEMENTS]
SIGN_CHOICES = list(SIGN_BY_NAME.keys())


def _bounded_int(low, high):
    def parse(value):
        number = int(value)
        if not low <= number <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}, got {number}")
        return number
    return parse


def cmd_profile(args) -> dict:
    four_pillars = compute_four_pillars(args.year, args.month, args.day, args.hour)
    zodiac = compute_zodiac(args.month, args.day)
    profile = compose_cosmic_profile(four_pillars, zodiac)

    result = profile.to_dict()
    result["share_text"] = share_text(profile)
    metadata = nft_metadata(profile)
    result["nft"] = {"metadata": metadata, "token_uri": token_uri(metadata)}

    if args.save:
        result["saved_to"] = str(save_profile(profile, args.save, args.profile_dir))
    return result


def cmd_compat(args) -> dict:
    person1 = Person(element=args.element1, zodiac_name=args.zodiac1)
    person2 = Person(element=args.element2, zodiac_name=args.zodiac2)
    return compute_compatibility(person1, person2).to_dict()


def cmd_daily(args) -> dict:
    if args.profile:
        profile = load_profile(args.profile, args.profile_dir)
        element, zodiac_name = profile.element, profile.zodiac.name
    elif args.element and args.zodiac:
        element, zodiac_name = args.element, args.zodiac
    else:
        raise ValueError("daily needs either --profile or both --element and --zodiac")

    # The only place the wall clock is read
    when = date.fromisoformat(args.date) if args.date else date.today()
    horoscope = daily_horoscope_for_date(element, zodiac_name, when)
    logger.debug("Daily horoscope for %s on %s", zodiac_name, when)

    result = horoscope.to_dict()
    result["date"] = when.isoformat()
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute CosmicBase profiles and readings.")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    parser.add_argument("--profile-dir", dest="profile_dir", default=None,
                        help="directory for stored profiles (default: profile_data/)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("profile", help="compute a cosmic profile from birth data")
    p.add_argument("--year", required=True, type=int)
    p.add_argument("--month", required=True, type=_bounded_int(1, 12))
    p.add_argument("--day", required=True, type=_bounded_int(1, 31))
    p.add_argument("--hour", required=True, type=_bounded_int(0, 23))
    p.add_argument("--save", nargs="?", const=DEFAULT_PROFILE_KEY, default=None,
                   help="store the profile under this name")
    p.set_defaults(func=cmd_profile)

    c = sub.add_parser("compat", help="score compatibility between two people")
    c.add_argument("--element1", required=True, choices=ELEMENT_CHOICES)
    c.add_argument("--zodiac1", required=True, choices=SIGN_CHOICES)
    c.add_argument("--element2", required=True, choices=ELEMENT_CHOICES)
    c.add_argument("--zodiac2", required=True, choices=SIGN_CHOICES)
    c.set_defaults(func=cmd_compat)

    d = sub.add_parser("daily", help="daily horoscope for an element and sign")
    d.add_argument("--element", choices=ELEMENT_CHOICES)
    d.add_argument("--zodiac", choices=SIGN_CHOICES)
    d.add_argument("--profile", nargs="?", const=DEFAULT_PROFILE_KEY, default=None,
                   help="use a stored profile instead of --element/--zodiac")
    d.add_argument("--date", default=None, help="YYYY-MM-DD, defaults to today")
    d.set_defaults(func=cmd_daily)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = args.func(args)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
