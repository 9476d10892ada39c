"""
cli – Print the egg encounters a creature could have hatched from.

    python -m egg_origin.cli --species 25 --generation 6 --version X --traded-egg
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from egg_origin.config import DEFAULT_RULES
from egg_origin.encounters import Creature, EncounterEgg
from egg_origin.egg_generator import generate_eggs
from egg_origin.game_version import generation_of, parse_version

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Egg origin candidates for a Pokémon")
    parser.add_argument("--species", type=int, required=True, help="National dex id")
    parser.add_argument("--form", type=int, default=0)
    parser.add_argument("--version", type=str, required=True, help="Origin game, e.g. X, US, GS")
    parser.add_argument("--generation", type=int, default=None,
                        help="Origin generation (default: from --version)")
    parser.add_argument("--format", type=int, default=None, help="Stored data format generation")
    parser.add_argument("--level", type=int, default=1, help="Current level")
    parser.add_argument("--met-level", type=int, default=0)
    parser.add_argument("--met-location", type=int, default=0)
    parser.add_argument("--egg", action="store_true", help="Creature is still an egg")
    parser.add_argument("--traded-egg", action="store_true", help="Egg was traded before hatching")
    parser.add_argument("--gen1-not-tradeback", action="store_true")
    parser.add_argument("--korean", action="store_true")
    parser.add_argument("--no-crystal", action="store_true", help="Exclude Crystal gen 2 eggs")
    parser.add_argument("--all", action="store_true", dest="include_all",
                        help="Skip plausibility checks and list sister releases")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def format_egg(egg: EncounterEgg) -> str:
    text = (f"{egg.long_name}: species={egg.species} form={egg.form} "
            f"level={egg.level} gen={egg.generation}")
    if egg.is_split:
        text += f" other={egg.other_species}"
    return text


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        version = parse_version(args.version)
    except ValueError as exc:
        parser.error(str(exc))

    generation = args.generation if args.generation is not None else generation_of(version)
    creature = Creature(
        species=args.species,
        form=args.form,
        generation=generation,
        version=version,
        current_level=args.level,
        met_level=args.met_level,
        met_location=args.met_location,
        is_egg=args.egg,
        gen1_not_tradeback=args.gen1_not_tradeback,
        was_traded_egg=args.traded_egg,
        format=args.format,
        korean=args.korean,
    )
    rules = replace(DEFAULT_RULES, allow_gen2_crystal=False) if args.no_crystal else DEFAULT_RULES

    eggs = list(generate_eggs(creature, include_all=args.include_all, rules=rules))
    logger.debug("%d egg encounter(s) for %s", len(eggs), creature)
    if not eggs:
        print("Not obtainable by breeding.")
        return 1
    for egg in eggs:
        print(format_egg(egg))
    return 0


if __name__ == "__main__":
    sys.exit(main())
