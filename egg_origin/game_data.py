"""
game_data – Per-game species data consulted by the egg rules.

The egg generators only need two facts from the game data:
  - how many forms a species defines in a given release
  - the highest species id that can originate in a generation

``GameDataSource`` is the interface; ``PersonalTable`` is a compact
in-memory implementation covering the species with alternate forms that
matter for breeding.  Species missing from the table define one form.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Protocol, Tuple

from egg_origin.config import DEFAULT_RULES, EggRuleSet
from egg_origin.game_version import GameVersion, generation_of
from egg_origin.species import Species


class GameDataSource(Protocol):
    def form_count(self, species: int, form: int, version: GameVersion) -> int:
        ...

    def max_species_origin(self, generation: int) -> int:
        ...


# ── Form counts ──────────────────────────────────────────────────────────────
# species -> ((first generation, form count), ...) in ascending generation.

FormHistory = Tuple[Tuple[int, int], ...]

FORM_COUNTS: Mapping[int, FormHistory] = MappingProxyType({
    Species.Rattata: ((7, 2),),
    Species.Raticate: ((7, 3),),
    Species.Pikachu: ((6, 7), (7, 8), (8, 9)),
    Species.Raichu: ((7, 2),),
    Species.Sandshrew: ((7, 2),),
    Species.Vulpix: ((7, 2),),
    Species.Meowth: ((7, 2), (8, 3)),
    Species.Geodude: ((7, 2),),
    Species.Graveler: ((7, 2),),
    Species.Golem: ((7, 2),),
    Species.Ponyta: ((8, 2),),
    Species.Slowpoke: ((8, 2),),
    Species.Farfetchd: ((8, 2),),
    Species.Grimer: ((7, 2),),
    Species.Marowak: ((7, 3),),
    Species.MrMime: ((8, 2),),
    Species.Unown: ((2, 26), (3, 28)),
    Species.Corsola: ((8, 2),),
    Species.Zigzagoon: ((8, 2),),
    Species.Castform: ((3, 4),),
    Species.Deoxys: ((3, 4),),
    Species.Rotom: ((4, 6),),
    Species.Darumaka: ((8, 2),),
    Species.Yamask: ((8, 2),),
    Species.Stunfisk: ((8, 2),),
    Species.Vivillon: ((6, 20),),
    Species.Flabebe: ((6, 5),),
    Species.Gumshoos: ((7, 2),),
    Species.Vikavolt: ((7, 2),),
    Species.Ribombee: ((7, 2),),
    Species.Araquanid: ((7, 2),),
    Species.Lurantis: ((7, 2),),
    Species.Salazzle: ((7, 2),),
    Species.Togedemaru: ((7, 2),),
    Species.Mimikyu: ((7, 4),),
    Species.Kommoo: ((7, 2),),
    Species.Sinistea: ((8, 2),),
    Species.Polteageist: ((8, 2),),
})

# Releases whose form count differs from the rest of their generation.
VERSION_FORM_COUNTS: Mapping[Tuple[int, GameVersion], int] = MappingProxyType({
    (Species.Pichu, GameVersion.HG): 2,   # Spiky-eared Pichu
    (Species.Pichu, GameVersion.SS): 2,
    (Species.Rotom, GameVersion.D): 1,    # appliance forms arrive in Platinum
    (Species.Rotom, GameVersion.P): 1,
    (Species.Pikachu, GameVersion.X): 1,  # cosplay Pikachu is ORAS only
    (Species.Pikachu, GameVersion.Y): 1,
    (Species.Pikachu, GameVersion.SN): 7,
    (Species.Pikachu, GameVersion.MN): 7,
})


class PersonalTable:
    """Form-count and species-cap lookups backed by in-memory tables."""

    def __init__(
        self,
        rules: EggRuleSet = DEFAULT_RULES,
        form_counts: Optional[Mapping[int, FormHistory]] = None,
        version_form_counts: Optional[Mapping[Tuple[int, GameVersion], int]] = None,
    ) -> None:
        self.rules = rules
        self._form_counts: Dict[int, FormHistory] = dict(
            FORM_COUNTS if form_counts is None else form_counts)
        self._version_form_counts: Dict[Tuple[int, GameVersion], int] = dict(
            VERSION_FORM_COUNTS if version_form_counts is None else version_form_counts)

    def form_count(self, species: int, form: int, version: GameVersion) -> int:
        """Number of forms *species* defines in *version* (at least 1)."""
        override = self._version_form_counts.get((species, version))
        if override is not None:
            return override
        generation = generation_of(version)
        count = 1
        for first_generation, forms in self._form_counts.get(species, ()):
            if first_generation > generation:
                break
            count = forms
        return count

    def max_species_origin(self, generation: int) -> int:
        return self.rules.get_max_species_origin(generation)


DEFAULT_GAME_DATA = PersonalTable()
