"""
encounters – Creature input record and the egg encounter values produced
for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from egg_origin.game_version import GameVersion


@dataclass(frozen=True)
class Creature:
    """The fields of a stored Pokémon that decide whether it came from an egg."""
    species: int
    form: int = 0
    generation: int = 6
    version: GameVersion = GameVersion.X
    current_level: int = 1
    met_level: int = 0
    met_location: int = 0
    is_egg: bool = False
    gen1_not_tradeback: bool = False
    was_traded_egg: bool = False
    format: Optional[int] = None      # stored data format; None = origin generation
    korean: bool = False

    @property
    def stored_format(self) -> int:
        return self.generation if self.format is None else self.format


@dataclass(frozen=True)
class EncounterEgg:
    """A hypothesized breeding origin: the egg hatched as this species/form."""
    species: int
    form: int
    level: int
    generation: int
    version: GameVersion

    @property
    def name(self) -> str:
        return "Egg"

    @property
    def long_name(self) -> str:
        return f"{self.name} ({self.version.name})"

    @property
    def is_split(self) -> bool:
        return False


@dataclass(frozen=True)
class EncounterEggSplit(EncounterEgg):
    """Incense-bred egg: the alternate baby of *other_species*'s line."""
    other_species: int = 0

    @property
    def is_split(self) -> bool:
        return True
