"""
Global configuration for egg-origin.
Breeding rule constants and the immutable rule set built from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from egg_origin.species import Species

# ── Species caps ─────────────────────────────────────────────────────────────
MAX_SPECIES_ID_1 = 151
MAX_SPECIES_ID_2 = 251
MAX_SPECIES_ID_3 = 386
MAX_SPECIES_ID_4 = 493
MAX_SPECIES_ID_5 = 649
MAX_SPECIES_ID_6 = 721
MAX_SPECIES_ID_7 = 809  # includes Meltan/Melmetal from Let's Go
MAX_SPECIES_ID_8 = 898

MAX_SPECIES_ORIGIN: Mapping[int, int] = MappingProxyType({
    1: MAX_SPECIES_ID_1,
    2: MAX_SPECIES_ID_2,
    3: MAX_SPECIES_ID_3,
    4: MAX_SPECIES_ID_4,
    5: MAX_SPECIES_ID_5,
    6: MAX_SPECIES_ID_6,
    7: MAX_SPECIES_ID_7,
    8: MAX_SPECIES_ID_8,
})

# ── Hatching ─────────────────────────────────────────────────────────────────
HATCH_LEVEL_LEGACY = 5  # gen 2-3 eggs hatch at level 5
HATCH_LEVEL_MODERN = 1  # gen 4+ eggs hatch at level 1
MAX_LEVEL = 100

# Species that never come out of a daycare egg.
NO_HATCH_FROM_EGG: FrozenSet[int] = frozenset({
    Species.Ditto,
    Species.Articuno, Species.Zapdos, Species.Moltres, Species.Mewtwo, Species.Mew,
    Species.Unown,
    Species.Raikou, Species.Entei, Species.Suicune, Species.Lugia, Species.HoOh, Species.Celebi,
    Species.Regirock, Species.Regice, Species.Registeel, Species.Latias, Species.Latios,
    Species.Kyogre, Species.Groudon, Species.Rayquaza, Species.Jirachi, Species.Deoxys,
    Species.Uxie, Species.Mesprit, Species.Azelf, Species.Dialga, Species.Palkia,
    Species.Heatran, Species.Regigigas, Species.Giratina, Species.Cresselia,
    Species.Manaphy,  # breeds into Phione
    Species.Darkrai, Species.Shaymin, Species.Arceus,
    Species.Victini, Species.Cobalion, Species.Terrakion, Species.Virizion,
    Species.Tornadus, Species.Thundurus, Species.Reshiram, Species.Zekrom,
    Species.Landorus, Species.Kyurem, Species.Keldeo, Species.Meloetta, Species.Genesect,
    Species.Xerneas, Species.Yveltal, Species.Zygarde, Species.Diancie, Species.Hoopa,
    Species.Volcanion,
    Species.TypeNull, Species.Silvally,
    Species.TapuKoko, Species.TapuLele, Species.TapuBulu, Species.TapuFini,
    Species.Cosmog, Species.Cosmoem, Species.Solgaleo, Species.Lunala,
    Species.Nihilego, Species.Buzzwole, Species.Pheromosa, Species.Xurkitree,
    Species.Celesteela, Species.Kartana, Species.Guzzlord, Species.Necrozma,
    Species.Magearna, Species.Marshadow, Species.Poipole, Species.Naganadel,
    Species.Stakataka, Species.Blacephalon, Species.Zeraora,
    Species.Meltan, Species.Melmetal,
    Species.Dracozolt, Species.Arctozolt, Species.Dracovish, Species.Arctovish,
    Species.Zacian, Species.Zamazenta, Species.Eternatus,
    Species.Kubfu, Species.Urshifu, Species.Zarude,
    Species.Regieleki, Species.Regidrago, Species.Glastrier, Species.Spectrier,
    Species.Calyrex,
})

# ── Split breeding (incense babies) ─────────────────────────────────────────
# Species whose egg may hatch into either of two babies.
SPLIT_BREED_3: FrozenSet[int] = frozenset({
    Species.Marill, Species.Azumarill,
    Species.Wobbuffet,
})

SPLIT_BREED: FrozenSet[int] = SPLIT_BREED_3 | frozenset({
    Species.Chansey, Species.Blissey,
    Species.MrMime, Species.MrRime,
    Species.Snorlax,
    Species.Sudowoodo,
    Species.Mantine,
    Species.Roselia, Species.Roserade,
    Species.Chimecho,
})

SPLIT_BREED_BY_GENERATION: Mapping[int, FrozenSet[int]] = MappingProxyType({
    3: SPLIT_BREED_3,
    4: SPLIT_BREED,
    5: SPLIT_BREED,
    6: SPLIT_BREED,
    7: SPLIT_BREED,
    8: SPLIT_BREED,
})

# ── Gen 2 ────────────────────────────────────────────────────────────────────
# Crystal eggs are possible unless the game pool excludes Crystal.
ALLOW_GEN2_CRYSTAL = True


# ── Rule set ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EggRuleSet:
    """Immutable bundle of the static breeding rules the generators consult."""
    no_hatch_from_egg: FrozenSet[int] = NO_HATCH_FROM_EGG
    split_breed: Mapping[int, FrozenSet[int]] = field(
        default_factory=lambda: SPLIT_BREED_BY_GENERATION)
    max_species_origin: Mapping[int, int] = field(
        default_factory=lambda: MAX_SPECIES_ORIGIN)
    allow_gen2_crystal: bool = ALLOW_GEN2_CRYSTAL

    def get_max_species_origin(self, generation: int) -> int:
        """Highest species id that can originate in *generation* (0 if none)."""
        return self.max_species_origin.get(generation, 0)

    def get_split_breed(self, generation: int) -> FrozenSet[int]:
        return self.split_breed.get(generation, frozenset())

    def can_hatch(self, species: int) -> bool:
        return species not in self.no_hatch_from_egg

    @staticmethod
    def hatch_level(generation: int) -> int:
        return HATCH_LEVEL_LEGACY if generation <= 3 else HATCH_LEVEL_MODERN


DEFAULT_RULES = EggRuleSet()
