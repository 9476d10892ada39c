"""
egg_generator – Enumerate the egg encounters a creature could have hatched from.

Two rule sets cover every generation that has breeding:

  ModernEggRules (gen 3+)
    - base stage of the ancestor chain hatches at level 5 (gen 3) or 1
    - incense babies add the alternate baby as a split egg
    - gen 6+ traded eggs may report the sister release as their origin

  LegacyEggRules (gen 2)
    - no forms, no incense, no sister releases
    - plausibility checks on met data before anything is emitted
    - Crystal and Gold/Silver are the only possible origins

Every rejected branch simply yields nothing; an empty result means the
creature cannot have come from an egg.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Sequence, Type

from egg_origin.config import DEFAULT_RULES, HATCH_LEVEL_LEGACY, MAX_LEVEL, EggRuleSet
from egg_origin.encounters import Creature, EncounterEgg, EncounterEggSplit
from egg_origin.evolution_data import (
    DEFAULT_EVOLUTION_TREE,
    EvoCriteria,
    EvolutionChainProvider,
    get_base_species,
)
from egg_origin.forms import no_hatch_from_egg_form, no_hatch_from_egg_form_gen
from egg_origin.game_data import DEFAULT_GAME_DATA, GameDataSource
from egg_origin.game_version import GameVersion, get_sister_version, has_sister_version

logger = logging.getLogger(__name__)


# ── Strategy base ───────────────────────────────────────────────────────────

class EggRules(ABC):
    """Egg encounter rules for one family of generations."""

    def __init__(
        self,
        rules: EggRuleSet = DEFAULT_RULES,
        game_data: Optional[GameDataSource] = None,
        evolutions: Optional[EvolutionChainProvider] = None,
    ) -> None:
        self.rules = rules
        self.game_data = DEFAULT_GAME_DATA if game_data is None else game_data
        self.evolutions = DEFAULT_EVOLUTION_TREE if evolutions is None else evolutions

    def max_species_origin(self, generation: int) -> int:
        return self.game_data.max_species_origin(generation)

    def get_chain(self, creature: Creature) -> List[EvoCriteria]:
        """Every stage the creature could have been, ignoring level checks."""
        return self.evolutions.get_valid_pre_evolutions(
            creature,
            max_level=MAX_LEVEL,
            max_species_origin=self.max_species_origin(creature.generation),
            skip_checks=True,
        )

    def generate(
        self,
        creature: Creature,
        chain: Optional[Sequence[EvoCriteria]] = None,
        include_all: bool = False,
    ) -> Iterator[EncounterEgg]:
        if chain is None:
            chain = self.get_chain(creature)
        return self.generate_from_chain(creature, chain, include_all)

    @abstractmethod
    def generate_from_chain(
        self,
        creature: Creature,
        chain: Sequence[EvoCriteria],
        include_all: bool = False,
    ) -> Iterator[EncounterEgg]:
        ...


# ── Generation 3+ ───────────────────────────────────────────────────────────

class ModernEggRules(EggRules):

    def generate_from_chain(
        self,
        creature: Creature,
        chain: Sequence[EvoCriteria],
        include_all: bool = False,
    ) -> Iterator[EncounterEgg]:
        species = creature.species
        if not self.rules.can_hatch(species):
            logger.debug("Species %d never hatches from an egg", species)
            return

        gen = creature.generation
        if gen <= 1:
            return  # no breeding
        if no_hatch_from_egg_form(species, creature.form, gen):
            logger.debug("Form %d of species %d cannot hatch", creature.form, species)
            return

        # The recorded version is the true origin for gen 3-5 eggs.
        version = creature.version
        level = self.rules.hatch_level(gen)
        max_species = self.max_species_origin(gen)
        with_sister = self._can_report_sister(creature, include_all)

        base = get_base_species(chain, 0)
        if base is not None and self._is_origin_valid(base, max_species, version):
            egg = EncounterEgg(base.species, base.form, level, gen, version)
            yield egg
            if with_sister:
                yield self._as_sister(egg)

        if species not in self.rules.get_split_breed(gen):
            return

        other = get_base_species(chain, 1)
        if other is None or base is None or other.species == base.species:
            return

        if self._is_origin_valid(other, max_species, version):
            egg = EncounterEggSplit(other.species, other.form, level, gen, version,
                                    other_species=base.species)
            yield egg
            if with_sister:
                yield self._as_sister(egg)

    def _is_origin_valid(self, entry: EvoCriteria, max_species: int, version: GameVersion) -> bool:
        if entry.species > max_species:
            return False
        return not no_hatch_from_egg_form_gen(entry.species, entry.form, version, self.game_data)

    @staticmethod
    def _can_report_sister(creature: Creature, include_all: bool) -> bool:
        # Gen 6+ eggs take the hatching game as their origin.
        if creature.generation <= 5:
            return False
        if not (creature.was_traded_egg or include_all):
            return False
        return has_sister_version(creature.version)

    @staticmethod
    def _as_sister(egg: EncounterEgg) -> EncounterEgg:
        sister = get_sister_version(egg.version)
        if isinstance(egg, EncounterEggSplit):
            return EncounterEggSplit(egg.species, egg.form, egg.level, egg.generation,
                                     sister, other_species=egg.other_species)
        return EncounterEgg(egg.species, egg.form, egg.level, egg.generation, sister)


# ── Generation 2 ────────────────────────────────────────────────────────────

class LegacyEggRules(EggRules):
    """
    Gold/Silver/Crystal breeding.

    Forms do not exist in gen 2 besides Unown, which cannot breed, so any
    non-zero form rules the egg out.
    """
    GENERATION = 2

    def get_chain(self, creature: Creature) -> List[EvoCriteria]:
        return self.evolutions.get_valid_pre_evolutions(
            creature,
            max_level=MAX_LEVEL,
            max_species_origin=self.max_species_origin(self.GENERATION),
            skip_checks=True,
        )

    def generate_from_chain(
        self,
        creature: Creature,
        chain: Sequence[EvoCriteria],
        include_all: bool = False,
    ) -> Iterator[EncounterEgg]:
        if not include_all and not self.can_be_egg(creature):
            return
        if not chain:
            return

        max_species = self.max_species_origin(self.GENERATION)
        base = chain[0]
        if (base.species >= max_species or base.form != 0) and len(chain) != 1:
            base = chain[1]
        if base.form != 0:
            logger.debug("Gen 2 base stage %d has form %d", base.species, base.form)
            return

        level = HATCH_LEVEL_LEGACY
        if self.allow_crystal(creature):
            yield EncounterEgg(base.species, 0, level, self.GENERATION, GameVersion.C)
        yield EncounterEgg(base.species, 0, level, self.GENERATION, GameVersion.GS)

    def allow_crystal(self, creature: Creature) -> bool:
        # Crystal was never released in Korea.
        return self.rules.allow_gen2_crystal and not creature.korean

    def can_be_egg(self, creature: Creature) -> bool:
        if creature.gen1_not_tradeback:
            return False
        if not self._is_met_data_plausible(creature):
            logger.debug("Met data of species %d rules out a gen 2 egg", creature.species)
            return False
        if not self.rules.can_hatch(creature.species):
            return False
        return self.is_evolution_valid(creature)

    @staticmethod
    def _is_met_data_plausible(creature: Creature) -> bool:
        if creature.is_egg:
            return creature.stored_format == 2

        if creature.stored_format > 2:
            if creature.met_level < HATCH_LEVEL_LEGACY:
                return False
        elif creature.met_location != 0 and creature.met_level != 1:
            # 2->1->2 clears met info
            return False

        return creature.current_level >= HATCH_LEVEL_LEGACY

    def is_evolution_valid(self, creature: Creature) -> bool:
        """
        The level-checked chain must reach as far back as the unchecked one,
        i.e. every evolution can have happened after hatching at level 5.
        """
        max_species = self.max_species_origin(self.GENERATION)
        current = self.evolutions.get_valid_pre_evolutions(
            creature,
            max_species_origin=max_species,
            min_level=HATCH_LEVEL_LEGACY,
        )
        possible = self.evolutions.get_valid_pre_evolutions(
            creature,
            max_level=MAX_LEVEL,
            max_species_origin=max_species,
            skip_checks=True,
            min_level=HATCH_LEVEL_LEGACY,
        )
        return len(current) >= len(possible)


# ── Dispatch ────────────────────────────────────────────────────────────────

EGG_RULES_BY_GENERATION: Dict[int, Type[EggRules]] = {
    LegacyEggRules.GENERATION: LegacyEggRules,
}


def get_egg_rules(
    generation: int,
    rules: EggRuleSet = DEFAULT_RULES,
    game_data: Optional[GameDataSource] = None,
    evolutions: Optional[EvolutionChainProvider] = None,
) -> EggRules:
    """Pick the egg rules for *generation*; gen 1 falls to the modern rules,
    which emit nothing for it."""
    cls = EGG_RULES_BY_GENERATION.get(generation, ModernEggRules)
    return cls(rules=rules, game_data=game_data, evolutions=evolutions)


def generate_eggs(
    creature: Creature,
    chain: Optional[Sequence[EvoCriteria]] = None,
    include_all: bool = False,
    rules: EggRuleSet = DEFAULT_RULES,
    game_data: Optional[GameDataSource] = None,
    evolutions: Optional[EvolutionChainProvider] = None,
) -> Iterator[EncounterEgg]:
    """
    Yield every egg encounter the creature could have hatched from.

    Args:
        creature: The creature being checked.
        chain: Ancestor chain, earliest stage first.  Built from
               *evolutions* when omitted.
        include_all: Skip gen 2 plausibility checks and report sister
                     releases even for eggs that were not traded.
        rules: Static breeding rules.
        game_data: Form counts and species caps.
        evolutions: Ancestor chain provider.

    Returns:
        Lazy iterator of EncounterEgg / EncounterEggSplit.
    """
    egg_rules = get_egg_rules(creature.generation, rules, game_data, evolutions)
    return egg_rules.generate(creature, chain, include_all)
