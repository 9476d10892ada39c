"""
evolution_data – Pre-evolution links and ancestor chain lookups.

The egg generators ask one question of the evolution data: which earlier
stages could this creature have been, and at what level?  The answer is
an ancestor chain ordered earliest stage first:

    Azumarill  ->  [Azurill, Marill, Azumarill]

``EvolutionChainProvider`` is the interface the generators consume.
``EvolutionTree`` answers it from a table of pre-evolution links covering
the baby and incense lines plus the common level-up lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from egg_origin.config import DEFAULT_RULES, MAX_LEVEL, EggRuleSet
from egg_origin.encounters import Creature
from egg_origin.species import Species


# ── Evolution method types ──────────────────────────────────────────────────

class EvoMethod(str, Enum):
    LEVEL = "level"
    LEVEL_UP = "level_up"                   # any level-up with a side condition
    FRIENDSHIP = "friendship"
    FRIENDSHIP_DAY = "friendship_day"
    FRIENDSHIP_NIGHT = "friendship_night"
    STONE = "stone"
    TRADE = "trade"
    TRADE_ITEM = "trade_item"
    LEVEL_SHEDINJA = "level_shedinja"       # Nincada → Shedinja (extra slot)

    @property
    def requires_level_up(self) -> bool:
        return self not in (EvoMethod.STONE, EvoMethod.TRADE, EvoMethod.TRADE_ITEM)


@dataclass(frozen=True)
class EvoCriteria:
    """One stage of an ancestor chain."""
    species: int
    form: int = 0
    level: int = MAX_LEVEL


@dataclass(frozen=True)
class PreEvolution:
    """Link from a species back to the stage it evolved from."""
    species: int
    method: EvoMethod
    level: int = 0
    form: Optional[int] = None        # None = same form as the evolved stage


class EvolutionChainProvider(Protocol):
    def get_valid_pre_evolutions(
        self,
        creature: Creature,
        max_level: Optional[int] = None,
        max_species_origin: int = 0,
        skip_checks: bool = False,
        min_level: int = 1,
    ) -> List[EvoCriteria]:
        ...


# ── Pre-evolution table ─────────────────────────────────────────────────────

PreEvolutionKey = Tuple[int, Optional[int]]


def _build_pre_evolutions() -> Dict[PreEvolutionKey, PreEvolution]:
    table: Dict[PreEvolutionKey, PreEvolution] = {}

    def add(species, parent, method, level=0, form=None, parent_form=None):
        table[(species, form)] = PreEvolution(parent, method, level, parent_form)

    P = Species
    M = EvoMethod

    # Starters and early routes
    add(P.Ivysaur, P.Bulbasaur, M.LEVEL, 16)
    add(P.Venusaur, P.Ivysaur, M.LEVEL, 32)
    add(P.Charmeleon, P.Charmander, M.LEVEL, 16)
    add(P.Charizard, P.Charmeleon, M.LEVEL, 36)
    add(P.Pidgeotto, P.Pidgey, M.LEVEL, 18)
    add(P.Raticate, P.Rattata, M.LEVEL, 20)
    add(P.Graveler, P.Geodude, M.LEVEL, 25)
    add(P.Golem, P.Graveler, M.TRADE)
    add(P.Marowak, P.Cubone, M.LEVEL, 28, parent_form=0)

    # Gen 2 babies
    add(P.Pikachu, P.Pichu, M.FRIENDSHIP)
    add(P.Raichu, P.Pikachu, M.STONE, parent_form=0)
    add(P.Clefairy, P.Cleffa, M.FRIENDSHIP)
    add(P.Jigglypuff, P.Igglybuff, M.FRIENDSHIP)
    add(P.Hitmonlee, P.Tyrogue, M.LEVEL, 20)
    add(P.Hitmonchan, P.Tyrogue, M.LEVEL, 20)
    add(P.Hitmontop, P.Tyrogue, M.LEVEL, 20)
    add(P.Jynx, P.Smoochum, M.LEVEL, 30)
    add(P.Electabuzz, P.Elekid, M.LEVEL, 30)
    add(P.Magmar, P.Magby, M.LEVEL, 30)

    # Incense babies
    add(P.Marill, P.Azurill, M.FRIENDSHIP)
    add(P.Azumarill, P.Marill, M.LEVEL, 18)
    add(P.Wobbuffet, P.Wynaut, M.LEVEL, 15)
    add(P.Chansey, P.Happiny, M.LEVEL_UP)         # holding Oval Stone by day
    add(P.Blissey, P.Chansey, M.FRIENDSHIP)
    add(P.MrMime, P.MimeJr, M.LEVEL_UP, parent_form=0)  # knowing Mimic
    add(P.MrRime, P.MrMime, M.LEVEL, 42, parent_form=1)
    add(P.Snorlax, P.Munchlax, M.FRIENDSHIP)
    add(P.Sudowoodo, P.Bonsly, M.LEVEL_UP)        # knowing Mimic
    add(P.Mantine, P.Mantyke, M.LEVEL_UP)         # Remoraid in party
    add(P.Roselia, P.Budew, M.FRIENDSHIP_DAY)
    add(P.Roserade, P.Roselia, M.STONE)
    add(P.Chimecho, P.Chingling, M.FRIENDSHIP_NIGHT)

    # Nincada
    add(P.Ninjask, P.Nincada, M.LEVEL, 20)
    add(P.Shedinja, P.Nincada, M.LEVEL_SHEDINJA, 20, parent_form=0)

    return table


PRE_EVOLUTIONS: Dict[PreEvolutionKey, PreEvolution] = _build_pre_evolutions()


# ── Chain lookups ───────────────────────────────────────────────────────────

class EvolutionTree:
    """Ancestor chain provider backed by a pre-evolution table."""

    def __init__(
        self,
        pre_evolutions: Optional[Dict[PreEvolutionKey, PreEvolution]] = None,
        rules: EggRuleSet = DEFAULT_RULES,
    ) -> None:
        self.pre_evolutions = PRE_EVOLUTIONS if pre_evolutions is None else pre_evolutions
        self.rules = rules

    def get_pre_evolution(self, species: int, form: int) -> Optional[PreEvolution]:
        link = self.pre_evolutions.get((species, form))
        if link is None:
            link = self.pre_evolutions.get((species, None))
        return link

    def get_valid_pre_evolutions(
        self,
        creature: Creature,
        max_level: Optional[int] = None,
        max_species_origin: int = 0,
        skip_checks: bool = False,
        min_level: int = 1,
    ) -> List[EvoCriteria]:
        """
        Walk back from the creature's species to its earliest reachable stage.

        With checks enabled a stage is only reachable when the creature's
        level allows the evolution: level-up evolutions need a level above
        *min_level* (and at least the evolution level) and leave the
        previous stage one level lower.  Stages above *max_species_origin*
        end the walk.

        Returns the chain earliest stage first; the last entry is the
        creature itself.
        """
        level = creature.current_level if max_level is None else max_level
        if max_species_origin <= 0:
            max_species_origin = self.rules.get_max_species_origin(creature.generation)

        species, form = creature.species, creature.form
        chain = [EvoCriteria(species, form, level)]
        while True:
            link = self.get_pre_evolution(species, form)
            if link is None:
                break
            if not skip_checks and link.method.requires_level_up:
                if level <= min_level or level < link.level:
                    break
                level -= 1
            if max_species_origin and link.species > max_species_origin:
                break
            species = link.species
            form = form if link.form is None else link.form
            chain.append(EvoCriteria(species, form, level))

        chain.reverse()
        return chain


DEFAULT_EVOLUTION_TREE = EvolutionTree()


def get_base_species(chain: Sequence[EvoCriteria], skip: int = 0) -> Optional[EvoCriteria]:
    """
    Return the *skip*-th earliest stage of *chain*, or None when the chain
    is too short.  Shedinja always resolves to Nincada, the stage eggs hatch
    into.
    """
    if not chain:
        return None
    if chain[-1].species == Species.Shedinja:
        return EvoCriteria(Species.Nincada, 0, chain[-1].level)
    if skip >= len(chain):
        return None
    return chain[skip]
