"""
forms – Which species/form combinations can come out of an egg.

Two independent checks:
  - ``no_hatch_from_egg_form``: the creature's own form can never be
    hatched (totems, Spiky-eared Pichu, Antique Sinistea/Polteageist).
  - ``no_hatch_from_egg_form_gen``: the base form the egg would hatch
    into does not exist in the release the egg comes from.
"""

from __future__ import annotations

from typing import FrozenSet

from egg_origin.game_data import GameDataSource
from egg_origin.game_version import GameVersion
from egg_origin.species import Species


# ── Totem forms (Sun/Moon, Ultra Sun/Ultra Moon) ─────────────────────────────

TOTEM_USUM: FrozenSet[int] = frozenset({
    Species.Raticate,
    Species.Marowak,
    Species.Gumshoos,
    Species.Vikavolt,
    Species.Lurantis,
    Species.Salazzle,
    Species.Mimikyu,
    Species.Kommoo,
    Species.Araquanid,
    Species.Togedemaru,
    Species.Ribombee,
})

# Totems of species that also have an Alolan form; the totem is form 2.
TOTEM_ALOLAN: FrozenSet[int] = frozenset({
    Species.Raticate,
    Species.Marowak,
    Species.Mimikyu,
})

# Rotom's appliance forms are legal origins regardless of the release table.
ROTOM_MAX_FORM = 5


def is_totem_form(species: int, form: int, generation: int = 7) -> bool:
    if generation != 7 or form == 0:
        return False
    if species not in TOTEM_USUM:
        return False
    if species == Species.Mimikyu:
        return form in (2, 3)
    if species in TOTEM_ALOLAN:
        return form == 2
    return form == 1


def no_hatch_from_egg_form(species: int, form: int, generation: int) -> bool:
    """True when a creature of this species/form cannot originate from an egg."""
    if form == 0:
        return False
    if is_totem_form(species, form, generation):
        return True
    if species == Species.Pichu:
        return True  # Spiky-eared
    if species in (Species.Sinistea, Species.Polteageist):
        return True  # Antique
    return False


def no_hatch_from_egg_form_gen(
    species: int, form: int, version: GameVersion, game_data: GameDataSource,
) -> bool:
    """True when *form* is not defined for *species* in the origin release."""
    if species == Species.Rotom and form <= ROTOM_MAX_FORM:
        return False
    return form >= game_data.form_count(species, form, version)
