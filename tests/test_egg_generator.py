"""Unit tests for egg_origin.egg_generator – egg encounter enumeration."""
import itertools
from dataclasses import replace

import pytest
from egg_origin.config import DEFAULT_RULES
from egg_origin.egg_generator import (
    LegacyEggRules, ModernEggRules, generate_eggs, get_egg_rules,
)
from egg_origin.encounters import Creature, EncounterEgg, EncounterEggSplit
from egg_origin.evolution_data import EvoCriteria
from egg_origin.game_version import GameVersion
from egg_origin.species import Species


def eggs_for(creature, **kwargs):
    return list(generate_eggs(creature, **kwargs))


class TestDispatch:
    def test_gen2_is_legacy(self):
        assert isinstance(get_egg_rules(2), LegacyEggRules)

    @pytest.mark.parametrize("gen", [1, 3, 4, 5, 6, 7, 8])
    def test_other_generations_are_modern(self, gen):
        assert isinstance(get_egg_rules(gen), ModernEggRules)


class TestModernBasics:
    def test_pikachu_hatches_as_pichu(self, make_creature):
        eggs = eggs_for(make_creature())
        assert eggs == [EncounterEgg(Species.Pichu, 0, 1, 6, GameVersion.X)]

    def test_creature_defaults_to_gen6_origin(self):
        creature = Creature(species=Species.Pikachu, current_level=10)
        assert eggs_for(creature) == [EncounterEgg(Species.Pichu, 0, 1, 6, GameVersion.X)]

    def test_traded_egg_adds_sister_version(self, make_creature):
        eggs = eggs_for(make_creature(was_traded_egg=True))
        assert eggs == [
            EncounterEgg(Species.Pichu, 0, 1, 6, GameVersion.X),
            EncounterEgg(Species.Pichu, 0, 1, 6, GameVersion.AS),
        ]

    def test_include_all_adds_sister_version(self, make_creature):
        eggs = eggs_for(make_creature(), include_all=True)
        assert [e.version for e in eggs] == [GameVersion.X, GameVersion.AS]

    def test_gen7_sister(self, make_creature):
        eggs = eggs_for(make_creature(generation=7, version=GameVersion.SN, was_traded_egg=True))
        assert [e.version for e in eggs] == [GameVersion.SN, GameVersion.US]
        eggs = eggs_for(make_creature(generation=7, version=GameVersion.UM, was_traded_egg=True))
        assert [e.version for e in eggs] == [GameVersion.UM, GameVersion.MN]

    @pytest.mark.parametrize("gen,version", [
        (8, GameVersion.SW), (8, GameVersion.SH), (7, GameVersion.GP),
    ])
    def test_single_release_has_no_sister(self, make_creature, gen, version):
        eggs = eggs_for(make_creature(generation=gen, version=version, was_traded_egg=True),
                        include_all=True)
        assert [e.version for e in eggs] == [version]

    def test_gen5_eggs_keep_their_origin(self, make_creature):
        eggs = eggs_for(make_creature(generation=5, version=GameVersion.W, was_traded_egg=True),
                        include_all=True)
        assert [e.version for e in eggs] == [GameVersion.W]

    @pytest.mark.parametrize("species", [Species.Ditto, Species.Mewtwo, Species.Manaphy,
                                         Species.Zacian, Species.Unown])
    def test_non_hatching_species(self, make_creature, species):
        assert eggs_for(make_creature(species=species, was_traded_egg=True), include_all=True) == []

    def test_generation_1_is_empty(self, make_creature):
        assert eggs_for(make_creature(generation=1, version=GameVersion.RD), include_all=True) == []

    @pytest.mark.parametrize("gen,version,level", [
        (3, GameVersion.R, 5),
        (3, GameVersion.FR, 5),
        (4, GameVersion.D, 1),
        (5, GameVersion.B, 1),
        (6, GameVersion.Y, 1),
        (8, GameVersion.SW, 1),
    ])
    def test_hatch_level(self, make_creature, gen, version, level):
        eggs = eggs_for(make_creature(species=Species.Charizard, generation=gen, version=version))
        assert eggs == [EncounterEgg(Species.Charmander, 0, level, gen, version)]

    def test_non_split_species_at_most_two(self, make_creature):
        for species in (Species.Pikachu, Species.Venusaur, Species.Raichu, Species.Blissey):
            eggs = eggs_for(make_creature(species=species, generation=3, version=GameVersion.E),
                            include_all=True)
            assert len(eggs) <= 2

    def test_deterministic(self, make_creature):
        creature = make_creature(species=Species.Azumarill, was_traded_egg=True)
        assert eggs_for(creature) == eggs_for(creature)

    def test_lazy(self, make_creature):
        creature = make_creature(species=Species.Azumarill, was_traded_egg=True)
        first = list(itertools.islice(generate_eggs(creature), 1))
        assert first == [EncounterEgg(Species.Azurill, 0, 1, 6, GameVersion.X)]


class TestForms:
    def test_spiky_eared_pichu(self, make_creature):
        creature = make_creature(species=Species.Pichu, form=1, generation=4, version=GameVersion.HG)
        assert eggs_for(creature, include_all=True) == []

    def test_totem_form(self, make_creature):
        creature = make_creature(species=Species.Mimikyu, form=2, generation=7, version=GameVersion.US)
        assert eggs_for(creature) == []

    def test_busted_mimikyu_is_fine(self, make_creature):
        creature = make_creature(species=Species.Mimikyu, form=1, generation=7, version=GameVersion.US)
        assert eggs_for(creature) == [EncounterEgg(Species.Mimikyu, 1, 1, 7, GameVersion.US)]

    def test_antique_sinistea(self, make_creature):
        creature = make_creature(species=Species.Sinistea, form=1, generation=8, version=GameVersion.SW)
        assert eggs_for(creature) == []

    def test_alolan_form_needs_gen7_origin(self, make_creature):
        creature = make_creature(species=Species.Rattata, form=1, generation=6, version=GameVersion.X)
        assert eggs_for(creature) == []
        creature = make_creature(species=Species.Rattata, form=1, generation=7, version=GameVersion.SN)
        assert eggs_for(creature) == [EncounterEgg(Species.Rattata, 1, 1, 7, GameVersion.SN)]

    def test_rotom_forms_before_platinum(self, make_creature):
        creature = make_creature(species=Species.Rotom, form=5, generation=4, version=GameVersion.D)
        assert eggs_for(creature) == [EncounterEgg(Species.Rotom, 5, 1, 4, GameVersion.D)]

    def test_alolan_marowak_hatches_as_plain_cubone(self, make_creature):
        creature = make_creature(species=Species.Marowak, form=1, generation=7,
                                 version=GameVersion.SN, current_level=30)
        assert eggs_for(creature) == [EncounterEgg(Species.Cubone, 0, 1, 7, GameVersion.SN)]


class TestSplitBreeding:
    def test_order_with_sister(self, make_creature):
        creature = make_creature(species=Species.Azumarill, current_level=30, was_traded_egg=True)
        assert eggs_for(creature) == [
            EncounterEgg(Species.Azurill, 0, 1, 6, GameVersion.X),
            EncounterEgg(Species.Azurill, 0, 1, 6, GameVersion.AS),
            EncounterEggSplit(Species.Marill, 0, 1, 6, GameVersion.X, other_species=Species.Azurill),
            EncounterEggSplit(Species.Marill, 0, 1, 6, GameVersion.AS, other_species=Species.Azurill),
        ]

    def test_order_without_sister(self, make_creature):
        creature = make_creature(species=Species.Blissey, generation=4, version=GameVersion.P)
        eggs = eggs_for(creature, include_all=True)
        assert eggs == [
            EncounterEgg(Species.Happiny, 0, 1, 4, GameVersion.P),
            EncounterEggSplit(Species.Chansey, 0, 1, 4, GameVersion.P, other_species=Species.Happiny),
        ]
        assert eggs[1].is_split is True
        assert eggs[0].is_split is False

    def test_gen3_wobbuffet(self, make_creature):
        creature = make_creature(species=Species.Wobbuffet, generation=3, version=GameVersion.R)
        assert eggs_for(creature) == [
            EncounterEgg(Species.Wynaut, 0, 5, 3, GameVersion.R),
            EncounterEggSplit(Species.Wobbuffet, 0, 5, 3, GameVersion.R, other_species=Species.Wynaut),
        ]

    def test_gen3_chansey_has_no_baby(self, make_creature):
        creature = make_creature(species=Species.Chansey, generation=3, version=GameVersion.E)
        assert eggs_for(creature) == [EncounterEgg(Species.Chansey, 0, 5, 3, GameVersion.E)]

    def test_galarian_mr_rime(self, make_creature):
        creature = make_creature(species=Species.MrRime, generation=8, version=GameVersion.SW)
        assert eggs_for(creature) == [
            EncounterEgg(Species.MimeJr, 0, 1, 8, GameVersion.SW),
            EncounterEggSplit(Species.MrMime, 1, 1, 8, GameVersion.SW, other_species=Species.MimeJr),
        ]

    def test_same_base_twice_stops(self, make_creature):
        creature = make_creature(species=Species.Snorlax)
        chain = [EvoCriteria(Species.Munchlax), EvoCriteria(Species.Munchlax)]
        assert eggs_for(creature, chain=chain) == [
            EncounterEgg(Species.Munchlax, 0, 1, 6, GameVersion.X)]

    def test_single_entry_chain_stops(self, make_creature):
        creature = make_creature(species=Species.Snorlax)
        chain = [EvoCriteria(Species.Snorlax)]
        assert eggs_for(creature, chain=chain) == [
            EncounterEgg(Species.Snorlax, 0, 1, 6, GameVersion.X)]

    def test_primary_above_cap_still_tries_alternate(self, make_creature):
        creature = make_creature(species=Species.Chansey, generation=4, version=GameVersion.D)
        chain = [EvoCriteria(900), EvoCriteria(Species.Chansey)]
        assert eggs_for(creature, chain=chain) == [
            EncounterEggSplit(Species.Chansey, 0, 1, 4, GameVersion.D, other_species=900)]

    def test_rules_without_split_breeding(self, make_creature):
        rules = replace(DEFAULT_RULES, split_breed={})
        creature = make_creature(species=Species.Azumarill)
        assert eggs_for(creature, rules=rules) == [
            EncounterEgg(Species.Azurill, 0, 1, 6, GameVersion.X)]


class TestLegacy:
    def test_both_gen2_releases(self, gen2_creature):
        assert eggs_for(gen2_creature()) == [
            EncounterEgg(Species.Pichu, 0, 5, 2, GameVersion.C),
            EncounterEgg(Species.Pichu, 0, 5, 2, GameVersion.GS),
        ]

    def test_crystal_disabled(self, gen2_creature):
        rules = replace(DEFAULT_RULES, allow_gen2_crystal=False)
        assert eggs_for(gen2_creature(), rules=rules) == [
            EncounterEgg(Species.Pichu, 0, 5, 2, GameVersion.GS)]

    def test_korean_has_no_crystal(self, gen2_creature):
        assert [e.version for e in eggs_for(gen2_creature(korean=True))] == [GameVersion.GS]

    def test_egg_stored_in_later_format(self, gen2_creature):
        assert eggs_for(gen2_creature(species=Species.Pichu, is_egg=True, format=7)) == []

    def test_egg_in_gen2_format(self, gen2_creature):
        eggs = eggs_for(gen2_creature(species=Species.Pichu, is_egg=True, current_level=5))
        assert [e.species for e in eggs] == [Species.Pichu, Species.Pichu]

    def test_unhatched_egg_skips_level_check(self, gen2_creature):
        eggs = eggs_for(gen2_creature(species=Species.Pichu, is_egg=True, current_level=1))
        assert eggs == [
            EncounterEgg(Species.Pichu, 0, 5, 2, GameVersion.C),
            EncounterEgg(Species.Pichu, 0, 5, 2, GameVersion.GS),
        ]

    def test_transferred_needs_met_level_5(self, gen2_creature):
        assert eggs_for(gen2_creature(format=7, met_level=4)) == []
        assert len(eggs_for(gen2_creature(format=7, met_level=10))) == 2

    def test_round_trip_through_gen1(self, gen2_creature):
        assert eggs_for(gen2_creature(met_location=5, met_level=3)) == []
        assert len(eggs_for(gen2_creature(met_location=5, met_level=1))) == 2

    def test_level_below_hatch_level(self, gen2_creature):
        assert eggs_for(gen2_creature(species=Species.Pichu, current_level=4)) == []

    def test_gen1_locked(self, gen2_creature):
        assert eggs_for(gen2_creature(gen1_not_tradeback=True)) == []

    def test_non_hatching_species(self, gen2_creature):
        assert eggs_for(gen2_creature(species=Species.Ditto)) == []

    def test_evolved_too_early(self, gen2_creature):
        # A level 5 Pikachu cannot have hatched as Pichu and evolved.
        assert eggs_for(gen2_creature(current_level=5)) == []
        assert len(eggs_for(gen2_creature(current_level=5), include_all=True)) == 2

    def test_base_above_cap_uses_next_stage(self, gen2_creature):
        creature = gen2_creature(species=Species.Chansey)
        chain = [EvoCriteria(Species.Happiny), EvoCriteria(Species.Chansey)]
        assert eggs_for(creature, chain=chain, include_all=True) == [
            EncounterEgg(Species.Chansey, 0, 5, 2, GameVersion.C),
            EncounterEgg(Species.Chansey, 0, 5, 2, GameVersion.GS),
        ]

    def test_form_rules_egg_out(self, gen2_creature):
        creature = gen2_creature(species=Species.Unown)
        assert eggs_for(creature, chain=[EvoCriteria(Species.Unown, 3)], include_all=True) == []

    def test_empty_chain(self, gen2_creature):
        assert eggs_for(gen2_creature(), chain=[], include_all=True) == []
