"""Unit tests for egg_origin.forms – hatchable form rules."""
import pytest
from egg_origin.forms import is_totem_form, no_hatch_from_egg_form, no_hatch_from_egg_form_gen
from egg_origin.game_data import DEFAULT_GAME_DATA
from egg_origin.game_version import GameVersion
from egg_origin.species import Species


class TestTotemForms:
    @pytest.mark.parametrize("species,form", [
        (Species.Gumshoos, 1),
        (Species.Kommoo, 1),
        (Species.Raticate, 2),
        (Species.Marowak, 2),
        (Species.Mimikyu, 2),
        (Species.Mimikyu, 3),
    ])
    def test_totems(self, species, form):
        assert is_totem_form(species, form, 7) is True

    @pytest.mark.parametrize("species,form", [
        (Species.Raticate, 1),   # Alolan
        (Species.Marowak, 1),    # Alolan
        (Species.Mimikyu, 1),    # Busted
        (Species.Gumshoos, 0),
        (Species.Pikachu, 1),
    ])
    def test_not_totems(self, species, form):
        assert is_totem_form(species, form, 7) is False

    def test_only_generation_7(self):
        assert is_totem_form(Species.Gumshoos, 1, 8) is False


class TestNoHatchFromEggForm:
    def test_default_form_always_passes(self):
        for species in (Species.Pichu, Species.Sinistea, Species.Polteageist, Species.Mimikyu):
            assert no_hatch_from_egg_form(species, 0, 7) is False

    def test_spiky_eared_pichu(self):
        assert no_hatch_from_egg_form(Species.Pichu, 1, 4) is True

    def test_antique_teapots(self):
        assert no_hatch_from_egg_form(Species.Sinistea, 1, 8) is True
        assert no_hatch_from_egg_form(Species.Polteageist, 1, 8) is True

    def test_totem(self):
        assert no_hatch_from_egg_form(Species.Mimikyu, 2, 7) is True

    def test_other_forms_pass(self):
        assert no_hatch_from_egg_form(Species.Vivillon, 5, 6) is False
        assert no_hatch_from_egg_form(Species.Rattata, 1, 7) is False


class TestNoHatchFromEggFormGen:
    def test_form_in_range(self):
        assert no_hatch_from_egg_form_gen(Species.Rattata, 1, GameVersion.SN, DEFAULT_GAME_DATA) is False

    def test_form_out_of_range(self):
        assert no_hatch_from_egg_form_gen(Species.Rattata, 1, GameVersion.X, DEFAULT_GAME_DATA) is True

    def test_rotom_forms_always_legal(self):
        for form in range(6):
            assert no_hatch_from_egg_form_gen(Species.Rotom, form, GameVersion.D, DEFAULT_GAME_DATA) is False

    def test_rotom_beyond_appliances(self):
        assert no_hatch_from_egg_form_gen(Species.Rotom, 6, GameVersion.Pt, DEFAULT_GAME_DATA) is True
