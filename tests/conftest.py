"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from egg_origin.encounters import Creature  # noqa: E402
from egg_origin.game_version import GameVersion  # noqa: E402


@pytest.fixture
def make_creature():
    """Build a Creature with sensible gen 6 defaults, overriding any field."""
    def _make(**overrides):
        fields = dict(
            species=25, form=0, generation=6, version=GameVersion.X,
            current_level=10, met_level=1, met_location=0,
        )
        fields.update(overrides)
        return Creature(**fields)
    return _make


@pytest.fixture
def gen2_creature(make_creature):
    """Factory for gen 2 creatures that pass every met-data check by default."""
    def _make(**overrides):
        fields = dict(generation=2, version=GameVersion.GS, format=2,
                      current_level=10, met_level=0, met_location=0)
        fields.update(overrides)
        return make_creature(**fields)
    return _make
