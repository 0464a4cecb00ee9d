"""Pytest configuration and shared fixtures."""

import pytest

from pastebook.teams.parser import TeamParser


@pytest.fixture
def parser():
    return TeamParser()


@pytest.fixture
def sample_pokemon():
    """Return a single entry paste for testing."""
    return """
Garchomp @ Rocky Helmet
Ability: Rough Skin
EVs: 252 HP / 4 Def / 252 Spe
Jolly Nature
- Earthquake
- Stealth Rock
"""


@pytest.fixture
def sample_team():
    """Return a sample team paste with a team header."""
    return """Ash's team:

Pikachu (F) @ Light Ball
Ability: Static
Level: 50
Tera Type: Electric
EVs: 252 SpA / 4 SpD / 252 Spe
Timid Nature
IVs: 0 Atk
- Thunderbolt
- Volt Switch
- Grass Knot
- Hidden Power Ice

Zard (Charizard) @ Heavy-Duty Boots
Ability: Solar Power
Shiny: Yes
EVs: 252 SpA / 4 SpD / 252 Spe
Modest Nature
- Flamethrower
- Dragon Pulse
- Roost
- Focus Blast
"""
