"""
Pytest fixtures for tests.

This module provides centralized player factories and a seeded random source
so generation tests are reproducible. Import the helpers from here instead of
building rosters locally in each test file.
"""

import random

import pytest

from domain.models.player import Player
from domain.services.team_balancing_service import TeamBalancingService
from services.team_generation_service import TeamGenerationService

TEST_SEED = 20240607
"""Seed used for every seeded random source in the suite."""


def make_player(name: str, skill: int, **overrides) -> Player:
    """Create a player whose four skills all equal ``skill`` unless overridden."""
    skills = {"technical": skill, "agility": skill, "endurance": skill, "teamwork": skill}
    skills.update(overrides)
    return Player(name=name, id=name, **skills)


def make_roster(count: int, seed: int = TEST_SEED) -> list[Player]:
    """Create ``count`` players with varied, reproducible skills."""
    rng = random.Random(seed)
    return [
        Player(
            name=f"Player{i}",
            id=f"player-{i}",
            technical=rng.randint(1, 10),
            agility=rng.randint(1, 10),
            endurance=rng.randint(1, 10),
            teamwork=rng.randint(1, 10),
        )
        for i in range(count)
    ]


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(TEST_SEED)


@pytest.fixture
def balancing_service():
    return TeamBalancingService()


@pytest.fixture
def generation_service():
    """Team generation service with a seeded random source."""
    return TeamGenerationService(rng=random.Random(TEST_SEED))


@pytest.fixture
def sample_players():
    """Create 10 players with varied skills."""
    return make_roster(10)
