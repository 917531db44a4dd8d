"""
Tests for the Player domain model.
"""

from dataclasses import FrozenInstanceError

import pytest

from domain.models.player import Player, SkillLevel


class TestPlayer:
    """Test Player class functionality."""

    def test_overall_skill_is_mean_of_attributes(self):
        player = Player(name="Alice", technical=8, agility=6, endurance=5, teamwork=7)
        assert player.overall_skill == pytest.approx(6.5)

    def test_skills_are_clamped_to_scale(self):
        player = Player(name="Bob", technical=15, agility=0, endurance=-3, teamwork=10)
        assert player.technical == 10
        assert player.agility == 1
        assert player.endurance == 1
        assert player.teamwork == 10

    def test_default_ids_are_unique(self):
        first = Player(name="Same")
        second = Player(name="Same")
        assert first.id != second.id
        assert first != second

    def test_explicit_id_is_kept(self):
        player = Player(name="Carol", id="carol-1")
        assert player.id == "carol-1"

    def test_player_is_immutable(self):
        player = Player(name="Dave")
        with pytest.raises(FrozenInstanceError):
            player.technical = 9

    def test_players_are_hashable(self):
        player = Player(name="Eve", id="eve")
        assert len({player, player}) == 1

    def test_str_includes_overall(self):
        player = Player(name="Frank", technical=4, agility=4, endurance=4, teamwork=4)
        assert str(player) == "Frank (Overall: 4.00)"


class TestSkillLevel:
    """Test skill level classification boundaries."""

    @pytest.mark.parametrize(
        "overall,expected",
        [
            (1.0, SkillLevel.BEGINNER),
            (1.75, SkillLevel.BEGINNER),
            (2.0, SkillLevel.NOVICE),
            (3.75, SkillLevel.NOVICE),
            (4.0, SkillLevel.INTERMEDIATE),
            (6.0, SkillLevel.ADVANCED),
            (7.75, SkillLevel.ADVANCED),
            (8.0, SkillLevel.EXPERT),
            (10.0, SkillLevel.EXPERT),
        ],
    )
    def test_from_overall(self, overall, expected):
        assert SkillLevel.from_overall(overall) == expected

    def test_player_skill_level(self):
        player = Player(name="Gina", technical=9, agility=9, endurance=8, teamwork=8)
        assert player.skill_level == SkillLevel.EXPERT
        assert player.skill_level.display_name == "Expert"
