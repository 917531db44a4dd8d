"""Tests for team generation request validation."""

import pytest

from services import error_codes
from services.generation_validation import validate_generation


class TestValidateGeneration:
    def test_valid_request(self):
        result = validate_generation(10, 3)
        assert result.success
        assert result.value is None
        assert result.error_code is None

    def test_exact_player_count_is_valid(self):
        assert validate_generation(4, 4)

    def test_empty_player_list(self):
        result = validate_generation(0, 2)
        assert not result.success
        assert result.error_code == error_codes.EMPTY_PLAYER_LIST

    @pytest.mark.parametrize("team_count", [1, 0, -3])
    def test_invalid_team_count(self, team_count):
        result = validate_generation(10, team_count)
        assert result.error_code == error_codes.INVALID_TEAM_COUNT
        assert result.details == {"count": team_count}
        assert str(team_count) in result.error

    def test_insufficient_players(self):
        result = validate_generation(3, 5)
        assert result.error_code == error_codes.INSUFFICIENT_PLAYERS
        assert result.details == {"required": 5, "available": 3}
        assert result.error == "Need at least 5 players, but only 3 available"

    def test_empty_list_checked_before_team_count(self):
        result = validate_generation(0, 1)
        assert result.error_code == error_codes.EMPTY_PLAYER_LIST

    def test_team_count_checked_before_player_shortage(self):
        result = validate_generation(1, 1)
        assert result.error_code == error_codes.INVALID_TEAM_COUNT
