"""
Tests for TeamBalancingService: team sizing, balance metric, and scoring.
"""

import pytest

from domain.models.team import GeneratedTeam
from tests.conftest import make_player


def _team(average: float) -> GeneratedTeam:
    return GeneratedTeam(players=(), average_skill=average)


class TestTeamSizes:
    @pytest.mark.parametrize(
        "players,teams,expected",
        [
            (10, 3, (3, 1)),
            (4, 2, (2, 0)),
            (7, 7, (1, 0)),
            (99, 8, (12, 3)),
        ],
    )
    def test_calculate_team_sizes(self, balancing_service, players, teams, expected):
        assert balancing_service.calculate_team_sizes(players, teams) == expected

    def test_capacities_put_larger_teams_first(self, balancing_service):
        assert balancing_service.team_capacities(10, 3) == [4, 3, 3]
        assert balancing_service.team_capacities(11, 4) == [3, 3, 3, 2]

    @pytest.mark.parametrize("players,teams", [(10, 3), (31, 4), (100, 7), (5, 5)])
    def test_capacities_sum_and_parity(self, balancing_service, players, teams):
        capacities = balancing_service.team_capacities(players, teams)
        assert sum(capacities) == players
        assert max(capacities) - min(capacities) <= 1


class TestTeamBalance:
    def test_population_standard_deviation(self, balancing_service):
        # mean 5, squared deviations 1 + 1 -> variance 1
        assert balancing_service.calculate_team_balance([4.0, 6.0]) == pytest.approx(1.0)

    def test_equal_averages_have_zero_spread(self, balancing_service):
        assert balancing_service.calculate_team_balance([5.5, 5.5, 5.5]) == 0.0

    def test_fewer_than_two_teams(self, balancing_service):
        assert balancing_service.calculate_team_balance([7.0]) == 0.0
        assert balancing_service.calculate_team_balance([]) == 0.0


class TestBalanceScores:
    def test_scores_relative_to_max_deviation(self, balancing_service):
        scored = balancing_service.calculate_balance_scores([_team(4.0), _team(5.0), _team(7.0)])
        # overall 16/3, deviations 4/3, 1/3, 5/3
        assert scored[0].balance_score == pytest.approx(1 - (4 / 3) / (5 / 3))
        assert scored[1].balance_score == pytest.approx(1 - (1 / 3) / (5 / 3))
        assert scored[2].balance_score == pytest.approx(0.0)

    def test_identical_averages_score_one(self, balancing_service):
        scored = balancing_service.calculate_balance_scores([_team(6.25)] * 4)
        assert [team.balance_score for team in scored] == [1.0, 1.0, 1.0, 1.0]

    def test_scores_within_unit_interval(self, balancing_service):
        scored = balancing_service.calculate_balance_scores(
            [_team(avg) for avg in (1.0, 9.5, 3.25, 3.25, 10.0)]
        )
        assert all(0.0 <= team.balance_score <= 1.0 for team in scored)

    def test_scoring_is_idempotent(self, balancing_service):
        teams = [_team(avg) for avg in (4.5, 5.0, 6.75)]
        once = balancing_service.calculate_balance_scores(teams)
        twice = balancing_service.calculate_balance_scores(once)
        assert [t.balance_score for t in once] == [t.balance_score for t in twice]

    def test_scoring_returns_new_instances(self, balancing_service):
        teams = [_team(4.0), _team(6.0)]
        scored = balancing_service.calculate_balance_scores(teams)
        assert teams[0].balance_score == 0.0
        assert scored[0] is not teams[0]
        assert scored[0].average_skill == teams[0].average_skill

    def test_empty_list(self, balancing_service):
        assert balancing_service.calculate_balance_scores([]) == []

    def test_build_teams_from_rosters(self, balancing_service):
        rosters = [(make_player("A", 8), make_player("B", 4)), (make_player("C", 6),)]
        teams = balancing_service.build_teams(rosters)
        assert [t.average_skill for t in teams] == pytest.approx([6.0, 6.0])
        assert [t.balance_score for t in teams] == [0.0, 0.0]
