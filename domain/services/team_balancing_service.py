"""
Team balancing domain service.

Handles team size planning, the global balance metric, and balance scoring.
"""

import math
from collections.abc import Sequence
from dataclasses import replace

from domain.models.player import Player
from domain.models.team import GeneratedTeam


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Plan team sizes so no two teams differ by more than one player
    - Measure how far apart team averages are
    - Score each team's balance relative to the others
    """

    def calculate_team_sizes(self, player_count: int, team_count: int) -> tuple[int, int]:
        """
        Calculate balanced team sizes.

        Args:
            player_count: Number of players to distribute
            team_count: Number of teams

        Returns:
            Tuple of (base_size, larger_team_count). The first
            ``larger_team_count`` teams get ``base_size + 1`` players.
        """
        return divmod(player_count, team_count)

    def team_capacities(self, player_count: int, team_count: int) -> list[int]:
        """Per-team capacity list, larger teams first (e.g. 10 players, 3 teams -> [4, 3, 3])."""
        base_size, larger_teams = self.calculate_team_sizes(player_count, team_count)
        return [base_size + 1 if i < larger_teams else base_size for i in range(team_count)]

    def calculate_team_balance(self, averages: Sequence[float]) -> float:
        """
        Population standard deviation of team averages (lower is better).

        Returns 0.0 when there are fewer than two teams.
        """
        if len(averages) < 2:
            return 0.0
        overall = sum(averages) / len(averages)
        variance = sum((avg - overall) ** 2 for avg in averages) / len(averages)
        return math.sqrt(variance)

    def build_teams(self, rosters: Sequence[Sequence[Player]]) -> list[GeneratedTeam]:
        """Convert finished rosters into unscored GeneratedTeams."""
        return [GeneratedTeam.from_players(roster) for roster in rosters]

    def calculate_balance_scores(self, teams: Sequence[GeneratedTeam]) -> list[GeneratedTeam]:
        """
        Score each team's balance against the cross-team mean.

        A team at the mean scores 1.0, the team furthest from it scores 0.0.
        When every team average is identical, every team scores 1.0. Returns
        new instances and has no hidden state, so it is safe to call again on
        any team list.

        Args:
            teams: Finalized teams

        Returns:
            Teams with balance_score populated, in the same order
        """
        if not teams:
            return []

        averages = [team.average_skill for team in teams]
        overall = sum(averages) / len(averages)
        max_deviation = max(abs(avg - overall) for avg in averages)

        scored = []
        for team in teams:
            if max_deviation > 0:
                deviation = abs(team.average_skill - overall)
                score = max(0.0, 1.0 - deviation / max_deviation)
            else:
                score = 1.0
            scored.append(replace(team, balance_score=score))
        return scored
