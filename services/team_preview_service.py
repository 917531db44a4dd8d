"""
Pre-generation advice: team size previews, warnings, and recommendations.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from config import (
    MAX_PLAYERS_PER_TEAM,
    MIN_PLAYERS_PER_TEAM,
    OPTIMAL_MIN_PLAYERS_PER_TEAM,
    SIGNIFICANT_SKILL_GAP,
)
from domain.models.generation import GenerationMode
from domain.models.player import Player
from domain.services.team_balancing_service import TeamBalancingService
from services import error_codes
from services.generation_validation import validate_generation
from services.interfaces import ITeamPreviewService
from services.result import Result

logger = logging.getLogger("teamgen.services.preview")

# Overall skills span 1-10; a deviation of 5 points maps to an estimate of 0
ESTIMATE_NORMALIZER = 5.0
RANDOM_MODE_ESTIMATE = 0.5


@dataclass(frozen=True)
class TeamDistributionPreview:
    """Expected team sizes and per-team skill averages for a request."""

    team_count: int
    players_per_team: list[int]
    estimated_balance: float
    skill_distribution: list[float]


@dataclass(frozen=True)
class GenerationWarning:
    code: str
    message: str


@dataclass(frozen=True)
class GenerationRecommendation:
    code: str
    message: str
    suggested_team_count: int | None = None
    minimum_additional_players: int | None = None


@dataclass(frozen=True)
class GenerationAssessment:
    """Advisory result for a valid request."""

    warnings: list[GenerationWarning] = field(default_factory=list)
    recommendations: list[GenerationRecommendation] = field(default_factory=list)
    estimated_balance: float = 0.0


class TeamPreviewService(ITeamPreviewService):
    """Read-only advice about a generation request; never partitions players."""

    def __init__(self, balancing_service: TeamBalancingService | None = None):
        self.balancing_service = balancing_service or TeamBalancingService()

    def preview_team_distribution(
        self, players: Sequence[Player], team_count: int
    ) -> Result[TeamDistributionPreview]:
        """
        Preview team sizes and a rough skill distribution.

        The skill estimate slices the skill-sorted roster into consecutive
        teams, which is the most lopsided split, so it is a pessimistic guide.

        Args:
            players: Candidate players
            team_count: Requested number of teams

        Returns:
            Result.ok(TeamDistributionPreview) or the validation failure
        """
        validation = validate_generation(len(players), team_count)
        if not validation:
            return validation

        sizes = self.balancing_service.team_capacities(len(players), team_count)
        ranked = sorted(players, key=lambda p: p.overall_skill, reverse=True)

        skill_distribution = []
        start = 0
        for size in sizes:
            slice_players = ranked[start : start + size]
            if slice_players:
                skill_distribution.append(
                    sum(p.overall_skill for p in slice_players) / len(slice_players)
                )
            else:
                skill_distribution.append(0.0)
            start += size

        return Result.ok(
            TeamDistributionPreview(
                team_count=team_count,
                players_per_team=sizes,
                estimated_balance=self._estimate_distribution_balance(skill_distribution),
                skill_distribution=skill_distribution,
            )
        )

    def assess_generation(
        self,
        players: Sequence[Player],
        team_count: int,
        mode: GenerationMode | str = GenerationMode.FAIR,
    ) -> Result[GenerationAssessment]:
        """
        Assess a request and suggest adjustments.

        Args:
            players: Candidate players
            team_count: Requested number of teams
            mode: Generation mode the caller intends to use

        Returns:
            Result.ok(GenerationAssessment), the validation failure, or a
            generation_failed Result for an unknown mode
        """
        validation = validate_generation(len(players), team_count)
        if not validation:
            return validation

        try:
            mode = GenerationMode(mode)
        except ValueError:
            return Result.fail(
                f"Cannot assess generation: unknown mode {mode!r}",
                code=error_codes.GENERATION_FAILED,
                details={"reason": f"unknown mode {mode!r}"},
            )

        player_count = len(players)
        players_per_team, remainder = self.balancing_service.calculate_team_sizes(
            player_count, team_count
        )
        warnings: list[GenerationWarning] = []
        recommendations: list[GenerationRecommendation] = []

        if remainder > 0:
            warnings.append(
                GenerationWarning(
                    "uneven_player_distribution",
                    "Some teams will have 1 more player than others",
                )
            )

        if players_per_team < MIN_PLAYERS_PER_TEAM:
            warnings.append(
                GenerationWarning(
                    "small_team_size",
                    f"Teams will be very small ({players_per_team} player(s) each)",
                )
            )
            suggested = max(2, player_count // MIN_PLAYERS_PER_TEAM)
            recommendations.append(
                GenerationRecommendation(
                    "adjust_team_count",
                    f"Consider {suggested} teams: ensures minimum "
                    f"{MIN_PLAYERS_PER_TEAM} players per team",
                    suggested_team_count=suggested,
                )
            )

        if players_per_team > MAX_PLAYERS_PER_TEAM:
            warnings.append(
                GenerationWarning(
                    "large_team_size",
                    f"Teams will be very large ({players_per_team}+ players each)",
                )
            )
            suggested = math.ceil(player_count / MAX_PLAYERS_PER_TEAM)
            recommendations.append(
                GenerationRecommendation(
                    "adjust_team_count",
                    f"Consider {suggested} teams: keeps teams manageable "
                    f"(max {MAX_PLAYERS_PER_TEAM} players)",
                    suggested_team_count=suggested,
                )
            )

        skills = [p.overall_skill for p in players]
        skill_gap = max(skills) - min(skills)
        if skill_gap > SIGNIFICANT_SKILL_GAP:
            warnings.append(
                GenerationWarning(
                    "significant_skill_gap",
                    f"Large skill difference detected (up to {skill_gap:.1f} points)",
                )
            )
            if mode is GenerationMode.RANDOM:
                recommendations.append(
                    GenerationRecommendation(
                        "use_fair_mode", "Use Fair mode for better skill balance"
                    )
                )

        optimal_minimum = team_count * OPTIMAL_MIN_PLAYERS_PER_TEAM
        if player_count < optimal_minimum:
            missing = optimal_minimum - player_count
            recommendations.append(
                GenerationRecommendation(
                    "add_more_players",
                    f"Add at least {missing} more players for better balance",
                    minimum_additional_players=missing,
                )
            )

        assessment = GenerationAssessment(
            warnings=warnings,
            recommendations=recommendations,
            estimated_balance=self._estimate_mode_balance(skills, mode),
        )
        logger.debug(
            f"Assessment for {player_count} players / {team_count} teams: "
            f"{len(warnings)} warnings, {len(recommendations)} recommendations"
        )
        return Result.ok(assessment)

    def _estimate_mode_balance(self, skills: list[float], mode: GenerationMode) -> float:
        if mode is GenerationMode.RANDOM:
            return RANDOM_MODE_ESTIMATE
        # A tighter spread of individual skills leaves more room for balanced teams
        spread = self.balancing_service.calculate_team_balance(skills)
        return max(0.0, 1.0 - spread / ESTIMATE_NORMALIZER)

    def _estimate_distribution_balance(self, skill_distribution: list[float]) -> float:
        if len(skill_distribution) < 2:
            return 1.0
        overall = sum(skill_distribution) / len(skill_distribution)
        max_deviation = max(abs(avg - overall) for avg in skill_distribution)
        if max_deviation <= 0:
            return 1.0
        return max(0.0, 1.0 - max_deviation / ESTIMATE_NORMALIZER)
