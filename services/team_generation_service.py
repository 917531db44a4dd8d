"""
Team generation orchestration: validation, shuffling, and scoring.
"""

import asyncio
import logging
import random
import threading
from collections.abc import Callable, Sequence

from config import TIERED_MAX_PLAYERS
from domain.models.generation import GenerationMode, GenerationRequest
from domain.models.player import Player
from domain.models.team import GeneratedTeam
from domain.services.team_balancing_service import TeamBalancingService
from services import error_codes
from services.generation_validation import validate_generation
from services.interfaces import ITeamGenerationService
from services.result import Result
from shuffler import BalancedShuffler
from utils.checkpoint import Checkpoint, GenerationCancelled

logger = logging.getLogger("teamgen.services.generation")


class TeamGenerationService(ITeamGenerationService):
    """
    Splits players into balanced teams.

    Stateless between calls: each call builds its own working drafts. The only
    shared object is the random source, so concurrent callers that need
    reproducible output should pass their own rng per call.
    """

    def __init__(
        self,
        shuffler: BalancedShuffler | None = None,
        balancing_service: TeamBalancingService | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize TeamGenerationService.

        Args:
            shuffler: Partitioning/optimization engine (defaults from config)
            balancing_service: Domain service for scoring
            rng: Random source for all shuffling; seed it for reproducible teams
        """
        self.balancing_service = balancing_service or TeamBalancingService()
        self.shuffler = shuffler or BalancedShuffler(balancing_service=self.balancing_service)
        self.rng = rng or random.Random()

    def validate_generation(self, player_count: int, team_count: int) -> Result[None]:
        return validate_generation(player_count, team_count)

    def calculate_balance_scores(self, teams: Sequence[GeneratedTeam]) -> list[GeneratedTeam]:
        return self.balancing_service.calculate_balance_scores(teams)

    def generate_teams(
        self,
        players: Sequence[Player],
        team_count: int,
        mode: GenerationMode | str = GenerationMode.FAIR,
        *,
        checkpoint: Callable[[], None] | None = None,
        cancel_event: threading.Event | None = None,
        rng: random.Random | None = None,
    ) -> Result[list[GeneratedTeam]]:
        """
        Generate balanced teams.

        Args:
            players: Players to distribute; each appears in exactly one team
            team_count: Number of teams (at least 2)
            mode: "fair" balances skill, "random" deals a uniform shuffle
            checkpoint: Optional hook called at cooperative checkpoints
            cancel_event: Optional event; once set, generation stops at the next
                checkpoint with a generation_cancelled failure. Requests that
                finish before their first checkpoint complete normally
            rng: Random source for this call only; defaults to the service rng

        Returns:
            Result.ok(list of scored GeneratedTeam) on success
            Result.fail(error, code, details) on any failure; never partial teams
        """
        validation = self.validate_generation(len(players), team_count)
        if not validation:
            logger.debug(f"Generation rejected ({validation.error_code}): {validation.error}")
            return validation

        try:
            request = GenerationRequest(players=tuple(players), team_count=team_count, mode=mode)
        except ValueError:
            return Result.fail(
                f"Team generation failed: unknown mode {mode!r}",
                code=error_codes.GENERATION_FAILED,
                details={"reason": f"unknown mode {mode!r}"},
            )

        if (
            request.mode is GenerationMode.FAIR
            and request.player_count > TIERED_MAX_PLAYERS
        ):
            logger.info(
                f"Fair generation for {request.player_count} players exceeds "
                f"{TIERED_MAX_PLAYERS}; using tiered distribution"
            )

        try:
            arena = self.shuffler.shuffle(
                request.players,
                request.team_count,
                mode=request.mode,
                rng=rng or self.rng,
                checkpoint=Checkpoint(hook=checkpoint, cancel_event=cancel_event),
            )
            teams = self.balancing_service.build_teams(arena.rosters())
            teams = self.calculate_balance_scores(teams)
        except GenerationCancelled as exc:
            logger.info(f"Team generation cancelled: {exc}")
            return Result.fail("Team generation was cancelled", code=error_codes.GENERATION_CANCELLED)
        except Exception as exc:
            logger.error(f"Team generation failed: {exc}", exc_info=True)
            return Result.fail(
                f"Team generation failed: {exc}",
                code=error_codes.GENERATION_FAILED,
                details={"reason": str(exc)},
            )

        logger.debug(
            f"Generated {len(teams)} teams ({request.mode.value}) with sizes "
            f"{[team.total_players for team in teams]}"
        )
        return Result.ok(teams)

    async def generate_teams_async(
        self,
        players: Sequence[Player],
        team_count: int,
        mode: GenerationMode | str = GenerationMode.FAIR,
        *,
        checkpoint: Callable[[], None] | None = None,
        cancel_event: threading.Event | None = None,
        rng: random.Random | None = None,
    ) -> Result[list[GeneratedTeam]]:
        """
        Run generate_teams in a worker thread so the event loop stays responsive.

        Cancelling the awaiting task sets the cancellation event; the worker
        stops at its next checkpoint. Checkpoints run after each skill tier and
        every few optimizer rounds, so a small fair request (snake draft) or a
        random request can finish before any checkpoint and ignore the signal.
        Pass a separate rng to keep concurrent seeded runs reproducible.
        """
        cancel_event = cancel_event or threading.Event()
        try:
            return await asyncio.to_thread(
                self.generate_teams,
                players,
                team_count,
                mode,
                checkpoint=checkpoint,
                cancel_event=cancel_event,
                rng=rng,
            )
        except asyncio.CancelledError:
            cancel_event.set()
            raise
