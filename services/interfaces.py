"""
Service layer interfaces (ABCs).

These abstract base classes define the contracts for the team generation
services. Alternate implementations (and test doubles) should inherit from the
matching interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random
    import threading

    from domain.models.generation import GenerationMode
    from domain.models.player import Player
    from domain.models.team import GeneratedTeam
    from services.result import Result
    from services.team_preview_service import GenerationAssessment, TeamDistributionPreview


class ITeamGenerationService(ABC):
    """Interface for splitting players into balanced teams."""

    @abstractmethod
    def generate_teams(
        self,
        players: Sequence["Player"],
        team_count: int,
        mode: "GenerationMode | str" = "fair",
        *,
        checkpoint: Callable[[], None] | None = None,
        cancel_event: "threading.Event | None" = None,
        rng: "random.Random | None" = None,
    ) -> "Result[list[GeneratedTeam]]":
        """Generate team_count teams from players using the given mode."""
        ...

    @abstractmethod
    def calculate_balance_scores(self, teams: Sequence["GeneratedTeam"]) -> list["GeneratedTeam"]:
        """Recompute balance scores for an existing team list."""
        ...

    @abstractmethod
    def validate_generation(self, player_count: int, team_count: int) -> "Result[None]":
        """Check request preconditions without generating."""
        ...


class ITeamPreviewService(ABC):
    """Interface for pre-generation previews and advice."""

    @abstractmethod
    def preview_team_distribution(
        self, players: Sequence["Player"], team_count: int
    ) -> "Result[TeamDistributionPreview]":
        """Estimate team sizes and skill spread before generating."""
        ...

    @abstractmethod
    def assess_generation(
        self,
        players: Sequence["Player"],
        team_count: int,
        mode: "GenerationMode | str" = "fair",
    ) -> "Result[GenerationAssessment]":
        """Return warnings, recommendations and an estimated balance."""
        ...
