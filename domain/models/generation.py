"""
Team generation request models.
"""

from dataclasses import dataclass
from enum import Enum

from domain.models.player import Player


class GenerationMode(str, Enum):
    """Strategy used to split players into teams."""

    FAIR = "fair"
    RANDOM = "random"


@dataclass(frozen=True)
class GenerationRequest:
    """A single team generation call: who, how many teams, and how."""

    players: tuple[Player, ...]
    team_count: int
    mode: GenerationMode = GenerationMode.FAIR

    def __post_init__(self):
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "mode", GenerationMode(self.mode))

    @property
    def player_count(self) -> int:
        return len(self.players)
