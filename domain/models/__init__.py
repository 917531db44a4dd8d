"""
Domain models - pure data structures representing team generation entities.
"""

from domain.models.generation import GenerationMode, GenerationRequest
from domain.models.player import Player, SkillLevel
from domain.models.team import (
    BalanceQuality,
    DraftArena,
    GeneratedTeam,
    TeamDraft,
    TeamStrengthLevel,
)

__all__ = [
    "BalanceQuality",
    "DraftArena",
    "GeneratedTeam",
    "GenerationMode",
    "GenerationRequest",
    "Player",
    "SkillLevel",
    "TeamDraft",
    "TeamStrengthLevel",
]
