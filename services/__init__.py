"""
Application services layer.

Services orchestrate team generation using the shuffler and domain services.
"""

from services.generation_validation import validate_generation

# Result type for consistent error handling
from services.result import Result

# Service interfaces (ABCs)
from services.interfaces import ITeamGenerationService, ITeamPreviewService

from services.team_generation_service import TeamGenerationService
from services.team_preview_service import TeamPreviewService

__all__ = [
    "ITeamGenerationService",
    "ITeamPreviewService",
    "Result",
    "TeamGenerationService",
    "TeamPreviewService",
    "validate_generation",
]
