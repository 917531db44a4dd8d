"""
Validation for team generation requests.

Checked before any partitioning work starts; shared by generation and preview.
"""

from services import error_codes
from services.result import Result


def validate_generation(player_count: int, team_count: int) -> Result[None]:
    """
    Check whether player_count players can be split into team_count teams.

    Checks run in order and the first failure wins:
    - no players at all
    - fewer than two teams
    - fewer players than teams

    Args:
        player_count: Number of available players
        team_count: Requested number of teams

    Returns:
        Result.ok() if generation can proceed
        Result.fail(error, code, details) otherwise

    Examples:
        >>> validate_generation(10, 3)
        Result(success=True, ...)

        >>> validate_generation(3, 5)
        Result(success=False, ..., error_code="insufficient_players",
               details={"required": 5, "available": 3})
    """
    if player_count == 0:
        return Result.fail(
            "No players available for team generation",
            code=error_codes.EMPTY_PLAYER_LIST,
        )

    if team_count < 2:
        return Result.fail(
            f"Invalid team count: {team_count}. Must be at least 2",
            code=error_codes.INVALID_TEAM_COUNT,
            details={"count": team_count},
        )

    if player_count < team_count:
        return Result.fail(
            f"Need at least {team_count} players, but only {player_count} available",
            code=error_codes.INSUFFICIENT_PLAYERS,
            details={"required": team_count, "available": player_count},
        )

    return Result.ok()
