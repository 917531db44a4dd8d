"""
Standard error codes for team generation.

These codes let callers branch on specific failures without parsing message
text. Every failed generation Result carries exactly one of them.

Usage:
    from services import error_codes

    if result.error_code == error_codes.INSUFFICIENT_PLAYERS:
        required = result.details["required"]
"""

# Request validation
EMPTY_PLAYER_LIST = "empty_player_list"
INVALID_TEAM_COUNT = "invalid_team_count"
INSUFFICIENT_PLAYERS = "insufficient_players"

# Generation
GENERATION_FAILED = "generation_failed"
GENERATION_CANCELLED = "generation_cancelled"
