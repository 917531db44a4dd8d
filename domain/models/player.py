"""
Player domain model.
"""

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 10


class SkillLevel(str, Enum):
    """Coarse skill classification derived from a player's overall skill."""

    BEGINNER = "beginner"
    NOVICE = "novice"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @classmethod
    def from_overall(cls, overall: float) -> "SkillLevel":
        if overall < 2:
            return cls.BEGINNER
        if overall < 4:
            return cls.NOVICE
        if overall < 6:
            return cls.INTERMEDIATE
        if overall < 8:
            return cls.ADVANCED
        return cls.EXPERT

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def _clamp_skill(value: int) -> int:
    return min(max(int(value), MIN_SKILL_LEVEL), MAX_SKILL_LEVEL)


@dataclass(frozen=True)
class Player:
    """
    Represents a rated player available for team generation.

    This is a pure domain model with no infrastructure dependencies.
    Skill attributes are clamped to the 1-10 scale on construction.
    """

    name: str
    technical: int = 5
    agility: int = 5
    endurance: int = 5
    teamwork: int = 5
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self):
        for attr in ("technical", "agility", "endurance", "teamwork"):
            object.__setattr__(self, attr, _clamp_skill(getattr(self, attr)))

    @property
    def overall_skill(self) -> float:
        """Arithmetic mean of the four skill attributes."""
        return (self.technical + self.agility + self.endurance + self.teamwork) / 4.0

    @property
    def skill_level(self) -> SkillLevel:
        return SkillLevel.from_overall(self.overall_skill)

    def __str__(self) -> str:
        return f"{self.name} (Overall: {self.overall_skill:.2f})"
