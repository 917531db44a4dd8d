"""
Team domain models.

TeamDraft/DraftArena are the mutable working set used while partitioning and
optimizing; GeneratedTeam is the immutable result handed back to callers.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from domain.models.player import Player, SkillLevel


class TeamStrengthLevel(str, Enum):
    """Strength classification from a team's average skill."""

    WEAK = "weak"
    AVERAGE = "average"
    STRONG = "strong"
    ELITE = "elite"

    @classmethod
    def from_average(cls, average_skill: float) -> "TeamStrengthLevel":
        if average_skill < 4.0:
            return cls.WEAK
        if average_skill < 6.0:
            return cls.AVERAGE
        if average_skill < 8.0:
            return cls.STRONG
        return cls.ELITE

    @property
    def display_name(self) -> str:
        return {
            TeamStrengthLevel.WEAK: "Developing",
            TeamStrengthLevel.AVERAGE: "Balanced",
            TeamStrengthLevel.STRONG: "Strong",
            TeamStrengthLevel.ELITE: "Elite",
        }[self]


class BalanceQuality(str, Enum):
    """Quality bucket for a team's balance score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    VERY_POOR = "very_poor"

    @classmethod
    def from_score(cls, balance_score: float) -> "BalanceQuality":
        if balance_score >= 0.9:
            return cls.EXCELLENT
        if balance_score >= 0.8:
            return cls.GOOD
        if balance_score >= 0.6:
            return cls.FAIR
        if balance_score >= 0.4:
            return cls.POOR
        return cls.VERY_POOR

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class SkillBreakdown:
    """Per-attribute skill averages for a team."""

    technical: float
    agility: float
    endurance: float
    teamwork: float


@dataclass(frozen=True)
class TeamComposition:
    """Count of players at each skill level."""

    beginners: int = 0
    novices: int = 0
    intermediates: int = 0
    advanced: int = 0
    experts: int = 0

    @property
    def total(self) -> int:
        return self.beginners + self.novices + self.intermediates + self.advanced + self.experts


@dataclass(frozen=True)
class TeamValidationResult:
    """Issues make a team invalid; warnings are informational."""

    is_valid: bool
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TeamComparison:
    skill_difference: float
    balance_difference: float
    is_well_balanced: bool
    needs_rebalance: bool


class TeamDraft:
    """
    A fixed-capacity team slot holding indices into the arena's player array.

    Membership is an unordered set; the running skill total is maintained on
    every add/remove so averages are O(1).
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.members: set[int] = set()
        self.total_skill = 0.0

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.capacity

    @property
    def average_skill(self) -> float:
        if not self.members:
            return 0.0
        return self.total_skill / len(self.members)

    def add(self, player_index: int, skill: float) -> None:
        if player_index in self.members:
            raise ValueError(f"Player index {player_index} is already on this team")
        if self.is_full:
            raise ValueError(f"Team is at capacity ({self.capacity})")
        self.members.add(player_index)
        self.total_skill += skill

    def remove(self, player_index: int, skill: float) -> None:
        if player_index not in self.members:
            raise ValueError(f"Player index {player_index} is not on this team")
        self.members.remove(player_index)
        self.total_skill -= skill

    def copy(self) -> "TeamDraft":
        draft = TeamDraft(self.capacity)
        draft.members = set(self.members)
        draft.total_skill = self.total_skill
        return draft


class DraftArena:
    """
    Working partition of a stable player array into team slots.

    Player identity is the index into ``players``; swaps exchange indices
    between two slots without searching by identity.
    """

    def __init__(self, players: Sequence[Player], capacities: Sequence[int]):
        self.players: tuple[Player, ...] = tuple(players)
        self.skills: tuple[float, ...] = tuple(p.overall_skill for p in self.players)
        self.teams: list[TeamDraft] = [TeamDraft(capacity) for capacity in capacities]
        self._assigned: set[int] = set()

    @property
    def team_count(self) -> int:
        return len(self.teams)

    @property
    def unassigned_count(self) -> int:
        return len(self.players) - len(self._assigned)

    def assign(self, player_index: int, team_index: int) -> None:
        """Place an unassigned player into a team slot."""
        if player_index in self._assigned:
            raise ValueError(f"Player index {player_index} is already assigned")
        self.teams[team_index].add(player_index, self.skills[player_index])
        self._assigned.add(player_index)

    def swap(self, team_a: int, player_a: int, team_b: int, player_b: int) -> None:
        """Exchange one player between two teams."""
        draft_a, draft_b = self.teams[team_a], self.teams[team_b]
        draft_a.remove(player_a, self.skills[player_a])
        draft_b.remove(player_b, self.skills[player_b])
        draft_a.add(player_b, self.skills[player_b])
        draft_b.add(player_a, self.skills[player_a])

    def averages(self) -> list[float]:
        return [team.average_skill for team in self.teams]

    def sizes(self) -> list[int]:
        return [team.size for team in self.teams]

    def rosters(self) -> list[tuple[Player, ...]]:
        """Team rosters with players in their original input order."""
        return [tuple(self.players[i] for i in sorted(team.members)) for team in self.teams]

    def copy(self) -> "DraftArena":
        clone = DraftArena.__new__(DraftArena)
        clone.players = self.players
        clone.skills = self.skills
        clone.teams = [team.copy() for team in self.teams]
        clone._assigned = set(self._assigned)
        return clone


@dataclass(frozen=True)
class GeneratedTeam:
    """
    A finalized team returned from generation.

    Immutable: balance scores are refreshed by building new instances.
    """

    players: tuple[Player, ...]
    average_skill: float
    balance_score: float = 0.0

    @classmethod
    def from_players(cls, players: Sequence[Player], balance_score: float = 0.0) -> "GeneratedTeam":
        players = tuple(players)
        if players:
            average = sum(p.overall_skill for p in players) / len(players)
        else:
            average = 0.0
        return cls(players=players, average_skill=average, balance_score=balance_score)

    @property
    def total_players(self) -> int:
        return len(self.players)

    @property
    def skill_variance(self) -> float:
        """Population variance of player overall skills (0 for fewer than 2 players)."""
        if len(self.players) < 2:
            return 0.0
        mean = self.average_skill
        return sum((p.overall_skill - mean) ** 2 for p in self.players) / len(self.players)

    @property
    def skill_standard_deviation(self) -> float:
        return math.sqrt(self.skill_variance)

    @property
    def min_skill_level(self) -> float:
        return min((p.overall_skill for p in self.players), default=0.0)

    @property
    def max_skill_level(self) -> float:
        return max((p.overall_skill for p in self.players), default=0.0)

    @property
    def skill_range(self) -> float:
        return self.max_skill_level - self.min_skill_level

    @property
    def skill_breakdown(self) -> SkillBreakdown:
        if not self.players:
            return SkillBreakdown(technical=0.0, agility=0.0, endurance=0.0, teamwork=0.0)
        count = len(self.players)
        return SkillBreakdown(
            technical=sum(p.technical for p in self.players) / count,
            agility=sum(p.agility for p in self.players) / count,
            endurance=sum(p.endurance for p in self.players) / count,
            teamwork=sum(p.teamwork for p in self.players) / count,
        )

    @property
    def strength_level(self) -> TeamStrengthLevel:
        return TeamStrengthLevel.from_average(self.average_skill)

    @property
    def balance_quality(self) -> BalanceQuality:
        return BalanceQuality.from_score(self.balance_score)

    @property
    def composition(self) -> TeamComposition:
        levels = [p.skill_level for p in self.players]
        return TeamComposition(
            beginners=levels.count(SkillLevel.BEGINNER),
            novices=levels.count(SkillLevel.NOVICE),
            intermediates=levels.count(SkillLevel.INTERMEDIATE),
            advanced=levels.count(SkillLevel.ADVANCED),
            experts=levels.count(SkillLevel.EXPERT),
        )

    def validate_composition(self) -> TeamValidationResult:
        """Check the roster for structural issues and balance warnings."""
        issues: list[str] = []
        warnings: list[str] = []

        if not self.players:
            issues.append("Team cannot be empty")
        elif len(self.players) == 1:
            warnings.append("Team has only one player")

        if len({p.id for p in self.players}) != len(self.players):
            issues.append("Team contains duplicate players")

        if self.skill_range > 6.0:
            warnings.append(f"Large skill gap in team (range: {self.skill_range:.1f})")

        if self.skill_standard_deviation > 2.5:
            warnings.append(f"High skill variance (stddev: {self.skill_standard_deviation:.1f})")

        return TeamValidationResult(is_valid=not issues, issues=issues, warnings=warnings)

    def compare_balance(self, other: "GeneratedTeam") -> TeamComparison:
        skill_difference = abs(self.average_skill - other.average_skill)
        return TeamComparison(
            skill_difference=skill_difference,
            balance_difference=abs(self.balance_score - other.balance_score),
            is_well_balanced=skill_difference < 1.0,
            needs_rebalance=skill_difference > 2.0,
        )

    def __str__(self) -> str:
        player_names = ", ".join(p.name for p in self.players)
        return f"Team ({self.average_skill:.2f}): {player_names}"
