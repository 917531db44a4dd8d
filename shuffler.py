"""
Balanced team shuffling algorithms.

Partitioners build an initial assignment of players to teams; the local search
optimizer then swaps players between teams to pull team averages together.
"""

import itertools
import logging
import math
import random
from collections.abc import Sequence

from config import BALANCER_SETTINGS
from domain.models.generation import GenerationMode
from domain.models.player import Player
from domain.models.team import DraftArena
from domain.services.team_balancing_service import TeamBalancingService
from utils.checkpoint import Checkpoint

logger = logging.getLogger("teamgen.shuffler")


class SnakeDraftPartitioner:
    """
    Snake draft over skill bands, used for fair mode with small rosters.

    Players are grouped into fixed-width skill bands (strongest first) and only
    shuffled within a band, so the global skill ordering is preserved. Picks
    start at a random team in a random direction and bounce between the
    boundary teams.
    """

    def __init__(self, balancing_service: TeamBalancingService, skill_band_width: float = 0.2):
        self.balancing_service = balancing_service
        self.skill_band_width = skill_band_width

    def _order_by_skill_band(self, players: Sequence[Player], rng: random.Random) -> list[int]:
        bands: dict[int, list[int]] = {}
        for index, player in enumerate(players):
            # Small epsilon keeps exact band edges (e.g. 3.0 / 0.2) in the upper band
            band = math.floor(player.overall_skill / self.skill_band_width + 1e-9)
            bands.setdefault(band, []).append(index)

        ordered: list[int] = []
        for band in sorted(bands, reverse=True):
            members = bands[band]
            rng.shuffle(members)
            ordered.extend(members)
        return ordered

    def _next_open_team(self, arena: DraftArena, current: int, direction: int) -> tuple[int, int]:
        """
        Find the nearest team with room, searching onward in the current
        direction (wrapping) and then in the opposite direction.

        Returns:
            Tuple of (team_index, direction)
        """
        team_count = arena.team_count
        for step_direction in (direction, -direction):
            candidate = current
            for _ in range(team_count):
                candidate = (candidate + step_direction) % team_count
                if not arena.teams[candidate].is_full:
                    return candidate, step_direction
        raise ValueError("No team has remaining capacity")

    def partition(
        self,
        players: Sequence[Player],
        team_count: int,
        rng: random.Random,
        checkpoint: Checkpoint,
    ) -> DraftArena:
        capacities = self.balancing_service.team_capacities(len(players), team_count)
        arena = DraftArena(players, capacities)
        order = self._order_by_skill_band(players, rng)

        current = rng.randrange(team_count)
        direction = rng.choice((1, -1))

        for player_index in order:
            if arena.teams[current].is_full:
                current, direction = self._next_open_team(arena, current, direction)
            arena.assign(player_index, current)

            # Boundary teams pick twice in a row as the direction reverses
            if direction == 1:
                if current == team_count - 1:
                    direction = -1
                else:
                    current += 1
            else:
                if current == 0:
                    direction = 1
                else:
                    current -= 1

        return arena


class TieredPartitioner:
    """
    Skill-tier distribution, used for fair mode with larger rosters.

    Players are sorted by skill and cut into contiguous tiers; each tier is
    dealt out across the teams before the next (weaker) tier starts.
    """

    def __init__(
        self,
        balancing_service: TeamBalancingService,
        max_tier_count: int = 8,
        randomized_assignment: bool = True,
    ):
        self.balancing_service = balancing_service
        self.max_tier_count = max_tier_count
        self.randomized_assignment = randomized_assignment

    def build_tiers(
        self, players: Sequence[Player], team_count: int, rng: random.Random
    ) -> list[list[int]]:
        """
        Split players into near-equal contiguous tiers, strongest first.

        Tier sizes differ by at most one and every player lands in a tier.
        Order is shuffled only within each tier.
        """
        ranked = sorted(range(len(players)), key=lambda i: players[i].overall_skill, reverse=True)
        tier_count = max(1, min(2 * team_count, self.max_tier_count, len(ranked)))
        base_size, larger_tiers = divmod(len(ranked), tier_count)

        tiers: list[list[int]] = []
        start = 0
        for tier_index in range(tier_count):
            size = base_size + 1 if tier_index < larger_tiers else base_size
            tier = ranked[start : start + size]
            rng.shuffle(tier)
            tiers.append(tier)
            start += size
        return tiers

    def _distribute_tier(self, arena: DraftArena, tier: list[int], rng: random.Random) -> None:
        visit_order = list(range(arena.team_count))
        if self.randomized_assignment:
            rng.shuffle(visit_order)

        position = 0
        for player_index in tier:
            for _ in range(arena.team_count):
                team_index = visit_order[position % len(visit_order)]
                position += 1
                if not arena.teams[team_index].is_full:
                    arena.assign(player_index, team_index)
                    break
            else:
                raise ValueError("No team has remaining capacity")

    def partition(
        self,
        players: Sequence[Player],
        team_count: int,
        rng: random.Random,
        checkpoint: Checkpoint,
    ) -> DraftArena:
        capacities = self.balancing_service.team_capacities(len(players), team_count)
        arena = DraftArena(players, capacities)

        for tier in self.build_tiers(players, team_count, rng):
            self._distribute_tier(arena, tier, rng)
            checkpoint()

        return arena


class RandomPartitioner:
    """Uniform shuffle dealt round-robin; no skill balancing."""

    def __init__(self, balancing_service: TeamBalancingService):
        self.balancing_service = balancing_service

    def partition(
        self,
        players: Sequence[Player],
        team_count: int,
        rng: random.Random,
        checkpoint: Checkpoint,
    ) -> DraftArena:
        capacities = self.balancing_service.team_capacities(len(players), team_count)
        arena = DraftArena(players, capacities)
        order = list(range(len(players)))
        rng.shuffle(order)
        for position, player_index in enumerate(order):
            arena.assign(player_index, position % team_count)
        return arena


class LocalSearchOptimizer:
    """
    Pairwise swap hill-climbing over a partition.

    Minimizes the population standard deviation of team averages. Work is split
    into up to three passes, each restarting from the best partition seen so
    far with a different random team-pair order.
    """

    def __init__(
        self,
        balancing_service: TeamBalancingService,
        max_iterations: int,
        balance_threshold: float = 0.15,
        checkpoint_interval: int = 10,
    ):
        self.balancing_service = balancing_service
        self.max_iterations = max_iterations
        self.balance_threshold = balance_threshold
        self.checkpoint_interval = checkpoint_interval

    def _balance(self, arena: DraftArena) -> float:
        return self.balancing_service.calculate_team_balance(arena.averages())

    def find_best_swap(self, arena: DraftArena, team_a: int, team_b: int) -> tuple[int, int] | None:
        """
        Exhaustively search one-for-one swaps between two teams.

        Returns the (player_a, player_b) swap that most reduces the gap between
        the two team averages, or None if no swap reduces it. Ties go to the
        first swap found in ascending player-index order.
        """
        draft_a, draft_b = arena.teams[team_a], arena.teams[team_b]
        if not draft_a.members or not draft_b.members:
            return None

        skills = arena.skills
        size_a, size_b = draft_a.size, draft_b.size
        current_difference = abs(draft_a.average_skill - draft_b.average_skill)

        best_swap = None
        best_improvement = 0.0
        for player_a in sorted(draft_a.members):
            for player_b in sorted(draft_b.members):
                delta = skills[player_b] - skills[player_a]
                new_a = (draft_a.total_skill + delta) / size_a
                new_b = (draft_b.total_skill - delta) / size_b
                improvement = current_difference - abs(new_a - new_b)
                if improvement > best_improvement:
                    best_improvement = improvement
                    best_swap = (player_a, player_b)
        return best_swap

    def try_swap(self, arena: DraftArena, team_a: int, team_b: int) -> bool:
        """Apply the best swap for a team pair if it strictly narrows their gap."""
        swap = self.find_best_swap(arena, team_a, team_b)
        if swap is None:
            return False

        player_a, player_b = swap
        draft_a, draft_b = arena.teams[team_a], arena.teams[team_b]
        old_difference = abs(draft_a.average_skill - draft_b.average_skill)
        arena.swap(team_a, player_a, team_b, player_b)
        new_difference = abs(draft_a.average_skill - draft_b.average_skill)

        if new_difference < old_difference:
            return True

        arena.swap(team_a, player_b, team_b, player_a)
        return False

    def optimize(self, arena: DraftArena, rng: random.Random, checkpoint: Checkpoint) -> DraftArena:
        """
        Improve the partition and return the best arena found.

        The returned arena is never less balanced than the input.
        """
        if self.max_iterations <= 0 or arena.team_count < 2:
            return arena

        passes = max(1, min(3, self.max_iterations // 25))
        rounds_per_pass = self.max_iterations // passes
        team_pairs = list(itertools.combinations(range(arena.team_count), 2))

        best = arena.copy()
        best_balance = self._balance(best)
        initial_balance = best_balance
        iteration = 0

        for pass_number in range(passes):
            current = best.copy()
            for _ in range(rounds_per_pass):
                rng.shuffle(team_pairs)
                improved = False
                for team_a, team_b in team_pairs:
                    if self.try_swap(current, team_a, team_b):
                        improved = True

                iteration += 1
                if iteration % self.checkpoint_interval == 0:
                    checkpoint()

                balance = self._balance(current)
                if balance < best_balance:
                    best_balance = balance
                    best = current.copy()

                if not improved or balance < self.balance_threshold:
                    break

            logger.debug(
                f"Optimizer pass {pass_number + 1}/{passes}: best balance {best_balance:.4f} "
                f"after {iteration} rounds"
            )

        logger.debug(f"Optimizer: balance {initial_balance:.4f} -> {best_balance:.4f}")
        return best


class BalancedShuffler:
    """
    Chooses a partitioning strategy by mode and roster size and, in fair mode,
    runs the local search optimizer on the result.
    """

    def __init__(
        self,
        balancing_service: TeamBalancingService | None = None,
        snake_draft_max_players: int | None = None,
        snake_draft_iterations: int | None = None,
        tiered_iterations: int | None = None,
        balance_threshold: float | None = None,
        max_tier_count: int | None = None,
        skill_band_width: float | None = None,
        checkpoint_interval: int | None = None,
        randomized_tier_assignment: bool | None = None,
    ):
        """
        Initialize the shuffler.

        Any argument left as None falls back to BALANCER_SETTINGS.

        Args:
            balancing_service: Domain service for sizes and the balance metric
            snake_draft_max_players: Largest roster handled by the snake draft (default 30)
            snake_draft_iterations: Optimizer budget after a snake draft (default 50)
            tiered_iterations: Optimizer budget after a tiered draft (default 75)
            balance_threshold: Stddev below which an optimizer pass stops (default 0.15)
            max_tier_count: Upper bound on skill tiers (default 8)
            skill_band_width: Width of snake draft skill bands (default 0.2)
            checkpoint_interval: Optimizer rounds between checkpoints (default 10)
            randomized_tier_assignment: Shuffle team visit order per tier (default True)
        """
        settings = BALANCER_SETTINGS
        self.balancing_service = balancing_service or TeamBalancingService()
        self.snake_draft_max_players = (
            snake_draft_max_players
            if snake_draft_max_players is not None
            else settings["snake_draft_max_players"]
        )
        self.snake_draft_iterations = (
            snake_draft_iterations
            if snake_draft_iterations is not None
            else settings["snake_draft_iterations"]
        )
        self.tiered_iterations = (
            tiered_iterations if tiered_iterations is not None else settings["tiered_iterations"]
        )
        self.balance_threshold = (
            balance_threshold if balance_threshold is not None else settings["balance_threshold"]
        )
        self.checkpoint_interval = (
            checkpoint_interval
            if checkpoint_interval is not None
            else settings["checkpoint_interval"]
        )

        self.snake_draft = SnakeDraftPartitioner(
            self.balancing_service,
            skill_band_width=(
                skill_band_width if skill_band_width is not None else settings["skill_band_width"]
            ),
        )
        self.tiered = TieredPartitioner(
            self.balancing_service,
            max_tier_count=max_tier_count if max_tier_count is not None else settings["max_tier_count"],
            randomized_assignment=(
                randomized_tier_assignment
                if randomized_tier_assignment is not None
                else settings["randomized_tier_assignment"]
            ),
        )
        self.random_partitioner = RandomPartitioner(self.balancing_service)

    def _optimizer(self, max_iterations: int) -> LocalSearchOptimizer:
        return LocalSearchOptimizer(
            self.balancing_service,
            max_iterations=max_iterations,
            balance_threshold=self.balance_threshold,
            checkpoint_interval=self.checkpoint_interval,
        )

    def shuffle(
        self,
        players: Sequence[Player],
        team_count: int,
        mode: GenerationMode = GenerationMode.FAIR,
        rng: random.Random | None = None,
        checkpoint: Checkpoint | None = None,
    ) -> DraftArena:
        """
        Partition players into team_count teams.

        Args:
            players: Players to distribute (already validated)
            team_count: Number of teams
            mode: fair or random
            rng: Random source; a fresh unseeded Random is used if omitted
            checkpoint: Cooperative checkpoint; a no-op if omitted

        Returns:
            The final DraftArena
        """
        rng = rng or random.Random()
        checkpoint = checkpoint or Checkpoint()
        mode = GenerationMode(mode)

        if mode is GenerationMode.RANDOM:
            logger.debug(f"Random shuffle: {len(players)} players into {team_count} teams")
            return self.random_partitioner.partition(players, team_count, rng, checkpoint)

        if len(players) <= self.snake_draft_max_players:
            logger.debug(f"Snake draft: {len(players)} players into {team_count} teams")
            arena = self.snake_draft.partition(players, team_count, rng, checkpoint)
            return self._optimizer(self.snake_draft_iterations).optimize(arena, rng, checkpoint)

        logger.debug(f"Tiered draft: {len(players)} players into {team_count} teams")
        arena = self.tiered.partition(players, team_count, rng, checkpoint)
        return self._optimizer(self.tiered_iterations).optimize(arena, rng, checkpoint)
