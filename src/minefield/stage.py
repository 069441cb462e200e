"""
Game stages and the animation schedules they carry.

Each stage is its own class so that only Defeat and Victory hold
schedules and timers; leaving a stage drops its data with it.
"""
import random
from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterable, List, Tuple, Union

Position = Tuple[int, int]


# ============================================================================
# Schedules
# ============================================================================

@dataclass(frozen=True)
class Explosion:
    """A mine that explodes ``delay`` ms after defeat."""

    pos: Position
    delay: float


@dataclass(frozen=True)
class Celebration:
    """A mine that bursts into confetti ``delay`` ms after victory."""

    pos: Position
    delay: float


def chebyshev(a: Position, b: Position) -> int:
    """Distance in king moves between two tiles."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def ring_of(trigger: Position, pos: Position) -> int:
    """
    Ring index of ``pos`` around ``trigger``.

    Ring 0 is the trigger with its 8 neighbors, ring k > 0 is the
    square at Chebyshev distance k + 1. Rings are numbered by distance,
    not by occupancy, so an empty ring still takes its turn.
    """
    return max(chebyshev(trigger, pos), 1) - 1


def explosion_schedule(
    trigger: Position, mines: Iterable[Position], ring_delay: float
) -> List[Explosion]:
    """
    Order mines into concentric rings around the defeat trigger.

    Every mine in a ring shares the delay ``ring * ring_delay``.

    Args:
        trigger: Tile whose action caused the defeat.
        mines: Positions of all mines.
        ring_delay: Delay between consecutive rings, in ms.

    Returns:
        Explosions sorted by ascending distance from the trigger.
    """
    ordered = sorted(mines, key=lambda pos: chebyshev(trigger, pos))
    schedule = []
    for ring, members in groupby(ordered, key=lambda pos: ring_of(trigger, pos)):
        for pos in members:
            schedule.append(Explosion(pos, ring * ring_delay))
    return schedule


def celebration_schedule(
    mines: Iterable[Position], jitter: float, rng: random.Random
) -> List[Celebration]:
    """Give each mine a confetti delay drawn from [0, jitter]."""
    if jitter <= 0:
        return [Celebration(pos, 0.0) for pos in mines]
    return [Celebration(pos, rng.uniform(0.0, jitter)) for pos in mines]


# ============================================================================
# Stages
# ============================================================================

@dataclass
class Playing:
    """Board accepts input."""


@dataclass
class Paused:
    """Board is hidden and input is ignored until confirmed."""


@dataclass
class Defeat:
    """
    A mine was uncovered.

    Attributes:
        trigger: Tile whose action caused the defeat.
        explosions: Ring-ordered explosion schedule.
        elapsed_ms: Time spent in this stage.
    """

    trigger: Position
    explosions: List[Explosion] = field(default_factory=list)
    elapsed_ms: float = 0.0


@dataclass
class Victory:
    """
    Every safe tile is uncovered.

    Attributes:
        celebrations: Per-mine confetti schedule.
        started_at_ms: Global clock value when victory began.
        elapsed_ms: Time spent in this stage.
    """

    celebrations: List[Celebration] = field(default_factory=list)
    started_at_ms: float = 0.0
    elapsed_ms: float = 0.0


Stage = Union[Playing, Paused, Defeat, Victory]
