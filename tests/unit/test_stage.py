"""
Unit tests for stage schedules.
"""
import random

from minefield.stage import (
    chebyshev,
    ring_of,
    explosion_schedule,
    celebration_schedule,
)


class TestDistance:
    """Test ring geometry."""

    def test_chebyshev(self) -> None:
        assert chebyshev((5, 5), (5, 5)) == 0
        assert chebyshev((5, 5), (6, 4)) == 1
        assert chebyshev((5, 5), (2, 7)) == 3

    def test_trigger_and_neighbors_share_first_ring(self) -> None:
        assert ring_of((5, 5), (5, 5)) == 0
        assert ring_of((5, 5), (4, 6)) == 0
        assert ring_of((5, 5), (7, 5)) == 1
        assert ring_of((5, 5), (8, 2)) == 2


class TestExplosionSchedule:
    """Test ring-ordered explosion delays."""

    def test_rings_around_trigger(self) -> None:
        """Two mines at distance 1 go first, distance 3 two rings later."""
        mines = [(8, 5), (4, 4), (6, 6)]
        schedule = explosion_schedule((5, 5), mines, 80)

        delays = {explosion.pos: explosion.delay for explosion in schedule}
        assert delays == {(4, 4): 0, (6, 6): 0, (8, 5): 160}
        assert [e.pos for e in schedule][-1] == (8, 5)

    def test_triggering_mine_explodes_with_its_neighbors(self) -> None:
        mines = [(5, 5), (5, 6), (9, 9)]
        schedule = explosion_schedule((5, 5), mines, 80)
        delays = {explosion.pos: explosion.delay for explosion in schedule}
        assert delays == {(5, 5): 0, (5, 6): 0, (9, 9): 240}

    def test_schedule_independent_of_scan_order(self) -> None:
        mines = [(0, 0), (9, 9), (3, 4), (5, 1), (7, 7)]
        forward = explosion_schedule((4, 4), mines, 80)
        backward = explosion_schedule((4, 4), list(reversed(mines)), 80)
        assert {(e.pos, e.delay) for e in forward} == {
            (e.pos, e.delay) for e in backward
        }

    def test_delays_never_decrease(self) -> None:
        mines = [(x, y) for x in range(10) for y in range(10) if (x + y) % 3 == 0]
        schedule = explosion_schedule((2, 7), mines, 80)
        delays = [e.delay for e in schedule]
        assert delays == sorted(delays)
        assert len(schedule) == len(mines)

    def test_no_mines(self) -> None:
        assert explosion_schedule((0, 0), [], 80) == []


class TestCelebrationSchedule:
    """Test the per-mine victory schedule."""

    def test_no_jitter(self) -> None:
        schedule = celebration_schedule([(1, 2), (3, 4)], 0, random.Random(0))
        assert [(c.pos, c.delay) for c in schedule] == [((1, 2), 0.0), ((3, 4), 0.0)]

    def test_jitter_is_bounded(self) -> None:
        mines = [(x, 0) for x in range(20)]
        schedule = celebration_schedule(mines, 500, random.Random(0))
        assert [c.pos for c in schedule] == mines
        assert all(0 <= c.delay <= 500 for c in schedule)
