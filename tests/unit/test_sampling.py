"""
Unit tests for reservoir sampling.
"""
import random
from collections import Counter

import pytest
from minefield.sampling import choose_multiple


class TestChooseMultiple:
    """Test single-pass uniform sampling."""

    def test_returns_requested_count(self) -> None:
        result = choose_multiple(range(100), 10, random.Random(1))
        assert len(result) == 10
        assert len(set(result)) == 10
        assert all(0 <= item < 100 for item in result)

    def test_zero_count(self) -> None:
        assert choose_multiple(range(5), 0, random.Random(1)) == []

    def test_short_input_returns_everything(self) -> None:
        result = choose_multiple(range(3), 5, random.Random(1))
        assert sorted(result) == [0, 1, 2]

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            choose_multiple(range(3), -1, random.Random(1))

    def test_seeded_sampling_is_deterministic(self) -> None:
        first = choose_multiple(range(50), 7, random.Random(42))
        second = choose_multiple(range(50), 7, random.Random(42))
        assert first == second

    def test_no_bias_toward_early_items(self) -> None:
        """Every item should be picked roughly count/n of the time."""
        rng = random.Random(7)
        counts = Counter()
        trials = 4000
        for _ in range(trials):
            counts.update(choose_multiple(range(10), 3, rng))

        expected = trials * 3 / 10
        for item in range(10):
            assert abs(counts[item] - expected) < expected * 0.15
