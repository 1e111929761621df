"""Statistical property tests for bounded-integer sampling.

These tests validate distributional invariants rather than individual code
paths:

1. **Uniformity**: draws from ``random_number(10, 30)`` hit each of the 21
   values about equally often, both with the OS CSPRNG and with a seeded
   mock source (chi-square goodness of fit).
2. **Smallest span**: ``random_number(1, 2)`` splits roughly 50/50.
3. **Rejection rate**: the masked rejection loop needs fewer than two
   attempts per draw on average.

Dependencies:
    scipy (chi-square test), listed in [project.optional-dependencies] dev.
"""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest
from scipy import stats

from unbiased_randint.config import RandintConfig
from unbiased_randint.entropy.mock import MockUniformSource
from unbiased_randint.sampler import RandintSampler, random_number

# Number of draws for the frequency tests.
_NUM_DRAWS: int = 200_000

# Allowed deviation from the uniform frequency, in percentage points.
_TOLERANCE_PP: float = 0.5

# Significance level for the chi-square test on a seeded (deterministic) stream.
_CHI2_ALPHA: float = 1e-4


def _frequencies(values: list[int], minimum: int, maximum: int) -> np.ndarray:
    counts = Counter(values)
    assert set(counts) <= set(range(minimum, maximum + 1))
    return np.array([counts[v] for v in range(minimum, maximum + 1)], dtype=np.float64)


@pytest.mark.slow
class TestUniformity:
    @pytest.fixture(scope="class")
    def system_draws(self) -> list[int]:
        return [random_number(10, 30) for _ in range(_NUM_DRAWS)]

    @pytest.fixture(scope="class")
    def mock_draws(self) -> list[int]:
        source = MockUniformSource(seed=2024)
        return [random_number(10, 30, source) for _ in range(_NUM_DRAWS)]

    def test_every_value_within_tolerance(self, system_draws: list[int]) -> None:
        freqs = _frequencies(system_draws, 10, 30) / _NUM_DRAWS * 100
        expected = 100 / 21
        assert np.all(np.abs(freqs - expected) < _TOLERANCE_PP), freqs

    def test_chi_square_seeded(self, mock_draws: list[int]) -> None:
        observed = _frequencies(mock_draws, 10, 30)
        _, p_value = stats.chisquare(observed)
        assert p_value > _CHI2_ALPHA, f"chi-square rejected uniformity: p={p_value:.6g}"

    def test_both_bounds_reached(self, system_draws: list[int]) -> None:
        assert min(system_draws) == 10
        assert max(system_draws) == 30


class TestSmallestSpan:
    def test_half_and_half(self) -> None:
        n = 20_000
        values = [random_number(1, 2) for _ in range(n)]
        ones = values.count(1)
        assert ones + values.count(2) == n
        # 5 sigma of a fair coin over n tosses.
        assert abs(ones / n - 0.5) < 5 * 0.5 / np.sqrt(n)


class TestRejectionRate:
    @pytest.mark.parametrize(("minimum", "maximum"), [(1, 6), (0, 300), (10, 30), (0, 3 * 2**40)])
    def test_mean_attempts_below_two(self, minimum: int, maximum: int) -> None:
        config = RandintConfig(
            entropy_source_type="mock_uniform", mock_seed=7, diagnostic_mode=True
        )
        sampler = RandintSampler(config)
        for _ in range(5_000):
            sampler.randint(minimum, maximum)
        summary = sampler.sampling_logger.get_summary_stats()
        assert summary["mean_attempts"] < 2.0
        assert summary["rejection_rate"] < 0.5
