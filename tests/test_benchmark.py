import numpy as np
import pytest

from meandiff import estimate, generate
from meandiff.benchmark import BenchmarkRun, monte_carlo, run_benchmark, run_once


class TestBenchmark:
    def test_run_once_matches_direct_estimate(self):
        run = run_once(1_000, seed=42)
        assert isinstance(run, BenchmarkRun)
        assert run.estimate == estimate(generate(1_000, seed=42))
        assert run.true_effect == 5.0
        assert run.elapsed >= 0.0

    def test_run_benchmark_has_one_row_per_size(self):
        table = run_benchmark(sizes=(10, 100, 1_000), seed=1)
        assert list(table["n"]) == [10, 100, 1_000]
        assert list(table.columns) == ["n", "seed", "estimate", "true_effect", "elapsed"]
        assert (table["elapsed"] >= 0).all()

    def test_monte_carlo_is_reproducible(self):
        first = monte_carlo(200, trials=5, seed=3)
        second = monte_carlo(200, trials=5, seed=3)
        np.testing.assert_array_equal(first, second)
        assert first.shape == (5,)

    def test_monte_carlo_trial_seeds(self):
        estimates = monte_carlo(200, trials=3, seed=10)
        assert estimates[2] == estimate(generate(200, seed=12))

    def test_monte_carlo_requires_a_trial(self):
        with pytest.raises(ValueError, match="at least 1"):
            monte_carlo(100, trials=0)
