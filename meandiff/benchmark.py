from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from .data import DEFAULT_SEED, TRUE_EFFECT, generate
from .estimators.naive import estimate

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10_000
DEFAULT_SIZES = (1_000, 10_000, 100_000)


@dataclass(frozen=True)
class BenchmarkRun:
    """One timed generate-and-estimate pass."""

    n: int
    seed: int
    estimate: float
    true_effect: float
    elapsed: float
    """Wall-clock seconds for generation plus estimation."""


def run_once(n: int = DEFAULT_SIZE, seed: int = DEFAULT_SEED, true_effect: float = TRUE_EFFECT) -> BenchmarkRun:
    """Generate ``n`` units, estimate the effect, and time both steps together."""
    start = time.perf_counter()
    sim = generate(n, seed=seed, true_effect=true_effect)
    ate = estimate(sim)
    elapsed = time.perf_counter() - start

    logger.info("n=%d seed=%d estimate=%.4f elapsed=%.6fs", n, seed, ate, elapsed)
    return BenchmarkRun(n=n, seed=seed, estimate=ate, true_effect=sim.true_effect, elapsed=elapsed)


def run_benchmark(sizes=DEFAULT_SIZES, seed: int = DEFAULT_SEED, true_effect: float = TRUE_EFFECT) -> pd.DataFrame:
    """
    Time one run per dataset size.

    Returns a dataframe with one row per size and the columns of
    ``BenchmarkRun``, in the order the sizes were given.
    """
    runs = [run_once(n, seed=seed, true_effect=true_effect) for n in sizes]
    return pd.DataFrame([asdict(r) for r in runs], columns=list(BenchmarkRun.__dataclass_fields__))


def monte_carlo(n: int, trials: int, seed: int = DEFAULT_SEED, true_effect: float = TRUE_EFFECT) -> np.ndarray:
    """
    Naive estimates from ``trials`` independent datasets of size ``n``.

    Trial ``i`` uses seed ``seed + i``, so the whole batch is reproducible.
    The mean of the returned array approximates
    ``theory.expected_naive_estimate(true_effect)``.
    """
    if trials < 1:
        raise ValueError(f"Number of trials must be at least 1, got {trials}.")
    estimates = np.empty(trials)
    for i in range(trials):
        estimates[i] = estimate(generate(n, seed=seed + i, true_effect=true_effect))
    logger.debug("Monte Carlo over %d trials of n=%d: mean=%.4f", trials, n, estimates.mean())
    return estimates
