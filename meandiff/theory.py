"""
Population quantities of the data generating process in ``meandiff.data``.

The naive estimator converges to ``true_effect + E[X | T=1] - E[X | T=0]``
rather than to ``true_effect``. The functions here compute that limit by
integrating over the standard normal covariate, so the bias of a simulated
estimate can be compared against its expected value.
"""
from __future__ import annotations

import numpy as np
from scipy import integrate
from scipy.stats import norm

from .data import TRUE_EFFECT

# The assignment probability is flat outside [-1, 1].
_KINKS = (-1.0, 1.0)


def assignment_probability(x):
    """
    Probability that a unit with covariate ``x`` is treated.

    The generator compares ``U ~ Uniform[0, 1)`` to ``0.5 * (x + 1)``
    without clamping, which treats every unit above 1 and none below -1.
    That is the same as clamping the threshold to [0, 1].
    """
    return np.clip(0.5 * (np.asarray(x, dtype=float) + 1.0), 0.0, 1.0)


def _expect_piecewise(fn) -> float:
    """``E[fn(X)]`` for ``X ~ N(0, 1)``, integrated piece by piece between the kinks."""
    lo, hi = _KINKS
    total = 0.0
    for a, b in [(-np.inf, lo), (lo, hi), (hi, np.inf)]:
        value, _ = integrate.quad(lambda x: fn(x) * norm.pdf(x), a, b)
        total += value
    return float(total)


def treated_share() -> float:
    """``P(T = 1)`` over the covariate distribution."""
    return _expect_piecewise(lambda x: float(assignment_probability(x)))


def covariate_gap() -> float:
    """
    ``E[X | T=1] - E[X | T=0]``: how much higher the covariate is, on
    average, among treated units than among controls.
    """
    p = treated_share()
    m_treated = _expect_piecewise(lambda x: x * float(assignment_probability(x)))
    # E[X] = 0, so the control-side moment is the negative of the treated one.
    m_control = -m_treated
    return m_treated / p - m_control / (1.0 - p)


def expected_naive_estimate(true_effect: float = TRUE_EFFECT) -> float:
    """
    The value the difference-in-means estimate converges to as n grows.

    Because the covariate enters the outcome with coefficient 1, the
    confounding bias equals ``covariate_gap()``.
    """
    return float(true_effect) + covariate_gap()
