from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

TRUE_EFFECT = 5.0
DEFAULT_SEED = 42

_SEED_MASK = (1 << 128) - 1


def _frozen_array(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class CausalDataset:
    """
    N units with one covariate, a binary treatment and an observed outcome.

    The three arrays are copied on construction and made read-only, so a
    dataset never changes once built. Build one by hand to test edge
    cases, or get one from ``generate()``.
    """

    covariate: np.ndarray
    """Scalar covariate per unit."""

    treatment: np.ndarray
    """Treatment indicator per unit, 0 or 1."""

    outcome: np.ndarray
    """Observed outcome per unit."""

    def __post_init__(self) -> None:
        covariate = _frozen_array(self.covariate, np.float64)
        outcome = _frozen_array(self.outcome, np.float64)
        raw_treatment = np.asarray(self.treatment)

        for label, arr in [("covariate", covariate), ("treatment", raw_treatment), ("outcome", outcome)]:
            if arr.ndim != 1:
                raise ValueError(f"'{label}' must be one-dimensional, got shape {arr.shape}.")

        lengths = {len(covariate), len(raw_treatment), len(outcome)}
        if len(lengths) != 1:
            raise ValueError(
                f"covariate, treatment and outcome must have the same length. "
                f"Got {len(covariate)}, {len(raw_treatment)} and {len(outcome)}."
            )

        bad = set(np.unique(raw_treatment).tolist()) - {0, 1}
        if bad:
            raise ValueError(f"Treatment must be binary (0/1). Found values: {sorted(bad)}")

        object.__setattr__(self, "covariate", covariate)
        object.__setattr__(self, "treatment", _frozen_array(raw_treatment, np.int64))
        object.__setattr__(self, "outcome", outcome)

    def __len__(self) -> int:
        return len(self.treatment)

    @property
    def n_treated(self) -> int:
        return int(np.count_nonzero(self.treatment == 1))

    @property
    def n_control(self) -> int:
        return int(np.count_nonzero(self.treatment == 0))

    def to_frame(self) -> pd.DataFrame:
        """The dataset as a dataframe with ``covariate``, ``treatment`` and ``outcome`` columns."""
        return pd.DataFrame({
            "covariate": self.covariate,
            "treatment": self.treatment,
            "outcome": self.outcome,
        })

    @classmethod
    def from_frame(
        cls,
        data: pd.DataFrame,
        covariate: str = "covariate",
        treatment: str = "treatment",
        outcome: str = "outcome",
    ) -> CausalDataset:
        """
        Build a dataset from three dataframe columns.

        Raises
        ------
        ``ValueError``
            If a column is missing or treatment is not binary.
        """
        for label, col in [("Covariate", covariate), ("Treatment", treatment), ("Outcome", outcome)]:
            if col not in data.columns:
                raise ValueError(f"{label} column '{col}' not found in dataframe.")
        return cls(
            covariate=data[covariate].to_numpy(),
            treatment=data[treatment].to_numpy(),
            outcome=data[outcome].to_numpy(),
        )

    def __repr__(self) -> str:
        return f"CausalDataset(n={len(self)}, treated={self.n_treated}, control={self.n_control})"


@dataclass(frozen=True)
class GenerationResult:
    """A generated dataset together with the effect it was built with."""

    data: CausalDataset
    true_effect: float


def generate(n: int, seed: int = DEFAULT_SEED, true_effect: float = TRUE_EFFECT) -> GenerationResult:
    """
    Simulate ``n`` units from a confounded linear model.

    Data generating process::

        covariate ~ N(0, 1)
        treatment = 1 if U < 0.5 * (covariate + 1) else 0,   U ~ Uniform[0, 1)
        outcome   = covariate + true_effect * treatment + noise,   noise ~ N(0, 1)

    The assignment threshold is deliberately left unclamped: units with
    ``covariate > 1`` are always treated and units with ``covariate < -1``
    never are. The covariate raises both the chance of treatment and the
    outcome, so a naive comparison of group means overstates the effect.

    Every call builds its own random generator from ``seed``; identical
    arguments always give identical data.

    Parameters
    ----------
    n : int
        Number of units. Zero gives an empty dataset.
    seed : int
        Any integer. Negative values are masked to 128 bits.
    true_effect : float
        The treatment effect built into the outcome.

    Raises
    ------
    ``ValueError``
        If ``n`` is negative.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"Dataset size must be non-negative, got {n}.")

    rng = np.random.default_rng(int(seed) & _SEED_MASK)

    covariate = rng.standard_normal(n)
    treatment = (rng.random(n) < 0.5 * (covariate + 1)).astype(np.int64)
    outcome = covariate + true_effect * treatment + rng.standard_normal(n)

    data = CausalDataset(covariate=covariate, treatment=treatment, outcome=outcome)
    logger.debug("Generated %d units (seed=%d, treated=%d)", n, seed, data.n_treated)
    return GenerationResult(data=data, true_effect=float(true_effect))
