from __future__ import annotations

import logging
import time

import numpy as np
import pandas as pd

from ..data import CausalDataset, GenerationResult
from ..refutations._check import Assumption

logger = logging.getLogger(__name__)

NAIVE_ASSUMPTIONS: list[Assumption] = [
    Assumption("No confounding: treatment is independent of potential outcomes", testable=False),
    Assumption("Overlap: both treated and control units are present", testable=True),
    Assumption("Stable Unit Treatment Value Assumption (SUTVA)", testable=False),
]


# ── Private helpers (also imported by meandiff/refutations/naive.py) ───────────

def _columns(
    data,
    treatment: str,
    outcome: str,
    covariate: str,
) -> tuple[np.ndarray, np.ndarray, np.ndarray | None]:
    """
    Pull treatment, outcome and (if present) covariate arrays out of a
    ``CausalDataset``, ``GenerationResult`` or dataframe.
    """
    if isinstance(data, GenerationResult):
        data = data.data
    if isinstance(data, CausalDataset):
        return data.treatment, data.outcome, data.covariate

    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a CausalDataset, GenerationResult or DataFrame, got {type(data).__name__}."
        )

    for label, var in [("Treatment", treatment), ("Outcome", outcome)]:
        if var not in data.columns:
            raise ValueError(f"{label} column '{var}' not found in dataframe.")

    t = data[treatment].to_numpy()
    bad = set(np.unique(t).tolist()) - {0, 1}
    if bad:
        raise ValueError(
            f"Treatment '{treatment}' must be binary (0/1). Found values: {sorted(bad)}"
        )

    y = data[outcome].to_numpy(dtype=float)
    x = data[covariate].to_numpy(dtype=float) if covariate in data.columns else None
    return t.astype(np.int64), y, x


def _difference_in_means(t: np.ndarray, y: np.ndarray) -> tuple[float, float, float]:
    """
    Mean outcome among treated minus mean outcome among controls.

    Returns ``(effect, treated_mean, control_mean)``. An empty group has a
    mean of NaN and forces the effect to exactly 0.0.
    """
    treated = y[t == 1]
    control = y[t == 0]

    treated_mean = float(treated.mean()) if len(treated) else float("nan")
    control_mean = float(control.mean()) if len(control) else float("nan")

    if len(treated) == 0 or len(control) == 0:
        return 0.0, treated_mean, control_mean
    return treated_mean - control_mean, treated_mean, control_mean


# ── Result ─────────────────────────────────────────────────────────────────────

class DifferenceInMeansResult:
    """
    The result of a naive difference-in-means estimation.

    The estimate is the raw gap in mean outcome between treated and control
    units. Nothing is adjusted for, so any covariate that drives both
    treatment and outcome leaks into the estimate as confounding bias.
    When the true effect is known (simulated data), ``bias`` reports how far
    off the naive estimate is.
    """

    def __init__(
        self,
        effect: float,
        treated_mean: float,
        control_mean: float,
        n_treated: int,
        n_control: int,
        elapsed: float,
        treatment: str,
        outcome: str,
        covariate: str,
        true_effect: float | None = None,
    ) -> None:
        self._effect = effect
        self._treated_mean = treated_mean
        self._control_mean = control_mean
        self._n_treated = n_treated
        self._n_control = n_control
        self._elapsed = elapsed
        self._treatment = treatment
        self._outcome = outcome
        self._covariate = covariate
        self._true_effect = true_effect

    @property
    def effect(self) -> float:
        """ATE estimate: difference in mean outcome, treated minus control."""
        return self._effect

    @property
    def treated_mean(self) -> float:
        """Mean outcome among treated units (NaN if there are none)."""
        return self._treated_mean

    @property
    def control_mean(self) -> float:
        """Mean outcome among control units (NaN if there are none)."""
        return self._control_mean

    @property
    def n_treated(self) -> int:
        return self._n_treated

    @property
    def n_control(self) -> int:
        return self._n_control

    @property
    def elapsed(self) -> float:
        """Wall-clock seconds spent computing the estimate."""
        return self._elapsed

    @property
    def true_effect(self) -> float | None:
        """The known effect, when the data came from ``generate()``."""
        return self._true_effect

    @property
    def bias(self) -> float | None:
        """``effect - true_effect``, or ``None`` when the true effect is unknown."""
        if self._true_effect is None:
            return None
        return self._effect - self._true_effect

    @property
    def assumptions(self) -> list[Assumption]:
        """Modelling assumptions required for a causal interpretation."""
        return list(NAIVE_ASSUMPTIONS)

    def executive_summary(self) -> str:
        """Narrative explanation of the method, assumptions, and result."""
        from .._explain import explain_naive
        return explain_naive(self)

    def summary(self) -> str:
        """Concise tabular summary of the estimate and group sizes."""
        lines = [
            "",
            f"Naive Causal Effect: {self._treatment} → {self._outcome}",
            f"  Estimand: ATE (difference in means, unadjusted)",
            "─" * 50,
            f"  ATE estimate         : {self.effect:>10.4f}",
        ]
        if self._true_effect is not None:
            lines += [
                f"  True effect          : {self._true_effect:>10.4f}",
                f"  Bias                 : {self.bias:>+10.4f}",
            ]
        lines += [
            "",
            f"  Treated              : {self.n_treated:>10d}  (mean {self._treated_mean:.4f})",
            f"  Control              : {self.n_control:>10d}  (mean {self._control_mean:.4f})",
            f"  Execution time       : {self.elapsed:>10.6f}  s",
            "",
            "  Assumptions",
            "  " + "┄" * 48,
        ]
        for a in NAIVE_ASSUMPTIONS:
            lines.append(f"  {a.fmt_tag()}  {a.name}")
        lines.append("")
        return "\n".join(lines)

    def refute(self, data):
        """
        Run diagnostic checks against this estimation.

        Currently runs:

        - **Group overlap**: both treated and control units must be
          present. Fails whenever the estimate fell back to zero.
        - **Covariate balance**: the standardized mean difference of the
          covariate between groups must be small. An imbalanced covariate
          means the naive estimate is confounded.

        Neither check changes the estimate.

        Parameters
        ----------
        data : CausalDataset, GenerationResult or pd.DataFrame
            The same data passed to ``fit()``.
        """
        from ..refutations.naive import (
            NaiveRefutationReport,
            _check_covariate_balance,
            _check_group_overlap,
        )
        t, _, x = _columns(data, self._treatment, self._outcome, self._covariate)
        checks = [
            _check_group_overlap(self.n_treated, self.n_control),
            _check_covariate_balance(t, x, self._covariate),
        ]
        return NaiveRefutationReport(
            checks=checks,
            treatment=self._treatment,
            outcome=self._outcome,
        )

    def __repr__(self) -> str:
        return self.summary()


# ── Estimator ──────────────────────────────────────────────────────────────────

class DifferenceInMeans:
    """
    Naive ATE estimator: mean outcome of treated minus mean outcome of controls.

    No covariate adjustment of any kind is made. On observational data where
    a covariate influences both treatment and outcome, the estimate is
    biased; on randomised data it is unbiased.

    If either group is empty the estimate is ``0.0`` rather than an error.

    Example::

        sim = generate(n=10_000, seed=42)
        result = DifferenceInMeans().fit(sim)
        print(result.summary())
    """

    def __init__(
        self,
        treatment: str = "treatment",
        outcome: str = "outcome",
        covariate: str = "covariate",
    ) -> None:
        if treatment == outcome:
            raise ValueError("Treatment and outcome must be different variables.")
        self._treatment = treatment
        self._outcome = outcome
        self._covariate = covariate

    def fit(self, data) -> DifferenceInMeansResult:
        """
        Estimate the ATE as a difference in group means.

        Parameters
        ----------
        data : CausalDataset, GenerationResult or pd.DataFrame
            A dataframe must contain binary (0/1) treatment and outcome
            columns. A ``GenerationResult`` also supplies the true effect,
            so the result can report its bias.

        Raises
        ------
        ``ValueError``
            If treatment or outcome columns are missing from the dataframe,
            or treatment is not binary.
        """
        true_effect = data.true_effect if isinstance(data, GenerationResult) else None
        t, y, _ = _columns(data, self._treatment, self._outcome, self._covariate)

        start = time.perf_counter()
        effect, treated_mean, control_mean = _difference_in_means(t, y)
        elapsed = time.perf_counter() - start

        n_treated = int(np.count_nonzero(t == 1))
        n_control = int(np.count_nonzero(t == 0))
        if n_treated == 0 or n_control == 0:
            logger.warning(
                "Cannot compare groups (treated=%d, control=%d); returning an effect of 0.",
                n_treated, n_control,
            )

        return DifferenceInMeansResult(
            effect=effect,
            treated_mean=treated_mean,
            control_mean=control_mean,
            n_treated=n_treated,
            n_control=n_control,
            elapsed=elapsed,
            treatment=self._treatment,
            outcome=self._outcome,
            covariate=self._covariate,
            true_effect=true_effect,
        )


def estimate(data) -> float:
    """Shorthand for ``DifferenceInMeans().fit(data).effect``."""
    return DifferenceInMeans().fit(data).effect
