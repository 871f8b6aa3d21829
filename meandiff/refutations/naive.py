from __future__ import annotations

import numpy as np

from ._check import RefutationCheck, RefutationReport

BALANCE_THRESHOLD = 0.1


def _standardized_mean_difference(t: np.ndarray, x: np.ndarray) -> float:
    """
    Difference in covariate means between groups, scaled by the pooled
    standard deviation. Zero when the pooled spread is zero.
    """
    x_t = x[t == 1]
    x_c = x[t == 0]
    pooled_sd = np.sqrt((x_t.var(ddof=0) + x_c.var(ddof=0)) / 2.0)
    if pooled_sd == 0:
        return 0.0
    return float((x_t.mean() - x_c.mean()) / pooled_sd)


def _check_group_overlap(n_treated: int, n_control: int) -> RefutationCheck:
    """Both groups must contain at least one unit for the comparison to mean anything."""
    passed = n_treated > 0 and n_control > 0
    if passed:
        detail = f"{n_treated} treated and {n_control} control units."
    else:
        detail = (
            f"{n_treated} treated and {n_control} control units. "
            f"One group is empty, so the reported effect of 0 is a fallback, not an estimate."
        )
    return RefutationCheck(name="Group overlap", passed=passed, detail=detail)


def _check_covariate_balance(
    t: np.ndarray,
    x: np.ndarray | None,
    covariate: str,
    threshold: float = BALANCE_THRESHOLD,
) -> RefutationCheck:
    """
    Compare the covariate's distribution across groups.

    The naive estimate is only unconfounded if treated and control units look
    alike before treatment. An absolute standardized mean difference above
    ``threshold`` means the covariate differs systematically between groups
    and its own effect on the outcome is mixed into the estimate.
    """
    name = "Covariate balance"

    if x is None:
        return RefutationCheck(
            name=name,
            passed=False,
            detail=f"covariate '{covariate}' not found, balance cannot be assessed.",
        )
    if not (np.any(t == 1) and np.any(t == 0)):
        return RefutationCheck(
            name=name,
            passed=False,
            detail="one group is empty, balance cannot be assessed.",
        )

    smd = _standardized_mean_difference(t, x)
    passed = abs(smd) <= threshold
    if passed:
        detail = f"SMD of {covariate} = {smd:+.4f}  (|SMD| ≤ {threshold})"
    else:
        detail = (
            f"SMD of {covariate} = {smd:+.4f}  (|SMD| > {threshold})  "
            f"Treated and control units differ on {covariate}; "
            f"the naive estimate absorbs its effect on the outcome."
        )
    return RefutationCheck(name=name, passed=passed, detail=detail, statistic=smd)


class NaiveRefutationReport(RefutationReport):
    """
    Results of diagnostic checks run against a difference-in-means estimate.

    Obtain via ``DifferenceInMeansResult.refute(data)``.

    Example::

        sim = generate(n=10_000, seed=42)
        result = DifferenceInMeans().fit(sim)
        print(result.refute(sim).summary())
    """

    title = "Naive Estimate Refutation Report"
