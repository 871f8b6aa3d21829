"""
Narrative explanation renderer for naive estimation results.

``explain_naive`` takes a fitted ``DifferenceInMeansResult`` and returns a
formatted multi-line string. The result's ``executive_summary()`` method
calls it.
"""
from __future__ import annotations

_SEP = "━" * 66


# ── Shared helpers ─────────────────────────────────────────────────────────────

def _effect_phrase(effect: float, treatment: str, outcome: str) -> str:
    direction = "higher" if effect >= 0 else "lower"
    return (
        f"units with {treatment} = 1 have a mean {outcome} that is "
        f"{abs(effect):.4f} {direction} than units with {treatment} = 0"
    )


def _assumptions_section(assumptions: list) -> str:
    n = len(assumptions)
    n_u = sum(1 for a in assumptions if not a.testable)
    intro = (
        f"{n_u} of the {n} required assumptions {'is' if n_u == 1 else 'are'} untestable "
        f"and must be justified by how treatment was assigned."
    )
    lines = ["ASSUMPTIONS", intro, ""]
    for a in assumptions:
        lines.append(f"  {a.fmt_tag()}  {a.name}")
    return "\n".join(lines)


def _bias_lines(result) -> list[str]:
    if result.true_effect is None:
        return []
    from .theory import expected_naive_estimate

    bias = result.bias
    direction = "overstates" if bias > 0 else "understates"
    expected = expected_naive_estimate(result.true_effect)
    return [
        "",
        f"The data were simulated with a true effect of {result.true_effect:.4f}, "
        f"so the naive estimate {direction} it by {abs(bias):.4f}. Under the "
        f"generating model the estimate converges to {expected:.4f}; the gap of "
        f"{expected - result.true_effect:.4f} is confounding bias from "
        f"{result._covariate}, which raises both the chance of treatment and "
        f"{result._outcome}.",
    ]


# ── Method-specific explanations ───────────────────────────────────────────────

def explain_naive(result) -> str:
    T, Y = result._treatment, result._outcome

    if result.n_treated == 0 or result.n_control == 0:
        result_block = "\n".join([
            "RESULT",
            f"No comparison was possible: {result.n_treated} treated and "
            f"{result.n_control} control units. The reported effect of 0 is a "
            f"fallback, not an estimate.",
        ])
    else:
        result_block = "\n".join([
            "RESULT",
            f"{_effect_phrase(result.effect, T, Y).capitalize()} "
            f"(ATE estimate = {result.effect:.4f}; "
            f"{result.n_treated} treated, {result.n_control} control).",
            *_bias_lines(result),
        ])

    blocks = [
        "\n".join([_SEP, f"Executive Summary — Difference in Means",
                   f"  {T} → {Y}  |  estimand: ATE (unadjusted)", _SEP]),

        "\n".join([
            "METHOD",
            f"The Average Treatment Effect (ATE) is estimated as the mean {Y} among "
            f"treated units minus the mean {Y} among control units. No covariate "
            f"adjustment is made. This is unbiased only when treatment is unrelated "
            f"to anything else that affects {Y}, as in a randomised experiment.",
        ]),

        _assumptions_section(result.assumptions),
        result_block,

        "\n".join([
            "CAVEATS",
            f"On observational data the difference in means mixes the effect of {T} "
            f"with the effect of every variable that differs between the groups. "
            f"Run refute() to check covariate balance; an imbalanced covariate that "
            f"also affects {Y} means this estimate should not be read causally.",
        ]),

        _SEP,
    ]
    return "\n\n".join(blocks)
