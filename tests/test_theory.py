import numpy as np
import pytest
from scipy.stats import norm

from meandiff import expected_naive_estimate
from meandiff.benchmark import monte_carlo
from meandiff.theory import assignment_probability, covariate_gap, treated_share


class TestTheory:
    def test_assignment_probability_is_clamped(self):
        probs = assignment_probability([-3.0, -1.0, 0.0, 1.0, 3.0])
        np.testing.assert_allclose(probs, [0.0, 0.0, 0.5, 1.0, 1.0])

    def test_half_of_units_are_treated(self):
        assert treated_share() == pytest.approx(0.5, abs=1e-7)

    def test_covariate_gap_closed_form(self):
        # E[X | T=1] = 2 * (Phi(1) - 0.5) and E[X | T=0] is its negative.
        assert covariate_gap() == pytest.approx(2 * (2 * norm.cdf(1.0) - 1.0), abs=1e-6)

    def test_expected_estimate(self):
        assert expected_naive_estimate() == pytest.approx(6.3654, abs=1e-4)
        assert expected_naive_estimate(0.0) == pytest.approx(covariate_gap())


class TestNaiveBias:
    @classmethod
    def setup_class(cls):
        cls.estimates = monte_carlo(100_000, trials=20, seed=2024)

    def test_mean_estimate_is_biased_upward(self):
        assert 5.5 <= self.estimates.mean() <= 8.0

    def test_mean_estimate_matches_theory(self):
        assert self.estimates.mean() == pytest.approx(expected_naive_estimate(), abs=0.05)
