"""
Naive estimator bias
====================
Repeats the simulation many times and compares the average naive estimate
with the true effect and with the value the model predicts it converges to.
"""

from meandiff import TRUE_EFFECT, expected_naive_estimate
from meandiff.benchmark import monte_carlo

N = 100_000
TRIALS = 50

estimates = monte_carlo(N, trials=TRIALS, seed=0)

print(f"True effect         : {TRUE_EFFECT:.4f}")
print(f"Mean naive estimate : {estimates.mean():.4f}  (bias: {estimates.mean() - TRUE_EFFECT:+.4f})")
print(f"Expected estimate   : {expected_naive_estimate():.4f}")
print(f"Spread across trials: {estimates.std(ddof=1):.4f}")
