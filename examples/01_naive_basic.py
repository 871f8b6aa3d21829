"""
Basic example: naive ATE on simulated confounded data.

Data generating process:
    covariate ~ N(0, 1)
    treatment = 1 with probability 0.5 * (covariate + 1), clamped to [0, 1]
    outcome   = covariate + 5.0 * treatment + noise

The covariate pushes units into treatment and also raises the outcome,
so the difference in means overstates the true effect of 5.0.
"""

from meandiff import DifferenceInMeans, generate

sim = generate(n=10_000, seed=42)
print(sim.data)

result = DifferenceInMeans().fit(sim)
print(result.summary())
print(result.executive_summary())
print(result.refute(sim).summary())
