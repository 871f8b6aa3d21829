"""
Timing generation and estimation across dataset sizes.
"""

from meandiff.benchmark import run_benchmark

print(run_benchmark(sizes=(1_000, 10_000, 100_000, 1_000_000), seed=123).to_string(index=False))
