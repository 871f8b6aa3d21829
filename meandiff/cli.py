import argparse
import logging

from .benchmark import DEFAULT_SIZE, DEFAULT_SIZES, monte_carlo, run_benchmark
from .data import DEFAULT_SEED, TRUE_EFFECT, generate
from .estimators.naive import DifferenceInMeans
from .theory import expected_naive_estimate

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meandiff",
        description="Naive difference-in-means ATE on simulated confounded data.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Generate one dataset and estimate the effect.")
    run.add_argument("--size", type=_non_negative_int, default=DEFAULT_SIZE, help="Size of dataset to generate.")
    run.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed.")
    run.add_argument("--true-effect", type=float, default=TRUE_EFFECT, help="Effect built into the outcome.")

    bench = sub.add_parser("benchmark", help="Time generation and estimation across dataset sizes.")
    bench.add_argument(
        "--sizes",
        type=_non_negative_int,
        nargs="+",
        default=list(DEFAULT_SIZES),
        help="Dataset sizes to time.",
    )
    bench.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed.")

    bias = sub.add_parser("bias", help="Average the naive estimate over repeated simulations.")
    bias.add_argument("--size", type=_non_negative_int, default=DEFAULT_SIZE, help="Size of each dataset.")
    bias.add_argument("--trials", type=_positive_int, default=100, help="Number of simulated datasets.")
    bias.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed of the first trial.")
    bias.add_argument("--true-effect", type=float, default=TRUE_EFFECT, help="Effect built into the outcome.")
    return parser


def _run(args) -> None:
    print(f"Running causal inference with dataset size: {args.size}")
    sim = generate(args.size, seed=args.seed, true_effect=args.true_effect)
    result = DifferenceInMeans().fit(sim)
    print(f"Estimated effect: {result.effect:.4f}")
    print(f"True effect: {sim.true_effect:.4f}")
    print(f"Execution time: {result.elapsed:.6f} seconds")


def _benchmark(args) -> None:
    table = run_benchmark(args.sizes, seed=args.seed)
    print(table.to_string(index=False))


def _bias(args) -> None:
    estimates = monte_carlo(args.size, args.trials, seed=args.seed, true_effect=args.true_effect)
    print(f"Trials: {args.trials} x {args.size} units")
    print(f"Mean naive estimate: {estimates.mean():.4f}")
    print(f"Expected estimate: {expected_naive_estimate(args.true_effect):.4f}")
    print(f"True effect: {args.true_effect:.4f}")


_COMMANDS = {
    "run": _run,
    "benchmark": _benchmark,
    "bias": _bias,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=_LOG_FORMAT,
    )
    _COMMANDS[args.command](args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
