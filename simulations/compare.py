# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from pi_estimation import InvalidArgumentError, is_inside

from .common import ExperimentResult, common_x_range, format_stats_line
from .methods import METHODS
from .run import run_pair


DEFAULT_SEED = 42
DEFAULT_TRIALS = 1
DEFAULT_METHOD_A = "reference"
DEFAULT_METHOD_B = "count_only"

# Scatter plots beyond this many points are unreadable and slow
MAX_SCATTER_POINTS = 20_000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate pi by Monte Carlo sampling and compare two sampling methods."
    )
    methods = " | ".join(sorted(METHODS))
    parser.add_argument("--samples", type=int, required=True, help="points per trial")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="independent trials per method")
    parser.add_argument("--method-a", default=DEFAULT_METHOD_A, help=f"e.g. {methods}")
    parser.add_argument("--method-b", default=DEFAULT_METHOD_B, help=f"e.g. {methods}")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="base RNG seed")
    parser.add_argument("--show", action="store_true", help="open a window with scatter and histograms")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level",
    )
    return parser


def show(ra: ExperimentResult, rb: ExperimentResult) -> None:
    """
    Scatter of the last kept sample set plus estimate histograms on the
    same x-axis.
    """
    kept = ra.last if ra.last is not None else rb.last
    xmin, xmax = common_x_range([ra, rb])

    plt.figure(figsize=(15, 4))

    plt.subplot(1, 3, 1)
    if kept is not None:
        n = min(kept.samples, MAX_SCATTER_POINTS)
        xs, ys = kept.xs[:n], kept.ys[:n]
        mask = [is_inside(x, y) for x, y in zip(xs, ys)]
        plt.scatter(
            [x for x, m in zip(xs, mask) if m],
            [y for y, m in zip(ys, mask) if m],
            s=1, c="tab:blue", label="inside",
        )
        plt.scatter(
            [x for x, m in zip(xs, mask) if not m],
            [y for y, m in zip(ys, mask) if not m],
            s=1, c="tab:red", label="outside",
        )
        plt.title(f"last trial: estimate={kept.estimate:.5f}")
        plt.legend(loc="upper right")
    else:
        plt.title("no coordinates kept")
    plt.gca().set_aspect("equal")
    plt.xlim(0, 1)
    plt.ylim(0, 1)

    plt.subplot(1, 3, 2)
    plt.hist(ra.estimates, bins=30, range=(xmin, xmax))
    plt.title(ra.method)
    plt.xlabel("Estimate")
    plt.ylabel("Number of trials")
    plt.xlim(xmin, xmax)

    plt.subplot(1, 3, 3)
    plt.hist(rb.estimates, bins=30, range=(xmin, xmax))
    plt.title(rb.method)
    plt.xlabel("Estimate")
    plt.xlim(xmin, xmax)

    plt.suptitle(
        f"Compare: {ra.method} vs {rb.method}  "
        f"(samples={ra.spec.samples}, trials={ra.spec.trials})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()


def main(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        ra, rb = run_pair(
            method_a=args.method_a,
            method_b=args.method_b,
            samples=args.samples,
            trials=args.trials,
            seed=args.seed,
        )
    except InvalidArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_stats_line(ra))
    print(format_stats_line(rb))

    if args.show:
        show(ra, rb)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
