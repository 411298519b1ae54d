from __future__ import annotations

import argparse

from .sampler import DEFAULT_MAX_DELAY, DEFAULT_UNITS, run_sampler


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="task_sampler",
        description="Run a fixed set of concurrent workers and wait for all of them.",
    )
    parser.add_argument("--units", type=int, default=DEFAULT_UNITS, help="number of workers")
    parser.add_argument(
        "--max-delay",
        type=float,
        default=DEFAULT_MAX_DELAY,
        help="upper bound (exclusive) of each worker's sleep, in seconds",
    )
    args = parser.parse_args(argv)

    run_sampler(units=args.units, max_delay=args.max_delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
