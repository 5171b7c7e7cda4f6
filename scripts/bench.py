#!/usr/bin/env python3
"""Benchmark generator throughput and print quick quality stats.

Usage (from the repository root):
    python scripts/bench.py                # 3 iterations, 100000 draws
    python scripts/bench.py -n 5           # 5 iterations
    python scripts/bench.py -d 1000000     # 1M draws per iteration
    python scripts/bench.py --op next_f64  # time a derived operation
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

# Add the repository root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from lazyrand.generator import Generator  # noqa: E402
from lazyrand.stats import (  # noqa: E402
    bit_frequencies,
    bucket_counts,
    chi_square,
    draws,
)

OPS = {
    "next_u64": lambda g: g.next_u64(),
    "next_int": lambda g: g.next_int(1, 6),
    "next_bool": lambda g: g.next_bool(),
    "next_f64": lambda g: g.next_f64(),
}


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the lazyrand generator"
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=3,
        help="Number of iterations (default: 3)",
    )
    parser.add_argument(
        "-d",
        "--draws",
        type=int,
        default=100_000,
        help="Draws per iteration (default: 100000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=123456,
        help="Seed (default: 123456)",
    )
    parser.add_argument(
        "--op",
        choices=sorted(OPS),
        default="next_u64",
        help="Operation to time (default: next_u64)",
    )
    args = parser.parse_args()

    op = OPS[args.op]
    gen = Generator.from_seed(args.seed)

    print(f"Benchmark: {args.op}, {args.draws} draws, seed={args.seed}")
    print(f"Iterations: {args.iterations}")
    print()

    # Warmup
    print("Warmup...", end=" ", flush=True)
    for _ in range(min(args.draws, 10_000)):
        op(gen)
    print("done")

    # Timed runs
    rates = []
    for i in range(args.iterations):
        start = time.perf_counter()
        for _ in range(args.draws):
            op(gen)
        elapsed = time.perf_counter() - start
        rate = args.draws / elapsed / 1e6
        rates.append(rate)
        print(f"  Run {i + 1}: {elapsed * 1000:.1f} ms ({rate:.2f} M/s)")

    print()
    print(f"Median: {statistics.median(rates):.2f} M draws/s")
    print(f"Mean:   {statistics.mean(rates):.2f} M draws/s")
    if len(rates) > 1:
        print(f"Stdev:  {statistics.stdev(rates):.2f} M draws/s")

    print()
    sample = draws(Generator.from_seed(args.seed), 100_000)
    chi = chi_square(bucket_counts(sample, 256))
    freqs = bit_frequencies(sample)
    print(f"Chi-square (256 buckets, df=255): {chi:.1f}")
    print(f"Bit frequency range: {freqs.min():.4f} .. {freqs.max():.4f}")


if __name__ == "__main__":
    main()
