"""Command-line demo: ``python -m lazyrand``.

Prints a few dice rolls, a shuffle and some picks from the shared generator,
then the same from a standalone ``Generator``.
"""

from __future__ import annotations

import argparse
import sys

from . import shared
from .generator import Generator


def _parse_seed(text: str) -> int:
    return int(text, 0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lazyrand",
        description="Print sample output from the lazyrand generator",
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=None,
        help="Seed (decimal or 0x hex). Default: auto-seeded",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=5,
        help="Number of draws per section (default: 5)",
    )
    parser.add_argument("--min", type=int, default=1, dest="lo")
    parser.add_argument("--max", type=int, default=6, dest="hi")
    args = parser.parse_args(argv)

    if args.hi < args.lo:
        parser.error(f"--max ({args.hi}) is less than --min ({args.lo})")

    if args.seed is not None:
        shared.set_seed(args.seed)

    for _ in range(args.count):
        print(shared.randint(args.lo, args.hi))
    print("---")

    items = list(range(1, args.count + 1))
    shared.shuffle(items)
    print(f"shuffled = {items}")
    print("---")

    fruits = ["apple", "banana", "orange"]
    print(f"choice = {shared.choice(fruits)}")
    print(f"choice of nothing = {shared.choice([])}")
    print(f"tag = {shared.get_tag().name}")
    print("---")

    gen = Generator(args.seed)
    for _ in range(args.count):
        print(gen.next_int(args.lo, args.hi))
    print("---")
    for _ in range(args.count):
        print(gen.next_u64())
    return 0


if __name__ == "__main__":
    sys.exit(main())
