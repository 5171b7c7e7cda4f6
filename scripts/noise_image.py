#!/usr/bin/env python3
"""Render generator output to a grayscale PNG for visual inspection.

The seed is embedded in the PNG, so the image can be regenerated later.

Usage (from the repository root):
    python scripts/noise_image.py out.png                # 512x512, seed 123456
    python scripts/noise_image.py out.png --seed 7 -W 1024 -H 256
    python scripts/noise_image.py --check out.png        # print embedded seed
"""

import argparse
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from lazyrand.generator import Generator  # noqa: E402
from lazyrand.render import (  # noqa: E402
    load_noise_seed,
    render_noise,
    save_noise_png,
)


def main():
    parser = argparse.ArgumentParser(
        description="Render lazyrand output as a noise image"
    )
    parser.add_argument("path", help="PNG file to write (or read)")
    parser.add_argument(
        "--seed",
        type=lambda s: int(s, 0),
        default=123456,
        help="Seed (default: 123456)",
    )
    parser.add_argument("-W", "--width", type=int, default=512)
    parser.add_argument("-H", "--height", type=int, default=512)
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the seed embedded in an existing PNG instead",
    )
    args = parser.parse_args()

    if args.check:
        try:
            print(load_noise_seed(args.path))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    img = render_noise(
        Generator.from_seed(args.seed), args.width, args.height
    )
    save_noise_png(img, args.seed, args.path)
    print(
        f"Wrote {args.width}x{args.height} noise"
        f" (seed {args.seed}) to {args.path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
