"""Render generator output as a grayscale noise image.

Each pixel is the low byte of one draw, row by row. Stripes, tiles or
gradients in the picture point at structure in the stream that a histogram
would miss. The seed is embedded in a PNG tEXt chunk (key:
``lazyrand_seed``) so a saved image can be traced back to the exact stream
that produced it.

Used by ``scripts/noise_image.py``.
"""

from __future__ import annotations

import operator

import numpy as np
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from .generator import Generator
from .stats import draws

METADATA_KEY = "lazyrand_seed"


def render_noise(gen: Generator, width: int, height: int) -> Image.Image:
    """Draw ``width * height`` values from ``gen`` into an 8-bit image."""
    values = draws(gen, width * height) & np.uint64(0xFF)
    pixels = values.astype(np.uint8).reshape(height, width)
    return Image.fromarray(pixels)


def save_noise_png(img: Image.Image, seed: int, path: str) -> None:
    """Write ``img`` as PNG, recording ``seed`` in a tEXt chunk."""
    info = PngInfo()
    info.add_text(METADATA_KEY, str(operator.index(seed)))
    img.save(path, format="PNG", pnginfo=info)


def load_noise_seed(path: str) -> int:
    """Seed recorded by ``save_noise_png``.

    Raises ValueError when the chunk is missing or does not hold an integer.
    """
    with Image.open(path) as img:
        raw = getattr(img, "text", {}).get(METADATA_KEY)
    if raw is None:
        raise ValueError(f"{path}: no '{METADATA_KEY}' chunk")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"{path}: '{METADATA_KEY}' chunk is not an integer: {raw!r}"
        ) from None
