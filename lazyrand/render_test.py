"""Tests for the noise image renderer."""

import pytest
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from .generator import Generator
from .render import (
    METADATA_KEY,
    load_noise_seed,
    render_noise,
    save_noise_png,
)


def test_render_noise_size_and_pixels():
    img = render_noise(Generator.from_seed(123456), 4, 3)
    assert img.size == (4, 3)
    assert img.mode == "L"
    # Low byte of the first draw, 9557019149100550987.
    assert img.getpixel((0, 0)) == 9557019149100550987 & 0xFF


def test_render_noise_deterministic():
    a = render_noise(Generator.from_seed(5), 16, 16)
    b = render_noise(Generator.from_seed(5), 16, 16)
    assert a.tobytes() == b.tobytes()


def test_save_and_load_seed_roundtrip(tmp_path):
    img = render_noise(Generator.from_seed(31337), 8, 8)
    path = str(tmp_path / "noise.png")

    save_noise_png(img, 31337, path)

    assert load_noise_seed(path) == 31337
    with Image.open(path) as loaded:
        assert loaded.tobytes() == img.tobytes()


def test_load_seed_missing_chunk(tmp_path):
    """A plain PNG without the seed chunk raises ValueError."""
    img = Image.new("L", (4, 4), 0)
    path = str(tmp_path / "plain.png")
    img.save(path)

    try:
        load_noise_seed(path)
        assert False, "Expected ValueError"
    except ValueError as e:
        assert "lazyrand_seed" in str(e)


def test_load_seed_non_integer_chunk(tmp_path):
    """A seed chunk that is not a number is reported, not passed through."""
    info = PngInfo()
    info.add_text(METADATA_KEY, "not-a-seed")
    path = str(tmp_path / "bad.png")
    Image.new("L", (4, 4), 0).save(path, pnginfo=info)

    with pytest.raises(ValueError, match="not an integer"):
        load_noise_seed(path)


def test_save_rejects_non_integer_seed(tmp_path):
    img = Image.new("L", (2, 2), 0)
    with pytest.raises(TypeError):
        save_noise_png(
            img, 1.5, str(tmp_path / "x.png")  # type: ignore[arg-type]
        )
