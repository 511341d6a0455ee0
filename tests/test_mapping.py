import numpy as np
import pytest
from PIL import Image

from asciiview.charsets import DEFAULT_RAMP
from asciiview.mapping import (
    average_level,
    average_levels,
    glyph_index,
    glyph_indices,
    gray_level,
    gray_levels,
    lift_channel,
    to_rgba16,
)

N = len(DEFAULT_RAMP)


def test_lift_channel_full_range():
    assert lift_channel(0) == 0
    assert lift_channel(255) == 65535
    assert lift_channel(255, alpha=0) == 0


def test_gray_level_extremes():
    assert gray_level(0, 0, 0) == 0
    assert gray_level(65535, 65535, 65535) == 255


def test_gray_level_keeps_neutral_grays():
    for v in (1, 64, 128, 200, 254):
        w = lift_channel(v)
        assert gray_level(w, w, w) == v


def test_gray_level_weights_green_over_blue():
    assert gray_level(0, 65535, 0) > gray_level(65535, 0, 0) > gray_level(0, 0, 65535)


def test_average_level_shifts_to_eight_bits():
    avg, rgb = average_level(65535, 0, 0)
    assert rgb == (255, 0, 0)
    assert avg == 85


def test_average_level_uses_integer_division():
    avg, _ = average_level(lift_channel(1), lift_channel(1), lift_channel(2))
    assert avg == 1


def test_glyph_index_bounds():
    assert glyph_index(0, N) == 0
    assert glyph_index(255, N) == N - 1


def test_glyph_index_floors():
    # 128 * 14 / 255 = 7.03, 127 * 14 / 255 = 6.97
    assert glyph_index(128, N) == 7
    assert glyph_index(127, N) == 6


def test_glyph_index_monotonic_and_in_range():
    indices = [glyph_index(level, N) for level in range(256)]
    assert all(0 <= i <= N - 1 for i in indices)
    assert indices == sorted(indices)


def test_glyph_index_two_glyph_ramp():
    assert glyph_index(254, 2) == 0
    assert glyph_index(255, 2) == 1


def test_to_rgba16_premultiplies_alpha():
    img = Image.new("RGBA", (1, 1), (255, 128, 0, 0))
    assert to_rgba16(img)[0, 0].tolist() == [0, 0, 0, 0]


def test_to_rgba16_accepts_grayscale():
    img = Image.new("L", (2, 3), 255)
    arr = to_rgba16(img)
    assert arr.shape == (3, 2, 4)
    assert (arr == 65535).all()


def test_vector_forms_match_scalar_forms():
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(5, 6, 3), dtype=np.uint8)
    img = Image.fromarray(pixels)
    rgba16 = to_rgba16(img)

    grays = gray_levels(rgba16)
    levels, rgb8 = average_levels(rgba16)
    gray_idx = glyph_indices(grays, N)
    for y in range(5):
        for x in range(6):
            r, g, b = (lift_channel(int(v)) for v in pixels[y, x])
            assert grays[y, x] == gray_level(r, g, b)
            avg, triple = average_level(r, g, b)
            assert levels[y, x] == avg
            assert tuple(rgb8[y, x]) == triple
            assert gray_idx[y, x] == glyph_index(grays[y, x], N)


@pytest.mark.parametrize("colour", [(0, 0, 0), (255, 255, 255), (12, 200, 90)])
def test_glyph_indices_stay_in_range(colour):
    img = Image.new("RGB", (3, 3), colour)
    rgba16 = to_rgba16(img)
    for levels in (gray_levels(rgba16), average_levels(rgba16)[0]):
        idx = glyph_indices(levels, N)
        assert idx.min() >= 0
        assert idx.max() <= N - 1
