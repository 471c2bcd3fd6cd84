import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from color_spaces import (  # noqa: E402
    D50_WHITE,
    d50_to_d65,
    hex_to_rgb,
    lab_to_xyz,
    lch_to_lab,
    lch_to_linear_srgb,
    lch_to_srgb,
    linear_to_srgb,
    rgb_to_hex,
    srgb_to_rgb,
    xyz_to_d50,
    xyz_to_linear_srgb,
)


def test_lch_to_lab_projects_chroma_onto_hue_angle():
    assert lch_to_lab((50.0, 10.0, 0.0)) == pytest.approx((50.0, 10.0, 0.0))
    assert lch_to_lab((50.0, 10.0, 90.0)) == pytest.approx((50.0, 0.0, 10.0), abs=1e-12)
    assert lch_to_lab((50.0, 10.0, 180.0)) == pytest.approx((50.0, -10.0, 0.0), abs=1e-12)


def test_lch_to_lab_does_not_reduce_hue():
    plain = lch_to_lab((60.0, 25.0, 30.0))
    wrapped = lch_to_lab((60.0, 25.0, 30.0 + 360.0 * 4))
    assert wrapped == pytest.approx(plain, abs=1e-9)


def test_lab_to_xyz_white_is_unit():
    assert lab_to_xyz((100.0, 0.0, 0.0)) == pytest.approx((1.0, 1.0, 1.0))


def test_lab_to_xyz_black_uses_linear_segment():
    assert lab_to_xyz((0.0, 0.0, 0.0)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)


def test_lab_to_xyz_mid_grey_luminance():
    _, y, _ = lab_to_xyz((50.0, 0.0, 0.0))
    assert y == pytest.approx((66 / 116) ** 3)


def test_xyz_to_d50_scales_to_reference_white():
    assert xyz_to_d50((1.0, 1.0, 1.0)) == pytest.approx(D50_WHITE)
    assert D50_WHITE == pytest.approx((0.96429, 1.0, 0.82510), abs=1e-5)


def test_bradford_adaptation_maps_d50_white_to_d65_white():
    assert d50_to_d65(D50_WHITE) == pytest.approx((0.95046, 1.0, 1.08906), abs=1e-5)


def test_d65_white_is_unit_linear_srgb():
    white = xyz_to_linear_srgb(d50_to_d65(D50_WHITE))
    assert white == pytest.approx((1.0, 1.0, 1.0), abs=1e-6)


def test_linear_srgb_of_neutral_grey_has_equal_channels():
    r, g, b = lch_to_linear_srgb((50.0, 0.0, 0.0))
    assert r == pytest.approx(g, abs=1e-6)
    assert g == pytest.approx(b, abs=1e-6)
    assert g == pytest.approx((66 / 116) ** 3, abs=1e-5)


def test_out_of_gamut_color_has_channels_outside_unit_range():
    linear = lch_to_linear_srgb((50.0, 1000.0, 20.0))
    assert min(linear) < 0.0 or max(linear) > 1.0


@pytest.mark.parametrize(
    "linear, expected",
    [
        (0.0, 0.0),
        (1.0, 1.0),
        (0.002, 0.002 * 12.92),
        (0.0031308, 0.0031308 * 12.92),
        (0.18418651851244416, 0.46633),
    ],
)
def test_linear_to_srgb(linear, expected):
    assert linear_to_srgb(linear) == pytest.approx(expected, abs=1e-5)


def test_linear_to_srgb_is_odd():
    for value in (0.001, 0.05, 0.5, 1.3):
        assert linear_to_srgb(-value) == pytest.approx(-linear_to_srgb(value))


def test_srgb_to_rgb_rounds_and_clamps():
    assert srgb_to_rgb((-0.01, 0.5, 1.2)) == (0, 128, 255)
    assert srgb_to_rgb((1.00004, 0.0, -0.0013)) == (255, 0, 0)


def test_rgb_to_hex_is_lowercase_and_zero_padded():
    assert rgb_to_hex((0, 10, 255)) == "#000aff"
    assert rgb_to_hex((171, 205, 239)) == "#abcdef"


def test_hex_to_rgb_reverses_rgb_to_hex():
    assert hex_to_rgb("#e8004e") == (232, 0, 78)
    assert rgb_to_hex(hex_to_rgb("#4a83ff")) == "#4a83ff"


def test_lch_to_srgb_known_color():
    assert srgb_to_rgb(lch_to_srgb((50.0, 30.0, 20.0))) == (167, 99, 103)
