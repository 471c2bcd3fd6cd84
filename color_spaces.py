"""Color space utilities for CIE LCh to sRGB conversions."""
from __future__ import annotations

import math
from typing import Tuple

RgbTuple = Tuple[int, int, int]
LchColor = Tuple[float, float, float]
LabColor = Tuple[float, float, float]
XyzColor = Tuple[float, float, float]
LinearRgb = Tuple[float, float, float]
SrgbFloat = Tuple[float, float, float]


# --- Basic RGB helpers -----------------------------------------------------

def hex_to_rgb(hex_color: str) -> RgbTuple:
    hex_color = hex_color.lstrip("#")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def rgb_to_hex(rgb: RgbTuple) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _srgb_float_to_byte(value: float) -> int:
    return max(0, min(255, int(round(value * 255.0))))


def srgb_to_rgb(srgb: SrgbFloat) -> RgbTuple:
    """Round gamma-encoded channels to bytes, clamping stray values."""
    r, g, b = (_srgb_float_to_byte(c) for c in srgb)
    return (r, g, b)


def linear_to_srgb(channel: float) -> float:
    """sRGB transfer function, mirrored for negative input."""
    magnitude = abs(channel)
    if magnitude <= 0.0031308:
        return channel * 12.92
    return math.copysign(1.055 * (magnitude ** (1 / 2.4)) - 0.055, channel)


def linear_srgb_to_srgb(rgb: LinearRgb) -> SrgbFloat:
    r, g, b = (linear_to_srgb(c) for c in rgb)
    return (r, g, b)


# --- LCh -> Lab -> XYZ -----------------------------------------------------

KAPPA = (3 / 29) ** 3
EPSILON = 6 / 29

# D50 white point from its xy chromaticity (0.3457, 0.3585).
D50_WHITE: XyzColor = (0.3457 / 0.3585, 1.0, 0.2958 / 0.3585)


def lch_to_lab(lch: LchColor) -> LabColor:
    # Hue is periodic through cos/sin, so it is never reduced mod 360.
    L, C, h = lch
    angle = h * math.pi / 180
    return (L, C * math.cos(angle), C * math.sin(angle))


def _lab_f_inv(value: float) -> float:
    if value > EPSILON:
        return value ** 3
    return KAPPA * (value * 116 - 16)


def lab_to_xyz(lab: LabColor) -> XyzColor:
    """Lab to XYZ relative to a unit white; see xyz_to_d50 for scaling."""
    L, a, b = lab
    fy = (L + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return (_lab_f_inv(fx), _lab_f_inv(fy), _lab_f_inv(fz))


def xyz_to_d50(xyz: XyzColor) -> XyzColor:
    x, y, z = xyz
    return (x * D50_WHITE[0], y * D50_WHITE[1], z * D50_WHITE[2])


# --- Chromatic adaptation and primaries ------------------------------------

# Bradford D50 -> D65.
D50_TO_D65 = (
    (0.955473452704218200, -0.023098536874261423, 0.063259308661021700),
    (-0.028369706963208136, 1.009995458005822600, 0.021041398966943008),
    (0.012314001688319899, -0.020507696433477912, 1.330365936608075300),
)

# XYZ (D65) -> linear sRGB.
XYZ_TO_LINEAR_SRGB = (
    (3.2409699419045226, -1.537383177570094, -0.4986107602930034),
    (-0.9692436362808796, 1.8759675015077202, 0.04155505740717559),
    (0.05563007969699366, -0.20397695888897652, 1.0569715142428786),
)


def _multiply(matrix, vector: Tuple[float, float, float]) -> Tuple[float, float, float]:
    x, y, z = vector
    r0, r1, r2 = matrix
    return (
        r0[0] * x + r0[1] * y + r0[2] * z,
        r1[0] * x + r1[1] * y + r1[2] * z,
        r2[0] * x + r2[1] * y + r2[2] * z,
    )


def d50_to_d65(xyz: XyzColor) -> XyzColor:
    return _multiply(D50_TO_D65, xyz)


def xyz_to_linear_srgb(xyz: XyzColor) -> LinearRgb:
    return _multiply(XYZ_TO_LINEAR_SRGB, xyz)


# --- Full chain ------------------------------------------------------------

def lch_to_linear_srgb(lch: LchColor) -> LinearRgb:
    """Run LCh through to linear sRGB without clamping.

    Channels outside [0, 1] mean the color lies outside the sRGB gamut.
    """
    return xyz_to_linear_srgb(d50_to_d65(xyz_to_d50(lab_to_xyz(lch_to_lab(lch)))))


def lch_to_srgb(lch: LchColor) -> SrgbFloat:
    return linear_srgb_to_srgb(lch_to_linear_srgb(lch))
