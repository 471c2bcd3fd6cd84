"""Convert CIE LCh colors to sRGB hex strings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Union

from color_errors import InvalidChroma, InvalidLightness
from color_spaces import RgbTuple, rgb_to_hex
from gamut import map_to_gamut


@dataclass(frozen=True)
class Color:
    """A color in CIE LCh (D50).

    lightness: 0 to 100
    chroma: at least 0; the upper limit depends on lightness and hue
    hue: angle in degrees, any real value
    """

    lightness: float
    chroma: float
    hue: float

    def as_tuple(self):
        return (self.lightness, self.chroma, self.hue)


ColorInput = Union[Color, Mapping[str, float]]


def _coerce(color: ColorInput) -> Color:
    if isinstance(color, Color):
        return color
    return Color(
        lightness=color["lightness"], chroma=color["chroma"], hue=color["hue"]
    )


def validate_lch(color: Color) -> None:
    # Comparisons are written so that NaN fails them.
    if not 0 <= color.lightness <= 100:
        raise InvalidLightness(
            f"Lightness must be between 0 and 100, got {color.lightness!r}"
        )
    if not color.chroma >= 0:
        raise InvalidChroma(f"Chroma must be at least 0, got {color.chroma!r}")


def lch_to_rgb(color: ColorInput) -> RgbTuple:
    lch = _coerce(color)
    validate_lch(lch)
    return map_to_gamut(lch.as_tuple()).rgb


def lch_to_hex_string(color: ColorInput) -> str:
    """Return ``#rrggbb`` for an LCh color, reducing chroma if needed.

    Accepts a :class:`Color` or a mapping with ``lightness``, ``chroma``
    and ``hue`` keys. Raises :class:`InvalidLightness` or
    :class:`InvalidChroma` before any conversion is attempted.
    """
    return rgb_to_hex(lch_to_rgb(color))
