"""Chroma reduction that pulls out-of-gamut LCh colors into sRGB."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from color_spaces import (
    LchColor,
    LinearRgb,
    RgbTuple,
    SrgbFloat,
    lch_to_linear_srgb,
    linear_srgb_to_srgb,
    rgb_to_hex,
    srgb_to_rgb,
)
from defaults import GAMUT_TOLERANCE, MAX_SEARCH_ITERATIONS, SEARCH_STEP_THRESHOLD

logger = logging.getLogger(__name__)

BLACK: SrgbFloat = (0.0, 0.0, 0.0)


def is_in_gamut(linear_rgb: LinearRgb, tolerance: float = GAMUT_TOLERANCE) -> bool:
    return all(-tolerance <= channel <= 1.0 + tolerance for channel in linear_rgb)


def _clamp01(linear_rgb: LinearRgb) -> LinearRgb:
    r, g, b = (max(0.0, min(1.0, c)) for c in linear_rgb)
    return (r, g, b)


@dataclass
class GamutResult:
    srgb: SrgbFloat
    adjusted_lch: LchColor
    chroma_before: float
    chroma_after: float
    clipped: bool
    iterations: int

    @property
    def rgb(self) -> RgbTuple:
        return srgb_to_rgb(self.srgb)

    @property
    def hex_color(self) -> str:
        return rgb_to_hex(self.rgb)


def map_to_gamut(
    lch_color: LchColor,
    *,
    tolerance: float = GAMUT_TOLERANCE,
    step_threshold: float = SEARCH_STEP_THRESHOLD,
    max_iterations: int = MAX_SEARCH_ITERATIONS,
) -> GamutResult:
    """Find the displayable color nearest ``lch_color`` along its chroma axis.

    Lightness and hue are held fixed. The chroma moves by a step that halves
    on every evaluation: down while the color is out of gamut, back up while
    it is inside and the step is still coarse. The direction can reverse many
    times, so this settles on the boundary even for hues where being in gamut
    is not monotone in chroma.

    A color that is already displayable returns after a single evaluation.
    Non-positive chroma short-circuits to black.
    """
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")

    lightness, chroma_before, hue = lch_color

    if chroma_before <= 0:
        return GamutResult(
            srgb=BLACK,
            adjusted_lch=lch_color,
            chroma_before=chroma_before,
            chroma_after=chroma_before,
            clipped=False,
            iterations=0,
        )

    chroma = chroma_before
    step = chroma / 2
    adapting = False
    best: Optional[LchColor] = None
    best_linear: Optional[LinearRgb] = None
    candidate: LchColor = lch_color
    linear: LinearRgb = BLACK

    for iteration in range(1, max_iterations + 1):
        candidate = (lightness, chroma, hue)
        linear = lch_to_linear_srgb(candidate)
        inside = is_in_gamut(linear, tolerance)
        logger.debug(
            "chroma=%.6f step=%.6f linear=(%.6f, %.6f, %.6f) in_gamut=%s",
            chroma,
            step,
            *linear,
            inside,
        )

        if inside:
            if not adapting or step <= step_threshold:
                return GamutResult(
                    srgb=linear_srgb_to_srgb(linear),
                    adjusted_lch=candidate,
                    chroma_before=chroma_before,
                    chroma_after=chroma,
                    clipped=adapting,
                    iterations=iteration,
                )
            best, best_linear = candidate, linear
            chroma += step
        else:
            chroma -= step

        step /= 2
        adapting = True

    logger.warning(
        "Gamut search for L=%s C=%s h=%s stopped after %d iterations",
        lightness,
        chroma_before,
        hue,
        max_iterations,
    )
    if best is None or best_linear is None:
        best = candidate
        best_linear = _clamp01(linear)

    return GamutResult(
        srgb=linear_srgb_to_srgb(best_linear),
        adjusted_lch=best,
        chroma_before=chroma_before,
        chroma_after=best[1],
        clipped=True,
        iterations=max_iterations,
    )
