import importlib
from enum import Enum
from typing import Any, List, Optional

import streamlit as st

from color_spaces import LchColor
from defaults import (
    CHROMA_RANGE,
    DEFAULT_COLOR_LCH,
    DEFAULT_HUE_RAMP_STEPS,
    DEFAULT_OUTPUT_FORMAT,
    HUE_RANGE,
    LIGHTNESS_RANGE,
)
from gamut import GamutResult, map_to_gamut
from lch_converter import Color, validate_lch

pyperclip: Optional[Any]
try:
    pyperclip = importlib.import_module("pyperclip")
except ImportError:  # pragma: no cover - optional dependency
    pyperclip = None


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    LCH = "lch"


COLOR_FORMAT_LABELS = {
    ColorFormat.HEX: "Hex (#rrggbb)",
    ColorFormat.RGB: "RGB (r, g, b)",
    ColorFormat.LCH: "LCh (L C h)",
}


def format_lch_color(result: GamutResult, color_format: ColorFormat) -> str:
    if color_format == ColorFormat.RGB:
        r, g, b = result.rgb
        return f"rgb({r}, {g}, {b})"
    if color_format == ColorFormat.LCH:
        lightness, chroma, hue = result.adjusted_lch
        return f"lch({lightness:.2f} {chroma:.2f} {hue:.2f})"
    return result.hex_color


def describe_gamut_adjustment(result: GamutResult) -> Optional[str]:
    if not result.clipped:
        return None
    return f"C {result.chroma_before:.2f}→{result.chroma_after:.2f} to stay in sRGB"


def hue_ramp(
    lightness: float, chroma: float, steps: int = DEFAULT_HUE_RAMP_STEPS
) -> List[GamutResult]:
    if steps < 1:
        raise ValueError("steps must be at least 1")
    validate_lch(Color(lightness=lightness, chroma=chroma, hue=0.0))
    return [
        map_to_gamut((lightness, chroma, i * 360.0 / steps)) for i in range(steps)
    ]


def lch_slider_component() -> LchColor:
    st.header("Color")

    lightness = st.slider(
        label="Lightness",
        min_value=LIGHTNESS_RANGE[0],
        max_value=LIGHTNESS_RANGE[1],
        value=st.session_state.get("lightness", DEFAULT_COLOR_LCH[0]),
        step=0.5,
        key="lightness",
    )
    chroma = st.slider(
        label="Chroma",
        min_value=CHROMA_RANGE[0],
        max_value=CHROMA_RANGE[1],
        value=st.session_state.get("chroma", DEFAULT_COLOR_LCH[1]),
        step=0.5,
        key="chroma",
        help="Chroma beyond the sRGB boundary is reduced until it fits.",
    )
    hue = st.slider(
        label="Hue",
        min_value=HUE_RANGE[0],
        max_value=HUE_RANGE[1],
        value=st.session_state.get("hue", DEFAULT_COLOR_LCH[2]),
        step=1.0,
        key="hue",
    )
    return (lightness, chroma, hue)


def swatch_component(result: GamutResult) -> None:
    st.header("Swatch")

    if "color_format" not in st.session_state:
        st.session_state["color_format"] = ColorFormat(DEFAULT_OUTPUT_FORMAT)

    color_format = st.selectbox(
        label="Format",
        options=list(ColorFormat),
        format_func=lambda opt: COLOR_FORMAT_LABELS[opt],
        key="color_format",
    )

    # color_picker keeps its own state per key, so key it by value.
    st.color_picker(
        label="Mapped color",
        value=result.hex_color,
        key=f"swatch_{result.hex_color}",
        disabled=True,
    )
    note = describe_gamut_adjustment(result)
    if note:
        st.caption(f"⚠️ {note}")

    formatted = format_lch_color(result, color_format)
    st.code(body=formatted, language="css")

    if st.button(label="Copy"):
        if pyperclip:
            pyperclip.copy(formatted)
            st.success("Copied to clipboard!")
        else:
            st.warning("pyperclip is not installed in this environment.")


def hue_ramp_component(lightness: float, chroma: float) -> None:
    with st.expander("Hue Ramp", expanded=False):
        st.caption("Same lightness and chroma around the hue circle.")
        ramp = hue_ramp(lightness, chroma)
        cols = st.columns(len(ramp))
        for result, col in zip(ramp, cols):
            hue = result.adjusted_lch[2]
            col.color_picker(
                label=f"{hue:.0f}°",
                value=result.hex_color,
                key=f"ramp_{hue:.0f}_{result.hex_color}",
                disabled=True,
            )
            if result.clipped:
                col.caption("⚠️")


def main() -> None:
    st.title("LCh to sRGB")

    lch = lch_slider_component()
    result = map_to_gamut(lch)
    swatch_component(result)
    hue_ramp_component(lightness=lch[0], chroma=lch[1])


if __name__ == "__main__":
    main()
