from __future__ import annotations

import math
import re
import string
from typing import Any, Mapping, Protocol

# ColorAide
from coloraide import Color as CAColor
from coloraide.spaces.okhsl import Okhsl
from coloraide.spaces.okhsv import Okhsv

Hex = str


class Color(CAColor):
    pass


Color.register([Okhsv(), Okhsl()], silent=True)

# colorSpace setting -> (ColorAide space, scale applied to the s/l channels)
SPACE_MAP: Mapping[str, tuple[str, float]] = {
    "okhsl": ("okhsl", 0.01),
    "okhsv": ("okhsv", 0.01),
    "hsl": ("hsl", 0.01),
    "hsv": ("hsv", 0.01),
}

DEFAULT_SPACE = "okhsl"

FIT_HEX = {"method": "raytrace"}  # consistent gamut-fit for hex and rgb output

HEX_RE = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError("hex must be 3 or 6 hex digits")
    return "#" + raw.lower()


def supported_spaces() -> tuple[str, ...]:
    return tuple(SPACE_MAP.keys())


def lookup_space(name: str) -> tuple[str, float]:
    try:
        return SPACE_MAP[name]
    except KeyError:
        raise ValueError(
            f"unknown color space '{name}', expected one of {supported_spaces()}"
        ) from None


class ColorEngine(Protocol):
    """Color math used by palette generation and reference matching."""

    def to_model(self, h: float, s: float, l: float, space: str) -> Any: ...

    def parse(self, hex_str: Hex) -> Any: ...

    def to_hex(self, color: Any) -> Hex: ...

    def to_rgb(self, color: Any) -> str: ...

    def to_string(self, color: Any, space: str) -> str: ...

    def contrast_ratio(self, a: Any, b: Any) -> float: ...

    def distance(self, a: Any, b: Any) -> float: ...

    def chroma(self, color: Any) -> float: ...

    def luminance(self, color: Any) -> float: ...


class ColorAideEngine:
    """ColorEngine backed by ColorAide.

    Saturation and lightness arrive as percents and are scaled into the
    0..1 range ColorAide uses for the hsl-family spaces.
    """

    def __init__(self, *, delta_e: str = "2000", contrast: str = "wcag21") -> None:
        self.delta_e = delta_e
        self.contrast = contrast

    def to_model(self, h: float, s: float, l: float, space: str) -> Color:
        name, scale = lookup_space(space)
        return Color(name, [h, s * scale, l * scale])

    def parse(self, hex_str: Hex) -> Color:
        return Color(canon_hex(hex_str))

    def to_hex(self, color: Color) -> Hex:
        return color.convert("srgb").to_string(hex=True, fit=FIT_HEX)

    def to_rgb(self, color: Color) -> str:
        coords = color.convert("srgb").fit(**FIT_HEX).coords()
        return ", ".join(str(math.floor(c * 255)) for c in coords)

    def to_string(self, color: Color, space: str) -> str:
        name, _ = lookup_space(space)
        return color.convert(name).to_string()

    def contrast_ratio(self, a: Color, b: Color) -> float:
        return float(a.contrast(b, method=self.contrast))

    def distance(self, a: Color, b: Color) -> float:
        return float(a.delta_e(b, method=self.delta_e))

    def chroma(self, color: Color) -> float:
        c = color.convert("oklch")["c"]
        return 0.0 if math.isnan(c) else float(c)

    def luminance(self, color: Color) -> float:
        return float(color.luminance())


__all__ = [
    "Color",
    "ColorAideEngine",
    "ColorEngine",
    "DEFAULT_SPACE",
    "FIT_HEX",
    "HEX_RE",
    "SPACE_MAP",
    "canon_hex",
    "lookup_space",
    "supported_spaces",
]
