from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .colors import DEFAULT_SPACE, lookup_space
from .eases import EASES, bezier_by_alias

log = logging.getLogger(__name__)

DEFAULT_STEPS = 9
DEFAULT_SATURATION_RATE = 130.0
MAX_NUM_OF_PALETTES = 6

CONFIG: Mapping[str, Any] = {
    "eases": dict(EASES),
    "resolution": 0.25,
    "limits": {
        "hue": [0, 360],
        "sat": [0, 100],
        "lig": [0, 100],
        "rate": [0, 200],
    },
}


@dataclass
class ChannelCurve:
    start: float
    end: float
    ease: str
    interpolate_hue_over_360: bool | None = None  # hue only
    rate: float | None = None  # sat only, percent

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"start": self.start, "end": self.end, "ease": self.ease}
        if self.interpolate_hue_over_360 is not None:
            out["interpolateHueOver360"] = self.interpolate_hue_over_360
        if self.rate is not None:
            out["rate"] = self.rate
        return out

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ChannelCurve":
        wrap = d.get("interpolateHueOver360")
        rate = d.get("rate")
        return cls(
            start=float(d["start"]),
            end=float(d["end"]),
            ease=str(d["ease"]),
            interpolate_hue_over_360=None if wrap is None else bool(wrap),
            rate=None if rate is None else float(rate),
        )


@dataclass
class PaletteDefinition:
    hue: ChannelCurve
    sat: ChannelCurve
    lig: ChannelCurve

    def to_dict(self) -> dict[str, Any]:
        return {"hue": self.hue.to_dict(), "sat": self.sat.to_dict(), "lig": self.lig.to_dict()}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "PaletteDefinition":
        return cls(
            hue=ChannelCurve.from_dict(d["hue"]),
            sat=ChannelCurve.from_dict(d["sat"]),
            lig=ChannelCurve.from_dict(d["lig"]),
        )


@dataclass
class PaletteParameterSet:
    steps: int
    palette_index: int
    swatch_index: int
    params: list[PaletteDefinition]
    max_num_of_palettes: int = MAX_NUM_OF_PALETTES

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": self.steps,
            "paletteIndex": self.palette_index,
            "swatchIndex": self.swatch_index,
            "maxNumOfPalettes": self.max_num_of_palettes,
            "params": [p.to_dict() for p in self.params],
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "PaletteParameterSet":
        return cls(
            steps=int(d["steps"]),
            palette_index=int(d["paletteIndex"]),
            swatch_index=int(d["swatchIndex"]),
            max_num_of_palettes=int(d.get("maxNumOfPalettes", MAX_NUM_OF_PALETTES)),
            params=[PaletteDefinition.from_dict(p) for p in d["params"]],
        )


@dataclass
class Settings:
    overlay_contrast: bool = False
    overlay_hex: bool = True
    overlay_rgb: bool = False
    ref_colors_raw: str = ""
    color_space: str = DEFAULT_SPACE

    def to_dict(self) -> dict[str, Any]:
        return {
            "overlayContrast": self.overlay_contrast,
            "overlayHex": self.overlay_hex,
            "overlayRgb": self.overlay_rgb,
            "refColorsRaw": self.ref_colors_raw,
            "colorSpace": self.color_space,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Settings":
        return cls(
            overlay_contrast=bool(d["overlayContrast"]),
            overlay_hex=bool(d["overlayHex"]),
            overlay_rgb=bool(d["overlayRgb"]),
            ref_colors_raw=str(d["refColorsRaw"]),
            color_space=str(d["colorSpace"]),
        )


@dataclass
class Swatch:
    id: str
    h: float
    s: float
    l: float
    hex: str
    rgb: str
    chroma: float
    luminance: float
    white_contrast: float
    black_contrast: float
    string: str
    color: Any = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "h": self.h,
            "s": self.s,
            "l": self.l,
            "hex": self.hex,
            "rgb": self.rgb,
            "chroma": self.chroma,
            "luminance": self.luminance,
            "whiteContrast": self.white_contrast,
            "blackContrast": self.black_contrast,
            "string": self.string,
        }


@dataclass
class ReferenceColor:
    hex: str
    string: str
    color: Any = field(default=None, repr=False, compare=False)


def default_settings() -> Settings:
    return Settings()


def default_palette_params() -> PaletteParameterSet:
    quad_in = bezier_by_alias("quadIn")
    quad_out = bezier_by_alias("quadOut")
    return PaletteParameterSet(
        steps=DEFAULT_STEPS,
        palette_index=0,
        swatch_index=DEFAULT_STEPS // 2,
        params=[
            PaletteDefinition(
                hue=ChannelCurve(16, 27, quad_in, interpolate_hue_over_360=False),
                sat=ChannelCurve(45, 88, quad_out, rate=DEFAULT_SATURATION_RATE),
                lig=ChannelCurve(98.75, 12, "0.4,0.64,0.6,0.91"),
            ),
            PaletteDefinition(
                hue=ChannelCurve(150, 139, quad_in, interpolate_hue_over_360=False),
                sat=ChannelCurve(44, 81, quad_out, rate=DEFAULT_SATURATION_RATE),
                lig=ChannelCurve(99, 12, "0.51,0.93,0.89,1"),
            ),
            PaletteDefinition(
                hue=ChannelCurve(235, 250, quad_in, interpolate_hue_over_360=False),
                sat=ChannelCurve(44, 81, quad_out, rate=125),
                lig=ChannelCurve(99, 12, quad_out),
            ),
        ],
    )


def load_state(decoded: Mapping[str, Any]) -> tuple[Settings, PaletteParameterSet]:
    """
    Shallow-merge decoded share state over the built-in defaults.

    Decoded state comes from foreign URLs; if it does not describe a usable
    state the defaults are returned instead.
    """
    settings = default_settings()
    palette_params = default_palette_params()
    if not isinstance(decoded, Mapping):
        log.warning("Ignoring shared state of type %s", type(decoded).__name__)
        return settings, palette_params

    try:
        merged_settings = Settings.from_dict({**settings.to_dict(), **decoded.get("settings", {})})
        lookup_space(merged_settings.color_space)
        settings = merged_settings
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        log.warning("Ignoring shared settings: %s", exc)

    try:
        merged = PaletteParameterSet.from_dict(
            {**palette_params.to_dict(), **decoded.get("paletteParams", {})}
        )
        if not merged.params:
            raise ValueError("no palette definitions")
        palette_params = merged
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        log.warning("Ignoring shared palette parameters: %s", exc)

    return settings, palette_params


__all__ = [
    "CONFIG",
    "ChannelCurve",
    "DEFAULT_SATURATION_RATE",
    "DEFAULT_STEPS",
    "MAX_NUM_OF_PALETTES",
    "PaletteDefinition",
    "PaletteParameterSet",
    "ReferenceColor",
    "Settings",
    "Swatch",
    "default_palette_params",
    "default_settings",
    "load_state",
]
