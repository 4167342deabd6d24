from __future__ import annotations

import logging
from typing import Any, Sequence

from .colors import ColorEngine
from .eases import EaseFn, resolve
from .model import (
    DEFAULT_SATURATION_RATE,
    PaletteDefinition,
    PaletteParameterSet,
    Settings,
    Swatch,
)

log = logging.getLogger(__name__)

Palette = list[Swatch]

WHITE = "#ffffff"
BLACK = "#000000"


def ease_steps(ease_fn: EaseFn, step: int, total: int) -> float:
    # eased fraction scaled by the raw step index, not by step / total
    return ease_fn(step / total) * step


def swatch_id(step: int, total: int) -> str:
    """Ids stay comparable across palettes with different step counts."""
    return str(step * (10 if total > 9 else 100))


def generate_palette(
    definition: PaletteDefinition, steps: int, color_space: str, engine: ColorEngine
) -> Palette:
    hue, sat, lig = definition.hue, definition.sat, definition.lig

    wrap_hue = bool(hue.interpolate_hue_over_360) and hue.start > hue.end
    hue_end = 360 + hue.end if wrap_hue else hue.end
    rate = DEFAULT_SATURATION_RATE if sat.rate is None else sat.rate

    h_unit = (hue_end - hue.start) / steps
    s_unit = (sat.end - sat.start) / steps
    l_unit = (lig.end - lig.start) / steps

    hue_ease = resolve(hue.ease)
    sat_ease = resolve(sat.ease)
    lig_ease = resolve(lig.ease)

    white = engine.parse(WHITE)
    black = engine.parse(BLACK)

    swatches: Palette = []
    for i in range(1, steps + 1):
        h = hue.start + ease_steps(hue_ease, i, steps) * h_unit
        if wrap_hue:
            h = h % 360

        s = sat.start + ease_steps(sat_ease, i, steps) * s_unit
        s = min(100.0, s * (rate / 100))

        l = lig.start + ease_steps(lig_ease, i, steps) * l_unit

        color = engine.to_model(h, s, l, color_space)
        swatches.append(
            Swatch(
                id=swatch_id(i, steps),
                h=h,
                s=s,
                l=l,
                hex=engine.to_hex(color),
                rgb=engine.to_rgb(color),
                chroma=engine.chroma(color),
                luminance=engine.luminance(color),
                white_contrast=engine.contrast_ratio(color, white),
                black_contrast=engine.contrast_ratio(color, black),
                string=engine.to_string(color, color_space),
                color=color,
            )
        )
    return swatches


def generate_palettes(
    palette_params: PaletteParameterSet, settings: Settings, engine: ColorEngine
) -> list[Palette]:
    """One swatch sequence per palette definition, in definition order."""
    log.debug(
        "Generating %d palettes x %d steps in %s",
        len(palette_params.params),
        palette_params.steps,
        settings.color_space,
    )
    return [
        generate_palette(p, palette_params.steps, settings.color_space, engine)
        for p in palette_params.params
    ]


def group_swatches_by_id(palettes: Sequence[Palette]) -> list[list[dict[str, Any]]]:
    """
    Regroup swatches across palettes by swatch id.

    Groups come out in the order their id is first seen; every entry carries
    the index of the palette it came from.
    """
    groups: dict[str, list[dict[str, Any]]] = {}
    for palette_index, palette in enumerate(palettes):
        for swatch in palette:
            entry = swatch.to_dict()
            entry.pop("id")
            entry["paletteIndex"] = palette_index
            entry["swatchId"] = swatch.id
            groups.setdefault(swatch.id, []).append(entry)
    return list(groups.values())


def group_palettes_by_name(palettes: Sequence[Palette]) -> dict[str, dict[str, str]]:
    """Export shape: {"color-1": {"100": "#rrggbb", ...}, ...}."""
    return {
        f"color-{i + 1}": {s.id: s.hex for s in palette}
        for i, palette in enumerate(palettes)
    }


__all__ = [
    "Palette",
    "ease_steps",
    "generate_palette",
    "generate_palettes",
    "group_palettes_by_name",
    "group_swatches_by_id",
    "swatch_id",
]
