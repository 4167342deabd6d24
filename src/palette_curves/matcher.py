from __future__ import annotations

from typing import Sequence

from .colors import HEX_RE, ColorEngine, Hex
from .generator import Palette
from .model import ReferenceColor


def parse_ref_colors(raw: str, color_space: str, engine: ColorEngine) -> list[ReferenceColor]:
    """Comma-separated hex list; tokens that are not #rgb/#rrggbb are dropped."""
    out: list[ReferenceColor] = []
    for token in (raw or "").split(","):
        token = token.strip()
        if not HEX_RE.match(token):
            continue
        color = engine.parse(token)
        out.append(
            ReferenceColor(
                hex=engine.to_hex(color),
                string=engine.to_string(color, color_space),
                color=color,
            )
        )
    return out


def nearest_ref_colors(
    refs: Sequence[ReferenceColor], palettes: Sequence[Palette], engine: ColorEngine
) -> dict[Hex, Hex]:
    """
    Map the hex of each reference color's nearest swatch to the reference hex.

    Ties keep the first swatch scanned. When two references land on the same
    swatch, the reference processed later owns the entry.
    """
    unique: dict[Hex, ReferenceColor] = {}
    for ref in refs:
        unique.setdefault(ref.hex, ref)

    matches: dict[Hex, Hex] = {}
    for ref_hex, ref in unique.items():
        best_hex: Hex | None = None
        best_dist = 0.0
        for palette in palettes:
            for swatch in palette:
                dist = engine.distance(ref.color, swatch.color)
                if best_hex is None or dist < best_dist:
                    best_hex, best_dist = swatch.hex, dist
        if best_hex is not None:
            matches[best_hex] = ref_hex
    return matches


__all__ = ["nearest_ref_colors", "parse_ref_colors"]
