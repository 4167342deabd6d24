from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from .colors import ColorAideEngine, ColorEngine, Hex
from .generator import Palette, generate_palettes, group_palettes_by_name, group_swatches_by_id
from .manager import PaletteSetManager
from .matcher import nearest_ref_colors, parse_ref_colors
from .model import PaletteParameterSet, ReferenceColor, Settings, load_state
from .url_state import get_state_from_url, get_stateful_url

log = logging.getLogger(__name__)


@dataclass
class DerivedState:
    palettes: list[Palette]
    swatches_grouped_by_id: list[list[dict[str, Any]]]
    ref_colors: list[ReferenceColor]
    nearest_ref_colors: dict[Hex, Hex]
    share_state: dict[str, str]


class PaletteStore:
    """
    Single owner of settings and palette parameters.

    Derived values are rebuilt wholesale by recompute(), which every mutator
    calls before returning:
    settings/params -> palettes -> (groups, ref colors) -> (matches, share state).
    """

    def __init__(
        self,
        settings: Settings,
        palette_params: PaletteParameterSet,
        *,
        engine: ColorEngine | None = None,
        current_url: str = "http://localhost/",
        rng: np.random.Generator | None = None,
    ) -> None:
        self.engine = engine if engine is not None else ColorAideEngine()
        self.current_url = current_url
        self.settings = settings
        self.manager = PaletteSetManager(palette_params, rng=rng)
        self.derived = self.recompute()

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "PaletteStore":
        settings, palette_params = load_state(get_state_from_url(url))
        return cls(settings, palette_params, current_url=url, **kwargs)

    @property
    def palette_params(self) -> PaletteParameterSet:
        return self.manager.state

    def share_payload(self) -> dict[str, Any]:
        return {
            "settings": self.settings.to_dict(),
            "paletteParams": self.palette_params.to_dict(),
        }

    # ---- mutators ----

    def update_settings(self, **changes: Any) -> DerivedState:
        self.settings = dataclasses.replace(self.settings, **changes)
        return self.recompute()

    def set_params(self, palette_params: PaletteParameterSet) -> DerivedState:
        self.manager.set(palette_params)
        return self.recompute()

    def add(self) -> DerivedState:
        self.manager.add()
        return self.recompute()

    def remove_by_index(self, index: int) -> DerivedState:
        self.manager.remove_by_index(index)
        return self.recompute()

    def clone_by_index(self, index: int) -> DerivedState:
        self.manager.clone_by_index(index)
        return self.recompute()

    # ---- derived ----

    def recompute(self) -> DerivedState:
        palettes = generate_palettes(self.palette_params, self.settings, self.engine)
        grouped = group_swatches_by_id(palettes)
        refs = parse_ref_colors(self.settings.ref_colors_raw, self.settings.color_space, self.engine)
        nearest = nearest_ref_colors(refs, palettes, self.engine)
        share = {
            "url": get_stateful_url(self.share_payload(), self.current_url),
            "json": json.dumps(group_palettes_by_name(palettes), indent=2),
        }
        log.debug("Recomputed %d palettes, %d reference matches", len(palettes), len(nearest))
        self.derived = DerivedState(palettes, grouped, refs, nearest, share)
        return self.derived


__all__ = ["DerivedState", "PaletteStore"]
