from __future__ import annotations

import copy
import logging

import numpy as np

from .eases import bezier_by_alias
from .model import (
    DEFAULT_SATURATION_RATE,
    MAX_NUM_OF_PALETTES,
    ChannelCurve,
    PaletteDefinition,
    PaletteParameterSet,
)

log = logging.getLogger(__name__)

HUE_RANGE = 20


class PaletteSetManager:
    """
    Mutations of the owned PaletteParameterSet.

    Every operation works in place and returns the updated set. Requests
    that would break the count or index invariants leave the set unchanged.
    """

    def __init__(
        self,
        state: PaletteParameterSet,
        *,
        max_num_of_palettes: int = MAX_NUM_OF_PALETTES,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.max_num_of_palettes = max_num_of_palettes
        self.rng = rng if rng is not None else np.random.default_rng()
        self.state = state
        self.set(state)

    def add(self) -> PaletteParameterSet:
        pp = self.state
        if len(pp.params) >= self.max_num_of_palettes:
            log.debug("add ignored: already %d palettes", len(pp.params))
            return pp

        hue = int(self.rng.integers(0, 360 - HUE_RANGE))
        quad_in = bezier_by_alias("quadIn")
        quad_out = bezier_by_alias("quadOut")
        pp.params.append(
            PaletteDefinition(
                hue=ChannelCurve(hue, hue + HUE_RANGE, quad_in),
                sat=ChannelCurve(60, 100, quad_out, rate=DEFAULT_SATURATION_RATE),
                lig=ChannelCurve(100, 5, quad_out),
            )
        )
        pp.palette_index = len(pp.params) - 1
        return pp

    def remove_by_index(self, index: int) -> PaletteParameterSet:
        pp = self.state
        if len(pp.params) <= 1 or not 0 <= index < len(pp.params):
            return pp

        del pp.params[index]
        if pp.palette_index >= index:
            pp.palette_index = max(pp.palette_index - 1, 0)
        return pp

    def clone_by_index(self, index: int) -> PaletteParameterSet:
        pp = self.state
        if len(pp.params) >= self.max_num_of_palettes or not 0 <= index < len(pp.params):
            return pp

        pp.params.insert(index + 1, copy.deepcopy(pp.params[index]))
        return pp

    def set(self, new_state: PaletteParameterSet) -> PaletteParameterSet:
        new_state.steps = max(1, new_state.steps)
        if new_state.swatch_index >= new_state.steps:
            new_state.swatch_index = new_state.steps - 1
        new_state.swatch_index = max(0, new_state.swatch_index)

        if len(new_state.params) > self.max_num_of_palettes:
            log.warning(
                "Dropping %d palettes over the limit of %d",
                len(new_state.params) - self.max_num_of_palettes,
                self.max_num_of_palettes,
            )
            del new_state.params[self.max_num_of_palettes :]
        new_state.max_num_of_palettes = self.max_num_of_palettes
        if new_state.params:
            new_state.palette_index = min(
                max(0, new_state.palette_index), len(new_state.params) - 1
            )

        self.state = new_state
        return new_state


__all__ = ["HUE_RANGE", "PaletteSetManager"]
