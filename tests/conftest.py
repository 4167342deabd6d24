import math

import numpy as np
import pytest


class StubEngine:
    """Colors are plain (h, s, l) tuples; no color library involved."""

    def to_model(self, h, s, l, space):
        return (h, s, l)

    def parse(self, hex_str):
        raw = hex_str.lstrip("#")
        if len(raw) == 3:
            raw = "".join(ch * 2 for ch in raw)
        r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
        return (float(r), float(g), float(b))

    def to_hex(self, color):
        vals = np.clip(np.round(color), 0, 255).astype(int)
        return "#" + "".join(f"{v:02x}" for v in vals)

    def to_rgb(self, color):
        return ", ".join(str(math.floor(c)) for c in color)

    def to_string(self, color, space):
        return f"{space}({color[0]:.2f} {color[1]:.2f} {color[2]:.2f})"

    def contrast_ratio(self, a, b):
        return 1.0

    def distance(self, a, b):
        return float(np.linalg.norm(np.subtract(a, b)))

    def chroma(self, color):
        return color[1]

    def luminance(self, color):
        return color[2]


@pytest.fixture
def stub_engine():
    return StubEngine()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
