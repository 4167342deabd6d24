import pytest

from palette_curves.colors import ColorAideEngine, canon_hex, lookup_space, supported_spaces


def test_canon_hex():
    assert canon_hex("#ABC") == "#aabbcc"
    assert canon_hex(" a0b1c2 ") == "#a0b1c2"
    for bad in ("", "#12", "#12345", "zzzzzz"):
        with pytest.raises(ValueError):
            canon_hex(bad)


def test_spaces():
    assert supported_spaces()[0] == "okhsl"
    with pytest.raises(ValueError):
        lookup_space("lab")


def test_engine_reference_values():
    engine = ColorAideEngine()
    white, black = engine.parse("#fff"), engine.parse("#000000")
    assert engine.to_hex(white) == "#ffffff"
    assert engine.to_rgb(white) == "255, 255, 255"
    assert engine.to_rgb(black) == "0, 0, 0"
    assert engine.contrast_ratio(white, black) == pytest.approx(21.0, rel=1e-3)
    assert engine.luminance(white) == pytest.approx(1.0, abs=1e-3)
    assert engine.distance(white, white) == pytest.approx(0.0, abs=1e-6)
    assert engine.chroma(white) == pytest.approx(0.0, abs=1e-3)


def test_engine_okhsl_percent_scaling():
    engine = ColorAideEngine()
    grey = engine.to_model(120, 0, 50, "okhsl")
    assert grey["s"] == 0 and grey["l"] == pytest.approx(0.5)
    red = engine.to_model(29, 100, 57, "okhsl")
    assert engine.chroma(red) > 0.1
