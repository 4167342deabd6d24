import numpy as np

from palette_curves.colors import ColorAideEngine
from palette_curves.generator import generate_palettes
from palette_curves.matcher import nearest_ref_colors, parse_ref_colors
from palette_curves.model import Settings, Swatch, default_palette_params


def make_swatch(hex_str, engine, sid="100"):
    color = engine.parse(hex_str)
    return Swatch(
        id=sid, h=0, s=0, l=0, hex=hex_str, rgb="", chroma=0, luminance=0,
        white_contrast=1, black_contrast=1, string="", color=color,
    )


def test_parse_ref_colors_filters_invalid(stub_engine):
    refs = parse_ref_colors("#ff0000, bad, #00ff00", "okhsl", stub_engine)
    assert [r.hex for r in refs] == ["#ff0000", "#00ff00"]


def test_parse_ref_colors_edge_tokens(stub_engine):
    raw = " #abc ,#12345,ff0000,#GGGGGG,, #A0B0C0 "
    refs = parse_ref_colors(raw, "okhsl", stub_engine)
    assert [r.hex for r in refs] == ["#aabbcc", "#a0b0c0"]
    assert parse_ref_colors("", "okhsl", stub_engine) == []


def test_nearest_picks_minimum(stub_engine):
    palettes = [
        [make_swatch("#000000", stub_engine), make_swatch("#808080", stub_engine)],
        [make_swatch("#f00000", stub_engine), make_swatch("#ffffff", stub_engine)],
    ]
    refs = parse_ref_colors("#ff0000, #101010", "okhsl", stub_engine)
    assert nearest_ref_colors(refs, palettes, stub_engine) == {
        "#f00000": "#ff0000",
        "#000000": "#101010",
    }


def test_first_swatch_wins_ties(stub_engine):
    palettes = [
        [make_swatch("#0a0000", stub_engine, "100")],
        [make_swatch("#000a00", stub_engine, "100")],
    ]
    refs = parse_ref_colors("#000000", "okhsl", stub_engine)
    assert nearest_ref_colors(refs, palettes, stub_engine) == {"#0a0000": "#000000"}


def test_later_reference_overwrites_shared_swatch(stub_engine):
    palettes = [[make_swatch("#808080", stub_engine), make_swatch("#ff00ff", stub_engine)]]
    refs = parse_ref_colors("#7f7f7f, #818181", "okhsl", stub_engine)
    assert nearest_ref_colors(refs, palettes, stub_engine) == {"#808080": "#818181"}


def test_duplicate_references_collapse(stub_engine):
    palettes = [[make_swatch("#808080", stub_engine)]]
    refs = parse_ref_colors("#808080, #888, #808080", "okhsl", stub_engine)
    assert len(refs) == 3
    assert nearest_ref_colors(refs, palettes, stub_engine) == {"#808080": "#888888"}


def test_no_palettes_no_matches(stub_engine):
    refs = parse_ref_colors("#123456", "okhsl", stub_engine)
    assert nearest_ref_colors(refs, [], stub_engine) == {}


def test_winner_is_globally_nearest_coloraide():
    engine = ColorAideEngine()
    palettes = generate_palettes(default_palette_params(), Settings(), engine)
    refs = parse_ref_colors("#2a6f4f, #f5d0c0, #1d3f9a", "okhsl", engine)
    matches = nearest_ref_colors(refs, palettes, engine)
    swatches = [s for p in palettes for s in p]
    by_hex = {s.hex: s for s in reversed(swatches)}
    for swatch_hex, ref_hex in matches.items():
        ref = next(r for r in refs if r.hex == ref_hex)
        dists = np.array([engine.distance(ref.color, s.color) for s in swatches])
        assert engine.distance(ref.color, by_hex[swatch_hex].color) <= dists.min() + 1e-9
