from __future__ import annotations

from typing import Callable, Mapping

from coloraide.easing import cubic_bezier

EaseFn = Callable[[float], float]
BezierParams = tuple[float, float, float, float]

# cubic-bezier control points, "x1,y1,x2,y2"
EASES: Mapping[str, str] = {
    "linear": "0,0,1,1",
    "sineIn": "0.12,0,0.39,0",
    "sineOut": "0.61,1,0.88,1",
    "sineInOut": "0.37,0,0.63,1",
    "quadIn": "0.11,0,0.5,0",
    "quadOut": "0.5,1,0.89,1",
    "quadInOut": "0.45,0,0.55,1",
    "cubicIn": "0.32,0,0.67,0",
    "cubicOut": "0.33,1,0.68,1",
    "cubicInOut": "0.65,0,0.35,1",
    "quartIn": "0.5,0,0.75,0",
    "quartOut": "0.25,1,0.5,1",
    "quartInOut": "0.76,0,0.24,1",
    "quintIn": "0.64,0,0.78,0",
    "quintOut": "0.22,1,0.36,1",
    "quintInOut": "0.83,0,0.17,1",
    "expoIn": "0.7,0,0.84,0",
    "expoOut": "0.16,1,0.3,1",
    "expoInOut": "0.87,0,0.13,1",
    "circIn": "0.55,0,1,0.45",
    "circOut": "0,0.55,0.45,1",
    "circInOut": "0.85,0,0.15,1",
}


class ParseError(ValueError):
    """Raised for an easing literal that is not four numbers."""


def bezier_by_alias(name: str) -> str:
    return EASES[name]


def parse_bezier_params(text: str) -> BezierParams:
    """Split "x1,y1,x2,y2" into four floats."""
    parts = [p.strip() for p in str(text).split(",")]
    if len(parts) != 4:
        raise ParseError(f"expected 4 bezier parameters, got {len(parts)}: {text!r}")
    try:
        x1, y1, x2, y2 = (float(p) for p in parts)
    except ValueError:
        raise ParseError(f"non-numeric bezier parameter in {text!r}") from None
    return x1, y1, x2, y2


def resolve(spec: str) -> EaseFn:
    """
    Build the easing function for an alias or a literal curve.

    Aliases are looked up in EASES first; anything else must be a literal.
    The returned callable maps progress in [0, 1] to eased progress.
    """
    literal = EASES.get(spec, spec)
    x1, y1, x2, y2 = parse_bezier_params(literal)
    try:
        return cubic_bezier(x1, y1, x2, y2)
    except ValueError as exc:
        # x control points must stay inside [0, 1]
        raise ParseError(f"invalid bezier curve {literal!r}: {exc}") from exc


__all__ = ["EASES", "EaseFn", "ParseError", "bezier_by_alias", "parse_bezier_params", "resolve"]
