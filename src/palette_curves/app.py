from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from .colors import supported_spaces
from .eases import ParseError
from .generator import group_palettes_by_name
from .model import CONFIG
from .store import PaletteStore

log = logging.getLogger(__name__)


def _store_for_request() -> PaletteStore:
    """State from ?s=..., with optional colorSpace/refs overrides."""
    store = PaletteStore.from_url(request.url)
    changes = {}
    space = request.args.get("colorSpace")
    if space:
        changes["color_space"] = space.strip().lower()
    refs = request.args.get("refs")
    if refs is not None:
        changes["ref_colors_raw"] = refs
    if changes:
        store.update_settings(**changes)
    return store


# ----------------------------- Flask app ----------------------------------


def create_app() -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.errorhandler(ParseError)
    def bad_curve(exc: ParseError):
        log.exception("Palette generation failed")
        return jsonify({"error": str(exc)}), 500

    @app.errorhandler(ValueError)
    def bad_state(exc: ValueError):
        # e.g. a shared link carrying an unknown colorSpace
        return jsonify({"error": str(exc), "supported": supported_spaces()}), 400

    @app.before_request
    def check_space():
        space = request.args.get("colorSpace")
        if space and space.strip().lower() not in supported_spaces():
            return (
                jsonify(
                    {
                        "error": f"unknown color space '{space}'",
                        "supported": supported_spaces(),
                    }
                ),
                400,
            )
        return None

    @app.route("/config")
    def config():
        return jsonify(CONFIG)

    @app.route("/palettes")
    def palettes():
        store = _store_for_request()
        return jsonify(
            {
                "settings": store.settings.to_dict(),
                "paletteParams": store.palette_params.to_dict(),
                "palettes": [
                    [s.to_dict() for s in palette] for palette in store.derived.palettes
                ],
                "swatchesGroupedById": store.derived.swatches_grouped_by_id,
            }
        )

    @app.route("/nearest")
    def nearest():
        store = _store_for_request()
        return jsonify(
            {
                "refColors": [
                    {"hex": r.hex, "string": r.string} for r in store.derived.ref_colors
                ],
                "nearest": store.derived.nearest_ref_colors,
            }
        )

    @app.route("/share")
    def share():
        return jsonify(_store_for_request().derived.share_state)

    @app.route("/export.json")
    def export_json():
        return jsonify(group_palettes_by_name(_store_for_request().derived.palettes))

    return app
