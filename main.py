"""Palette-curves web app entry point.

Usage
-----
$ pip install -e .
$ python main.py            # starts on http://127.0.0.1:5000

Endpoints take the share token in ``?s=...``; without it the built-in
default palettes are served.
"""

from __future__ import annotations

from palette_curves.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=False, threaded=True)
