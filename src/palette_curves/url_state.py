"""Share-link codec: state <-> base64(deflate(JSON)) in the ``s`` query parameter.

Tokens are zlib-wrapped deflate streams of the UTF-8 JSON text, base64
encoded with the standard alphabet, so links produced by the browser build
(pako + btoa) decode here and vice versa.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import zlib
from typing import Any
from urllib.parse import parse_qs, urlencode, urlsplit

log = logging.getLogger(__name__)

STATE_PARAM = "s"


def serialize_state(state: Any) -> str:
    text = json.dumps(state, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(zlib.compress(text.encode("utf-8"))).decode("ascii")


def deserialize_state(token: str) -> Any:
    """Reverse serialize_state; never raises, returns {} for a bad token."""
    try:
        raw = base64.b64decode(token, validate=True)
        text = zlib.decompress(raw).decode("utf-8")
        return json.loads(text)
    except (binascii.Error, zlib.error, ValueError, TypeError, RecursionError) as exc:
        log.warning("Unable to extract state from URL: %s", exc)
        return {}


def base_url(url: str) -> str:
    """scheme://host/ plus the first path segment of ``url``."""
    parts = urlsplit(url)
    segments = parts.path.split("/")
    first = segments[1] if len(segments) > 1 else ""
    return f"{parts.scheme}://{parts.netloc}/{first}"


def build_url(base: str, token: str) -> str:
    return f"{base}?{urlencode({STATE_PARAM: token})}"


def get_stateful_url(state: Any, current_url: str) -> str:
    return build_url(base_url(current_url), serialize_state(state))


def get_state_from_url(current_url: str) -> Any:
    values = parse_qs(urlsplit(current_url).query).get(STATE_PARAM)
    if not values:
        return {}
    return deserialize_state(values[0])


__all__ = [
    "STATE_PARAM",
    "base_url",
    "build_url",
    "deserialize_state",
    "get_state_from_url",
    "get_stateful_url",
    "serialize_state",
]
