"""Patch app.json: parse, append the plugin entry, re-serialize.

Key order is kept as parsed; output is 2-space indented JSON with a
trailing newline. Existing plugin entries are never modified.
"""

from __future__ import annotations

import json
import re
from typing import Any

from .errors import ConfigParseError
from .models import ColorSpace, plugin_entry

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def load_document(content: str, source: str = "app.json") -> dict[str, Any]:
    """Parse *content* as a JSON object. ``NaN`` and ``Infinity`` are rejected."""
    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ConfigParseError(f"Failed to modify {source}: invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Failed to modify {source}: top-level value must be an object, "
            f"got {type(data).__name__}."
        )
    return data


def dump_document(data: dict[str, Any]) -> str:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    # Lone surrogates can only sit inside string literals; keep them escaped.
    text = _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)
    return text + "\n"


def _ensure_section(parent: dict[str, Any], key: str, kind: type, source: str) -> Any:
    """Return ``parent[key]``, creating an empty *kind* when absent."""
    if key not in parent or parent[key] is None:
        parent[key] = kind()
    value = parent[key]
    if not isinstance(value, kind):
        raise ConfigParseError(
            f"Failed to modify {source}: '{key}' must be "
            f"{'an object' if kind is dict else 'an array'}, got {type(value).__name__}."
        )
    return value


def patch_json(content: str, color_space: ColorSpace, source: str = "app.json") -> str:
    """Return *content* with the plugin entry appended to ``expo.plugins``.

    Raises:
        ConfigParseError: content is not a JSON object, or ``expo`` /
            ``expo.plugins`` exist with the wrong type.
    """
    data = load_document(content, source)
    expo = _ensure_section(data, "expo", dict, source)
    plugins = _ensure_section(expo, "plugins", list, source)
    plugins.append(plugin_entry(color_space))
    return dump_document(data)
