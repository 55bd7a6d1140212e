"""Detect whether the plugin entry is already configured."""

from __future__ import annotations

from typing import Any

from .json_patcher import load_document
from .models import PLUGIN_NAME, ConfigFile


def is_plugin_listed(plugins: Any) -> bool:
    """True if *plugins* holds the bare name or a ``[name, options]`` pair.

    Options are ignored for matching.
    """
    if not isinstance(plugins, list):
        return False

    for plugin in plugins:
        if isinstance(plugin, str) and plugin == PLUGIN_NAME:
            return True
        if isinstance(plugin, list) and plugin and plugin[0] == PLUGIN_NAME:
            return True
    return False


def mentions_plugin(text: str) -> bool:
    """Plain substring search; a mention inside a comment also counts."""
    return PLUGIN_NAME in text


def entry_present(config_file: ConfigFile) -> bool:
    """Dispatch on the file format.

    Raises ConfigParseError for malformed app.json content.
    """
    if config_file.format.is_code:
        return mentions_plugin(config_file.content)

    document = load_document(config_file.content, config_file.name)
    expo = document.get("expo")
    if not isinstance(expo, dict):
        return False
    return is_plugin_listed(expo.get("plugins"))
