"""Patch app.config.js / app.config.ts by anchored text insertion.

The host file is never parsed as code. Rules are tried in order and the
first anchor that matches wins; only its first occurrence is patched.
Everything outside the inserted fragment is preserved byte-for-byte.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable

from .core import logger
from .models import PLUGIN_NAME, ColorSpace


def format_entry(color_space: ColorSpace) -> str:
    """Literal plugin entry used for insertion and manual instructions."""
    return f'["{PLUGIN_NAME}", {{ "colorSpace": "{color_space.value}" }}]'


def _into_plugins_list(entry: str, eol: str) -> str:
    return f"{eol}      {entry},"


def _new_plugins_list(entry: str, eol: str) -> str:
    return f"{eol}    plugins: [{eol}      {entry}{eol}    ],"


@dataclasses.dataclass(frozen=True)
class InsertionRule:
    """Anchor pattern plus the text inserted right after its match."""

    name: str
    pattern: re.Pattern[str]
    render: Callable[[str, str], str]

    def apply(self, content: str, entry: str, eol: str) -> str | None:
        match = self.pattern.search(content)
        if match is None:
            return None
        end = match.end()
        return content[:end] + self.render(entry, eol) + content[end:]


RULES: list[InsertionRule] = [
    InsertionRule("plugins-key", re.compile(r"plugins:\s*\["), _into_plugins_list),
    InsertionRule("quoted-plugins-key", re.compile(r'"plugins":\s*\['), _into_plugins_list),
    InsertionRule("expo-object", re.compile(r"expo:\s*\{"), _new_plugins_list),
]


def detect_eol(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def patch_text(
    content: str,
    color_space: ColorSpace,
    rules: list[InsertionRule] = RULES,
) -> str | None:
    """Insert the plugin entry at the first matching anchor.

    Returns the new content, or ``None`` when no rule matches.
    """
    entry = format_entry(color_space)
    eol = detect_eol(content)
    for rule in rules:
        patched = rule.apply(content, entry, eol)
        if patched is not None:
            logger.debug(f"Inserted plugin entry at anchor '{rule.name}'")
            return patched
    return None

