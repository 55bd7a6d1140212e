"""Data model: color space choice, config file shapes, plugin entry."""

from __future__ import annotations

import dataclasses
import enum
from pathlib import Path

from .errors import InvalidChoiceError

PLUGIN_NAME = "expo-color-space-plugin"


class ColorSpace(str, enum.Enum):
    DISPLAY_P3 = "displayP3"
    SRGB = "SRGB"

    @classmethod
    def parse(cls, value: str) -> ColorSpace:
        """Return the member for *value* (case-sensitive) or raise InvalidChoiceError."""
        for member in cls:
            if member.value == value:
                return member
        raise InvalidChoiceError(
            f'Invalid colorSpace "{value}". Use "displayP3" or "SRGB".'
        )


DEFAULT_COLOR_SPACE = ColorSpace.DISPLAY_P3


class ConfigFormat(enum.Enum):
    STRUCTURED = "structured-data"
    DATA_LITERAL = "code-with-data-literal"
    EXPRESSION = "code-with-expression"

    @property
    def is_code(self) -> bool:
        return self is not ConfigFormat.STRUCTURED


@dataclasses.dataclass(frozen=True)
class ConfigFile:
    """A config file as read at the start of a run."""

    path: Path
    format: ConfigFormat
    content: str

    @property
    def name(self) -> str:
        return self.path.name


def plugin_entry(color_space: ColorSpace) -> list[object]:
    """Structured plugin entry as stored in app.json."""
    return [PLUGIN_NAME, {"colorSpace": color_space.value}]
