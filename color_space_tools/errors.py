"""Exception hierarchy for color_space_tools.

All exceptions inherit from ColorSpaceToolError (single catch point).
Messages are shown to the user as-is, so keep them actionable.
"""

from __future__ import annotations


class ColorSpaceToolError(Exception):
    """Base exception for all color_space_tools errors."""


class ConfigNotFoundError(ColorSpaceToolError):
    """No recognized Expo config file in the workspace."""


class InvalidChoiceError(ColorSpaceToolError):
    """A color space value outside the supported set."""


class ConfigReadError(ColorSpaceToolError):
    """Error reading a config file from disk."""


class ConfigParseError(ColorSpaceToolError):
    """Config content is not well-formed for its format."""


class ConfigWriteError(ColorSpaceToolError):
    """Error writing the patched config back to disk."""
