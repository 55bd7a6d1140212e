"""Locate the Expo config file governing a project directory."""

from __future__ import annotations

from pathlib import Path

from .core import logger
from .errors import ConfigNotFoundError, ConfigReadError
from .models import ConfigFile, ConfigFormat

# Priority order: the data file wins over the code files.
CANDIDATES: list[tuple[str, ConfigFormat]] = [
    ("app.json", ConfigFormat.STRUCTURED),
    ("app.config.js", ConfigFormat.DATA_LITERAL),
    ("app.config.ts", ConfigFormat.EXPRESSION),
]


def find_config_path(workspace_root: Path) -> tuple[Path, ConfigFormat] | None:
    """Return the first existing candidate and its format, or None."""
    for filename, fmt in CANDIDATES:
        path = workspace_root / filename
        if path.is_file():
            return path.resolve(), fmt
        logger.debug(f"Not found: {path}")
    return None


def locate_config(workspace_root: Path) -> ConfigFile:
    """Find and read the single config file for *workspace_root*.

    Raises:
        ConfigNotFoundError: none of the candidates exist.
        ConfigReadError: the selected file cannot be read as UTF-8 text.
    """
    found = find_config_path(workspace_root)
    if found is None:
        names = ", ".join(name for name, _ in CANDIDATES)
        raise ConfigNotFoundError(
            f"No Expo config file found ({names}). "
            "Please run this command from your Expo project root directory."
        )

    path, fmt = found
    try:
        # Bytes in, so line endings reach the text patcher untouched.
        content = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigReadError(f"{path.name} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigReadError(f"Failed to read {path}: {exc}") from exc

    return ConfigFile(path=path, format=fmt, content=content)
