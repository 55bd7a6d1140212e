"""Core framework: logging, ToolContext, RepoTool base, config loading."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import click
import yaml
from colorama import Fore, Style

from .errors import ConfigReadError

CONFIG_FILENAME = ".expo-color-space.yaml"


# ── Logging ──────────────────────────────────────────────────────────


def _level_color(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return Fore.RED
    if levelno >= logging.WARNING:
        return Fore.YELLOW
    return Fore.CYAN


class ToolFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        color = _level_color(record.levelno)
        message = record.getMessage()
        return f"{color}[{record.levelname.lower()}]{Style.RESET_ALL} {message}"


logger = logging.getLogger("color_space_tools")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(ToolFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def set_verbosity(verbose: bool = False, quiet: bool = False) -> None:
    """Adjust the tool logger level. ``verbose`` wins over ``quiet``."""
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)


# ── Config Loading ───────────────────────────────────────────────────


def load_config(workspace_root: str | Path) -> dict[str, Any]:
    """Load the optional tool config from the workspace root."""
    config_path = Path(workspace_root) / CONFIG_FILENAME
    if not config_path.exists():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigReadError(f"Invalid YAML in {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigReadError(f"{CONFIG_FILENAME} must contain a top-level mapping.")
    return data


# ── ToolContext ───────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True)
class ToolContext:
    """Immutable context passed to every tool execution."""

    workspace_root: Path
    config: dict[str, Any]
    tool_config: dict[str, Any]
    passthrough_args: list[str]


# ── RepoTool Base ────────────────────────────────────────────────────


class RepoTool:
    """Base class for CLI tools.

    Subclasses set ``name`` and ``help``, then implement ``setup()`` to
    add click options and ``execute()`` to run the tool.
    """

    name: str = ""
    help: str = ""
    # Config spelling -> click parameter name, for keys that differ.
    config_keys: dict[str, str] = {}

    def setup(self, cmd: click.Command) -> click.Command:
        """Add click options/arguments to the command. Return the command."""
        return cmd

    def default_args(self) -> dict[str, Any]:
        """Return default args dict before config/CLI merge."""
        return {}

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> None:
        """Execute the tool with context and tool-specific args."""
        raise NotImplementedError


def merge_args(
    tool: RepoTool,
    tool_config: dict[str, Any],
    cli_kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Merge: defaults < tool_config < CLI kwargs (``None`` means unset)."""
    args: dict[str, Any] = {**tool.default_args()}
    for key, v in tool_config.items():
        k = tool.config_keys.get(key, key)
        if k not in cli_kwargs or cli_kwargs[k] is None:
            args[k] = v
    for k, v in cli_kwargs.items():
        if v is not None:
            args[k] = v
    return args
