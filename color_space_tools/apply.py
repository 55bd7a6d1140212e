"""ApplyTool — register expo-color-space-plugin in the project's Expo config."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from .core import RepoTool, ToolContext, logger
from .detector import entry_present
from .errors import ColorSpaceToolError, ConfigWriteError
from .json_patcher import patch_json
from .locator import locate_config
from .models import DEFAULT_COLOR_SPACE, PLUGIN_NAME, ColorSpace, ConfigFile
from .text_patcher import format_entry, patch_text


class ApplyState(enum.Enum):
    LOCATING = "locating"
    DETECTING = "detecting"
    AWAITING_CHOICE = "awaiting-choice"
    PATCHING = "patching"
    REPORTING = "reporting"
    FAILED = "failed"


class ApplyOutcome(enum.Enum):
    PATCHED = "patched"
    ALREADY_CONFIGURED = "already-configured"
    MANUAL = "manual"


def prompt_color_space() -> ColorSpace:
    """Ask which color space to use. Anything but ``2`` picks displayP3."""
    click.echo("\nWhich color space would you like to use?")
    click.echo("1. displayP3 (default) - Wide color gamut, more vibrant colors")
    click.echo("2. SRGB - Standard color space\n")
    answer = click.prompt(
        "Enter choice (1 or 2, default: 1)",
        default="",
        show_default=False,
        prompt_suffix=": ",
    )
    return ColorSpace.SRGB if answer.strip() == "2" else ColorSpace.DISPLAY_P3


def write_config(config_file: ConfigFile, content: str) -> None:
    """Overwrite the config file in one write."""
    try:
        config_file.path.write_bytes(content.encode("utf-8"))
    except (OSError, UnicodeEncodeError) as exc:
        raise ConfigWriteError(f"Failed to write {config_file.name}: {exc}") from exc


class ApplyController:
    """Drive one apply run: locate, detect, choose, patch, report.

    The working directory and the prompt are injected so the whole flow
    runs against a temp directory with scripted input.
    """

    def __init__(
        self,
        workspace_root: Path,
        color_space: ColorSpace | None = None,
        *,
        interactive: bool = True,
        prompt: Callable[[], ColorSpace] = prompt_color_space,
    ) -> None:
        self.workspace_root = workspace_root
        self.color_space = color_space
        self.interactive = interactive
        self.prompt = prompt
        self.state = ApplyState.LOCATING

    def _enter(self, state: ApplyState) -> None:
        logger.debug(f"[apply] {self.state.value} -> {state.value}")
        self.state = state

    def run(self) -> ApplyOutcome:
        try:
            return self._run()
        except ColorSpaceToolError:
            self._enter(ApplyState.FAILED)
            raise

    def _run(self) -> ApplyOutcome:
        config_file = locate_config(self.workspace_root)
        logger.info(f"Found config file: {config_file.name}")

        self._enter(ApplyState.DETECTING)
        if entry_present(config_file):
            self._enter(ApplyState.REPORTING)
            logger.info(f"Plugin is already configured in {config_file.name}")
            return ApplyOutcome.ALREADY_CONFIGURED

        color_space = self._resolve_color_space()

        self._enter(ApplyState.PATCHING)
        if config_file.format.is_code:
            patched = patch_text(config_file.content, color_space)
        else:
            patched = patch_json(config_file.content, color_space, config_file.name)

        if patched is None:
            self._enter(ApplyState.REPORTING)
            logger.warning(f"Could not automatically modify {config_file.name}")
            logger.warning("Please manually add the following to your plugins array:")
            logger.warning(f"  {format_entry(color_space)}")
            return ApplyOutcome.MANUAL

        write_config(config_file, patched)
        self._enter(ApplyState.REPORTING)
        logger.info(
            f"Successfully added {PLUGIN_NAME} with {color_space.value} color space!"
        )
        logger.info("Next steps:")
        logger.info("  1. Run: bunx expo prebuild --clean")
        logger.info("  2. Build your iOS app to see the changes")
        return ApplyOutcome.PATCHED

    def _resolve_color_space(self) -> ColorSpace:
        if self.color_space is not None:
            return self.color_space
        if not self.interactive:
            logger.info(
                f"No color space given and no terminal to ask; "
                f"using {DEFAULT_COLOR_SPACE.value}"
            )
            return DEFAULT_COLOR_SPACE
        self._enter(ApplyState.AWAITING_CHOICE)
        return self.prompt()


def _stdin_is_interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


class ApplyTool(RepoTool):
    name = "apply"
    help = f"Add {PLUGIN_NAME} to app.json, app.config.js or app.config.ts"
    config_keys = {"colorSpace": "color_space"}

    def setup(self, cmd: click.Command) -> click.Command:
        cmd = click.option(
            "--colorSpace", "color_space", default=None, metavar="<displayP3|SRGB>",
            is_flag=False, flag_value="",  # bare flag fails validation, not parsing
            help="Set color space without prompting",
        )(cmd)
        return cmd

    def default_args(self) -> dict[str, Any]:
        return {"color_space": None}

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> None:
        value = args.get("color_space")
        # Validate before any file is touched.
        color_space = ColorSpace.parse(str(value)) if value is not None else None

        controller = ApplyController(
            ctx.workspace_root,
            color_space,
            interactive=_stdin_is_interactive(),
        )
        controller.run()
