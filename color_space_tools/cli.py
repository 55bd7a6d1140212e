"""Entry point: main(), click group, tool registration."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click

from .apply import ApplyTool
from .core import RepoTool, ToolContext, load_config, logger, merge_args, set_verbosity
from .errors import ColorSpaceToolError

PROG_NAME = "expo-color-space-plugin"

TOOLS: list[RepoTool] = [ApplyTool()]

_EPILOG = f"""\b
Example:
  bunx {PROG_NAME} apply
  bunx {PROG_NAME} apply --colorSpace=displayP3
"""


# ── Click Command Builder ────────────────────────────────────────────


def _build_tool_context(ctx_obj: dict[str, Any], tool_name: str, extra: list[str]) -> ToolContext:
    """Build a ToolContext from the click context obj dict."""
    config = ctx_obj["config"]
    tool_config = config.get(tool_name, {})
    if not isinstance(tool_config, dict):
        tool_config = {}
    return ToolContext(
        workspace_root=Path(ctx_obj["workspace_root"]),
        config=config,
        tool_config=tool_config,
        passthrough_args=extra,
    )


def _make_tool_command(tool: RepoTool) -> click.Command:
    """Build a click command for a tool."""

    @click.pass_context
    def callback(ctx: click.Context, **kwargs: Any) -> None:
        context = _build_tool_context(ctx.obj, tool.name, list(ctx.args))
        args = merge_args(tool, context.tool_config, kwargs)
        try:
            tool.execute(context, args)
        except ColorSpaceToolError as exc:
            logger.error(str(exc))
            sys.exit(1)

    cmd = click.Command(
        name=tool.name,
        help=tool.help,
        callback=callback,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    )

    # Let the tool add its own options
    cmd = tool.setup(cmd)

    return cmd


class _UsageGroup(click.Group):
    """Group that answers an unknown command with usage help and exit 0."""

    def resolve_command(
        self, ctx: click.Context, args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            click.echo(ctx.get_help())
            ctx.exit(0)
        return super().resolve_command(ctx, args)


# ── Main CLI Group ───────────────────────────────────────────────────


def _build_cli(workspace_root: str | None = None) -> click.Group:
    """Build the top-level click group with all registered tools."""

    @click.group(
        cls=_UsageGroup,
        invoke_without_command=True,
        epilog=_EPILOG,
        context_settings={
            "help_option_names": ["-h", "--help"],
            "ignore_unknown_options": True,
        },
    )
    @click.option(
        "--workspace-root",
        type=click.Path(exists=True, file_okay=False),
        default=workspace_root,
        hidden=True,  # Tests and wrappers only; users run from the project root.
    )
    @click.option("-v", "--verbose", is_flag=True, help="Show debug output")
    @click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors")
    @click.pass_context
    def cli(ctx: click.Context, workspace_root: str | None, verbose: bool, quiet: bool) -> None:
        """Configure expo-color-space-plugin in an Expo project."""
        ctx.ensure_object(dict)
        set_verbosity(verbose=verbose, quiet=quiet)

        if ctx.invoked_subcommand is None:
            click.echo(ctx.get_help())
            ctx.exit(0)

        if workspace_root is None:
            workspace_root = str(Path.cwd())

        try:
            config = load_config(workspace_root)
        except ColorSpaceToolError as exc:
            logger.error(str(exc))
            sys.exit(1)

        ctx.obj["workspace_root"] = workspace_root
        ctx.obj["config"] = config

    for tool in TOOLS:
        cli.add_command(_make_tool_command(tool))

    return cli


def main() -> None:
    """CLI entry point for the ``expo-color-space-plugin`` script."""
    from colorama import init as colorama_init
    colorama_init()

    cli = _build_cli()
    cli(prog_name=PROG_NAME, standalone_mode=True)


if __name__ == "__main__":
    main()
