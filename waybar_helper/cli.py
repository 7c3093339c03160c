"""
Command-line entry points.

Usage:
    wayland-helpers wayeyes [--format FMT] [--xdg-icon ICON] ... [--unknown-percentage N]
    wayland-helpers help
    waybar-helper wayeyes

Exit codes:
  0 - Clean shutdown (interrupt or connection closed), or usage shown
  1 - No sub-command given
  2 - Bad flags, unknown sub-command, or Sway IPC failure
  3 - Extra arguments passed to the minimal `wayeyes`
"""

import asyncio
import logging
import os
from typing import List, Optional, Sequence

import click
from rich.console import Console

from . import configure_logging
from .config import Configuration, usage_lines
from .errors import ConfigurationError, ExitCode, WaybarHelperError
from .shutdown import ShutdownContext
from .wayeyes import Wayeyes

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "WAYBAR_HELPER_LOG_LEVEL"

# Sub-command arguments are raw `--flag value` tokens parsed by Configuration.
PASSTHROUGH_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}

err_console = Console(stderr=True, highlight=False)


def _exe(ctx: click.Context) -> str:
    return ctx.find_root().info_name or "wayland-helpers"


def _print_usage(ctx: click.Context, with_flags: bool = True, err: bool = False) -> None:
    for line in usage_lines(_exe(ctx), with_flags=with_flags):
        click.echo(line, err=err)


def _print_error(error: Exception) -> None:
    err_console.print(f"Error: {error}", style="red", markup=False)
    suggestion = getattr(error, "suggestion", None)
    if suggestion:
        err_console.print(f"  → {suggestion}", markup=False)


def run_wayeyes(ctx: click.Context, config: Configuration) -> None:
    """Run the focus loop until interrupted or the connection ends."""
    shutdown = ShutdownContext()
    try:
        shutdown.install()
        asyncio.run(Wayeyes(config, shutdown).run())
    except WaybarHelperError as e:
        logger.debug(f"wayeyes failed: {e.context}")
        _print_error(e)
        ctx.exit(e.exit_code)
    except Exception as e:
        logger.exception("Unexpected error in wayeyes")
        err_console.print(f"Unexpected error: {e}", style="red", markup=False)
        ctx.exit(ExitCode.RUNTIME_FAILURE)
    finally:
        shutdown.restore()


# ============================================================================
# Configurable variant
# ============================================================================

@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context):
    """Waybar helpers for Sway."""
    configure_logging(os.environ.get(LOG_LEVEL_ENV, "WARNING"))

    if ctx.invoked_subcommand is None:
        err_console.print("Error: not enough arguments", style="red", markup=False)
        _print_usage(ctx, err=True)
        ctx.exit(ExitCode.MISSING_ARGUMENTS)


@cli.command(context_settings=PASSTHROUGH_SETTINGS)
@click.argument("overrides", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def wayeyes(ctx: click.Context, overrides: Sequence[str]):
    """Report whether the focused window is native Wayland or XWayland."""
    try:
        config = Configuration.from_overrides(list(overrides))
    except ConfigurationError as e:
        _print_error(e)
        _print_usage(ctx, err=True)
        ctx.exit(e.exit_code)

    run_wayeyes(ctx, config)


@cli.command("help")
@click.pass_context
def help_command(ctx: click.Context):
    """Show usage."""
    _print_usage(ctx)


# ============================================================================
# Minimal variant: defaults only, unknown commands just print usage
# ============================================================================

class UsageFallbackGroup(click.Group):
    """Group that routes unknown sub-commands to its `usage` command."""

    def resolve_command(self, ctx: click.Context, args: List[str]):
        if args and self.get_command(ctx, args[0]) is None:
            return "usage", self.get_command(ctx, "usage"), args[1:]
        return super().resolve_command(ctx, args)


@click.group(
    cls=UsageFallbackGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True},
)
@click.pass_context
def minimal_cli(ctx: click.Context):
    """Waybar helpers for Sway (default configuration only)."""
    configure_logging(os.environ.get(LOG_LEVEL_ENV, "WARNING"))

    if ctx.invoked_subcommand is None:
        _print_usage(ctx, with_flags=False)


@minimal_cli.command("wayeyes", context_settings=PASSTHROUGH_SETTINGS)
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def minimal_wayeyes(ctx: click.Context, extra: Sequence[str]):
    """Report whether the focused window is native Wayland or XWayland."""
    if extra:
        err_console.print("invalid arguments for wayeyes", style="red", markup=False)
        _print_usage(ctx, with_flags=False, err=True)
        ctx.exit(ExitCode.UNEXPECTED_ARGUMENTS)

    run_wayeyes(ctx, Configuration())


@minimal_cli.command("usage", hidden=True, context_settings=PASSTHROUGH_SETTINGS)
@click.argument("ignored", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def minimal_usage(ctx: click.Context, ignored: Sequence[str]):
    """Show usage."""
    _print_usage(ctx, with_flags=False)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for `wayland-helpers`."""
    cli.main(args=argv, prog_name="wayland-helpers")


def main_minimal(argv: Optional[List[str]] = None) -> None:
    """Entry point for `waybar-helper`."""
    minimal_cli.main(args=argv, prog_name="waybar-helper")
