"""Root CLI command group and global option handling.

Handles the global ``--traceback``, ``--profile`` and ``--set`` flags, loads
configuration once and initializes logging before ``check``, ``test-connection``
or ``send-email`` runs. Tracebacks are switched on first so a failing
configuration load honours ``--traceback`` too.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from resend_gateway import __init__conf__
from resend_gateway.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from resend_gateway.composition import AppServices


_EPILOG = """\b
Examples:
  resend-gateway check
  resend-gateway test-connection --format json
  resend-gateway send-email --to ops@example.org --subject Hi --html "<p>Hi</p>"
  resend-gateway --set resend.timeout=30 send-email --to ops@example.org --subject Hi --html-file body.html
"""


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed ones as usage errors."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    epilog=_EPILOG,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. resend.timeout=30",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve services and configuration, then hand over to the subcommand.

    ``ctx.obj`` arrives as the services factory (production or test) and is
    replaced by a :class:`~.context.CLIContext`.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    apply_traceback_preferences(traceback)
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from this package, so registration is deferred until
# ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_check,
        cli_config,
        cli_info,
        cli_send_email,
        cli_test_connection,
    )

    for cmd in (
        cli_info,
        cli_config,
        cli_check,
        cli_test_connection,
        cli_send_email,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
