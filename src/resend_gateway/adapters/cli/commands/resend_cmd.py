"""Resend gateway CLI commands.

Contents:
    * :func:`cli_check` - Report whether Resend settings are complete.
    * :func:`cli_test_connection` - Probe the API key without sending mail.
    * :func:`cli_send_email` - Send one HTML email.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

import lib_log_rich.runtime
import orjson
import rich_click as click

from resend_gateway.domain.enums import OutputFormat
from resend_gateway.domain.errors import InternalError, ServiceUnavailableError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from resend_gateway.application.ports import EmailGatewayPort

logger = logging.getLogger(__name__)

_FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)


def _emit(payload: dict[str, Any], output_format: str, *, headline: str) -> None:
    """Print ``payload`` as indented JSON or as a headline with ``key: value`` lines."""
    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS).decode())
        return
    click.echo(f"\n{headline}")
    for key, value in payload.items():
        rendered = ", ".join(value) if isinstance(value, list) else value
        click.echo(f"  {key}: {rendered}")


def _fail(exc: Exception, log_message: str, *, exit_code: ExitCode) -> NoReturn:
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {exc}", err=True)
    raise SystemExit(exit_code) from exc


def _build_gateway(cli_ctx: CLIContext) -> EmailGatewayPort:
    try:
        return cli_ctx.build_gateway()
    except ValueError as exc:
        _fail(exc, "Invalid Resend settings", exit_code=ExitCode.CONFIG_ERROR)


@click.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@_FORMAT_OPTION
@click.pass_context
def cli_check(ctx: click.Context, output_format: str) -> None:
    """Check that RESEND_API_KEY and RESEND_FROM_EMAIL are set and not placeholders.

    Exits with 78 (EX_CONFIG) when they are not. No network access.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-check", extra={"command": "check"}):
        gateway = _build_gateway(cli_ctx)
        configured = gateway.is_configured()
        logger.info("Checked Resend configuration", extra={"configured": configured})

        payload: dict[str, Any] = {"configured": configured}
        if configured:
            resend_config = cli_ctx.services.load_resend_config(cli_ctx.config.as_dict())
            payload["from_email"] = resend_config.from_email
            payload["from_name"] = resend_config.from_name
        headline = "Resend is configured." if configured else "Resend is not configured."
        _emit(payload, output_format, headline=headline)

        if not configured:
            raise SystemExit(ExitCode.CONFIG_ERROR)


@click.command("test-connection", context_settings=CLICK_CONTEXT_SETTINGS)
@_FORMAT_OPTION
@click.pass_context
def cli_test_connection(ctx: click.Context, output_format: str) -> None:
    """Validate the API key with a read-only domains listing.

    Exits with 78 (EX_CONFIG) when the gateway reports the key as unusable.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-test-connection", extra={"command": "test-connection"}):
        gateway = _build_gateway(cli_ctx)
        result = asyncio.run(gateway.test_connection())
        logger.info(
            "Resend connection test finished",
            extra={"configured": result.configured, "warning": result.warning},
        )
        _emit(result.to_dict(), output_format, headline=result.message)
        if not result.configured:
            raise SystemExit(ExitCode.CONFIG_ERROR)


def _read_html(html: str | None, html_file: Path | None) -> str:
    if (html is None) == (html_file is None):
        raise click.UsageError("Provide exactly one of --html or --html-file")
    if html_file is not None:
        try:
            return html_file.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise click.BadParameter(f"{html_file} is not UTF-8 text", param_hint="'--html-file'") from exc
    return html or ""


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipients", multiple=True, required=True, help="Recipient address (repeatable)")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--html", default=None, help="HTML body")
@click.option(
    "--html-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the HTML body from a file",
)
@click.option("--text", default=None, help="Plain-text body (derived from the HTML when omitted)")
@_FORMAT_OPTION
@click.pass_context
def cli_send_email(
    ctx: click.Context,
    recipients: tuple[str, ...],
    subject: str,
    html: str | None,
    html_file: Path | None,
    text: str | None,
    output_format: str,
) -> None:
    """Send an email through Resend.

    Exits with 22 (EINVAL) when the body arguments are unusable, with
    78 (EX_CONFIG) when Resend is not configured and with 69
    (EX_UNAVAILABLE) when the send fails.
    """
    cli_ctx = get_cli_context(ctx)
    to = list(recipients)
    extra = {"command": "send-email", "recipients": to, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        try:
            body = _read_html(html, html_file)
        except click.UsageError as exc:
            logger.error("Invalid email body arguments", extra={"error": exc.format_message()})
            click.echo(f"\nError: {exc.format_message()}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        gateway = _build_gateway(cli_ctx)
        try:
            result = asyncio.run(gateway.send_email(to, subject, body, text))
        except ServiceUnavailableError as exc:
            _fail(exc, "Resend is not configured", exit_code=ExitCode.CONFIG_ERROR)
        except InternalError as exc:
            _fail(exc, "Resend delivery failed", exit_code=ExitCode.DELIVERY_FAILURE)

        logger.info("Email sent via CLI", extra={"message_id": result.message_id})
        _emit(result.to_dict(), output_format, headline="Email sent successfully!")


__all__ = ["cli_check", "cli_send_email", "cli_test_connection"]
