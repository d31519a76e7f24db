"""
dhcp-poolstat CLI entry point.

Usage:
    dhcp-poolstat [OPTIONS] COMMAND [ARGS]...

Commands:
    stats    DHCP pool usage per interface
    doctor   Environment diagnostics and credential setup
    version  Show version information

Login credentials are read from MT_USERNAME and MT_PASSWORD (environment,
./.env or the user config .env).
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as dist_version
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import JsonRenderer
from adapters.text_exporter import TextRenderer
from cli import doctor, session
from cli.fatal import EXIT_CONFIG, MISSING_USERNAME, FatalError, describe_failure
from cli.ui_components import build_usage_table
from core.domain.errors import PoolStatsError
from core.domain.output import OutputFormat
from core.interfaces.renderer import RecordRenderer
from core.services.pool_stats import aggregate

logger = logging.getLogger("dhcp-poolstat")

app = typer.Typer(
    name="dhcp-poolstat",
    help="Fetch DHCP pool usage from a MikroTik RouterOS router.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(doctor.app, name="doctor", help="Environment diagnostics and configuration checks.")

_console = Console()


def setup_logging(debug: bool) -> None:
    """Send log records to stderr so stdout stays clean for JSON consumers."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _renderer_for(fmt: OutputFormat) -> RecordRenderer:
    return JsonRenderer() if fmt.structured else TextRenderer()


def _fail(fmt: OutputFormat, fatal: FatalError) -> NoReturn:
    renderer = _renderer_for(fmt)
    if fmt.structured:
        message = renderer.render_error(fatal.summary)
    else:
        message = renderer.render_error(fatal.text, fatal.detail)
    typer.echo(message, err=True)
    raise typer.Exit(fatal.exit_code)


@app.command("stats")
def stats(
    router: Annotated[str, typer.Argument(help="Router address (host name or IPv4).")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Display output in JSON format (same as --format json)."),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: text|json|table", case_sensitive=False),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="RouterOS REST port (default 443, or 80 with --http).", min=1, max=65535),
    ] = None,
    http: Annotated[
        bool,
        typer.Option("--http", help="Use plain http instead of https."),
    ] = False,
    verify_tls: Annotated[
        bool,
        typer.Option("--verify-tls", help="Verify the router's TLS certificate."),
    ] = False,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Per-request timeout in seconds.", min=0.1),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log router requests to stderr.")] = False,
) -> None:
    """Show Used/Free addresses for every enabled DHCP server that has a pool."""

    setup_logging(debug)
    fmt = OutputFormat.from_flags(json_flag=json_output, fmt=output_format)

    try:
        settings = session.load_settings(port=port, http=http, verify_tls=verify_tls, timeout=timeout)
    except ValidationError as exc:
        _fail(fmt, FatalError("Invalid configuration", "Invalid configuration", str(exc), EXIT_CONFIG))

    if not settings.username:
        _fail(fmt, MISSING_USERNAME)

    try:
        with session.open_router(router, settings) as router_query:
            router_query.connect()
            records = aggregate(query=router_query)
    except PoolStatsError as exc:
        logger.debug("run aborted", exc_info=exc)
        _fail(fmt, describe_failure(exc))

    if fmt is OutputFormat.TABLE:
        _console.print(build_usage_table(records, title=f"DHCP Pool Usage ({router})"))
        return
    typer.echo(_renderer_for(fmt).render(records))


@app.command("version")
def version() -> None:
    """Show version information."""
    try:
        _console.print(f"dhcp-poolstat v{dist_version('dhcp-poolstat')}")
    except PackageNotFoundError:
        _console.print("dhcp-poolstat (version unknown)")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
