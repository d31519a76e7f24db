"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from cli import session
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import PoolStatsError
from core.services.pool_stats import list_bindings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_router(router: str, settings: AppSettings) -> list[tuple[str, bool, str]]:
    """Probe login and the DHCP server list; one (check, ok, details) row each."""

    rows: list[tuple[str, bool, str]] = []
    try:
        with session.open_router(router, settings) as router_query:
            rows.append(("Base URL", True, router_query.base_url))
            identity = router_query.connect()
            rows.append(("Router login", True, f"identity: {identity or '-'}"))
            bindings = list_bindings(query=router_query)
    except PoolStatsError as exc:
        rows.append(("Router", False, str(exc)))
        return rows

    with_pool = sum(1 for b in bindings if b.pool_name)
    rows.append(("DHCP servers", True, f"{len(bindings)} enabled, {with_pool} with a pool"))
    return rows


@app.command()
def run(
    router: Annotated[str, typer.Argument(help="Router address (host name or IPv4).")],
    port: Annotated[int | None, typer.Option("--port", "-p", help="RouterOS REST port.", min=1, max=65535)] = None,
    http: Annotated[bool, typer.Option("--http", help="Use plain http instead of https.")] = False,
    verify_tls: Annotated[bool, typer.Option("--verify-tls", help="Verify the router's TLS certificate.")] = False,
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = Table(title="dhcp-poolstat Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    try:
        settings = session.load_settings(port=port, http=http, verify_tls=verify_tls)
    except ValidationError as exc:
        for error in exc.errors():
            field = "_".join(str(part) for part in error["loc"]).upper()
            table.add_row("Configuration", "FAIL", f"MT_{field}: {error['msg']}")
        _console.print(table)
        raise typer.Exit(1)

    ok = bool(settings.username)
    if ok:
        table.add_row("MT_USERNAME", "OK", settings.username)
    else:
        table.add_row("MT_USERNAME", "FAIL", "empty or not set")
    if settings.password:
        table.add_row("MT_PASSWORD", "OK", "set")
    else:
        table.add_row("MT_PASSWORD", "WARN", "empty password (valid, just not good)")
    table.add_row("TLS", "OK", f"{settings.scheme}, verify={'on' if settings.verify_tls else 'off'}")

    # Connectivity
    if ok:
        for check, passed, details in _check_router(router, settings):
            ok = ok and passed
            table.add_row(check, "OK" if passed else "FAIL", details)

    _console.print(table)

    if not ok:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `dhcp-poolstat doctor setup` to store credentials, "
            "and make sure the REST service (www-ssl or www) is enabled on the router."
        )
        raise typer.Exit(1)


@app.command(name="setup")
def setup() -> None:
    """Interactive credential setup (stores config in the user config .env).

    Lets cron jobs and monitoring agents run without exporting variables.
    """

    username = typer.prompt("Router username").strip()
    password = typer.prompt("Router password", default="", hide_input=True, show_default=False)
    port = typer.prompt("REST port (empty for default)", default="", show_default=False).strip()

    if not username:
        raise typer.BadParameter("username is required")
    if port and not port.isdigit():
        raise typer.BadParameter("port must be a number")

    env_path = write_user_env_vars(
        {
            "MT_USERNAME": username,
            "MT_PASSWORD": password,
            "MT_PORT": port or None,
        }
    )

    _console.print(f"[green]Saved router config to:[/green] {env_path}")
