from __future__ import annotations

import json
import os
from typing import Annotated, Literal

import typer
import yaml

from appwhere.environment import get_platform
from appwhere.logging import create_logger, setup_cli_logging
from appwhere.models import Application, application
from appwhere.resolver import resolve_all, user_cache, user_config, user_data, user_logs
from appwhere.settings import get_settings

logger = create_logger("cli")

NameArgument = Annotated[str, typer.Argument(help="Application name.")]
AuthorOption = Annotated[
    str | None,
    typer.Option("--author", "-a", help="Application author, used on Windows. Defaults to the name."),
]
VersionOption = Annotated[
    str | None,
    typer.Option("--version", "-v", help="Application version appended to the directory."),
]
RoamingOption = Annotated[
    bool,
    typer.Option("--roaming", help="Use the roaming data directory on Windows."),
]
PlatformOption = Annotated[
    str | None,
    typer.Option(
        "--platform",
        "-p",
        help="Resolve as if running on this platform (windows, macosx, linux, ...).",
    ),
]
FormatOption = Annotated[
    Literal["yaml", "json"],
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Show where an application should keep its per-user files.")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("data")
def data(
    name: NameArgument,
    author: AuthorOption = None,
    version: VersionOption = None,
    roaming: RoamingOption = False,
    platform: PlatformOption = None,
) -> None:
    """Print the user data directory."""
    typer.echo(user_data(_application(name, author, version, roaming), _platform(platform)))


@app.command("config")
def config(
    name: NameArgument,
    author: AuthorOption = None,
    version: VersionOption = None,
    roaming: RoamingOption = False,
    platform: PlatformOption = None,
) -> None:
    """Print the user config directory."""
    typer.echo(user_config(_application(name, author, version, roaming), _platform(platform)))


@app.command("cache")
def cache(
    name: NameArgument,
    author: AuthorOption = None,
    version: VersionOption = None,
    roaming: RoamingOption = False,
    force_cache: Annotated[
        bool,
        typer.Option("--force-cache/--no-force-cache", help="Add a Cache directory on Windows."),
    ] = True,
    platform: PlatformOption = None,
) -> None:
    """Print the user cache directory."""
    typer.echo(user_cache(_application(name, author, version, roaming), force_cache, _platform(platform)))


@app.command("logs")
def logs(
    name: NameArgument,
    author: AuthorOption = None,
    version: VersionOption = None,
    roaming: RoamingOption = False,
    force_logs: Annotated[
        bool,
        typer.Option("--force-logs/--no-force-logs", help="Add a logs directory outside macOS."),
    ] = True,
    platform: PlatformOption = None,
) -> None:
    """Print the user logs directory."""
    typer.echo(user_logs(_application(name, author, version, roaming), force_logs, _platform(platform)))


@app.command("all")
def show_all(
    name: NameArgument,
    author: AuthorOption = None,
    version: VersionOption = None,
    roaming: RoamingOption = False,
    platform: PlatformOption = None,
    format: FormatOption = "yaml",
) -> None:
    """Print every user directory of the application."""
    appl = _application(name, author, version, roaming)
    plat = get_platform(_platform(platform))
    directories = resolve_all(appl, plat)
    payload: dict[str, object] = {
        "application": appl.model_dump(mode="json"),
        "platform": plat,
        "directories": {kind.value: path for kind, path in directories.items()},
    }
    typer.echo(_format_payload(payload, format.lower()))


def _application(name: str, author: str | None, version: str | None, roaming: bool) -> Application:
    if not name.strip():
        logger.warning("Rejected blank application name", name=name)
        typer.secho("Application name must not be empty", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    return application(name, author, version, roaming)


def _platform(platform: str | None) -> str | None:
    return platform or get_settings().platform


def _format_payload(payload: dict[str, object], format: str) -> str:
    if format == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)


def main() -> None:
    """Entrypoint for the appwhere CLI."""
    _setup_logging()
    app()
