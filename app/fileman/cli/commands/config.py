"""Configuration commands.

Provides commands to show the effective shell configuration and to
write a default configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fileman.core.config import ConfigError, ShellConfig, load_config, save_config
from fileman.core.paths import get_config_path
from fileman.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show or initialize the shell configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Get the config path chosen on the command line, or the default."""
    obj = ctx.obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    path = _config_path(ctx)
    try:
        config = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"

    table = Table(
        title="Shell Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")

    for name, value in config.model_dump().items():
        table.add_row(name, escape(repr(value)))

    console.print(table)
    console.print(f"\n[muted]Source: {escape(source)}[/]", soft_wrap=True)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the default configuration file."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_error(f"Config file already exists: {path}")
        console.print("[muted]Use --force to overwrite.[/]")
        raise typer.Exit(code=1)

    try:
        saved = save_config(ShellConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
