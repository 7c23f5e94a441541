"""Main CLI application entry point.

Defines the Typer application and global options. Running ``fileman``
without a subcommand starts the interactive shell.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from fileman import __version__
from fileman.cli.commands import config, ops
from fileman.cli.shell import FileManagerShell
from fileman.core.config import ConfigError, ShellConfig, load_config
from fileman.filesystem.operator import FilesystemOperator
from fileman.utils.formatting import configure_logging, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="fileman",
    help="Console file manager.",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fileman version {__version__}")
        raise typer.Exit()


def _load_shell_config(path: Path | None) -> ShellConfig:
    """Load the shell configuration, exiting with an error if it is invalid."""
    try:
        return load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _run_shell(config_path: Path | None) -> None:
    shell_config = _load_shell_config(config_path)
    logger.debug("Starting interactive shell with %s", shell_config)
    FileManagerShell(FilesystemOperator(), shell_config).run()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to an alternate config file.",
        ),
    ] = None,
) -> None:
    """fileman - Console file manager.

    Without a command, starts the interactive menu shell for listing,
    creating, deleting, renaming and searching files and directories.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is None:
        _run_shell(config_path)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Start the interactive shell."""
    _run_shell(ctx.obj.get("config_path") if ctx.obj else None)


# Register commands
app.command("ls")(ops.list_directory)
app.command("touch")(ops.create_file)
app.command("rm")(ops.delete_file)
app.command("mkdir")(ops.create_directory)
app.command("rmdir")(ops.delete_directory)
app.command("mv")(ops.rename)
app.command("find")(ops.search)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
