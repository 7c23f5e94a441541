"""Interactive file manager shell.

Presents a numbered menu, reads one command per line, prompts for the
arguments the command needs, and prints the outcome reported by the
FilesystemOperator.
"""

import logging
from collections.abc import Callable
from enum import Enum

import typer

from fileman.cli.display import print_result
from fileman.core.config import ShellConfig
from fileman.filesystem.operator import FilesystemOperator
from fileman.utils.formatting import console

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Please try again."


class MenuCommand(str, Enum):
    """Numbered menu entries of the shell."""

    CREATE_FILE = "1"
    DELETE_FILE = "2"
    CREATE_DIRECTORY = "3"
    DELETE_DIRECTORY = "4"
    LIST_DIRECTORY = "5"
    RENAME = "6"
    SEARCH = "7"
    CLEAR_CONSOLE = "8"
    EXIT = "9"


MENU_LABELS: dict[MenuCommand, str] = {
    MenuCommand.CREATE_FILE: "Create File",
    MenuCommand.DELETE_FILE: "Delete File",
    MenuCommand.CREATE_DIRECTORY: "Create Directory",
    MenuCommand.DELETE_DIRECTORY: "Delete Directory",
    MenuCommand.LIST_DIRECTORY: "List Directory Contents",
    MenuCommand.RENAME: "Rename File/Directory",
    MenuCommand.SEARCH: "Search Files",
    MenuCommand.CLEAR_CONSOLE: "Clear Console",
    MenuCommand.EXIT: "Exit",
}


def _ask(text: str) -> str:
    """Read one line of input. An empty line is returned as-is."""
    return typer.prompt(text, default="", show_default=False)


def _confirm(text: str) -> bool:
    """Ask a y/n question, defaulting to no."""
    return typer.confirm(text, default=False)


def _print_canceled() -> None:
    console.print("\n[muted]Operation canceled.[/]")


class FileManagerShell:
    """Menu loop over a FilesystemOperator.

    The shell has a single state, "awaiting command", which it re-enters
    after every command. Only a confirmed exit (or end of input) leaves
    the loop.

    Attributes:
        _operator: Provider that performs the filesystem operations.
        _config: Shell settings (list marker, confirmations, menu display).
    """

    def __init__(
        self,
        operator: FilesystemOperator,
        config: ShellConfig | None = None,
    ) -> None:
        """Initialize the shell.

        Args:
            operator: Filesystem operations provider.
            config: Shell settings. If None, defaults are used.
        """
        self._operator = operator
        self._config = config or ShellConfig()
        self._handlers: dict[MenuCommand, Callable[[], None]] = {
            MenuCommand.CREATE_FILE: self._create_file,
            MenuCommand.DELETE_FILE: self._delete_file,
            MenuCommand.CREATE_DIRECTORY: self._create_directory,
            MenuCommand.DELETE_DIRECTORY: self._delete_directory,
            MenuCommand.LIST_DIRECTORY: self._list_directory,
            MenuCommand.RENAME: self._rename,
            MenuCommand.SEARCH: self._search,
            MenuCommand.CLEAR_CONSOLE: self._clear_console,
        }

    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        try:
            while True:
                if self._config.show_menu:
                    self.print_menu()
                command = _ask("\nEnter command")
                if not self.execute(command):
                    break
        except typer.Abort:
            # End of input or Ctrl-C
            console.print("\nGoodbye!")

    def print_menu(self) -> None:
        """Print the numbered command menu."""
        console.print("\n[bold_header]=== File Manager ===[/]")
        for command, label in MENU_LABELS.items():
            console.print(f"{command.value}. {label}")

    def execute(self, command: str) -> bool:
        """Execute a single menu command.

        Args:
            command: Raw input line.

        Returns:
            False if the shell should stop, True otherwise.
        """
        try:
            choice = MenuCommand(command.strip())
        except ValueError:
            logger.debug("Unknown command: %r", command)
            console.print(f"\n[warning]{UNKNOWN_COMMAND_MESSAGE}[/]")
            return True

        if choice is MenuCommand.EXIT:
            return not self._confirm_exit()

        self._handlers[choice]()
        return True

    def _confirm_exit(self) -> bool:
        if _confirm("\nAre you sure you want to exit?"):
            console.print("\nGoodbye!")
            return True
        return False

    def _confirm_destructive(self, text: str) -> bool:
        if not self._config.confirm_destructive:
            return True
        if _confirm(text):
            return True
        _print_canceled()
        return False

    def _create_file(self) -> None:
        path = _ask("\nEnter file path")
        print_result(self._operator.create_file(path))

    def _delete_file(self) -> None:
        path = _ask("\nEnter file path")
        if self._confirm_destructive("\nAre you sure you want to delete this file?"):
            print_result(self._operator.delete_file(path))

    def _create_directory(self) -> None:
        path = _ask("\nEnter directory path")
        print_result(self._operator.create_directory(path))

    def _delete_directory(self) -> None:
        path = _ask("\nEnter directory path")
        if self._confirm_destructive("\nAre you sure you want to delete this directory?"):
            print_result(self._operator.delete_directory(path))

    def _list_directory(self) -> None:
        path = _ask("\nEnter directory path")
        result = self._operator.list_directory(path)
        print_result(result, title="Directory Contents:", marker=self._config.list_marker)

    def _rename(self) -> None:
        old_path = _ask("\nEnter current file/directory path")
        new_path = _ask("Enter new name for the file/directory")
        print_result(self._operator.rename(old_path, new_path))

    def _search(self) -> None:
        path = _ask("\nEnter directory path to search")
        substring = _ask("Enter filename pattern to search for")
        result = self._operator.search(path, substring)
        print_result(result, title="Search Results:", marker=self._config.list_marker)

    def _clear_console(self) -> None:
        # The clear-console confirmation is always asked
        if _confirm("\nAre you sure you want to clear the console?"):
            console.clear()
            console.print("\n[success]Console cleared.[/]")
        else:
            _print_canceled()
