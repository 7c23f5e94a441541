"""Unit tests for shared display functions."""

import pytest
from fileman.cli.display import STATUS_MESSAGES, print_result, print_status
from fileman.filesystem.models import OperationResult, StatusCode


class TestStatusMessages:
    """Tests for the status-to-message lookup."""

    def test_every_status_has_a_message(self) -> None:
        """Each status code maps to exactly one message."""
        assert set(STATUS_MESSAGES) == set(StatusCode)

    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (StatusCode.SUCCESS, "Operation successful."),
            (StatusCode.NO_MATCHES, "No files found matching the criteria."),
            (StatusCode.INVALID_REQUEST, "Error: Invalid path or resource already exists."),
            (StatusCode.NOT_FOUND, "Error: File or directory not found."),
        ],
    )
    def test_print_status(
        self, status: StatusCode, message: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """print_status writes the status message to stdout."""
        print_status(status)

        assert message in capsys.readouterr().out


class TestPrintResult:
    """Tests for print_result."""

    def test_prints_paths_on_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Paths follow the title, one per line, with the marker."""
        print_result(
            OperationResult(StatusCode.SUCCESS, ("t/a.txt", "t/b.txt")),
            title="Directory Contents:",
        )

        out = capsys.readouterr().out
        assert "Operation successful." in out
        assert "Directory Contents:" in out
        assert "- t/a.txt\n" in out
        assert "- t/b.txt\n" in out

    def test_custom_marker(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A custom marker replaces the default prefix."""
        print_result(
            OperationResult(StatusCode.SUCCESS, ("x",)), title="Search Results:", marker="* "
        )

        assert "* x\n" in capsys.readouterr().out

    def test_markup_in_paths_is_printed_literally(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Square brackets in file names are not treated as Rich markup."""
        print_result(OperationResult(StatusCode.SUCCESS, ("[bold]x",)), title="Results:")

        assert "- [bold]x" in capsys.readouterr().out

    def test_no_paths_without_title(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a title only the status message is printed."""
        print_result(OperationResult(StatusCode.SUCCESS, ("t/a.txt",)))

        out = capsys.readouterr().out
        assert "Operation successful." in out
        assert "t/a.txt" not in out

    def test_no_listing_on_no_matches(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The result header is not printed when nothing matched."""
        print_result(OperationResult(StatusCode.NO_MATCHES), title="Search Results:")

        out = capsys.readouterr().out
        assert "No files found matching the criteria." in out
        assert "Search Results:" not in out
