"""Tests for tokenizing, resolving, and command results.

A line is split on single spaces (``scan``), then split into a command
name and arguments (``parse``).  The name resolves against the closed
``Command`` enum.
"""

from tinysh.commands import Command, CommandResult, Invocation, Status, parse, scan


class TestScan:
    """Verify space tokenization."""

    def test_splits_on_spaces(self) -> None:
        """Words separated by one space become separate tokens."""
        assert scan("ls -l /tmp") == ["ls", "-l", "/tmp"]

    def test_consecutive_spaces_give_empty_tokens(self) -> None:
        """Each extra space produces an empty token."""
        assert scan("echo a   b") == ["echo", "a", "", "", "b"]

    def test_empty_line_is_one_empty_token(self) -> None:
        """An empty line still yields a single (empty) token."""
        assert scan("") == [""]

    def test_tabs_are_not_separators(self) -> None:
        """Only the space character splits tokens."""
        assert scan("echo\thi") == ["echo\thi"]

    def test_matches_manual_split(self) -> None:
        """Scan then parse should agree with splitting by hand."""
        line = "echo one two  three"
        invocation = parse(scan(line))
        assert invocation is not None
        parts = line.split(" ")
        assert invocation.name == parts[0]
        assert invocation.args == parts[1:]


class TestParse:
    """Verify separation of command name and arguments."""

    def test_no_tokens(self) -> None:
        """No tokens means no command."""
        assert parse([]) is None

    def test_name_only(self) -> None:
        """A single token is a command with no arguments."""
        assert parse(["exit"]) == Invocation(name="exit", args=[])

    def test_name_and_args(self) -> None:
        """Remaining tokens keep their order."""
        assert parse(["ls", "-l", "/tmp"]) == Invocation(name="ls", args=["-l", "/tmp"])


class TestCommandResolve:
    """Verify resolution against the closed command set."""

    def test_known_commands(self) -> None:
        """Every built-in resolves to its enum member."""
        assert Command.resolve("echo") is Command.ECHO
        assert Command.resolve("ls") is Command.LS
        assert Command.resolve("exit") is Command.EXIT

    def test_unknown_command(self) -> None:
        """Unknown names resolve to None."""
        assert Command.resolve("foo") is None

    def test_resolution_is_case_sensitive(self) -> None:
        """Command names are matched exactly."""
        assert Command.resolve("LS") is None


class TestCommandResult:
    """Verify the command result value."""

    def test_defaults_continue(self) -> None:
        """A fresh result is empty and keeps the shell running."""
        result = CommandResult()
        assert result.stdout == []
        assert result.stderr == []
        assert result.status is Status.CONTINUE
        assert not result.should_stop

    def test_stop(self) -> None:
        """A STOP status asks the shell to terminate."""
        assert CommandResult(status=Status.STOP).should_stop

    def test_error(self) -> None:
        """error() carries one diagnostic line."""
        result = CommandResult.error("boom")
        assert result.stderr == ["boom"]
        assert result.stdout == []
