"""The shell — command interpreter for tinysh.

The shell reads one command line, splits it into a command name and
arguments, dispatches to the matching handler, and returns a
``CommandResult``.

Design choices:
    - **Returns results, not prints.**  Handlers hand back stdout and
      stderr lines; the REPL (or the web front end) decides where they
      go.  This keeps the shell fully testable.
    - **Closed command set.**  Names resolve to a ``Command`` member
      first, then to a handler through a dict keyed by that member.  The
      constructor refuses to build a shell with a member left unhandled.
    - **Every command is audited.**  Dispatches and diagnostics are
      recorded in the shell's ``Logger``.
"""

from collections.abc import Callable

from tinysh import ls
from tinysh.commands import Command, CommandResult, Status, parse, scan
from tinysh.logging import Logger, LogLevel

# Type alias for a command handler: takes a list of args, returns a result.
_Handler = Callable[[list[str]], CommandResult]

FAREWELL = "Goodbye!"


class Shell:
    """Command interpreter for the built-in commands."""

    def __init__(self, *, logger: Logger | None = None) -> None:
        """Create a shell.

        Args:
            logger: Audit log to record into (a fresh one by default).

        Raises:
            RuntimeError: If a command has no handler.

        """
        self._logger = logger if logger is not None else Logger()

        # Command dispatch table — maps each command to its handler.
        self._commands: dict[Command, _Handler] = {
            Command.ECHO: self._cmd_echo,
            Command.LS: ls.execute,
            Command.EXIT: self._cmd_exit,
        }
        missing = set(Command) - self._commands.keys()
        if missing:
            names = ", ".join(sorted(missing))
            msg = f"No handler for command(s): {names}"
            raise RuntimeError(msg)

    @property
    def logger(self) -> Logger:
        """Return the shell's audit log."""
        return self._logger

    @property
    def command_names(self) -> list[str]:
        """Return the names of all built-in commands, sorted."""
        return sorted(command.value for command in self._commands)

    def execute(self, line: str) -> CommandResult:
        """Parse and execute one command line.

        Args:
            line: The raw line, with or without surrounding whitespace.

        Returns:
            The command's output.  A blank line yields an empty result.

        """
        invocation = parse(scan(line.strip()))
        if invocation is None or not invocation.name:
            return CommandResult()

        command = Command.resolve(invocation.name)
        if command is None:
            result = CommandResult.error(f"command not found : {invocation.name}")
            self._audit("shell", result)
            return result

        self._logger.log(
            LogLevel.DEBUG,
            f"{command} {invocation.args}",
            source=command.value,
        )
        result = self._commands[command](invocation.args)
        self._audit(command.value, result)
        return result

    def _audit(self, source: str, result: CommandResult) -> None:
        """Record a command's diagnostics and any shutdown in the log."""
        for line in result.stderr:
            self._logger.log(LogLevel.WARNING, line, source=source)
        if result.should_stop:
            self._logger.log(LogLevel.INFO, "Shell stopped", source=source)

    # -- Built-in commands ---------------------------------------------------

    def _cmd_echo(self, args: list[str]) -> CommandResult:
        """Print the arguments joined by single spaces."""
        return CommandResult(stdout=[" ".join(args).strip()])

    def _cmd_exit(self, _args: list[str]) -> CommandResult:
        """Say goodbye and signal the REPL to stop."""
        return CommandResult(stdout=[FAREWELL], status=Status.STOP)
