"""Command vocabulary — tokenizing, resolving, and command results.

A line typed at the prompt goes through two tiny steps before anything
runs:

1. **scan** splits the line on single spaces.  Consecutive spaces give
   empty tokens; there is no quoting or escaping.
2. **parse** peels off the first token as the command name and keeps
   the rest as arguments.

The set of commands is closed: ``Command`` enumerates every built-in,
and a name that is not a member is simply "not found".  Handlers report
back with a ``CommandResult`` rather than printing, so the caller
decides where output goes.
"""

from dataclasses import dataclass, field
from enum import Enum, StrEnum


class Command(StrEnum):
    """Every built-in command the shell understands."""

    ECHO = "echo"
    LS = "ls"
    EXIT = "exit"

    @classmethod
    def resolve(cls, name: str) -> "Command | None":
        """Return the command called *name*, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None


class Status(Enum):
    """What the dispatch loop should do after a command."""

    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Invocation:
    """A command name and its arguments, parsed from one input line."""

    name: str
    args: list[str] = field(default_factory=list)


@dataclass
class CommandResult:
    """Output produced by one command.

    Attributes:
        stdout: Lines destined for standard output.
        stderr: Diagnostic lines destined for standard error.
        status: Whether the shell keeps running afterwards.

    """

    stdout: list[str] = field(default_factory=list)
    stderr: list[str] = field(default_factory=list)
    status: Status = Status.CONTINUE

    @property
    def should_stop(self) -> bool:
        """Return True if the shell should terminate."""
        return self.status is Status.STOP

    @classmethod
    def error(cls, message: str) -> "CommandResult":
        """Build a result carrying a single diagnostic line."""
        return cls(stderr=[message])


def scan(line: str) -> list[str]:
    """Split *line* into tokens on every single space character."""
    return line.split(" ")


def parse(tokens: list[str]) -> Invocation | None:
    """Split *tokens* into a command name and its arguments.

    Returns:
        The invocation, or None when there are no tokens at all.

    """
    if not tokens:
        return None
    return Invocation(name=tokens[0], args=tokens[1:])
