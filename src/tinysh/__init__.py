"""tinysh — a minimal interactive shell with ``echo``, ``ls`` and ``exit``.

Re-exports the pieces most callers need::

    from tinysh import Shell, Streams, run
"""

from tinysh.commands import Command, CommandResult, Invocation, Status
from tinysh.config import ShellConfig
from tinysh.repl import Streams, run
from tinysh.shell import Shell

__all__ = [
    "Command",
    "CommandResult",
    "Invocation",
    "Shell",
    "ShellConfig",
    "Status",
    "Streams",
    "run",
]

__version__ = "0.1.0"
