"""Interactive REPL (Read-Eval-Print Loop) for tinysh.

The REPL is the thin I/O wrapper around the shell:

    1. **Read** — take the next line from standard input.
    2. **Eval** — pass it to ``shell.execute()``.
    3. **Print** — write stdout lines and stderr lines to their streams.
    4. **Loop** — repeat until ``exit`` or end of input.

The shell itself never touches a stream.  All three standard streams
are handed in through ``Streams``, so tests drive the loop with
``io.StringIO`` objects.

A failure while reading input (a broken pipe, undecodable bytes) is not
caught: it propagates out of ``run()`` and ends the process.
"""

import readline
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from tinysh.commands import CommandResult
from tinysh.completer import Completer
from tinysh.config import ConfigError, ShellConfig
from tinysh.shell import Shell

_EXIT_OK = 0
_EXIT_BAD_CONFIG = 2


@dataclass(frozen=True)
class Streams:
    """The three standard streams used by the loop."""

    stdin: TextIO
    stdout: TextIO
    stderr: TextIO

    @classmethod
    def system(cls) -> "Streams":
        """Return the process's real standard streams."""
        return cls(stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr)


def read_lines(streams: Streams, *, prompt: str = "", interactive: bool = False) -> Iterator[str]:
    """Yield input lines one at a time until end of input.

    In interactive mode lines come from ``input()`` so readline editing
    and completion work; otherwise they are read from ``streams.stdin``.
    """
    if not interactive:
        yield from streams.stdin
        return

    while True:
        try:
            yield input(prompt)
        except EOFError:
            # Ctrl+D
            return


def write_result(result: CommandResult, streams: Streams) -> None:
    """Write a command's output lines to the matching streams."""
    for line in result.stdout:
        print(line, file=streams.stdout)  # noqa: T201
    for line in result.stderr:
        print(line, file=streams.stderr)  # noqa: T201


def run(
    streams: Streams | None = None,
    *,
    shell: Shell | None = None,
    config: ShellConfig | None = None,
    interactive: bool = False,
) -> int:
    """Run the read-eval-print loop until ``exit`` or end of input.

    Args:
        streams: Where to read and write (the real streams by default).
        shell: The shell to drive (a fresh one by default).
        config: Session settings (defaults if omitted).
        interactive: Read through ``input()`` instead of the stream.
            ``input()`` always uses the process's own stdin and stdout,
            so only pass True together with ``Streams.system()``.

    Returns:
        The process exit status (always 0 when the loop ends normally).

    """
    streams = streams if streams is not None else Streams.system()
    shell = shell if shell is not None else Shell()
    config = config if config is not None else ShellConfig()

    for line in read_lines(streams, prompt=config.prompt, interactive=interactive):
        mark = len(shell.logger)
        result = shell.execute(line)
        write_result(result, streams)

        if config.trace_level is not None:
            for entry in shell.logger.filter(min_level=config.trace_level, since=mark):
                print(entry, file=streams.stderr)  # noqa: T201

        if result.should_stop:
            break

    streams.stdout.flush()
    return _EXIT_OK


def main() -> int:
    """Start an interactive session on the real standard streams.

    This is the ``tinysh`` console entry point.
    """
    streams = Streams.system()
    try:
        config = ShellConfig.from_env()
    except ConfigError as e:
        print(f"tinysh: {e}", file=streams.stderr)  # noqa: T201
        return _EXIT_BAD_CONFIG

    shell = Shell()
    interactive = streams.stdin.isatty()
    if interactive:
        # Wire up tab completion via readline.
        completer = Completer(shell)
        readline.set_completer(completer.complete)
        readline.set_completer_delims(" \t")
        readline.parse_and_bind("tab: complete")

    return run(streams, shell=shell, config=config, interactive=interactive)


if __name__ == "__main__":
    sys.exit(main())
