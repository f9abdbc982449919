"""Tab completer for the interactive shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

The ``complete(text, state)`` method is the readline callback.  It
delegates to ``completions(text, line)`` which looks at the input line
and returns a list of candidate strings:

- The first word completes to command names.
- Arguments of ``ls`` complete to filesystem paths.
"""

from __future__ import annotations

import os
import readline
from typing import TYPE_CHECKING

from tinysh.commands import Command

if TYPE_CHECKING:
    from tinysh.shell import Shell

# Commands whose argument is a filesystem path.
_PATH_COMMANDS: frozenset[str] = frozenset([Command.LS.value])


class Completer:
    """Context-aware tab completer for the shell."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to a shell instance.

        Args:
            shell: The shell whose command names are offered.

        """
        self._shell = shell

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*.

        Args:
            text: The partial word being completed.
            state: Index into the candidate list (0, 1, 2, …).

        Returns:
            The candidate at *state*, or ``None`` when exhausted.

        """
        line = readline.get_line_buffer()
        candidates = self.completions(text, line)
        if state < len(candidates):
            return candidates[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return completion candidates based on context.

        Args:
            text: The partial word under the cursor.
            line: The full input line so far.

        Returns:
            Sorted list of matching candidates.

        """
        words = line.lstrip().split()

        # No words yet, or still typing the first word → command completion
        if not words or (len(words) == 1 and not line.endswith(" ")):
            return self._complete_commands(text)

        if words[0] in _PATH_COMMANDS and not text.startswith("-"):
            return self._complete_paths(text)

        return []

    # -- private completers ------------------------------------------------

    def _complete_commands(self, text: str) -> list[str]:
        """Complete command names from the shell's dispatch table."""
        return [cmd for cmd in self._shell.command_names if cmd.startswith(text)]

    @staticmethod
    def _complete_paths(text: str) -> list[str]:
        """Complete filesystem paths.

        Split the partial path into a directory and a name prefix, list
        the directory, and filter by prefix.  Directories get a trailing
        ``/`` suffix.
        """
        last_slash = text.rfind("/")
        directory = text[: last_slash + 1]
        prefix = text[last_slash + 1 :]

        try:
            names = os.listdir(directory or ".")
        except OSError:
            return []

        candidates: list[str] = []
        for name in names:
            if name.startswith(prefix):
                full = directory + name
                if os.path.isdir(full):
                    full += "/"
                candidates.append(full)

        return sorted(candidates)
