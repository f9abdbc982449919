"""Shell configuration, read from environment variables.

The shell has only a handful of knobs, all optional::

    TINYSH_PROMPT     prompt shown when reading from a terminal ("")
    TINYSH_TRACE      log level name; echo audit entries at or above it
    TINYSH_WEB_PORT   port for the web front end (8080)

``ShellConfig.from_env`` takes any string mapping, so tests can pass a
plain dict instead of touching ``os.environ``.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tinysh.logging import LogLevel

PROMPT_VAR = "TINYSH_PROMPT"
TRACE_VAR = "TINYSH_TRACE"
WEB_PORT_VAR = "TINYSH_WEB_PORT"

DEFAULT_WEB_PORT = 8080


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class ShellConfig:
    """Immutable settings for one shell session.

    Attributes:
        prompt: Text shown before each line in interactive mode.
        trace_level: If set, audit log entries at or above this level
            are echoed to standard error after every command.
        web_port: Port the web front end listens on.

    """

    prompt: str = ""
    trace_level: LogLevel | None = None
    web_port: int = DEFAULT_WEB_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ShellConfig":
        """Build a config from *environ* (defaults to ``os.environ``).

        Raises:
            ConfigError: If ``TINYSH_TRACE`` is not a level name or
                ``TINYSH_WEB_PORT`` is not an integer.

        """
        env = os.environ if environ is None else environ

        trace_level: LogLevel | None = None
        trace = env.get(TRACE_VAR, "")
        if trace:
            try:
                trace_level = LogLevel.from_name(trace)
            except KeyError:
                msg = f"{TRACE_VAR}: unknown log level {trace!r}"
                raise ConfigError(msg) from None

        raw_port = env.get(WEB_PORT_VAR, "")
        web_port = DEFAULT_WEB_PORT
        if raw_port:
            try:
                web_port = int(raw_port)
            except ValueError:
                msg = f"{WEB_PORT_VAR}: expected an integer, got {raw_port!r}"
                raise ConfigError(msg) from None

        return cls(
            prompt=env.get(PROMPT_VAR, ""),
            trace_level=trace_level,
            web_port=web_port,
        )
