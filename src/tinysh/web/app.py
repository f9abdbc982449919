"""Flask application factory for the tinysh web API.

Each app owns a single ``Shell``.  Once a client sends ``exit`` the
shell is halted and every later request is answered with
``halted: true`` without running anything.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, request

from tinysh.config import ShellConfig
from tinysh.shell import Shell

_HTTP_BAD_REQUEST = 400


def create_app(config: ShellConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Session settings (read from the environment if omitted).

    Returns:
        A configured Flask application ready to serve.

    """
    config = config if config is not None else ShellConfig.from_env()
    shell = Shell()
    halted = False

    app = Flask(__name__)

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a command line and return its output as JSON.

        Expects JSON body: ``{"command": "..."}``

        Returns:
            JSON with ``stdout``, ``stderr`` and ``halted`` fields.

        """
        nonlocal halted
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST
        if not isinstance(data["command"], str):
            return jsonify({"error": "'command' must be a string"}), _HTTP_BAD_REQUEST

        if halted:
            return jsonify({"stdout": [], "stderr": [], "halted": True})

        command: str = data["command"]
        result = shell.execute(command)
        halted = result.should_stop
        return jsonify({"stdout": result.stdout, "stderr": result.stderr, "halted": halted})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return whether the shell still accepts commands."""
        return jsonify({"running": not halted})

    @app.route("/api/log")
    def log() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the audit log, oldest entry first."""
        return jsonify({"entries": [str(entry) for entry in shell.logger.entries]})

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``tinysh-web`` console entry point.
    """
    config = ShellConfig.from_env()
    app = create_app(config)
    app.run(debug=True, port=config.web_port)
