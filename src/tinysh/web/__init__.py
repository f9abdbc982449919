"""Browser-facing JSON API for tinysh.

This package provides a Flask application that drives one shell over
HTTP.  The ``create_app`` factory in ``app.py`` serves three endpoints:

- ``POST /api/execute`` — execute a command line and return its output.
- ``GET /api/status`` — whether the shell is still running.
- ``GET /api/log`` — the shell's audit log.
"""
