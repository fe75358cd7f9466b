"""
Command line interface for exprguard.

- main: click commands (check-resource, check-operation)
- console: rich output helpers
- logging_setup: console + file logging
"""

from exprguard.cli.main import cli, main

__all__ = ["cli", "main"]
