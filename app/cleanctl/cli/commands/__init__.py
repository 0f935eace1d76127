"""CLI commands for cleanctl.

This package contains all subcommand implementations.
"""

from cleanctl.cli.commands import clean, profile

__all__ = ["clean", "profile"]
