"""Command-line interface for calligraglyph.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Options mirroring every converter setting
- Verbose/quiet output modes
- Warnings for recoverable input problems
- Full schema violation reports
"""

from calligraglyph.cli.app import cli, main

__all__ = ["cli", "main"]
