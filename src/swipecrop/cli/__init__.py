"""Command-line interface for swipecrop.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Gesture files in JSON, display size and fit policy on the command line
- Verbose/quiet output modes
- Optional OCR of the crop
- Detailed error reporting
"""

from swipecrop.cli.app import cli, main

__all__ = ["cli", "main"]
