"""Command-line interface for guidance_toolkit.

This module provides the CLI using Typer with rich output for
inspecting individual heuristic decisions.

Key features:
- One command per heuristic (announce, fork, mirror, roundabout, trim-lanes, sample)
- Rule-level explanation of suppressed name changes
- Optional structured decision logging
"""

from guidance_toolkit.cli.app import cli, main

__all__ = ["cli", "main"]
