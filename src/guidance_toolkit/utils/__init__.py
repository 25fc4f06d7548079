"""Utility functions for guidance_toolkit.

This module provides utility functions including:

- Logging setup and configuration
"""

from guidance_toolkit.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
