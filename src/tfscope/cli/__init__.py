"""Command line interface for tfscope."""

from .main import main

__all__ = ["main"]
