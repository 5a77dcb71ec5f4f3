"""Command line interface for create-lcs."""

from .commands import main

__all__ = ["main"]
