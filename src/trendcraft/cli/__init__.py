"""Command-line interface for TrendCraft."""

from .app import app, main

__all__ = ["app", "main"]
