"""Shared CLI infrastructure."""

from .console import console, print_error, print_warning

__all__ = ["console", "print_error", "print_warning"]
