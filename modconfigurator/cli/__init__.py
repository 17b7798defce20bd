"""Command-line interface for the module configurator."""

from .main import main

__all__ = ["main"]
