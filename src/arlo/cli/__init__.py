"""Command-line interface for arlo."""

from arlo.cli.app import app

__all__ = ["app"]
