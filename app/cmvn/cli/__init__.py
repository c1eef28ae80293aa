"""CLI package for cmvn.

This package contains the Typer application.
"""

from cmvn.cli.main import app

__all__ = ["app"]
