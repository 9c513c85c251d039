"""CLI entrypoints for tomescan."""

from tomescan.cli.scan import app as scan_app

__all__ = ["scan_app"]
