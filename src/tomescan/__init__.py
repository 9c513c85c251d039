"""Filename metadata extraction and chapter ordering for digital libraries."""

__version__ = "0.1.0"
