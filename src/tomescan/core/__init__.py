"""Parsing engine: path normalization, extractors, strategies and ordering."""
