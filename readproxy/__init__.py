"""Readability proxy: fetch a page, return its readable article as JSON."""

__version__ = "1.0.0"
