"""Faleproxy: fetch a web page and rewrite "Yale" to "Fale" in its text."""

__version__ = "1.0.0"
