"""Algorithms, design patterns, framing, a WSGI service and random word files."""

__version__ = "0.1.0"