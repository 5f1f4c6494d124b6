"""Prepare texts and media for several content platforms: markup conversion, per-platform files, queued posts and history."""

__version__ = "0.1.0"