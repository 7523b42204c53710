"""Launchbase — go-to-market backend for connected MVP projects."""

__version__ = "0.1.0"
