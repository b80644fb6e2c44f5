"""Recruiting platform - consultant profiles over MySQL or MongoDB."""

__version__ = "1.0.0"
