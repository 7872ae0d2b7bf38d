"""Breakout - a minimal arcade brick breaker built on pygame."""

__version__ = "1.0.0"
