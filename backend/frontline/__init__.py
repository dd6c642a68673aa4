"""Frontline: round-based pooled-staking settlement engine."""

__version__ = "0.1.0"
__author__ = "Frontline Team"

__all__ = ["__version__", "__author__"]
