"""Frecency-ranked directory suggestions for interactive shells."""

__version__ = "0.1.0"
