"""Arrowkit: pure higher-order function utilities."""

__version__ = "0.1.0"
