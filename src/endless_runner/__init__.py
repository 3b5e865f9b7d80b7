"""Endless Runner - tap-to-jump arcade game."""

__version__ = "0.1.0"
