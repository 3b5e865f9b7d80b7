"""Utility modules for Endless Runner."""

from .share import ShareOutcome, ShareResult, ShareService

__all__ = ["ShareOutcome", "ShareResult", "ShareService"]
