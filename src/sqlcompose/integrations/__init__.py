"""Bridges from sqlcompose fragments to other SQL toolkits."""

from .sqla import to_text

__all__ = ["to_text"]
