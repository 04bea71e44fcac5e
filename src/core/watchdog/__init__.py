"""Idle-timeout tracking for shell screens."""

from .idle import IdleWatchdog

__all__ = ["IdleWatchdog"]
