"""
Live reload support.

This module provides the reloader interface and its watchexec implementation.
"""

from .base import Reloader
from .watchexec import WatchexecReloader

__all__ = [
    "Reloader",
    "WatchexecReloader",
]
