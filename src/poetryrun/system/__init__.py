"""
Interaction with the application source tree.

This module reads the project descriptor to discover what the application
declares as runnable.
"""

from .pyproject import MetadataParser, PyProjectParser

__all__ = [
    "MetadataParser",
    "PyProjectParser",
]
