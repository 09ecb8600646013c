"""Command handlers for the gh-fetch CLI."""

from .base import BaseCommandHandler
from .file import FileHandler
from .release import ReleaseHandler
from .token import TokenHandler

__all__ = [
    "BaseCommandHandler",
    "FileHandler",
    "ReleaseHandler",
    "TokenHandler",
]
