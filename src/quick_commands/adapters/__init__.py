"""Collaborators for configuration storage and file access."""

from quick_commands.adapters.base import ConfigStore, FileStat, FileSystemOperations
from quick_commands.adapters.local import JsonConfigStore, LocalFileSystem

__all__ = [
    "ConfigStore",
    "FileStat",
    "FileSystemOperations",
    "JsonConfigStore",
    "LocalFileSystem",
]
