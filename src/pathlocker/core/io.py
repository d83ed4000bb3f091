"""Filesystem access used by pathlocker.

The locker never touches the filesystem directly; it goes through a
:class:`FileSystem` collaborator so tests (and callers with unusual storage)
can substitute their own. :class:`LocalFileSystem` is the default.
"""
from __future__ import annotations

import fcntl
import os
from pathlib import Path
from typing import Any, Protocol, Union

import yaml


PathLike = Union[str, Path]


class FileSystem(Protocol):
    """Existence checks and directory creation consumed by the resolver."""

    def path_exists(self, path: PathLike) -> bool: ...

    def ensure_directory(self, path: PathLike) -> bool:
        """Create ``path`` and missing ancestors; True if it was created."""
        ...


def ensure_directory(path: PathLike) -> bool:
    """Ensure directory exists, creating it and missing ancestors if absent.

    Returns:
        bool: True if the directory was created, False if it already existed

    Raises:
        NotADirectoryError: If path exists but is not a directory
        OSError: If directory creation fails
    """
    path = Path(path)

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return False

    path.mkdir(parents=True, exist_ok=True)
    return True


class LocalFileSystem:
    """:class:`FileSystem` backed by the local operating system."""

    def path_exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def ensure_directory(self, path: PathLike) -> bool:
        return ensure_directory(path)


def read_yaml(path: PathLike) -> Any:
    """Read a YAML file under a shared lock.

    Returns:
        Any: Parsed YAML data (None for an empty document)

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the content is not valid YAML
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        data = yaml.safe_load(f)
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    return data


__all__ = [
    "PathLike",
    "FileSystem",
    "LocalFileSystem",
    "ensure_directory",
    "read_yaml",
]
