"""
pathlocker - declare named filesystem paths once, resolve them together.

Paths are registered up front (some must already exist, some are created on
demand) and may embed ``${name}`` placeholders filled from caller-supplied
variables or from paths resolved earlier in declaration order.
"""

from pathlocker.core.exceptions import (
    ConfigError,
    DuplicateKeyError,
    InvalidDeclarationError,
    InvalidVariableError,
    PathCreationError,
    PathLockerError,
    PathNotFoundError,
    UnresolvedPlaceholderError,
    VariableKeyCollisionError,
)
from pathlocker.core.io import FileSystem, LocalFileSystem
from pathlocker.core.locker import PathKind, PathLocker, PathSpec

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "PathLocker",
    "PathKind",
    "PathSpec",
    "FileSystem",
    "LocalFileSystem",
    "PathLockerError",
    "DuplicateKeyError",
    "InvalidDeclarationError",
    "VariableKeyCollisionError",
    "InvalidVariableError",
    "PathNotFoundError",
    "PathCreationError",
    "UnresolvedPlaceholderError",
    "ConfigError",
]
