from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping


class PathLockerError(Exception):
    """Base exception for pathlocker."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class DuplicateKeyError(PathLockerError, ValueError):
    """Raised when a path key is declared twice on the same locker."""

    def __init__(self, key: str) -> None:
        message = f"Path key already declared: {key!r}"
        PathLockerError.__init__(self, message, context={"key": key})
        ValueError.__init__(self, message)
        self.key = key


class InvalidDeclarationError(PathLockerError, ValueError):
    """Raised when a path declaration is malformed."""

    def __init__(self, message: str, *, key: Any = None) -> None:
        PathLockerError.__init__(self, message, context={"key": key})
        ValueError.__init__(self, message)


class VariableKeyCollisionError(PathLockerError, ValueError):
    """Raised when a supplied variable shares its name with a declared path key."""

    def __init__(self, keys: Iterable[str]) -> None:
        names = sorted(keys)
        message = (
            f"Variables collide with declared path keys: {', '.join(names)}"
        )
        PathLockerError.__init__(self, message, context={"keys": names})
        ValueError.__init__(self, message)
        self.keys = names


class InvalidVariableError(PathLockerError, TypeError):
    """Raised when a variable value is not a string or number."""

    def __init__(self, name: str, value: Any) -> None:
        type_name = type(value).__name__
        message = f"Variable {name!r} must be a string or number, got {type_name}"
        PathLockerError.__init__(self, message, context={"name": name, "type": type_name})
        TypeError.__init__(self, message)


class PathNotFoundError(PathLockerError, FileNotFoundError):
    """Raised when a path declared as required does not exist."""

    def __init__(self, key: str, path: str) -> None:
        message = f"Required path {key!r} does not exist: {path}"
        PathLockerError.__init__(self, message, context={"key": key, "path": path})
        FileNotFoundError.__init__(self, message)
        self.key = key
        self.path = path


class PathCreationError(PathLockerError, OSError):
    """Raised when a directory declared for creation could not be created."""

    def __init__(self, key: str, path: str, reason: str = "") -> None:
        message = f"Could not create path {key!r}: {path}"
        if reason:
            message = f"{message} ({reason})"
        PathLockerError.__init__(
            self, message, context={"key": key, "path": path, "reason": reason}
        )
        OSError.__init__(self, message)
        self.key = key
        self.path = path


class UnresolvedPlaceholderError(PathLockerError, RuntimeError):
    """Raised when substitution meets a placeholder with no value."""

    def __init__(self, name: str) -> None:
        message = f"No value for placeholder '${{{name}}}'"
        PathLockerError.__init__(self, message, context={"name": name})
        RuntimeError.__init__(self, message)
        self.name = name


class ConfigError(PathLockerError, ValueError):
    """Raised when a declaration config cannot be loaded or fails validation."""

    def __init__(self, message: str, *, source: Any = None) -> None:
        PathLockerError.__init__(
            self, message, context={"source": None if source is None else str(source)}
        )
        ValueError.__init__(self, message)


__all__ = [
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
