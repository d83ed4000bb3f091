"""Declared path registry and ordered resolution.

A :class:`PathLocker` holds an ordered list of path declarations. Each
declaration either names a path that must already exist (``add``) or a
directory that is created when missing (``create``). Segments may reference
``${name}`` placeholders, filled at resolution time from caller variables or
from any path resolved earlier in the same pass.

Resolution is a single pass in declaration order:

- a declaration whose placeholders cannot all be satisfied is skipped
  silently, and so is everything that depends on it;
- a required path that is missing aborts the pass with ``PathNotFoundError``;
- a directory that cannot be created aborts with ``PathCreationError``.

Nothing is rolled back on abort: directories created earlier in the pass stay.

Examples:
    >>> locker = PathLocker()
    >>> locker.create("root", "/tmp/app")
    >>> locker.create("logs", "${root}/logs")
    >>> locker.resolve({})
    {'root': '/tmp/app', 'logs': '/tmp/app/logs'}
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Set, Tuple, Union

from pathlocker.core.exceptions import (
    DuplicateKeyError,
    InvalidDeclarationError,
    InvalidVariableError,
    PathCreationError,
    PathNotFoundError,
    VariableKeyCollisionError,
)
from pathlocker.core.io import FileSystem, LocalFileSystem
from pathlocker.core.placeholders import collect_placeholders, substitute_placeholders

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float]


class PathKind(Enum):
    """Side effect applied to a resolved path."""

    REQUIRE_EXISTS = "require"  # validate only
    CREATE_IF_MISSING = "create"  # mkdir -p

    @classmethod
    def parse(cls, value: Union["PathKind", str]) -> "PathKind":
        """Accept a member or one of ``require``/``add``/``create``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            low = value.strip().lower()
            if low == "add":
                return cls.REQUIRE_EXISTS
            for member in cls:
                if member.value == low:
                    return member
        raise InvalidDeclarationError(f"Unknown path kind: {value!r}")


@dataclass(frozen=True)
class PathSpec:
    """One declared path template."""

    key: str
    kind: PathKind
    segments: Tuple[str, ...]
    placeholders: FrozenSet[str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "placeholders", collect_placeholders(*self.segments))

    def missing_from(self, *sources: Mapping[str, Any]) -> List[str]:
        """Placeholders with no value in any of ``sources``, sorted."""
        return sorted(
            name for name in self.placeholders
            if not any(name in source for source in sources)
        )


class PathLocker:
    """Ordered registry of path declarations with dependency-aware resolution.

    Declarations must all be registered before :meth:`resolve` is called; the
    registry is only read during resolution, so one locker may be resolved
    from several threads if its filesystem collaborator allows it.
    """

    def __init__(self, filesystem: Optional[FileSystem] = None) -> None:
        self.filesystem: FileSystem = LocalFileSystem() if filesystem is None else filesystem
        self._specs: List[PathSpec] = []
        self._keys: Set[str] = set()

    # ---- registration -------------------------------------------------

    def declare(self, key: str, kind: Union[PathKind, str], *segments: str) -> PathSpec:
        """Append a declaration. No filesystem access happens here.

        Raises:
            DuplicateKeyError: If ``key`` is already declared.
            InvalidDeclarationError: If the key, kind or segments are malformed.
        """
        if not isinstance(key, str) or not key:
            raise InvalidDeclarationError(f"Path key must be a non-empty string: {key!r}", key=key)
        path_kind = PathKind.parse(kind)
        if not segments:
            raise InvalidDeclarationError(f"Path {key!r} needs at least one segment", key=key)
        for segment in segments:
            if not isinstance(segment, str):
                raise InvalidDeclarationError(
                    f"Path {key!r} has a non-string segment: {segment!r}", key=key
                )
        if key in self._keys:
            raise DuplicateKeyError(key)

        spec = PathSpec(key=key, kind=path_kind, segments=tuple(segments))
        self._specs.append(spec)
        self._keys.add(key)
        logger.debug(
            "Declared %s path %r from %r (placeholders: %s)",
            path_kind.value, key, spec.segments, sorted(spec.placeholders),
        )
        return spec

    def add(self, key: str, *segments: str) -> None:
        """Declare a path that must already exist."""
        self.declare(key, PathKind.REQUIRE_EXISTS, *segments)

    def create(self, key: str, *segments: str) -> None:
        """Declare a directory that is created if missing."""
        self.declare(key, PathKind.CREATE_IF_MISSING, *segments)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(spec.key for spec in self._specs)

    @property
    def specs(self) -> Tuple[PathSpec, ...]:
        return tuple(self._specs)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._specs)

    # ---- resolution ---------------------------------------------------

    def resolve(self, variables: Optional[Mapping[str, Scalar]] = None) -> Dict[str, str]:
        """Resolve every declared path against ``variables``.

        Returns:
            Mapping of key to absolute path for each declaration that could be
            resolved. Declarations with unsatisfied placeholders are absent.

        Raises:
            VariableKeyCollisionError: If a variable name equals a declared key.
            InvalidVariableError: If a variable value is not a string or number.
            PathNotFoundError: If a required path does not exist.
            PathCreationError: If a directory could not be created.
        """
        variables = dict(variables or {})

        collisions = [name for name in variables if name in self._keys]
        if collisions:
            raise VariableKeyCollisionError(collisions)
        for name, value in variables.items():
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise InvalidVariableError(name, value)

        resolved: Dict[str, str] = {}
        for spec in self._specs:
            missing = spec.missing_from(variables, resolved)
            if missing:
                logger.debug("Skipping path %r: unresolved placeholders %s", spec.key, missing)
                continue

            final_path = self._assemble(spec, {**variables, **resolved})
            self._apply(spec, final_path)
            resolved[spec.key] = final_path
            logger.debug("Resolved path %r -> %s", spec.key, final_path)

        return resolved

    # Alias for callers using the older `get` spelling.
    get = resolve

    @staticmethod
    def _assemble(spec: PathSpec, lookup: Mapping[str, Any]) -> str:
        parts = [substitute_placeholders(segment, lookup) for segment in spec.segments]
        return os.path.abspath(os.path.join(*parts))

    def _apply(self, spec: PathSpec, path: str) -> None:
        if spec.kind is PathKind.REQUIRE_EXISTS:
            if not self.filesystem.path_exists(path):
                raise PathNotFoundError(spec.key, path)
            return

        try:
            created = self.filesystem.ensure_directory(path)
        except (OSError, ValueError) as exc:
            raise PathCreationError(spec.key, path, str(exc)) from exc
        if created:
            logger.info("Created directory for %r: %s", spec.key, path)


__all__ = ["PathKind", "PathSpec", "PathLocker"]
