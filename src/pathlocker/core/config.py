"""
Declarative path configuration (YAML).

Declaration files are passed explicitly by the caller; nothing is read from
the environment or from default locations. Example document::

    variables:
      app: demo
    paths:
      - key: root
        kind: create
        path: /tmp/${app}
      - key: logs
        kind: create
        segments: ["${root}", "logs"]

When several files are given, their ``paths`` lists are concatenated in file
order and their ``variables`` are combined with later files winning. The
combined document is validated against the bundled JSON Schema before any
path is declared.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import jsonschema
import yaml

from pathlocker.core.exceptions import ConfigError
from pathlocker.core.io import FileSystem, PathLike, read_yaml
from pathlocker.core.locker import PathLocker, Scalar
from pathlocker.data import get_data_path

logger = logging.getLogger(__name__)

CONFIG_SCHEMA = "config.schema.yaml"


class ConfigManager:
    """Load and validate path declaration files."""

    def __init__(self, files: Union[PathLike, Sequence[PathLike]]) -> None:
        if isinstance(files, (str, Path)):
            files = [files]
        self.files: List[Path] = [Path(f) for f in files]

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: a declaration file must never be silently ignored.
        try:
            data = read_yaml(path)
        except FileNotFoundError as exc:
            raise ConfigError(f"Config file not found: {path}", source=path) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", source=path) from exc
        if not data:
            logger.warning("Config file %s is empty", path)
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                source=path,
            )
        return data

    def validate_schema(self, config: Dict[str, Any], source: Any = None) -> None:
        schema = read_yaml(get_data_path("schemas", CONFIG_SCHEMA))
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.ValidationError as exc:
            location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Config failed validation at {location}: {exc.message}",
                source=source,
            ) from exc

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Load and validate every file in order, then combine them."""
        variables: Dict[str, Any] = {}
        paths: List[Any] = []
        for path in self.files:
            data = self.load_yaml(path)
            if validate:
                self.validate_schema(data, source=path)
            variables.update(data.get("variables") or {})
            paths.extend(data.get("paths") or [])

        cfg: Dict[str, Any] = {}
        if variables:
            cfg["variables"] = variables
        if paths:
            cfg["paths"] = paths
        return cfg


def build_locker(
    config: Mapping[str, Any], filesystem: Optional[FileSystem] = None
) -> PathLocker:
    """Declare every entry of ``config["paths"]`` on a new locker, in order."""
    locker = PathLocker(filesystem=filesystem)
    for entry in config.get("paths") or []:
        segments = entry.get("segments") or [entry["path"]]
        locker.declare(entry["key"], entry["kind"], *segments)
    return locker


def resolve_config(
    files: Union[PathLike, Sequence[PathLike]],
    variables: Optional[Mapping[str, Scalar]] = None,
    *,
    filesystem: Optional[FileSystem] = None,
) -> Dict[str, str]:
    """Load declaration files and resolve them in one call.

    Variables from the config are defaults; ``variables`` passed here win.
    """
    cfg = ConfigManager(files).load_config()
    locker = build_locker(cfg, filesystem=filesystem)
    merged = {**(cfg.get("variables") or {}), **(variables or {})}
    return locker.resolve(merged)


__all__ = ["ConfigManager", "build_locker", "resolve_config", "CONFIG_SCHEMA"]
