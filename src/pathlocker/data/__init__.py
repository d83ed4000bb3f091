"""
Bundled data files for pathlocker (JSON Schemas expressed as YAML).
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Example:
        >>> get_data_path("schemas", "config.schema.yaml")
        PosixPath('/path/to/pathlocker/data/schemas/config.schema.yaml')
    """
    pkg = resources.files("pathlocker.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


__all__ = ["get_data_path"]
