"""Tests for the pathlocker exception hierarchy."""
from __future__ import annotations

import json

import pytest

from pathlocker import (
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


@pytest.mark.parametrize(
    "error, builtin",
    [
        (DuplicateKeyError("root"), ValueError),
        (InvalidDeclarationError("bad", key="root"), ValueError),
        (VariableKeyCollisionError(["root"]), ValueError),
        (InvalidVariableError("x", None), TypeError),
        (PathNotFoundError("cfg", "/missing"), FileNotFoundError),
        (PathCreationError("logs", "/ro/logs", "read-only"), OSError),
        (UnresolvedPlaceholderError("name"), RuntimeError),
        (ConfigError("broken", source="paths.yaml"), ValueError),
    ],
)
def test_errors_share_base_and_builtin(error, builtin) -> None:
    assert isinstance(error, PathLockerError)
    assert isinstance(error, builtin)


def test_to_json_error_payload_is_serializable() -> None:
    err = PathCreationError("logs", "/ro/logs", "read-only file system")
    payload = err.to_json_error()

    assert payload["code"] == "PathCreationError"
    assert payload["context"] == {
        "key": "logs",
        "path": "/ro/logs",
        "reason": "read-only file system",
    }
    assert "read-only file system" in payload["message"]
    json.dumps(payload)


def test_messages_name_key_and_path() -> None:
    err = PathNotFoundError("cfg", "/nonexistent/.cfgdir")
    assert str(err) == "Required path 'cfg' does not exist: /nonexistent/.cfgdir"


def test_invalid_variable_context_names_type() -> None:
    err = InvalidVariableError("port", [8080])
    assert err.context == {"name": "port", "type": "list"}
