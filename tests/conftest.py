import os
import sys
from pathlib import Path
from typing import List, Set, Tuple

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'pathlocker'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


class RecordingFileSystem:
    """In-memory filesystem that records every call made by the locker."""

    def __init__(self, existing=(), failing=()) -> None:
        self.existing: Set[str] = {os.path.abspath(p) for p in existing}
        self.failing: Set[str] = {os.path.abspath(p) for p in failing}
        self.calls: List[Tuple[str, str]] = []

    def path_exists(self, path) -> bool:
        self.calls.append(("exists", str(path)))
        return str(path) in self.existing

    def ensure_directory(self, path) -> bool:
        self.calls.append(("ensure", str(path)))
        if str(path) in self.failing:
            raise PermissionError(f"Permission denied: {path}")
        if str(path) in self.existing:
            return False
        self.existing.add(str(path))
        return True

    @property
    def created(self) -> List[str]:
        return [p for op, p in self.calls if op == "ensure"]


@pytest.fixture
def fake_fs() -> RecordingFileSystem:
    return RecordingFileSystem()

