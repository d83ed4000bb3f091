"""Placeholder scanning and substitution for path templates.

A placeholder is written ``${name}``; whitespace around ``name`` is ignored,
so ``${ home }`` and ``${home}`` refer to the same variable. Substitution is a
literal token replacement. Nothing in a path template is ever evaluated.
"""

from __future__ import annotations

import re
from typing import Any, FrozenSet, List, Mapping

from pathlocker.core.exceptions import UnresolvedPlaceholderError

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")


def scan_placeholders(text: str) -> List[str]:
    """Return placeholder names in ``text`` in left-to-right order.

    Duplicates are kept; use :func:`collect_placeholders` for a set.

    Examples:
        >>> scan_placeholders("${root}/${ name }/${root}")
        ['root', 'name', 'root']
    """
    return [m.group(1).strip() for m in _PLACEHOLDER_RE.finditer(text)]


def collect_placeholders(*segments: str) -> FrozenSet[str]:
    """Return the distinct placeholder names referenced across ``segments``."""
    names: set[str] = set()
    for segment in segments:
        names.update(scan_placeholders(segment))
    return frozenset(names)


def substitute_placeholders(text: str, lookup: Mapping[str, Any]) -> str:
    """Replace every ``${name}`` in ``text`` with ``str(lookup[name])``.

    Raises:
        UnresolvedPlaceholderError: If a referenced name is missing from ``lookup``.
    """

    def repl(m: re.Match[str]) -> str:
        name = m.group(1).strip()
        if name not in lookup:
            raise UnresolvedPlaceholderError(name)
        return str(lookup[name])

    return _PLACEHOLDER_RE.sub(repl, text)


__all__ = [
    "scan_placeholders",
    "collect_placeholders",
    "substitute_placeholders",
]
