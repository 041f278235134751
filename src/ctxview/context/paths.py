"""Workspace path containment checks."""

from __future__ import annotations

import os
from pathlib import Path


def is_path_safe(base_path: str | os.PathLike[str], requested_path: str) -> bool:
    """Return True when ``requested_path`` stays inside ``base_path``.

    The check is lexical: ``.`` and ``..`` segments are collapsed but
    symlinks are not followed. An absolute ``requested_path`` replaces the
    base, so it is only accepted when it happens to point inside it.
    """
    if not isinstance(requested_path, str) or "\x00" in requested_path:
        return False
    try:
        base = os.path.abspath(os.fspath(base_path))
        resolved = os.path.normpath(os.path.join(base, requested_path))
        relative = os.path.relpath(resolved, base)
    except (TypeError, ValueError):
        return False
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return False
    return not os.path.isabs(relative)


def resolve_target(base_path: Path, requested_path: str) -> Path:
    return Path(os.path.normpath(os.path.join(base_path, requested_path)))


def is_real_path_contained(base_path: Path, target: Path) -> bool:
    """Re-check containment after following symlinks on both sides."""
    return is_path_safe(os.path.realpath(base_path), os.path.realpath(target))


def entry_relative_path(base_path: Path, target: Path, name: str) -> str:
    """Path of a listed child relative to the workspace root."""
    return os.path.relpath(os.path.join(target, name), base_path)
