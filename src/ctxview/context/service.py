"""Read-only browsing of an agent workspace."""

from __future__ import annotations

import logging
import os
import stat
import unicodedata
from dataclasses import dataclass
from pathlib import Path

from ctxview.bus.schemas import ErrorCode
from ctxview.context.models import ContextListing, DirectoryEntry, FileContent
from ctxview.context.paths import (
    entry_relative_path,
    is_path_safe,
    is_real_path_contained,
    resolve_target,
)
from ctxview.core.agents import WorkspaceResolver
from ctxview.core.policy import (
    MAX_FILE_SIZE,
    can_read_file,
    should_include_entry,
    within_size_limit,
)
from ctxview.utils.time import now_ms

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ContextError(Exception):
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


def _invalid(message: str) -> ContextError:
    return ContextError(ErrorCode.INVALID_REQUEST, message)


class ContextService:
    """Lists and reads files under the resolved workspace root.

    Every call resolves the root and queries the filesystem again; nothing
    is cached between calls.
    """

    def __init__(self, resolver: WorkspaceResolver) -> None:
        self._resolver = resolver

    def list_entries(self, path: str | None = "") -> ContextListing:
        try:
            return self._list_entries(path or "")
        except (OSError, ValueError) as exc:
            raise ContextError(
                ErrorCode.UNAVAILABLE, f"failed to list context files: {exc}"
            ) from exc

    def read_file(self, path: str | None) -> FileContent:
        try:
            return self._read_file(path)
        except (OSError, ValueError) as exc:
            raise ContextError(
                ErrorCode.UNAVAILABLE, f"failed to read context file: {exc}"
            ) from exc

    def _resolve_root(self) -> tuple[Path | None, bool]:
        """Return the configured root and whether it exists on disk."""
        root = self._resolver.resolve().root
        return root, root is not None and root.exists()

    def _list_entries(self, requested_path: str) -> ContextListing:
        root, available = self._resolve_root()
        if root is None or not available:
            # A workspace that has not been created yet simply has nothing in it.
            return ContextListing(path=str(root) if root else "", entries=[])

        if not is_path_safe(root, requested_path):
            raise _invalid("invalid path")

        target = resolve_target(root, requested_path)
        if not target.exists():
            return ContextListing(path=str(root), entries=[])
        if not is_real_path_contained(root, target):
            logger.warning("Symlinked directory escapes workspace: %s", requested_path)
            raise _invalid("invalid path")
        if not target.is_dir():
            raise _invalid("path is not a directory")

        with os.scandir(target) as it:
            entries = [
                _describe_entry(entry, entry_relative_path(root, target, entry.name))
                for entry in it
                if should_include_entry(entry.name)
            ]
        entries.sort(key=_entry_sort_key)
        return ContextListing(path=str(root), entries=entries)

    def _read_file(self, requested_path: str | None) -> FileContent:
        if not requested_path:
            raise _invalid("path is required")
        root, available = self._resolve_root()
        if root is None or not available:
            raise _invalid("workspace not configured")
        if not is_path_safe(root, requested_path):
            raise _invalid("invalid path")

        target = resolve_target(root, requested_path)
        if not target.exists():
            raise _invalid("file not found")
        if not is_real_path_contained(root, target):
            logger.warning("Symlinked file escapes workspace: %s", requested_path)
            raise _invalid("invalid path")

        info = target.stat()
        if stat.S_ISDIR(info.st_mode):
            raise _invalid("path is a directory")
        if not can_read_file(target):
            raise _invalid("file type not supported for viewing")
        if not within_size_limit(info.st_size):
            raise _invalid(f"file too large (max {MAX_FILE_SIZE // (1024 * 1024)}MB)")

        content = target.read_bytes().decode("utf-8", errors="replace")
        return FileContent(
            path=requested_path,
            content=content,
            size=info.st_size,
            modified_at=_mtime_ms(info),
        )


def _describe_entry(entry: os.DirEntry[str], relative_path: str) -> DirectoryEntry:
    size = 0
    modified_at = now_ms()
    try:
        info = entry.stat()
    except OSError as exc:
        logger.debug("Could not stat %s: %s", entry.name, exc)
    else:
        size = info.st_size
        modified_at = _mtime_ms(info)
    return DirectoryEntry(
        name=entry.name,
        path=relative_path,
        size=size,
        modified_at=modified_at,
        is_directory=entry.is_dir(follow_symlinks=False),
    )


def _entry_sort_key(entry: DirectoryEntry) -> tuple[bool, str, str, str]:
    # Accent- and case-insensitive first, then lowercase ahead of uppercase.
    name = entry.name
    return (not entry.is_directory, _collation_key(name), name.casefold(), name.swapcase())


def _collation_key(name: str) -> str:
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _mtime_ms(info: os.stat_result) -> float:
    return info.st_mtime_ns / 1_000_000
