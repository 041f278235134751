"""Visibility and readability rules for workspace entries."""

from __future__ import annotations

import os

EXCLUDED_NAMES = frozenset(
    {
        ".git",
        ".DS_Store",
        "node_modules",
        ".env",
        ".env.local",
        ".secrets",
    }
)

ALLOWED_DOTFILES = frozenset({".env.example", ".gitignore", ".editorconfig"})

# An empty string admits files without an extension.
ALLOWED_EXTENSIONS = frozenset(
    {
        ".md",
        ".txt",
        ".json",
        ".yaml",
        ".yml",
        ".toml",
        ".js",
        ".ts",
        ".py",
        ".sh",
        ".bash",
        ".zsh",
        ".fish",
        ".conf",
        ".ini",
        ".cfg",
        ".log",
        ".csv",
        "",
    }
)

MAX_FILE_SIZE = 1024 * 1024


def should_include_entry(name: str) -> bool:
    if name in EXCLUDED_NAMES:
        return False
    if name.startswith(".") and name != ".":
        return name in ALLOWED_DOTFILES
    return True


def can_read_file(file_path: str | os.PathLike[str]) -> bool:
    _, ext = os.path.splitext(os.fspath(file_path))
    return ext.lower() in ALLOWED_EXTENSIONS


def within_size_limit(size: int) -> bool:
    return size <= MAX_FILE_SIZE
