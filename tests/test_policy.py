from __future__ import annotations

import pytest

from ctxview.core.policy import (
    MAX_FILE_SIZE,
    can_read_file,
    should_include_entry,
    within_size_limit,
)


@pytest.mark.parametrize(
    "name", [".git", ".DS_Store", "node_modules", ".env", ".env.local", ".secrets", ".cache"]
)
def test_noise_and_secret_entries_hidden(name) -> None:
    assert not should_include_entry(name)


@pytest.mark.parametrize(
    "name", [".env.example", ".gitignore", ".editorconfig", "AGENTS.md", "memory"]
)
def test_visible_entries(name) -> None:
    assert should_include_entry(name)


@pytest.mark.parametrize(
    "path",
    ["notes.md", "README.MD", "data.csv", "run.sh", "conf.yaml", "Makefile", "a/b/.gitignore"],
)
def test_text_files_readable(path) -> None:
    assert can_read_file(path)


@pytest.mark.parametrize("path", ["logo.png", "bundle.tar.gz", "app.exe", "key.pem", ".env.example"])
def test_binary_and_unknown_files_not_readable(path) -> None:
    assert not can_read_file(path)


def test_size_ceiling_is_inclusive() -> None:
    assert MAX_FILE_SIZE == 1024 * 1024
    assert within_size_limit(MAX_FILE_SIZE)
    assert not within_size_limit(MAX_FILE_SIZE + 1)
