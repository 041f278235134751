from __future__ import annotations

import pytest

from ctxview.client.browser import NOT_CONNECTED, ContextBrowser, ContextBrowserState
from ctxview.utils.format import format_file_size


@pytest.fixture
def populated(workspace):
    (workspace / "AGENTS.md").write_text("# Agents")
    (workspace / "memory").mkdir()
    (workspace / "memory" / "2024").mkdir()
    (workspace / "memory" / "today.md").write_text("today")
    return workspace


@pytest.mark.asyncio
async def test_load_and_navigate(gateway, populated) -> None:
    browser = ContextBrowser(gateway)

    await browser.load_files()
    assert browser.state.workspace_path == str(populated)
    assert [entry.name for entry in browser.state.entries] == ["memory", "AGENTS.md"]
    assert browser.is_root

    await browser.open(browser.state.entries[0])
    assert browser.state.current_path == "memory"
    assert [entry.name for entry in browser.state.entries] == ["2024", "today.md"]
    assert browser.breadcrumbs() == [("workspace", ""), ("memory", "memory")]

    await browser.open(browser.state.entries[1])
    assert browser.state.selected_file == "memory/today.md"
    assert browser.state.file_content == "today"
    assert not browser.state.file_loading

    await browser.back()
    assert browser.state.current_path == ""
    assert browser.state.selected_file is None
    assert browser.state.file_content is None


@pytest.mark.asyncio
async def test_errors_are_recorded(gateway, populated) -> None:
    browser = ContextBrowser(gateway)

    await browser.navigate("AGENTS.md")
    assert browser.state.entries == []
    assert browser.state.error == "INVALID_REQUEST: path is not a directory"
    assert not browser.state.loading

    await browser.load_file("memory")
    assert browser.state.file_content is None
    assert browser.state.error == "INVALID_REQUEST: path is a directory"


@pytest.mark.asyncio
async def test_empty_selection_clears_content(gateway) -> None:
    state = ContextBrowserState(file_content="stale")
    browser = ContextBrowser(gateway, state)
    await browser.load_file("")
    assert state.selected_file == ""
    assert state.file_content is None


@pytest.mark.asyncio
async def test_disconnected_browser_does_not_request() -> None:
    browser = ContextBrowser(None)
    await browser.load_files()
    assert browser.state.error == NOT_CONNECTED

    offline = ContextBrowser(object(), ContextBrowserState(connected=False))  # type: ignore[arg-type]
    await offline.load_file("AGENTS.md")
    assert offline.state.error == NOT_CONNECTED
    assert offline.state.selected_file is None


def test_breadcrumbs_ignore_empty_segments() -> None:
    browser = ContextBrowser(None, ContextBrowserState(current_path="a//b/"))
    assert browser.breadcrumbs() == [("workspace", ""), ("a", "a"), ("b", "a/b")]


@pytest.mark.parametrize(
    ("size", "expected"),
    [(0, "0 B"), (1023, "1023 B"), (1024, "1.0 KB"), (1536, "1.5 KB"), (1024 * 1024, "1.0 MB")],
)
def test_format_file_size(size, expected) -> None:
    assert format_file_size(size) == expected
