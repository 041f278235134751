"""Client-side state for browsing workspace context files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from ctxview.context.models import DirectoryEntry

logger = logging.getLogger(__name__)

NOT_CONNECTED = "Not connected to gateway"


class GatewayClient(Protocol):
    async def request(
        self, method: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]: ...


@dataclass
class ContextBrowserState:
    connected: bool = True
    loading: bool = False
    error: str | None = None
    workspace_path: str | None = None
    current_path: str = ""
    entries: list[DirectoryEntry] = field(default_factory=list)
    selected_file: str | None = None
    file_content: str | None = None
    file_loading: bool = False


class ContextBrowser:
    """Tracks the browsed directory and selected file against a gateway."""

    def __init__(
        self, client: GatewayClient | None, state: ContextBrowserState | None = None
    ) -> None:
        self._client = client
        self.state = state or ContextBrowserState()

    @property
    def is_root(self) -> bool:
        return self.state.current_path in {"", "."}

    async def load_files(self) -> None:
        state = self.state
        if self._client is None or not state.connected:
            state.error = NOT_CONNECTED
            return
        state.loading = True
        state.error = None
        try:
            result = await self._client.request(
                "context.list", {"path": state.current_path or ""}
            )
            state.workspace_path = result.get("path")
            state.entries = [
                DirectoryEntry.from_dict(raw) for raw in result.get("entries") or []
            ]
        except Exception as exc:
            logger.debug("context.list failed: %s", exc)
            state.error = str(exc)
            state.entries = []
        finally:
            state.loading = False

    async def load_file(self, file_path: str) -> None:
        state = self.state
        if self._client is None or not state.connected:
            state.error = NOT_CONNECTED
            return
        state.selected_file = file_path
        if not file_path:
            state.file_content = None
            return
        state.file_loading = True
        state.error = None
        try:
            result = await self._client.request("context.read", {"path": file_path})
            state.file_content = result.get("content")
        except Exception as exc:
            logger.debug("context.read failed: %s", exc)
            state.error = str(exc)
            state.file_content = None
        finally:
            state.file_loading = False

    async def navigate(self, path: str) -> None:
        self.state.current_path = path
        self._clear_selection()
        await self.load_files()

    async def back(self) -> None:
        parts = [part for part in self.state.current_path.split("/") if part]
        if parts:
            parts.pop()
        await self.navigate("/".join(parts))

    async def open(self, entry: DirectoryEntry) -> None:
        if entry.is_directory:
            await self.navigate(entry.path)
        else:
            await self.load_file(entry.path)

    def breadcrumbs(self) -> list[tuple[str, str]]:
        """Return ``(label, path)`` pairs from the workspace root down."""
        segments = [part for part in self.state.current_path.split("/") if part]
        crumbs = [("workspace", "")]
        for index, segment in enumerate(segments):
            crumbs.append((segment, "/".join(segments[: index + 1])))
        return crumbs

    def _clear_selection(self) -> None:
        self.state.selected_file = None
        self.state.file_content = None
