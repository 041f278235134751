"""Context listing and file payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    path: str
    size: int
    modified_at: float
    is_directory: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "size": self.size,
            "modifiedAt": self.modified_at,
            "isDirectory": self.is_directory,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DirectoryEntry:
        return cls(
            name=raw["name"],
            path=raw["path"],
            size=int(raw.get("size", 0)),
            modified_at=float(raw.get("modifiedAt", 0)),
            is_directory=bool(raw.get("isDirectory", False)),
        )


@dataclass(frozen=True)
class ContextListing:
    path: str
    entries: list[DirectoryEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class FileContent:
    path: str
    content: str
    size: int
    modified_at: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "content": self.content,
            "size": self.size,
            "modifiedAt": self.modified_at,
        }
