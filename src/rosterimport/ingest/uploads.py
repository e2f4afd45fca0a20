"""Upload handles implementing IUploadedFile."""

from __future__ import annotations

from pathlib import Path


class InMemoryUpload:
    """Upload whose bytes are already in memory (request bodies, S3 objects)."""

    def __init__(self, name: str, data: bytes) -> None:
        self.name = name
        self._data = data

    def read(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"InMemoryUpload(name={self.name!r}, size={len(self._data)})"


class LocalUpload:
    """Upload backed by a file on disk. Read lazily."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self.name = self._path.name

    def read(self) -> bytes:
        return self._path.read_bytes()


def has_extension(name: str, extension: str) -> bool:
    """Case-sensitive suffix check, matching what the upload control accepts."""
    return name.endswith(extension)
