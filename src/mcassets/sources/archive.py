"""
Archive handles: read-only views over jar/zip files and unpacked packs.

A handle only has to read a file by path, list entries under a prefix and
close. Blocking file-system work runs in a worker thread so the event loop
stays free while an archive is read.
"""

import asyncio
import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, runtime_checkable


@dataclass(frozen=True)
class ArchiveEntry:
    """A single entry of an archive, named by its full path."""

    name: str


@runtime_checkable
class ArchiveHandle(Protocol):
    """Interface every archive source has to provide."""

    async def read(self, path: str) -> bytes:
        """Return the bytes stored at ``path``; raise if it is missing."""
        ...

    async def entries(self, prefix: str) -> List[ArchiveEntry]:
        """Return every file entry whose path starts with ``prefix``."""
        ...

    async def close(self) -> None:
        ...


class ZipArchive:
    """Archive handle backed by a jar or zip file."""

    def __init__(self, path: str | Path):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.path = Path(path)
        self._zip = zipfile.ZipFile(self.path, "r")
        self.logger.debug(f"Opened zip archive {self.path}")

    async def read(self, path: str) -> bytes:
        # ZipFile.read raises KeyError for missing members
        return await asyncio.to_thread(self._zip.read, path)

    async def entries(self, prefix: str) -> List[ArchiveEntry]:
        return [
            ArchiveEntry(info.filename)
            for info in self._zip.infolist()
            if info.filename.startswith(prefix) and not info.is_dir()
        ]

    async def close(self) -> None:
        self._zip.close()
        self.logger.debug(f"Closed zip archive {self.path}")

    def __repr__(self) -> str:
        return f"ZipArchive({str(self.path)!r})"


class DirectoryArchive:
    """Archive handle backed by an unpacked resource pack directory."""

    def __init__(self, root: str | Path):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.root = Path(root)
        if not self.root.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.root}")

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if self.root.resolve() not in target.parents:
            raise FileNotFoundError(f"Path escapes archive root: {path}")
        return target

    async def read(self, path: str) -> bytes:
        return await asyncio.to_thread(self._resolve(path).read_bytes)

    def _scan(self, prefix: str) -> List[ArchiveEntry]:
        # Narrow the walk to the deepest directory named by the prefix
        base = self.root / prefix.rsplit("/", 1)[0] if "/" in prefix else self.root
        if not base.is_dir():
            return []
        result: List[ArchiveEntry] = []
        for file in sorted(base.rglob("*")):
            if not file.is_file():
                continue
            name = file.relative_to(self.root).as_posix()
            if name.startswith(prefix):
                result.append(ArchiveEntry(name))
        return result

    async def entries(self, prefix: str) -> List[ArchiveEntry]:
        return await asyncio.to_thread(self._scan, prefix)

    async def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"DirectoryArchive({str(self.root)!r})"


def open_archive(path: str | Path) -> ArchiveHandle:
    """Open a directory or a jar/zip file as an archive handle."""
    path = Path(path)
    if path.is_dir():
        return DirectoryArchive(path)
    return ZipArchive(path)
