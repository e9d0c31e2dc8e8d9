"""
Multi-archive lookup with fallback ordering.

Asset packs are often split across a primary content archive and several
dependency packs. SourceSet hides that split: callers read a path and get
the first hit, trying the primary archive first and then every registered
archive in registration order.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from .archive import ArchiveEntry, ArchiveHandle, open_archive


class SourceSet:
    """Primary archive plus auxiliary archives keyed by an external id."""

    def __init__(self, primary: ArchiveHandle | str | Path):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.primary: ArchiveHandle = (
            open_archive(primary) if isinstance(primary, (str, Path)) else primary
        )
        self._sources: Dict[str, ArchiveHandle] = {}

    def register_source(self, key: str, source: ArchiveHandle | str | Path) -> None:
        """Register an auxiliary archive under ``key``.

        Paths are opened first. Reusing a key silently replaces the archive
        stored under it; the key keeps its place in the lookup order.
        """
        handle = open_archive(source) if isinstance(source, (str, Path)) else source
        if key in self._sources:
            self.logger.debug(f"Replacing source '{key}'")
        self._sources[key] = handle
        self.logger.info(f"Registered source '{key}': {handle!r}")

    @property
    def keys(self) -> List[str]:
        """Registered auxiliary keys in lookup order."""
        return list(self._sources)

    def __contains__(self, key: object) -> bool:
        return key in self._sources

    def _handles(self) -> Iterator[Tuple[str, ArchiveHandle]]:
        yield "<primary>", self.primary
        yield from self._sources.items()

    async def read_file(self, path: str) -> Optional[bytes]:
        """Return the bytes at ``path`` from the first source holding them.

        Per-source failures are expected (most packs miss most paths) and
        are not reported; None means every source missed.
        """
        for key, handle in self._handles():
            try:
                data = await handle.read(path)
            except Exception as e:
                self.logger.debug(f"{path} not in '{key}': {e!r}")
                continue
            if data:
                return data
        return None

    async def list_entries(self, prefix: str) -> List[ArchiveEntry]:
        """Return the first non-empty listing of entries under ``prefix``."""
        for key, handle in self._handles():
            try:
                entries = await handle.entries(prefix)
            except Exception as e:
                self.logger.debug(f"Listing {prefix} failed in '{key}': {e!r}")
                continue
            if entries:
                return list(entries)
        return []

    async def close(self) -> None:
        """Close the primary archive.

        Auxiliary archives registered by reference stay open; their owners
        manage their lifetime.
        """
        await self.primary.close()
