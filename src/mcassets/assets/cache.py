"""
Path-keyed cache of parsed JSON documents.
"""

import logging
from typing import Dict, Optional

from ..sources.source_set import SourceSet
from .documents import clone, parse_document
from .models import Node


class ParsedCache:
    """Parses each path once and hands out independent copies.

    Callers are free to mutate what they get back (the model resolver pops
    ``parent`` from every document it loads); the cached tree itself is
    never returned.
    """

    def __init__(self, sources: SourceSet):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.sources = sources
        self._cache: Dict[str, Node] = {}

    async def get_parsed(self, path: str) -> Optional[Node]:
        """Return a copy of the parsed document at ``path``, or None.

        A miss is not remembered, so a path that later appears in a newly
        registered source is picked up. Two concurrent misses on the same
        path both parse it; the second store wins with an equal value.

        Raises:
            ParseError: if the stored bytes are not valid JSON
        """
        if path not in self._cache:
            data = await self.sources.read_file(path)
            if data is None:
                return None
            self._cache[path] = parse_document(data, path)
            self.logger.debug(f"Cached {path}")

        return clone(self._cache[path])

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._cache

    def __len__(self) -> int:
        return len(self._cache)
