"""
Texture bytes and animation metadata lookup.
"""

import logging
from typing import Optional

from .cache import ParsedCache
from .errors import ParseError, TextureNotFoundError
from .identifiers import DEFAULT_NAMESPACE, Identifier
from .models import AnimationMeta, Document, texture_metadata_path, texture_path


class TextureResolver:
    """Reads texture files and their optional ``.mcmeta`` sidecars."""

    ANIMATION_KEY = "animation"

    def __init__(self, cache: ParsedCache, default_namespace: str = DEFAULT_NAMESPACE):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.cache = cache
        self.default_namespace = default_namespace

    def identify(self, name: str, namespace: Optional[str] = None) -> Identifier:
        return Identifier.parse(name, namespace or self.default_namespace)

    async def get_texture(self, name: str, namespace: Optional[str] = None) -> bytes:
        """Return the raw PNG bytes of a texture.

        Raises:
            TextureNotFoundError: if no source has the texture
        """
        path = texture_path(self.identify(name, namespace))
        data = await self.cache.sources.read_file(path)
        if data is None:
            raise TextureNotFoundError(path)
        return data

    async def get_texture_metadata(
        self, name: str, namespace: Optional[str] = None
    ) -> Optional[AnimationMeta]:
        """Return the animation metadata of a texture, if it has any.

        Missing sidecars, malformed sidecars and sidecars without an
        ``animation`` section all yield None.
        """
        path = texture_metadata_path(self.identify(name, namespace))
        try:
            document = await self.cache.get_parsed(path)
        except ParseError as e:
            self.logger.warning(f"Ignoring malformed texture metadata: {e}")
            return None

        if not isinstance(document, dict):
            return None
        animation = document.get(self.ANIMATION_KEY)
        if not isinstance(animation, dict):
            return None

        try:
            return AnimationMeta.from_dict(animation)
        except (TypeError, ValueError, KeyError) as e:
            self.logger.warning(f"Ignoring invalid animation metadata in {path}: {e}")
            return None

    async def get_texture_sidecar(
        self, name: str, namespace: Optional[str] = None
    ) -> Optional[Document]:
        """Return the whole parsed ``.mcmeta`` sidecar of a texture.

        Sections other than ``animation`` (``texture.blur``, ``villager``)
        are only available here. Missing or malformed sidecars yield None.
        """
        path = texture_metadata_path(self.identify(name, namespace))
        try:
            document = await self.cache.get_parsed(path)
        except ParseError as e:
            self.logger.warning(f"Ignoring malformed texture metadata: {e}")
            return None
        return document if isinstance(document, dict) else None
