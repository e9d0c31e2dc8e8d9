"""
Main service for working with packaged assets.

Provides the high-level API for reading block states, models and textures
from a primary archive plus registered auxiliary archives, and for
driving an external renderer over resolved models.
"""

import asyncio
import logging
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    AsyncIterator,
    Awaitable,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from ..rendering.renderer import Renderer, RenderOptions
from ..sources.archive import ArchiveHandle
from ..sources.source_set import SourceSet
from .blockstates import BlockStateResolver
from .cache import ParsedCache
from .documents import clone, parse_document
from .errors import RenderError
from .identifiers import DEFAULT_NAMESPACE, Identifier
from .inheritance import ModelResolver
from .models import (
    BLOCK_NAME_KEY,
    JSON_EXTENSION,
    ROOT_MODEL,
    AnimationMeta,
    BlockState,
    Document,
    ModelDescriptor,
    Node,
    block_models_dir,
)
from .textures import TextureResolver

if TYPE_CHECKING:
    from ..settings import AppSettings

T = TypeVar("T")


class AssetService:
    """Service for resolving packaged game assets.

    Responsible for looking files up across every registered archive,
    caching parsed documents, resolving model parent chains and block
    state variants, and reading textures. Batch operations resolve their
    items concurrently and skip (and log) the ones that fail.
    """

    def __init__(
        self,
        file: str | Path | ArchiveHandle,
        default_namespace: str = DEFAULT_NAMESPACE,
        renderer: Optional[Renderer] = None,
        root_model: str = ROOT_MODEL,
    ):
        """Initialize the service.

        Args:
            file: Path of the primary jar, zip or pack directory, or an open handle
            default_namespace: Namespace used for names without a prefix
            renderer: Backend used by ``render`` and ``render_single``
            root_model: Model inherited by chains without GUI display data
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.default_namespace = default_namespace
        self.renderer = renderer
        self._render_handle: Any = None

        # Initialize components
        self.sources = SourceSet(file)
        self.cache = ParsedCache(self.sources)
        self.models = ModelResolver(self.cache, default_namespace, root_model)
        self.block_states = BlockStateResolver(self.cache, self.models, default_namespace)
        self.textures = TextureResolver(self.cache, default_namespace)

        self.logger.info(f"Initialized AssetService for {file!r} (namespace '{default_namespace}')")

    @classmethod
    def open(
        cls,
        file: str | Path | ArchiveHandle,
        namespace: str = DEFAULT_NAMESPACE,
        renderer: Optional[Renderer] = None,
    ) -> "AssetService":
        return cls(file, namespace, renderer)

    @classmethod
    def from_settings(
        cls, settings: "AppSettings", renderer: Optional[Renderer] = None
    ) -> "AssetService":
        """Open the configured primary archive and register configured packs.

        Raises:
            ConfigError: if no primary archive is configured
        """
        from ..settings import ConfigError

        if settings.primary_archive is None:
            raise ConfigError("No primary archive configured")

        service = cls(
            settings.primary_archive,
            settings.resolver.default_namespace,
            renderer,
            settings.resolver.root_model,
        )
        service.register_packs(settings.packs.packs)
        return service

    async def __aenter__(self) -> "AssetService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # Sources and documents

    def register_source(self, key: str, source: str | Path | ArchiveHandle) -> None:
        """Register an auxiliary archive consulted after the primary one."""
        self.sources.register_source(key, source)

    def register_packs(self, packs: Iterable[Tuple[str, Path]]) -> None:
        """Register configured packs in order, skipping paths that are gone."""
        for key, path in packs:
            if not Path(path).exists():
                self.logger.warning(f"Skipping pack '{key}', path no longer exists: {path}")
                continue
            self.register_source(key, path)

    async def get_file(self, path: str) -> Optional[bytes]:
        """Return the bytes at ``path`` from the first archive that has them."""
        return await self.sources.read_file(path)

    async def get_parsed_json(self, path: str) -> Optional[Node]:
        """Return an independent copy of the parsed document at ``path``."""
        return await self.cache.get_parsed(path)

    @staticmethod
    def parse_json(data: bytes | str | Any) -> Node:
        return parse_document(data)

    @staticmethod
    def clone(node: Node) -> Node:
        return clone(node)

    # Models

    async def get_block_name_list(self, namespace: Optional[str] = None) -> List[str]:
        """Return ``namespace:name`` for every model file under ``models/block``."""
        namespace = namespace or self.default_namespace
        prefix = block_models_dir(namespace)
        entries = await self.sources.list_entries(prefix)
        return [
            f"{namespace}:{entry.name[len(prefix):-len(JSON_EXTENSION)]}"
            for entry in entries
            if entry.name.endswith(JSON_EXTENSION)
        ]

    async def get_model_file(self, name: str = "block/block", namespace: Optional[str] = None) -> Document:
        """Return a model document without merging its parents."""
        return await self.models.get_model_file(name, namespace)

    async def get_model(self, block_name: str, namespace: Optional[str] = None) -> ModelDescriptor:
        """Return a model with its whole parent chain merged in."""
        return await self.models.resolve(block_name, namespace=namespace)

    async def get_block_list(self, namespace: Optional[str] = None) -> List[ModelDescriptor]:
        """Resolve every block model of a namespace, skipping broken ones."""
        names = await self.get_block_name_list(namespace)
        return await self._gather_resolved(
            names, [self.get_model(name, namespace) for name in names]
        )

    # Block states

    async def get_block_states(self, namespace: Optional[str] = None) -> List[BlockState]:
        return await self.block_states.get_block_states(namespace)

    async def get_block_state(
        self, identifier: str | Identifier, namespace: Optional[str] = None
    ) -> Optional[BlockState]:
        """Return the block state with this identifier, or None."""
        return await self.block_states.get_block_state(identifier, namespace)

    async def get_block_model(
        self, identifier: str | Identifier, namespace: Optional[str] = None
    ) -> Optional[ModelDescriptor]:
        """Resolve the default variant model of a block, or None if there is no such block."""
        state = await self.get_block_state(identifier, namespace)
        if state is None:
            return None
        return await self.block_states.resolve(state)

    async def get_block_models(self, namespace: Optional[str] = None) -> List[ModelDescriptor]:
        """Resolve the default model of every block state of a namespace.

        Blocks whose model chain cannot be resolved are logged and skipped.
        """
        states = await self.get_block_states(namespace)
        return await self._gather_resolved(
            [state.name for state in states],
            [self.block_states.resolve(state) for state in states],
        )

    async def _gather_resolved(
        self, names: List[str], jobs: Iterable[Awaitable[T]]
    ) -> List[T]:
        """Run resolution jobs concurrently and keep the ones that succeed."""
        outcomes = await asyncio.gather(*jobs, return_exceptions=True)

        results: List[T] = []
        skipped = 0
        for name, outcome in zip(names, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                skipped += 1
                self.logger.warning(f"Skipping {name}: {outcome}")
                continue
            results.append(outcome)

        if skipped:
            self.logger.info(f"Resolved {len(results)} blocks, skipped {skipped}")
        return results

    # Textures

    async def get_texture_file(self, name: str = "", namespace: Optional[str] = None) -> bytes:
        return await self.textures.get_texture(name, namespace)

    async def get_texture_metadata(
        self, name: str = "", namespace: Optional[str] = None
    ) -> Optional[AnimationMeta]:
        return await self.textures.get_texture_metadata(name, namespace)

    async def get_texture_sidecar(
        self, name: str, namespace: Optional[str] = None
    ) -> Optional[Document]:
        return await self.textures.get_texture_sidecar(name, namespace)

    # Rendering

    def _require_renderer(self) -> Renderer:
        if self.renderer is None:
            raise RenderError(None, "No renderer configured")
        return self.renderer

    async def prepare_render_environment(self, options: Optional[RenderOptions] = None) -> None:
        self._render_handle = await self._require_renderer().prepare(options or {})
        self.logger.debug("Render environment prepared")

    async def cleanup_render_environment(self) -> None:
        renderer = self._require_renderer()
        handle, self._render_handle = self._render_handle, None
        await renderer.destroy(handle)
        self.logger.debug("Render environment destroyed")

    def get_renderer(self) -> Any:
        """Return the handle of the prepared render environment."""
        return self._render_handle

    async def render_single(self, block: ModelDescriptor) -> Any:
        """Render one resolved model.

        Raises:
            RenderError: if the renderer fails on this model
        """
        renderer = self._require_renderer()
        block_name = block.get(BLOCK_NAME_KEY)
        try:
            return await renderer.render(self, block)
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(block_name, f"Failed to render {block_name}: {e}") from e

    async def render(
        self, blocks: Iterable[ModelDescriptor], options: Optional[RenderOptions] = None
    ) -> AsyncIterator[Any]:
        """Render models one after another, yielding each output.

        The environment is prepared before the first model and destroyed
        after the last one, also when the loop is abandoned early. Models
        the renderer fails on are logged and skipped.
        """
        await self.prepare_render_environment(options)
        try:
            for block in blocks:
                try:
                    output = await self.render_single(block)
                except RenderError as e:
                    self.logger.error(str(e))
                    continue
                yield output
        finally:
            await self.cleanup_render_environment()

    async def close(self) -> None:
        """Close the primary archive."""
        await self.sources.close()
        self.logger.debug("AssetService closed")
