"""
Block state loading and default variant selection.
"""

import logging
from typing import Any, List, Optional

from .cache import ParsedCache
from .documents import expect_mapping, expect_sequence
from .errors import ParseError, ShapeError
from .identifiers import DEFAULT_NAMESPACE, Identifier
from .inheritance import ModelResolver
from .models import (
    APPLY_KEY,
    DEFAULT_VARIANT,
    JSON_EXTENSION,
    MODEL_KEY,
    MULTIPART_KEY,
    VARIANT_KEY,
    VARIANTS_KEY,
    BlockState,
    ModelDescriptor,
    Variant,
    blockstate_path,
    blockstates_dir,
)


class BlockStateResolver:
    """Loads block states and resolves the model of their default variant.

    Variant selection is deliberately minimal: the unconditional ``""``
    variant when there is one, otherwise the first variant in document
    order. Weighted alternatives always resolve to their first entry, so
    the result is deterministic.
    """

    def __init__(
        self,
        cache: ParsedCache,
        models: ModelResolver,
        default_namespace: str = DEFAULT_NAMESPACE,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.cache = cache
        self.models = models
        self.default_namespace = default_namespace

    async def get_block_state_names(self, namespace: Optional[str] = None) -> List[str]:
        """Return ``namespace:name`` for every block state file of a namespace."""
        namespace = namespace or self.default_namespace
        prefix = blockstates_dir(namespace)
        entries = await self.cache.sources.list_entries(prefix)
        return [
            f"{namespace}:{entry.name[len(prefix):-len(JSON_EXTENSION)]}"
            for entry in entries
            if entry.name.endswith(JSON_EXTENSION)
        ]

    async def load_block_state(self, identifier: Identifier) -> Optional[BlockState]:
        """Load one block state document, or None if no source has it.

        Raises:
            ParseError: if the document is malformed
        """
        path = blockstate_path(identifier)
        document = await self.cache.get_parsed(path)
        if document is None:
            return None
        data = expect_mapping(document, "block state", path)
        variants = expect_mapping(data.get(VARIANTS_KEY, {}), VARIANTS_KEY, path)
        multipart = expect_sequence(data.get(MULTIPART_KEY, []), MULTIPART_KEY, path)
        return BlockState(identifier=identifier, variants=variants, multipart=multipart)

    async def get_block_states(self, namespace: Optional[str] = None) -> List[BlockState]:
        """Load every block state of a namespace.

        Documents that fail to parse are logged and left out.
        """
        namespace = namespace or self.default_namespace
        states: List[BlockState] = []
        for name in await self.get_block_state_names(namespace):
            identifier = Identifier.parse(name, namespace)
            try:
                state = await self.load_block_state(identifier)
            except ParseError as e:
                self.logger.error(f"Error reading block state {identifier}: {e}")
                continue
            if state is not None:
                states.append(state)

        self.logger.debug(f"Loaded {len(states)} block states for namespace '{namespace}'")
        return states

    async def get_block_state(
        self, name: str | Identifier, namespace: Optional[str] = None
    ) -> Optional[BlockState]:
        """Find a block state by identifier, or None when no block matches."""
        identifier = (
            name
            if isinstance(name, Identifier)
            else Identifier.parse(name, namespace or self.default_namespace)
        )
        for state in await self.get_block_states(identifier.namespace):
            if state.identifier == identifier:
                return state
        return None

    @staticmethod
    def _first_alternative(value: Any, what: str, path: str) -> Variant:
        if isinstance(value, list):
            if not value:
                raise ShapeError(path, f"{what} has no alternatives")
            value = value[0]
        return expect_mapping(value, what, path)

    def select_variant(self, state: BlockState) -> Variant:
        """Pick the variant used to display a block state.

        Raises:
            ShapeError: if the block state has nothing to select from or the
                        selected variant names no model
        """
        path = blockstate_path(state.identifier)

        if DEFAULT_VARIANT in state.variants:
            variant = self._first_alternative(state.variants[DEFAULT_VARIANT], "variant", path)
        elif state.variants:
            key = next(iter(state.variants))
            variant = self._first_alternative(state.variants[key], f"variant '{key}'", path)
        elif state.multipart:
            part = expect_mapping(state.multipart[0], "multipart entry", path)
            variant = self._first_alternative(part.get(APPLY_KEY), "multipart apply", path)
        else:
            raise ShapeError(path, "block state has no variants")

        if not isinstance(variant.get(MODEL_KEY), str):
            raise ShapeError(path, "selected variant has no model")
        return variant

    async def resolve(self, state: BlockState) -> ModelDescriptor:
        """Resolve the model of a block state's default variant."""
        variant = self.select_variant(state)
        model = await self.models.resolve(variant[MODEL_KEY], block_name=state.name)
        model[VARIANT_KEY] = variant
        return model
