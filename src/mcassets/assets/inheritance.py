"""
Model inheritance resolution.

Handles resolving ``parent`` chains of block models, merging each model on
top of its resolved parent. Child fields override parent fields; nested
objects such as ``textures`` and ``display`` merge key by key.
"""

import logging
from typing import Any, Dict, List, Optional

from .cache import ParsedCache
from .documents import deep_merge, expect_mapping
from .errors import CyclicParentError, ModelNotFoundError
from .identifiers import DEFAULT_NAMESPACE, Identifier
from .models import (
    BLOCK_NAME_KEY,
    BUILTIN_PREFIX,
    DISPLAY_KEY,
    GUI_KEY,
    PARENT_KEY,
    PARENTS_KEY,
    ROOT_MODEL,
    Document,
    ModelDescriptor,
    model_path,
)


class ModelResolver:
    """Resolves a model file and its parent chain into one descriptor."""

    def __init__(
        self,
        cache: ParsedCache,
        default_namespace: str = DEFAULT_NAMESPACE,
        root_model: str = ROOT_MODEL,
    ):
        """Initialize the resolver.

        Args:
            cache: Parsed document cache used to load model files
            default_namespace: Namespace for model names without a prefix
            root_model: Model synthesized as parent of chains that declare
                        no GUI display data of their own
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.cache = cache
        self.default_namespace = default_namespace
        self.root_model = root_model
        self._root_path = model_path(Identifier.parse(root_model, default_namespace))

    def identify(self, name: str, namespace: Optional[str] = None) -> Identifier:
        return Identifier.parse(name, namespace or self.default_namespace)

    async def get_model_file(self, name: str, namespace: Optional[str] = None) -> Document:
        """Load a single model document without merging its parents.

        Raises:
            ModelNotFoundError: if no source has the model file
            ShapeError: if the file is not a JSON object
        """
        path = model_path(self.identify(name, namespace))
        document = await self.cache.get_parsed(path)
        if document is None:
            raise ModelNotFoundError(path)
        return expect_mapping(document, "model", path)

    async def resolve(
        self,
        name: str,
        block_name: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> ModelDescriptor:
        """Resolve a model with its whole parent chain merged in.

        Args:
            name: Model name, e.g. ``minecraft:block/stone`` or ``stone``
            block_name: Value stamped as ``blockName``; defaults to ``name``
            namespace: Namespace for names without a prefix

        Returns:
            The flattened descriptor; ``parents`` lists ancestors
            nearest-first and ``parent`` is removed.
        """
        model = await self._merge_recursive(name, namespace, [])
        model[BLOCK_NAME_KEY] = block_name if block_name is not None else name
        return model

    def _needs_root_parent(self, path: str, model: Dict[str, Any]) -> bool:
        """Whether a parentless model should inherit from the root model."""
        if path == self._root_path:
            return False
        display = model.get(DISPLAY_KEY)
        return not (isinstance(display, dict) and GUI_KEY in display)

    async def _merge_recursive(
        self, name: str, namespace: Optional[str], chain: List[str]
    ) -> ModelDescriptor:
        """Recursively merge a model with its resolved parent.

        Args:
            name: Model name to load
            namespace: Namespace for names without a prefix
            chain: Paths of the models currently being resolved, outermost first

        Returns:
            Merged model dictionary
        """
        path = model_path(self.identify(name, namespace))
        if path in chain:
            raise CyclicParentError(chain + [path])

        model = await self.get_model_file(name, namespace)
        parent = model.pop(PARENT_KEY, None)

        if parent is None and self._needs_root_parent(path, model):
            parent = self.root_model
            self.logger.debug(f"{name} has no parent and no GUI display, using {parent}")

        if parent is None:
            model[PARENTS_KEY] = []
            return model

        parent = str(parent)
        if self.identify(parent).local_id.startswith(BUILTIN_PREFIX):
            # builtin/generated and friends are provided by the game itself
            model[PARENTS_KEY] = [parent]
            return model

        # Unprefixed parent names always mean the configured default namespace
        resolved_parent = await self._merge_recursive(parent, None, chain + [path])
        ancestors: List[str] = [parent] + list(resolved_parent.pop(PARENTS_KEY, []))

        merged = deep_merge(resolved_parent, model)
        merged[PARENTS_KEY] = ancestors
        return merged
