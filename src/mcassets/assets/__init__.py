"""
Module for resolving packaged game assets.

Provides services for reading block states, block models and textures
from several archives, including parent chain merging for models and
default variant selection for block states.
"""

from .service import AssetService
from .models import (
    Node,
    Document,
    ModelDescriptor,
    Variant,
    BlockState,
    AnimationMeta,
    ROOT_MODEL,
    PARENT_KEY,
    PARENTS_KEY,
    BLOCK_NAME_KEY,
)
from .identifiers import Identifier, DEFAULT_NAMESPACE
from .errors import (
    AssetError,
    NotFoundError,
    ModelNotFoundError,
    TextureNotFoundError,
    ParseError,
    ShapeError,
    CyclicParentError,
    RenderError,
)
from .cache import ParsedCache
from .documents import parse_document, clone, deep_merge
from .inheritance import ModelResolver
from .blockstates import BlockStateResolver
from .textures import TextureResolver

# Public exports
__all__ = [
    # Main service
    "AssetService",
    # Type aliases and records
    "Node",
    "Document",
    "ModelDescriptor",
    "Variant",
    "BlockState",
    "AnimationMeta",
    "Identifier",
    # Constants
    "DEFAULT_NAMESPACE",
    "ROOT_MODEL",
    "PARENT_KEY",
    "PARENTS_KEY",
    "BLOCK_NAME_KEY",
    # Errors
    "AssetError",
    "NotFoundError",
    "ModelNotFoundError",
    "TextureNotFoundError",
    "ParseError",
    "ShapeError",
    "CyclicParentError",
    "RenderError",
    # Component classes (for advanced usage)
    "ParsedCache",
    "ModelResolver",
    "BlockStateResolver",
    "TextureResolver",
    "parse_document",
    "clone",
    "deep_merge",
]
