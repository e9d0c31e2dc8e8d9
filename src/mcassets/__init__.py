"""
mcassets: block state and model resolution for packaged game assets

Reads block states, models and textures from a game jar plus any number
of resource packs, and flattens model parent chains for rendering.
"""

__version__ = "0.1.0"
__author__ = "mcassets Contributors"

# Core service imports
from .assets import AssetService, Identifier
from .sources import SourceSet, open_archive
from .utils.logging_config import setup_logging

# Errors
from .assets.errors import (
    AssetError,
    ModelNotFoundError,
    TextureNotFoundError,
    ParseError,
    CyclicParentError,
    RenderError,
)

__all__ = [
    # Services
    'AssetService',
    'SourceSet',
    'open_archive',
    'Identifier',

    # Logging
    'setup_logging',

    # Errors
    'AssetError',
    'ModelNotFoundError',
    'TextureNotFoundError',
    'ParseError',
    'CyclicParentError',
    'RenderError',
]
