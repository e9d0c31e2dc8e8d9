"""
Exception types raised while resolving packaged assets.

Lookups that are expected to miss return ``None`` instead of raising;
these exceptions are reserved for named resources that cannot be found
anywhere, malformed documents and failures reported by the renderer.
"""

from typing import Sequence


class AssetError(Exception):
    """Base class for all asset resolution errors."""
    pass


class NotFoundError(AssetError):
    """Raised when a path is missing from every registered source."""

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(message or f"Unable to find file: {path}")


class ModelNotFoundError(NotFoundError):
    """Raised when a model file cannot be found in any source."""

    def __init__(self, path: str):
        super().__init__(path, f"Unable to find model file: {path}")


class TextureNotFoundError(NotFoundError):
    """Raised when a texture file cannot be found in any source."""

    def __init__(self, path: str):
        super().__init__(path, f"Unable to find texture file: {path}")


class ParseError(AssetError):
    """Raised when a document cannot be parsed."""

    def __init__(self, path: str | None, reason: str):
        self.path = path
        self.reason = reason
        where = path if path else "<inline>"
        super().__init__(f"Unable to parse {where}: {reason}")


class ShapeError(ParseError):
    """Raised when a parsed document does not have the expected structure."""
    pass


class CyclicParentError(AssetError):
    """Raised when a model chain refers back to a model already on it."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__(f"Cyclic parent chain: {' -> '.join(self.chain)}")


class RenderError(AssetError):
    """Raised when the renderer fails on a single model."""

    def __init__(self, block_name: str | None, message: str):
        self.block_name = block_name
        super().__init__(message)
