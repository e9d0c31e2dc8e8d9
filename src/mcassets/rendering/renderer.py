"""
Interface of the external renderer.

The resolution engine never draws anything itself. It hands flattened
model descriptors to a renderer implementing this protocol, preparing it
before the first model and destroying it after the last.
"""

from typing import TYPE_CHECKING, Any, Dict, Protocol, TypeAlias, runtime_checkable

from ..assets.models import ModelDescriptor

if TYPE_CHECKING:
    from ..assets.service import AssetService

RenderOptions: TypeAlias = Dict[str, Any]
"""Renderer-specific options such as output size or background color."""


@runtime_checkable
class Renderer(Protocol):
    """Rendering backend used by ``AssetService.render``."""

    async def prepare(self, options: RenderOptions) -> Any:
        """Set up the backend and return a handle for it."""
        ...

    async def render(self, context: "AssetService", model: ModelDescriptor) -> Any:
        """Render one model; ``context`` serves texture lookups."""
        ...

    async def destroy(self, handle: Any) -> None:
        """Release everything ``prepare`` acquired."""
        ...
