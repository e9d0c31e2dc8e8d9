"""
Renderer interface consumed by the asset service.
"""

from .renderer import Renderer, RenderOptions

__all__ = [
    "Renderer",
    "RenderOptions",
]
