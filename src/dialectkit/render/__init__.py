"""
Rendering policies consumed by SQL renderers.
"""

from .naming import (
    DelegatingRenderNamingStrategy,
    RenderNamingStrategy,
    as_is,
    map_with,
    to_lower,
    to_upper,
)

__all__ = [
    "RenderNamingStrategy",
    "DelegatingRenderNamingStrategy",
    "as_is",
    "map_with",
    "to_lower",
    "to_upper",
]
