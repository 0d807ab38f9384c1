"""Service layer for rendering whole mockable types."""

from mockrender.services.render_service import (
    MethodRendering,
    RenderService,
    TypeRenderResult,
)

__all__ = [
    "MethodRendering",
    "RenderService",
    "TypeRenderResult",
]
