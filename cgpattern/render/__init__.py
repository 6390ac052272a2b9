"""Text previews of map patterns."""

from .ascii_renderer import ASCIIRenderer, ASCIIRenderOptions

__all__ = ["ASCIIRenderer", "ASCIIRenderOptions"]
