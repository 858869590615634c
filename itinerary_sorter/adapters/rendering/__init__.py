"""Rendering adapters - Implementations of ItineraryRendererPort.

Available implementations:
- TextItineraryRenderer: numbered English steps
"""

from .text_renderer import TextItineraryRenderer

__all__ = ["TextItineraryRenderer"]
