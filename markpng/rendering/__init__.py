"""
Rendering module - fonts, layout engine, vector scene and rasterizer
"""

from .fonts import DEFAULT_FACE, FontBook, FontConfig
from .scene import DrawOp, LineOp, RectOp, TextOp, VectorScene
from .base import BaseLayoutEngine, BaseRasterizer, FitTo
from .engine import BoxLayoutEngine
from .raster import FIT_MODES, PillowRasterizer

__all__ = [
    # Fonts
    "DEFAULT_FACE",
    "FontBook",
    "FontConfig",
    # Scene
    "DrawOp",
    "LineOp",
    "RectOp",
    "TextOp",
    "VectorScene",
    # Collaborators
    "BaseLayoutEngine",
    "BaseRasterizer",
    "FitTo",
    "BoxLayoutEngine",
    "FIT_MODES",
    "PillowRasterizer",
]
