"""
Layout module - style table, height estimate and presentation mapping
"""

from .style import (
    DEFAULT_STYLE,
    Border,
    BoxStyle,
    Edges,
    HeightMetrics,
    RunStyle,
    StyleSheet,
)
from .height import HeightEstimator, estimate
from .presentation import PresentationMapper, TextRun, VisualBox

__all__ = [
    # Styles
    "DEFAULT_STYLE",
    "Border",
    "BoxStyle",
    "Edges",
    "HeightMetrics",
    "RunStyle",
    "StyleSheet",
    # Height
    "HeightEstimator",
    "estimate",
    # Presentation
    "PresentationMapper",
    "TextRun",
    "VisualBox",
]
