"""
markpng - render markdown documents to PNG images

Usage:
    from markpng import markdown_to_png, FontConfig

    png = await markdown_to_png(
        "# Hello\\n\\nSome **bold** text",
        fonts=[FontConfig(name="Noto Sans", path="NotoSans-Regular.ttf")],
        width=1000,
    )
"""

from .config import LogSettings, RenderSettings
from .converter import (
    MarkdownRenderer,
    RenderPlan,
    markdown_to_png,
    markdown_to_png_sync,
)
from .errors import FontLoadError, MarkpngError, RenderError
from .layout import DEFAULT_STYLE, HeightEstimator, PresentationMapper, StyleSheet, estimate
from .parsing import BlockParser, InlineScanner, parse, scan
from .rendering import FontConfig
from .schemas import Document

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "MarkdownRenderer",
    "RenderPlan",
    "RenderSettings",
    "LogSettings",
    "markdown_to_png",
    "markdown_to_png_sync",
    # Core
    "BlockParser",
    "InlineScanner",
    "parse",
    "scan",
    "HeightEstimator",
    "estimate",
    "PresentationMapper",
    "StyleSheet",
    "DEFAULT_STYLE",
    "Document",
    "FontConfig",
    # Errors
    "MarkpngError",
    "FontLoadError",
    "RenderError",
]
