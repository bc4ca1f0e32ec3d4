"""
Markdown to PNG conversion

Parsing, height estimation and presentation mapping run synchronously;
the layout + rasterization step is the only awaited boundary.
"""

import asyncio
from typing import Optional, Sequence

from pydantic import BaseModel

from .config import DEFAULT_BACKGROUND, DEFAULT_WIDTH, RenderSettings
from .layout.height import HeightEstimator
from .layout.presentation import PresentationMapper, VisualBox
from .layout.style import DEFAULT_STYLE, StyleSheet
from .parsing.blocks import BlockParser
from .rendering.base import BaseLayoutEngine, BaseRasterizer, FitTo
from .rendering.engine import BoxLayoutEngine
from .rendering.fonts import FontBook, FontConfig
from .rendering.raster import PillowRasterizer
from .rendering.scene import VectorScene
from .schemas.document import Document
from .utils.logger import logger


class RenderPlan(BaseModel):
    """Everything the core produces for one conversion"""

    document: Document
    height: int
    tree: VisualBox

    model_config = {"frozen": True}


class MarkdownRenderer:
    """
    Converts markdown text into PNG images

    The renderer only holds configuration. Every call builds its own
    document, font book and scene, so one renderer can serve concurrent
    callers.

    Usage:
        renderer = MarkdownRenderer(fonts=[FontConfig(name="Noto Sans", path="NotoSans.ttf")])
        png = await renderer.render("# Hello\\n\\nSome **bold** text")
    """

    def __init__(
        self,
        fonts: Sequence[FontConfig] = (),
        width: int = DEFAULT_WIDTH,
        style: StyleSheet = DEFAULT_STYLE,
        background: str = DEFAULT_BACKGROUND,
        layout_engine: Optional[BaseLayoutEngine] = None,
        rasterizer: Optional[BaseRasterizer] = None,
    ):
        """
        Initialize renderer

        Args:
            fonts: Font resources in priority order (empty: Pillow default face)
            width: Output width in pixels
            style: Style table for presentation and height estimate
            background: Fill colour behind the document
            layout_engine: Layout collaborator (default: BoxLayoutEngine)
            rasterizer: Rasterizer collaborator (default: PillowRasterizer)

        Raises:
            ValueError: If width is not a positive integer
        """
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ValueError(f"width must be a positive integer, got {width!r}")

        self.fonts = tuple(fonts)
        self.width = width
        self.background = background
        self.parser = BlockParser()
        self.estimator = HeightEstimator(style)
        self.mapper = PresentationMapper(style)
        self.layout_engine = layout_engine or BoxLayoutEngine()
        self.rasterizer = rasterizer or PillowRasterizer()

    @classmethod
    def from_settings(
        cls,
        settings: RenderSettings,
        fonts: Sequence[FontConfig] = (),
        style: StyleSheet = DEFAULT_STYLE,
    ) -> "MarkdownRenderer":
        """Build a renderer from RenderSettings"""
        return cls(fonts=fonts, width=settings.width, style=style, background=settings.background)

    def prepare(self, markdown: str) -> RenderPlan:
        """
        Run the core: parse, estimate height, build the visual tree

        Args:
            markdown: Markdown source

        Returns:
            RenderPlan for the layout step
        """
        document = Document(blocks=self.parser.parse(markdown))
        height = self.estimator.estimate(document)
        font_family = self.mapper.font_family([font.name for font in self.fonts])
        tree = self.mapper.map(document, font_family=font_family)
        return RenderPlan(document=document, height=height, tree=tree)

    def load_fonts(self) -> FontBook:
        """
        Load the configured fonts for one conversion

        Raises:
            FontLoadError: If a font resource cannot be loaded
        """
        return FontBook(self.fonts)

    def layout(self, plan: RenderPlan, fonts: FontBook) -> VectorScene:
        """Lay out a prepared plan at the configured width"""
        return self.layout_engine.layout(plan.tree, self.width, plan.height, fonts)

    def rasterize(self, scene: VectorScene, fonts: FontBook) -> bytes:
        """Rasterize a laid out scene to the configured width and background"""
        return self.rasterizer.render(
            scene,
            fonts,
            background=self.background,
            fit_to=FitTo(mode="width", value=self.width),
        )

    def _rasterize(self, plan: RenderPlan) -> bytes:
        fonts = self.load_fonts()
        return self.rasterize(self.layout(plan, fonts), fonts)

    async def render(self, markdown: str) -> bytes:
        """
        Convert markdown to PNG bytes

        Args:
            markdown: Markdown source

        Returns:
            PNG image, ``width`` pixels wide and as tall as the estimated height

        Raises:
            FontLoadError: If a font resource cannot be loaded
            RenderError: If layout or rasterization fails
        """
        plan = self.prepare(markdown)
        logger.debug(f"Rendering {len(plan.document)} blocks at {self.width}x{plan.height}")

        png = await asyncio.to_thread(self._rasterize, plan)

        logger.info(f"Rendered markdown to {self.width}x{plan.height} PNG ({len(png)} bytes)")
        return png

    def render_sync(self, markdown: str) -> bytes:
        """Blocking variant of render() for code without an event loop"""
        return asyncio.run(self.render(markdown))

    def render_svg(self, markdown: str) -> str:
        """
        Convert markdown to an SVG document (no rasterization)

        Raises:
            FontLoadError: If a font resource cannot be loaded
        """
        plan = self.prepare(markdown)
        return self.layout(plan, self.load_fonts()).to_svg()


async def markdown_to_png(
    markdown: str,
    fonts: Sequence[FontConfig] = (),
    width: int = DEFAULT_WIDTH,
) -> bytes:
    """Convert markdown to PNG bytes with the default style"""
    return await MarkdownRenderer(fonts=fonts, width=width).render(markdown)


def markdown_to_png_sync(
    markdown: str,
    fonts: Sequence[FontConfig] = (),
    width: int = DEFAULT_WIDTH,
) -> bytes:
    """Blocking variant of markdown_to_png()"""
    return MarkdownRenderer(fonts=fonts, width=width).render_sync(markdown)
