"""
Pillow rasterizer - draws a vector scene and encodes it as PNG
"""

import io
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from .base import BaseRasterizer, FitTo
from .fonts import FontBook
from .scene import ASCENT_RATIO, LineOp, RectOp, TextOp, VectorScene
from ..errors import RenderError
from ..utils.logger import logger

FIT_MODES = ("original", "width", "height", "zoom")


class PillowRasterizer(BaseRasterizer):
    """
    Rasterizer built on Pillow's ImageDraw

    The scene is redrawn at the output scale (fonts are re-rasterized at
    the scaled size), not resampled from a bitmap.

    Usage:
        rasterizer = PillowRasterizer()
        png = rasterizer.render(scene, fonts, background="#ffffff",
                                fit_to=FitTo(mode="width", value=800))
    """

    def __init__(self, image_format: str = "PNG"):
        self.image_format = image_format

    def render(
        self,
        scene: VectorScene,
        fonts: FontBook,
        background: str = "#ffffff",
        fit_to: Optional[FitTo] = None,
    ) -> bytes:
        scale = self.scale_for(scene, fit_to or FitTo(mode="original", value=1))
        size = (max(1, round(scene.width * scale)), max(1, round(scene.height * scale)))

        try:
            image = Image.new("RGBA", size, background)
            draw = ImageDraw.Draw(image)
            for op in scene.ops:
                if isinstance(op, RectOp):
                    self._draw_rect(draw, op, scale)
                elif isinstance(op, TextOp):
                    self._draw_text(draw, op, scale, fonts)
                elif isinstance(op, LineOp):
                    self._draw_line(draw, op, scale)

            buffer = io.BytesIO()
            image.save(buffer, format=self.image_format)
        except (ValueError, OSError) as e:
            logger.error(f"Rasterization failed: {e}")
            raise RenderError(f"Failed to rasterize scene: {e}") from e

        logger.debug(f"Rasterized {len(scene.ops)} ops to {size[0]}x{size[1]}")
        return buffer.getvalue()

    @staticmethod
    def scale_for(scene: VectorScene, fit_to: FitTo) -> float:
        """
        Scale factor from scene pixels to output pixels

        Raises:
            RenderError: For unknown modes or non-positive values
        """
        if fit_to.mode not in FIT_MODES:
            raise RenderError(
                f"Unsupported fit mode: {fit_to.mode}. "
                f"Supported: {', '.join(FIT_MODES)}"
            )
        if fit_to.mode == "original":
            return 1.0
        if fit_to.value <= 0:
            raise RenderError(f"Fit value must be positive, got {fit_to.value}")
        if scene.width <= 0 or scene.height <= 0:
            raise RenderError(f"Invalid scene size {scene.width}x{scene.height}")

        if fit_to.mode == "width":
            return fit_to.value / scene.width
        if fit_to.mode == "height":
            return fit_to.value / scene.height
        return fit_to.value

    @staticmethod
    def _draw_rect(draw: ImageDraw.ImageDraw, op: RectOp, scale: float) -> None:
        x0, y0 = op.x * scale, op.y * scale
        x1, y1 = (op.x + op.width) * scale - 1, (op.y + op.height) * scale - 1
        if x1 < x0 or y1 < y0:
            return
        radius = min(op.radius * scale, (x1 - x0) / 2, (y1 - y0) / 2)
        if radius >= 1:
            draw.rounded_rectangle((x0, y0, x1, y1), radius=radius, fill=op.fill)
        else:
            draw.rectangle((x0, y0, x1, y1), fill=op.fill)

    @staticmethod
    def _draw_text(draw: ImageDraw.ImageDraw, op: TextOp, scale: float, fonts: FontBook) -> None:
        font = fonts.get(op.font_id, op.size * scale)
        stroke = 1 if op.synthetic_bold else 0
        if isinstance(font, ImageFont.FreeTypeFont):
            draw.text((op.x * scale, op.y * scale), op.text, font=font, fill=op.fill,
                      anchor="ls", stroke_width=stroke, stroke_fill=op.fill)
        else:
            # Bitmap faces only support top-left anchoring
            top = (op.y - op.size * ASCENT_RATIO) * scale
            draw.text((op.x * scale, top), op.text, font=font, fill=op.fill)

    @staticmethod
    def _draw_line(draw: ImageDraw.ImageDraw, op: LineOp, scale: float) -> None:
        draw.line(
            (op.x1 * scale, op.y1 * scale, op.x2 * scale, op.y2 * scale),
            fill=op.stroke,
            width=max(1, round(op.width * scale)),
        )
