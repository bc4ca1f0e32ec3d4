"""
Vector scene - resolution independent draw operations
"""

from typing import Annotated, Literal, Union
from xml.sax.saxutils import escape, quoteattr
from pydantic import BaseModel, Field

# Text baselines sit this far below the top of the em box
ASCENT_RATIO = 0.8


class RectOp(BaseModel):
    """Filled, optionally rounded rectangle"""

    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    fill: str
    radius: float = 0


class TextOp(BaseModel):
    """Single line of text, positioned at its baseline"""

    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    font_id: int
    size: float
    fill: str
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    synthetic_bold: bool = False  # stroke the glyphs, face has no bold weight


class LineOp(BaseModel):
    """Straight stroke (underlines)"""

    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    width: float = 1


DrawOp = Annotated[Union[RectOp, TextOp, LineOp], Field(discriminator="kind")]


class VectorScene(BaseModel):
    """
    Laid out image description produced by a layout engine

    Coordinates are in canvas pixels; rasterizers scale them to the
    requested output size.
    """

    width: int
    height: int
    font_family: str
    ops: list[DrawOp] = Field(default_factory=list)

    def to_svg(self) -> str:
        """Serialize the scene as a standalone SVG document"""
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" '
            f'height="{self.height}" viewBox="0 0 {self.width} {self.height}">'
        ]
        for op in self.ops:
            if isinstance(op, RectOp):
                parts.append(
                    f'<rect x="{op.x:g}" y="{op.y:g}" width="{op.width:g}" '
                    f'height="{op.height:g}" rx="{op.radius:g}" fill="{op.fill}"/>'
                )
            elif isinstance(op, TextOp):
                family = "monospace" if op.monospace else self.font_family
                weight = "bold" if op.bold else "normal"
                style = "italic" if op.italic else "normal"
                parts.append(
                    f'<text x="{op.x:g}" y="{op.y:g}" font-family={quoteattr(family)} '
                    f'font-size="{op.size:g}" font-weight="{weight}" font-style="{style}" '
                    f'fill="{op.fill}" xml:space="preserve">{escape(op.text)}</text>'
                )
            elif isinstance(op, LineOp):
                parts.append(
                    f'<line x1="{op.x1:g}" y1="{op.y1:g}" x2="{op.x2:g}" y2="{op.y2:g}" '
                    f'stroke="{op.stroke}" stroke-width="{op.width:g}"/>'
                )
        parts.append("</svg>")
        return "\n".join(parts)
