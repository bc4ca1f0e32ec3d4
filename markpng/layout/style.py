"""
Style table - visual styles and height metrics for every node kind.

These values are a calibrated contract: the rendered image and the
estimated canvas height both depend on them, so changing any of them
changes the output.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Edges(BaseModel):
    """Box edge sizes in pixels (margins, paddings)"""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    model_config = {"frozen": True}

    @classmethod
    def symmetric(cls, vertical: float = 0, horizontal: float = 0) -> "Edges":
        """CSS-style ``margin: <vertical> <horizontal>``"""
        return cls(top=vertical, right=horizontal, bottom=vertical, left=horizontal)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


class Border(BaseModel):
    """Solid border on one side of a box"""

    width: float
    color: str

    model_config = {"frozen": True}


class BoxStyle(BaseModel):
    """Style of one block-level visual box"""

    font_size: float = 16
    line_height: float = 1.6
    color: str = "#000000"
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    background: Optional[str] = None
    margin: Edges = Field(default_factory=Edges)
    padding: Edges = Field(default_factory=Edges)
    border_left: Optional[Border] = None
    border_bottom: Optional[Border] = None
    radius: float = 0
    height: Optional[float] = None  # fixed height, box has no content
    preformatted: bool = False  # keep line breaks, wrap by character

    model_config = {"frozen": True}


class RunStyle(BaseModel):
    """
    Style overrides of an inline run

    ``None`` fields inherit from the enclosing box.
    """

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    monospace: Optional[bool] = None
    color: Optional[str] = None
    font_size: Optional[float] = None
    background: Optional[str] = None
    padding: Edges = Field(default_factory=Edges)
    radius: float = 0
    underline: bool = False

    model_config = {"frozen": True}


class HeightMetrics(BaseModel):
    """Calibration constants of the canvas height estimate"""

    base: float = 100  # container padding
    minimum: float = 400

    # font size + margins (+ padding and border for H1)
    heading_1: float = 48 + 30 + 15 + 4
    heading_2: float = 36 + 20 + 30
    heading_3: float = 28 + 15 + 25

    paragraph_chars_per_line: int = 50
    paragraph_line: float = 20 * 1.8
    paragraph_margin: float = 25

    blockquote_chars_per_line: int = 60
    blockquote_line: float = 24
    blockquote_padding: float = 40
    blockquote_margin: float = 25

    list_item: float = 18 * 1.7 + 8
    list_margin: float = 20

    code_line: float = 16 * 1.4
    code_padding: float = 40
    code_margin: float = 25

    horizontal_rule: float = 20 + 20

    model_config = {"frozen": True}


class StyleSheet(BaseModel):
    """Single table of every presentation style and height metric"""

    root: BoxStyle = BoxStyle(
        padding=Edges.symmetric(20, 20),
        background="#f9f9f9",
        radius=8,
        line_height=1.6,
    )

    heading_1: BoxStyle = BoxStyle(
        font_size=48,
        bold=True,
        margin=Edges(top=15, bottom=30),
        color="#2d3748",
        border_bottom=Border(width=4, color="#4299e1"),
        padding=Edges(bottom=10),
    )
    heading_2: BoxStyle = BoxStyle(
        font_size=36,
        bold=True,
        margin=Edges(top=30, bottom=20),
        color="#4a5568",
    )
    heading_3: BoxStyle = BoxStyle(
        font_size=28,
        bold=True,
        margin=Edges(top=25, bottom=15),
        color="#4a5568",
    )

    paragraph: BoxStyle = BoxStyle(
        font_size=20,
        line_height=1.8,
        margin=Edges(bottom=25),
        color="#2d3748",
    )

    blockquote: BoxStyle = BoxStyle(
        border_left=Border(width=6, color="#4299e1"),
        background="#e6f3ff",
        padding=Edges.symmetric(20, 20),
        margin=Edges.symmetric(25, 0),
        italic=True,
        font_size=18,
        color="#2c5282",
    )

    list_block: BoxStyle = BoxStyle(
        padding=Edges(left=30),
        margin=Edges(bottom=25),
    )
    list_item: BoxStyle = BoxStyle(
        font_size=18,
        line_height=1.7,
        margin=Edges(bottom=8),
        color="#2d3748",
    )

    code_block: BoxStyle = BoxStyle(
        background="#1a202c",
        color="#e2e8f0",
        padding=Edges.symmetric(20, 20),
        margin=Edges.symmetric(25, 0),
        radius=8,
        monospace=True,
        font_size=14,
        line_height=1.4,
        preformatted=True,
    )

    horizontal_rule: BoxStyle = BoxStyle(
        height=2,
        background="#e2e8f0",
        margin=Edges.symmetric(20, 0),
    )

    bold: RunStyle = RunStyle(bold=True)
    italic: RunStyle = RunStyle(italic=True)
    inline_code: RunStyle = RunStyle(
        background="#f1f5f9",
        padding=Edges.symmetric(2, 6),
        radius=4,
        monospace=True,
        font_size=16,
        color="#e53e3e",
    )
    link: RunStyle = RunStyle(color="#4299e1", underline=True)

    fallback_fonts: str = "Arial, sans-serif"

    metrics: HeightMetrics = Field(default_factory=HeightMetrics)

    model_config = {"frozen": True}

    def heading(self, level: int) -> BoxStyle:
        """Heading style, levels past 3 share the level 3 style"""
        if level == 1:
            return self.heading_1
        if level == 2:
            return self.heading_2
        return self.heading_3


DEFAULT_STYLE = StyleSheet()
