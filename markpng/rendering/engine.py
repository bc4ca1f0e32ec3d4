"""
Box layout engine - stacks block boxes and flows inline text
"""

import re
from dataclasses import dataclass
from typing import Optional

from .base import BaseLayoutEngine
from .fonts import FontBook
from .scene import ASCENT_RATIO, DrawOp, LineOp, RectOp, TextOp, VectorScene
from ..errors import RenderError
from ..layout.presentation import TextRun, VisualBox
from ..layout.style import BoxStyle, Edges
from ..utils.logger import logger

TOKEN_PATTERN = re.compile(r"\s+|\S+")
TAB_SIZE = 4


@dataclass
class _RunFace:
    """Fully resolved inline style of one run"""

    font_id: int
    size: float
    color: str
    bold: bool
    italic: bool
    synthetic_bold: bool
    monospace: bool
    background: Optional[str]
    padding: Edges
    radius: float
    underline: bool


@dataclass
class _Piece:
    """Contiguous text of one run on one line"""

    run_index: int
    face: _RunFace
    text: str
    x: float
    width: float


class BoxLayoutEngine(BaseLayoutEngine):
    """
    Vertical box layout with greedy inline wrapping

    Block boxes are stacked top to bottom with their margins, borders and
    paddings. Inline runs are broken at whitespace (and inside words that
    are wider than the line); preformatted boxes keep their line breaks
    and wrap by character. Content past the canvas height is left to the
    rasterizer to clip.

    Usage:
        engine = BoxLayoutEngine()
        scene = engine.layout(root, width=1000, height=800, fonts=FontBook())
    """

    def layout(self, root: VisualBox, width: int, height: int, fonts: FontBook) -> VectorScene:
        if width <= 0 or height <= 0:
            raise RenderError(f"Invalid canvas size {width}x{height}")

        style = root.style
        ops: list[DrawOp] = []
        if style.background:
            ops.append(RectOp(x=0, y=0, width=width, height=height,
                              fill=style.background, radius=style.radius))

        x = style.padding.left
        y = style.padding.top
        inner_width = max(1.0, width - style.padding.horizontal)
        for child in root.children:
            y = self._layout_box(child, x, y, inner_width, fonts, ops)

        content_height = y + style.padding.bottom
        if content_height > height:
            logger.debug(f"Content height {content_height:.0f}px exceeds canvas {height}px, output will be clipped")

        return VectorScene(
            width=width,
            height=height,
            font_family=root.font_family or "sans-serif",
            ops=ops,
        )

    def _layout_box(
        self,
        box: VisualBox,
        x: float,
        y: float,
        width: float,
        fonts: FontBook,
        ops: list[DrawOp],
    ) -> float:
        """Lay out one box at (x, y), return the y below its bottom margin"""
        s = box.style
        y += s.margin.top
        x += s.margin.left
        width = max(1.0, width - s.margin.horizontal)

        if s.height is not None:
            if s.background:
                ops.append(RectOp(x=x, y=y, width=width, height=s.height,
                                  fill=s.background, radius=s.radius))
            return y + s.height + s.margin.bottom

        border_left = s.border_left.width if s.border_left else 0
        border_bottom = s.border_bottom.width if s.border_bottom else 0
        content_x = x + border_left + s.padding.left
        content_y = y + s.padding.top
        content_width = max(1.0, width - border_left - s.padding.horizontal)

        content_ops: list[DrawOp] = []
        if box.children:
            bottom = content_y
            for child in box.children:
                bottom = self._layout_box(child, content_x, bottom, content_width, fonts, content_ops)
            content_height = bottom - content_y
        elif s.preformatted:
            text = "".join(run.text for run in box.runs)
            content_height = self._layout_preformatted(text, s, content_x, content_y, content_width, fonts, content_ops)
        else:
            content_height = self._layout_runs(box.runs, s, content_x, content_y, content_width, fonts, content_ops)

        box_height = s.padding.top + content_height + s.padding.bottom + border_bottom

        # Decorations go under the content
        if s.background:
            ops.append(RectOp(x=x, y=y, width=width, height=box_height,
                              fill=s.background, radius=s.radius))
        if s.border_left:
            ops.append(RectOp(x=x, y=y, width=border_left, height=box_height,
                              fill=s.border_left.color))
        if s.border_bottom:
            ops.append(RectOp(x=x, y=y + box_height - border_bottom, width=width,
                              height=border_bottom, fill=s.border_bottom.color))
        ops.extend(content_ops)

        return y + box_height + s.margin.bottom

    def _resolve(self, run: TextRun, box: BoxStyle, fonts: FontBook) -> _RunFace:
        rs = run.style
        bold = box.bold if rs.bold is None else rs.bold
        italic = box.italic if rs.italic is None else rs.italic
        monospace = box.monospace if rs.monospace is None else rs.monospace
        font_id = fonts.select(bold=bold, italic=italic, monospace=monospace)
        return _RunFace(
            font_id=font_id,
            size=box.font_size if rs.font_size is None else rs.font_size,
            color=box.color if rs.color is None else rs.color,
            bold=bold,
            italic=italic,
            synthetic_bold=fonts.synthetic_bold(font_id, bold),
            monospace=monospace,
            background=rs.background,
            padding=rs.padding,
            radius=rs.radius,
            underline=rs.underline,
        )

    def _layout_runs(
        self,
        runs: tuple[TextRun, ...],
        box: BoxStyle,
        x: float,
        y: float,
        width: float,
        fonts: FontBook,
        ops: list[DrawOp],
    ) -> float:
        """Flow inline runs into lines, return the height used"""
        lines: list[list[_Piece]] = [[]]
        cursor = 0.0

        def place(run_index: int, face: _RunFace, token: str, token_width: float) -> None:
            nonlocal cursor
            line = lines[-1]
            if line and line[-1].run_index == run_index:
                line[-1].text += token
                line[-1].width += token_width
                cursor += token_width
            else:
                line.append(_Piece(run_index, face, token, cursor + face.padding.left, token_width))
                cursor += face.padding.left + token_width + face.padding.right

        def extra(run_index: int, face: _RunFace) -> float:
            line = lines[-1]
            if line and line[-1].run_index == run_index:
                return 0.0
            return face.padding.horizontal

        for run_index, run in enumerate(runs):
            face = self._resolve(run, box, fonts)
            for token in TOKEN_PATTERN.findall(run.text):
                is_space = token.isspace()
                if is_space and not lines[-1]:
                    continue

                token_width = fonts.measure(token, face.font_id, face.size)
                if cursor + extra(run_index, face) + token_width <= width:
                    place(run_index, face, token, token_width)
                    continue

                if is_space:
                    lines.append([])
                    cursor = 0.0
                    continue

                if lines[-1]:
                    lines.append([])
                    cursor = 0.0

                if face.padding.horizontal + token_width <= width:
                    place(run_index, face, token, token_width)
                    continue

                # Word wider than the line, break it by character
                for char in token:
                    char_width = fonts.measure(char, face.font_id, face.size)
                    if lines[-1] and cursor + extra(run_index, face) + char_width > width:
                        lines.append([])
                        cursor = 0.0
                    place(run_index, face, char, char_width)

        top = y
        for line in lines:
            if not line:
                continue
            size = max(piece.face.size for piece in line)
            line_height = size * box.line_height
            baseline = top + (line_height - size) / 2 + size * ASCENT_RATIO
            for piece in line:
                self._emit_piece(piece, x, baseline, ops)
            top += line_height

        return top - y

    def _emit_piece(self, piece: _Piece, x: float, baseline: float, ops: list[DrawOp]) -> None:
        face = piece.face
        left = x + piece.x
        if face.background:
            em_top = baseline - face.size * ASCENT_RATIO
            ops.append(RectOp(
                x=left - face.padding.left,
                y=em_top - face.padding.top,
                width=piece.width + face.padding.horizontal,
                height=face.size + face.padding.vertical,
                fill=face.background,
                radius=face.radius,
            ))
        ops.append(TextOp(
            x=left,
            y=baseline,
            text=piece.text,
            font_id=face.font_id,
            size=face.size,
            fill=face.color,
            bold=face.bold,
            italic=face.italic,
            monospace=face.monospace,
            synthetic_bold=face.synthetic_bold,
        ))
        if face.underline:
            underline_y = baseline + max(1.0, face.size / 10)
            ops.append(LineOp(x1=left, y1=underline_y, x2=left + piece.width,
                              y2=underline_y, stroke=face.color,
                              width=max(1.0, face.size / 16)))

    def _layout_preformatted(
        self,
        text: str,
        box: BoxStyle,
        x: float,
        y: float,
        width: float,
        fonts: FontBook,
        ops: list[DrawOp],
    ) -> float:
        """Lay out verbatim text line by line, return the height used"""
        font_id = fonts.select(bold=box.bold, italic=box.italic, monospace=box.monospace)
        size = box.font_size
        line_height = size * box.line_height

        rows: list[str] = []
        for raw in text.split("\n"):
            line = raw.rstrip("\r").expandtabs(TAB_SIZE)
            if fonts.measure(line, font_id, size) <= width:
                rows.append(line)
                continue
            row = ""
            for char in line:
                if row and fonts.measure(row + char, font_id, size) > width:
                    rows.append(row)
                    row = ""
                row += char
            rows.append(row)

        synthetic_bold = fonts.synthetic_bold(font_id, box.bold)
        for index, row in enumerate(rows):
            if not row.strip():
                continue
            top = y + index * line_height
            ops.append(TextOp(
                x=x,
                y=top + (line_height - size) / 2 + size * ASCENT_RATIO,
                text=row,
                font_id=font_id,
                size=size,
                fill=box.color,
                bold=box.bold,
                italic=box.italic,
                monospace=box.monospace,
                synthetic_bold=synthetic_bold,
            ))

        return len(rows) * line_height
