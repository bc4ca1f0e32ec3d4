"""
Presentation mapping - block and inline nodes to styled visual boxes
"""

from typing import Optional, Sequence, assert_never
from pydantic import BaseModel, Field

from .style import DEFAULT_STYLE, BoxStyle, RunStyle, StyleSheet
from ..schemas.blocks import (
    Block,
    HeadingBlock,
    ParagraphBlock,
    BlockquoteBlock,
    ListBlock,
    CodeBlock,
    HorizontalRuleBlock,
)
from ..schemas.document import Document
from ..schemas.spans import (
    InlineSpan,
    TextSpan,
    BoldSpan,
    ItalicSpan,
    CodeSpan,
    LinkSpan,
)


class TextRun(BaseModel):
    """Styled inline text inside a visual box"""

    text: str
    style: RunStyle = Field(default_factory=RunStyle)
    url: Optional[str] = None

    model_config = {"frozen": True}


class VisualBox(BaseModel):
    """
    Node of the visual tree handed to the layout engine

    A box holds either inline runs or child boxes (lists, the root), or
    nothing at all when its style has a fixed height.
    """

    key: str
    role: str
    style: BoxStyle
    runs: tuple[TextRun, ...] = ()
    children: tuple["VisualBox", ...] = ()
    font_family: Optional[str] = None  # set on the root only

    model_config = {"frozen": True}


VisualBox.model_rebuild()


class PresentationMapper:
    """
    Maps a parsed document to a tree of styled boxes

    Each block kind has exactly one style in the style sheet; headings
    deeper than level 3 reuse the level 3 style.

    Usage:
        mapper = PresentationMapper()
        root = mapper.map(document, font_family="Noto Sans, Arial, sans-serif")
    """

    def __init__(self, style: StyleSheet = DEFAULT_STYLE):
        self.style = style

    def font_family(self, font_names: Sequence[str]) -> str:
        """
        Build the CSS font family list

        Args:
            font_names: Names of the configured fonts, in priority order

        Returns:
            Names followed by the fallback families
        """
        names = ", ".join(name for name in font_names if name)
        if names:
            return f"{names}, {self.style.fallback_fonts}"
        return self.style.fallback_fonts

    def map(self, document: Document, font_family: Optional[str] = None) -> VisualBox:
        """
        Build the visual tree of a document

        Args:
            document: Parsed document
            font_family: Font family string for the root box

        Returns:
            Root box with one child per block
        """
        children = tuple(
            self.map_block(block, f"component-{index}")
            for index, block in enumerate(document.blocks)
        )
        return VisualBox(
            key="root",
            role="document",
            style=self.style.root,
            children=children,
            font_family=font_family or self.style.fallback_fonts,
        )

    def map_block(self, block: Block, key: str) -> VisualBox:
        """Map one block to its box"""
        style = self.style

        if isinstance(block, HeadingBlock):
            return VisualBox(
                key=key,
                role=f"heading-{block.level}",
                style=style.heading(block.level),
                runs=self.map_spans(block.content),
            )

        elif isinstance(block, ParagraphBlock):
            return VisualBox(
                key=key,
                role="paragraph",
                style=style.paragraph,
                runs=self.map_spans(block.content),
            )

        elif isinstance(block, BlockquoteBlock):
            return VisualBox(
                key=key,
                role="blockquote",
                style=style.blockquote,
                runs=self.map_spans(block.content),
            )

        elif isinstance(block, ListBlock):
            items = tuple(
                VisualBox(
                    key=f"list-item-{index}",
                    role="list-item",
                    style=style.list_item,
                    runs=self.map_spans(item.content),
                )
                for index, item in enumerate(block.items)
            )
            return VisualBox(key=key, role="list", style=style.list_block, children=items)

        elif isinstance(block, CodeBlock):
            return VisualBox(
                key=key,
                role="code-block",
                style=style.code_block,
                runs=(TextRun(text=block.text),),
            )

        elif isinstance(block, HorizontalRuleBlock):
            return VisualBox(key=key, role="horizontal-rule", style=style.horizontal_rule)

        else:
            assert_never(block)

    def map_spans(self, spans: Sequence[InlineSpan]) -> tuple[TextRun, ...]:
        """Map inline spans to styled runs"""
        return tuple(self.map_span(span) for span in spans)

    def map_span(self, span: InlineSpan) -> TextRun:
        """Map one inline span to a run"""
        if isinstance(span, BoldSpan):
            return TextRun(text=span.content, style=self.style.bold)
        elif isinstance(span, ItalicSpan):
            return TextRun(text=span.content, style=self.style.italic)
        elif isinstance(span, CodeSpan):
            return TextRun(text=span.content, style=self.style.inline_code)
        elif isinstance(span, LinkSpan):
            return TextRun(text=span.content, style=self.style.link, url=span.url)
        elif isinstance(span, TextSpan):
            return TextRun(text=span.content)
        else:
            assert_never(span)
