"""
Block node definitions.

Every block is a frozen tagged variant discriminated on ``kind``.
Headings, paragraphs, quotes and list items carry inline spans; a code
block carries exactly one TextSpan holding its verbatim text; a
horizontal rule carries nothing.
"""

from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator

from .types import BlockKind
from .spans import InlineSpan, TextSpan


class BaseBlock(BaseModel):
    """Base class for all block nodes"""

    model_config = {
        "frozen": True,
    }


class HeadingBlock(BaseBlock):
    """ATX heading, level 1 to 6"""

    kind: Literal[BlockKind.HEADING] = BlockKind.HEADING
    level: int = Field(ge=1, le=6)
    content: tuple[InlineSpan, ...] = ()


class ParagraphBlock(BaseBlock):
    """Single line of prose"""

    kind: Literal[BlockKind.PARAGRAPH] = BlockKind.PARAGRAPH
    content: tuple[InlineSpan, ...] = ()


class BlockquoteBlock(BaseBlock):
    """Single ``>`` line"""

    kind: Literal[BlockKind.BLOCKQUOTE] = BlockKind.BLOCKQUOTE
    content: tuple[InlineSpan, ...] = ()


class ListItem(BaseModel):
    """One list entry, inline content only (no nested blocks)"""

    content: tuple[InlineSpan, ...] = ()

    model_config = {
        "frozen": True,
    }


class ListBlock(BaseBlock):
    """Run of consecutive list lines, any marker mix"""

    kind: Literal[BlockKind.LIST] = BlockKind.LIST
    items: tuple[ListItem, ...] = ()


class CodeBlock(BaseBlock):
    """Fenced code block"""

    kind: Literal[BlockKind.CODE_BLOCK] = BlockKind.CODE_BLOCK
    content: tuple[TextSpan, ...]
    language: Optional[str] = None

    @field_validator("content")
    @classmethod
    def _single_span(cls, value: tuple[TextSpan, ...]) -> tuple[TextSpan, ...]:
        if len(value) != 1:
            raise ValueError("code block content must hold exactly one text span")
        return value

    @classmethod
    def from_lines(cls, lines: list[str], language: Optional[str] = None) -> "CodeBlock":
        """Build a code block from raw lines, joined with line feeds"""
        return cls(content=(TextSpan(content="\n".join(lines)),), language=language)

    @property
    def text(self) -> str:
        """Verbatim code text"""
        return self.content[0].content


class HorizontalRuleBlock(BaseBlock):
    """Thematic break"""

    kind: Literal[BlockKind.HORIZONTAL_RULE] = BlockKind.HORIZONTAL_RULE


Block = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        BlockquoteBlock,
        ListBlock,
        CodeBlock,
        HorizontalRuleBlock,
    ],
    Field(discriminator="kind"),
]
