"""
Schema module - spans, blocks and the parsed document.
"""

# Core types
from .types import SpanKind, BlockKind

# Inline spans
from .spans import (
    BaseSpan,
    TextSpan,
    BoldSpan,
    ItalicSpan,
    CodeSpan,
    LinkSpan,
    InlineSpan,
)

# Blocks
from .blocks import (
    BaseBlock,
    HeadingBlock,
    ParagraphBlock,
    BlockquoteBlock,
    ListItem,
    ListBlock,
    CodeBlock,
    HorizontalRuleBlock,
    Block,
)

# Document
from .document import Document

__all__ = [
    # Types
    "SpanKind",
    "BlockKind",
    # Spans
    "BaseSpan",
    "TextSpan",
    "BoldSpan",
    "ItalicSpan",
    "CodeSpan",
    "LinkSpan",
    "InlineSpan",
    # Blocks
    "BaseBlock",
    "HeadingBlock",
    "ParagraphBlock",
    "BlockquoteBlock",
    "ListItem",
    "ListBlock",
    "CodeBlock",
    "HorizontalRuleBlock",
    "Block",
    # Document
    "Document",
]
