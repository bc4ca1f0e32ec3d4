"""
Canvas height estimation

The estimate only sizes the canvas handed to the layout engine. It is a
calibrated heuristic over block structure, not a text measurement.
"""

import math
from typing import Sequence, Union, assert_never

from .style import DEFAULT_STYLE, HeightMetrics, StyleSheet
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
from ..schemas.spans import InlineSpan
from ..utils.logger import logger


def _text_length(spans: Sequence[InlineSpan]) -> int:
    return sum(len(span.content) for span in spans)


def _wrapped_lines(spans: Sequence[InlineSpan], chars_per_line: int) -> int:
    return max(1, math.ceil(_text_length(spans) / chars_per_line))


class HeightEstimator:
    """
    Deterministic pixel-height estimate for a parsed document

    Starts from the container base height, adds a fixed increment per
    block kind, rounds to whole pixels and never goes below the minimum
    canvas height.

    Usage:
        estimator = HeightEstimator()
        height = estimator.estimate(document)
    """

    def __init__(self, style: StyleSheet = DEFAULT_STYLE):
        self.metrics: HeightMetrics = style.metrics

    def estimate(self, blocks: Union[Document, Sequence[Block]]) -> int:
        """
        Estimate the canvas height

        Args:
            blocks: Parsed document or its blocks

        Returns:
            Height in pixels, at least the configured minimum
        """
        if isinstance(blocks, Document):
            blocks = blocks.blocks

        height = self.metrics.base
        for block in blocks:
            height += self.block_height(block)

        result = max(round(height), math.ceil(self.metrics.minimum))
        logger.debug(f"Estimated height {result}px for {len(blocks)} blocks")
        return result

    def block_height(self, block: Block) -> float:
        """Height increment contributed by one block"""
        m = self.metrics

        if isinstance(block, HeadingBlock):
            if block.level == 1:
                return m.heading_1
            if block.level == 2:
                return m.heading_2
            return m.heading_3

        elif isinstance(block, ParagraphBlock):
            lines = _wrapped_lines(block.content, m.paragraph_chars_per_line)
            return lines * m.paragraph_line + m.paragraph_margin

        elif isinstance(block, BlockquoteBlock):
            lines = _wrapped_lines(block.content, m.blockquote_chars_per_line)
            return lines * m.blockquote_line + m.blockquote_padding + m.blockquote_margin

        elif isinstance(block, ListBlock):
            return len(block.items) * m.list_item + m.list_margin

        elif isinstance(block, CodeBlock):
            lines = max(1, len(block.text.split("\n")))
            return lines * m.code_line + m.code_padding + m.code_margin

        elif isinstance(block, HorizontalRuleBlock):
            return m.horizontal_rule

        else:
            assert_never(block)


def estimate(blocks: Union[Document, Sequence[Block]], style: StyleSheet = DEFAULT_STYLE) -> int:
    """Estimate the canvas height of parsed blocks"""
    return HeightEstimator(style).estimate(blocks)
