"""
Parsing module - block parser and inline scanner
"""

from .inline import InlineScanner, scan
from .blocks import BlockParser, LineCursor, parse

__all__ = [
    "InlineScanner",
    "scan",
    "BlockParser",
    "LineCursor",
    "parse",
]
