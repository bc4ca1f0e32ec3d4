"""
Inline scanner - turns one line of text into inline spans
"""

import re

from ..schemas.spans import (
    InlineSpan,
    TextSpan,
    BoldSpan,
    ItalicSpan,
    CodeSpan,
    LinkSpan,
)

# Anchored at the scan position by Pattern.match(text, pos)
BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^*]+)\*")
CODE_PATTERN = re.compile(r"`([^`]+)`")
SPECIAL_CHARS = re.compile(r"[*`\[]")


class InlineScanner:
    """
    Left-to-right scanner over the unconsumed suffix of a line

    Markup is tried in fixed priority order at the current position:
    bold, italic, inline code, link. Anything else becomes text, either
    up to the next special character or, when the special character
    itself starts no markup, that single character.

    Links (``[text](url)``) are located with remembered positions of the
    next ``]`` and ``)`` instead of a regex, so runs of unclosed brackets
    are scanned once and the whole scan stays linear in the input.

    Example:
        >>> [s.kind.value for s in InlineScanner().scan("**a** and [b](c)")]
        ['bold', 'text', 'link']
    """

    def scan(self, text: str) -> list[InlineSpan]:
        """
        Scan text into spans

        Args:
            text: A single line (or segment) of markdown

        Returns:
            Spans in document order; adjacent text spans are not merged
        """
        spans: list[InlineSpan] = []
        pos = 0
        end = len(text)
        # First "]" after the scan position, first ")" after that "](" (end: none)
        close_bracket = -1
        close_paren = -1

        while pos < end:
            match = BOLD_PATTERN.match(text, pos)
            if match:
                spans.append(BoldSpan(content=match.group(1)))
                pos = match.end()
                continue

            match = ITALIC_PATTERN.match(text, pos)
            if match:
                spans.append(ItalicSpan(content=match.group(1)))
                pos = match.end()
                continue

            match = CODE_PATTERN.match(text, pos)
            if match:
                spans.append(CodeSpan(content=match.group(1)))
                pos = match.end()
                continue

            if text[pos] == "[":
                if close_bracket <= pos:
                    close_bracket = text.find("]", pos)
                    if close_bracket == -1:
                        close_bracket = end
                if close_bracket > pos + 1 and text.startswith("(", close_bracket + 1):
                    if close_paren < close_bracket + 2:
                        close_paren = text.find(")", close_bracket + 2)
                        if close_paren == -1:
                            close_paren = end
                    if close_bracket + 2 < close_paren < end:
                        spans.append(LinkSpan(
                            content=text[pos + 1:close_bracket],
                            url=text[close_bracket + 2:close_paren],
                        ))
                        pos = close_paren + 1
                        continue

            special = SPECIAL_CHARS.search(text, pos)
            if special is None:
                spans.append(TextSpan(content=text[pos:]))
                break

            if special.start() > pos:
                spans.append(TextSpan(content=text[pos:special.start()]))
                pos = special.start()
            else:
                # Unpaired markup character, keep it literally
                spans.append(TextSpan(content=text[pos]))
                pos += 1

        return spans


def scan(text: str) -> list[InlineSpan]:
    """Scan a line of text into inline spans"""
    return InlineScanner().scan(text)
