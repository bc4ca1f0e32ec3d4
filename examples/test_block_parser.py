"""
Test BlockParser
"""

import pytest
from pydantic import ValidationError

from markpng.parsing.blocks import BlockParser, LineCursor, parse
from markpng.schemas import (
    BlockKind,
    BlockquoteBlock,
    CodeBlock,
    Document,
    HeadingBlock,
    HorizontalRuleBlock,
    ListBlock,
    ParagraphBlock,
    SpanKind,
)


def _text(spans) -> str:
    return "".join(span.content for span in spans)


def test_list_boundary_keeps_next_paragraph():
    """The blank line ends the list and the paragraph after it survives"""
    blocks = parse("- a\n- b\n\nNext paragraph")

    assert len(blocks) == 2
    assert isinstance(blocks[0], ListBlock)
    assert [_text(item.content) for item in blocks[0].items] == ["a", "b"]
    assert isinstance(blocks[1], ParagraphBlock)
    assert _text(blocks[1].content) == "Next paragraph"


def test_list_followed_directly_by_paragraph():
    """The first non-list line is reprocessed, not skipped"""
    blocks = parse("- a\n- b\nafter")

    assert [block.kind for block in blocks] == [BlockKind.LIST, BlockKind.PARAGRAPH]
    assert len(blocks[0].items) == 2
    assert _text(blocks[1].content) == "after"


def test_list_followed_by_heading():
    blocks = parse("* one\n## Next")
    assert [block.kind for block in blocks] == [BlockKind.LIST, BlockKind.HEADING]
    assert blocks[1].level == 2


def test_list_at_end_of_input():
    blocks = parse("intro\n1. x\n2. y")
    assert [block.kind for block in blocks] == [BlockKind.PARAGRAPH, BlockKind.LIST]
    assert [_text(item.content) for item in blocks[1].items] == ["x", "y"]


def test_mixed_list_markers():
    blocks = parse("1. one\n- two\n* three")

    assert len(blocks) == 1
    assert isinstance(blocks[0], ListBlock)
    assert [_text(item.content) for item in blocks[0].items] == ["one", "two", "three"]


def test_ordered_marker_needs_ascii_digits():
    """Only 0-9 start an ordered item; other digit scripts are prose"""
    blocks = parse("١. one\n२. two")
    assert [block.kind for block in blocks] == [BlockKind.PARAGRAPH, BlockKind.PARAGRAPH]
    assert _text(blocks[0].content) == "١. one"

    blocks = parse("10. ten\n9. nine")
    assert [block.kind for block in blocks] == [BlockKind.LIST]
    assert len(blocks[0].items) == 2


def test_list_items_carry_inline_spans():
    blocks = parse("- **bold** item\n- [link](http://x)")
    first, second = blocks[0].items
    assert first.content[0].kind == SpanKind.BOLD
    assert second.content[0].kind == SpanKind.LINK
    assert second.content[0].url == "http://x"


def test_unterminated_code_fence():
    blocks = parse("```js\nconsole.log(1)")

    assert len(blocks) == 1
    block = blocks[0]
    assert isinstance(block, CodeBlock)
    assert block.language == "js"
    assert block.text == "console.log(1)"
    assert len(block.content) == 1


def test_code_fence_is_verbatim():
    """Lines inside a fence never match other rules"""
    markdown = "```\n# not heading\n\n- not list\n    indented\n```\nafter"
    blocks = parse(markdown)

    assert [block.kind for block in blocks] == [BlockKind.CODE_BLOCK, BlockKind.PARAGRAPH]
    assert blocks[0].language is None
    assert blocks[0].text == "# not heading\n\n- not list\n    indented"
    assert _text(blocks[1].content) == "after"


def test_empty_code_block():
    blocks = parse("```python\n```")
    assert len(blocks) == 1
    assert blocks[0].language == "python"
    assert blocks[0].text == ""


def test_heading_levels():
    blocks = parse("# One\n## Two\n###### Six")
    assert [block.level for block in blocks] == [1, 2, 6]
    assert _text(blocks[0].content) == "One"


def test_heading_with_inline_markup():
    blocks = parse("## Hello **world**")
    heading = blocks[0]
    assert isinstance(heading, HeadingBlock)
    assert [span.kind for span in heading.content] == [SpanKind.TEXT, SpanKind.BOLD]


def test_too_many_hashes_is_paragraph():
    blocks = parse("####### too many")

    assert len(blocks) == 1
    assert isinstance(blocks[0], ParagraphBlock)
    assert _text(blocks[0].content) == "####### too many"


def test_hash_without_space_is_paragraph():
    blocks = parse("#hashtag")
    assert isinstance(blocks[0], ParagraphBlock)
    assert _text(blocks[0].content) == "#hashtag"


def test_blockquote_lines_are_independent():
    blocks = parse("> first **quote**\n>second")

    assert len(blocks) == 2
    assert all(isinstance(block, BlockquoteBlock) for block in blocks)
    assert _text(blocks[0].content) == "first quote"
    assert blocks[0].content[1].kind == SpanKind.BOLD
    assert _text(blocks[1].content) == "second"


def test_horizontal_rules():
    blocks = parse("---\n***\n___\n-*_")
    assert len(blocks) == 4
    assert all(isinstance(block, HorizontalRuleBlock) for block in blocks)


def test_rule_needs_whole_line():
    blocks = parse("--- not a rule")
    assert isinstance(blocks[0], ParagraphBlock)


def test_blank_input():
    assert parse("") == []
    assert parse("\n\n   \n\t\n") == []


def test_lines_are_trimmed():
    blocks = parse("   # Title   \r\n  text  \r\n")
    assert [block.kind for block in blocks] == [BlockKind.HEADING, BlockKind.PARAGRAPH]
    assert _text(blocks[0].content) == "Title"
    assert _text(blocks[1].content) == "text"


def test_each_parse_gets_its_own_cursor():
    parser = BlockParser()
    first = parser.parse("- a\n- b\n\nNext")
    parser.parse("```\nunterminated")
    assert parser.parse("- a\n- b\n\nNext") == first


def test_cursor_rewind():
    cursor = LineCursor.from_text("a\nb")
    cursor.advance()
    cursor.advance()
    assert not cursor.has_line()
    cursor.rewind()
    assert cursor.current == "b"


def test_full_document():
    """Realistic document with every block kind"""
    markdown = """# 🎨 Hello

This is a **markdown** text with some *italic* and a [link](https://example.com).

> A quote with `code`.

## Features
- first
- second

```javascript
function hello() {
    return "Beautiful Markdown";
}
```

---

**Thanks!**
"""
    doc = Document.from_markdown(markdown)

    assert [block.kind for block in doc.blocks] == [
        BlockKind.HEADING,
        BlockKind.PARAGRAPH,
        BlockKind.BLOCKQUOTE,
        BlockKind.HEADING,
        BlockKind.LIST,
        BlockKind.CODE_BLOCK,
        BlockKind.HORIZONTAL_RULE,
        BlockKind.PARAGRAPH,
    ]
    assert doc.blocks[5].language == "javascript"
    assert doc.blocks[5].text.splitlines()[1] == '    return "Beautiful Markdown";'
    assert len(doc) == 8


def test_document_is_immutable():
    doc = Document.from_markdown("# Title")
    with pytest.raises(ValidationError):
        doc.blocks = ()
    with pytest.raises(ValidationError):
        doc.blocks[0].level = 2


if __name__ == "__main__":
    test_list_boundary_keeps_next_paragraph()
    test_list_followed_directly_by_paragraph()
    test_list_followed_by_heading()
    test_list_at_end_of_input()
    test_mixed_list_markers()
    test_ordered_marker_needs_ascii_digits()
    test_list_items_carry_inline_spans()
    test_unterminated_code_fence()
    test_code_fence_is_verbatim()
    test_empty_code_block()
    test_heading_levels()
    test_heading_with_inline_markup()
    test_too_many_hashes_is_paragraph()
    test_hash_without_space_is_paragraph()
    test_blockquote_lines_are_independent()
    test_horizontal_rules()
    test_rule_needs_whole_line()
    test_blank_input()
    test_lines_are_trimmed()
    test_each_parse_gets_its_own_cursor()
    test_cursor_rewind()
    test_full_document()
    test_document_is_immutable()
    print("✅ ALL TESTS PASSED!")
