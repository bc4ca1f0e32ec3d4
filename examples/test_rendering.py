"""
Test fonts, BoxLayoutEngine, VectorScene and PillowRasterizer
"""

import io

import pytest
from PIL import Image, ImageFont
from pydantic import ValidationError

from markpng.errors import FontLoadError, RenderError
from markpng.layout import PresentationMapper
from markpng.rendering import (
    DEFAULT_FACE,
    BoxLayoutEngine,
    FitTo,
    FontBook,
    FontConfig,
    LineOp,
    PillowRasterizer,
    RectOp,
    TextOp,
)
from markpng.schemas import Document


def _default_font_bytes() -> bytes:
    """Raw bytes of Pillow's bundled FreeType face"""
    font = ImageFont.load_default(size=16)
    data = getattr(font, "font_bytes", None)
    if not isinstance(font, ImageFont.FreeTypeFont) or not data:
        pytest.skip("Pillow built without FreeType")
    return data


def _scene(markdown: str, width: int = 800, height: int = 600, fonts: FontBook = None):
    root = PresentationMapper().map(Document.from_markdown(markdown))
    return BoxLayoutEngine().layout(root, width, height, fonts or FontBook())


def _texts(scene) -> list[TextOp]:
    return [op for op in scene.ops if isinstance(op, TextOp)]


# ===== Fonts =====

def test_font_config_needs_one_source():
    with pytest.raises(ValidationError):
        FontConfig(name="Nothing")
    with pytest.raises(ValidationError):
        FontConfig(name="Both", data=b"x", path="x.ttf")


def test_missing_font_file(tmp_path):
    with pytest.raises(FontLoadError) as exc_info:
        FontBook([FontConfig(name="Ghost", path=tmp_path / "missing.ttf")])
    assert exc_info.value.name == "Ghost"


def test_invalid_font_data():
    with pytest.raises(FontLoadError):
        FontBook([FontConfig(name="Garbage", data=b"definitely not a font")])


def test_default_face_without_fonts():
    book = FontBook()
    face = book.select(bold=True, italic=False, monospace=False)
    assert face == DEFAULT_FACE
    assert book.synthetic_bold(face, True)
    assert not book.synthetic_bold(face, False)
    assert book.measure("hello", face, 20) > 0
    assert book.measure("", face, 20) == 0
    assert book.names == []


def test_face_selection():
    data = _default_font_bytes()
    book = FontBook([
        FontConfig(name="Regular", data=data),
        FontConfig(name="Bold", data=data, weight=700),
        FontConfig(name="Italic", data=data, style="italic"),
        FontConfig(name="Mono", data=data, monospace=True),
    ])

    assert book.names == ["Regular", "Bold", "Italic", "Mono"]
    assert book.select(bold=False, italic=False, monospace=False) == 0
    assert book.select(bold=True, italic=False, monospace=False) == 1
    assert book.select(bold=False, italic=True, monospace=False) == 2
    assert book.select(bold=False, italic=False, monospace=True) == 3
    assert not book.synthetic_bold(1, True)
    assert book.synthetic_bold(0, True)


def test_fonts_from_path(tmp_path):
    font_path = tmp_path / "face.ttf"
    font_path.write_bytes(_default_font_bytes())
    book = FontBook([FontConfig(name="Face", path=font_path)])
    assert book.measure("abc", 0, 24) > book.measure("abc", 0, 12)


# ===== Layout =====

def test_scene_has_requested_size():
    scene = _scene("# Title\n\nHello **world**")

    assert scene.width == 800
    assert scene.height == 600
    background = scene.ops[0]
    assert isinstance(background, RectOp)
    assert background.fill == "#f9f9f9"
    assert (background.width, background.height) == (800, 600)


def test_text_is_laid_out_in_order():
    scene = _scene("# Title\n\nHello **world**")
    texts = _texts(scene)

    assert texts[0].text == "Title"
    assert texts[0].size == 48
    assert texts[0].bold
    assert texts[1].text.strip() == "Hello"
    assert texts[2].text == "world"
    assert texts[2].bold
    # Same line, left to right
    assert texts[1].y == texts[2].y
    assert texts[2].x > texts[1].x
    # Heading sits above the paragraph
    assert texts[0].y < texts[1].y


def test_heading_border():
    scene = _scene("# Title")
    borders = [op for op in scene.ops if isinstance(op, RectOp) and op.fill == "#4299e1"]
    assert len(borders) == 1
    assert borders[0].height == 4


def test_paragraph_wraps_at_width():
    scene = _scene("word " * 60, width=300)
    rows = {op.y for op in _texts(scene)}
    assert len(rows) > 1
    for op in _texts(scene):
        assert op.x >= 20


def test_long_word_is_broken():
    scene = _scene("x" * 300, width=200)
    texts = _texts(scene)
    assert len(texts) > 1
    assert "".join(op.text for op in texts) == "x" * 300


def test_code_block_keeps_lines():
    scene = _scene("```py\nline one\n\n    line three\n```")
    texts = _texts(scene)

    assert [op.text for op in texts] == ["line one", "    line three"]
    assert all(op.monospace for op in texts)
    assert all(op.fill == "#e2e8f0" for op in texts)
    assert texts[1].y > texts[0].y
    assert any(isinstance(op, RectOp) and op.fill == "#1a202c" for op in scene.ops)


def test_inline_decorations():
    scene = _scene("see `code` and [docs](http://x)")

    code_background = [op for op in scene.ops if isinstance(op, RectOp) and op.fill == "#f1f5f9"]
    assert len(code_background) == 1
    underlines = [op for op in scene.ops if isinstance(op, LineOp)]
    assert len(underlines) == 1
    assert underlines[0].stroke == "#4299e1"


def test_blockquote_and_rule_decorations():
    scene = _scene("> quoted\n\n---")
    fills = [op.fill for op in scene.ops if isinstance(op, RectOp)]
    assert "#e6f3ff" in fills  # quote background
    assert "#e2e8f0" in fills  # rule


def test_invalid_canvas_size():
    root = PresentationMapper().map(Document.from_markdown("x"))
    with pytest.raises(RenderError):
        BoxLayoutEngine().layout(root, 0, 400, FontBook())


def test_svg_export():
    svg = _scene("a < b & **c**").to_svg()

    assert svg.startswith("<svg")
    assert svg.rstrip().endswith("</svg>")
    assert 'width="800"' in svg
    assert "a &lt; b &amp; " in svg
    assert 'font-weight="bold"' in svg


# ===== Rasterizer =====

def test_rasterize_fit_width():
    scene = _scene("# Title\n\nSome text")
    png = PillowRasterizer().render(scene, FontBook(), fit_to=FitTo(mode="width", value=400))

    assert png.startswith(b"\x89PNG")
    image = Image.open(io.BytesIO(png))
    assert image.size == (400, 300)


def test_rasterize_other_modes():
    scene = _scene("text", width=200, height=100)
    rasterizer = PillowRasterizer()

    original = Image.open(io.BytesIO(rasterizer.render(scene, FontBook())))
    assert original.size == (200, 100)

    zoomed = Image.open(io.BytesIO(rasterizer.render(scene, FontBook(), fit_to=FitTo(mode="zoom", value=2))))
    assert zoomed.size == (400, 200)

    by_height = Image.open(io.BytesIO(rasterizer.render(scene, FontBook(), fit_to=FitTo(mode="height", value=50))))
    assert by_height.size == (100, 50)


def test_background_colour_is_applied():
    scene = _scene("", width=100, height=100)
    scene.ops.clear()
    png = PillowRasterizer().render(scene, FontBook(), background="#ff0000")
    image = Image.open(io.BytesIO(png)).convert("RGB")
    assert image.getpixel((50, 50)) == (255, 0, 0)


def test_unsupported_fit_mode():
    scene = _scene("text")
    with pytest.raises(RenderError):
        PillowRasterizer().render(scene, FontBook(), fit_to=FitTo(mode="cover", value=100))


def test_non_positive_fit_value():
    scene = _scene("text")
    with pytest.raises(RenderError):
        PillowRasterizer().render(scene, FontBook(), fit_to=FitTo(mode="width", value=0))


def test_invalid_background():
    scene = _scene("text")
    with pytest.raises(RenderError):
        PillowRasterizer().render(scene, FontBook(), background="not-a-colour")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
