"""
Command line interface: render a markdown file to PNG
"""

import argparse
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .config import RenderSettings
from .converter import MarkdownRenderer
from .errors import MarkpngError
from .rendering.fonts import FontConfig
from .schemas.blocks import CodeBlock, HeadingBlock, ListBlock
from .schemas.document import Document
from .utils.logger import set_level

FONT_OPTION = re.compile(r"^(?P<name>[^=]+)=(?P<path>.+?)(?::(?P<weight>\d+))?(?::(?P<style>normal|italic))?$")

console = Console(stderr=True)


def parse_font(option: str, monospace: bool = False) -> FontConfig:
    """
    Parse a ``NAME=PATH[:WEIGHT[:STYLE]]`` font option

    Raises:
        argparse.ArgumentTypeError: If the option is malformed
    """
    match = FONT_OPTION.match(option)
    if not match:
        raise argparse.ArgumentTypeError(
            f"invalid font '{option}', expected NAME=PATH[:WEIGHT[:STYLE]]"
        )
    return FontConfig(
        name=match.group("name").strip(),
        path=Path(match.group("path")),
        weight=int(match.group("weight") or 400),
        style=match.group("style") or "normal",
        monospace=monospace,
    )


def _parse_mono_font(option: str) -> FontConfig:
    return parse_font(option, monospace=True)


def build_parser(settings: Optional[RenderSettings] = None) -> argparse.ArgumentParser:
    settings = settings or RenderSettings.from_env()

    ap = argparse.ArgumentParser(
        prog="markpng",
        description="Render a markdown document into a PNG image.",
    )
    ap.add_argument("md", type=Path, help="Input markdown file")
    ap.add_argument("out", type=Path, help="Output PNG path")
    ap.add_argument("--width", type=int, default=settings.width,
                    help=f"Image width in pixels (default: {settings.width})")
    ap.add_argument("--font", dest="fonts", action="append", type=parse_font, default=[],
                    metavar="NAME=PATH[:WEIGHT[:STYLE]]",
                    help="Font resource, repeat for more faces (first wins ties)")
    ap.add_argument("--mono-font", dest="mono_fonts", action="append", type=_parse_mono_font,
                    default=[], metavar="NAME=PATH[:WEIGHT[:STYLE]]",
                    help="Monospace font resource for code")
    ap.add_argument("--background", default=settings.background,
                    help=f"Background colour (default: {settings.background})")
    ap.add_argument("--svg", type=Path, help="Also write the laid out scene as SVG")
    ap.add_argument("--tree", action="store_true", help="Print the parsed block tree")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    return ap


def print_tree(document: Document, height: int) -> None:
    """Print parsed blocks with rich"""
    tree = Tree(f"[bold cyan]Document[/bold cyan] ({len(document)} blocks, ~{height}px)")
    for block in document.blocks:
        if isinstance(block, HeadingBlock):
            label = f"[bold]{block.kind.value}[/bold] h{block.level}"
        elif isinstance(block, CodeBlock):
            label = f"[bold]{block.kind.value}[/bold] {escape(block.language or '')}".rstrip()
        else:
            label = f"[bold]{block.kind.value}[/bold]"
        node = tree.add(label)

        if isinstance(block, ListBlock):
            for item in block.items:
                node.add(escape(" ".join(f"{span.kind.value}:{span.content!r}" for span in item.content)))
        elif isinstance(block, CodeBlock):
            node.add(escape(repr(block.text)))
        elif hasattr(block, "content"):
            for span in block.content:
                node.add(escape(f"{span.kind.value}: {span.content!r}"))
    console.print(tree)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = RenderSettings.from_env()
    except ValidationError as e:
        console.print(f"[red]✗ Invalid MARKPNG_* settings:[/red] {escape(str(e))}")
        return 1

    args = build_parser(settings).parse_args(argv)
    if args.debug:
        set_level("DEBUG")

    md_path: Path = args.md
    out_path: Path = args.out

    try:
        text = md_path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]✗ Cannot read {escape(str(md_path))}:[/red] {escape(str(e))}")
        return 1

    try:
        renderer = MarkdownRenderer(
            fonts=[*args.fonts, *args.mono_fonts],
            width=args.width,
            background=args.background,
        )
        plan = renderer.prepare(text)
        if args.tree:
            print_tree(plan.document, plan.height)

        # One font book and one scene serve both outputs
        fonts = renderer.load_fonts()
        scene = renderer.layout(plan, fonts)
        png = renderer.rasterize(scene, fonts)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(png)

        if args.svg:
            args.svg.parent.mkdir(parents=True, exist_ok=True)
            args.svg.write_text(scene.to_svg(), encoding="utf-8")
    except (MarkpngError, ValueError) as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        return 1

    console.print(f"[green]✓[/green] Wrote {escape(str(out_path))} ({args.width}x{plan.height})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
