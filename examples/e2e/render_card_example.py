"""Complete E2E Example: Markdown -> Blocks -> Height -> Visual tree -> PNG

This script demonstrates the complete workflow:
1. Parse markdown into blocks with BlockParser
2. Estimate the image height
3. Map blocks onto the styled visual tree
4. Lay out and rasterize to PNG (plus an SVG of the same scene)

Usage:
    python examples/e2e/render_card_example.py

    # Or render your own file with your own font:
    python examples/e2e/render_card_example.py --md notes.md --font /path/to/NotoSans-Regular.ttf
"""

import argparse
import asyncio
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from markpng import FontConfig, MarkdownRenderer

console = Console()

SAMPLE_MARKDOWN = """# 🎨 Hello, world

This is a **markdown** text with some *italic* and a [link](https://example.com).

> This is a quote block showing the styled look.

## Features
- Emoji support 🌟
- Clean typography
- Modern layout

Inline code: `console.log('Hello World!')`

### Code sample

```javascript
function hello() {
    console.log("Hello, World!");
    return "Beautiful Markdown";
}
```

---

**Thanks for reading!** 🎉
"""


async def main():
    ap = argparse.ArgumentParser(description="Render a markdown card")
    ap.add_argument("--md", type=Path, help="Markdown file (default: built-in sample)")
    ap.add_argument("--font", type=Path, help="Optional TTF/OTF font file")
    ap.add_argument("--width", type=int, default=1000)
    ap.add_argument("--out", type=Path, default=Path("output/card.png"))
    args = ap.parse_args()

    markdown = args.md.read_text(encoding="utf-8") if args.md else SAMPLE_MARKDOWN
    fonts = [FontConfig(name=args.font.stem, path=args.font)] if args.font else []

    console.print(Panel.fit("[bold cyan]markpng E2E example[/bold cyan]"))

    renderer = MarkdownRenderer(fonts=fonts, width=args.width)

    # Step 1-3: core pipeline
    plan = renderer.prepare(markdown)

    table = Table(title="Parsed blocks")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Role")
    for i, (block, box) in enumerate(zip(plan.document.blocks, plan.tree.children)):
        table.add_row(str(i), block.kind.value, box.role)
    console.print(table)
    console.print(f"Estimated height: [bold]{plan.height}px[/bold]")
    console.print(f"Font family: [dim]{plan.tree.font_family}[/dim]")

    # Step 4: layout + rasterize
    png = await renderer.render(markdown)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(png)

    svg_path = args.out.with_suffix(".svg")
    svg_path.write_text(renderer.render_svg(markdown), encoding="utf-8")

    console.print(f"\n[green]✓[/green] PNG: {args.out} ({len(png)} bytes)")
    console.print(f"[green]✓[/green] SVG: {svg_path}")


if __name__ == "__main__":
    asyncio.run(main())
