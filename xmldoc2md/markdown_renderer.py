"""Serialize the document model to Markdown text."""

from xmldoc2md.markdown_model import (
    Block,
    CodeBlock,
    Document,
    Emphasis,
    Header,
    HorizontalRule,
    Inline,
    InlineCode,
    InlineRun,
    Link,
    ListBlock,
    Paragraph,
    Table,
    Text,
)

_ALIGNMENT_MARKERS = {
    "left": "---",
    "right": "--:",
    "center": ":-:",
}


def format_chevrons(text: str) -> str:
    """Escape generic chevrons so they survive HTML rendering."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def table_format(text: str) -> str:
    """Join the non-blank lines of rendered Markdown into a single table cell."""
    lines = text.replace("\r\n", "\n").split("\n")
    return "".join(line for line in lines if line.strip())


def md_codeblock(lang: str, code: str) -> str:
    """Generate a Markdown code block."""
    return f"```{lang}\n{code.rstrip()}\n```"


def render_inline(element: Inline) -> str:
    """Render an inline element to Markdown."""
    if isinstance(element, InlineRun):
        return "".join(render_inline(e) for e in element.elements)
    if isinstance(element, Text):
        return element.text
    if isinstance(element, InlineCode):
        return f"`{element.code}`"
    if isinstance(element, Emphasis):
        return f"**{render_inline(element.content)}**"
    if isinstance(element, Link):
        return f"[{render_inline(element.text)}]({element.url})"
    msg = f"Unsupported inline element: {type(element).__name__}"
    raise TypeError(msg)


def _render_list(block: ListBlock) -> str:
    out = []
    for i, item in enumerate(block.items, start=1):
        marker = f"{i}." if block.ordered else "-"
        out.append(f"{marker} {render_inline(item)}")
    return "\n".join(out)


def _render_table(block: Table) -> str:
    headers = [cell.text for cell in block.header]
    markers = [_ALIGNMENT_MARKERS.get(cell.alignment, "---") for cell in block.header]
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(markers) + " |",
    ]
    out.extend(
        "| " + " | ".join(render_inline(c) for c in row) + " |" for row in block.rows
    )
    return "\n".join(out)


def render_block(block: Block) -> str:
    """Render a block element to Markdown, without a trailing newline."""
    if isinstance(block, Header):
        return f"{'#' * block.level} {render_inline(block.content)}"
    if isinstance(block, Paragraph):
        if block.is_composite:
            # Sub-blocks of a converted doc tree stay one insertable unit.
            rendered = (render_block(b) for b in block.content)
            return "\n".join(r for r in rendered if r)
        # Doc comment text keeps the indentation of the source around it
        return render_inline(block.content).strip()
    if isinstance(block, CodeBlock):
        return md_codeblock(block.language, block.code)
    if isinstance(block, ListBlock):
        return _render_list(block)
    if isinstance(block, Table):
        return _render_table(block)
    if isinstance(block, HorizontalRule):
        return "---"
    msg = f"Unsupported block element: {type(block).__name__}"
    raise TypeError(msg)


def render_markdown(document: Document) -> str:
    """Render a whole document, separating blocks with a blank line."""
    parts = [render_block(b) for b in document.blocks]
    text = "\n\n".join(p for p in parts if p)
    return text.rstrip() + "\n" if text else ""
