"""Conversion of documentation-comment trees into the document model.

Nodes map to either inline elements (text, code spans, links) or block
elements (nested paragraphs, code blocks, lists). Inline elements are
accumulated into an open run; a block element closes the run into a
paragraph before it is appended, and a new run starts after it.
"""

import re
from collections.abc import Iterable

from xmldoc2md.doc_node import DocElement, DocNode, DocText
from xmldoc2md.format_code import format_code
from xmldoc2md.markdown_model import (
    LINE_BREAK,
    Block,
    CodeBlock,
    Emphasis,
    Inline,
    InlineCode,
    InlineRun,
    Link,
    ListBlock,
    Paragraph,
    Text,
)
from xmldoc2md.reference_resolver import ReferenceResolver

MULTI_SPACE_RE = re.compile(r"[ ]{2,}")
ORDERED_LIST_TYPE = "number"
TERM_SEPARATOR = " - "


def escape_text(text: str) -> str:
    """Re-escape the XML entities a parser decoded in plain documentation text."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class _RunAccumulator:
    """Two states: an inline run is open, or it is not."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.run: InlineRun | None = None

    def append_inline(self, element: Inline) -> None:
        if self.run is None:
            self.run = InlineRun()
        self.run.append(element)

    def append_block(self, block: Block) -> None:
        self._flush()
        self.blocks.append(block)

    def close(self) -> list[Block]:
        self._flush()
        return self.blocks

    def _flush(self) -> None:
        if self.run is not None:
            self.blocks.append(Paragraph(self.run))
            self.run = None


class DocTreeConverter:
    """Converts documentation nodes into paragraphs, code blocks and lists."""

    def __init__(self, resolver: ReferenceResolver, language: str = "csharp") -> None:
        """Initialize with the resolver used for ``see`` references."""
        if resolver is None:
            msg = "resolver is required"
            raise ValueError(msg)
        self.resolver = resolver
        self.language = language

    def convert_paragraph(self, nodes: Iterable[DocNode] | None) -> Paragraph:
        """Convert a node sequence into one composite paragraph."""
        acc = _RunAccumulator()
        for node in nodes or ():
            element = self.convert_node(node)
            if element is None:
                continue
            if element.is_block:
                acc.append_block(element)
            else:
                acc.append_inline(element)
        return Paragraph(acc.close())

    def convert_inline(self, nodes: Iterable[DocNode] | None) -> InlineRun | None:
        """Convert nodes keeping inline results only; None when there are none."""
        run: InlineRun | None = None
        for node in nodes or ():
            element = self.convert_node(node)
            if element is None or element.is_block:
                continue
            if run is None:
                run = InlineRun()
            run.append(element)
        return run

    def convert_node(self, node: DocNode) -> Inline | Block | None:
        """Convert a single text run or element."""
        if isinstance(node, DocText):
            return Text(escape_text(MULTI_SPACE_RE.sub(" ", node.text)))
        if isinstance(node, DocElement):
            return self.convert_element(node)
        return None

    def convert_element(self, element: DocElement) -> Inline | Block:
        """Convert a tagged element according to its tag name."""
        tag = element.tag
        if tag in {"see", "seealso"}:
            return self._convert_reference(element)
        if tag == "c":
            return InlineCode(element.text)
        if tag == "br":
            return Text(LINE_BREAK)
        if tag in {"para", "example"}:
            return self.convert_paragraph(element.nodes)
        if tag == "code":
            return CodeBlock(self.language, format_code(element.text) or "")
        if tag == "list":
            return self.convert_list(element)
        if tag in {"paramref", "typeparamref"}:
            return InlineCode(element.get("name") or "")
        return Text(element.text)

    def convert_list(self, element: DocElement) -> ListBlock:
        """Convert a ``list`` element; ``type="number"`` makes it ordered."""
        block = ListBlock(ordered=element.get("type") == ORDERED_LIST_TYPE)
        for item in element.findall("item"):
            entry = InlineRun()

            term = item.find("term")
            term_run = self.convert_inline(term.nodes if term is not None else None)
            if term_run is not None:
                entry.append(Emphasis(term_run))

            description = item.find("description")
            description_run = self.convert_inline(
                description.nodes if description is not None else None
            )
            if description_run is not None:
                if term_run is not None:
                    entry.append(TERM_SEPARATOR)
                entry.append(description_run)

            block.add_item(entry)
        return block

    def _convert_reference(self, element: DocElement) -> Inline:
        text = element.text.strip() or None
        langword = element.get("langword")
        if langword and not element.get("cref"):
            return InlineCode(langword)
        cref = element.get("cref")
        href = element.get("href")
        if cref is None and href and "://" in href:
            return Link(Text(text or href), href)
        return self.resolver.resolve(cref or href, text)
