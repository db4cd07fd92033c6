"""Document model handed to the Markdown renderer.

Inline elements form runs of text-flow content; block elements are the
paragraph-level structure of a page. Every element carries a class-level
``is_block`` tag so that converters can route it without type tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

LINE_BREAK = "<br>"


# -----------------------------
# Inline elements
# -----------------------------


@dataclass
class Text:
    """Plain text."""

    is_block: ClassVar[bool] = False

    text: str


@dataclass
class InlineCode:
    """A code span."""

    is_block: ClassVar[bool] = False

    code: str


@dataclass
class Link:
    """A hyperlink whose visible text is itself an inline element."""

    is_block: ClassVar[bool] = False

    text: Inline
    url: str


@dataclass
class Emphasis:
    """Strongly emphasized inline content."""

    is_block: ClassVar[bool] = False

    content: Inline


@dataclass
class InlineRun:
    """An ordered sequence of inline elements."""

    is_block: ClassVar[bool] = False

    elements: list[Inline] = field(default_factory=list)

    def append(self, element: Inline | str) -> InlineRun:
        """Append an inline element (strings become ``Text``)."""
        if isinstance(element, str):
            element = Text(element)
        self.elements.append(element)
        return self

    def __bool__(self) -> bool:
        return bool(self.elements)


Inline = Union[Text, InlineCode, Link, Emphasis, InlineRun]


# -----------------------------
# Block elements
# -----------------------------


@dataclass
class Header:
    """A section header."""

    is_block: ClassVar[bool] = True

    level: int
    content: Inline


@dataclass
class Paragraph:
    """A paragraph of inline content, or a composite of sub-blocks."""

    is_block: ClassVar[bool] = True

    content: InlineRun | list[Block]

    @property
    def is_composite(self) -> bool:
        """Return True when the paragraph wraps a block sequence."""
        return isinstance(self.content, list)


@dataclass
class CodeBlock:
    """A fenced code block."""

    is_block: ClassVar[bool] = True

    language: str
    code: str


@dataclass
class ListBlock:
    """A bulleted or numbered list of inline items."""

    is_block: ClassVar[bool] = True

    items: list[InlineRun] = field(default_factory=list)
    ordered: bool = False

    def add_item(self, item: InlineRun) -> None:
        """Append a list item."""
        self.items.append(item)


@dataclass(frozen=True)
class TableHeaderCell:
    """A table header cell with its column alignment."""

    text: str
    alignment: str = "left"  # left | right | center


@dataclass
class Table:
    """A table with a header row and inline cells."""

    is_block: ClassVar[bool] = True

    header: list[TableHeaderCell]
    rows: list[list[Inline]] = field(default_factory=list)

    def add_row(self, *cells: Inline | str) -> None:
        """Append a row; string cells become ``Text``."""
        self.rows.append([Text(c) if isinstance(c, str) else c for c in cells])


@dataclass
class HorizontalRule:
    """A thematic break."""

    is_block: ClassVar[bool] = True


Block = Union[Header, Paragraph, CodeBlock, ListBlock, Table, HorizontalRule]


def as_inline(content: Inline | str) -> Inline:
    """Wrap a string as ``Text``; pass inline elements through."""
    if isinstance(content, str):
        return Text(content)
    return content


# -----------------------------
# Document
# -----------------------------


@dataclass
class Document:
    """An append-only sequence of blocks."""

    blocks: list[Block] = field(default_factory=list)

    def append_header(self, content: Inline | str, level: int) -> None:
        """Append a header of the given level."""
        self.blocks.append(Header(level=level, content=as_inline(content)))

    def append_paragraph(self, content: Inline | str | list[Block]) -> None:
        """Append a paragraph of inline content or of sub-blocks."""
        if isinstance(content, list):
            self.blocks.append(Paragraph(content))
            return
        inline = as_inline(content)
        if not isinstance(inline, InlineRun):
            inline = InlineRun([inline])
        self.blocks.append(Paragraph(inline))

    def append_code(self, language: str, code: str) -> None:
        """Append a fenced code block."""
        self.blocks.append(CodeBlock(language=language, code=code))

    def append_rule(self) -> None:
        """Append a horizontal rule."""
        self.blocks.append(HorizontalRule())

    def append(self, block: Block | Document) -> None:
        """Append a block, or every block of another document."""
        if isinstance(block, Document):
            self.blocks.extend(block.blocks)
        else:
            self.blocks.append(block)
