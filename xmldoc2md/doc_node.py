"""Documentation-comment trees: text runs and tagged elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class DocText:
    """A run of character data."""

    text: str


@dataclass(frozen=True)
class DocElement:
    """A tagged node with attributes and ordered children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[DocNode, ...] = ()

    @property
    def text(self) -> str:
        """Concatenated text of every descendant, in document order."""
        return "".join(_iter_text(self))

    @property
    def nodes(self) -> tuple[DocNode, ...]:
        """Child nodes (text runs and elements)."""
        return self.children

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return an attribute value."""
        return self.attributes.get(name, default)

    def find(self, tag: str) -> DocElement | None:
        """Return the first child element with the given tag."""
        return next(self._iter_elements(tag), None)

    def findall(self, tag: str) -> list[DocElement]:
        """Return all child elements with the given tag."""
        return list(self._iter_elements(tag))

    def _iter_elements(self, tag: str) -> Iterator[DocElement]:
        for child in self.children:
            if isinstance(child, DocElement) and child.tag == tag:
                yield child


DocNode = Union[DocText, DocElement]


def _iter_text(node: DocNode) -> Iterator[str]:
    if isinstance(node, DocText):
        yield node.text
        return
    for child in node.children:
        yield from _iter_text(child)


def from_xml(element: ET.Element) -> DocElement:
    """Convert an ElementTree element, keeping text and tails interleaved."""
    children: list[DocNode] = []
    if element.text:
        children.append(DocText(element.text))
    for child in element:
        children.append(from_xml(child))
        if child.tail:
            children.append(DocText(child.tail))
    return DocElement(
        tag=str(element.tag),
        attributes=dict(element.attrib),
        children=tuple(children),
    )


def parse_fragment(xml: str) -> DocElement:
    """Parse a standalone XML fragment such as ``<summary>...</summary>``."""
    return from_xml(ET.fromstring(xml))
