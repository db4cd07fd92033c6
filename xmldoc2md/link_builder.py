"""Logic for building links to type pages and member anchors."""

import posixpath

from xmldoc2md.dot_safe import dot_safe
from xmldoc2md.header_slug import header_slug
from xmldoc2md.markdown_model import Inline, Link, Text
from xmldoc2md.member_descriptor import MemberDescriptor
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.type_descriptor import TypeDescriptor

MS_DOCS_ROOT = "https://learn.microsoft.com/dotnet/api"
MS_NAMESPACES = ("System", "Microsoft")


def docs_file_name(type_: TypeDescriptor, structure: str = "flat") -> str:
    """Page path of a type, relative to the output root, without extension."""
    if structure != "tree" or not type_.namespace:
        return dot_safe(type_.full_name)
    ns = type_.namespace
    rest = type_.full_name
    if rest.startswith(f"{ns}."):
        rest = rest[len(ns) + 1 :]
    folders = "/".join(dot_safe(p) for p in ns.split("."))
    return f"{folders}/{dot_safe(rest)}"


def simple_type_name(full_name: str) -> str:
    """Strip namespace, nesting and generic arity from a type name."""
    name = full_name.replace("+", ".").rsplit(".", 1)[-1]
    return name.split("`", 1)[0]


def is_ms_type(full_name: str) -> bool:
    """Check if a type lives in a namespace documented on learn.microsoft.com."""
    root = full_name.split(".", 1)[0]
    return root in MS_NAMESPACES and "." in full_name


def ms_docs_url(full_name: str) -> str:
    """Reference URL of a framework type."""
    return f"{MS_DOCS_ROOT}/{dot_safe(full_name)}"


class LinkBuilder:
    """Builds inline links from the page of ``current`` to other symbols."""

    def __init__(
        self,
        index: MetadataIndex,
        current: TypeDescriptor | None = None,
        *,
        structure: str = "flat",
        no_extension: bool = False,
        no_prefix: bool = False,
    ) -> None:
        """Initialize with the index and the page links are written from."""
        self.index = index
        self.current = current
        self.structure = structure
        self.no_extension = no_extension
        self.no_prefix = no_prefix

    def page_url(self, type_: TypeDescriptor) -> str:
        """Relative URL of an internal type page as seen from the current page."""
        target = docs_file_name(type_, self.structure)
        if not self.no_extension:
            target += ".md"
        start = "."
        if self.current is not None:
            current_file = docs_file_name(self.current, self.structure)
            start = posixpath.dirname(current_file) or "."
        rel = posixpath.relpath(target, start=start)
        if self.no_prefix or rel.startswith("../"):
            return rel
        return f"./{rel}"

    def type_url(self, type_: TypeDescriptor) -> str | None:
        """URL of a type page, or None when it is not linkable."""
        if not type_.external:
            return self.page_url(type_)
        if type_.href:
            return type_.href
        if is_ms_type(type_.full_name):
            return ms_docs_url(type_.full_name)
        return None

    def build_link(
        self,
        target: TypeDescriptor | MemberDescriptor,
        text: str | None = None,
    ) -> Inline:
        """Link to a type page or to a member anchor on its declaring page."""
        if isinstance(target, MemberDescriptor):
            return self._member_link(target, text)
        label = Text(text or target.name)
        url = self.type_url(target)
        if url is None:
            return label
        return Link(label, url)

    def build_type_link(self, full_name: str, text: str | None = None) -> Inline:
        """Link to a type known only by name, e.g. a parameter type."""
        type_ = self.index.find_type(full_name)
        if type_ is not None:
            return self.build_link(type_, text)
        label = Text(text or simple_type_name(full_name))
        if is_ms_type(full_name):
            return Link(label, ms_docs_url(full_name))
        return label

    def _member_link(self, member: MemberDescriptor, text: str | None) -> Inline:
        label = Text(text or member.display_name)
        owner = self.index.find_type(member.declaring_type)
        if owner is None:
            return label
        url = self.type_url(owner)
        if url is None:
            return label
        if not owner.external:
            url = f"{url}#{header_slug(member.signature)}"
        return Link(label, url)
