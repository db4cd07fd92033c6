"""Resolve cref strings against the metadata index."""

from typing import Protocol

from xmldoc2md.markdown_model import Inline, Text
from xmldoc2md.member_descriptor import MemberDescriptor
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.symbolic_reference import (
    deconstruct_member,
    parse_reference,
    split_member_path,
)
from xmldoc2md.type_descriptor import TypeDescriptor


class LinkFactory(Protocol):
    """Anything that can turn a resolved symbol into an inline link."""

    def build_link(
        self,
        target: TypeDescriptor | MemberDescriptor,
        text: str | None = None,
    ) -> Inline: ...


class ReferenceResolver:
    """Turns cref values into links, or into literal text when they do not resolve."""

    def __init__(self, index: MetadataIndex, link_builder: LinkFactory) -> None:
        """Initialize with the metadata index and the page's link builder."""
        if index is None:
            msg = "index is required"
            raise ValueError(msg)
        if link_builder is None:
            msg = "link_builder is required"
            raise ValueError(msg)
        self.index = index
        self.link_builder = link_builder

    def resolve(self, cref: str | None, text: str | None = None) -> Inline:
        """Return a link to the referenced symbol, or the literal fallback text."""
        target = self.find_target(cref)
        if target is not None:
            return self.link_builder.build_link(target, text or None)
        return Text(text or cref or "")

    def find_target(
        self, cref: str | None
    ) -> TypeDescriptor | MemberDescriptor | None:
        """Look up the type or member a cref points at."""
        ref = parse_reference(cref)
        if ref is None:
            return None
        if ref.kind == "M":
            return self._find_method(ref.path)
        if ref.kind in {"F", "P", "E"}:
            return self._find_member(ref.path)
        if ref.kind == "T":
            return self.index.find_type(ref.path)
        return None

    def _find_member(self, path: str) -> MemberDescriptor | None:
        parts = split_member_path(path)
        if parts is None:
            return None
        owner, name = parts
        type_ = self.index.find_type(owner)
        if type_ is None:
            return None
        candidates = self.index.find_members(type_, name)
        return candidates[0] if candidates else None

    def _find_method(self, path: str) -> MemberDescriptor | None:
        ref = deconstruct_member(path)
        if ref is None:
            return None
        type_ = self.index.find_type(ref.owner)
        if type_ is None:
            return None
        candidates = self.index.find_members(type_, ref.name)
        for candidate in candidates:
            if (
                candidate.generic_parameters
                and len(candidate.generic_parameters) != ref.generic_count
            ):
                continue
            if len(candidate.parameters) == ref.parameter_count:
                return candidate
        return candidates[0] if candidates else None
