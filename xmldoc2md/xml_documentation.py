"""Logic for loading a compiler-generated XML documentation file."""

import xml.etree.ElementTree as ET
from pathlib import Path

from xmldoc2md.doc_node import DocElement, from_xml


class XmlDocumentation:
    """Documentation trees keyed by XML documentation identifier."""

    def __init__(
        self,
        members: dict[str, DocElement],
        assembly_name: str | None = None,
    ) -> None:
        """Initialize from already-parsed member elements."""
        self.members = members
        self.assembly_name = assembly_name

    @classmethod
    def from_string(cls, xml: str) -> "XmlDocumentation":
        """Parse the content of an XML documentation file."""
        return cls._from_root(ET.fromstring(xml))

    @classmethod
    def load(cls, path: Path) -> "XmlDocumentation":
        """Load and parse an XML documentation file."""
        return cls._from_root(ET.parse(path).getroot())

    @classmethod
    def _from_root(cls, root: ET.Element) -> "XmlDocumentation":
        members: dict[str, DocElement] = {}
        for member in root.iter("member"):
            name = member.get("name")
            if name:
                members[name] = from_xml(member)
        assembly_name = (root.findtext("assembly/name") or "").strip() or None
        return cls(members, assembly_name)

    def get_member(self, identifier: str) -> DocElement | None:
        """Return the ``member`` element documenting an identifier, if any."""
        return self.members.get(identifier)

    def __len__(self) -> int:
        return len(self.members)
