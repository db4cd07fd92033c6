"""Lookup index over the introspected types of an assembly."""

from xmldoc2md.member_descriptor import MemberDescriptor
from xmldoc2md.type_descriptor import TypeDescriptor


class MetadataIndex:
    """Read-only map of type full names to descriptors."""

    def __init__(self, name_to_type: dict[str, TypeDescriptor]) -> None:
        """Initialize the index from a full-name keyed mapping."""
        self.name_to_type = name_to_type

    def find_type(self, path: str) -> TypeDescriptor | None:
        """Return the type with exactly this full name."""
        return self.name_to_type.get(path)

    def find_members(
        self, type_: TypeDescriptor, name: str
    ) -> list[MemberDescriptor]:
        """Return every member of a type with this exact name (overloads)."""
        return [m for m in type_.members if m.name == name]

    def internal_types(self) -> list[TypeDescriptor]:
        """Return the types declared by the documented assembly."""
        return [t for t in self.name_to_type.values() if not t.external]

    def get_base_class(self, full_name: str) -> str | None:
        """Returns the full name of the immediate base class."""
        item = self.name_to_type.get(full_name)
        if not item:
            return None
        return item.base_type

    def get_interfaces(self, full_name: str) -> list[str]:
        """Returns the full names of implemented interfaces."""
        item = self.name_to_type.get(full_name)
        if not item:
            return []
        return list(item.interfaces)

    def get_inheritance_hierarchy(self, type_: TypeDescriptor) -> list[str]:
        """Return base type names from the immediate base up to the root."""
        chain: list[str] = []
        seen = {type_.full_name}
        base = type_.base_type
        while base and base not in seen:
            chain.append(base)
            seen.add(base)
            base = self.get_base_class(base)
        return chain

    def __len__(self) -> int:
        return len(self.name_to_type)
