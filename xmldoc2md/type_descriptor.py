"""Data models for describing a type."""

from dataclasses import dataclass

from xmldoc2md.member_descriptor import MemberDescriptor


@dataclass(frozen=True)
class TypeDescriptor:
    """Represents a class, struct, interface, enum or delegate."""

    full_name: str  # reflection name, e.g. Ns.Stack`1 or Ns.Outer+Inner
    name: str  # display name, e.g. Stack<T>
    kind: str = "class"
    namespace: str | None = None
    base_type: str | None = None
    interfaces: tuple[str, ...] = ()
    generic_parameters: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    signature: str = ""
    members: tuple[MemberDescriptor, ...] = ()
    accessibility: str = "public"
    obsolete: bool = False
    obsolete_message: str | None = None
    external: bool = False  # referenced from another assembly
    href: str | None = None

    @property
    def identifier(self) -> str:
        """XML documentation id of the type."""
        return f"T:{self.full_name}"

    @property
    def is_enum(self) -> bool:
        """Check if the type is an enumeration."""
        return self.kind == "enum"

    def members_of_kind(self, kind: str) -> list[MemberDescriptor]:
        """Return declared members of one kind, in declaration order."""
        return [m for m in self.members if m.kind == kind]
