"""Data models for describing the members of a type."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParameterDescriptor:
    """A method, constructor or indexer parameter."""

    name: str
    type: str  # full type name, without the by-ref marker
    is_by_ref: bool = False  # ref/out/in parameters


@dataclass(frozen=True)
class MemberDescriptor:
    """Represents a field, property, constructor, method or event."""

    name: str  # constructors are ".ctor" / ".cctor"
    kind: str  # field/property/constructor/method/event
    identifier: str  # XML documentation id, e.g. M:Ns.Type.Do(System.Int32)
    signature: str
    declaring_type: str = ""
    full_signature: str = ""
    return_type: str | None = None
    parameters: tuple[ParameterDescriptor, ...] = ()
    generic_parameters: tuple[str, ...] = ()
    accessibility: str = "public"
    obsolete: bool = False
    obsolete_message: str | None = None
    is_special_name: bool = False
    value: object = field(default=None, compare=False)  # enum constant value

    @property
    def display_name(self) -> str:
        """Human-readable name; constructors take the declaring type's name."""
        if self.kind == "constructor" and self.declaring_type:
            simple = self.declaring_type.replace("+", ".").rsplit(".", 1)[-1]
            return simple.split("`", 1)[0]
        return self.name

    @property
    def declaration(self) -> str:
        """Signature shown in the code block."""
        return self.full_signature or self.signature

    @property
    def is_method_like(self) -> bool:
        """Check if the member is a method or constructor."""
        return self.kind in {"method", "constructor"}
