"""Visibility policy deciding which types and members get documented."""

from xmldoc2md.member_descriptor import MemberDescriptor
from xmldoc2md.type_descriptor import TypeDescriptor

BACKING_FIELD_SUFFIX = ">k__BackingField"

# Lowest to highest visibility
ACCESSIBILITY_LEVELS = (
    "private",
    "private protected",
    "internal",
    "protected",
    "protected internal",
    "public",
)


def accessibility_rank(accessibility: str) -> int:
    """Rank an accessibility keyword; unknown values rank as public."""
    key = " ".join(accessibility.lower().replace("_", " ").split())
    if key == "internal protected":
        key = "protected internal"
    if key == "protected private":
        key = "private protected"
    try:
        return ACCESSIBILITY_LEVELS.index(key)
    except ValueError:
        return len(ACCESSIBILITY_LEVELS) - 1


def is_visible(accessibility: str, level: str) -> bool:
    """Check if an accessibility is at or above the minimum level."""
    return accessibility_rank(accessibility) >= accessibility_rank(level)


class MemberPolicy:
    """Filters declared members down to the documented ones."""

    def __init__(self, level: str = "protected") -> None:
        """Initialize with the minimum accessibility to document."""
        self.level = level

    def include_type(self, type_: TypeDescriptor) -> bool:
        """Check if a type gets a page."""
        return not type_.external and is_visible(type_.accessibility, self.level)

    def _visible(self, members: list[MemberDescriptor]) -> list[MemberDescriptor]:
        return [m for m in members if is_visible(m.accessibility, self.level)]

    def fields(self, type_: TypeDescriptor) -> list[MemberDescriptor]:
        """Fields, minus compiler-generated backing fields and event fields."""
        event_names = {e.name for e in type_.members_of_kind("event")}
        return [
            f
            for f in self._visible(type_.members_of_kind("field"))
            if not f.name.endswith(BACKING_FIELD_SUFFIX) and f.name not in event_names
        ]

    def enum_fields(self, type_: TypeDescriptor) -> list[MemberDescriptor]:
        """Enum constants, without the special ``value__`` field."""
        return [f for f in self.fields(type_) if not f.is_special_name]

    def properties(self, type_: TypeDescriptor) -> list[MemberDescriptor]:
        """Visible properties."""
        return self._visible(type_.members_of_kind("property"))

    def constructors(self, type_: TypeDescriptor) -> list[MemberDescriptor]:
        """Visible constructors."""
        return self._visible(type_.members_of_kind("constructor"))

    def methods(self, type_: TypeDescriptor) -> list[MemberDescriptor]:
        """Visible methods, excluding accessors and other special names."""
        return [
            m
            for m in self._visible(type_.members_of_kind("method"))
            if not m.is_special_name
        ]

    def events(self, type_: TypeDescriptor) -> list[MemberDescriptor]:
        """Visible events."""
        return self._visible(type_.members_of_kind("event"))
