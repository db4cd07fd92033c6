"""Parsing of documentation cross-reference strings (``cref`` values).

A cref has the form ``<kind>:<dotted path>[``n][(parameters)]``, e.g.
``M:MyLib.Stack`1.Push(`0)`` or ``M:MyLib.Util.Map``2(System.Func{``0,``1})``.
Parsing is position based and tolerant: anything it cannot make sense of
yields ``None`` so callers can fall back to literal text.
"""

import re
from dataclasses import dataclass

KIND_SEPARATOR = ":"
ARITY_MARKER = "``"

# Prefix -> member kinds it may designate
REFERENCE_KINDS: dict[str, tuple[str, ...]] = {
    "T": ("class", "struct", "interface", "enum", "delegate"),
    "M": ("method", "constructor"),
    "F": ("field",),
    "P": ("property",),
    "E": ("event",),
    "N": ("namespace",),
}

_LEADING_DIGITS_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class SymbolicReference:
    """A cref split into its kind prefix and dotted path."""

    raw: str
    kind: str
    path: str


@dataclass(frozen=True)
class MethodReference:
    """The parts of a method or constructor cref used for overload lookup."""

    owner: str
    name: str
    generic_count: int
    parameter_count: int


def parse_reference(cref: str | None) -> SymbolicReference | None:
    """Split a cref into kind and path, or return None when it is malformed."""
    if cref is None or len(cref) < 3:
        return None
    if cref[1] != KIND_SEPARATOR or cref[0] not in REFERENCE_KINDS:
        return None
    return SymbolicReference(raw=cref, kind=cref[0], path=cref[2:])


def count_parameters(parameter_list: str) -> int:
    """Approximate the parameter count of ``(a,b,...)`` by counting commas.

    Commas nested inside generic argument lists are counted too; overload
    selection falls back to the first candidate when the count is off.
    """
    inner = parameter_list.strip()
    if inner.startswith("("):
        inner = inner[1:]
    if inner.endswith(")"):
        inner = inner[:-1]
    if not inner.strip():
        return 0
    return inner.count(",") + 1


def deconstruct_member(path: str) -> MethodReference | None:
    """Split a method path into owner type, name, arity and parameter count."""
    parameter_index = path.find("(")
    head = path[:parameter_index] if parameter_index > -1 else path

    last_dot = head.rfind(".")
    if last_dot <= 0:
        return None
    owner = path[:last_dot]
    name = head[last_dot + 1 :]

    parameter_count = 0
    if parameter_index > -1:
        parameter_count = count_parameters(path[parameter_index:])

    generic_count = 0
    generic_index = head.find(ARITY_MARKER, last_dot + 1)
    if generic_index > -1:
        m = _LEADING_DIGITS_RE.match(head, generic_index + len(ARITY_MARKER))
        generic_count = int(m.group(0)) if m else 0
        name = head[last_dot + 1 : generic_index]

    name = name.replace("#", ".")
    if not name:
        return None
    return MethodReference(
        owner=owner,
        name=name,
        generic_count=generic_count,
        parameter_count=parameter_count,
    )


def split_member_path(path: str) -> tuple[str, str] | None:
    """Split ``Owner.Type.Member`` at the last dot."""
    idx = path.rfind(".")
    if idx <= 0 or idx == len(path) - 1:
        return None
    return path[:idx], path[idx + 1 :]
