"""Logic for loading the YAML metadata dump into a MetadataIndex."""

from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.is_member_kind import is_member_kind
from xmldoc2md.is_type_kind import is_type_kind
from xmldoc2md.member_descriptor import MemberDescriptor, ParameterDescriptor
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.type_descriptor import TypeDescriptor

YAML_MIME_PREFIX = "### YamlMime:"


def strip_yaml_mime_header(text: str) -> str:
    """Remove a leading YAML MIME header line from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def _as_tuple(v: object) -> tuple[str, ...]:
    if not v:
        return ()
    if isinstance(v, (list, tuple)):
        return tuple(str(x) for x in v if x is not None)
    return (str(v),)


def _opt_str(v: object) -> str | None:
    return str(v) if v not in (None, "") else None


def _parse_parameter(raw: dict[str, Any]) -> ParameterDescriptor:
    ptype = str(raw.get("type") or "System.Object")
    by_ref = bool(raw.get("by_ref", False))
    # Reflection spells by-ref parameter types with a trailing '&'
    if ptype.endswith("&"):
        ptype = ptype[:-1]
        by_ref = True
    return ParameterDescriptor(
        name=str(raw.get("name") or ""), type=ptype, is_by_ref=by_ref
    )


def _parse_member(raw: dict[str, Any], declaring_type: str) -> MemberDescriptor:
    name = str(raw["name"])
    kind = str(raw.get("kind") or "method").lower()
    signature = str(raw.get("signature") or name)
    return MemberDescriptor(
        name=name,
        kind=kind,
        identifier=str(raw.get("identifier") or ""),
        signature=signature,
        declaring_type=declaring_type,
        full_signature=str(raw.get("full_signature") or signature),
        return_type=_opt_str(raw.get("return_type")),
        parameters=tuple(
            _parse_parameter(p)
            for p in raw.get("parameters") or []
            if isinstance(p, dict)
        ),
        generic_parameters=_as_tuple(raw.get("generic_parameters")),
        accessibility=str(raw.get("accessibility") or "public").lower(),
        obsolete=bool(raw.get("obsolete", False)),
        obsolete_message=_opt_str(raw.get("obsolete_message")),
        is_special_name=bool(raw.get("special_name", False)),
        value=raw.get("value"),
    )


def _parse_type(raw: dict[str, Any], *, external: bool) -> TypeDescriptor:
    full_name = str(raw["full_name"])
    kind = str(raw.get("kind") or "class").lower()
    if not is_type_kind(kind):
        kind = "class"
    ns = raw.get("namespace")
    if ns is None and "." in full_name:
        ns = full_name.rsplit(".", 1)[0]
    members = tuple(
        _parse_member(m, full_name)
        for m in raw.get("members") or []
        if isinstance(m, dict)
        and m.get("name")
        and is_member_kind(str(m.get("kind") or "method"))
    )
    return TypeDescriptor(
        full_name=full_name,
        name=str(raw.get("name") or full_name.rsplit(".", 1)[-1]),
        kind=kind,
        namespace=_opt_str(ns),
        base_type=_opt_str(raw.get("base_type")),
        interfaces=_as_tuple(raw.get("interfaces")),
        generic_parameters=_as_tuple(raw.get("generic_parameters")),
        attributes=_as_tuple(raw.get("attributes")),
        signature=str(raw.get("signature") or ""),
        members=members,
        accessibility=str(raw.get("accessibility") or "public").lower(),
        obsolete=bool(raw.get("obsolete", False)),
        obsolete_message=_opt_str(raw.get("obsolete_message")),
        external=external,
        href=_opt_str(raw.get("href")),
    )


def build_metadata_index(doc: dict[str, Any]) -> MetadataIndex:
    """Build an index from a parsed metadata document."""
    name_to_type: dict[str, TypeDescriptor] = {}
    for ref in doc.get("references") or []:
        if isinstance(ref, dict) and ref.get("full_name"):
            t = _parse_type(ref, external=True)
            name_to_type[t.full_name] = t
    # Declared types win over references with the same name
    for it in doc.get("types") or []:
        if isinstance(it, dict) and it.get("full_name"):
            t = _parse_type(it, external=False)
            name_to_type[t.full_name] = t
    return MetadataIndex(name_to_type)


def load_metadata(path: Path) -> MetadataIndex:
    """Load and index a YAML metadata dump."""
    raw = strip_yaml_mime_header(path.read_text(encoding="utf-8"))
    doc = yaml.safe_load(raw)
    return build_metadata_index(doc or {})
