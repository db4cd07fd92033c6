"""Logic for rendering the index page listing every documented type."""

from xmldoc2md.doc_tree_converter import DocTreeConverter
from xmldoc2md.link_builder import LinkBuilder
from xmldoc2md.markdown_model import Document, InlineRun, ListBlock
from xmldoc2md.markdown_renderer import format_chevrons, render_inline, render_markdown
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.reference_resolver import ReferenceResolver
from xmldoc2md.type_descriptor import TypeDescriptor
from xmldoc2md.type_documentation_options import TypeDocumentationOptions
from xmldoc2md.xml_documentation import XmlDocumentation

KIND_TITLES = {
    "class": "Classes",
    "struct": "Structs",
    "interface": "Interfaces",
    "enum": "Enums",
    "delegate": "Delegates",
}


def render_index_page(
    title: str,
    types: list[TypeDescriptor],
    index: MetadataIndex,
    documentation: XmlDocumentation,
    options: TypeDocumentationOptions,
) -> str:
    """Render the index page: types grouped by namespace, then by kind."""
    links = LinkBuilder(
        index,
        structure=options.structure,
        no_extension=options.no_extension,
        no_prefix=options.no_prefix,
    )
    converter = DocTreeConverter(ReferenceResolver(index, links), options.language)

    document = Document()
    document.append_header(format_chevrons(title), 1)

    ns_to_types: dict[str, list[TypeDescriptor]] = {}
    for t in types:
        ns_to_types.setdefault(t.namespace or "", []).append(t)

    for ns, ns_types in sorted(ns_to_types.items(), key=lambda kv: kv[0].lower()):
        document.append_header(ns or "Global", 2)
        for kind, kind_title in KIND_TITLES.items():
            matches = [t for t in ns_types if t.kind == kind]
            if not matches:
                continue
            document.append_header(kind_title, 3)
            block = ListBlock()
            for t in sorted(matches, key=lambda x: x.name.lower()):
                entry = InlineRun([links.build_link(t, format_chevrons(t.name))])
                doc = documentation.get_member(t.identifier)
                summary = doc.find("summary") if doc is not None else None
                summary_run = converter.convert_inline(
                    summary.nodes if summary is not None else None
                )
                if summary_run is not None:
                    text = " ".join(render_inline(summary_run).split())
                    if text:
                        entry.append(f" - {text}")
                block.add_item(entry)
            document.append(block)

    return render_markdown(document)

