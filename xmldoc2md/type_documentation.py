"""Logic for assembling the documentation page of one type."""

import logging

from xmldoc2md.doc_node import DocElement, DocNode
from xmldoc2md.doc_tree_converter import DocTreeConverter
from xmldoc2md.example_source import ExampleSource
from xmldoc2md.link_builder import LinkBuilder, docs_file_name
from xmldoc2md.markdown_model import (
    LINE_BREAK,
    Document,
    Emphasis,
    Inline,
    InlineCode,
    InlineRun,
    Link,
    Paragraph,
    Table,
    TableHeaderCell,
    Text,
)
from xmldoc2md.markdown_renderer import (
    format_chevrons,
    render_block,
    render_markdown,
    table_format,
)
from xmldoc2md.member_descriptor import MemberDescriptor
from xmldoc2md.member_policy import MemberPolicy
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.reference_resolver import ReferenceResolver
from xmldoc2md.type_descriptor import TypeDescriptor
from xmldoc2md.type_documentation_options import TypeDocumentationOptions
from xmldoc2md.xml_documentation import XmlDocumentation

logger = logging.getLogger(__name__)

SECTION_TITLES = {
    "field": "Fields",
    "property": "Properties",
    "constructor": "Constructors",
    "method": "Methods",
    "event": "Events",
}
VOID_TYPES = {"System.Void", "void"}
LINE_SEPARATOR = f"{LINE_BREAK}\n"


def _nodes(doc: DocElement | None, tag: str) -> tuple[DocNode, ...] | None:
    """Children of the first ``tag`` element, or None when it is absent."""
    element = doc.find(tag) if doc is not None else None
    return element.nodes if element is not None else None


def _named_nodes(doc: DocElement | None, tag: str, name: str) -> tuple[DocNode, ...]:
    """Children of the ``tag`` element whose ``name`` attribute matches."""
    if doc is None:
        return ()
    for element in doc.findall(tag):
        if element.get("name") == name:
            return element.nodes
    return ()


def _labeled(label: list[Inline], doc: Paragraph) -> Paragraph:
    """A label line followed by a line break and its documentation."""
    run = InlineRun(list(label))
    run.append(LINE_BREAK)
    return Paragraph([Paragraph(run), doc])


def _joined(items: list[Inline], separator: str) -> list[Inline]:
    out: list[Inline] = []
    for i, item in enumerate(items):
        if i:
            out.append(Text(separator))
        out.append(item)
    return out


class TypeDocumentation:
    """Builds the Markdown page of a type from its metadata and doc comments."""

    def __init__(
        self,
        index: MetadataIndex,
        type_: TypeDescriptor,
        documentation: XmlDocumentation,
        options: TypeDocumentationOptions | None = None,
    ) -> None:
        """Initialize the page builder; index, type and documentation are required."""
        for name, value in (
            ("index", index),
            ("type_", type_),
            ("documentation", documentation),
        ):
            if value is None:
                msg = f"{name} is required"
                raise ValueError(msg)

        self.index = index
        self.type = type_
        self.documentation = documentation
        self.options = options or TypeDocumentationOptions()

        self.links = LinkBuilder(
            index,
            type_,
            structure=self.options.structure,
            no_extension=self.options.no_extension,
            no_prefix=self.options.no_prefix,
        )
        self.resolver = ReferenceResolver(index, self.links)
        self.converter = DocTreeConverter(self.resolver, self.options.language)
        self.policy = MemberPolicy(self.options.member_accessibility_level)
        self.examples = ExampleSource(self.options.examples_directory)
        self.document = Document()

    def render(self) -> str:
        """Build the page and serialize it to Markdown."""
        return render_markdown(self.build())

    def build(self) -> Document:
        """Assemble the page document."""
        self.document = Document()
        type_ = self.type

        if self.options.back_button:
            self._write_back_button(top=True)

        self.document.append_header(format_chevrons(type_.name), 1)

        if type_.namespace:
            self.document.append_paragraph(f"Namespace: {type_.namespace}")

        type_doc = self.documentation.get_member(type_.identifier)
        if type_doc is not None:
            logger.info("    (documented)")

        self._write_obsolete(
            type_.obsolete, type_.obsolete_message, "This type is obsolete."
        )
        self._write_summary(type_doc)
        self._write_signature(type_.signature)
        self._write_type_parameters(type_.generic_parameters, type_doc)
        self._write_inheritance_and_implements_and_attributes()
        self._write_remarks(type_doc)

        if type_.is_enum:
            self._write_enum_fields(self.policy.enum_fields(type_))
        else:
            self._write_members(self.policy.fields(type_))

        self._write_members(self.policy.properties(type_))
        self._write_members(self.policy.constructors(type_))
        self._write_members(self.policy.methods(type_))
        self._write_members(self.policy.events(type_))

        if self._write_example(type_.identifier):
            logger.info("    (example)")

        if self.options.back_button:
            self._write_back_button(top=False)

        return self.document

    # -----------------------------
    # Type sections
    # -----------------------------

    def _write_back_button(self, *, top: bool) -> None:
        if not top:
            self.document.append_rule()

        deep = docs_file_name(self.type, self.options.structure).count("/")
        route = "/".join([".."] * deep) if deep > 0 else "."
        route += "/"
        self.document.append_paragraph(Link(InlineCode("< Back"), route))

        if top:
            self.document.append_rule()

    def _write_inheritance_and_implements_and_attributes(self) -> None:
        lines: list[list[Inline]] = []

        if self.type.base_type:
            hierarchy = list(reversed(self.index.get_inheritance_hierarchy(self.type)))
            chain = [self.links.build_type_link(t) for t in hierarchy]
            chain.append(Text(format_chevrons(self.type.name)))
            lines.append([Text("Inheritance "), *_joined(chain, " → ")])

        interfaces = self.index.get_interfaces(self.type.full_name)
        if interfaces:
            implements = [self.links.build_type_link(i) for i in interfaces]
            lines.append([Text("Implements "), *_joined(implements, ", ")])

        if self.type.attributes:
            attributes = [self.links.build_type_link(a) for a in self.type.attributes]
            lines.append([Text("Attributes "), *_joined(attributes, ", ")])

        if lines:
            run = InlineRun()
            for i, line in enumerate(lines):
                if i:
                    run.append(LINE_SEPARATOR)
                for element in line:
                    run.append(element)
            self.document.append_paragraph(run)

    def _write_obsolete(
        self, obsolete: bool, message: str | None, default: str
    ) -> None:
        if not obsolete:
            return
        self.document.append_header("Caution", 4)
        self.document.append_paragraph(message or default)
        self.document.append_rule()

    def _write_summary(self, doc: DocElement | None) -> None:
        nodes = _nodes(doc, "summary")
        if nodes is not None:
            self.document.append(self.converter.convert_paragraph(nodes))

    def _write_remarks(self, doc: DocElement | None) -> None:
        nodes = _nodes(doc, "remarks")
        if nodes is not None:
            self.document.append_paragraph(Emphasis(Text("Remarks:")))
            self.document.append(self.converter.convert_paragraph(nodes))

    def _write_signature(self, signature: str) -> None:
        if signature:
            self.document.append_code(self.options.language, signature)

    def _write_type_parameters(
        self, type_params: tuple[str, ...], doc: DocElement | None
    ) -> None:
        if not type_params:
            return
        self.document.append_header("Type Parameters", 4)
        for name in type_params:
            nodes = _named_nodes(doc, "typeparam", name)
            param_doc = self.converter.convert_paragraph(nodes)
            self.document.append(_labeled([InlineCode(name)], param_doc))

    def _write_enum_fields(self, fields: list[MemberDescriptor]) -> None:
        if not fields:
            return
        self.document.append_header("Fields", 2)

        table = Table(
            header=[
                TableHeaderCell("Name"),
                TableHeaderCell("Value", alignment="right"),
                TableHeaderCell("Description"),
            ]
        )
        for field in fields:
            doc = self.documentation.get_member(field.identifier)
            summary = self.converter.convert_paragraph(_nodes(doc, "summary") or ())
            value = "" if field.value is None else str(field.value)
            description = table_format(render_block(summary)).strip()
            table.add_row(field.name, value, description)

        self.document.append(table)

    def _write_example(self, identifier: str) -> bool:
        text = self.examples.try_read(identifier)
        if text is None:
            return False
        self.document.append_paragraph(text)
        return True

    # -----------------------------
    # Member sections
    # -----------------------------

    def _write_members(self, members: list[MemberDescriptor]) -> None:
        if not members:
            return

        title = SECTION_TITLES[members[0].kind]
        self.document.append_header(title, 2)
        logger.info("    %s", title)

        for member in members:
            self._write_member(member)

    def _write_member(self, member: MemberDescriptor) -> None:
        title = Emphasis(Text(format_chevrons(member.signature)))
        self.document.append_header(title, 3)

        member_doc = self.documentation.get_member(member.identifier)

        self._write_obsolete(
            member.obsolete, member.obsolete_message, "This member is obsolete."
        )
        self._write_summary(member_doc)
        self._write_signature(member.declaration)

        if member.is_method_like:
            self._write_type_parameters(member.generic_parameters, member_doc)
            self._write_parameters(member, member_doc)
            if member.kind == "method" and member.return_type not in VOID_TYPES:
                self._write_returns(member, member_doc)

        if member.kind == "property":
            self._write_property_value(member, member_doc)

        self._write_exceptions(member_doc)
        self._write_remarks(member_doc)
        example = self._write_example(member.identifier)

        log = f"      {member.identifier}"
        if member_doc is not None:
            log += " (documented)"
        if example:
            log += " (example)"
        logger.info(log)

    def _write_parameters(
        self, member: MemberDescriptor, doc: DocElement | None
    ) -> None:
        if not member.parameters:
            return
        self.document.append_header("Parameters", 4)
        for param in member.parameters:
            type_link = self.links.build_type_link(param.type)
            nodes = _named_nodes(doc, "param", param.name)
            param_doc = self.converter.convert_paragraph(nodes)
            label: list[Inline] = [InlineCode(param.name), Text(" ")]
            if param.is_by_ref:
                label.append(Text("ref "))
            label.append(type_link)
            self.document.append(_labeled(label, param_doc))

    def _write_returns(self, member: MemberDescriptor, doc: DocElement | None) -> None:
        if member.return_type is None:
            return
        self.document.append_header("Returns", 4)
        type_link = self.links.build_type_link(member.return_type)
        returns_doc = self.converter.convert_paragraph(_nodes(doc, "returns") or ())
        self.document.append(_labeled([type_link], returns_doc))

    def _write_property_value(
        self, member: MemberDescriptor, doc: DocElement | None
    ) -> None:
        self.document.append_header("Property Value", 4)
        label: list[Inline] = []
        if member.return_type:
            label.append(self.links.build_type_link(member.return_type))
        value_doc = self.converter.convert_paragraph(_nodes(doc, "value") or ())
        self.document.append(_labeled(label, value_doc))

    def _write_exceptions(self, doc: DocElement | None) -> None:
        exceptions = doc.findall("exception") if doc is not None else []
        if not exceptions:
            return
        self.document.append_header("Exceptions", 4)
        for exception in exceptions:
            type_name = self.resolver.resolve(exception.get("cref"))
            summary = self.converter.convert_paragraph(exception.nodes)
            self.document.append(_labeled([type_name], summary))
