"""Tests for assembling type pages."""

import logging
from pathlib import Path

import pytest

from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.type_documentation import TypeDocumentation
from xmldoc2md.type_documentation_options import TypeDocumentationOptions
from xmldoc2md.xml_documentation import XmlDocumentation

MS = "https://learn.microsoft.com/dotnet/api"


def _render(
    index: MetadataIndex,
    documentation: XmlDocumentation,
    full_name: str,
    options: TypeDocumentationOptions | None = None,
) -> str:
    type_ = index.find_type(full_name)
    assert type_ is not None
    return TypeDocumentation(index, type_, documentation, options).render()


def test_class_page(index: MetadataIndex, documentation: XmlDocumentation) -> None:
    """Test the header, summary, signature and inheritance of a class."""
    md = _render(index, documentation, "MyLib.Foo")

    assert md.startswith("# Foo\n\nNamespace: MyLib\n\n")
    assert "A sample type. See [Bar](./mylib.foo.md#barint32)." in md
    assert "```csharp\npublic class Foo : FooBase, IDisposable\n```" in md
    assert (
        f"Inheritance [Object]({MS}/system.object) → "
        "[FooBase](./mylib.foobase.md) → Foo<br>\n"
        f"Implements [IDisposable]({MS}/system.idisposable)<br>\n"
        f"Attributes [SerializableAttribute]({MS}/system.serializableattribute)"
    ) in md
    assert "**Remarks:**\n\nFirst paragraph.\n```csharp\nvar foo = new Foo();" in md
    assert "Caution" not in md
    assert "< Back" not in md


def test_member_sections(
    index: MetadataIndex, documentation: XmlDocumentation
) -> None:
    """Test the order and content of member sections."""
    md = _render(index, documentation, "MyLib.Foo")

    sections = ["## Fields", "## Properties", "## Constructors", "## Methods"]
    sections.append("## Events")
    positions = [md.index(s) for s in sections]
    assert positions == sorted(positions)

    assert "### **Limit**" in md
    assert "BackingField" not in md
    assert "### **Changed**" in md
    assert md.count("### **Changed**") == 1
    assert "Secret" not in md
    assert "get_Count" not in md

    assert (
        "### **Count**\n\nNumber of items.\n\n"
        "```csharp\npublic int Count { get; }\n```\n\n"
        "#### Property Value\n\n"
        f"[Int32]({MS}/system.int32)<br>\nAlways positive."
    ) in md

    assert "### **Foo()**\n\n```csharp\npublic Foo()\n```" in md

    assert (
        "#### Parameters\n\n"
        f"`count` [Int32]({MS}/system.int32)<br>\nHow many `things`.\n\n"
        "#### Returns\n\n"
        f"[Int32]({MS}/system.int32)<br>\nThe `count` doubled.\n\n"
        "#### Exceptions\n\n"
        "T:System.ArgumentOutOfRangeException<br>\n"
    ) in md

    assert "### **Map&lt;T&gt;(T)**" in md
    assert "#### Type Parameters\n\n`T`<br>\nThe value type." in md


def test_void_methods_have_no_returns(
    index: MetadataIndex, documentation: XmlDocumentation
) -> None:
    """Test that void methods skip the returns section."""
    md = _render(index, documentation, "MyLib.Baz")
    assert "### **Bar(String)**" in md
    assert f"`text` [String]({MS}/system.string)<br>" in md
    assert "#### Returns" not in md


def test_enum_page(index: MetadataIndex, documentation: XmlDocumentation) -> None:
    """Test the constants table of an enum."""
    md = _render(index, documentation, "MyLib.Color")
    assert (
        "## Fields\n\n"
        "| Name | Value | Description |\n"
        "| --- | --: | --- |\n"
        "| Red | 0 | The color red. |\n"
        "| Green | 1 |  |\n"
    ) in md
    assert "value__" not in md
    assert "Implements" not in md
    assert "### **Red**" not in md


def test_obsolete_generic_type(
    index: MetadataIndex, documentation: XmlDocumentation
) -> None:
    """Test escaping, the caution note and type parameters."""
    md = _render(index, documentation, "MyLib.Collections.Stack`1")
    assert md.startswith("# Stack&lt;T&gt;\n\nNamespace: MyLib.Collections\n\n")
    assert (
        "#### Caution\n\nUse System.Collections.Generic.Stack<T>.\n\n---\n\n"
        "A stack."
    ) in md
    assert "#### Type Parameters\n\n`T`<br>\nItem type." in md
    assert "`item` T<br>" in md


def test_back_button(index: MetadataIndex, documentation: XmlDocumentation) -> None:
    """Test back links for flat and tree layouts."""
    flat = _render(
        index,
        documentation,
        "MyLib.Foo",
        TypeDocumentationOptions(back_button=True),
    )
    assert flat.startswith("[`< Back`](./)\n\n---\n\n# Foo")
    assert flat.endswith("---\n\n[`< Back`](./)\n")

    tree = _render(
        index,
        documentation,
        "MyLib.Collections.Stack`1",
        TypeDocumentationOptions(back_button=True, structure="tree"),
    )
    assert tree.startswith("[`< Back`](../../)\n\n---\n\n")


def test_examples(
    index: MetadataIndex, documentation: XmlDocumentation, tmp_path: Path
) -> None:
    """Test that example files are appended to types and members."""
    (tmp_path / "T:MyLib.Baz.md").write_text("Type example.", encoding="utf-8")
    (tmp_path / "M:MyLib.Baz.Bar(System.String).md").write_text(
        "Member example.", encoding="utf-8"
    )
    md = _render(
        index,
        documentation,
        "MyLib.Baz",
        TypeDocumentationOptions(examples_directory=tmp_path),
    )
    assert md.index("Member example.") < md.index("Type example.")
    assert md.endswith("Type example.\n")


def test_logging(
    index: MetadataIndex,
    documentation: XmlDocumentation,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test that documented members are reported."""
    with caplog.at_level(logging.INFO, logger="xmldoc2md.type_documentation"):
        _render(index, documentation, "MyLib.Foo")
    assert "M:MyLib.Foo.Bar(System.Int32) (documented)" in caplog.text
    assert "(documented)" in caplog.messages[0]


def test_missing_arguments(
    index: MetadataIndex, documentation: XmlDocumentation
) -> None:
    """Test that required collaborators are checked."""
    foo = index.find_type("MyLib.Foo")
    assert foo is not None
    with pytest.raises(ValueError, match="type_ is required"):
        TypeDocumentation(index, None, documentation)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="documentation is required"):
        TypeDocumentation(index, foo, None)  # type: ignore[arg-type]
