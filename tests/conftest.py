"""Shared fixtures: a small assembly's metadata and documentation."""

from typing import Any

import pytest

from xmldoc2md.load_metadata import build_metadata_index
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.xml_documentation import XmlDocumentation

SAMPLE_METADATA: dict[str, Any] = {
    "assembly": "MyLib",
    "types": [
        {
            "full_name": "MyLib.Foo",
            "name": "Foo",
            "namespace": "MyLib",
            "kind": "class",
            "base_type": "MyLib.FooBase",
            "interfaces": ["System.IDisposable"],
            "attributes": ["System.SerializableAttribute"],
            "signature": "public class Foo : FooBase, IDisposable",
            "members": [
                {
                    "kind": "constructor",
                    "name": ".ctor",
                    "identifier": "M:MyLib.Foo.#ctor",
                    "signature": "Foo()",
                    "full_signature": "public Foo()",
                },
                {
                    "kind": "method",
                    "name": "Bar",
                    "identifier": "M:MyLib.Foo.Bar",
                    "signature": "Bar()",
                    "full_signature": "public void Bar()",
                    "return_type": "System.Void",
                },
                {
                    "kind": "method",
                    "name": "Bar",
                    "identifier": "M:MyLib.Foo.Bar(System.Int32)",
                    "signature": "Bar(Int32)",
                    "full_signature": "public int Bar(int count)",
                    "return_type": "System.Int32",
                    "parameters": [{"name": "count", "type": "System.Int32"}],
                },
                {
                    "kind": "method",
                    "name": "Map",
                    "identifier": "M:MyLib.Foo.Map``1(``0)",
                    "signature": "Map<T>(T)",
                    "full_signature": "public T Map<T>(T value)",
                    "return_type": "T",
                    "generic_parameters": ["T"],
                    "parameters": [{"name": "value", "type": "T"}],
                },
                {
                    "kind": "method",
                    "name": "Map",
                    "identifier": "M:MyLib.Foo.Map``2(``0)",
                    "signature": "Map<TIn, TOut>(TIn)",
                    "full_signature": "public TOut Map<TIn, TOut>(TIn value)",
                    "return_type": "TOut",
                    "generic_parameters": ["TIn", "TOut"],
                    "parameters": [{"name": "value", "type": "TIn"}],
                },
                {
                    "kind": "method",
                    "name": "get_Count",
                    "identifier": "M:MyLib.Foo.get_Count",
                    "signature": "get_Count()",
                    "return_type": "System.Int32",
                    "special_name": True,
                },
                {
                    "kind": "method",
                    "name": "Secret",
                    "identifier": "M:MyLib.Foo.Secret",
                    "signature": "Secret()",
                    "accessibility": "private",
                },
                {
                    "kind": "property",
                    "name": "Count",
                    "identifier": "P:MyLib.Foo.Count",
                    "signature": "Count",
                    "full_signature": "public int Count { get; }",
                    "return_type": "System.Int32",
                },
                {
                    "kind": "field",
                    "name": "Limit",
                    "identifier": "F:MyLib.Foo.Limit",
                    "signature": "Limit",
                    "full_signature": "public const int Limit = 10;",
                    "return_type": "System.Int32",
                },
                {
                    "kind": "field",
                    "name": "<Name>k__BackingField",
                    "identifier": "F:MyLib.Foo.<Name>k__BackingField",
                    "signature": "<Name>k__BackingField",
                    "accessibility": "private",
                },
                {
                    "kind": "field",
                    "name": "Changed",
                    "identifier": "F:MyLib.Foo.Changed",
                    "signature": "Changed",
                },
                {
                    "kind": "event",
                    "name": "Changed",
                    "identifier": "E:MyLib.Foo.Changed",
                    "signature": "Changed",
                    "full_signature": "public event EventHandler Changed;",
                    "return_type": "System.EventHandler",
                },
            ],
        },
        {
            "full_name": "MyLib.FooBase",
            "name": "FooBase",
            "namespace": "MyLib",
            "kind": "class",
            "base_type": "System.Object",
            "signature": "public abstract class FooBase",
        },
        {
            "full_name": "MyLib.Baz",
            "name": "Baz",
            "namespace": "MyLib",
            "kind": "struct",
            "signature": "public struct Baz",
            "members": [
                {
                    "kind": "method",
                    "name": "Bar",
                    "identifier": "M:MyLib.Baz.Bar(System.String)",
                    "signature": "Bar(String)",
                    "return_type": "System.Void",
                    "parameters": [{"name": "text", "type": "System.String"}],
                },
            ],
        },
        {
            "full_name": "MyLib.Color",
            "name": "Color",
            "namespace": "MyLib",
            "kind": "enum",
            "signature": "public enum Color",
            "members": [
                {
                    "kind": "field",
                    "name": "value__",
                    "identifier": "F:MyLib.Color.value__",
                    "signature": "value__",
                    "special_name": True,
                },
                {
                    "kind": "field",
                    "name": "Red",
                    "identifier": "F:MyLib.Color.Red",
                    "signature": "Red",
                    "value": 0,
                },
                {
                    "kind": "field",
                    "name": "Green",
                    "identifier": "F:MyLib.Color.Green",
                    "signature": "Green",
                    "value": 1,
                },
            ],
        },
        {
            "full_name": "MyLib.Collections.Stack`1",
            "name": "Stack<T>",
            "namespace": "MyLib.Collections",
            "kind": "class",
            "generic_parameters": ["T"],
            "signature": "public class Stack<T>",
            "obsolete": True,
            "obsolete_message": "Use System.Collections.Generic.Stack<T>.",
            "members": [
                {
                    "kind": "method",
                    "name": "Push",
                    "identifier": "M:MyLib.Collections.Stack`1.Push(`0)",
                    "signature": "Push(T)",
                    "full_signature": "public void Push(T item)",
                    "return_type": "System.Void",
                    "parameters": [{"name": "item", "type": "T"}],
                },
            ],
        },
        {
            "full_name": "MyLib.Hidden",
            "name": "Hidden",
            "namespace": "MyLib",
            "kind": "class",
            "accessibility": "internal",
        },
    ],
    "references": [
        {"full_name": "System.Object", "name": "Object"},
        {"full_name": "System.IDisposable", "name": "IDisposable", "kind": "interface"},
        {
            "full_name": "Vendor.Widget",
            "name": "Widget",
            "href": "https://vendor.example/widget",
        },
        {"full_name": "Vendor.Gadget", "name": "Gadget"},
    ],
}

SAMPLE_XMLDOC = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>MyLib</name>
    </assembly>
    <members>
        <member name="T:MyLib.Foo">
            <summary>
            A   sample type. See <see cref="M:MyLib.Foo.Bar(System.Int32)"/>.
            </summary>
            <remarks>
            <para>First paragraph.</para>
            <code>
                var foo = new Foo();
                foo.Bar(1);
            </code>
            </remarks>
        </member>
        <member name="M:MyLib.Foo.Bar(System.Int32)">
            <summary>Counts things.</summary>
            <param name="count">How many <c>things</c>.</param>
            <returns>The <paramref name="count"/> doubled.</returns>
            <exception cref="T:System.ArgumentOutOfRangeException">
            When negative.
            </exception>
        </member>
        <member name="M:MyLib.Foo.Map``1(``0)">
            <summary>Maps a value.</summary>
            <typeparam name="T">The value type.</typeparam>
        </member>
        <member name="P:MyLib.Foo.Count">
            <summary>Number of items.</summary>
            <value>Always positive.</value>
        </member>
        <member name="F:MyLib.Color.Red">
            <summary>
            The color red.
            </summary>
        </member>
        <member name="T:MyLib.Collections.Stack`1">
            <summary>A stack.</summary>
            <typeparam name="T">Item type.</typeparam>
        </member>
    </members>
</doc>
"""


@pytest.fixture
def index() -> MetadataIndex:
    """Metadata index of the sample assembly."""
    return build_metadata_index(SAMPLE_METADATA)


@pytest.fixture
def documentation() -> XmlDocumentation:
    """Parsed XML documentation of the sample assembly."""
    return XmlDocumentation.from_string(SAMPLE_XMLDOC)
