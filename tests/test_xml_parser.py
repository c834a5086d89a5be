"""Tests for the XML parsing and accessor helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from bs4.element import Tag

from doxygen2md.exceptions import ParseError, XmlInputError
from doxygen2md.model.markup import Image
from doxygen2md.xml_parser import (
    ParseContext,
    get_attribute_boolean_value,
    get_attribute_number_value,
    get_attribute_string_value,
    get_attributes_names,
    get_inner_element_text,
    get_inner_elements,
    get_inner_text,
    has_attribute,
    has_attributes,
    has_inner_element,
    has_inner_text,
    is_inner_element_text,
    is_url,
    parse_xml_file,
    parse_xml_string,
)


class TestParseXmlString:
    """Tests for parse_xml_string and parse_xml_file."""

    def test_rejects_empty_document(self) -> None:
        """Empty input raises XmlInputError."""
        with pytest.raises(XmlInputError, match="Empty"):
            parse_xml_string("  \n")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file raises XmlInputError naming the path."""
        with pytest.raises(XmlInputError, match="missing.xml"):
            parse_xml_file(tmp_path / "missing.xml")

    def test_reads_file_with_declaration(self, tmp_path: Path) -> None:
        """Files with an encoding declaration parse from bytes."""
        path = tmp_path / "doc.xml"
        path.write_text(
            "<?xml version='1.0' encoding='UTF-8'?>\n<doxygen version=\"1\">x</doxygen>",
            encoding="utf-8",
        )
        soup = parse_xml_file(path)
        assert soup.find(True).name == "doxygen"

    def test_keeps_whitespace_in_mixed_content(self, xml_element: Callable[[str], Tag]) -> None:
        """Whitespace between inline elements is a separate text run."""
        para = xml_element("<para><bold>a</bold> <emphasis>b</emphasis></para>")
        inner = get_inner_elements(para)
        assert [has_inner_text(node) for node in inner] == [False, True, False]
        assert get_inner_text(inner[1]) == " "

    def test_skips_comments(self, xml_element: Callable[[str], Tag]) -> None:
        """Comments are not part of the child list."""
        para = xml_element("<para>a<!-- note -->b</para>")
        inner = get_inner_elements(para)
        assert all(has_inner_text(node) for node in inner)
        assert "".join(get_inner_text(node) for node in inner) == "ab"


class TestInnerElements:
    """Tests for element and text predicates."""

    def test_is_inner_element_text(self, xml_element: Callable[[str], Tag]) -> None:
        """Only text-only elements of the given name qualify."""
        root = xml_element("<root><name>run</name><title>a <bold>b</bold></title></root>")
        name, title = [node for node in get_inner_elements(root) if not has_inner_text(node)]
        assert is_inner_element_text(name, "name")
        assert not is_inner_element_text(name, "title")
        assert not is_inner_element_text(title, "title")
        assert has_inner_element(title, "title")

    def test_get_inner_element_text(self, xml_element: Callable[[str], Tag]) -> None:
        """Returns the text, or an empty string for an empty element."""
        assert get_inner_element_text(xml_element("<name>run</name>"), "name") == "run"
        assert get_inner_element_text(xml_element("<name/>"), "name") == ""

    def test_get_inner_element_text_rejects_children(
        self, xml_element: Callable[[str], Tag]
    ) -> None:
        """Element children make the text accessor fail."""
        with pytest.raises(ParseError, match="child elements"):
            get_inner_element_text(xml_element("<name>a<bold>b</bold></name>"), "name")


class TestAttributes:
    """Tests for attribute accessors."""

    def test_names_in_document_order(self, xml_element: Callable[[str], Tag]) -> None:
        """Attribute names keep their order."""
        element = xml_element('<table rows="2" cols="3" width="50%"/>')
        assert has_attributes(element)
        assert get_attributes_names(element) == ["rows", "cols", "width"]
        assert has_attribute(element, "cols")
        assert not has_attribute(element, "class")

    def test_namespace_prefixes_are_stripped(self, xml_element: Callable[[str], Tag]) -> None:
        """Namespace declarations vanish and prefixed names lose the prefix."""
        element = xml_element(
            '<doxygen xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
            'xsi:noNamespaceSchemaLocation="compound.xsd" version="1.9.8" xml:lang="en-US"/>'
        )
        assert set(get_attributes_names(element)) == {"noNamespaceSchemaLocation", "version", "lang"}
        assert get_attribute_string_value(element, "lang") == "en-US"

    def test_number_values(self, xml_element: Callable[[str], Tag]) -> None:
        """Integral values come back as int, others as float."""
        element = xml_element('<sp value="4" ratio="0.5" bad="four"/>')
        assert get_attribute_number_value(element, "value") == 4
        assert isinstance(get_attribute_number_value(element, "value"), int)
        assert get_attribute_number_value(element, "ratio") == 0.5
        with pytest.raises(ParseError, match="not a number"):
            get_attribute_number_value(element, "bad")

    def test_boolean_values(self, xml_element: Callable[[str], Tag]) -> None:
        """Only 'yes' (any case) is true."""
        element = xml_element('<memberdef static="yes" const="YES" inline="no" extern="true"/>')
        assert get_attribute_boolean_value(element, "static")
        assert get_attribute_boolean_value(element, "const")
        assert not get_attribute_boolean_value(element, "inline")
        assert not get_attribute_boolean_value(element, "extern")

    def test_missing_attribute_raises(self, xml_element: Callable[[str], Tag]) -> None:
        """Reading an absent attribute is an accessor error."""
        element = xml_element("<ref>x</ref>")
        with pytest.raises(ParseError, match="refid"):
            get_attribute_string_value(element, "refid")


class TestImageContext:
    """Tests for URL detection and image registration."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("https://example.org/a.png", True),
            ("//cdn.example.org/a.png", True),
            ("data:image/png;base64,AAAA", True),
            ("diagram.png", False),
            ("images/diagram.png", False),
            ("C:/images/diagram.png", False),
        ],
    )
    def test_is_url(self, name: str, expected: bool) -> None:
        """Schemes and protocol-relative names are URLs; paths are not."""
        assert is_url(name) is expected

    def test_registers_only_local_html_images(self) -> None:
        """LaTeX images and remote images are not collected."""
        context = ParseContext()
        context.register_image(Image(element_name="image", type="html", name="a.png"))
        context.register_image(Image(element_name="image", type="latex", name="a.eps"))
        context.register_image(
            Image(element_name="image", type="html", name="https://example.org/b.png")
        )
        context.register_image(Image(element_name="image", type="html", name="a.png"))
        assert len(context.images) == 2
        assert context.image_names() == ["a.png"]
