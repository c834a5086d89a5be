"""Test setup for doxygen2md."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bs4.element import Tag  # noqa: E402

from doxygen2md.xml_parser import ParseContext, parse_xml_string  # noqa: E402

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8' standalone='no'?>\n"
_SCHEMA_ATTRIBUTES = (
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xsi:noNamespaceSchemaLocation="{schema}" version="1.9.8" xml:lang="en-US"'
)

INDEX_XML = (
    XML_DECLARATION
    + "<doxygenindex "
    + _SCHEMA_ATTRIBUTES.format(schema="index.xsd")
    + """>
  <compound refid="classfoo_1_1_bar" kind="class"><name>foo::Bar</name>
    <member refid="classfoo_1_1_bar_1a1" kind="function"><name>run</name></member>
  </compound>
  <compound refid="group__core" kind="group"><name>core</name>
  </compound>
</doxygenindex>
"""
)

CLASS_XML = (
    XML_DECLARATION
    + "<doxygen "
    + _SCHEMA_ATTRIBUTES.format(schema="compound.xsd")
    + """>
  <compounddef id="classfoo_1_1_bar" kind="class" language="C++" prot="public">
    <compoundname>foo::Bar</compoundname>
    <includes local="no">bar.h</includes>
    <sectiondef kind="public-func">
      <memberdef kind="function" id="classfoo_1_1_bar_1a1" prot="public" static="no" const="yes" virt="non-virtual">
        <type>int</type>
        <definition>int foo::Bar::run</definition>
        <argsstring>(int count) const</argsstring>
        <name>run</name>
        <qualifiedname>foo::Bar::run</qualifiedname>
        <param>
          <type>int</type>
          <declname>count</declname>
        </param>
        <briefdescription>
<para>Run the <bold>bar</bold>.</para>
        </briefdescription>
        <detaileddescription>
<para><image type="html" name="diagram.png"></image></para>
<para><parameterlist kind="param"><parameteritem>
<parameternamelist>
<parametername direction="in">count</parametername>
</parameternamelist>
<parameterdescription>
<para>How many times.</para>
</parameterdescription>
</parameteritem>
</parameterlist></para>
        </detaileddescription>
        <inbodydescription>
        </inbodydescription>
        <location file="bar.h" line="10" column="7" bodyfile="bar.cpp" bodystart="3" bodyend="5"/>
      </memberdef>
    </sectiondef>
    <briefdescription>
<para>A bar.</para>
    </briefdescription>
    <detaileddescription>
    </detaileddescription>
    <collaborationgraph>
      <node id="1"><label>foo::Bar</label></node>
    </collaborationgraph>
    <location file="bar.h" line="5" column="1"/>
    <listofallmembers>
      <member refid="classfoo_1_1_bar_1a1" prot="public" virt="non-virtual"><scope>foo::Bar</scope><name>run</name></member>
    </listofallmembers>
  </compounddef>
</doxygen>
"""
)

GROUP_XML = (
    XML_DECLARATION
    + "<doxygen "
    + _SCHEMA_ATTRIBUTES.format(schema="compound.xsd")
    + """>
  <compounddef id="group__core" kind="group">
    <compoundname>core</compoundname>
    <title>Core API</title>
    <innerclass refid="classfoo_1_1_bar" prot="public">foo::Bar</innerclass>
    <sectiondef kind="func">
      <member refid="classfoo_1_1_bar_1a1"><name>run</name></member>
    </sectiondef>
    <briefdescription>
    </briefdescription>
    <detaileddescription>
<para>See <image type="html" name="diagram.png"></image> and <image type="html" name="https://example.org/logo.png"></image>.</para>
    </detaileddescription>
  </compounddef>
</doxygen>
"""
)

DOXYFILE_XML = (
    XML_DECLARATION
    + "<doxyfile "
    + _SCHEMA_ATTRIBUTES.format(schema="doxyfile.xsd")
    + """>
  <option id="PROJECT_NAME" default="no" type="string"><value>Demo</value></option>
  <option id="PROJECT_NUMBER" default="no" type="string"><value>1.2.3</value></option>
  <option id="INPUT" default="no" type="stringlist"><value>src</value><value>include</value></option>
</doxyfile>
"""
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that parse a whole Doxygen XML folder",
    )


@pytest.fixture
def ctx() -> ParseContext:
    """A fresh parse context."""
    return ParseContext()


@pytest.fixture
def xml_element() -> Callable[[str], Tag]:
    """Parse an XML snippet and return its root element."""

    def _parse(text: str) -> Tag:
        root = parse_xml_string(text.encode("utf-8")).find(True)
        assert root is not None
        return root

    return _parse


@pytest.fixture
def doxygen_xml_dir(tmp_path: Path) -> Path:
    """Write a two-compound Doxygen XML folder with one local image."""
    xml_dir = tmp_path / "xml"
    xml_dir.mkdir()
    (xml_dir / "index.xml").write_text(INDEX_XML, encoding="utf-8")
    (xml_dir / "classfoo_1_1_bar.xml").write_text(CLASS_XML, encoding="utf-8")
    (xml_dir / "group__core.xml").write_text(GROUP_XML, encoding="utf-8")
    (xml_dir / "Doxyfile.xml").write_text(DOXYFILE_XML, encoding="utf-8")
    (xml_dir / "diagram.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return xml_dir


@pytest.fixture
def class_doxygen(xml_element: Callable[[str], Tag]) -> Tag:
    """The <doxygen> root of the class compound file."""
    return xml_element(CLASS_XML)


@pytest.fixture
def group_doxygen(xml_element: Callable[[str], Tag]) -> Tag:
    """The <doxygen> root of the group compound file."""
    return xml_element(GROUP_XML)


@pytest.fixture
def index_root(xml_element: Callable[[str], Tag]) -> Tag:
    """The <doxygenindex> root of index.xml."""
    return xml_element(INDEX_XML)


@pytest.fixture
def doxyfile_root(xml_element: Callable[[str], Tag]) -> Tag:
    """The <doxyfile> root of Doxyfile.xml."""
    return xml_element(DOXYFILE_XML)
