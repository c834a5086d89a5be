"""Compound-level table of contents (``<tableofcontents>``)."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model.base import (
    DataModelNode,
    expect,
    expect_no_attributes,
    report_unknown_element,
)
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_element_text,
    get_inner_elements,
    has_inner_element,
    has_inner_text,
    is_inner_element_text,
)


@dataclass
class TocSect(DataModelNode):
    name: str = ""
    reference: str = ""
    table_of_contents: list[TableOfContents] | None = None


@dataclass
class TableOfContents(DataModelNode):
    toc_sects: list[TocSect] | None = None
    table_of_contents: list[TableOfContents] | None = None


def parse_table_of_contents(element: Tag, ctx: ParseContext) -> TableOfContents:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<tableofcontents> must not be empty")
    sects: list[TocSect] = []
    nested: list[TableOfContents] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "tocsect"):
            sects.append(parse_toc_sect(node, ctx))
        elif has_inner_element(node, "tableofcontents"):
            nested.append(parse_table_of_contents(node, ctx))
        else:
            report_unknown_element(element.name, node, "TableOfContents")
    expect_no_attributes(element)
    return TableOfContents(
        element_name=element.name,
        toc_sects=sects or None,
        table_of_contents=nested or None,
    )


def parse_toc_sect(element: Tag, ctx: ParseContext) -> TocSect:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<tocsect> must not be empty")
    sect = TocSect(element_name=element.name)
    nested: list[TableOfContents] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "name"):
            sect.name = get_inner_element_text(node, "name")
        elif is_inner_element_text(node, "reference"):
            sect.reference = get_inner_element_text(node, "reference")
        elif has_inner_element(node, "docs"):
            # Rendered from the section itself.
            continue
        elif has_inner_element(node, "tableofcontents"):
            nested.append(parse_table_of_contents(node, ctx))
        else:
            report_unknown_element(element.name, node, "TocSect")
    expect_no_attributes(element)
    sect.table_of_contents = nested or None
    return sect
