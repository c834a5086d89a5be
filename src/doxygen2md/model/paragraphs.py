"""Paragraphs, titles and other mixed-content blocks."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model import dispatch
from doxygen2md.model.base import (
    Child,
    DataModelNode,
    expect,
    expect_no_attributes,
    report_unknown_element,
)
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_elements,
    get_inner_text,
    has_inner_element,
    has_inner_text,
)


@dataclass
class Para(DataModelNode):
    """A ``<para>``: text interleaved with paragraph-group nodes."""


@dataclass
class Title(DataModelNode):
    """A rich title (docTitleType), also used for ``<term>``."""


@dataclass
class Blockquote(DataModelNode):
    pass


@dataclass
class Verbatim(DataModelNode):
    pass


@dataclass
class Preformatted(DataModelNode):
    pass


def parse_para(element: Tag, ctx: ParseContext) -> Para:
    """Build a paragraph; an empty ``<para/>`` is legal."""
    children = dispatch.parse_cmd_content(element, ctx)
    expect_no_attributes(element)
    return Para(element_name=element.name, children=children)


def parse_title(element: Tag, ctx: ParseContext) -> Title:
    children = dispatch.parse_title_content(element, ctx)
    expect_no_attributes(element)
    return Title(element_name=element.name, children=children)


def parse_blockquote(element: Tag, ctx: ParseContext) -> Blockquote:
    children: list[Child] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif has_inner_element(node, "para"):
            children.append(parse_para(node, ctx))
        else:
            report_unknown_element(element.name, node, "Blockquote")
    expect_no_attributes(element)
    return Blockquote(element_name=element.name, children=children)


def parse_verbatim(element: Tag, ctx: ParseContext) -> Verbatim:
    expect(len(get_inner_elements(element)) > 0, "<verbatim> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    expect_no_attributes(element)
    return Verbatim(element_name=element.name, children=children)


def parse_preformatted(element: Tag, ctx: ParseContext) -> Preformatted:
    expect(len(get_inner_elements(element)) > 0, "<preformatted> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    expect_no_attributes(element)
    return Preformatted(element_name=element.name, children=children)
