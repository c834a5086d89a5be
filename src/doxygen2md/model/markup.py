"""Inline markup and leaf node types of Doxygen descriptions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model import dispatch
from doxygen2md.model.base import (
    BOOLEAN,
    NUMBER,
    STRING,
    DataModelNode,
    collect_attributes,
    expect,
    expect_no_attributes,
    report_unknown_element,
)
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_element_text,
    get_inner_elements,
    get_inner_text,
    has_attributes,
    has_inner_text,
    is_inner_element_text,
)

logger = logging.getLogger(__name__)

# docMarkupType elements; each holds paragraph-group content.
MARKUP_ELEMENT_NAMES = (
    "bold",
    "s",
    "strike",
    "underline",
    "emphasis",
    "computeroutput",
    "subscript",
    "superscript",
    "center",
    "small",
    "cite",
    "del",
    "ins",
)


@dataclass
class DocMarkup(DataModelNode):
    """Bold, emphasis, computer output and the other styled runs."""


@dataclass
class DocEmpty(DataModelNode):
    """Line break, horizontal ruler or non-breakable space."""


@dataclass
class DocString(DataModelNode):
    """Text-only passthrough such as ``docbookonly``."""

    text: str = ""


@dataclass
class HtmlOnly(DataModelNode):
    text: str = ""
    block: str | None = None


@dataclass
class Ulink(DataModelNode):
    url: str = ""


@dataclass
class Anchor(DataModelNode):
    id: str = ""


@dataclass
class Formula(DataModelNode):
    text: str = ""
    id: str = ""


@dataclass
class Emoji(DataModelNode):
    name: str = ""
    unicode: str = ""


@dataclass
class Image(DataModelNode):
    """An ``<image>``; HTML images are registered with the parse context."""

    type: str | None = None
    name: str | None = None
    width: str | None = None
    height: str | None = None
    alt: str | None = None
    inline: bool | None = None
    caption: str | None = None


@dataclass
class Heading(DataModelNode):
    level: int | None = None


@dataclass
class Ref(DataModelNode):
    """A cross reference inside a description (docRefTextType)."""

    refid: str = ""
    kindref: str = ""
    external: str | None = None


_IMAGE_ATTRIBUTES = {
    "type": STRING,
    "name": STRING,
    "width": STRING,
    "height": STRING,
    "alt": STRING,
    "inline": BOOLEAN,
    "caption": STRING,
}
_REF_ATTRIBUTES = {"refid": STRING, "kindref": STRING, "external": STRING}


def parse_doc_markup(element: Tag, ctx: ParseContext) -> DocMarkup:
    children = dispatch.parse_cmd_content(element, ctx)
    expect_no_attributes(element)
    return DocMarkup(element_name=element.name, children=children)


def parse_doc_empty(element: Tag, ctx: ParseContext) -> DocEmpty:
    return DocEmpty(element_name=element.name)


def parse_doc_string(element: Tag, ctx: ParseContext) -> DocString:
    expect(
        is_inner_element_text(element, element.name),
        f"<{element.name}> must contain only text",
    )
    text = get_inner_element_text(element, element.name)
    expect_no_attributes(element)
    return DocString(element_name=element.name, text=text)


def parse_html_only(element: Tag, ctx: ParseContext) -> HtmlOnly:
    expect(
        is_inner_element_text(element, element.name),
        f"<{element.name}> must contain only text",
    )
    text = get_inner_element_text(element, element.name)
    attributes = collect_attributes(element, {"block": STRING}, "HtmlOnly")
    return HtmlOnly(element_name=element.name, text=text, block=attributes.get("block"))


def parse_ulink(element: Tag, ctx: ParseContext) -> Ulink:
    expect(len(get_inner_elements(element)) > 0, "<ulink> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    expect(has_attributes(element), "<ulink> requires attributes")
    attributes = collect_attributes(element, {"url": STRING}, "Ulink")
    url = attributes.get("url", "")
    expect(len(url) > 0, "<ulink> requires a non-empty url")
    return Ulink(element_name=element.name, children=children, url=url)


def parse_anchor(element: Tag, ctx: ParseContext) -> Anchor:
    children: list[str] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            children.append(get_inner_text(node))
        else:
            report_unknown_element(element.name, node, "Anchor")
    if children:
        logger.error("Unexpected <anchor> text content in Anchor: %r", "".join(children))
    expect(has_attributes(element), "<anchor> requires attributes")
    attributes = collect_attributes(element, {"id": STRING}, "Anchor")
    anchor_id = attributes.get("id", "")
    expect(len(anchor_id) > 0, "<anchor> requires a non-empty id")
    return Anchor(element_name=element.name, children=children, id=anchor_id)


def parse_formula(element: Tag, ctx: ParseContext) -> Formula:
    expect(
        is_inner_element_text(element, element.name),
        "<formula> must contain only text",
    )
    text = get_inner_element_text(element, element.name)
    expect(len(text) > 0, "<formula> must not be empty")
    expect(has_attributes(element), "<formula> requires attributes")
    attributes = collect_attributes(element, {"id": STRING}, "Formula")
    formula_id = attributes.get("id", "")
    expect(len(formula_id) > 0, "<formula> requires a non-empty id")
    return Formula(element_name=element.name, text=text, id=formula_id)


def parse_emoji(element: Tag, ctx: ParseContext) -> Emoji:
    expect(not get_inner_elements(element), "<emoji> must be empty")
    expect(has_attributes(element), "<emoji> requires attributes")
    attributes = collect_attributes(
        element, {"name": STRING, "unicode": STRING}, "Emoji"
    )
    return Emoji(
        element_name=element.name,
        name=attributes.get("name", ""),
        unicode=attributes.get("unicode", ""),
    )


def parse_image(element: Tag, ctx: ParseContext) -> Image:
    children = dispatch.parse_title_content(element, ctx)
    expect(has_attributes(element), "<image> requires attributes")
    attributes = collect_attributes(element, _IMAGE_ATTRIBUTES, "Image")
    image = Image(element_name=element.name, children=children, **attributes)
    ctx.register_image(image)
    return image


def parse_heading(element: Tag, ctx: ParseContext) -> Heading:
    expect(len(get_inner_elements(element)) > 0, "<heading> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    attributes = collect_attributes(element, {"level": NUMBER}, "Heading")
    return Heading(element_name=element.name, children=children, level=attributes.get("level"))


def parse_ref(element: Tag, ctx: ParseContext) -> Ref:
    expect(len(get_inner_elements(element)) > 0, "<ref> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    expect(has_attributes(element), "<ref> requires attributes")
    attributes = collect_attributes(element, _REF_ATTRIBUTES, "Ref")
    kindref = attributes.get("kindref", "")
    expect(len(kindref) > 0, "<ref> requires a non-empty kindref")
    return Ref(
        element_name=element.name,
        children=children,
        refid=attributes.get("refid", ""),
        kindref=kindref,
        external=attributes.get("external"),
    )
