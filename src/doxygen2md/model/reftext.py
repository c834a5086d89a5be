"""Reference text and linked text (refTextType, linkedTextType)."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model.base import (
    STRING,
    Child,
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
    has_inner_element,
    has_inner_text,
    is_inner_element_text,
)

# Elements of type linkedTextType.
LINKED_TEXT_ELEMENT_NAMES = ("type", "initializer", "defval", "typeconstraint")

_REF_TEXT_ATTRIBUTES = {
    "refid": STRING,
    "kindref": STRING,
    "external": STRING,
    "tooltip": STRING,
}


@dataclass
class RefText(DataModelNode):
    """A ``<ref>`` holding plain text, as used in code and linked text."""

    text: str = ""
    refid: str = ""
    kindref: str = ""
    external: str | None = None
    tooltip: str | None = None


@dataclass
class LinkedText(DataModelNode):
    """Text runs interleaved with references, e.g. a member type."""


def parse_ref_text(element: Tag, ctx: ParseContext) -> RefText:
    expect(
        is_inner_element_text(element, element.name),
        f"<{element.name}> must contain only text",
    )
    text = get_inner_element_text(element, element.name)
    expect(len(text) > 0, f"<{element.name}> must not be empty")
    expect(has_attributes(element), f"<{element.name}> requires attributes")
    attributes = collect_attributes(element, _REF_TEXT_ATTRIBUTES, "RefText")
    refid = attributes.get("refid", "")
    kindref = attributes.get("kindref", "")
    expect(len(refid) > 0, f"<{element.name}> requires a non-empty refid")
    expect(len(kindref) > 0, f"<{element.name}> requires a non-empty kindref")
    return RefText(
        element_name=element.name,
        text=text,
        refid=refid,
        kindref=kindref,
        external=attributes.get("external"),
        tooltip=attributes.get("tooltip"),
    )


def parse_text_and_refs(element: Tag, ctx: ParseContext, owner: str) -> list[Child]:
    """Collect text runs and ``<ref>`` children; other elements are reported."""
    children: list[Child] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif has_inner_element(node, "ref"):
            children.append(parse_ref_text(node, ctx))
        else:
            report_unknown_element(element.name, node, owner)
    return children


def parse_linked_text(element: Tag, ctx: ParseContext) -> LinkedText:
    children = parse_text_and_refs(element, ctx, "LinkedText")
    expect_no_attributes(element)
    return LinkedText(element_name=element.name, children=children)
