"""Descriptions, nested sections (sect1..sect6) and internal blocks."""

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
from doxygen2md.model.paragraphs import Title, parse_para, parse_title
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_element_text,
    get_inner_elements,
    get_inner_text,
    has_inner_element,
    has_inner_text,
    is_inner_element_text,
)

# Elements of type descriptionType.
DESCRIPTION_ELEMENT_NAMES = (
    "briefdescription",
    "detaileddescription",
    "inbodydescription",
    "description",
    "xrefdescription",
    "parameterdescription",
)
MAX_SECTION_LEVEL = 6


@dataclass
class Description(DataModelNode):
    title: str | None = None


@dataclass
class Section(DataModelNode):
    """One of ``sect1`` .. ``sect6``; ``level`` is the digit in the tag."""

    level: int = 1
    title: Title | None = None
    id: str | None = None


@dataclass
class Internal(DataModelNode):
    """An ``<internal>`` block; level 0 sits directly in a description."""

    level: int = 0


def section_tag(level: int) -> str:
    return f"sect{level}"


def nested_section_level(internal_level: int) -> int | None:
    """Return the section level an internal block of ``internal_level`` nests.

    The schema has internal level 5 nest ``sect6`` like every other level
    nests the next one, and caps the chain at level 6 where only paragraphs
    are allowed.
    """
    if internal_level >= MAX_SECTION_LEVEL:
        return None
    return internal_level + 1


def parse_description(element: Tag, ctx: ParseContext) -> Description:
    """Build a brief/detailed/in-body/xref/parameter description.

    Raises:
        SchemaViolationError: If the element is empty, has attributes or
            has more than one ``<title>``.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, f"<{element.name}> must not be empty")
    title: str | None = None
    children: list[Child] = []
    for node in inner:
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif is_inner_element_text(node, "title"):
            expect(title is None, f"<{element.name}> has more than one <title>")
            title = get_inner_element_text(node, "title")
        elif has_inner_element(node, "para"):
            children.append(parse_para(node, ctx))
        elif has_inner_element(node, "internal"):
            children.append(parse_internal(node, ctx, level=0))
        elif has_inner_element(node, section_tag(1)):
            children.append(parse_section(node, ctx, level=1))
        else:
            report_unknown_element(element.name, node, "Description")
    expect_no_attributes(element)
    return Description(element_name=element.name, children=children, title=title)


def parse_section(element: Tag, ctx: ParseContext, *, level: int) -> Section:
    """Build a ``sect<level>`` node with its nested internal and sub-sections."""
    expect(1 <= level <= MAX_SECTION_LEVEL, f"Invalid section level {level}")
    inner = get_inner_elements(element)
    expect(len(inner) > 0, f"<{element.name}> must not be empty")
    sub_tag = section_tag(level + 1) if level < MAX_SECTION_LEVEL else None
    title: Title | None = None
    children: list[Child] = []
    for node in inner:
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif has_inner_element(node, "title"):
            expect(title is None, f"<{element.name}> has more than one <title>")
            title = parse_title(node, ctx)
        elif has_inner_element(node, "para"):
            children.append(parse_para(node, ctx))
        elif has_inner_element(node, "internal"):
            children.append(parse_internal(node, ctx, level=level))
        elif sub_tag is not None and has_inner_element(node, sub_tag):
            children.append(parse_section(node, ctx, level=level + 1))
        else:
            report_unknown_element(element.name, node, "Section")
    attributes = collect_attributes(element, {"id": STRING}, "Section")
    return Section(
        element_name=element.name,
        children=children,
        level=level,
        title=title,
        id=attributes.get("id"),
    )


def parse_internal(element: Tag, ctx: ParseContext, *, level: int) -> Internal:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<internal> must not be empty")
    nested_level = nested_section_level(level)
    sub_tag = section_tag(nested_level) if nested_level is not None else None
    children: list[Child] = []
    for node in inner:
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif has_inner_element(node, "para"):
            children.append(parse_para(node, ctx))
        elif sub_tag is not None and has_inner_element(node, sub_tag):
            children.append(parse_section(node, ctx, level=nested_level))
        else:
            report_unknown_element(element.name, node, "Internal")
    expect_no_attributes(element)
    return Internal(element_name=element.name, children=children, level=level)
