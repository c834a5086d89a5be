"""Parameter lists (``\\param``, ``\\tparam``, ``\\retval``, ``\\exception``)."""

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
from doxygen2md.model.reftext import parse_text_and_refs
from doxygen2md.model.sections import Description, parse_description
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_elements,
    has_attributes,
    has_inner_element,
    has_inner_text,
)


@dataclass
class ParameterType(DataModelNode):
    pass


@dataclass
class ParameterName(DataModelNode):
    direction: str | None = None


@dataclass
class ParameterNameList(DataModelNode):
    """Types and names in document order; they are not paired up."""


@dataclass
class ParameterItem(DataModelNode):
    name_lists: list[ParameterNameList] | None = None
    description: Description | None = None


@dataclass
class ParameterList(DataModelNode):
    kind: str = ""
    items: list[ParameterItem] | None = None


def parse_parameter_list(element: Tag, ctx: ParseContext) -> ParameterList:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<parameterlist> must not be empty")
    items: list[ParameterItem] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "parameteritem"):
            items.append(parse_parameter_item(node, ctx))
        else:
            report_unknown_element(element.name, node, "ParameterList")
    expect(has_attributes(element), "<parameterlist> requires attributes")
    attributes = collect_attributes(element, {"kind": STRING}, "ParameterList")
    kind = attributes.get("kind", "")
    expect(len(kind) > 0, "<parameterlist> requires a non-empty kind")
    return ParameterList(
        element_name=element.name,
        kind=kind,
        items=items or None,
    )


def parse_parameter_item(element: Tag, ctx: ParseContext) -> ParameterItem:
    """Build a ``<parameteritem>``.

    Raises:
        SchemaViolationError: Unless there is exactly one
            ``<parameterdescription>``.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<parameteritem> must not be empty")
    name_lists: list[ParameterNameList] = []
    description: Description | None = None
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "parameternamelist"):
            name_lists.append(parse_parameter_name_list(node, ctx))
        elif has_inner_element(node, "parameterdescription"):
            expect(
                description is None,
                "<parameteritem> has more than one <parameterdescription>",
            )
            description = parse_description(node, ctx)
        else:
            report_unknown_element(element.name, node, "ParameterItem")
    expect(description is not None, "<parameteritem> requires a <parameterdescription>")
    expect_no_attributes(element)
    return ParameterItem(
        element_name=element.name,
        name_lists=name_lists or None,
        description=description,
    )


def parse_parameter_name_list(element: Tag, ctx: ParseContext) -> ParameterNameList:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<parameternamelist> must not be empty")
    children: list[Child] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "parametertype"):
            children.append(parse_parameter_type(node, ctx))
        elif has_inner_element(node, "parametername"):
            children.append(parse_parameter_name(node, ctx))
        else:
            report_unknown_element(element.name, node, "ParameterNameList")
    expect_no_attributes(element)
    return ParameterNameList(element_name=element.name, children=children)


def parse_parameter_type(element: Tag, ctx: ParseContext) -> ParameterType:
    expect(len(get_inner_elements(element)) > 0, "<parametertype> must not be empty")
    children = parse_text_and_refs(element, ctx, "ParameterType")
    expect_no_attributes(element)
    return ParameterType(element_name=element.name, children=children)


def parse_parameter_name(element: Tag, ctx: ParseContext) -> ParameterName:
    expect(len(get_inner_elements(element)) > 0, "<parametername> must not be empty")
    children = parse_text_and_refs(element, ctx, "ParameterName")
    attributes = collect_attributes(element, {"direction": STRING}, "ParameterName")
    return ParameterName(
        element_name=element.name,
        children=children,
        direction=attributes.get("direction"),
    )
