"""Lists, simple sections, variable lists and cross-reference sections."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model import dispatch
from doxygen2md.model.base import (
    NUMBER,
    STRING,
    Child,
    DataModelNode,
    collect_attributes,
    expect,
    expect_no_attributes,
    report_unknown_element,
)
from doxygen2md.model.paragraphs import Para, Title, parse_para, parse_title
from doxygen2md.model.sections import Description, parse_description
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


@dataclass
class ListItem(DataModelNode):
    paras: list[Para] | None = None
    override: str | None = None
    value: int | float | None = None


@dataclass
class DocList(DataModelNode):
    """An ``<itemizedlist>`` or ``<orderedlist>``."""

    list_items: list[ListItem] | None = None
    type: str | None = None
    start: int | float | None = None


@dataclass
class SimpleSect(DataModelNode):
    """A ``\\return``, ``\\note``, ``\\see``... block; ``kind`` names which."""

    title: str | None = None
    kind: str = ""


@dataclass
class XrefSect(DataModelNode):
    """A ``\\todo``, ``\\bug``, ``\\deprecated`` or custom ``\\xrefitem``."""

    xreftitle: str | None = None
    xrefdescription: Description | None = None
    id: str = ""


@dataclass
class VarListEntry(DataModelNode):
    term: Title | None = None


@dataclass
class VariableListPair(DataModelNode):
    entry: VarListEntry | None = None
    item: ListItem | None = None


@dataclass
class VariableList(DataModelNode):
    """Term/definition pairs; ``children`` holds ``VariableListPair`` nodes."""


@dataclass
class TocItem(DataModelNode):
    id: str = ""


@dataclass
class TocList(DataModelNode):
    toc_items: list[TocItem] | None = None


def parse_doc_list(element: Tag, ctx: ParseContext) -> DocList:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, f"<{element.name}> must not be empty")
    items: list[ListItem] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "listitem"):
            items.append(parse_list_item(node, ctx))
        else:
            report_unknown_element(element.name, node, "DocList")
    attributes = collect_attributes(element, {"type": STRING, "start": NUMBER}, "DocList")
    return DocList(
        element_name=element.name,
        list_items=items or None,
        type=attributes.get("type"),
        start=attributes.get("start"),
    )


def parse_list_item(element: Tag, ctx: ParseContext) -> ListItem:
    """Build a ``<listitem>``; an empty item is legal."""
    paras: list[Para] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            continue
        if has_inner_element(node, "para"):
            paras.append(parse_para(node, ctx))
        else:
            report_unknown_element(element.name, node, "ListItem")
    attributes = collect_attributes(
        element, {"override": STRING, "value": NUMBER}, "ListItem"
    )
    return ListItem(
        element_name=element.name,
        paras=paras or None,
        override=attributes.get("override"),
        value=attributes.get("value"),
    )


def parse_simple_sect(element: Tag, ctx: ParseContext) -> SimpleSect:
    """Build a ``<simplesect>``.

    Raises:
        SchemaViolationError: If the element is empty, lacks attributes or
            has more than one ``<title>``.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<simplesect> must not be empty")
    title: str | None = None
    children: list[Child] = []
    for node in inner:
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif is_inner_element_text(node, "title"):
            expect(title is None, "<simplesect> has more than one <title>")
            title = get_inner_element_text(node, "title")
        elif has_inner_element(node, "para"):
            children.append(parse_para(node, ctx))
        else:
            report_unknown_element(element.name, node, "SimpleSect")
    expect(has_attributes(element), "<simplesect> requires attributes")
    attributes = collect_attributes(element, {"kind": STRING}, "SimpleSect")
    kind = attributes.get("kind", "")
    expect(len(kind) > 0, "<simplesect> requires a non-empty kind")
    return SimpleSect(element_name=element.name, children=children, title=title, kind=kind)


def parse_xref_sect(element: Tag, ctx: ParseContext) -> XrefSect:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<xrefsect> must not be empty")
    xreftitle: str | None = None
    description: Description | None = None
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "xreftitle"):
            expect(xreftitle is None, "<xrefsect> has more than one <xreftitle>")
            xreftitle = get_inner_element_text(node, "xreftitle")
        elif has_inner_element(node, "xrefdescription"):
            expect(description is None, "<xrefsect> has more than one <xrefdescription>")
            description = parse_description(node, ctx)
        else:
            report_unknown_element(element.name, node, "XrefSect")
    expect(description is not None, "<xrefsect> requires an <xrefdescription>")
    expect(has_attributes(element), "<xrefsect> requires attributes")
    attributes = collect_attributes(element, {"id": STRING}, "XrefSect")
    xref_id = attributes.get("id", "")
    expect(len(xref_id) > 0, "<xrefsect> requires a non-empty id")
    return XrefSect(
        element_name=element.name,
        xreftitle=xreftitle,
        xrefdescription=description,
        id=xref_id,
    )


def parse_variable_list(element: Tag, ctx: ParseContext) -> VariableList:
    """Pair each ``<varlistentry>`` with the ``<listitem>`` that follows it.

    Raises:
        SchemaViolationError: If a ``<listitem>`` has no preceding entry.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<variablelist> must not be empty")
    children: list[Child] = []
    pending: VarListEntry | None = None
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "varlistentry"):
            pending = parse_var_list_entry(node, ctx)
        elif has_inner_element(node, "listitem"):
            expect(pending is not None, "<listitem> without a preceding <varlistentry>")
            children.append(
                VariableListPair(
                    element_name="variablelistpair",
                    entry=pending,
                    item=parse_list_item(node, ctx),
                )
            )
            pending = None
        else:
            report_unknown_element(element.name, node, "VariableList")
    expect_no_attributes(element)
    return VariableList(element_name=element.name, children=children)


def parse_var_list_entry(element: Tag, ctx: ParseContext) -> VarListEntry:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<varlistentry> must not be empty")
    term: Title | None = None
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "term"):
            expect(term is None, "<varlistentry> has more than one <term>")
            term = parse_title(node, ctx)
        else:
            report_unknown_element(element.name, node, "VarListEntry")
    expect(term is not None, "<varlistentry> requires a <term>")
    expect_no_attributes(element)
    return VarListEntry(element_name=element.name, term=term)


def parse_toc_list(element: Tag, ctx: ParseContext) -> TocList:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<toclist> must not be empty")
    items: list[TocItem] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "tocitem"):
            items.append(parse_toc_item(node, ctx))
        else:
            report_unknown_element(element.name, node, "TocList")
    expect_no_attributes(element)
    return TocList(element_name=element.name, toc_items=items or None)


def parse_toc_item(element: Tag, ctx: ParseContext) -> TocItem:
    expect(len(get_inner_elements(element)) > 0, "<tocitem> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    expect(has_attributes(element), "<tocitem> requires attributes")
    attributes = collect_attributes(element, {"id": STRING}, "TocItem")
    item_id = attributes.get("id", "")
    expect(len(item_id) > 0, "<tocitem> requires a non-empty id")
    return TocItem(element_name=element.name, children=children, id=item_id)
