"""Tables: ``<table>``, ``<row>``, ``<entry>`` and ``<caption>``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model import dispatch
from doxygen2md.model.base import (
    NUMBER,
    STRING,
    DataModelNode,
    collect_attributes,
    expect,
    expect_no_attributes,
    report_unknown_element,
)
from doxygen2md.model.paragraphs import Para, parse_para
from doxygen2md.xml_parser import (
    ParseContext,
    get_attribute_boolean_value,
    get_attribute_number_value,
    get_attribute_string_value,
    get_attributes_names,
    get_inner_elements,
    has_attributes,
    has_inner_element,
    has_inner_text,
)

logger = logging.getLogger(__name__)

_ENTRY_STRING_ATTRIBUTES = ("align", "valign", "width", "class")


@dataclass
class Caption(DataModelNode):
    id: str = ""


@dataclass
class Entry(DataModelNode):
    """A table cell; its paragraphs are in ``paras``."""

    paras: list[Para] | None = None
    thead: bool = False
    colspan: int | None = None
    rowspan: int | None = None
    align: str | None = None
    valign: str | None = None
    width: str | None = None
    class_: str | None = None


@dataclass
class Row(DataModelNode):
    entries: list[Entry] | None = None


@dataclass
class Table(DataModelNode):
    """A table; rows and caption are kept in their own fields."""

    caption: Caption | None = None
    rows: list[Row] | None = None
    rows_count: int = 0
    cols_count: int = 0
    width: str | None = None


def parse_table(element: Tag, ctx: ParseContext) -> Table:
    """Build a ``<table>``.

    Raises:
        SchemaViolationError: If the table is empty, has two captions, or
            its ``rows``/``cols`` counts are missing or not positive.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<table> must not be empty")
    caption: Caption | None = None
    rows: list[Row] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "caption"):
            expect(caption is None, "<table> has more than one <caption>")
            caption = parse_caption(node, ctx)
        elif has_inner_element(node, "row"):
            rows.append(parse_row(node, ctx))
        else:
            report_unknown_element(element.name, node, "Table")
    expect(has_attributes(element), "<table> requires attributes")
    attributes = collect_attributes(
        element, {"rows": NUMBER, "cols": NUMBER, "width": STRING}, "Table"
    )
    rows_count = attributes.get("rows", 0)
    cols_count = attributes.get("cols", 0)
    expect(rows_count > 0, f"<table> rows must be positive, got {rows_count}")
    expect(cols_count > 0, f"<table> cols must be positive, got {cols_count}")
    return Table(
        element_name=element.name,
        caption=caption,
        rows=rows or None,
        rows_count=int(rows_count),
        cols_count=int(cols_count),
        width=attributes.get("width"),
    )


def parse_row(element: Tag, ctx: ParseContext) -> Row:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<row> must not be empty")
    entries: list[Entry] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "entry"):
            entries.append(parse_entry(node, ctx))
        else:
            report_unknown_element(element.name, node, "Row")
    expect_no_attributes(element)
    return Row(element_name=element.name, entries=entries or None)


def parse_entry(element: Tag, ctx: ParseContext) -> Entry:
    """Build a table cell.

    Attributes outside the DTD (Doxygen passes HTML ones through) are
    logged and skipped rather than rejected.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<entry> must not be empty")
    paras: list[Para] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "para"):
            paras.append(parse_para(node, ctx))
        else:
            report_unknown_element(element.name, node, "Entry")

    entry = Entry(element_name=element.name, paras=paras or None)
    for name in get_attributes_names(element):
        if name == "thead":
            entry.thead = get_attribute_boolean_value(element, name)
        elif name in ("colspan", "rowspan"):
            span = get_attribute_number_value(element, name)
            expect(
                isinstance(span, int) and span > 0,
                f"<entry> {name} must be a positive integer, got {span}",
            )
            setattr(entry, name, span)
        elif name in _ENTRY_STRING_ATTRIBUTES:
            field_name = "class_" if name == "class" else name
            setattr(entry, field_name, get_attribute_string_value(element, name))
        else:
            logger.error(
                "%s attribute: %s not in DTD, skipped in Entry",
                element.name,
                name,
                extra={"parent": element.name, "attribute": name, "owner": "Entry"},
            )
    return entry


def parse_caption(element: Tag, ctx: ParseContext) -> Caption:
    expect(len(get_inner_elements(element)) > 0, "<caption> must not be empty")
    children = dispatch.parse_title_content(element, ctx)
    expect(has_attributes(element), "<caption> requires attributes")
    attributes = collect_attributes(element, {"id": STRING}, "Caption")
    caption_id = attributes.get("id", "")
    expect(len(caption_id) > 0, "<caption> requires a non-empty id")
    return Caption(element_name=element.name, children=children, id=caption_id)
