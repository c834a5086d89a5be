"""Program listings, code lines and syntax highlight runs."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model.base import (
    BOOLEAN,
    NUMBER,
    STRING,
    Child,
    DataModelNode,
    collect_attributes,
    expect,
    report_unknown_element,
)
from doxygen2md.model.reftext import parse_ref_text
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_elements,
    get_inner_text,
    has_attributes,
    has_inner_element,
    has_inner_text,
)

_CODE_LINE_ATTRIBUTES = {
    "lineno": NUMBER,
    "refid": STRING,
    "refkind": STRING,
    "external": BOOLEAN,
}


@dataclass
class Sp(DataModelNode):
    """A run of ``value`` spaces (one when unset)."""

    value: int | float | None = None


@dataclass
class Highlight(DataModelNode):
    class_: str = ""


@dataclass
class CodeLine(DataModelNode):
    highlights: list[Highlight] | None = None
    lineno: int | float | None = None
    refid: str | None = None
    refkind: str | None = None
    external: bool | None = None


@dataclass
class ProgramListing(DataModelNode):
    codelines: list[CodeLine] | None = None
    filename: str | None = None


@dataclass
class MemberProgramListing(ProgramListing):
    """The slice of a file listing that covers one member's body."""


def parse_program_listing(element: Tag, ctx: ParseContext) -> ProgramListing:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<programlisting> must not be empty")
    codelines: list[CodeLine] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "codeline"):
            codelines.append(parse_code_line(node, ctx))
        else:
            report_unknown_element(element.name, node, "ProgramListing")
    attributes = collect_attributes(element, {"filename": STRING}, "ProgramListing")
    return ProgramListing(
        element_name=element.name,
        codelines=codelines or None,
        filename=attributes.get("filename"),
    )


def member_program_listing(
    listing: ProgramListing, start_line: int, end_line: int
) -> MemberProgramListing:
    """Keep the code lines numbered within ``[start_line, end_line]``.

    Args:
        listing: The full listing, usually of a file compound.
        start_line: First line of the member body, inclusive.
        end_line: Last line of the member body, inclusive.

    Returns:
        A new listing; ``codelines`` is None when no line falls in range.
        Lines without a number are dropped.

    Raises:
        SchemaViolationError: If ``start_line`` is after ``end_line``.
    """
    expect(
        start_line <= end_line,
        f"Listing range start {start_line} is after end {end_line}",
    )
    selected = [
        line
        for line in listing.codelines or []
        if line.lineno is not None and start_line <= line.lineno <= end_line
    ]
    return MemberProgramListing(
        element_name=listing.element_name,
        codelines=selected or None,
        filename=listing.filename,
    )


def parse_code_line(element: Tag, ctx: ParseContext) -> CodeLine:
    """Build a ``<codeline>``; blank source lines come through empty."""
    highlights: list[Highlight] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            continue
        if has_inner_element(node, "highlight"):
            highlights.append(parse_highlight(node, ctx))
        else:
            report_unknown_element(element.name, node, "CodeLine")
    attributes = collect_attributes(element, _CODE_LINE_ATTRIBUTES, "CodeLine")
    return CodeLine(element_name=element.name, highlights=highlights or None, **attributes)


def parse_highlight(element: Tag, ctx: ParseContext) -> Highlight:
    children: list[Child] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            children.append(get_inner_text(node))
        elif has_inner_element(node, "sp"):
            children.append(parse_sp(node, ctx))
        elif has_inner_element(node, "ref"):
            children.append(parse_ref_text(node, ctx))
        else:
            report_unknown_element(element.name, node, "Highlight")
    expect(has_attributes(element), "<highlight> requires attributes")
    attributes = collect_attributes(element, {"class": STRING}, "Highlight")
    class_ = attributes.get("class", "")
    expect(len(class_) > 0, "<highlight> requires a non-empty class")
    return Highlight(element_name=element.name, children=children, class_=class_)


def parse_sp(element: Tag, ctx: ParseContext) -> Sp:
    expect(not get_inner_elements(element), "<sp> must be empty")
    attributes = collect_attributes(element, {"value": NUMBER}, "Sp")
    return Sp(element_name=element.name, value=attributes.get("value"))
