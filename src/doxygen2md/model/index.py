"""Types of ``index.xml``: the list of compounds and their members."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from doxygen2md.model.base import (
    STRING,
    DataModelNode,
    collect_attributes,
    expect,
    report_unknown_element,
)
from doxygen2md.xml_parser import (
    ParseContext,
    get_inner_element_text,
    get_inner_elements,
    has_attributes,
    has_inner_element,
    has_inner_text,
    is_inner_element_text,
)

_OWNER_PREFIX = "index"


@dataclass
class IndexMember(DataModelNode):
    name: str = ""
    refid: str = ""
    kind: str = ""


@dataclass
class IndexCompound(DataModelNode):
    name: str = ""
    refid: str = ""
    kind: str = ""
    members: list[IndexMember] | None = None


@dataclass
class DoxygenIndex(DataModelNode):
    version: str = ""
    lang: str = ""
    no_namespace_schema_location: str | None = None
    compounds: list[IndexCompound] | None = None


def _read_refid_and_kind(element: Tag, owner: str) -> tuple[str, str]:
    expect(has_attributes(element), f"index <{element.name}> requires attributes")
    attributes = collect_attributes(element, {"refid": STRING, "kind": STRING}, owner)
    refid = attributes.get("refid", "")
    kind = attributes.get("kind", "")
    expect(len(refid) > 0, f"index <{element.name}> requires a non-empty refid")
    expect(len(kind) > 0, f"index <{element.name}> requires a non-empty kind")
    return refid, kind


def _read_name(current: str, node: Tag, parent: str) -> str:
    expect(len(current) == 0, f"index <{parent}> has more than one <name>")
    return get_inner_element_text(node, "name")


def parse_index_member(element: Tag, ctx: ParseContext) -> IndexMember:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "index <member> must not be empty")
    name = ""
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "name"):
            name = _read_name(name, node, element.name)
        else:
            report_unknown_element(f"{_OWNER_PREFIX} {element.name}", node, "IndexMember")
    refid, kind = _read_refid_and_kind(element, "IndexMember")
    return IndexMember(element_name=element.name, name=name, refid=refid, kind=kind)


def parse_index_compound(element: Tag, ctx: ParseContext) -> IndexCompound:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "index <compound> must not be empty")
    name = ""
    members: list[IndexMember] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "name"):
            name = _read_name(name, node, element.name)
        elif has_inner_element(node, "member"):
            members.append(parse_index_member(node, ctx))
        else:
            report_unknown_element(f"{_OWNER_PREFIX} {element.name}", node, "IndexCompound")
    refid, kind = _read_refid_and_kind(element, "IndexCompound")
    return IndexCompound(
        element_name=element.name,
        name=name,
        refid=refid,
        kind=kind,
        members=members or None,
    )


def parse_doxygen_index(element: Tag, ctx: ParseContext) -> DoxygenIndex:
    """Build the ``<doxygenindex>`` root of ``index.xml``.

    Raises:
        SchemaViolationError: If the root is empty or lacks ``version`` or
            ``lang``.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<doxygenindex> must not be empty")
    compounds: list[IndexCompound] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "compound"):
            compounds.append(parse_index_compound(node, ctx))
        else:
            report_unknown_element(f"{_OWNER_PREFIX} {element.name}", node, "DoxygenIndex")
    expect(has_attributes(element), "<doxygenindex> requires attributes")
    attributes = collect_attributes(
        element,
        {"version": STRING, "lang": STRING, "noNamespaceSchemaLocation": STRING},
        "DoxygenIndex",
    )
    version = attributes.get("version", "")
    lang = attributes.get("lang", "")
    expect(len(version) > 0, "<doxygenindex> requires a non-empty version")
    expect(len(lang) > 0, "<doxygenindex> requires a non-empty lang")
    return DoxygenIndex(
        element_name=element.name,
        version=version,
        lang=lang,
        no_namespace_schema_location=attributes.get("noNamespaceSchemaLocation"),
        compounds=compounds or None,
    )
