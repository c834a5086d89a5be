"""Compound-level types of ``compound.xsd``: compounddef, sectiondef, memberdef."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from bs4.element import Tag

from doxygen2md.model.base import (
    BOOLEAN,
    NUMBER,
    STRING,
    AttributeReader,
    DataModelNode,
    collect_attributes,
    expect,
    expect_no_attributes,
    report_unknown_element,
)
from doxygen2md.model.listings import ProgramListing, parse_program_listing
from doxygen2md.model.reftext import LinkedText, parse_linked_text
from doxygen2md.model.sections import Description, parse_description
from doxygen2md.model.toc import TableOfContents, parse_table_of_contents
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

# Dependency and collaboration graphs are regenerated by the site, not parsed.
_SKIPPED_GRAPHS = frozenset(
    {"incdepgraph", "invincdepgraph", "inheritancegraph", "collaborationgraph"}
)
INNER_REF_ELEMENT_NAMES = (
    "innermodule",
    "innerdir",
    "innerfile",
    "innerclass",
    "innerconcept",
    "innernamespace",
    "innerpage",
    "innergroup",
)
_SECTION_KIND_SUFFIX = re.compile(r"-[a-z]+$")

_MEMBER_DEF_BOOLEANS = (
    "static",
    "extern",
    "strong",
    "const",
    "explicit",
    "inline",
    "refqual",
    "volatile",
    "mutable",
    "noexcept",
    "nodiscard",
    "constexpr",
    "consteval",
    "constinit",
    "final",
)
_MEMBER_DEF_ATTRIBUTES: dict[str, AttributeReader] = {
    "kind": STRING,
    "id": STRING,
    "prot": STRING,
    "virt": STRING,
    "noexceptexpression": STRING,
    **{name: BOOLEAN for name in _MEMBER_DEF_BOOLEANS},
}
_COMPOUND_DEF_ATTRIBUTES: dict[str, AttributeReader] = {
    "id": STRING,
    "kind": STRING,
    "language": STRING,
    "prot": STRING,
    "final": BOOLEAN,
    "inline": BOOLEAN,
    "sealed": BOOLEAN,
    "abstract": BOOLEAN,
}
_LOCATION_ATTRIBUTES: dict[str, AttributeReader] = {
    "file": STRING,
    "line": NUMBER,
    "column": NUMBER,
    "declfile": STRING,
    "declline": NUMBER,
    "declcolumn": NUMBER,
    "bodyfile": STRING,
    "bodystart": NUMBER,
    "bodyend": NUMBER,
}
_DOXYGEN_ATTRIBUTES: dict[str, AttributeReader] = {
    "version": STRING,
    "lang": STRING,
    "noNamespaceSchemaLocation": STRING,
}


@dataclass
class Location(DataModelNode):
    file: str = ""
    line: int | None = None
    column: int | None = None
    declfile: str | None = None
    declline: int | None = None
    declcolumn: int | None = None
    bodyfile: str | None = None
    bodystart: int | None = None
    bodyend: int | None = None


@dataclass
class Inc(DataModelNode):
    """An ``<includes>`` or ``<includedby>`` entry."""

    text: str = ""
    local: bool = False
    refid: str | None = None


@dataclass
class CompoundRef(DataModelNode):
    text: str = ""
    prot: str = ""
    virt: str = ""
    refid: str | None = None


@dataclass
class InnerRef(DataModelNode):
    text: str = ""
    refid: str = ""
    prot: str | None = None
    inline: bool | None = None


@dataclass
class Reference(DataModelNode):
    text: str = ""
    refid: str = ""
    startline: int | None = None
    endline: int | None = None
    compoundref: str | None = None


@dataclass
class Reimplement(DataModelNode):
    text: str = ""
    refid: str = ""


@dataclass
class Param(DataModelNode):
    attributes: str | None = None
    type: LinkedText | None = None
    declname: str | None = None
    defname: str | None = None
    array: str | None = None
    defval: LinkedText | None = None
    typeconstraint: LinkedText | None = None


@dataclass
class TemplateParamList(DataModelNode):
    params: list[Param] | None = None


@dataclass
class EnumValue(DataModelNode):
    name: str = ""
    initializer: LinkedText | None = None
    brief_description: Description | None = None
    detailed_description: Description | None = None
    id: str = ""
    prot: str = ""


@dataclass
class MemberRef(DataModelNode):
    scope: str = ""
    name: str = ""
    refid: str = ""
    prot: str = ""
    virt: str = ""
    ambiguityscope: str | None = None


@dataclass
class ListOfAllMembers(DataModelNode):
    member_refs: list[MemberRef] | None = None


@dataclass
class Member(DataModelNode):
    """A ``<member>`` of a sectiondef pointing at a memberdef elsewhere.

    ``kind`` may be empty in the XML; it is filled in from the referenced
    memberdef once all compound files are parsed.
    """

    name: str = ""
    kind: str = ""
    refid: str = ""


@dataclass
class MemberDef(DataModelNode):
    name: str = ""
    kind: str = ""
    id: str = ""
    prot: str = ""
    location: Location | None = None
    templateparamlist: TemplateParamList | None = None
    type: LinkedText | None = None
    definition: str | None = None
    argsstring: str | None = None
    qualified_name: str | None = None
    bitfield: str | None = None
    reimplements: list[Reimplement] | None = None
    reimplemented_by: list[Reimplement] | None = None
    params: list[Param] | None = None
    enumvalues: list[EnumValue] | None = None
    initializer: LinkedText | None = None
    brief_description: Description | None = None
    detailed_description: Description | None = None
    inbody_description: Description | None = None
    references: list[Reference] | None = None
    referenced_by: list[Reference] | None = None
    virt: str | None = None
    noexceptexpression: str | None = None
    static: bool | None = None
    extern: bool | None = None
    strong: bool | None = None
    const: bool | None = None
    explicit: bool | None = None
    inline: bool | None = None
    refqual: bool | None = None
    volatile: bool | None = None
    mutable: bool | None = None
    noexcept: bool | None = None
    nodiscard: bool | None = None
    constexpr: bool | None = None
    consteval: bool | None = None
    constinit: bool | None = None
    final: bool | None = None


@dataclass
class SectionDef(DataModelNode):
    kind: str = ""
    header: str | None = None
    description: Description | None = None
    member_defs: list[MemberDef] | None = None
    members: list[Member] | None = None

    def has_members(self) -> bool:
        return self.member_defs is not None or self.members is not None

    def compute_adjusted_kind(self, section_suffix: str, member_suffix: str | None = None) -> str:
        """Rewrite the section kind for a grouping page.

        ``public-func`` with suffix ``attrib`` becomes ``public-attrib``;
        kinds without a visibility prefix and ``user-defined`` sections
        take ``member_suffix`` (default: ``section_suffix``) as is.
        """
        if member_suffix is None:
            member_suffix = section_suffix
        if self.kind == "user-defined" or "-" not in self.kind:
            return member_suffix
        return _SECTION_KIND_SUFFIX.sub("-", self.kind) + section_suffix


@dataclass
class CompoundDef(DataModelNode):
    id: str = ""
    kind: str = ""
    compound_name: str = ""
    title: str | None = None
    brief_description: Description | None = None
    detailed_description: Description | None = None
    base_compound_refs: list[CompoundRef] | None = None
    derived_compound_refs: list[CompoundRef] | None = None
    includes: list[Inc] | None = None
    included_by: list[Inc] | None = None
    inner_refs: dict[str, list[InnerRef]] | None = None
    template_param_list: TemplateParamList | None = None
    section_defs: list[SectionDef] | None = None
    table_of_contents: TableOfContents | None = None
    program_listing: ProgramListing | None = None
    location: Location | None = None
    list_of_all_members: ListOfAllMembers | None = None
    language: str | None = None
    prot: str | None = None
    final: bool | None = None
    inline: bool | None = None
    sealed: bool | None = None
    abstract: bool | None = None

    def inner(self, element_name: str) -> list[InnerRef]:
        """Return the ``innerclass``/``innerfile``/... references of one kind."""
        return list((self.inner_refs or {}).get(element_name, []))


@dataclass
class Doxygen(DataModelNode):
    """The ``<doxygen>`` root of a compound file."""

    version: str = ""
    lang: str = ""
    no_namespace_schema_location: str | None = None
    compound_defs: list[CompoundDef] | None = None


def _text_with_attributes(
    element: Tag, readers: Mapping[str, AttributeReader], owner: str
) -> tuple[str, dict[str, Any]]:
    """Read a non-empty text-only element with mandatory attributes."""
    expect(
        is_inner_element_text(element, element.name),
        f"<{element.name}> must contain only text",
    )
    text = get_inner_element_text(element, element.name)
    expect(len(text) > 0, f"<{element.name}> must not be empty")
    expect(has_attributes(element), f"<{element.name}> requires attributes")
    return text, collect_attributes(element, readers, owner)


def _require(attributes: Mapping[str, Any], name: str, element: Tag) -> str:
    value = attributes.get(name, "")
    expect(len(value) > 0, f"<{element.name}> requires a non-empty {name}")
    return value


def _single_text(node: Tag) -> str:
    """Text of a wrapper element such as ``<declname>`` or ``<array>``."""
    inner = get_inner_elements(node)
    expect(len(inner) == 1, f"<{node.name}> must hold exactly one text run")
    return get_inner_text(inner[0])


def parse_location(element: Tag, ctx: ParseContext) -> Location:
    expect(not get_inner_elements(element), "<location> must be empty")
    expect(has_attributes(element), "<location> requires attributes")
    attributes = collect_attributes(element, _LOCATION_ATTRIBUTES, "Location")
    _require(attributes, "file", element)
    return Location(element_name=element.name, **attributes)


def parse_inc(element: Tag, ctx: ParseContext) -> Inc:
    text, attributes = _text_with_attributes(
        element, {"local": BOOLEAN, "refid": STRING}, "Inc"
    )
    return Inc(
        element_name=element.name,
        text=text,
        local=attributes.get("local", False),
        refid=attributes.get("refid"),
    )


def parse_compound_ref(element: Tag, ctx: ParseContext) -> CompoundRef:
    text, attributes = _text_with_attributes(
        element, {"prot": STRING, "virt": STRING, "refid": STRING}, "CompoundRef"
    )
    return CompoundRef(
        element_name=element.name,
        text=text,
        prot=_require(attributes, "prot", element),
        virt=_require(attributes, "virt", element),
        refid=attributes.get("refid"),
    )


def parse_inner_ref(element: Tag, ctx: ParseContext) -> InnerRef:
    text, attributes = _text_with_attributes(
        element, {"refid": STRING, "prot": STRING, "inline": BOOLEAN}, "InnerRef"
    )
    return InnerRef(
        element_name=element.name,
        text=text,
        refid=_require(attributes, "refid", element),
        prot=attributes.get("prot"),
        inline=attributes.get("inline"),
    )


def parse_reference(element: Tag, ctx: ParseContext) -> Reference:
    text, attributes = _text_with_attributes(
        element,
        {"refid": STRING, "startline": NUMBER, "endline": NUMBER, "compoundref": STRING},
        "Reference",
    )
    return Reference(
        element_name=element.name,
        text=text,
        refid=_require(attributes, "refid", element),
        startline=attributes.get("startline"),
        endline=attributes.get("endline"),
        compoundref=attributes.get("compoundref"),
    )


def parse_reimplement(element: Tag, ctx: ParseContext) -> Reimplement:
    text, attributes = _text_with_attributes(element, {"refid": STRING}, "Reimplement")
    return Reimplement(
        element_name=element.name,
        text=text,
        refid=_require(attributes, "refid", element),
    )


def parse_param(element: Tag, ctx: ParseContext) -> Param:
    """Build a function or template ``<param>``; an empty one is legal."""
    param = Param(element_name=element.name)
    for node in get_inner_elements(element):
        if has_inner_text(node):
            continue
        if has_inner_element(node, "attributes"):
            param.attributes = _single_text(node)
        elif has_inner_element(node, "type"):
            param.type = parse_linked_text(node, ctx)
        elif has_inner_element(node, "declname"):
            param.declname = _single_text(node)
        elif has_inner_element(node, "defname"):
            param.defname = _single_text(node)
        elif has_inner_element(node, "array"):
            param.array = _single_text(node)
        elif has_inner_element(node, "defval"):
            param.defval = parse_linked_text(node, ctx)
        elif has_inner_element(node, "typeconstraint"):
            param.typeconstraint = parse_linked_text(node, ctx)
        elif has_inner_element(node, "briefdescription"):
            continue
        else:
            report_unknown_element(element.name, node, "Param")
    expect_no_attributes(element)
    return param


def parse_template_param_list(element: Tag, ctx: ParseContext) -> TemplateParamList:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<templateparamlist> must not be empty")
    params: list[Param] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "param"):
            params.append(parse_param(node, ctx))
        else:
            report_unknown_element(element.name, node, "TemplateParamList")
    expect_no_attributes(element)
    return TemplateParamList(element_name=element.name, params=params or None)


def parse_enum_value(element: Tag, ctx: ParseContext) -> EnumValue:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<enumvalue> must not be empty")
    value = EnumValue(element_name=element.name)
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "name"):
            value.name = get_inner_element_text(node, "name")
        elif has_inner_element(node, "initializer"):
            value.initializer = parse_linked_text(node, ctx)
        elif has_inner_element(node, "briefdescription"):
            value.brief_description = parse_description(node, ctx)
        elif has_inner_element(node, "detaileddescription"):
            value.detailed_description = parse_description(node, ctx)
        else:
            report_unknown_element(element.name, node, "EnumValue")
    expect(len(value.name) > 0, "<enumvalue> requires a <name>")
    expect(has_attributes(element), "<enumvalue> requires attributes")
    attributes = collect_attributes(element, {"id": STRING, "prot": STRING}, "EnumValue")
    value.id = _require(attributes, "id", element)
    value.prot = _require(attributes, "prot", element)
    return value


def parse_member_ref(element: Tag, ctx: ParseContext) -> MemberRef:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<member> must not be empty")
    ref = MemberRef(element_name=element.name)
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "scope"):
            ref.scope = get_inner_element_text(node, "scope")
        elif is_inner_element_text(node, "name"):
            ref.name = get_inner_element_text(node, "name")
        else:
            report_unknown_element(element.name, node, "MemberRef")
    expect(len(ref.scope) > 0, "<member> requires a <scope>")
    expect(len(ref.name) > 0, "<member> requires a <name>")
    expect(has_attributes(element), "<member> requires attributes")
    attributes = collect_attributes(
        element,
        {"refid": STRING, "prot": STRING, "virt": STRING, "ambiguityscope": STRING},
        "MemberRef",
    )
    ref.refid = _require(attributes, "refid", element)
    ref.prot = _require(attributes, "prot", element)
    ref.virt = _require(attributes, "virt", element)
    ref.ambiguityscope = attributes.get("ambiguityscope")
    return ref


def parse_list_of_all_members(element: Tag, ctx: ParseContext) -> ListOfAllMembers:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<listofallmembers> must not be empty")
    refs: list[MemberRef] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "member"):
            refs.append(parse_member_ref(node, ctx))
        else:
            report_unknown_element(element.name, node, "ListOfAllMembers")
    expect_no_attributes(element)
    return ListOfAllMembers(element_name=element.name, member_refs=refs or None)


def parse_member(element: Tag, ctx: ParseContext) -> Member:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<member> must not be empty")
    member = Member(element_name=element.name)
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "name"):
            member.name = get_inner_element_text(node, "name")
        else:
            report_unknown_element(element.name, node, "Member")
    expect(has_attributes(element), "<member> requires attributes")
    attributes = collect_attributes(element, {"refid": STRING, "kind": STRING}, "Member")
    member.refid = _require(attributes, "refid", element)
    member.kind = attributes.get("kind", "")
    return member


def parse_member_def(element: Tag, ctx: ParseContext) -> MemberDef:
    """Build a ``<memberdef>``.

    Raises:
        SchemaViolationError: If ``<location>`` is missing, or ``kind``,
            ``id`` or ``prot`` is absent or empty.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<memberdef> must not be empty")
    member = MemberDef(element_name=element.name)
    reimplements: list[Reimplement] = []
    reimplemented_by: list[Reimplement] = []
    params: list[Param] = []
    enumvalues: list[EnumValue] = []
    references: list[Reference] = []
    referenced_by: list[Reference] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "name"):
            member.name = get_inner_element_text(node, "name")
        elif has_inner_element(node, "location"):
            member.location = parse_location(node, ctx)
        elif has_inner_element(node, "templateparamlist"):
            member.templateparamlist = parse_template_param_list(node, ctx)
        elif has_inner_element(node, "type"):
            member.type = parse_linked_text(node, ctx)
        elif is_inner_element_text(node, "definition"):
            member.definition = get_inner_element_text(node, "definition")
        elif is_inner_element_text(node, "argsstring"):
            member.argsstring = get_inner_element_text(node, "argsstring")
        elif is_inner_element_text(node, "qualifiedname"):
            member.qualified_name = get_inner_element_text(node, "qualifiedname")
        elif is_inner_element_text(node, "bitfield"):
            member.bitfield = get_inner_element_text(node, "bitfield")
        elif has_inner_element(node, "reimplements"):
            reimplements.append(parse_reimplement(node, ctx))
        elif has_inner_element(node, "reimplementedby"):
            reimplemented_by.append(parse_reimplement(node, ctx))
        elif has_inner_element(node, "param"):
            params.append(parse_param(node, ctx))
        elif has_inner_element(node, "enumvalue"):
            enumvalues.append(parse_enum_value(node, ctx))
        elif has_inner_element(node, "initializer"):
            member.initializer = parse_linked_text(node, ctx)
        elif has_inner_element(node, "briefdescription"):
            member.brief_description = parse_description(node, ctx)
        elif has_inner_element(node, "detaileddescription"):
            member.detailed_description = parse_description(node, ctx)
        elif has_inner_element(node, "inbodydescription"):
            member.inbody_description = parse_description(node, ctx)
        elif has_inner_element(node, "references"):
            references.append(parse_reference(node, ctx))
        elif has_inner_element(node, "referencedby"):
            referenced_by.append(parse_reference(node, ctx))
        else:
            report_unknown_element(element.name, node, "MemberDef")
    member.reimplements = reimplements or None
    member.reimplemented_by = reimplemented_by or None
    member.params = params or None
    member.enumvalues = enumvalues or None
    member.references = references or None
    member.referenced_by = referenced_by or None
    expect(member.location is not None, "<memberdef> requires a <location>")

    expect(has_attributes(element), "<memberdef> requires attributes")
    attributes = collect_attributes(element, _MEMBER_DEF_ATTRIBUTES, "MemberDef")
    member.kind = _require(attributes, "kind", element)
    member.id = _require(attributes, "id", element)
    member.prot = _require(attributes, "prot", element)
    for name in ("virt", "noexceptexpression", *_MEMBER_DEF_BOOLEANS):
        if name in attributes:
            setattr(member, name, attributes[name])
    return member


def parse_section_def(element: Tag, ctx: ParseContext) -> SectionDef:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<sectiondef> must not be empty")
    section = SectionDef(element_name=element.name)
    member_defs: list[MemberDef] = []
    members: list[Member] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "header"):
            expect(section.header is None, "<sectiondef> has more than one <header>")
            section.header = get_inner_element_text(node, "header")
        elif has_inner_element(node, "description"):
            expect(
                section.description is None,
                "<sectiondef> has more than one <description>",
            )
            section.description = parse_description(node, ctx)
        elif has_inner_element(node, "memberdef"):
            member_defs.append(parse_member_def(node, ctx))
        elif has_inner_element(node, "member"):
            members.append(parse_member(node, ctx))
        else:
            report_unknown_element(element.name, node, "SectionDef")
    section.member_defs = member_defs or None
    section.members = members or None
    expect(has_attributes(element), "<sectiondef> requires attributes")
    attributes = collect_attributes(element, {"kind": STRING}, "SectionDef")
    section.kind = _require(attributes, "kind", element)
    return section


def parse_compound_def(element: Tag, ctx: ParseContext) -> CompoundDef:
    """Build a ``<compounddef>`` (class, file, namespace, page, group...).

    Raises:
        SchemaViolationError: If ``id`` or ``kind`` is missing, if a
            non-namespace compound has no ``<compoundname>``, or if it
            has two program listings.
    """
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<compounddef> must not be empty")
    compound = CompoundDef(element_name=element.name)
    base_refs: list[CompoundRef] = []
    derived_refs: list[CompoundRef] = []
    includes: list[Inc] = []
    included_by: list[Inc] = []
    inner_refs: dict[str, list[InnerRef]] = {}
    section_defs: list[SectionDef] = []
    for node in inner:
        if has_inner_text(node):
            continue
        name = node.name
        if is_inner_element_text(node, "compoundname"):
            compound.compound_name = get_inner_element_text(node, "compoundname")
        elif is_inner_element_text(node, "title"):
            compound.title = get_inner_element_text(node, "title")
        elif name == "briefdescription":
            compound.brief_description = parse_description(node, ctx)
        elif name == "detaileddescription":
            compound.detailed_description = parse_description(node, ctx)
        elif name == "basecompoundref":
            base_refs.append(parse_compound_ref(node, ctx))
        elif name == "derivedcompoundref":
            derived_refs.append(parse_compound_ref(node, ctx))
        elif name == "includes":
            includes.append(parse_inc(node, ctx))
        elif name == "includedby":
            included_by.append(parse_inc(node, ctx))
        elif name in INNER_REF_ELEMENT_NAMES:
            inner_refs.setdefault(name, []).append(parse_inner_ref(node, ctx))
        elif name == "templateparamlist":
            compound.template_param_list = parse_template_param_list(node, ctx)
        elif name == "sectiondef":
            section_defs.append(parse_section_def(node, ctx))
        elif name == "tableofcontents":
            compound.table_of_contents = parse_table_of_contents(node, ctx)
        elif name == "programlisting":
            expect(
                compound.program_listing is None,
                "<compounddef> has more than one <programlisting>",
            )
            compound.program_listing = parse_program_listing(node, ctx)
        elif name == "location":
            compound.location = parse_location(node, ctx)
        elif name == "listofallmembers":
            compound.list_of_all_members = parse_list_of_all_members(node, ctx)
        elif name in _SKIPPED_GRAPHS:
            continue
        else:
            report_unknown_element(element.name, node, "CompoundDef")
    compound.base_compound_refs = base_refs or None
    compound.derived_compound_refs = derived_refs or None
    compound.includes = includes or None
    compound.included_by = included_by or None
    compound.inner_refs = inner_refs or None
    compound.section_defs = section_defs or None

    expect(has_attributes(element), "<compounddef> requires attributes")
    attributes = collect_attributes(element, _COMPOUND_DEF_ATTRIBUTES, "CompoundDef")
    compound.id = _require(attributes, "id", element)
    compound.kind = _require(attributes, "kind", element)
    for name in ("language", "prot", "final", "inline", "sealed", "abstract"):
        if name in attributes:
            setattr(compound, name, attributes[name])
    if compound.kind != "namespace":
        expect(
            len(compound.compound_name) > 0,
            f"<compounddef id={compound.id!r}> requires a <compoundname>",
        )
    return compound


def parse_doxygen(element: Tag, ctx: ParseContext) -> Doxygen:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<doxygen> must not be empty")
    compound_defs: list[CompoundDef] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "compounddef"):
            compound_defs.append(parse_compound_def(node, ctx))
        else:
            report_unknown_element(element.name, node, "Doxygen")
    expect(has_attributes(element), "<doxygen> requires attributes")
    attributes = collect_attributes(element, _DOXYGEN_ATTRIBUTES, "Doxygen")
    return Doxygen(
        element_name=element.name,
        version=_require(attributes, "version", element),
        lang=_require(attributes, "lang", element),
        no_namespace_schema_location=attributes.get("noNamespaceSchemaLocation"),
        compound_defs=compound_defs or None,
    )
