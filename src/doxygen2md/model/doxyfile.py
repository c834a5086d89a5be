"""Types of ``Doxyfile.xml``: the configuration Doxygen ran with."""

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


@dataclass
class DoxyfileOption(DataModelNode):
    id: str = ""
    default: str = ""
    type: str = ""
    values: list[str] | None = None


@dataclass
class Doxyfile(DataModelNode):
    version: str = ""
    lang: str = ""
    no_namespace_schema_location: str | None = None
    options: list[DoxyfileOption] | None = None

    def get_option(self, option_id: str) -> DoxyfileOption | None:
        for option in self.options or []:
            if option.id == option_id:
                return option
        return None

    def get_value(self, option_id: str, default: str = "") -> str:
        """Return the first value of an option such as ``PROJECT_NAME``."""
        option = self.get_option(option_id)
        if option is None or not option.values:
            return default
        return option.values[0]


def parse_doxyfile_option(element: Tag, ctx: ParseContext) -> DoxyfileOption:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "doxyfile <option> must not be empty")
    values: list[str] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if is_inner_element_text(node, "value"):
            values.append(get_inner_element_text(node, "value"))
        else:
            report_unknown_element(f"doxyfile {element.name}", node, "DoxyfileOption")
    expect(has_attributes(element), "doxyfile <option> requires attributes")
    attributes = collect_attributes(
        element, {"id": STRING, "default": STRING, "type": STRING}, "DoxyfileOption"
    )
    for name in ("id", "default", "type"):
        expect(
            len(attributes.get(name, "")) > 0,
            f"doxyfile <option> requires a non-empty {name}",
        )
    return DoxyfileOption(element_name=element.name, values=values or None, **attributes)


def parse_doxyfile(element: Tag, ctx: ParseContext) -> Doxyfile:
    inner = get_inner_elements(element)
    expect(len(inner) > 0, "<doxyfile> must not be empty")
    options: list[DoxyfileOption] = []
    for node in inner:
        if has_inner_text(node):
            continue
        if has_inner_element(node, "option"):
            options.append(parse_doxyfile_option(node, ctx))
        else:
            report_unknown_element(f"doxyfile {element.name}", node, "Doxyfile")
    expect(has_attributes(element), "<doxyfile> requires attributes")
    attributes = collect_attributes(
        element,
        {"version": STRING, "lang": STRING, "noNamespaceSchemaLocation": STRING},
        "Doxyfile",
    )
    version = attributes.get("version", "")
    lang = attributes.get("lang", "")
    expect(len(version) > 0, "<doxyfile> requires a non-empty version")
    expect(len(lang) > 0, "<doxyfile> requires a non-empty lang")
    return Doxyfile(
        element_name=element.name,
        version=version,
        lang=lang,
        no_namespace_schema_location=attributes.get("noNamespaceSchemaLocation"),
        options=options or None,
    )
