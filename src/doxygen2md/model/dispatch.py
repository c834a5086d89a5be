"""Mixed-content dispatch for the docTitleCmdGroup and docCmdGroup productions.

Each group maps a child tag name to the factory building its node. Names
mapped to ``None`` are recognized but deliberately produce no node (output
formats with no renderer). Anything else is reported and skipped.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from bs4.element import Tag

from doxygen2md.model.base import Child, DataModelNode
from doxygen2md.model.entities import ENTITIES, parse_substring_markup
from doxygen2md.model.listings import parse_program_listing
from doxygen2md.model.lists import (
    parse_doc_list,
    parse_simple_sect,
    parse_toc_list,
    parse_variable_list,
    parse_xref_sect,
)
from doxygen2md.model.markup import (
    MARKUP_ELEMENT_NAMES,
    parse_anchor,
    parse_doc_empty,
    parse_doc_markup,
    parse_doc_string,
    parse_emoji,
    parse_formula,
    parse_heading,
    parse_html_only,
    parse_image,
    parse_ref,
    parse_ulink,
)
from doxygen2md.model.paragraphs import (
    parse_blockquote,
    parse_preformatted,
    parse_verbatim,
)
from doxygen2md.model.params import parse_parameter_list
from doxygen2md.model.tables import parse_table
from doxygen2md.xml_parser import (
    ParseContext,
    XmlNode,
    get_inner_elements,
    get_inner_text,
    has_inner_text,
)

logger = logging.getLogger(__name__)

NodeFactory = Callable[[Tag, ParseContext], DataModelNode]

# Output-format passthroughs nobody renders.
_SUPPRESSED_FORMATS = ("manonly", "xmlonly", "rtfonly", "latexonly")


def _build_title_cmd_factories() -> dict[str, Optional[NodeFactory]]:
    factories: dict[str, Optional[NodeFactory]] = {"ulink": parse_ulink}
    for name in MARKUP_ELEMENT_NAMES:
        factories[name] = parse_doc_markup
    factories["htmlonly"] = parse_html_only
    for name in _SUPPRESSED_FORMATS:
        factories[name] = None
    factories["docbookonly"] = None
    factories.update(
        {
            "image": parse_image,
            "anchor": parse_anchor,
            "formula": parse_formula,
            "ref": parse_ref,
            "emoji": parse_emoji,
            "linebreak": parse_doc_empty,
            "nonbreakablespace": parse_doc_empty,
        }
    )
    for name in ENTITIES:
        factories[name] = parse_substring_markup
    return factories


def _build_cmd_factories() -> dict[str, Optional[NodeFactory]]:
    factories = _build_title_cmd_factories()
    factories["docbookonly"] = parse_doc_string
    factories.update(
        {
            "hruler": parse_doc_empty,
            "preformatted": parse_preformatted,
            "programlisting": parse_program_listing,
            "verbatim": parse_verbatim,
            "indexentry": None,
            "orderedlist": parse_doc_list,
            "itemizedlist": parse_doc_list,
            "simplesect": parse_simple_sect,
            "variablelist": parse_variable_list,
            "table": parse_table,
            "heading": parse_heading,
            "toclist": parse_toc_list,
            "parameterlist": parse_parameter_list,
            "xrefsect": parse_xref_sect,
            "blockquote": parse_blockquote,
        }
    )
    return factories


TITLE_CMD_FACTORIES: Mapping[str, Optional[NodeFactory]] = MappingProxyType(
    _build_title_cmd_factories()
)
CMD_FACTORIES: Mapping[str, Optional[NodeFactory]] = MappingProxyType(_build_cmd_factories())


def parse_doc_title_cmd_group(
    element: Tag, ctx: ParseContext, element_name: str
) -> list[DataModelNode]:
    """Build the node for one structural child in title context.

    Args:
        element: The child element to route.
        ctx: The current parse context.
        element_name: Tag of the parent, used in log messages.

    Returns:
        One node, or an empty list for suppressed and unknown names.
    """
    return _dispatch(
        TITLE_CMD_FACTORIES, element, ctx, element_name, "parse_doc_title_cmd_group"
    )


def parse_doc_cmd_group(
    element: Tag, ctx: ParseContext, element_name: str
) -> list[DataModelNode]:
    """Build the node for one structural child in paragraph context.

    Paragraph context admits everything title context does, plus block
    structures (lists, tables, listings, parameter lists, xref sections).

    Args:
        element: The child element to route.
        ctx: The current parse context.
        element_name: Tag of the parent, used in log messages.

    Returns:
        One node, or an empty list for suppressed and unknown names.
    """
    return _dispatch(CMD_FACTORIES, element, ctx, element_name, "parse_doc_cmd_group")


def parse_title_content(element: Tag, ctx: ParseContext) -> list[Child]:
    """Collect text runs and title-group nodes of ``element`` in order."""
    return _collect(element, ctx, parse_doc_title_cmd_group)


def parse_cmd_content(element: Tag, ctx: ParseContext) -> list[Child]:
    """Collect text runs and paragraph-group nodes of ``element`` in order."""
    return _collect(element, ctx, parse_doc_cmd_group)


def _collect(
    element: Tag,
    ctx: ParseContext,
    group: Callable[[Tag, ParseContext, str], list[DataModelNode]],
) -> list[Child]:
    children: list[Child] = []
    for node in get_inner_elements(element):
        if has_inner_text(node):
            children.append(get_inner_text(node))
        else:
            children.extend(group(node, ctx, element.name))
    return children


def _dispatch(
    factories: Mapping[str, Optional[NodeFactory]],
    element: XmlNode,
    ctx: ParseContext,
    element_name: str,
    group_name: str,
) -> list[DataModelNode]:
    name = element.name if isinstance(element, Tag) else "#text"
    if name not in factories:
        logger.error(
            "%s element: %s not implemented yet by %s()",
            element_name,
            name,
            group_name,
            extra={"parent": element_name, "element": name, "group": group_name},
        )
        return []
    factory = factories[name]
    if factory is None:
        return []
    return [factory(element, ctx)]
