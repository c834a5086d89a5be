"""Base node type and shared helpers for the Doxygen data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from bs4.element import Tag

from doxygen2md.exceptions import SchemaViolationError
from doxygen2md.xml_parser import (
    XmlNode,
    get_attribute_boolean_value,
    get_attribute_number_value,
    get_attribute_string_value,
    get_attributes_names,
    has_attributes,
)

logger = logging.getLogger(__name__)

AttributeReader = Callable[[Tag, str], Any]

# Common attribute readers, keyed by the value type the schema declares.
STRING = get_attribute_string_value
NUMBER = get_attribute_number_value
BOOLEAN = get_attribute_boolean_value


@dataclass
class DataModelNode:
    """A node parsed from one Doxygen XML element.

    Attributes:
        element_name: The XML tag the node was parsed from.
        children: Mixed content in document order; each item is either a
            raw text run or a nested node.
    """

    element_name: str = ""
    children: list[Child] = field(default_factory=list)


Child = Union[str, DataModelNode]


def expect(condition: bool, message: str) -> None:
    """Abort the parse when a structural precondition does not hold.

    Raises:
        SchemaViolationError: If ``condition`` is false.
    """
    if not condition:
        raise SchemaViolationError(message)


def expect_no_attributes(element: Tag) -> None:
    expect(
        not has_attributes(element),
        f"<{element.name}> does not accept attributes, got {get_attributes_names(element)}",
    )


def report_unknown_element(parent_name: str, node: XmlNode, owner: str) -> None:
    """Log a child element no constructor handles; the child is skipped."""
    name = node.name if isinstance(node, Tag) else "#text"
    logger.error(
        "%s element: %s not implemented yet in %s",
        parent_name,
        name,
        owner,
        extra={"parent": parent_name, "element": name, "owner": owner},
    )


def report_unknown_attribute(parent_name: str, attribute_name: str, owner: str) -> None:
    """Log an attribute no constructor handles; the attribute is skipped."""
    logger.error(
        "%s attribute: %s not implemented yet in %s",
        parent_name,
        attribute_name,
        owner,
        extra={"parent": parent_name, "attribute": attribute_name, "owner": owner},
    )


def collect_attributes(
    element: Tag,
    readers: Mapping[str, AttributeReader],
    owner: str,
) -> dict[str, Any]:
    """Read the attributes listed in ``readers``; log and skip the others.

    Args:
        element: The element whose attributes are read.
        readers: Attribute name to accessor function.
        owner: Node type name used in log messages.

    Returns:
        Attribute name to converted value, for the attributes present.
    """
    values: dict[str, Any] = {}
    for name in get_attributes_names(element):
        reader = readers.get(name)
        if reader is None:
            report_unknown_attribute(element.name, name, owner)
            continue
        values[name] = reader(element, name)
    return values
