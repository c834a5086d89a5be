"""Parse Doxygen XML and expose primitive element/attribute accessors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Union
from urllib.parse import urlparse

from doxygen2md.exceptions import ParseError, XmlInputError

try:
    from bs4 import BeautifulSoup
    from bs4.element import (
        Comment,
        Declaration,
        Doctype,
        NavigableString,
        ProcessingInstruction,
        Tag,
    )
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for XML parsing (pip install beautifulsoup4 lxml)."
    ) from exc

if TYPE_CHECKING:
    from doxygen2md.model.markup import Image

# A child of a mixed-content element: a text run or a structural element.
XmlNode = Union[NavigableString, Tag]

# Whitespace-only runs are significant in mixed content (code listings,
# paragraphs); without these names bs4 collapses them to one character.
_PRESERVE_WHITESPACE_TAGS = frozenset(
    {
        "doxygen",
        "doxygenindex",
        "doxyfile",
        "para",
        "highlight",
        "codeline",
        "programlisting",
        "verbatim",
        "preformatted",
        "title",
        "term",
    }
)
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def parse_xml_string(text: str | bytes) -> BeautifulSoup:
    """Parse a Doxygen XML document.

    Args:
        text: The XML document content.

    Returns:
        The parsed document. Its top-level elements are reachable with
        ``get_inner_elements``.

    Raises:
        XmlInputError: If the content is empty or has no root element.
    """
    if not text or not text.strip():
        raise XmlInputError("Empty XML document")
    soup = BeautifulSoup(
        text,
        "lxml-xml",
        preserve_whitespace_tags=_PRESERVE_WHITESPACE_TAGS,
        multi_valued_attributes=None,
    )
    if soup.find(True) is None:
        raise XmlInputError("XML document has no root element")
    return soup


def parse_xml_file(path: Path) -> BeautifulSoup:
    """Read and parse one Doxygen XML file.

    Raises:
        XmlInputError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise XmlInputError(f"Cannot read {path}: {exc}") from exc
    try:
        return parse_xml_string(content)
    except XmlInputError as exc:
        raise XmlInputError(f"{path}: {exc}") from exc


def get_inner_elements(element: Tag) -> list[XmlNode]:
    """Return text runs and child elements of ``element`` in document order."""
    inner: list[XmlNode] = []
    for child in element.children:
        if isinstance(child, Tag):
            inner.append(child)
        elif isinstance(child, _SKIPPED_STRINGS):
            continue
        elif isinstance(child, NavigableString):
            inner.append(child)
    return inner


def has_inner_text(node: XmlNode) -> bool:
    return isinstance(node, NavigableString)


def get_inner_text(node: XmlNode) -> str:
    if not isinstance(node, NavigableString):
        raise ParseError(f"Expected a text run, got <{node.name}>")
    return str(node)


def has_inner_element(node: XmlNode, name: str) -> bool:
    return isinstance(node, Tag) and node.name == name


def is_inner_element_text(node: XmlNode, name: str) -> bool:
    """Return True when ``node`` is a ``name`` element holding only text."""
    if not has_inner_element(node, name):
        return False
    return not any(isinstance(child, Tag) for child in node.children)


def get_inner_element_text(node: Tag, name: str) -> str:
    """Return the text of a simple-string element, or "" when it is empty.

    Raises:
        ParseError: If the node is not ``name`` or it has child elements.
    """
    if not has_inner_element(node, name):
        raise ParseError(f"Expected <{name}>, got {_describe(node)}")
    if any(isinstance(child, Tag) for child in node.children):
        raise ParseError(f"<{name}> has child elements, expected text only")
    return "".join(
        str(child)
        for child in node.children
        if isinstance(child, NavigableString) and not isinstance(child, _SKIPPED_STRINGS)
    )


def has_attributes(element: Tag) -> bool:
    return any(True for _ in _iter_attributes(element))


def get_attributes_names(element: Tag) -> list[str]:
    return [name for name, _ in _iter_attributes(element)]


def has_attribute(element: Tag, name: str) -> bool:
    return _find_attribute(element, name) is not None


def get_attribute_string_value(element: Tag, name: str) -> str:
    """Return an attribute value as a string.

    Raises:
        ParseError: If the attribute is absent.
    """
    value = _find_attribute(element, name)
    if value is None:
        raise ParseError(f"Element <{element.name}> does not have the {name} attribute")
    return value


def get_attribute_number_value(element: Tag, name: str) -> int | float:
    """Return a numeric attribute value.

    Raises:
        ParseError: If the attribute is absent or not numeric.
    """
    value = _find_attribute(element, name)
    if value is None:
        raise ParseError(
            f"Element <{element.name}> does not have the {name} number attribute"
        )
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as exc:
        raise ParseError(
            f"Element <{element.name}> attribute {name}={value!r} is not a number"
        ) from exc


def get_attribute_boolean_value(element: Tag, name: str) -> bool:
    """Return True when the attribute value is ``yes`` (any case).

    Raises:
        ParseError: If the attribute is absent.
    """
    value = _find_attribute(element, name)
    if value is None:
        raise ParseError(
            f"Element <{element.name}> does not have the {name} boolean attribute"
        )
    return value.strip().lower() == "yes"


def is_url(name: str) -> bool:
    """Return True for absolute or protocol-relative URLs."""
    if name.startswith("//"):
        return True
    parsed = urlparse(name)
    # Single letters are Windows drive names, not schemes.
    return len(parsed.scheme) > 1


@dataclass
class ParseContext:
    """State threaded through one parse run.

    Attributes:
        images: Local HTML images met anywhere in the parsed trees, in
            encounter order. Drained by the asset-copy step.
    """

    images: list[Image] = field(default_factory=list)

    def register_image(self, image: Image) -> None:
        if image.type == "html" and image.name and not is_url(image.name):
            self.images.append(image)

    def image_names(self) -> list[str]:
        """Return unique image names in first-seen order."""
        return list(dict.fromkeys(image.name for image in self.images if image.name))


def _iter_attributes(element: Tag) -> Iterator[tuple[str, str]]:
    """Yield (local name, value) pairs, skipping namespace declarations."""
    for key, value in element.attrs.items():
        if key == "xmlns" or key.startswith("xmlns:"):
            continue
        yield _local_name(key), value if isinstance(value, str) else " ".join(value)


def _find_attribute(element: Tag, name: str) -> str | None:
    for key, value in _iter_attributes(element):
        if key == name:
            return value
    return None


def _local_name(name: str) -> str:
    return name.rsplit(":", 1)[-1]


def _describe(node: XmlNode) -> str:
    if isinstance(node, Tag):
        return f"<{node.name}>"
    return repr(str(node))
