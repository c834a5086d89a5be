"""Count element and attribute names in Doxygen XML files."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup

from doxygen2md.xml_parser import get_attributes_names, parse_xml_file


def collect_stats(soup: BeautifulSoup) -> tuple[Counter, Counter]:
    """Count element names and ``element@attribute`` pairs in one document."""
    elements = Counter()
    attributes = Counter()

    for tag in soup.find_all(True):
        elements[tag.name] += 1
        for name in get_attributes_names(tag):
            attributes[f"{tag.name}@{name}"] += 1
    return elements, attributes


def collect_folder_stats(paths: Iterable[Path]) -> tuple[Counter, Counter]:
    """Sum the statistics of several XML files.

    Raises:
        XmlInputError: If a file cannot be read or parsed.
    """
    elements = Counter()
    attributes = Counter()
    for path in paths:
        file_elements, file_attributes = collect_stats(parse_xml_file(path))
        elements.update(file_elements)
        attributes.update(file_attributes)
    return elements, attributes
