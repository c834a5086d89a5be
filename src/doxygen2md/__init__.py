"""doxygen2md: parse Doxygen XML output into a typed data model."""

from doxygen2md.data_model import DataModel, ParseOptions, parse_doxygen_xml
from doxygen2md.exceptions import (
    Doxygen2mdError,
    ParseError,
    SchemaViolationError,
    XmlInputError,
)
from doxygen2md.images import copy_images
from doxygen2md.report import format_report
from doxygen2md.schemas import ParseReport
from doxygen2md.xml_parser import ParseContext

__all__ = [
    "DataModel",
    "Doxygen2mdError",
    "ParseContext",
    "ParseError",
    "ParseOptions",
    "ParseReport",
    "SchemaViolationError",
    "XmlInputError",
    "copy_images",
    "format_report",
    "parse_doxygen_xml",
]
