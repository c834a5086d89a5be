"""Custom exceptions for doxygen2md."""


class Doxygen2mdError(Exception):
    """Base exception for doxygen2md operations."""


class XmlInputError(Doxygen2mdError):
    """Doxygen XML input file is missing or unreadable."""


class ParseError(Doxygen2mdError):
    """Error while building the data model."""


class SchemaViolationError(ParseError):
    """XML shape the Doxygen schema guarantees should never occur."""
