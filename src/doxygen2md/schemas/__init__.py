"""Shared schemas for doxygen2md."""

from doxygen2md.schemas.report import ParseReport

__all__ = ["ParseReport"]
