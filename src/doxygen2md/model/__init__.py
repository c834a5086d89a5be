"""Typed data model built from Doxygen XML trees."""

# dispatch must load first: the node modules reach it through this package.
from doxygen2md.model import dispatch
from doxygen2md.model.base import Child, DataModelNode
from doxygen2md.model.compounds import (
    CompoundDef,
    Doxygen,
    Member,
    MemberDef,
    SectionDef,
    parse_doxygen,
)
from doxygen2md.model.doxyfile import Doxyfile, DoxyfileOption, parse_doxyfile
from doxygen2md.model.index import (
    DoxygenIndex,
    IndexCompound,
    IndexMember,
    parse_doxygen_index,
)
from doxygen2md.model.paragraphs import Para, Title
from doxygen2md.model.sections import Description, Internal, Section

__all__ = [
    "Child",
    "CompoundDef",
    "DataModelNode",
    "Description",
    "Doxyfile",
    "DoxyfileOption",
    "Doxygen",
    "DoxygenIndex",
    "IndexCompound",
    "IndexMember",
    "Internal",
    "Member",
    "MemberDef",
    "Para",
    "Section",
    "SectionDef",
    "Title",
    "dispatch",
    "parse_doxyfile",
    "parse_doxygen",
    "parse_doxygen_index",
]
