"""Parse a Doxygen XML output folder into the data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bs4 import BeautifulSoup

from doxygen2md.config import (
    DOXYFILE_XML_FILE_NAME,
    DOXYGEN2MD_VERBOSE,
    DOXYGEN2MD_XML_INPUT_PATH,
    INDEX_XML_FILE_NAME,
)
from doxygen2md.exceptions import XmlInputError
from doxygen2md.file_utils import read_bytes_async
from doxygen2md.model import (
    CompoundDef,
    Doxyfile,
    DoxygenIndex,
    MemberDef,
    parse_doxyfile,
    parse_doxygen,
    parse_doxygen_index,
)
from doxygen2md.model.base import expect, report_unknown_element
from doxygen2md.xml_parser import (
    ParseContext,
    XmlNode,
    get_inner_elements,
    has_inner_element,
    has_inner_text,
    parse_xml_string,
)

logger = logging.getLogger(__name__)


@dataclass
class ParseOptions:
    """Options for one parse run.

    Attributes:
        xml_input_path: Folder with ``index.xml``, ``Doxyfile.xml`` and one
            ``<refid>.xml`` file per compound.
        verbose: If True, log every file as it is parsed.
    """

    xml_input_path: Path = field(default_factory=lambda: DOXYGEN2MD_XML_INPUT_PATH)
    verbose: bool = DOXYGEN2MD_VERBOSE


@dataclass
class DataModel:
    """Everything read from one Doxygen XML folder.

    ``compound_defs`` keeps the order of the index, then the order of the
    compounddefs inside each file.
    """

    options: ParseOptions = field(default_factory=ParseOptions)
    context: ParseContext = field(default_factory=ParseContext)
    parsed_files_counter: int = 0
    doxygen_index: DoxygenIndex | None = None
    compound_defs: list[CompoundDef] = field(default_factory=list)
    doxyfile: Doxyfile | None = None

    async def parse(self) -> None:
        """Parse the index, every compound file, then the Doxyfile.

        Raises:
            XmlInputError: If a file is missing or is not well-formed XML.
            SchemaViolationError: If a structural check fails, including a
                missing ``doxygenindex`` or ``doxyfile`` root.
        """
        if not self.options.verbose:
            logger.info(
                "Parsing Doxygen generated .xml files...",
                extra={"xml_input_path": str(self.options.xml_input_path)},
            )
        await self._parse_doxygen_index()

        compounds = self.doxygen_index.compounds if self.doxygen_index else None
        for compound in compounds or []:
            file_name = f"{compound.refid}.xml"
            soup = await self._parse_file(file_name)
            self._process_compound_file(file_name, soup)
        self.process_member_kinds()

        await self._parse_doxyfile()

        logger.info(
            "%d xml files parsed",
            self.parsed_files_counter,
            extra={"parsed_files": self.parsed_files_counter},
        )
        images = self.context.image_names()
        if self.options.verbose and images:
            logger.info("%d images identified", len(images), extra={"images": len(images)})

    def process_member_kinds(self) -> None:
        """Give each kind-less ``<member>`` the kind of its memberdef.

        Memberdefs are indexed as they are met, so a member can only refer to
        one defined in the same or an earlier section.

        Raises:
            SchemaViolationError: If a member refers to an unknown memberdef.
        """
        member_defs_by_id: dict[str, MemberDef] = {}
        for compound_def in self.compound_defs:
            for section_def in compound_def.section_defs or []:
                for member_def in section_def.member_defs or []:
                    member_defs_by_id[member_def.id] = member_def
                for member in section_def.members or []:
                    if member.kind:
                        continue
                    member_def = member_defs_by_id.get(member.refid)
                    expect(
                        member_def is not None,
                        f"Member {member.refid!r} refers to an unknown memberdef",
                    )
                    member.kind = member_def.kind

    async def _parse_doxygen_index(self) -> None:
        soup = await self._parse_file(INDEX_XML_FILE_NAME)
        for node in _top_level_nodes(soup):
            if has_inner_text(node):
                continue
            if has_inner_element(node, "doxygenindex"):
                self.doxygen_index = parse_doxygen_index(node, self.context)
            else:
                report_unknown_element(INDEX_XML_FILE_NAME, node, "DataModel")
        expect(
            self.doxygen_index is not None,
            f"{INDEX_XML_FILE_NAME} has no <doxygenindex> root",
        )

    def _process_compound_file(self, file_name: str, soup: BeautifulSoup) -> None:
        for node in _top_level_nodes(soup):
            if has_inner_text(node):
                continue
            if has_inner_element(node, "doxygen"):
                doxygen = parse_doxygen(node, self.context)
                self.compound_defs.extend(doxygen.compound_defs or [])
            else:
                report_unknown_element(file_name, node, "DataModel")

    async def _parse_doxyfile(self) -> None:
        soup = await self._parse_file(DOXYFILE_XML_FILE_NAME)
        for node in _top_level_nodes(soup):
            if has_inner_text(node):
                continue
            if has_inner_element(node, "doxyfile"):
                self.doxyfile = parse_doxyfile(node, self.context)
            else:
                report_unknown_element(DOXYFILE_XML_FILE_NAME, node, "DataModel")
        expect(
            self.doxyfile is not None,
            f"{DOXYFILE_XML_FILE_NAME} has no <doxyfile> root",
        )

    async def _parse_file(self, file_name: str) -> BeautifulSoup:
        file_path = self.options.xml_input_path / file_name
        try:
            content = await read_bytes_async(file_path)
        except OSError as exc:
            raise XmlInputError(f"Cannot read {file_path}: {exc}") from exc
        if self.options.verbose:
            logger.debug("Parsing %s...", file_name, extra={"file": str(file_path)})
        self.parsed_files_counter += 1
        return parse_xml_string(content)


def _top_level_nodes(soup: BeautifulSoup) -> list[XmlNode]:
    # The XML declaration and comments are dropped by get_inner_elements.
    return get_inner_elements(soup)


async def parse_doxygen_xml(options: ParseOptions | None = None) -> DataModel:
    """Parse a Doxygen XML folder and return the populated model.

    Args:
        options: Input folder and verbosity. Uses the configured defaults if
            None.

    Returns:
        The data model, with member kinds resolved.
    """
    data_model = DataModel(options=options or ParseOptions())
    await data_model.parse()
    return data_model
