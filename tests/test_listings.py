"""Tests for program listings and member slices."""

from __future__ import annotations

from typing import Callable

import pytest
from bs4.element import Tag

from doxygen2md.exceptions import SchemaViolationError
from doxygen2md.model.listings import (
    CodeLine,
    MemberProgramListing,
    ProgramListing,
    Sp,
    member_program_listing,
    parse_highlight,
    parse_program_listing,
    parse_sp,
)
from doxygen2md.model.paragraphs import parse_para
from doxygen2md.model.reftext import RefText
from doxygen2md.xml_parser import ParseContext


def _listing(*linenos: int | None) -> ProgramListing:
    return ProgramListing(
        element_name="programlisting",
        codelines=[CodeLine(element_name="codeline", lineno=n) for n in linenos],
        filename="bar.cpp",
    )


class TestProgramListing:
    """Tests for listing parsing."""

    def test_code_lines_and_highlights(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Highlights hold text, spaces and references."""
        listing = parse_program_listing(
            xml_element(
                '<programlisting filename="bar.cpp">'
                '<codeline lineno="1" refid="classfoo" refkind="compound" external="no">'
                '<highlight class="keyword">class</highlight>'
                '<highlight class="normal"><sp value="2"/><ref refid="classfoo" kindref="compound">Foo</ref></highlight>'
                "</codeline>"
                '<codeline lineno="2"></codeline>'
                "</programlisting>"
            ),
            ctx,
        )
        assert listing.filename == "bar.cpp"
        first, blank = listing.codelines
        assert first.lineno == 1
        assert first.refkind == "compound"
        assert first.external is False
        keyword, normal = first.highlights
        assert keyword.class_ == "keyword"
        assert keyword.children == ["class"]
        assert normal.children[0] == Sp(element_name="sp", value=2)
        assert isinstance(normal.children[1], RefText)
        assert normal.children[1].text == "Foo"
        assert blank.highlights is None

    def test_listing_in_paragraph(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Code blocks are paragraph content."""
        para = parse_para(
            xml_element(
                '<para><programlisting><codeline><highlight class="normal">x</highlight>'
                "</codeline></programlisting></para>"
            ),
            ctx,
        )
        assert isinstance(para.children[0], ProgramListing)

    def test_highlight_requires_class(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """A highlight without attributes is fatal."""
        with pytest.raises(SchemaViolationError, match="requires attributes"):
            parse_highlight(xml_element("<highlight>x</highlight>"), ctx)

    def test_sp_must_be_empty(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """Spaces carry no content."""
        assert parse_sp(xml_element("<sp/>"), ctx).value is None
        with pytest.raises(SchemaViolationError, match="must be empty"):
            parse_sp(xml_element("<sp>x</sp>"), ctx)


class TestMemberProgramListing:
    """Tests for slicing a listing to a member body."""

    def test_inclusive_range(self) -> None:
        """Lines at both ends of the range are kept."""
        member = member_program_listing(_listing(1, 2, 3, 5, 8), 2, 5)
        assert isinstance(member, MemberProgramListing)
        assert [line.lineno for line in member.codelines] == [2, 3, 5]
        assert member.filename == "bar.cpp"

    def test_no_match_gives_none(self) -> None:
        """No line in range leaves codelines unset."""
        assert member_program_listing(_listing(1, 2, 3), 10, 20).codelines is None

    def test_unnumbered_lines_are_dropped(self) -> None:
        """Lines without a number never match."""
        member = member_program_listing(_listing(None, 4, None), 1, 10)
        assert [line.lineno for line in member.codelines] == [4]

    def test_reversed_range_is_fatal(self) -> None:
        """start after end is a caller error."""
        with pytest.raises(SchemaViolationError, match="Listing range start 5 is after end 2"):
            member_program_listing(_listing(1, 2), 5, 2)

    def test_source_listing_is_untouched(self) -> None:
        """Slicing returns a new listing."""
        listing = _listing(1, 2, 3)
        member_program_listing(listing, 2, 2)
        assert len(listing.codelines) == 3
