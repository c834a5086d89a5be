"""Tests for mixed-content dispatch, inline markup and entities."""

from __future__ import annotations

import dataclasses
import logging
from html.entities import name2codepoint
from typing import Callable

import pytest
from bs4.element import Tag

from doxygen2md.exceptions import SchemaViolationError
from doxygen2md.model import dispatch
from doxygen2md.model.entities import ENTITIES, SubstringDocMarkup, parse_substring_markup
from doxygen2md.model.markup import (
    Anchor,
    DocEmpty,
    DocMarkup,
    DocString,
    Emoji,
    Formula,
    HtmlOnly,
    Image,
    Ref,
    Ulink,
)
from doxygen2md.model.paragraphs import Para, parse_para, parse_title
from doxygen2md.xml_parser import ParseContext

# Entity names Doxygen spells its own way; the rest follow HTML 4.
DOXYGEN_ONLY_ENTITIES = {
    "nzwj": "\u200C",
    "umlaut": "\u00A8",
    "registered": "\u00AE",
    "Aumlaut": "\u00C4",
    "Eumlaut": "\u00CB",
    "Iumlaut": "\u00CF",
    "Oumlaut": "\u00D6",
    "Uumlaut": "\u00DC",
    "aumlaut": "\u00E4",
    "eumlaut": "\u00EB",
    "iumlaut": "\u00EF",
    "oumlaut": "\u00F6",
    "uumlaut": "\u00FC",
    "yumlaut": "\u00FF",
    "Yumlaut": "\u0178",
    "imaginary": "\u2111",
    "trademark": "\u2122",
    "tm": "\u2122",
}


class TestParaContent:
    """Tests for paragraph content order and unknown names."""

    def test_text_and_markup_keep_order(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Text runs and nodes interleave in document order."""
        para = parse_para(xml_element("<para>Hello <bold>world</bold>!</para>"), ctx)
        assert isinstance(para, Para)
        assert para.children[0] == "Hello "
        bold = para.children[1]
        assert isinstance(bold, DocMarkup)
        assert bold.element_name == "bold"
        assert bold.children == ["world"]
        assert para.children[2] == "!"

    def test_unknown_element_is_logged_and_skipped(
        self,
        xml_element: Callable[[str], Tag],
        ctx: ParseContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """An unknown child yields no node and one error entry."""
        with caplog.at_level(logging.ERROR):
            para = parse_para(xml_element("<para><frobnicate/></para>"), ctx)
        assert para.children == []
        messages = [record.getMessage() for record in caplog.records]
        assert len(messages) == 1
        assert "frobnicate" in messages[0]
        assert "parse_doc_cmd_group" in messages[0]

    def test_empty_para_is_legal(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """<para/> builds a paragraph with no children."""
        assert parse_para(xml_element("<para/>"), ctx).children == []

    def test_suppressed_formats_produce_nothing(
        self,
        xml_element: Callable[[str], Tag],
        ctx: ParseContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Output-only passthroughs are dropped silently."""
        with caplog.at_level(logging.ERROR):
            para = parse_para(
                xml_element("<para>a<latexonly>\\LaTeX</latexonly><manonly>x</manonly>b</para>"),
                ctx,
            )
        assert para.children == ["a", "b"]
        assert caplog.records == []

    def test_docbookonly_depends_on_context(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """docbookonly is built in paragraphs and dropped in titles."""
        para = parse_para(xml_element("<para><docbookonly>db</docbookonly></para>"), ctx)
        assert para.children == [DocString(element_name="docbookonly", text="db")]
        title = parse_title(xml_element("<title><docbookonly>db</docbookonly></title>"), ctx)
        assert title.children == []

    def test_block_elements_only_in_paragraphs(
        self,
        xml_element: Callable[[str], Tag],
        ctx: ParseContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A table inside a title is reported by the title group."""
        with caplog.at_level(logging.ERROR):
            title = parse_title(
                xml_element('<title><table rows="1" cols="1"><row><entry thead="no"><para>x</para></entry></row></table></title>'),
                ctx,
            )
        assert title.children == []
        assert "parse_doc_title_cmd_group" in caplog.records[0].getMessage()

    def test_nested_markup(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """Markup nodes nest paragraph content."""
        para = parse_para(
            xml_element("<para><emphasis>see <computeroutput>run()</computeroutput></emphasis></para>"),
            ctx,
        )
        emphasis = para.children[0]
        assert emphasis.children[0] == "see "
        assert emphasis.children[1].element_name == "computeroutput"
        assert emphasis.children[1].children == ["run()"]

    def test_every_markup_name_is_in_both_groups(self) -> None:
        """Title-group names are a subset of the paragraph group."""
        assert set(dispatch.TITLE_CMD_FACTORIES) <= set(dispatch.CMD_FACTORIES)
        for name in ("bold", "s", "strike", "del", "ins", "cite", "small", "center"):
            assert dispatch.CMD_FACTORIES[name] is not None


class TestInlineNodes:
    """Tests for leaf and inline node types."""

    def test_ulink(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """A ulink keeps its url and title content."""
        para = parse_para(
            xml_element('<para><ulink url="https://doxygen.nl">Doxygen</ulink></para>'), ctx
        )
        assert para.children == [
            Ulink(element_name="ulink", children=["Doxygen"], url="https://doxygen.nl")
        ]

    def test_ulink_requires_url(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """An empty url is fatal."""
        with pytest.raises(SchemaViolationError, match="url"):
            parse_para(xml_element('<para><ulink url="">x</ulink></para>'), ctx)

    def test_ref_allows_empty_refid(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """A description ref needs a kindref but may have an empty refid."""
        para = parse_para(
            xml_element('<para><ref refid="" kindref="member">run</ref></para>'), ctx
        )
        ref = para.children[0]
        assert isinstance(ref, Ref)
        assert ref.refid == ""
        assert ref.kindref == "member"
        assert ref.children == ["run"]

    def test_ref_requires_kindref(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """A missing kindref is fatal."""
        with pytest.raises(SchemaViolationError, match="kindref"):
            parse_para(xml_element('<para><ref refid="a">run</ref></para>'), ctx)

    def test_anchor_formula_emoji(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """Leaf nodes carry their attributes."""
        para = parse_para(
            xml_element(
                '<para><anchor id="a1"/><formula id="0">$x^2$</formula>'
                '<emoji name=":smile:" unicode="&amp;#x1f604;"/><linebreak/></para>'
            ),
            ctx,
        )
        anchor, formula, emoji, linebreak = para.children
        assert anchor == Anchor(element_name="anchor", id="a1")
        assert formula == Formula(element_name="formula", text="$x^2$", id="0")
        assert isinstance(emoji, Emoji)
        assert emoji.name == ":smile:"
        assert emoji.unicode == "&#x1f604;"
        assert linebreak == DocEmpty(element_name="linebreak")

    def test_anchor_text_is_logged(
        self,
        xml_element: Callable[[str], Tag],
        ctx: ParseContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Anchors should be empty; stray text is reported."""
        with caplog.at_level(logging.ERROR):
            parse_para(xml_element('<para><anchor id="a1">oops</anchor></para>'), ctx)
        assert "oops" in caplog.text

    def test_htmlonly_block(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """htmlonly keeps raw text and the block flag."""
        para = parse_para(
            xml_element('<para><htmlonly block="yes">&lt;hr/&gt;</htmlonly></para>'), ctx
        )
        assert para.children == [HtmlOnly(element_name="htmlonly", text="<hr/>", block="yes")]

    def test_image_is_registered(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """Local HTML images reach the context."""
        para = parse_para(
            xml_element(
                '<para><image type="html" name="pic.png" width="50%" inline="yes">Caption</image></para>'
            ),
            ctx,
        )
        image = para.children[0]
        assert isinstance(image, Image)
        assert image.inline is True
        assert image.width == "50%"
        assert image.children == ["Caption"]
        assert ctx.image_names() == ["pic.png"]


class TestEntities:
    """Tests for named character entities."""

    def test_entity_in_paragraph(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """An entity element becomes a substring node."""
        para = parse_para(xml_element("<para>a<ndash/>b<copy/></para>"), ctx)
        assert para.children == [
            "a",
            SubstringDocMarkup(element_name="ndash", substring="–"),
            "b",
            SubstringDocMarkup(element_name="copy", substring="©"),
        ]

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("para", "¶"),
            ("rsquo", "’"),
            ("mdash", "—"),
            ("alpha", "α"),
            ("rarr", "→"),
        ],
    )
    def test_entity_text(self, name: str, expected: str) -> None:
        """Entity names map to their Unicode text."""
        assert ENTITIES[name] == expected

    def test_para_entity_is_not_a_paragraph(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Inside a title, <para/> is the pilcrow entity."""
        title = parse_title(xml_element("<title>Section <para/></title>"), ctx)
        assert title.children == [
            "Section ",
            SubstringDocMarkup(element_name="para", substring="¶"),
        ]

    def test_entity_rejects_attributes(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """Entities take no attributes."""
        with pytest.raises(SchemaViolationError, match="attributes"):
            parse_substring_markup(xml_element('<copy x="1"/>'), ctx)

    def test_table_size(self) -> None:
        assert len(ENTITIES) == 249
        assert set(DOXYGEN_ONLY_ENTITIES) <= set(ENTITIES)

    @pytest.mark.parametrize("name", sorted(ENTITIES))
    def test_entity_matches_html_code_point(self, name: str) -> None:
        """Shared names agree with HTML 4; the others have their own table."""
        if name in DOXYGEN_ONLY_ENTITIES:
            expected = DOXYGEN_ONLY_ENTITIES[name]
        else:
            assert name in name2codepoint
            expected = chr(name2codepoint[name])
        assert ENTITIES[name] == expected

    def test_substring_cannot_be_reassigned(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Entity nodes are read-only once built."""
        node = parse_substring_markup(xml_element("<copy/>"), ctx)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.substring = "x"
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.element_name = "para"
        assert node.substring == "©"

    def test_every_entity_is_dispatched(self) -> None:
        """Both groups route every entity name."""
        for name in ENTITIES:
            assert dispatch.TITLE_CMD_FACTORIES[name] is parse_substring_markup
            assert dispatch.CMD_FACTORIES[name] is parse_substring_markup
