"""Tests for parameter lists."""

from __future__ import annotations

from typing import Callable

import pytest
from bs4.element import Tag

from doxygen2md.exceptions import SchemaViolationError
from doxygen2md.model.params import (
    ParameterList,
    ParameterName,
    ParameterType,
    parse_parameter_item,
    parse_parameter_list,
)
from doxygen2md.model.paragraphs import parse_para
from doxygen2md.model.reftext import RefText
from doxygen2md.xml_parser import ParseContext


class TestParameterList:
    """Tests for parameterlist parsing."""

    def test_param_list_in_paragraph(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Names, direction and description are kept."""
        para = parse_para(
            xml_element(
                '<para><parameterlist kind="param"><parameteritem><parameternamelist>'
                '<parametername direction="inout">buffer</parametername>'
                "</parameternamelist><parameterdescription><para>Scratch space.</para>"
                "</parameterdescription></parameteritem></parameterlist></para>"
            ),
            ctx,
        )
        plist = para.children[0]
        assert isinstance(plist, ParameterList)
        assert plist.kind == "param"
        item = plist.items[0]
        name = item.name_lists[0].children[0]
        assert isinstance(name, ParameterName)
        assert name.direction == "inout"
        assert name.children == ["buffer"]
        assert item.description.children[0].children == ["Scratch space."]

    def test_types_and_names_keep_order(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Exception lists mix types and names, with refs inside."""
        plist = parse_parameter_list(
            xml_element(
                '<parameterlist kind="exception"><parameteritem><parameternamelist>'
                '<parametertype><ref refid="classerr" kindref="compound">Error</ref></parametertype>'
                "<parametername>std::bad_alloc</parametername>"
                "</parameternamelist><parameterdescription><para>x</para>"
                "</parameterdescription></parameteritem></parameterlist>"
            ),
            ctx,
        )
        name_list = plist.items[0].name_lists[0]
        ptype, pname = name_list.children
        assert isinstance(ptype, ParameterType)
        assert isinstance(ptype.children[0], RefText)
        assert ptype.children[0].refid == "classerr"
        assert isinstance(pname, ParameterName)
        assert pname.direction is None

    def test_kind_is_required(self, xml_element: Callable[[str], Tag], ctx: ParseContext) -> None:
        """A parameterlist without attributes is fatal."""
        with pytest.raises(SchemaViolationError, match="requires attributes"):
            parse_parameter_list(
                xml_element(
                    "<parameterlist><parameteritem><parameterdescription><para>x</para>"
                    "</parameterdescription></parameteritem></parameterlist>"
                ),
                ctx,
            )

    def test_other_attribute_does_not_stand_in_for_kind(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unknown attribute is logged, and the missing kind is still fatal."""
        with pytest.raises(SchemaViolationError, match="non-empty kind"):
            parse_parameter_list(
                xml_element(
                    '<parameterlist other="x"><parameteritem><parameterdescription><para>x</para>'
                    "</parameterdescription></parameteritem></parameterlist>"
                ),
                ctx,
            )
        assert "parameterlist attribute: other not implemented yet in ParameterList" in caplog.text

    def test_item_requires_one_description(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """An item without a description is fatal."""
        with pytest.raises(SchemaViolationError, match="requires a <parameterdescription>"):
            parse_parameter_item(
                xml_element(
                    "<parameteritem><parameternamelist><parametername>a</parametername>"
                    "</parameternamelist></parameteritem>"
                ),
                ctx,
            )

    def test_item_rejects_two_descriptions(
        self, xml_element: Callable[[str], Tag], ctx: ParseContext
    ) -> None:
        """Two descriptions in one item are fatal."""
        with pytest.raises(SchemaViolationError, match="more than one <parameterdescription>"):
            parse_parameter_item(
                xml_element(
                    "<parameteritem><parameterdescription><para>a</para></parameterdescription>"
                    "<parameterdescription><para>b</para></parameterdescription></parameteritem>"
                ),
                ctx,
            )
