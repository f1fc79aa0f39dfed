"""Tests for the css_selector_builder facade."""

from __future__ import annotations

import pytest

from selector_builder import (
    CssSelectorBuilder,
    DuplicateError,
    OrderError,
    SelectorBuilder,
    css_selector_builder,
)

builder = css_selector_builder


class TestEntryPoints:
    def test_element(self) -> None:
        assert builder.element("div").stringify() == "div"

    def test_id(self) -> None:
        assert builder.id("main").stringify() == "#main"

    def test_class(self) -> None:
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self) -> None:
        assert builder.attr("type=checkbox").stringify() == "[type=checkbox]"

    def test_pseudo_class(self) -> None:
        assert builder.pseudo_class("checked").stringify() == ":checked"

    def test_pseudo_element(self) -> None:
        assert builder.pseudo_element("selection").stringify() == "::selection"

    def test_returns_builder(self) -> None:
        assert isinstance(builder.element("div"), SelectorBuilder)

    def test_module_instance(self) -> None:
        assert isinstance(css_selector_builder, CssSelectorBuilder)


class TestIndependentBuilders:
    def test_each_call_is_fresh(self) -> None:
        first = builder.element("div")
        second = builder.element("span")
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_no_duplicate_across_calls(self) -> None:
        builder.id("a")
        assert builder.id("b").stringify() == "#b"


class TestChaining:
    def test_id_classes(self) -> None:
        selector = builder.id("main").class_("container").class_("editable")
        assert selector.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert selector.stringify() == 'a[href$=".png"]:focus'

    def test_chain_errors_propagate(self) -> None:
        with pytest.raises(DuplicateError):
            builder.pseudo_element("after").pseudo_element("before")
        with pytest.raises(OrderError):
            builder.pseudo_class("hover").attr("href")


class TestCombine:
    def test_sibling(self) -> None:
        combined = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        )
        assert combined.stringify() == "div#main + table#data"

    def test_deep_nesting(self) -> None:
        combined = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert combined.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_child_with_pseudo_element(self) -> None:
        combined = builder.combine(
            builder.element("p").class_("note"),
            ">",
            builder.element("span").pseudo_element("first-letter"),
        )
        assert combined.stringify() == "p.note > span::first-letter"
