"""Stateless entry points that start a new SelectorBuilder per call."""

from __future__ import annotations

from selector_builder.builder import SelectorBuilder

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Facade over SelectorBuilder: one constructor per fragment kind.

    Each call allocates an independent builder, so chains started from the
    facade never share state::

        css_selector_builder.id("main").class_("container").stringify()
        # '#main.container'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        selector1: SelectorBuilder | str,
        combinator: str,
        selector2: SelectorBuilder | str,
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(selector1, combinator, selector2)


css_selector_builder = CssSelectorBuilder()
