"""Fluent builder that assembles a compound CSS selector fragment by fragment.

Example:
    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    renders as ``a[href$=".png"]:focus``.
"""

from __future__ import annotations

import logging

from selector_builder.errors import DuplicateError, OrderError
from selector_builder.model.kind import FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Mutable accumulator of selector fragments.

    Every fragment method validates against the kind of the last appended
    fragment before touching any state, so a rejected call leaves the builder
    as it was. Methods return ``self`` for chaining.
    """

    def __init__(self) -> None:
        self.fragments: list[str] = []
        self.last_kind: FragmentKind = FragmentKind.NONE
        self._seen: set[FragmentKind] = set()

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        """Append a type selector, e.g. ``div``."""
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        """Append an id selector, e.g. ``#main``."""
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class selector, e.g. ``.container``."""
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute selector, e.g. ``[href]``."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a pseudo-class, e.g. ``:focus``."""
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Append a pseudo-element, e.g. ``::before``."""
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        if kind < self.last_kind:
            raise OrderError(kind=kind, previous=self.last_kind)
        # Only reachable when kind == last_kind.
        if kind.is_singleton and kind in self._seen:
            raise DuplicateError(kind=kind, previous=self.last_kind)

        fragment = kind.render(value)
        self.fragments.append(fragment)
        self.last_kind = kind
        self._seen.add(kind)
        logger.debug("Appended %s fragment %r", kind.name, fragment)
        return self

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder | str,
        combinator: str,
        right: SelectorBuilder | str,
    ) -> SelectorBuilder:
        """Replace this builder's content with ``left combinator right``.

        Operands are rendered with ``str()`` and joined with one space on each
        side of the combinator. Whatever this builder held before is dropped,
        and the combined text is not validated further.
        """
        if self.fragments:
            logger.debug("Discarding %d fragment(s) on combine", len(self.fragments))
        combined = f"{left} {combinator} {right}"
        self.fragments = [combined]
        logger.debug("Combined selector %r", combined)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text without surrounding whitespace."""
        return str(self).strip()

    def __str__(self) -> str:
        return "".join(self.fragments)

    def __repr__(self) -> str:
        return f"SelectorBuilder({str(self)!r}, last_kind={self.last_kind.name})"
