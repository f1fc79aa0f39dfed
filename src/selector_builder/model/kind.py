"""Fragment kinds: the ranked categories a selector is assembled from."""

from __future__ import annotations

from enum import IntEnum


class FragmentKind(IntEnum):
    """Kind of a selector fragment, valued by its rank in CSS ordering.

    A compound selector must list its parts in ascending rank:

        element#id.class[attr]:pseudo-class::pseudo-element

    ``NONE`` is the state of a builder that has not appended anything yet.
    """

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def prefix(self) -> str:
        return _AFFIXES[self][0]

    @property
    def suffix(self) -> str:
        return _AFFIXES[self][1]

    @property
    def is_singleton(self) -> bool:
        """True if the kind may appear at most once in a selector."""
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's prefix and suffix."""
        return f"{self.prefix}{value}{self.suffix}"


_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.NONE: ("", ""),
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)
