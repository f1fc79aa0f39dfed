"""Error types raised when a selector fragment is appended out of place."""

from __future__ import annotations

from selector_builder.model.kind import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector builder errors.

    Attributes:
        kind: The fragment kind whose append was rejected.
        previous: The kind of the last fragment already in the selector.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: FragmentKind | None = None,
        previous: FragmentKind | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.previous = previous


class DuplicateError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(
        self, message: str = DUPLICATE_MESSAGE, **kwargs: FragmentKind | None
    ) -> None:
        super().__init__(message, **kwargs)


class OrderError(SelectorError):
    """A fragment was appended after a fragment of a later-ranked kind."""

    def __init__(
        self, message: str = ORDER_MESSAGE, **kwargs: FragmentKind | None
    ) -> None:
        super().__init__(message, **kwargs)
