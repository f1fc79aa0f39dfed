"""Selector builder model layer -- public type re-exports."""

from selector_builder.model.kind import SINGLETON_KINDS, FragmentKind
from selector_builder.model.rectangle import Rectangle

__all__ = [
    # kind
    "FragmentKind",
    "SINGLETON_KINDS",
    # rectangle
    "Rectangle",
]
