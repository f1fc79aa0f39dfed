"""selector-builder: fluent CSS selector construction with ordering checks."""

from selector_builder.builder import SelectorBuilder
from selector_builder.errors import DuplicateError, OrderError, SelectorError
from selector_builder.facade import CssSelectorBuilder, css_selector_builder
from selector_builder.model import FragmentKind, Rectangle
from selector_builder.serialization import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    # errors
    "SelectorError",
    "DuplicateError",
    "OrderError",
    # model
    "FragmentKind",
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
]
