"""cssbuild: assemble CSS selector strings from ordered parts."""

from __future__ import annotations

__version__ = "0.1.0"

from cssbuild.builder import (  # noqa: E402
    CombinedSelector,
    SelectorBuilder,
    Stringifiable,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuild.errors import (  # noqa: E402
    DuplicateNotAllowedError,
    OutOfOrderError,
    SelectorError,
    SelectorOrderError,
    UnknownCategoryError,
)
from cssbuild.model import PartCategory  # noqa: E402

__all__ = [
    "__version__",
    # Builder
    "SelectorBuilder",
    "CombinedSelector",
    "Stringifiable",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # Model
    "PartCategory",
    # Errors
    "SelectorError",
    "SelectorOrderError",
    "DuplicateNotAllowedError",
    "OutOfOrderError",
    "UnknownCategoryError",
]
