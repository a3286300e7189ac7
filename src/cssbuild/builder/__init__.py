from cssbuild.builder.accumulator import SelectorBuilder
from cssbuild.builder.combined import CombinedSelector, Stringifiable
from cssbuild.builder.facade import (
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

__all__ = [
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
]
