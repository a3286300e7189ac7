"""Entry points that start a new selector or combine two selectors.

Every entry point allocates its own SelectorBuilder; nothing is shared
between calls.
"""

from __future__ import annotations

import logging

from cssbuild.builder.accumulator import SelectorBuilder
from cssbuild.builder.combined import CombinedSelector, Stringifiable

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "CssSelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger("cssbuild.builder")


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    left: Stringifiable, combinator: str, right: Stringifiable
) -> CombinedSelector:
    """Join two selectors with *combinator*.

    Both operands are rendered immediately. The combinator is not validated;
    it is placed between the operands with one space on each side, so the
    descendant combinator ``" "`` renders as three spaces.
    """
    combined = CombinedSelector(left.stringify(), combinator, right.stringify())
    logger.debug("Combined selector: %s", combined.stringify())
    return combined


class CssSelectorBuilder:
    """Namespace object grouping the entry points under one name."""

    __slots__ = ()

    element = staticmethod(element)
    id = staticmethod(id)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = CssSelectorBuilder()
