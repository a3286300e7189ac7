"""Error hierarchy for selector building."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuild.model.category import PartCategory

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all cssbuild errors."""


class SelectorOrderError(SelectorError):
    """A part was appended in violation of the selector ordering rules."""

    def __init__(
        self,
        message: str,
        *,
        category: PartCategory,
        last_category: PartCategory | None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.last_category = last_category


class DuplicateNotAllowedError(SelectorOrderError):
    """An element, id or pseudo-element part was appended twice."""

    def __init__(
        self, category: PartCategory, last_category: PartCategory | None
    ) -> None:
        super().__init__(
            DUPLICATE_MESSAGE, category=category, last_category=last_category
        )


class OutOfOrderError(SelectorOrderError):
    """A part was appended after a part of higher rank."""

    def __init__(
        self, category: PartCategory, last_category: PartCategory | None
    ) -> None:
        super().__init__(
            ORDER_MESSAGE, category=category, last_category=last_category
        )


class UnknownCategoryError(SelectorError, ValueError):
    """A category name could not be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown selector part category: {name!r}")
        self.name = name
