"""SelectorBuilder: accumulates the parts of one compound selector.

Parts are appended through chainable methods and must follow the canonical
CSS order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class parts may repeat. Element, id and
pseudo-element parts may appear once. A rejected append raises before the
builder is modified.
"""

from __future__ import annotations

import logging

from cssbuild.errors import DuplicateNotAllowedError, OutOfOrderError
from cssbuild.model.category import PartCategory

__all__ = ["SelectorBuilder"]

logger = logging.getLogger("cssbuild.builder")


class SelectorBuilder:
    """Mutable, chainable builder for a single compound selector."""

    __slots__ = ("_last_category", "_seen", "_text")

    def __init__(self) -> None:
        self._last_category: PartCategory | None = None
        self._seen: set[PartCategory] = set()
        self._text = ""

    @property
    def last_category(self) -> PartCategory | None:
        """Category of the most recently appended part, or None."""
        return self._last_category

    # --- appending ----------------------------------------------------------

    def append(self, category: PartCategory, value: str) -> SelectorBuilder:
        """Append *value* as a part of *category* and return self.

        Raises:
            DuplicateNotAllowedError: *category* is single-shot and was
                already used in this selector.
            OutOfOrderError: *category* ranks below the last appended part.
        """
        self._check(category)
        self._text += category.format(value)
        self._last_category = category
        self._seen.add(category)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self.append(PartCategory.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(PartCategory.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(PartCategory.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(PartCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(PartCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(PartCategory.PSEUDO_ELEMENT, value)

    def _check(self, category: PartCategory) -> None:
        last = self._last_category
        if category.single_shot and category in self._seen:
            logger.debug(
                "Rejected duplicate %s part after %s", category.name, self._text
            )
            raise DuplicateNotAllowedError(category, last)
        if last is not None and category < last:
            logger.debug(
                "Rejected %s part after %s part", category.name, last.name
            )
            raise OutOfOrderError(category, last)

    # --- output -------------------------------------------------------------

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"
