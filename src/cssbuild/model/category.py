"""Selector part categories and their canonical ordering."""

from __future__ import annotations

from enum import IntEnum

from cssbuild.errors import UnknownCategoryError


class PartCategory(IntEnum):
    """Kind of a selector fragment.

    The integer value is the fragment's rank: parts of a compound selector
    must appear in non-decreasing rank order.
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def single_shot(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in _SINGLE_SHOT

    def format(self, value: str) -> str:
        """Render *value* as a fragment of this category."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def from_name(cls, name: str) -> PartCategory:
        key = name.strip().lower().replace("-", "_")
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnknownCategoryError(name) from None


_SINGLE_SHOT = frozenset(
    {PartCategory.ELEMENT, PartCategory.ID, PartCategory.PSEUDO_ELEMENT}
)

_AFFIXES: dict[PartCategory, tuple[str, str]] = {
    PartCategory.ELEMENT: ("", ""),
    PartCategory.ID: ("#", ""),
    PartCategory.CLASS: (".", ""),
    PartCategory.ATTRIBUTE: ("[", "]"),
    PartCategory.PSEUDO_CLASS: (":", ""),
    PartCategory.PSEUDO_ELEMENT: ("::", ""),
}

_ALIASES: dict[str, PartCategory] = {
    **{member.name.lower(): member for member in PartCategory},
    "class_": PartCategory.CLASS,
    "attr": PartCategory.ATTRIBUTE,
}
