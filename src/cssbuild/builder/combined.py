"""Combinator results: two selectors joined by a relational token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = ["Stringifiable", "CombinedSelector"]


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Snapshot of ``left combinator right``.

    Operands are stored as the text they rendered at combine time, so later
    changes to the operand builders do not affect this value.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()
