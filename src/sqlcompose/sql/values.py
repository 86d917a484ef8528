"""VALUES tuple lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..grammar.base import Grammar
from .fragment import Clause, ClauseList


@dataclass(frozen=True)
class ValueTuple(Clause):
    values: tuple[Any, ...]

    def render(self, grammar: Grammar) -> str:
        return f"({grammar.placeholder(len(self.values))})"

    def parameters(self) -> Sequence[Any]:
        return self.values


class ValuesGroup(ClauseList):
    """Parenthesized placeholder tuples, one per :meth:`values` call.

    Examples:
        >>> group = ValuesGroup().values(1, "Marty", "McFly").values(2, "Emmett", "Brown")
        >>> group.render()
        '($1, $2, $3), ($4, $5, $6)'
    """

    def values(self, *values: Any) -> ValuesGroup:
        self._append(ValueTuple(tuple(values)))
        return self
