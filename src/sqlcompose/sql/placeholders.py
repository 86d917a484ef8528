"""Bare comma-separated placeholder lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..grammar.base import Grammar
from .fragment import Clause, ClauseList


@dataclass(frozen=True)
class PlaceholderRun(Clause):
    values: tuple[Any, ...]

    def render(self, grammar: Grammar) -> str:
        return grammar.placeholder(len(self.values))

    def parameters(self) -> Sequence[Any]:
        return self.values


class ListGroup(ClauseList):
    """Flat list of placeholders, e.g. for ``ARRAY[%s]``.

    Examples:
        >>> group = ListGroup().append("one", "two").append().append("three")
        >>> group.render()
        '$1, $2, $3'
    """

    def append(self, *values: Any) -> ListGroup:
        # An empty call adds nothing, not even a separator.
        if values:
            self._append(PlaceholderRun(tuple(values)))
        return self
