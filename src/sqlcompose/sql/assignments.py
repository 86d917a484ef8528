"""SET assignment lists for UPDATE statements."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..grammar.base import Grammar
from .fragment import Clause, ClauseList
from .query import Query


@dataclass(frozen=True)
class Assignment(Clause):
    field: str
    value: Any

    def render(self, grammar: Grammar) -> str:
        return f"{grammar.wrap(self.field)} = {grammar.placeholder(1)}"

    def parameters(self) -> Sequence[Any]:
        return (self.value,)


@dataclass(frozen=True)
class RawAssignment(Clause):
    query: Query

    def render(self, grammar: Grammar) -> str:
        return self.query.render(grammar)

    def parameters(self) -> Sequence[Any]:
        return self.query.parameters()


class SetGroup(ClauseList):
    """Comma-separated assignments for an UPDATE statement.

    Examples:
        >>> group = SetGroup().set("name", "Tom").set("surname", "Johnson")
        >>> group.render()
        '"name" = $1, "surname" = $2'
    """

    def set(self, field: str, value: Any) -> SetGroup:
        self._append(Assignment(field, value))
        return self

    def set_raw(self, template: str, *args: Any) -> SetGroup:
        """Add a raw template assignment such as ``jsondata->'name' = %p``."""
        self._append(RawAssignment(Query(template, args, registry=self._registry)))
        return self
