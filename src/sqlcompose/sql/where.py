"""WHERE-style conjunction groups."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..grammar.base import Grammar
from .fragment import Clause, ClauseList, Fragment
from .query import Query


class Joiner(str, Enum):
    NONE = ""
    AND = " AND "
    OR = " OR "


@dataclass(frozen=True)
class Condition(Clause):
    joiner: Joiner


@dataclass(frozen=True)
class Comparison(Condition):
    field: str
    operator: str
    value: Any

    def render(self, grammar: Grammar) -> str:
        return f"{self.joiner.value}{grammar.wrap(self.field)} {self.operator} {grammar.placeholder(1)}"

    def parameters(self) -> Sequence[Any]:
        return (self.value,)


@dataclass(frozen=True)
class RawCondition(Condition):
    query: Query

    def render(self, grammar: Grammar) -> str:
        return self.joiner.value + self.query.render(grammar)

    def parameters(self) -> Sequence[Any]:
        return self.query.parameters()


@dataclass(frozen=True)
class Membership(Condition):
    field: str
    values: tuple[Any, ...]
    negated: bool = False

    def render(self, grammar: Grammar) -> str:
        op = "NOT IN" if self.negated else "IN"
        return f"{self.joiner.value}{grammar.wrap(self.field)} {op} ({grammar.placeholder(len(self.values))})"

    def parameters(self) -> Sequence[Any]:
        return self.values


@dataclass(frozen=True)
class SubqueryMembership(Condition):
    field: str
    query: Fragment
    negated: bool = False

    def render(self, grammar: Grammar) -> str:
        op = "NOT IN" if self.negated else "IN"
        return f"{self.joiner.value}{grammar.wrap(self.field)} {op} ({self.query.render(grammar)})"

    def parameters(self) -> Sequence[Any]:
        return self.query.parameters()


@dataclass(frozen=True)
class Nullity(Condition):
    field: str
    negated: bool = False

    def render(self, grammar: Grammar) -> str:
        test = "IS NOT NULL" if self.negated else "IS NULL"
        return f"{self.joiner.value}{grammar.wrap(self.field)} {test}"


@dataclass(frozen=True)
class NestedGroup(Condition):
    group: "WhereGroup"

    def render(self, grammar: Grammar) -> str:
        return f"{self.joiner.value}({self.group.render(grammar)})"

    def parameters(self) -> Sequence[Any]:
        return self.group.parameters()


class WhereGroup(ClauseList):
    """Boolean conditions joined with AND / OR.

    The joiner of each condition is fixed when it is appended: the first
    condition has none, every later one gets the joiner of the method used.

    Examples:
        >>> group = WhereGroup().where("name", "=", "Marty").where("surname", "=", "McFly")
        >>> group.render()
        '"name" = $1 AND "surname" = $2'
        >>> group.parameters()
        ['Marty', 'McFly']
    """

    separator = ""

    def _joiner(self, joiner: Joiner) -> Joiner:
        return joiner if self._clauses else Joiner.NONE

    def _add(self, joiner: Joiner, clause_type: type[Condition], *args: Any) -> WhereGroup:
        self._append(clause_type(self._joiner(joiner), *args))
        return self

    def where(self, field: str, operator: str, value: Any) -> WhereGroup:
        """Add ``field operator <placeholder>`` joined with AND."""
        return self._add(Joiner.AND, Comparison, field, operator, value)

    def where_or(self, field: str, operator: str, value: Any) -> WhereGroup:
        """Add ``field operator <placeholder>`` joined with OR."""
        return self._add(Joiner.OR, Comparison, field, operator, value)

    def where_raw(self, template: str, *args: Any) -> WhereGroup:
        """Add a raw template condition joined with AND.

        Example:
            ``where_raw("jsondata->%p = %p", "name", "Tom")`` renders
            ``jsondata->$1 = $2``.
        """
        return self._add(Joiner.AND, RawCondition, Query(template, args, registry=self._registry))

    def where_raw_or(self, template: str, *args: Any) -> WhereGroup:
        return self._add(Joiner.OR, RawCondition, Query(template, args, registry=self._registry))

    def where_in(self, field: str, *values: Any) -> WhereGroup:
        """Add ``field IN (<placeholders>)`` joined with AND."""
        return self._add(Joiner.AND, Membership, field, tuple(values))

    def where_in_or(self, field: str, *values: Any) -> WhereGroup:
        return self._add(Joiner.OR, Membership, field, tuple(values))

    def where_not_in(self, field: str, *values: Any) -> WhereGroup:
        return self._add(Joiner.AND, Membership, field, tuple(values), True)

    def where_not_in_or(self, field: str, *values: Any) -> WhereGroup:
        return self._add(Joiner.OR, Membership, field, tuple(values), True)

    def where_in_sub(self, field: str, query: Fragment) -> WhereGroup:
        """Add ``field IN (<sub-query>)`` joined with AND."""
        return self._add(Joiner.AND, SubqueryMembership, field, query)

    def where_in_sub_or(self, field: str, query: Fragment) -> WhereGroup:
        return self._add(Joiner.OR, SubqueryMembership, field, query)

    def where_not_in_sub(self, field: str, query: Fragment) -> WhereGroup:
        return self._add(Joiner.AND, SubqueryMembership, field, query, True)

    def where_not_in_sub_or(self, field: str, query: Fragment) -> WhereGroup:
        return self._add(Joiner.OR, SubqueryMembership, field, query, True)

    def where_null(self, field: str) -> WhereGroup:
        """Add ``field IS NULL`` joined with AND."""
        return self._add(Joiner.AND, Nullity, field)

    def where_null_or(self, field: str) -> WhereGroup:
        return self._add(Joiner.OR, Nullity, field)

    def where_not_null(self, field: str) -> WhereGroup:
        return self._add(Joiner.AND, Nullity, field, True)

    def where_not_null_or(self, field: str) -> WhereGroup:
        return self._add(Joiner.OR, Nullity, field, True)

    def where_group(self, group: WhereGroup) -> WhereGroup:
        """Add ``(<group>)`` joined with AND."""
        return self._add(Joiner.AND, NestedGroup, group)

    def where_group_or(self, group: WhereGroup) -> WhereGroup:
        return self._add(Joiner.OR, NestedGroup, group)
