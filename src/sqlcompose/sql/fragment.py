"""Base classes shared by every composable SQL fragment."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional, TypeVar, Union

from ..grammar.base import Grammar, GrammarFactory
from ..grammar.registry import DEFAULT_REGISTRY, GrammarRegistry

F = TypeVar("F", bound="Fragment")


class Fragment(ABC):
    """A renderable piece of SQL paired with its ordered parameters.

    Grammar resolution for a render, in order of precedence:

    1. the grammar passed to :meth:`render` (used for that render only; this is
       how a parent threads its grammar into nested fragments),
    2. the override pinned with :meth:`with_grammar` (kept across renders; a
       grammar pinned by name is created afresh for every render),
    3. a fresh instance of the registry default, created per render so that a
       numbering counter never leaks from one render into the next.
    """

    def __init__(self, *, registry: Optional[GrammarRegistry] = None):
        self._grammar: Optional[Grammar] = None
        self._grammar_factory: Optional[GrammarFactory] = None
        self._registry = registry

    @property
    def registry(self) -> GrammarRegistry:
        return self._registry if self._registry is not None else DEFAULT_REGISTRY

    def render(self, grammar: Optional[Grammar] = None) -> str:
        """Render the fragment to SQL text."""
        return self._render(self.resolve_grammar(grammar))

    @abstractmethod
    def parameters(self) -> list[Any]:
        """Return the flattened parameters in placeholder order."""

    def with_grammar(self: F, grammar: Union[Grammar, str]) -> F:
        """Pin ``grammar`` (an instance or a registered name) for later renders."""
        if isinstance(grammar, str):
            self._grammar_factory = self.registry.factory(grammar)
            self._grammar = None
        else:
            self._grammar_factory = None
            self._grammar = grammar
        return self

    def resolve_grammar(self, grammar: Optional[Grammar] = None) -> Grammar:
        if grammar is not None:
            return grammar
        if self._grammar is not None:
            return self._grammar
        if self._grammar_factory is not None:
            return self._grammar_factory()
        return self.registry.create()

    @abstractmethod
    def _render(self, grammar: Grammar) -> str:
        """Render against an already resolved grammar."""

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Clause(ABC):
    """One deferred entry of a :class:`ClauseList`.

    A clause keeps only what it needs to render against whichever grammar is
    resolved at render time, plus the parameters it contributes.
    """

    @abstractmethod
    def render(self, grammar: Grammar) -> str:
        """Render the clause against the resolved grammar."""

    def parameters(self) -> Sequence[Any]:
        return ()


class ClauseList(Fragment):
    """Fragment made of clauses rendered in append order."""

    separator = ", "

    def __init__(self, *, registry: Optional[GrammarRegistry] = None):
        super().__init__(registry=registry)
        self._clauses: list[Clause] = []

    def clauses(self) -> Iterator[Clause]:
        yield from self._clauses

    def parameters(self) -> list[Any]:
        params: list[Any] = []
        for clause in self._clauses:
            params.extend(clause.parameters())
        return params

    def _append(self, clause: Clause) -> None:
        self._clauses.append(clause)

    def _render(self, grammar: Grammar) -> str:
        return self.separator.join(clause.render(grammar) for clause in self._clauses)
