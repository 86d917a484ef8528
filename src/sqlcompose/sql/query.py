"""Template engine: SQL text with ``%s`` / ``%p`` directives and arguments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from ..grammar.base import Grammar
from ..grammar.registry import GrammarRegistry
from .directives import Token, TokenKind, tokenize
from .fragment import Fragment
from .stringify import stringify


class Query(Fragment):
    """A template string together with the arguments its directives consume.

    ``%s`` splices an argument in place: a fragment is rendered with the
    query's grammar, any other value is converted with :func:`stringify` and
    is *not* bound. ``%p`` emits one placeholder and binds the argument, or
    all of a fragment argument's parameters.
    """

    def __init__(
        self,
        template: str,
        args: Sequence[Any] = (),
        *,
        registry: Optional[GrammarRegistry] = None,
    ):
        super().__init__(registry=registry)
        self.template = template
        self.args = tuple(args)
        self._tokens = tokenize(template, len(self.args))

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def _render(self, grammar: Grammar) -> str:
        parts: list[str] = []
        for token in self._tokens:
            if token.kind is TokenKind.TEXT:
                parts.append(token.text)
            elif token.kind is TokenKind.PLACEHOLDER:
                parts.append(grammar.placeholder(1))
            else:
                arg = self.args[token.argument]
                if isinstance(arg, Fragment):
                    parts.append(arg.render(grammar))
                else:
                    parts.append(stringify(arg))
        return "".join(parts)

    def parameters(self) -> list[Any]:
        params: list[Any] = []
        for token in self._tokens:
            if token.kind is TokenKind.TEXT:
                continue
            arg = self.args[token.argument]
            if isinstance(arg, Fragment):
                params.extend(arg.parameters())
            elif token.kind is TokenKind.PLACEHOLDER:
                params.append(arg)
        return params

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Query(template={self.template!r}, args={self.args!r})"


def build(template: str, *args: Any, registry: Optional[GrammarRegistry] = None) -> Query:
    """Create a :class:`Query` from a template and its arguments.

    Args:
        template: SQL text with ``%s``, ``%p`` and ``%%`` directives
        *args: One argument per ``%s`` / ``%p`` directive, in order
        registry: Registry used to resolve the default grammar

    Returns:
        Query fragment

    Raises:
        ArgumentUnderflowError: If a directive has no argument
        ArgumentOverflowError: If arguments are left unconsumed

    Examples:
        >>> q = build("SELECT id FROM t WHERE name = %p LIMIT %p", "Tom", 10)
        >>> q.render()
        'SELECT id FROM t WHERE name = $1 LIMIT $2'
        >>> q.parameters()
        ['Tom', 10]
    """
    return Query(template, args, registry=registry)
