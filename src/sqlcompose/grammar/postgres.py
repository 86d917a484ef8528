"""PostgreSQL grammar: double-quoted identifiers and ``$n`` placeholders."""

from __future__ import annotations

from .base import PLACEHOLDER_SEPARATOR, Grammar, quote_path


class PostgresGrammar(Grammar):
    """Grammar emitting numbered placeholders from a per-instance counter.

    ``placeholder(3)`` followed by ``placeholder(2)`` on the same instance
    yields ``$1, $2, $3`` and then ``$4, $5``.
    """

    name = "postgres"

    def __init__(self) -> None:
        self._counter = 0

    @property
    def count(self) -> int:
        """Number of placeholders emitted so far."""
        return self._counter

    def wrap(self, identifier: str) -> str:
        # A ':' or '::' type cast ends the quoted part; the rest is kept verbatim.
        head, marker, tail = identifier.partition(":")
        return quote_path(head, '"') + marker + tail

    def placeholder(self, count: int) -> str:
        self._check_count(count)
        start = self._counter + 1
        self._counter += count
        return PLACEHOLDER_SEPARATOR.join(f"${n}" for n in range(start, self._counter + 1))
