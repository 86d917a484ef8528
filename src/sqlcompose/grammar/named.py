"""Grammar emitting numbered named binds such as ``:p1``."""

from __future__ import annotations

from typing import Optional

from .base import PLACEHOLDER_SEPARATOR, Grammar, quote_path


class NamedGrammar(Grammar):
    """Stateful grammar producing ``:p1, :p2, ...`` style placeholders.

    The bind names are what :func:`sqlcompose.integrations.sqla.to_text`
    pairs with the flattened parameters. Identifier quoting is delegated to
    ``inner`` when one is given, so a dialect keeps its own quoting rules.
    """

    name = "named"

    def __init__(self, prefix: str = "p", inner: Optional[Grammar] = None) -> None:
        self.prefix = prefix
        self.inner = inner
        self._counter = 0

    @property
    def count(self) -> int:
        """Number of placeholders emitted so far."""
        return self._counter

    def bind_name(self, position: int) -> str:
        """Return the bind name used for the 1-based ``position``."""
        return f"{self.prefix}{position}"

    def wrap(self, identifier: str) -> str:
        if self.inner is not None:
            return self.inner.wrap(identifier)
        return quote_path(identifier, '"')

    def placeholder(self, count: int) -> str:
        self._check_count(count)
        start = self._counter + 1
        self._counter += count
        return PLACEHOLDER_SEPARATOR.join(
            f":{self.bind_name(n)}" for n in range(start, self._counter + 1)
        )
