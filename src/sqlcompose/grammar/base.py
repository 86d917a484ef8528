"""Grammar interface shared by every SQL dialect."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from ..utils.exceptions import InvalidPlaceholderCountError

PLACEHOLDER_SEPARATOR = ", "


class Grammar(ABC):
    """Dialect strategy for identifier quoting and placeholder generation.

    Implementations that number their placeholders keep a counter on the
    instance. Such an instance belongs to a single render: sharing it between
    unrelated or concurrent renders interleaves the numbering.
    """

    name: str = ""

    @abstractmethod
    def wrap(self, identifier: str) -> str:
        """Quote a dotted identifier path component by component."""

    @abstractmethod
    def placeholder(self, count: int) -> str:
        """Return ``count`` placeholders joined by ``", "``."""

    @staticmethod
    def _check_count(count: int) -> None:
        if count < 0:
            raise InvalidPlaceholderCountError(
                f"Placeholder count must not be negative, got {count}",
                context={"count": count},
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


GrammarFactory = Callable[[], Grammar]


def quote_path(path: str, quote_char: str) -> str:
    """Quote each dot-separated component of ``path`` with ``quote_char``."""
    return ".".join(f"{quote_char}{part}{quote_char}" for part in path.split("."))
