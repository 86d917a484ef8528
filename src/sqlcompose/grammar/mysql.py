"""MySQL grammar: backtick identifiers and ``?`` placeholders."""

from __future__ import annotations

from .base import PLACEHOLDER_SEPARATOR, Grammar, quote_path


class BacktickGrammar(Grammar):
    """Stateless grammar shared by dialects quoting with backticks."""

    def wrap(self, identifier: str) -> str:
        return quote_path(identifier, "`")

    def placeholder(self, count: int) -> str:
        self._check_count(count)
        return PLACEHOLDER_SEPARATOR.join(["?"] * count)


class MysqlGrammar(BacktickGrammar):
    name = "mysql"
