"""SQLite grammar."""

from __future__ import annotations

from .mysql import BacktickGrammar


class SqliteGrammar(BacktickGrammar):
    """SQLite accepts the same backtick quoting and ``?`` tokens as MySQL."""

    name = "sqlite3"
