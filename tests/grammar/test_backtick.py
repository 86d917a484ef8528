"""Tests for the MySQL and SQLite grammars."""

from __future__ import annotations

import pytest

from sqlcompose.grammar import MysqlGrammar, SqliteGrammar
from sqlcompose.utils.exceptions import InvalidPlaceholderCountError


@pytest.mark.parametrize("grammar_cls", [MysqlGrammar, SqliteGrammar])
def test_wrap(grammar_cls):
    """Test backtick quoting of plain and dotted identifiers."""
    g = grammar_cls()
    assert g.wrap("name") == "`name`"
    assert g.wrap("tx.name") == "`tx`.`name`"
    assert g.wrap("public.tx.name") == "`public`.`tx`.`name`"


@pytest.mark.parametrize("grammar_cls", [MysqlGrammar, SqliteGrammar])
def test_placeholder(grammar_cls):
    """Test that placeholders are plain question marks."""
    g = grammar_cls()
    assert g.placeholder(0) == ""
    assert g.placeholder(1) == "?"
    assert g.placeholder(2) == "?, ?"
    assert g.placeholder(3) == "?, ?, ?"


def test_placeholder_has_no_counter():
    """Test that earlier calls do not change later output."""
    g = MysqlGrammar()
    g.placeholder(5)
    assert g.placeholder(3) == "?, ?, ?"


def test_placeholder_negative():
    """Test that a negative count is rejected."""
    with pytest.raises(InvalidPlaceholderCountError):
        SqliteGrammar().placeholder(-2)


def test_names():
    """Test the registered names of the backtick grammars."""
    assert MysqlGrammar.name == "mysql"
    assert SqliteGrammar.name == "sqlite3"
