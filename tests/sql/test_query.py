"""Tests for the template engine."""

from __future__ import annotations

import pytest

from sqlcompose import ListGroup, WhereGroup, build
from sqlcompose.grammar import MysqlGrammar, PostgresGrammar
from sqlcompose.sql.query import Query
from sqlcompose.utils.exceptions import ArgumentOverflowError, ArgumentUnderflowError

TEMPLATE = "SELECT *, %%s, %%p, %, %% FROM table WHERE status = %p AND %s LIMIT %p, OFFSET %p"


def test_query_with_group():
    """Test escapes, placeholders and a nested group in one template."""
    group = WhereGroup().where("name", "=", "test")
    q = build(TEMPLATE, "active", group, 10, 0)
    assert (
        q.render()
        == 'SELECT *, %s, %p, %, % FROM table WHERE status = $1 AND "name" = $2 LIMIT $3, OFFSET $4'
    )
    assert q.parameters() == ["active", "test", 10, 0]


def test_query_with_mysql_grammar():
    """Test an explicitly pinned grammar."""
    group = WhereGroup().where("name", "=", "test")
    q = build(TEMPLATE, "active", group, 10, 0).with_grammar(MysqlGrammar())
    assert (
        q.render()
        == "SELECT *, %s, %p, %, % FROM table WHERE status = ? AND `name` = ? LIMIT ?, OFFSET ?"
    )
    assert q.parameters() == ["active", "test", 10, 0]


def test_group_then_limit():
    """Test the canonical select scenario."""
    group = WhereGroup().where("name", "=", "Marty")
    q = build("SELECT id FROM t WHERE %s LIMIT %p", group, 10)
    assert q.render() == 'SELECT id FROM t WHERE "name" = $1 LIMIT $2'
    assert q.parameters() == ["Marty", 10]


def test_contiguous_numbering():
    """Test that placeholders are numbered 1..k+1 across a nested fragment."""
    values = ListGroup().append(*range(5))
    q = build("SELECT * FROM t WHERE id IN (%s) AND kind = %p", values, "x")
    assert q.render() == "SELECT * FROM t WHERE id IN ($1, $2, $3, $4, $5) AND kind = $6"
    assert q.parameters() == [0, 1, 2, 3, 4, "x"]


def test_escape_only():
    """Test a template that consumes no arguments."""
    q = build("100%% done")
    assert q.render() == "100% done"
    assert q.parameters() == []


def test_inline_scalar_is_not_bound():
    """Test that %s with a scalar splices text and binds nothing."""
    q = build("SELECT * FROM %s WHERE id = %p LIMIT %s", "users", 7, 10)
    assert q.render() == "SELECT * FROM users WHERE id = $1 LIMIT 10"
    assert q.parameters() == [7]


def test_placeholder_with_fragment_argument():
    """Test that %p with a fragment emits one placeholder and all its parameters."""
    inner = build("%p, %p", "a", "b")
    q = build("f(%p)", inner)
    assert q.render() == "f($1)"
    assert q.parameters() == ["a", "b"]


def test_nested_queries():
    """Test a query substituted into another query."""
    sub = build("SELECT id FROM users WHERE name = %p", "Tom")
    q = build("SELECT * FROM orders WHERE user_id IN (%s) AND total > %p", sub, 100)
    assert q.render() == "SELECT * FROM orders WHERE user_id IN (SELECT id FROM users WHERE name = $1) AND total > $2"
    assert q.parameters() == ["Tom", 100]


def test_explicit_render_grammar_is_shared():
    """Test that a grammar passed to render numbers the whole tree."""
    grammar = PostgresGrammar()
    q = build("a = %p AND %s", 1, WhereGroup().where("b", "=", 2))
    assert q.render(grammar) == 'a = $1 AND "b" = $2'
    assert grammar.count == 2


def test_underflow_raised_at_construction():
    """Test that missing arguments fail when the query is built."""
    with pytest.raises(ArgumentUnderflowError):
        build("SELECT * FROM t WHERE a = %p AND b = %p", 1)


def test_overflow_raised_at_construction():
    """Test that extra arguments fail when the query is built."""
    with pytest.raises(ArgumentOverflowError):
        Query("SELECT 1", (1,))


def test_str_renders():
    """Test that str() renders with the default grammar."""
    assert str(build("x = %p", 1)) == "x = $1"
