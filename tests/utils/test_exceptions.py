"""Tests for exception hierarchy."""

from __future__ import annotations

from sqlcompose.utils.exceptions import (
    ArgumentCountError,
    ArgumentOverflowError,
    ArgumentUnderflowError,
    InvalidPlaceholderCountError,
    ParameterMismatchError,
    SqlComposeError,
    UnknownGrammarError,
)


def test_exception_hierarchy():
    """Test that all exceptions inherit from SqlComposeError."""
    assert issubclass(ArgumentCountError, SqlComposeError)
    assert issubclass(ArgumentUnderflowError, ArgumentCountError)
    assert issubclass(ArgumentOverflowError, ArgumentCountError)
    assert issubclass(UnknownGrammarError, SqlComposeError)
    assert issubclass(InvalidPlaceholderCountError, SqlComposeError)
    assert issubclass(ParameterMismatchError, SqlComposeError)


def test_message_suggestion_and_context():
    """Test formatting of message, suggestion and context."""
    error = SqlComposeError("Broken", suggestion="Fix it", context={"offset": 3})
    assert str(error) == "Broken\n\nSuggestion: Fix it\n\nContext: offset=3"
    assert str(SqlComposeError("Plain")) == "Plain"


def test_default_suggestions():
    """Test that errors carry a suggestion when none is given."""
    assert "%%" in str(ArgumentUnderflowError("Missing"))
    assert "register_grammar" in str(UnknownGrammarError("Unknown"))
    assert ArgumentOverflowError("Extra").suggestion
    assert ParameterMismatchError("Mismatch").suggestion
    assert InvalidPlaceholderCountError("Negative").suggestion is None


def test_exception_chaining():
    """Test that exceptions can be chained with cause."""
    cause = KeyError("oracle")
    try:
        raise UnknownGrammarError("Grammar 'oracle' not found", suggestion="") from cause
    except UnknownGrammarError as error:
        assert error.__cause__ is cause
        assert str(error) == "Grammar 'oracle' not found"
