"""SQL dialect grammars."""

from .base import Grammar, GrammarFactory
from .mysql import BacktickGrammar, MysqlGrammar
from .named import NamedGrammar
from .postgres import PostgresGrammar
from .registry import (
    DEFAULT_REGISTRY,
    GrammarRegistry,
    available_grammars,
    build_registry,
    default_grammar,
    get_grammar,
    register_grammar,
    set_default_grammar,
)
from .sqlite import SqliteGrammar

__all__ = [
    "BacktickGrammar",
    "DEFAULT_REGISTRY",
    "Grammar",
    "GrammarFactory",
    "GrammarRegistry",
    "MysqlGrammar",
    "NamedGrammar",
    "PostgresGrammar",
    "SqliteGrammar",
    "available_grammars",
    "build_registry",
    "default_grammar",
    "get_grammar",
    "register_grammar",
    "set_default_grammar",
]
