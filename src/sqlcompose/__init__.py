"""Public sqlcompose API.

Compose parameterized SQL from small fragments::

    from sqlcompose import WhereGroup, build

    where = WhereGroup().where("name", "=", "Marty").where("surname", "=", "McFly")
    q = build("SELECT id FROM users WHERE %s LIMIT %p", where, 1)
    q.render()      # SELECT id FROM users WHERE "name" = $1 AND "surname" = $2 LIMIT $3
    q.parameters()  # ['Marty', 'McFly', 1]
"""

from __future__ import annotations

from .config import ComposerConfig, create_config
from .grammar import (
    DEFAULT_REGISTRY,
    Grammar,
    GrammarRegistry,
    MysqlGrammar,
    NamedGrammar,
    PostgresGrammar,
    SqliteGrammar,
    available_grammars,
    build_registry,
    default_grammar,
    get_grammar,
    register_grammar,
    set_default_grammar,
)
from .sql import (
    Fragment,
    ListGroup,
    Query,
    SetGroup,
    ValuesGroup,
    WhereGroup,
    build,
    stringify,
)
from .utils.exceptions import (
    ArgumentCountError,
    ArgumentOverflowError,
    ArgumentUnderflowError,
    InvalidPlaceholderCountError,
    ParameterMismatchError,
    SqlComposeError,
    UnknownGrammarError,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "ArgumentOverflowError",
    "ArgumentUnderflowError",
    "ComposerConfig",
    "DEFAULT_REGISTRY",
    "Fragment",
    "Grammar",
    "GrammarRegistry",
    "InvalidPlaceholderCountError",
    "ListGroup",
    "MysqlGrammar",
    "NamedGrammar",
    "ParameterMismatchError",
    "PostgresGrammar",
    "Query",
    "SetGroup",
    "SqlComposeError",
    "SqliteGrammar",
    "UnknownGrammarError",
    "ValuesGroup",
    "WhereGroup",
    "__version__",
    "available_grammars",
    "build",
    "build_registry",
    "create_config",
    "default_grammar",
    "get_grammar",
    "register_grammar",
    "set_default_grammar",
    "stringify",
]
