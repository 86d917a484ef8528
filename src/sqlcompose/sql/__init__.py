"""Composable SQL fragments and the template engine."""

from .directives import Token, TokenKind, tokenize
from .fragment import Clause, ClauseList, Fragment
from .placeholders import ListGroup
from .query import Query, build
from .assignments import SetGroup
from .stringify import stringify
from .values import ValuesGroup
from .where import Joiner, WhereGroup

__all__ = [
    "Clause",
    "ClauseList",
    "Fragment",
    "Joiner",
    "ListGroup",
    "Query",
    "SetGroup",
    "Token",
    "TokenKind",
    "ValuesGroup",
    "WhereGroup",
    "build",
    "stringify",
    "tokenize",
]
