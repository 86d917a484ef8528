"""Convert fragments into SQLAlchemy ``TextClause`` objects."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from ..grammar.named import NamedGrammar
from ..sql.fragment import Fragment
from ..utils.exceptions import ParameterMismatchError

logger = logging.getLogger(__name__)


def to_text(fragment: Fragment, prefix: str = "p") -> TextClause:
    """Render ``fragment`` with named binds and attach its parameters.

    Identifiers are quoted by the grammar the fragment would render with on
    its own (pinned or registry default). Placeholders come out as
    ``:p1, :p2, ...`` and the n-th flattened parameter is bound to ``p<n>``.
    Nothing is executed.

    Args:
        fragment: Fragment to convert
        prefix: Prefix of the generated bind names

    Returns:
        SQLAlchemy TextClause with bound parameters

    Raises:
        ParameterMismatchError: If the number of emitted placeholders differs
            from the number of flattened parameters
    """
    grammar = NamedGrammar(prefix, inner=fragment.resolve_grammar())
    sql = fragment.render(grammar)
    params = fragment.parameters()
    if grammar.count != len(params):
        raise ParameterMismatchError(
            f"Rendered {grammar.count} placeholder(s) for {len(params)} parameter(s)",
            context={"placeholders": grammar.count, "parameters": len(params)},
        )
    logger.debug("Converted fragment to TextClause: %s", sql)
    clause = text(sql)
    if params:
        clause = clause.bindparams(
            **{grammar.bind_name(n): value for n, value in enumerate(params, start=1)}
        )
    return clause
