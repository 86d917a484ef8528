"""Tokenizer for ``%s`` / ``%p`` / ``%%`` template directives.

The template is scanned once, left to right. Rendering and parameter
flattening both consume the resulting token stream, so they always agree on
which argument each directive refers to.

- ``%%`` produces a literal ``%`` and consumes no argument.
- ``%s`` substitutes the next argument inline.
- ``%p`` emits a placeholder and binds the next argument.
- ``%`` followed by anything else (or by the end of the template) is kept as
  ordinary text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..utils.exceptions import ArgumentOverflowError, ArgumentUnderflowError


class TokenKind(str, Enum):
    TEXT = "text"
    INLINE = "inline"
    PLACEHOLDER = "placeholder"


DIRECTIVES = {"s": TokenKind.INLINE, "p": TokenKind.PLACEHOLDER}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""
    argument: int = -1
    position: int = -1


def tokenize(template: str, argument_count: int) -> tuple[Token, ...]:
    """Split ``template`` into text runs and argument-consuming directives.

    Args:
        template: Template text containing directives
        argument_count: Number of arguments supplied with the template

    Returns:
        Tuple of tokens in template order. Adjacent literal text, including
        escaped percent signs, is merged into a single TEXT token.

    Raises:
        ArgumentUnderflowError: At the first directive with no argument left
        ArgumentOverflowError: If arguments remain after the last directive
    """
    tokens: list[Token] = []
    literal: list[str] = []
    argument = 0
    start = 0
    i = template.find("%")
    while i != -1:
        directive = template[i + 1 : i + 2]
        if directive == "%":
            literal.append(template[start : i + 1])
            start = i + 2
            i = template.find("%", start)
            continue
        kind = DIRECTIVES.get(directive)
        if kind is None:
            i = template.find("%", i + 1)
            continue
        if argument >= argument_count:
            raise ArgumentUnderflowError(
                f"Directive %{directive} at offset {i} has no matching argument",
                context={"offset": i, "argument": argument, "supplied": argument_count},
            )
        literal.append(template[start:i])
        if any(literal):
            tokens.append(Token(TokenKind.TEXT, text="".join(literal)))
        literal = []
        tokens.append(Token(kind, argument=argument, position=i))
        argument += 1
        start = i + 2
        i = template.find("%", start)

    literal.append(template[start:])
    if any(literal):
        tokens.append(Token(TokenKind.TEXT, text="".join(literal)))

    if argument < argument_count:
        raise ArgumentOverflowError(
            f"Template consumes {argument} argument(s) but {argument_count} were supplied",
            context={"consumed": argument, "supplied": argument_count},
        )
    return tuple(tokens)
