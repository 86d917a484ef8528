"""Custom exception hierarchy."""

from typing import Optional


class SqlComposeError(Exception):
    """Base exception for sqlcompose failures."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize exception with message, optional suggestion, and context.

        Args:
            message: Error message
            suggestion: Optional suggestion for fixing the error
            context: Optional dictionary with additional context
        """
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with suggestion if available."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg += f"\n\nContext: {context_str}"
        return msg


class ArgumentCountError(SqlComposeError):
    """Raised when template directives and supplied arguments disagree."""


class ArgumentUnderflowError(ArgumentCountError):
    """Raised when a %s or %p directive has no argument left to consume."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize argument underflow error."""
        if suggestion is None:
            suggestion = (
                "Every %s and %p directive consumes one argument. "
                "Pass one argument per directive or escape a literal percent sign as %%."
            )
        super().__init__(message, suggestion, context)


class ArgumentOverflowError(ArgumentCountError):
    """Raised when arguments remain after the last directive."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize argument overflow error."""
        if suggestion is None:
            suggestion = "Remove the extra arguments or add a %p / %s directive for each of them."
        super().__init__(message, suggestion, context)


class UnknownGrammarError(SqlComposeError):
    """Raised when a grammar name is not registered."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize unknown grammar error."""
        if suggestion is None:
            suggestion = "Register the grammar with register_grammar(name, factory) before selecting it."
        super().__init__(message, suggestion, context)


class InvalidPlaceholderCountError(SqlComposeError):
    """Raised when a negative number of placeholders is requested."""


class ParameterMismatchError(SqlComposeError):
    """Raised when emitted placeholders and flattened parameters cannot be paired."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize parameter mismatch error.

        The usual cause is a %p directive given a fragment that carries several
        parameters: it emits one placeholder but contributes all of them.
        """
        if suggestion is None:
            suggestion = "Substitute fragments with %s so each of their parameters gets a placeholder."
        super().__init__(message, suggestion, context)
