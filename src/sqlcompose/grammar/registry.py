"""Grammar registry and the process-wide default registry."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ComposerConfig, create_config
from ..utils.exceptions import UnknownGrammarError
from .base import Grammar, GrammarFactory
from .mysql import MysqlGrammar
from .named import NamedGrammar
from .postgres import PostgresGrammar
from .sqlite import SqliteGrammar

logger = logging.getLogger(__name__)

BUILTIN_GRAMMARS: tuple[tuple[str, GrammarFactory], ...] = (
    ("postgres", PostgresGrammar),
    ("mysql", MysqlGrammar),
    ("sqlite3", SqliteGrammar),
    ("named", NamedGrammar),
)


class GrammarRegistry:
    """Name-to-factory mapping with a selected default grammar.

    Registering an existing name replaces the previous factory. Mutations are
    not synchronized, so configure the registry before rendering concurrently.
    """

    def __init__(self, default: Optional[str] = None):
        self._factories: dict[str, GrammarFactory] = {}
        self._default = default

    def register(self, name: str, factory: GrammarFactory) -> None:
        """Register ``factory`` under ``name``, overwriting any earlier entry."""
        if name in self._factories:
            logger.debug("Overwriting grammar %r", name)
        else:
            logger.debug("Registering grammar %r", name)
        self._factories[name] = factory

    def set_default(self, name: str) -> None:
        """Select the grammar used when no explicit grammar is supplied.

        Raises:
            UnknownGrammarError: If ``name`` is not registered
        """
        self.factory(name)
        logger.debug("Default grammar set to %r", name)
        self._default = name

    @property
    def default_name(self) -> Optional[str]:
        return self._default

    def names(self) -> list[str]:
        return list(self._factories)

    def create(self, name: Optional[str] = None) -> Grammar:
        """Return a fresh grammar instance for ``name`` or for the default."""
        if name is None:
            if self._default is None:
                raise UnknownGrammarError("No default grammar has been selected")
            name = self._default
        return self.factory(name)()

    def factory(self, name: str) -> GrammarFactory:
        """Return the factory registered as ``name``.

        Raises:
            UnknownGrammarError: If ``name`` is not registered
        """
        try:
            return self._factories[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._factories)) or "none"
            raise UnknownGrammarError(
                f"Grammar '{name}' not found",
                context={"name": name, "available": available},
            ) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def build_registry(config: Optional[ComposerConfig] = None) -> GrammarRegistry:
    """Create a registry holding the built-in grammars.

    Args:
        config: Configuration naming the default grammar. Loaded from the
            environment when omitted.

    Returns:
        GrammarRegistry with ``config.default_grammar`` selected
    """
    config = config or create_config()
    registry = GrammarRegistry()
    for name, factory in BUILTIN_GRAMMARS:
        registry.register(name, factory)
    registry.set_default(config.default_grammar)
    return registry


DEFAULT_REGISTRY = build_registry()


def register_grammar(name: str, factory: GrammarFactory) -> None:
    """Register a grammar factory on the default registry."""
    DEFAULT_REGISTRY.register(name, factory)


def set_default_grammar(name: str) -> None:
    """Select the default grammar of the default registry."""
    DEFAULT_REGISTRY.set_default(name)


def get_grammar(name: str) -> Grammar:
    """Return a fresh instance of the grammar registered as ``name``."""
    return DEFAULT_REGISTRY.create(name)


def default_grammar() -> Grammar:
    """Return a fresh instance of the current default grammar."""
    return DEFAULT_REGISTRY.create()


def available_grammars() -> list[str]:
    return DEFAULT_REGISTRY.names()
