"""Runtime configuration objects for sqlcompose."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_GRAMMAR = "postgres"


@dataclass
class ComposerConfig:
    """Container for the composer's configuration knobs."""

    default_grammar: str = DEFAULT_GRAMMAR
    options: dict[str, object] = field(default_factory=dict)


def _load_env_config() -> dict[str, object]:
    """Load configuration from environment variables.

    Returns:
        Dictionary of configuration values from environment
    """
    config: dict[str, object] = {}

    if "SQLCOMPOSE_GRAMMAR" in os.environ:
        config["default_grammar"] = os.environ["SQLCOMPOSE_GRAMMAR"].strip()

    if config:
        logger.debug("Loaded configuration from environment: %s", config)
    return config


def create_config(**kwargs: object) -> ComposerConfig:
    """Build a :class:`ComposerConfig` from keyword arguments and the environment.

    Supports environment variables for configuration:
    - SQLCOMPOSE_GRAMMAR: Name of the grammar used when none is given explicitly

    Args:
        **kwargs: Configuration options. Valid keys include:
            - default_grammar: Registered grammar name (e.g. "postgres", "mysql")
            - Other options are stored in config.options

    Returns:
        ComposerConfig instance with parsed configuration
    """
    # kwargs override env vars, env vars override defaults
    merged = {**_load_env_config(), **kwargs}
    default_grammar = str(merged.pop("default_grammar", DEFAULT_GRAMMAR))
    return ComposerConfig(default_grammar=default_grammar, options=merged)
