"""Pytest configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sqlcompose.grammar.registry import DEFAULT_REGISTRY  # noqa: E402


@pytest.fixture(autouse=True)
def restore_default_grammar() -> Generator[None, None, None]:
    """Put the default registry back to postgres after each test."""
    DEFAULT_REGISTRY.set_default("postgres")
    yield
    DEFAULT_REGISTRY.set_default("postgres")
