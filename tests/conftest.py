"""Shared fixtures for the lingo test suite."""
import logging

import pytest
import structlog

import lingo.inflector
import lingo.languages.registry
from lingo.languages import Language, LanguageRegistry, create_registry
from lingo.languages.english import create_english


@pytest.fixture
def english() -> Language:
    """A standalone English language, independent of any registry."""
    return create_english()


@pytest.fixture
def registry() -> LanguageRegistry:
    """A fresh registry holding the bundled languages, defaulting to English."""
    return create_registry("en")


@pytest.fixture
def default_registry(monkeypatch, registry) -> LanguageRegistry:
    """Swap the process-wide registry for a fresh one for the test's duration."""
    monkeypatch.setattr(lingo.languages.registry, "default_registry", registry)
    monkeypatch.setattr(lingo.inflector, "default_registry", registry)
    return registry


@pytest.fixture
def restore_logging():
    """Undo any logging configuration a test performs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
