"""Language registry: maps language codes to Language instances.

A registry is filled once during setup and read afterwards. Lookups by an
unknown code fall back to the registry's default language; ``get`` is the
explicit variant that reports a miss as an ``Err``.
"""
from __future__ import annotations

from typing import Iterator

from lingo.core.config import settings
from lingo.core.errors import AppError, Err, Ok, Result, language_not_found
from lingo.core.logging import registry_logger

from . import english
from .base import Language

log = registry_logger()


class LanguageRegistry:
    """Registry of languages keyed by code, with a default for lookup misses."""

    __slots__ = ("_languages", "_default_code", "_fallback")

    def __init__(self, default_code: str = english.CODE):
        self._languages: dict[str, Language] = {}
        self._default_code = default_code
        self._fallback: Language | None = None

    @property
    def default_code(self) -> str:
        return self._default_code

    @property
    def default(self) -> Language:
        """The default language; never fails.

        If nothing is registered under the default code, a built-in English
        language stands in.
        """
        match self.get(self._default_code):
            case Ok(language):
                return language
            case Err(error):
                if self._fallback is None:
                    log.warning(
                        "default_language_missing",
                        code=self._default_code,
                        fallback=english.CODE,
                        error_code=error.code.name,
                    )
                    self._fallback = self._languages.get(english.CODE) or english.create_english()
                return self._fallback

    def register(self, code: str, name: str, native_name: str | None = None) -> Language:
        """Create, store and return a new empty language under ``code``."""
        return self.add(Language(code, name, native_name))

    def add(self, language: Language) -> Language:
        """Store an already-built language, replacing any under the same code."""
        if language.code in self._languages:
            log.info("language_replaced", code=language.code, name=language.name)
        else:
            log.debug("language_registered", code=language.code, name=language.name)
        self._languages[language.code] = language
        return language

    def get(self, code: str) -> Result[Language, AppError]:
        """Look up a language by code."""
        language = self._languages.get(code) if isinstance(code, str) else None
        if language is None:
            return language_not_found(code, self.codes(), origin="language_registry")
        return Ok(language)

    def resolve(self, code: str | None = None) -> Language:
        """Get the language for ``code``, or the default language."""
        if code is None:
            return self.default
        match self.get(code):
            case Ok(language):
                return language
            case Err(_):
                log.debug("language_fallback", code=code, fallback=self._default_code)
                return self.default

    def codes(self) -> list[str]:
        return list(self._languages)

    def list_languages(self) -> list[dict]:
        """List all registered languages."""
        return [language.to_dict() for language in self._languages.values()]

    def __contains__(self, code: object) -> bool:
        return code in self._languages

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages.values())

    def __len__(self) -> int:
        return len(self._languages)


def create_registry(default_code: str | None = None) -> LanguageRegistry:
    """Build a registry holding the bundled languages."""
    registry = LanguageRegistry(default_code or settings.DEFAULT_LANGUAGE)
    english.build_english(registry.register(english.CODE, english.NAME))
    return registry


# Process-wide registry, filled at import time
default_registry = create_registry()


def register_language(code: str, name: str, native_name: str | None = None) -> Language:
    """Register a new empty language in the process-wide registry."""
    return default_registry.register(code, name, native_name)


def get_language(code: str | None = None) -> Language:
    """Get a language from the process-wide registry, falling back to the default."""
    return default_registry.resolve(code)


def list_languages() -> list[dict]:
    """List languages in the process-wide registry."""
    return default_registry.list_languages()
