"""Language: one rule table plus a translation table, under a short code."""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from lingo.engines.inflection import InflectionEngine
from lingo.engines.translation import translate

from .rules import Rule, RuleTable
from .types import Count, Direction, NumberTest


class Language:
    """A named bundle of inflection rules and translations.

    Rules are added with the ``add_*`` builder methods, each of which
    returns the language itself so setup reads as one chain::

        en = Language("en", "English")
        en.add_plural_rule(r"$", "s").add_plural_rule(r"(x|ch)$", r"\\1es")

    The last pattern rule added for a direction is the first one tried.
    Rules are meant to be added during setup only.
    """

    __slots__ = ("_code", "_name", "_native_name", "_rules", "_translations", "_engine")

    def __init__(self, code: str, name: str, native_name: str | None = None):
        self._code = code
        self._name = name
        self._native_name = native_name
        self._rules = RuleTable()
        self._translations: dict[str, str] = {}
        self._engine = InflectionEngine(self._rules)

    @property
    def code(self) -> str:
        """Short language code (e.g., 'en')."""
        return self._code

    @property
    def name(self) -> str:
        """Human-readable language name."""
        return self._name

    @property
    def native_name(self) -> str:
        """Language name in the language itself."""
        return self._native_name or self._name

    @property
    def rules(self) -> RuleTable:
        return self._rules

    @property
    def translations(self) -> dict[str, str]:
        return self._translations

    @property
    def engine(self) -> InflectionEngine:
        return self._engine

    # -- builder -------------------------------------------------------------

    def add_uncountable(self, *words: str) -> Language:
        """Mark ``words`` as having one form for both singular and plural."""
        for word in words:
            self._rules.add_uncountable(word)
        return self

    def add_irregular(self, singular: str, plural: str) -> Language:
        """Map ``singular`` and ``plural`` onto each other, bypassing pattern rules."""
        self._rules.add_irregular(singular, plural)
        return self

    def add_plural_rule(self, pattern: str | re.Pattern, substitution: str) -> Language:
        self._rules.add_rule("plural", Rule.compile(pattern, substitution))
        return self

    def add_singular_rule(self, pattern: str | re.Pattern, substitution: str) -> Language:
        self._rules.add_rule("singular", Rule.compile(pattern, substitution))
        return self

    def set_plural_number_test(self, predicate: NumberTest) -> Language:
        """Set how a numeric count decides between singular and plural."""
        self._rules.plural_number_test = predicate
        return self

    def add_translation(self, source: str, target: str) -> Language:
        self._translations[source] = target
        return self

    def add_translations(self, mapping: Mapping[str, str] | Iterable[tuple[str, str]]) -> Language:
        self._translations.update(mapping)
        return self

    # -- inflection ------------------------------------------------------------

    def inflect(self, word: str, direction: Direction) -> str:
        return self._engine.inflect(word, direction)

    def pluralize(self, word: str) -> str:
        return self._engine.pluralize(word)

    def singularize(self, word: str) -> str:
        return self._engine.singularize(word)

    def is_plural(self, word: str | Count) -> bool:
        return self._engine.is_plural(word)

    def is_singular(self, word: str | Count) -> bool:
        return self._engine.is_singular(word)

    def is_uncountable(self, word: str) -> bool:
        return self._engine.is_uncountable(word)

    # -- translation -----------------------------------------------------------

    def translate(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        return translate(self, text, params)

    def to_dict(self) -> dict:
        """Summary of this language for listings."""
        return {"code": self.code, "name": self.name, "nativeName": self.native_name}

    def __repr__(self) -> str:
        return f"Language(code={self._code!r}, name={self._name!r})"
