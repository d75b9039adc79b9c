"""Rule-based Inflection Engine

Turns a word into its plural or singular form using a language's RuleTable.
The precedence is fixed:

1. uncountable words are returned unchanged
2. an exact irregular mapping wins next
3. otherwise the first pattern rule that matches, in stored order
4. a word no rule matches is returned unchanged

Plurality of a word is decided by round trip: a word is plural when
singularizing then pluralizing it gives the word back. Uncountable words
are fixed points of both directions, so they always test as plural.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lingo.core.errors import (
    AppError,
    Ok,
    Result,
    empty_word,
    invalid_type,
    raise_result,
)
from lingo.core.logging import engine_logger

if TYPE_CHECKING:
    from lingo.languages.rules import RuleTable
    from lingo.languages.types import Count, Direction

log = engine_logger()


def check_word(word: object, origin: str = "inflection_engine") -> Result[str, AppError]:
    """Validate that ``word`` is a non-empty string."""
    if not isinstance(word, str):
        return invalid_type("word", "a string", word, origin=origin)
    if not word:
        return empty_word("word", origin=origin)
    return Ok(word)


def check_count(count: object, origin: str = "inflection_engine") -> Result[Count, AppError]:
    """Validate that ``count`` is a real number (booleans are rejected)."""
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return invalid_type("count", "an int or float", count, origin=origin)
    return Ok(count)


def inflect_word(word: str, direction: Direction, table: RuleTable) -> str:
    """Apply ``table`` to ``word`` in the given direction."""
    debug = log.isEnabledFor(logging.DEBUG)
    if table.is_uncountable(word):
        if debug:
            log.debug("word_inflected", word=word, direction=direction, tier="uncountable")
        return word

    irregulars = table.irregular[direction]
    if word in irregulars:
        if debug:
            log.debug("word_inflected", word=word, direction=direction, tier="irregular")
        return irregulars[word]

    for rule in table.rules_for(direction):
        if rule.matches(word):
            result = rule.apply(word)
            if debug:
                log.debug(
                    "word_inflected",
                    word=word,
                    direction=direction,
                    tier="rule",
                    pattern=rule.pattern.pattern,
                    result=result,
                )
            return result

    if debug:
        log.debug("word_inflected", word=word, direction=direction, tier="identity")
    return word


class InflectionEngine:
    """Inflection operations bound to one RuleTable.

    Plain methods raise ``AppErrorException`` when handed something other
    than a non-empty string (or a number, for plurality tests);
    ``inflect_result`` reports the same problems as an ``Err`` instead.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: RuleTable):
        self._rules = rules

    @property
    def rules(self) -> RuleTable:
        return self._rules

    def inflect(self, word: str, direction: Direction) -> str:
        result = self.inflect_result(word, direction)
        raise_result(result)
        return result.unwrap()

    def inflect_result(self, word: str, direction: Direction) -> Result[str, AppError]:
        """Inflect with Result type for typed error handling."""
        return check_word(word).map(lambda w: inflect_word(w, direction, self._rules))

    def pluralize(self, word: str) -> str:
        return self.inflect(word, "plural")

    def singularize(self, word: str) -> str:
        return self.inflect(word, "singular")

    def is_plural(self, word: str | Count) -> bool:
        """Check if ``word`` is plural, or if a numeric count calls for the plural."""
        if isinstance(word, str):
            return word == self.pluralize(self.singularize(word))
        result = check_count(word)
        raise_result(result)
        return self._rules.number_is_plural(result.unwrap())

    def is_singular(self, word: str | Count) -> bool:
        return not self.is_plural(word)

    def is_uncountable(self, word: str) -> bool:
        raise_result(check_word(word))
        return self._rules.is_uncountable(word)
