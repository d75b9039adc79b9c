"""Top-level inflection entry points.

Every function takes an optional language code; unknown codes resolve to the
registry's default language (English unless configured otherwise).
"""
from __future__ import annotations

from lingo.core.errors import invalid_type, raise_result
from lingo.engines.inflection import check_word
from lingo.engines.strings import underscore
from lingo.languages.registry import LanguageRegistry, default_registry
from lingo.languages.types import Count, PluralIntent


def wants_plural(plural: PluralIntent) -> bool:
    """``True`` or a count above one asks for the plural form."""
    if plural is True:
        return True
    if isinstance(plural, bool):
        return False
    if not isinstance(plural, (int, float)):
        raise_result(invalid_type("plural", "a bool or a number", plural, origin="inflector"))
    return plural > 1


def inflect(
    word: str,
    plural: PluralIntent,
    lang: str | None = None,
    *,
    registry: LanguageRegistry | None = None,
) -> str:
    """Return ``word`` in the form ``plural`` asks for.

    A word already in the requested form is returned as is.

    Examples:
        >>> inflect("box", 3)
        'boxes'
        >>> inflect("boxes", 1)
        'box'
    """
    raise_result(check_word(word, origin="inflector"))
    language = (registry or default_registry).resolve(lang)
    if wants_plural(plural):
        return word if language.is_plural(word) else language.pluralize(word)
    return word if language.is_singular(word) else language.singularize(word)


def pluralize(word: str, lang: str | None = None) -> str:
    return default_registry.resolve(lang).pluralize(word)


def singularize(word: str, lang: str | None = None) -> str:
    return default_registry.resolve(lang).singularize(word)


def is_plural(word: str | Count, lang: str | None = None) -> bool:
    return default_registry.resolve(lang).is_plural(word)


def is_singular(word: str | Count, lang: str | None = None) -> bool:
    return default_registry.resolve(lang).is_singular(word)


def tableize(text: str, lang: str | None = None) -> str:
    """Underscore then pluralize ``text``: "UserAccount" becomes "user_accounts"."""
    return default_registry.resolve(lang).pluralize(underscore(text))
