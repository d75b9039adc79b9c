"""lingo - word inflection, string shaping and translation lookup.

Usage:
    >>> import lingo
    >>> lingo.pluralize("box")
    'boxes'
    >>> lingo.inflect("mice", 1)
    'mouse'
"""
__version__ = "0.1.0"

from lingo.languages import (
    Language,
    LanguageRegistry,
    Rule,
    RuleTable,
    create_registry,
    default_registry,
    get_language,
    list_languages,
    register_language,
)
from lingo.engines import (
    InflectionEngine,
    camelcase,
    capitalize,
    join,
    translate,
    underscore,
)
from lingo.inflector import (
    inflect,
    is_plural,
    is_singular,
    pluralize,
    singularize,
    tableize,
)

__all__ = [
    "__version__",
    "inflect",
    "pluralize",
    "singularize",
    "is_plural",
    "is_singular",
    "tableize",
    "capitalize",
    "camelcase",
    "underscore",
    "join",
    "translate",
    "register_language",
    "get_language",
    "list_languages",
    "create_registry",
    "default_registry",
    "Language",
    "LanguageRegistry",
    "Rule",
    "RuleTable",
    "InflectionEngine",
]
