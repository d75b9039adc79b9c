"""Language support: rule tables, languages and the language registry."""
from .rules import Rule, RuleTable
from .base import Language
from .registry import (
    LanguageRegistry,
    create_registry,
    default_registry,
    get_language,
    list_languages,
    register_language,
)
from .types import Direction, NumberTest, PluralIntent

__all__ = [
    "Rule",
    "RuleTable",
    "Language",
    "LanguageRegistry",
    "create_registry",
    "default_registry",
    "get_language",
    "list_languages",
    "register_language",
    "Direction",
    "NumberTest",
    "PluralIntent",
]
