"""English language setup."""
from lingo.languages.base import Language

from .rules import IRREGULARS, PLURAL_RULES, SINGULAR_RULES, UNCOUNTABLES

CODE = "en"
NAME = "English"


def build_english(language: Language) -> Language:
    """Load the English rule set into ``language``.

    English keeps the default number test: every count except exactly one
    takes the plural.
    """
    for pattern, substitution in PLURAL_RULES:
        language.add_plural_rule(pattern, substitution)
    for pattern, substitution in SINGULAR_RULES:
        language.add_singular_rule(pattern, substitution)
    for singular, plural in IRREGULARS:
        language.add_irregular(singular, plural)
    return language.add_uncountable(*UNCOUNTABLES)


def create_english() -> Language:
    """A standalone English language, not tied to any registry."""
    return build_english(Language(CODE, NAME))
