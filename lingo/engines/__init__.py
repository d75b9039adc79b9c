from lingo.engines.inflection import InflectionEngine, check_count, check_word, inflect_word
from lingo.engines.strings import camelcase, capitalize, join, underscore
from lingo.engines.translation import fill_placeholders, translate

__all__ = [
    "InflectionEngine",
    "check_count",
    "check_word",
    "inflect_word",
    "camelcase",
    "capitalize",
    "join",
    "underscore",
    "fill_placeholders",
    "translate",
]
