"""String translation lookup with {key} placeholder substitution.

Templates are looked up verbatim in a language's translation table, falling
back to the source string itself. Placeholders look like ``{name}``; a
placeholder whose key is missing from ``params`` renders as "undefined".
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Mapping

from lingo.core.logging import engine_logger

if TYPE_CHECKING:
    from lingo.languages.base import Language

log = engine_logger()

# Placeholder pattern: {anything but a closing brace}
PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")

MISSING_PARAM = "undefined"


def fill_placeholders(template: str, params: Mapping[str, Any]) -> str:
    """Replace every ``{key}`` in ``template`` with ``str(params[key])``."""

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key not in params:
            log.debug("translation_param_missing", key=key, template=template)
            return MISSING_PARAM
        return str(params[key])

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def translate(language: Language, text: str, params: Mapping[str, Any] | None = None) -> str:
    """Translate ``text`` with ``language``'s table, then fill placeholders.

    Placeholders are only filled when ``params`` is given; an empty mapping
    still counts, and turns every placeholder into "undefined".
    """
    template = language.translations.get(text) or text
    if params is not None:
        template = fill_placeholders(template, params)
    return template
