"""String-shape helpers. Independent of any language's rules."""
import re

__all__ = ["capitalize", "camelcase", "underscore", "join"]

_WHITESPACE_RUN = re.compile(r"\s+")
_CASE_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def capitalize(text: str, all_words: bool = False) -> str:
    """
    Upper-case the first character of ``text``, or of every word.

    Only the first character changes; the rest is left as is. Words are
    separated by single spaces.

    Example:
        >>> capitalize("hello there")
        'Hello there'
        >>> capitalize("hello there", True)
        'Hello There'
    """
    if all_words:
        return " ".join(capitalize(word) for word in text.split(" "))
    return text[:1].upper() + text[1:]


def camelcase(text: str, uppercase_first: bool = False, split_on: str = " ") -> str:
    """
    Camel-case ``text``.

    Whitespace runs collapse to a single space first, then the text is split
    on ``split_on``. Every word but the first is capitalized; the first one
    too when ``uppercase_first`` is set.

    Example:
        >>> camelcase("foo bar")
        'fooBar'
        >>> camelcase("foo bar baz", True)
        'FooBarBaz'
        >>> camelcase("foo-bar", split_on="-")
        'fooBar'
    """
    words = _WHITESPACE_RUN.sub(" ", text).split(split_on or " ")
    return "".join(
        capitalize(word) if i or uppercase_first else word
        for i, word in enumerate(words)
    )


def underscore(text: str) -> str:
    """
    Underscore a camel-cased ``text``.

    Example:
        >>> underscore("UserAccount")
        'user_account'
    """
    return _CASE_BOUNDARY.sub(r"\1_\2", text).lower()


def join(items: list[str], last: str = "and") -> str:
    """
    Join ``items`` as an English list: "a, b and c".

    Note: the final item is popped off ``items``, so the caller's list is
    consumed. Pass a copy to keep it.

    Example:
        >>> join(["fruits", "veggies", "sugar"])
        'fruits, veggies and sugar'
        >>> join(["fruits", "veggies", "sugar"], "or")
        'fruits, veggies or sugar'
    """
    if not items:
        return ""
    final = items.pop()
    if items:
        return f"{', '.join(items)} {last or 'and'} {final}"
    return final
