"""Errors as values.

Functions that can fail on caller input return ``Result`` (``Ok`` or
``Err``); the public convenience API turns an ``Err`` into
``AppErrorException`` through ``raise_result``::

    from lingo.core.errors import Ok, Result, AppError, empty_word

    def check(word: str) -> Result[str, AppError]:
        return Ok(word) if word else empty_word()
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
)

from .builders import (
    empty_word,
    invalid_type,
    invalid_pattern,
    language_not_found,
)

from .handlers import (
    AppErrorException,
    raise_error,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "empty_word",
    "invalid_type",
    "invalid_pattern",
    "language_not_found",
    "AppErrorException",
    "raise_error",
    "raise_result",
]
