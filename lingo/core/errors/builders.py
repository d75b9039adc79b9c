"""Error builders.

One constructor per failure lingo reports, each returning an ``Err``.
"""
import re

from .types import AppError, ErrorCode, ErrorContext, Err, from_exception


def _invalid_input(
    message: str,
    *,
    code: ErrorCode,
    field: str,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={"field": field, **metadata},
    ))


def empty_word(field: str = "word", origin: str = "") -> Err[AppError]:
    return _invalid_input(
        f"'{field}' must not be empty",
        code=ErrorCode.E2001_EMPTY_WORD,
        field=field,
        origin=origin,
    )


def invalid_type(
    field: str,
    expected: str,
    actual: object,
    origin: str = "",
) -> Err[AppError]:
    return _invalid_input(
        f"'{field}' must be {expected}, got {type(actual).__name__}",
        code=ErrorCode.E2004_INVALID_TYPE,
        field=field,
        origin=origin,
        value=repr(actual),
        expected=expected,
    )


def invalid_pattern(pattern: str, exc: re.error, origin: str = "") -> Err[AppError]:
    """A rule pattern that ``re`` refused to compile."""
    return from_exception(
        exc,
        code=ErrorCode.E2002_INVALID_PATTERN,
        message=f"Invalid rule pattern {pattern!r}: {exc}",
        origin=origin,
        field="pattern",
        value=pattern,
    )


def language_not_found(code: str, available: list[str], origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E4010_LANGUAGE_NOT_FOUND,
        message=f"Language not found: {code}",
        context=ErrorContext(origin=origin),
        metadata={"code": code, "available": available},
    ))
