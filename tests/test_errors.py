import re

import pytest

from lingo.core.errors import (
    AppError,
    AppErrorException,
    Err,
    ErrorCode,
    Ok,
    empty_word,
    from_exception,
    invalid_pattern,
    invalid_type,
    language_not_found,
    raise_error,
    raise_result,
)


def test_ok_and_err_basics():
    assert Ok(3).map(lambda v: v + 1) == Ok(4)
    assert Ok(3).unwrap_or(0) == 3
    failed = empty_word()
    assert failed.map(lambda v: v + 1) is failed
    assert failed.unwrap_or(0) == 0
    with pytest.raises(ValueError):
        failed.unwrap()


def test_map_err_and_match():
    result = language_not_found("zz", ["en"]).map_err(lambda e: e.with_metadata(hint="register it"))
    assert result.unwrap_err().metadata == {"code": "zz", "available": ["en"], "hint": "register it"}
    assert result.match(ok=lambda v: "ok", err=lambda e: e.code.category) == "lookup"
    assert Ok(1).match(ok=lambda v: v * 10, err=lambda e: 0) == 10


def test_error_codes_have_categories():
    assert ErrorCode.E2001_EMPTY_WORD.category == "validation"
    assert ErrorCode.E2004_INVALID_TYPE.category == "validation"
    assert ErrorCode.E4010_LANGUAGE_NOT_FOUND.category == "lookup"
    assert ErrorCode.E9001_UNEXPECTED_ERROR.category == "internal"


def test_empty_word_message():
    error = empty_word("word", origin="test").unwrap_err()
    assert error.code is ErrorCode.E2001_EMPTY_WORD
    assert error.message == "'word' must not be empty"
    assert error.context.origin == "test"


def test_invalid_type_metadata():
    error = invalid_type("word", "a string", 42).unwrap_err()
    assert error.message == "'word' must be a string, got int"
    assert error.metadata == {"field": "word", "value": "42", "expected": "a string"}


def test_invalid_pattern_keeps_cause():
    try:
        re.compile("(oops")
    except re.error as e:
        error = invalid_pattern("(oops", e).unwrap_err()
    assert error.code is ErrorCode.E2002_INVALID_PATTERN
    assert isinstance(error.cause, re.error)
    assert error.message.startswith("Invalid rule pattern '(oops'")
    assert error.metadata == {"field": "pattern", "value": "(oops"}


def test_app_error_serializes():
    payload = AppError(code=ErrorCode.E2000_INVALID_INPUT, message="bad").to_dict()["error"]
    assert payload["code"] == "E2000_INVALID_INPUT"
    assert payload["code_num"] == 2000
    assert payload["category"] == "validation"
    assert payload["message"] == "bad"


def test_from_exception_defaults():
    exc = RuntimeError("boom")
    error = from_exception(exc, origin="test").unwrap_err()
    assert error.cause is exc
    assert error.message == "boom"
    assert error.code is ErrorCode.E9001_UNEXPECTED_ERROR


def test_raise_helpers():
    error = AppError(code=ErrorCode.E2000_INVALID_INPUT, message="bad")
    with pytest.raises(AppErrorException) as exc_info:
        raise_error(error)
    assert exc_info.value.error is error
    assert str(exc_info.value) == "[E2000_INVALID_INPUT] bad"

    raise_result(Ok(1))
    with pytest.raises(AppErrorException):
        raise_result(Err(error))
