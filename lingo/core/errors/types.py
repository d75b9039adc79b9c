"""Result types and the error taxonomy of lingo.

Inflection itself never fails: a word no rule matches comes back unchanged.
Errors are reserved for caller mistakes (a non-string word, an empty word,
a pattern that does not compile) and for explicit language lookups.

Ok and Err support structural pattern matching::

    match registry.get("fr"):
        case Ok(language): ...
        case Err(error): ...
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")
F = TypeVar("F", bound="AppError")


class ErrorCode(Enum):
    """Numbered error codes.

    E2xxx: bad input from the caller
    E4xxx: failed lookups
    E9xxx: anything unexpected
    """
    E2000_INVALID_INPUT = 2000
    E2001_EMPTY_WORD = 2001
    E2002_INVALID_PATTERN = 2002
    E2004_INVALID_TYPE = 2004

    E4010_LANGUAGE_NOT_FOUND = 4010

    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 4000 <= code < 5000:
            return "lookup"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where an error was raised, with a short id for matching log lines."""
    origin: str = ""
    correlation_id: str = field(default_factory=lambda: uuid4().hex[:8])


@dataclass(frozen=True, slots=True)
class AppError:
    """An error value: code, message, and whatever metadata helps debugging."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_metadata(self, **kwargs) -> AppError:
        """Copy of this error with ``kwargs`` merged into its metadata."""
        return AppError(
            code=self.code,
            message=self.message,
            context=self.context,
            metadata={**self.metadata, **kwargs},
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "category": self.code.category,
                "message": self.message,
                "origin": self.context.origin,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[AppError], F]) -> Result[T, F]:
        return self  # type: ignore

    def match(self, ok: Callable[[T], U], err: Callable[[AppError], U]) -> U:
        return ok(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        return Err(f(self.error))

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return err(self.error)


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Wrap a caught exception, keeping it as the error's cause."""
    return Err(AppError(
        code=code,
        message=message or str(exc),
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=exc,
    ))
