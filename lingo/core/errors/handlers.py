"""Exception bridge for the Result-based error system.

The public functions (``pluralize``, ``inflect``...) and the CLI work with
exceptions rather than Results; these helpers make the switch.
"""
from __future__ import annotations

from typing import NoReturn

from .types import AppError, ErrorCode, Result


class AppErrorException(Exception):
    """Raised with an AppError attached as ``.error``."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


def raise_error(error: AppError) -> NoReturn:
    raise AppErrorException(error)


def raise_result(result: Result) -> None:
    """Raise if ``result`` is an Err; do nothing for Ok."""
    if result.is_err():
        raise_error(result.unwrap_err())
