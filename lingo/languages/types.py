"""Shared type definitions for language modules."""
from typing import Callable, Literal, Union

# Inflection direction; also names the rule list and irregular map consulted
Direction = Literal["plural", "singular"]

DIRECTIONS: tuple[Direction, ...] = ("plural", "singular")

Count = Union[int, float]

# Decides whether a numeric count calls for the plural form
NumberTest = Callable[[Count], bool]

# What the dispatch function accepts as "make it plural?"
PluralIntent = Union[bool, int, float]


def default_number_test(count: Count) -> bool:
    """Plural unless the count is exactly one."""
    return count != 1
