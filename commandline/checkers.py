"""
Ready-made checkers and consumer adapters.

Checkers are predicates over the raw string value, used as the `checker` of
arguments and options; a falsy result makes the parse fail with CheckError.

    >>> is_integer()("-12"), is_natural_number()("0"), is_positive_integer()("0")
    (True, True, False)
    >>> choice("sum", "prod")("sub")
    False
"""
import re
from collections.abc import Iterable

from .utils import *

_NATURAL_NUMBER = re.compile(r"\d+", re.ASCII)
_POSITIVE_INTEGER = re.compile(r"[1-9]\d*", re.ASCII)
_INTEGER = re.compile(r"-?\d+", re.ASCII)


def _matcher(pattern, name, /):
    return rename(lambda value: pattern.fullmatch(value) is not None, name)


def is_natural_number():
    """
    Accept "0", "1", "2", ... (digits only).
    """
    return _matcher(_NATURAL_NUMBER, "is_natural_number")


def is_positive_integer():
    return _matcher(_POSITIVE_INTEGER, "is_positive_integer")


def is_integer():
    """
    Accept an optional leading minus followed by digits. Negative values are
    option-shaped once tokenized, so on a command line only the positive
    forms get this far; the predicate is still usable on its own.
    """
    return _matcher(_INTEGER, "is_integer")


def choice(*values):
    """
    Accept exactly one of `values`; a single non-string iterable is taken as the
    collection of accepted values.
    """
    if len(values) == 1 and isinstance(values[0], Iterable) and not isinstance(values[0], str):
        values = tuple(values[0])
    for value in values:
        if not isinstance(value, str):
            raise TypeError("choice() values must be strings")
    accepted = frozenset(values)
    return rename(lambda value: value in accepted, "choice")


def from_int_consumer(consumer, /):
    """
    Adapt a consumer of ints into a consumer of strings. Pair it with an integer
    checker: the conversion itself is not guarded.
    """
    if not callable(consumer):
        raise TypeError("from_int_consumer() argument must be callable")
    return rename(lambda value: consumer(int(value)), "int_consumer")


__all__ = (
    "is_natural_number",
    "is_positive_integer",
    "is_integer",
    "choice",
    "from_int_consumer",
)
