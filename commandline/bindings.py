"""
Per-parse state: bindings and the activation log.

Scope
- One binding per registered entity is created at the start of every parse and
  discarded with its result, so a Configuration can be parsed any number of times
  without leaking state from one run into the next.
- ArgumentBinding: the single value bound to a positional plus, for the last one,
  the remainder of extra positionals.
- OptionBinding: every value collected for an option, in arrival order.
- FlagBinding: how many times a flag occurred.
- Activation: one log entry per flag occurrence, option value and positional
  value, in token order. Defaults never show up in the log.

Bindings are read-only for callers; only the parser calls the underscored
mutators.
"""
from typing import NamedTuple

from .arguments import ArgumentType, Kind
from .values import Values


class Activation(NamedTuple):
    name: str
    kind: Kind
    token: str
    index: int


class ArgumentBinding(metaclass=ArgumentType):
    __introspectable__ = (
        "spec",
    )
    __displayable__ = (
        "name",
        "value",
        "remainder",
    )

    def __init__(self, spec, /):
        self._spec = spec
        self._value = None
        self._remainder = []

    @property
    def name(self):
        return self._spec.name

    @property
    def required(self):
        return self._spec.required

    @property
    def value(self):
        """
        The single bound value, or None while nothing was bound.
        """
        return self._value

    @property
    def remainder(self):
        return Values(self._remainder)

    @property
    def values(self):
        if self._value is None:
            return Values()
        return Values.of(self._value, self._remainder)

    @property
    def bound(self):
        return self._value is not None

    def _bind(self, value, /):
        self._value = value

    def _extend(self, value, /):
        self._remainder.append(value)

    def _fill(self, defaults, /):
        self._value, *self._remainder = defaults


class OptionBinding(metaclass=ArgumentType):
    __introspectable__ = (
        "spec",
    )
    __displayable__ = (
        "name",
        "values",
    )

    def __init__(self, spec, /):
        self._spec = spec
        self._values = []

    @property
    def name(self):
        return self._spec.name

    @property
    def values(self):
        return Values(self._values)

    @property
    def value(self):
        return self._values[0] if self._values else None

    def _append(self, value, /):
        self._values.append(value)

    def _fill(self, defaults, /):
        self._values = list(defaults)


class FlagBinding(metaclass=ArgumentType):
    __introspectable__ = (
        "spec",
        "count",
    )
    __displayable__ = (
        "name",
        "count",
    )

    def __init__(self, spec, /):
        self._spec = spec
        self._count = 0

    @property
    def name(self):
        return self._spec.name

    @property
    def is_set(self):
        return self._count > 0

    def _increment(self):
        self._count += 1


__all__ = (
    "Activation",
    "ArgumentBinding",
    "OptionBinding",
    "FlagBinding",
)
