r"""
Commandline argument specifications.

Overview
- Specs
  • Argument: positional value, either required or optional (a tagged variant,
    not two subclasses), bound by declaration order.
  • Option: named, value-bearing entity with one or more prefixes (e.g., -o/--operation).
  • Flag: named, presence-only switch (no payload), e.g., -v/--verbose.
  • Kind: the three entity kinds, shared by the registry name index, the
    activation log and messages.

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes the
    fields declared in __introspectable__ via read-only properties.

Lifecycle
- Specs are immutable values. They are normally built by Configuration.add_*()
  which assigns positions and enforces the cross-entity rules (unique names,
  unique prefixes, ordering of required/optional arguments). Everything that
  happens during a parse lives in per-parse bindings, never on the spec.

Metadata (sanitized on construction)
- Shared
  • name: non-empty string (trimmed).
  • description: string, "" by default.
- Argument/Option only (value-bearing)
  • checker: Callable[[str], bool] deciding whether a value is accepted.
  • consumer: Callable[[str], None] invoked for every accepted value.
  • default: str | Iterable[str], normalized to a tuple of non-empty strings.
- Named (Option/Flag)
  • prefixes: "-x" (short) or "--name" (long); duplicates rejected, order kept.
  • required: bool.
- Cardinality
  • Option.max_values: int >= 1 (default 1).
  • Flag.max_occurrences: int >= 1 (default 1).

Quick example:
    >>> from commandline.arguments import Option
    >>> Option("operation", ("-o", "--operation"), default="sum").default
    ('sum',)
"""
import functools
import operator
import re
from collections.abc import Iterable
from enum import StrEnum

from .faults import ConfigurationError
from .utils import *


class Kind(StrEnum):
    ARGUMENT = "argument"
    OPTION = "option"
    FLAG = "flag"


# A short prefix is a dash plus one character; a long one is two dashes plus a word
# free of blanks and '=' (the latter separates inline values).
_PREFIX = re.compile(r"-[^\s-]|--[^\s=]+")


def _accept(value, /):
    return True


def _ignore(*unused):
    return None


class ArgumentType(type):
    """
    Metaclass that turns specs into immutable, introspectable values.

    Responsibilities
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    - __displayable__ (if set) narrows which properties are shown by __rich_repr__;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - option(name='operation', prefixes=('-o', '--operation'), ...)
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield a sequence of (name, object) pairs for pretty printers.
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate the fields every spec shares.

    - name: required non-empty string, trimmed.
    - description: string, trimmed; Unset becomes "".

    Raises
    - TypeError: if 'name' or 'description' is not a string.
    - ValueError: if 'name' is empty after trimming.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    metadata["name"] = name

    if not isinstance(description := metadata["description"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'description' must be a string")
    metadata["description"] = coalesce(description, "").strip()


def _sanitize_named_metadata(cls, metadata, /):
    """
    Internal: validate prefixes and the required switch of Option and Flag.

    - prefixes: at least one; each must be a short ("-x") or long ("--name")
      prefix; duplicates inside one spec are rejected. Declaration order is kept
      (the first one is the primary prefix).
    """
    prefixes = []
    if isinstance(metadata["prefixes"], str):
        metadata["prefixes"] = (metadata["prefixes"],)
    if not metadata["prefixes"]:
        raise TypeError(f"{cls.__typename__} must specify at least one prefix")

    for prefix in metadata["prefixes"]:
        if not isinstance(prefix, str):
            raise TypeError(f"{cls.__typename__} prefixes must be strings")
        elif not _PREFIX.fullmatch(prefix):
            raise ValueError(
                f"{cls.__typename__} prefix {prefix!r} must look like '-x' or '--name' (no blanks, no '=')"
            )
        elif prefix in prefixes:
            raise ValueError(f"{cls.__typename__} prefixes cannot contain duplicates")
        prefixes.append(prefix)

    metadata["prefixes"] = tuple(prefixes)
    metadata["required"] = bool(metadata["required"])


def _sanitize_parametric_metadata(cls, metadata, /):
    """
    Internal: validate checker, consumer and defaults of value-bearing specs.

    - checker/consumer: must be callable; Unset falls back to accept-all / no-op.
    - default: a string or an iterable of strings; every default must be a
      non-empty string. Normalized to a tuple.
    """
    if not callable(checker := coalesce(metadata["checker"], _accept)):
        raise TypeError(f"{cls.__typename__} 'checker' must be callable")
    metadata["checker"] = checker

    if not callable(consumer := coalesce(metadata["consumer"], _ignore)):
        raise TypeError(f"{cls.__typename__} 'consumer' must be callable")
    metadata["consumer"] = consumer

    default = coalesce(metadata["default"], ())
    if isinstance(default, str):
        default = (default,)
    elif not isinstance(default, Iterable):
        raise TypeError(f"{cls.__typename__} 'default' must be a string or an iterable of strings")

    defaults = []
    for value in default:
        if not isinstance(value, str):
            raise TypeError(f"{cls.__typename__} default values must be strings")
        elif not value:
            raise ValueError(f"{cls.__typename__} default values cannot be empty strings")
        defaults.append(value)
    metadata["default"] = tuple(defaults)


def _sanitize_limit(cls, metadata, key, /):
    if isinstance(limit := metadata[key], bool) or not isinstance(limit, int):
        raise TypeError(f"{cls.__typename__} {key!r} must be an integer")
    if limit < 1:
        raise ConfigurationError(f"{cls.__typename__} {key!r} must be at least 1, got {limit}")


class Argument(metaclass=ArgumentType):
    """
    Positional, value-bearing argument specification.

    Variants
    - required=True: must end up with at least one value (supplied or default).
    - required=False: zero values is valid.

    Positionals are consumed strictly in declaration order (see `position`); once
    every declared argument holds its single value, further positional tokens go
    to the remainder of the last one.
    """
    __introspectable__ = (
        "name",
        "position",
        "required",
        "checker",
        "consumer",
        "default",
        "description",
    )
    __displayable__ = (
        "name",
        "position",
        "required",
        "default",
        "description",
    )

    def __init__(
            self,
            name,
            /,
            position=0,
            required=True,
            *,
            checker=Unset,
            consumer=Unset,
            default=Unset,
            description=Unset,
    ):
        metadata = {
            "name": name,
            "position": position,
            "required": bool(required),
            "checker": checker,
            "consumer": consumer,
            "default": default,
            "description": description,
        }
        cls = type(self)
        _sanitize_metadata(cls, metadata)
        _sanitize_parametric_metadata(cls, metadata)
        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise TypeError(f"{cls.__typename__} 'position' must be a non-negative integer")

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def kind(self):
        return Kind.ARGUMENT

    def accepts(self, value, /):
        return bool(self._checker(value))

    def __call__(self, value, /):
        """
        Forward an accepted value to the consumer.
        """
        return self._consumer(value)


class Option(metaclass=ArgumentType):
    """
    Named, value-bearing option specification.

    Every occurrence of one of its prefixes must be followed by a value (either the
    next token or an inline '-ovalue' / '--name=value' tail). Values accumulate in
    order; more than `max_values` of them is a size violation after parsing.
    """
    __introspectable__ = (
        "name",
        "prefixes",
        "checker",
        "consumer",
        "default",
        "required",
        "max_values",
        "description",
    )
    __displayable__ = (
        "name",
        "prefixes",
        "default",
        "required",
        "max_values",
        "description",
    )

    def __init__(
            self,
            name,
            prefixes,
            /,
            *,
            checker=Unset,
            consumer=Unset,
            default=Unset,
            required=False,
            max_values=1,
            description=Unset,
    ):
        metadata = {
            "name": name,
            "prefixes": prefixes,
            "checker": checker,
            "consumer": consumer,
            "default": default,
            "required": required,
            "max_values": max_values,
            "description": description,
        }
        cls = type(self)
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        _sanitize_parametric_metadata(cls, metadata)
        _sanitize_limit(cls, metadata, "max_values")

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def kind(self):
        return Kind.OPTION

    def accepts(self, value, /):
        return bool(self._checker(value))

    def __call__(self, value, /):
        return self._consumer(value)


class Flag(metaclass=ArgumentType):
    """
    Named, presence-only switch specification.

    A flag takes no value; each occurrence counts once and fires the consumer
    (called without arguments). More than `max_occurrences` occurrences is a
    size violation after parsing.
    """
    __introspectable__ = (
        "name",
        "prefixes",
        "consumer",
        "required",
        "max_occurrences",
        "description",
    )
    __displayable__ = (
        "name",
        "prefixes",
        "required",
        "max_occurrences",
        "description",
    )

    def __init__(
            self,
            name,
            prefixes,
            /,
            *,
            consumer=Unset,
            required=False,
            max_occurrences=1,
            description=Unset,
    ):
        metadata = {
            "name": name,
            "prefixes": prefixes,
            "consumer": consumer,
            "required": required,
            "max_occurrences": max_occurrences,
            "description": description,
        }
        cls = type(self)
        _sanitize_metadata(cls, metadata)
        _sanitize_named_metadata(cls, metadata)
        _sanitize_limit(cls, metadata, "max_occurrences")
        if not callable(consumer := coalesce(metadata["consumer"], _ignore)):
            raise TypeError(f"{cls.__typename__} 'consumer' must be callable")
        metadata["consumer"] = consumer

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def kind(self):
        return Kind.FLAG

    def __call__(self):
        return self._consumer()


__all__ = (
    "Kind",
    "Argument",
    "Option",
    "Flag",
)
