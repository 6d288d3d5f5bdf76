"""
Parse entry points and the parse result.

What this module provides
- get_command_line(configuration, args, *, on_help, on_error) -> CommandLine | None
  Parse and return a queryable result.
- parse(configuration, args, *, on_help, on_error) -> None
  Parse for the side effects only (consumers, validators).
- CommandLine: read-only view over one parse.

Flow
1. Normalize args (Unset → sys.argv[1:], str → shlex.split, else Iterable[str]).
2. If any raw token is exactly -h or --help, call on_help(configuration, args)
   and return None without parsing.
3. Run the parser; a CommandLineException is logged and passed to
   on_error(exception, configuration, args). When the handler returns, so does
   the entry point, with None.

Quick start
    from commandline import Configuration, get_command_line, is_integer

    configuration = Configuration("Sum numbers")
    configuration.add_required_argument("numbers", checker=is_integer(), default="0")
    configuration.add_flag("verbose", "-v", "--verbose")

    if (command_line := get_command_line(configuration, "-v 1 2 3")) is not None:
        print(sum(map(int, command_line.get("numbers"))), command_line.is_flag_set("verbose"))
"""
import shlex
import sys
from collections.abc import Iterable

from .arguments import ArgumentType
from .configuration import HELP_PREFIXES
from .faults import CommandLineException, UnknownNameError
from .handlers import default_help_request_handler, rethrow_exception_handler
from .logger import logger
from .parser import Parser
from .utils import *


class CommandLine(metaclass=ArgumentType):
    """
    Result of a successful parse.

    - names: names of all registered arguments and options.
    - flags: names of all registered flags.
    - get(name): Values of an argument (value then remainder) or an option
      (values in arrival order, or its defaults); empty when nothing was bound.
    - is_flag_set(name) / count(name): flag presence and number of occurrences.
    - argument(name) / option(name) / flag(name): the underlying bindings.
    - activations: what the command line actually used, in token order.

    Querying a name that was never registered raises UnknownNameError.
    """
    __introspectable__ = (
        "names",
        "flags",
        "activations",
    )
    __displayable__ = (
        "names",
        "flags",
    )

    def __init__(self, arguments, options, flags, activations, /):
        self._arguments = {binding.name: binding for binding in arguments}
        self._options = {binding.name: binding for binding in options}
        self._flag_bindings = {binding.name: binding for binding in flags}
        self._names = frozenset((*self._arguments, *self._options))
        self._flags = frozenset(self._flag_bindings)
        self._activations = tuple(activations)

    def get(self, name, /):
        if (binding := self._arguments.get(name) or self._options.get(name)) is None:
            raise UnknownNameError(f"Unknown name <{name}>")
        return binding.values

    def is_flag_set(self, name, /):
        return self.flag(name).is_set

    def count(self, name, /):
        return self.flag(name).count

    def argument(self, name, /):
        try:
            return self._arguments[name]
        except KeyError:
            raise UnknownNameError(f"Unknown argument <{name}>") from None

    def option(self, name, /):
        try:
            return self._options[name]
        except KeyError:
            raise UnknownNameError(f"Unknown option <{name}>") from None

    def flag(self, name, /):
        try:
            return self._flag_bindings[name]
        except KeyError:
            raise UnknownNameError(f"Unknown flag <{name}>") from None

    def __contains__(self, name):
        return name in self._names or name in self._flags


def _tokens(args, /):
    if args is Unset:
        return tuple(sys.argv[1:])
    elif isinstance(args, str):
        return tuple(shlex.split(args))
    elif isinstance(args, Iterable):
        tokens = tuple(args)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("command line arguments must be a string or an iterable of strings")
        return tokens
    raise TypeError("command line arguments must be a string or an iterable of strings")


def _handler(handler, default, name, /):
    if not callable(handler := coalesce(handler, default)):
        raise TypeError(f"{name!r} must be callable")
    return handler


def _run(configuration, args, on_help, on_error, /):
    args = _tokens(args)
    on_help = _handler(on_help, default_help_request_handler, "on_help")
    on_error = _handler(on_error, rethrow_exception_handler, "on_error")

    if any(token in HELP_PREFIXES for token in args):
        logger.debug("help requested: %s", args)
        on_help(configuration, args)
        return None

    try:
        return Parser(configuration).parse(args)
    except CommandLineException as exception:
        logger.debug("parse failed (%s): %s", exception.code, exception)
        on_error(exception, configuration, args)
        return None


def get_command_line(configuration, args=Unset, *, on_help=Unset, on_error=Unset):
    """
    Parse `args` against `configuration` and return a CommandLine.

    Returns None when the help handler or the error handler returned instead of
    terminating the process.
    """
    if (parser := _run(configuration, args, on_help, on_error)) is None:
        return None
    return CommandLine(parser.arguments, parser.options, parser.flags, parser.activations)


def parse(configuration, args=Unset, *, on_help=Unset, on_error=Unset):
    """
    Parse `args` against `configuration` for the side effects only: consumers are
    fed and validators run exactly as with get_command_line.
    """
    _run(configuration, args, on_help, on_error)


__all__ = (
    "CommandLine",
    "get_command_line",
    "parse",
)
