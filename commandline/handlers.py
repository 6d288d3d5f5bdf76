"""
Help-request and error handler strategies.

The entry points never print or exit on their own; they delegate to two hooks:
- on_help(configuration, args): called when -h/--help is among the raw tokens.
- on_error(exception, configuration, args): called with the CommandLineException
  that stopped the parse.

Ready-made strategies
- rethrow_exception_handler: re-raise the fault (default on_error; library use).
- make_help_request_handler(exit_code=0, file=Unset): print the help text and exit.
- make_exception_handler(exit_code=1, file=Unset): print the rendered fault and the
  help text, then exit.
- default_help_request_handler: make_help_request_handler() (default on_help).

Terminating handlers write through a rich Console bound to `file` (standard
output when Unset), flush it whatever happens, and never close it.
"""
import sys

from rich.console import Console

from .utils import *


def rethrow_exception_handler(exception, configuration, args, /):
    raise exception


def _console(file, /):
    # None lets rich resolve sys.stdout at write time
    return Console(file=coalesce(file, None), highlight=False, emoji=False, soft_wrap=True)


def _exit_code(exit_code, /):
    if isinstance(exit_code, bool) or not isinstance(exit_code, int):
        raise TypeError("handler 'exit_code' must be an integer")
    return exit_code


def make_help_request_handler(exit_code=0, file=Unset):
    """
    Build an on_help handler printing the configuration's help text and exiting
    with `exit_code`.
    """
    exit_code = _exit_code(exit_code)

    @rename("help_request_handler")
    def handler(configuration, args, /):
        console = _console(file)
        try:
            console.print(configuration.help().rstrip("\n"), markup=False)
        finally:
            console.file.flush()
        sys.exit(exit_code)

    return handler


def make_exception_handler(exit_code=1, file=Unset):
    """
    Build an on_error handler printing the fault (rendered with rich) followed by
    the help text, then exiting with `exit_code`.
    """
    exit_code = _exit_code(exit_code)

    @rename("exception_handler")
    def handler(exception, configuration, args, /):
        console = _console(file)
        try:
            console.print(exception)
            console.print()
            console.print(configuration.help().rstrip("\n"), markup=False)
        finally:
            console.file.flush()
        sys.exit(exit_code)

    return handler


default_help_request_handler = make_help_request_handler()


__all__ = (
    "rethrow_exception_handler",
    "make_help_request_handler",
    "make_exception_handler",
    "default_help_request_handler",
)
