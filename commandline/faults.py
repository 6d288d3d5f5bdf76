"""
Commandline faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure the library
  reports. Codes are grouped by domain to keep copy consistent and make
  logs/searches predictable.
- CommandLineException: base type of every parse-time failure. It carries a
  message plus immutable options and knows how to render itself with rich.
- Configuration errors (ConfigurationError, DuplicateNameError, DuplicatePrefixError)
  are ValueErrors raised straight at the builder call: they are programmer
  mistakes and never travel through the pluggable error handler.
- UnknownNameError: a LookupError raised when a parse result is queried for a
  name that was never registered.

Rendering
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Styles can be overridden by the host through a __styles__ mapping in __main__,
  the program name through __prog__.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import prog


class FaultCode(IntEnum):
    """
    canonical fault codes used across the library (stable identifiers).

    grouping (by high-level domain)
    - configuration (101xx)
      • DUPLICATE_NAME, DUPLICATE_PREFIX, INVALID_CONFIGURATION
    - prefixed tokens (111xx)
      • UNKNOWN_PREFIX, NO_VALUE, CHECK_FAILED
    - positionals (112xx)
      • UNHANDLED_ARGUMENT
    - post-pass (113xx / 114xx)
      • SIZE_VIOLATION, VALIDATION
    - lookups (121xx)
      • UNKNOWN_NAME
    """
    # --- configuration errors (101xx) ---
    DUPLICATE_NAME          = 10101
    DUPLICATE_PREFIX        = 10102
    INVALID_CONFIGURATION   = 10103

    # --- token errors (111xx / 112xx) ---
    UNKNOWN_PREFIX          = 11111
    NO_VALUE                = 11112
    CHECK_FAILED            = 11113
    UNHANDLED_ARGUMENT      = 11121

    # --- post-pass errors (113xx / 114xx) ---
    SIZE_VIOLATION          = 11131
    VALIDATION              = 11141

    # --- lookup errors (121xx) ---
    UNKNOWN_NAME            = 12101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandLineException(Exception):
    """
    Base class of every fault raised while parsing a command line.

    Each concrete subclass declares its default code, title and hint; any of them,
    plus free-form context (prefix, name, value, token, index, ...), can be passed
    as keyword options and are kept in the read-only `options` mapping.
    """
    __code__ = FaultCode.VALIDATION
    __title__ = "invalid command line"
    __hint__ = "run with --help to see the expected usage"

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__}() message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({
            "code": type(self).__code__,
            "title": type(self).__title__,
            "hint": type(self).__hint__,
        } | options)

    @property
    def code(self):
        return self.options["code"]

    @property
    def title(self):
        return self.options["title"]

    @property
    def hint(self):
        return self.options["hint"]

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        header = Text.assemble(
            "[ ",
            (str(prog()), styles["prog-name"]),
            " — ",
            (self.code.normalize(), styles["code"]),
            " | ",
            (self.title.title(), styles["error-title"]),
            " ]"
        )
        message = Text(self.message, styles["error-message"])
        if not self.hint:
            return Group(header, message)
        hint = Text.assemble((" → ", styles["hint-arrow"]), (self.hint, styles["hint"]))
        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownPrefixError(CommandLineException):
    __code__ = FaultCode.UNKNOWN_PREFIX
    __title__ = "unknown option or flag"
    __hint__ = "check the spelling; run with --help to see all options and flags"


class NoValueError(CommandLineException):
    __code__ = FaultCode.NO_VALUE
    __title__ = "missing option value"
    __hint__ = "put a value right after the option (for example: -o value or --name=value)"


class CheckError(CommandLineException):
    __code__ = FaultCode.CHECK_FAILED
    __title__ = "invalid value"
    __hint__ = "run with --help to see the accepted values"


class UnhandledArgumentError(CommandLineException):
    __code__ = FaultCode.UNHANDLED_ARGUMENT
    __title__ = "unexpected positional"
    __hint__ = "remove the extra value; this program takes no positional arguments"


class SizeViolationError(CommandLineException):
    __code__ = FaultCode.SIZE_VIOLATION
    __title__ = "wrong number of values"
    __hint__ = "run with --help to see what is required and how many values are accepted"


class ValidationError(CommandLineException):
    __code__ = FaultCode.VALIDATION
    __title__ = "invalid combination"
    __hint__ = "run with --help to see which arguments can be combined"


class ConfigurationError(ValueError):
    """
    Structural misuse of the builder API (raised at registration time).
    """
    __code__ = FaultCode.INVALID_CONFIGURATION

    @property
    def code(self):
        return type(self).__code__


class DuplicateNameError(ConfigurationError):
    __code__ = FaultCode.DUPLICATE_NAME


class DuplicatePrefixError(ConfigurationError):
    __code__ = FaultCode.DUPLICATE_PREFIX


class UnknownNameError(LookupError):
    __code__ = FaultCode.UNKNOWN_NAME

    @property
    def code(self):
        return type(self).__code__


__all__ = (
    "FaultCode",
    "CommandLineException",
    "UnknownPrefixError",
    "NoValueError",
    "CheckError",
    "UnhandledArgumentError",
    "SizeViolationError",
    "ValidationError",
    "ConfigurationError",
    "DuplicateNameError",
    "DuplicatePrefixError",
    "UnknownNameError",
)
