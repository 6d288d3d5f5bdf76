"""
Help rendering.

HelpGenerator turns a finished Configuration into the text printed for -h/--help
and after a fault. Any callable taking the configuration and returning a string
can replace it (Configuration(help_generator=...)).

Layout
    Usage: <usage> NAME [OTHER] [LAST...]

    <description>

    Positional arguments:
      name   description (default: a, b)

    Prefixed arguments:
      Required:
        -o, --operation  description (default: sum)
      Optional:
        -h, --help       print help information and exit

The two sections are borderless rich grids rendered on an uncolored Console of
`width` columns; a column too wide for it is folded by rich, never truncated.
Trailing blanks are stripped from every line.
"""
import io

from rich.console import Console
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from .utils import *


def _prefixes(entity, /):
    return ", ".join(entity.prefixes)


def _defaults(entity, /):
    if not entity.default:
        return ""
    return " (default: %s)" % ", ".join(entity.default)


def _grid(rows, indent, min_width=None, /):
    table = Table(
        box=None,
        show_header=False,
        show_edge=False,
        pad_edge=False,
        collapse_padding=True,
        padding=(0, 2, 0, 0),
    )
    table.add_column(min_width=min_width, overflow="fold")
    table.add_column(overflow="fold")
    for name, description in rows:
        table.add_row(Text(name), Text(description))
    return Padding.indent(table, indent)


class HelpGenerator:
    """
    Default help renderer.

    `usage` replaces the leading part of the usage line (the program name and
    "[OPTIONS]" by default); the positional arguments are always appended to it.
    `width` is the number of columns the help is laid out on.
    """

    def __init__(self, usage=Unset, width=80):
        if not isinstance(usage, str | Unset):
            raise TypeError("HelpGenerator() 'usage' must be a string")
        if isinstance(width, bool) or not isinstance(width, int):
            raise TypeError("HelpGenerator() 'width' must be an integer")
        if width < 1:
            raise ValueError("HelpGenerator() 'width' must be positive")
        self._usage = coalesce(usage, "")
        self._width = width

    @property
    def usage(self):
        return self._usage or "%s [OPTIONS] " % prog()

    @property
    def width(self):
        return self._width

    def __call__(self, configuration, /):
        return self.generate(configuration)

    def generate(self, configuration, /):
        renders = [Text("Usage: " + self.usage + self._arguments_line(configuration)), None]
        if configuration.description:
            renders += [Text(configuration.description), None]
        if section := self._arguments_section(configuration):
            renders += section + [None]
        renders += self._prefixed_section(configuration)

        console = Console(
            file=io.StringIO(),
            width=self._width,
            color_system=None,
            force_terminal=False,
            highlight=False,
            emoji=False,
        )
        for render in renders:
            if render is None:
                console.print()
            else:
                console.print(render)

        lines = [line.rstrip() for line in console.file.getvalue().splitlines()]
        return "\n".join(lines).rstrip() + "\n"

    @staticmethod
    def _arguments_line(configuration):
        *arguments, last = configuration.arguments or (None,)
        if last is None:
            return ""

        words = []
        for argument in arguments:
            name = argument.name.upper()
            words.append(name if argument.required else "[%s]" % name)

        name = last.name.upper()
        many = configuration.max_last_argument_size != 1
        if last.required:
            words.append(name)
            if many:
                words.append("[%s...]" % name)
        else:
            words.append(("[%s...]" if many else "[%s]") % name)
        return " ".join(words)

    @staticmethod
    def _arguments_section(configuration):
        if not (arguments := configuration.arguments):
            return []
        rows = [(argument.name, argument.description + _defaults(argument)) for argument in arguments]
        return [Text("Positional arguments:"), _grid(rows, 2)]

    @staticmethod
    def _prefixed_section(configuration):
        options, flags = configuration.options, configuration.flags
        if not options and not flags:
            return []

        # Required and Optional share the prefix column
        width = max(len(_prefixes(entity)) for entity in (*options, *flags))

        renders = [Text("Prefixed arguments:")]
        for title, required in (("Required:", True), ("Optional:", False)):
            rows = [
                *((_prefixes(option), option.description + _defaults(option))
                  for option in options if option.required == required),
                *((_prefixes(flag), flag.description) for flag in flags if flag.required == required),
            ]
            if rows:
                renders += [Padding.indent(Text(title), 2), _grid(rows, 4, width)]
        return renders


__all__ = (
    "HelpGenerator",
)
