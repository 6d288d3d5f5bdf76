"""
The configuration registry.

Scope
- Configuration owns every registered specification: positional arguments (in
  position order), options, flags, the name index shared by all three kinds, the
  prefix indexes used by the tokenizer and dispatcher, the trailing-argument cap
  and the list of validators.

Registration rules (checked before anything is committed, so a rejected call
leaves the registry untouched)
- Names are unique across arguments, options and flags (DuplicateNameError).
- Prefixes are unique across options and flags, and no long prefix may be the
  beginning of another long prefix, e.g. --opt and --option (DuplicatePrefixError).
- A required argument cannot follow an optional one, and only the last argument
  may carry more than one default (ConfigurationError).

The built-in "help" flag (-h/--help) is registered by the constructor, so both
prefixes and the name are taken from the start.

Example
    >>> configuration = Configuration("Sum numbers")
    >>> configuration.add_required_argument("numbers", default="0")
    argument(name='numbers', position=0, required=True, default=('0',), description='')
    >>> configuration.kind_of("numbers")
    <Kind.ARGUMENT: 'argument'>
"""
from .arguments import *
from .faults import *
from .help import HelpGenerator
from .tokens import is_long_option
from .utils import *

HELP_PREFIXES = ("-h", "--help")


class Configuration:
    """
    Mutable registry of arguments, options, flags and validators.

    Parameters
    - description: free text shown under the usage line of the help.
    - usage: replaces the head of the usage line of the default help generator.
    - help_generator: callable(configuration) -> str; mutually exclusive with usage.
    """

    def __init__(self, description="", usage=Unset, help_generator=Unset):
        if help_generator is not Unset and usage is not Unset:
            raise TypeError("Configuration() 'usage' and 'help_generator' are mutually exclusive")
        if not callable(help_generator := coalesce(help_generator, HelpGenerator(usage))):
            raise TypeError("Configuration() 'help_generator' must be callable")

        self._help_generator = help_generator
        self._arguments = []
        self._options = []
        self._flags = []
        self._names = {}
        self._options_by_prefix = {}
        self._flags_by_prefix = {}
        self._validators = []
        self._max_last_argument_size = None
        self.description = description

        self.add_flag("help", *HELP_PREFIXES, description="print help information and exit")

    # -- metadata ------------------------------------------------------------

    @property
    def description(self):
        return self._description

    @description.setter
    def description(self, description):
        if not isinstance(description, str):
            raise TypeError("configuration 'description' must be a string")
        self._description = description

    @property
    def max_last_argument_size(self):
        """
        Maximum number of values the last positional argument may hold (its own
        value plus the remainder); None means unbounded.
        """
        return self._max_last_argument_size

    @max_last_argument_size.setter
    def max_last_argument_size(self, size):
        if size is not None:
            if isinstance(size, bool) or not isinstance(size, int):
                raise TypeError("configuration 'max_last_argument_size' must be an integer or None")
            if size < 1:
                raise ConfigurationError("Max last argument size mustn't be less than 1")
        self._max_last_argument_size = size

    arguments = mirror("arguments")
    options = mirror("options")
    flags = mirror("flags")
    validators = mirror("validators")

    # -- registration --------------------------------------------------------

    def add_required_argument(self, name, *, checker=Unset, consumer=Unset, default=Unset, description=Unset):
        argument = Argument(
            name,
            len(self._arguments),
            True,
            checker=checker,
            consumer=consumer,
            default=default,
            description=description,
        )
        self._check_name(argument)
        if self._arguments and not self._arguments[-1].required:
            raise ConfigurationError("It is not allowed to add required argument after an optional argument")
        self._check_last_defaults()

        self._commit(argument, self._arguments)
        return argument

    def add_optional_argument(self, name, *, checker=Unset, consumer=Unset, default=Unset, description=Unset):
        argument = Argument(
            name,
            len(self._arguments),
            False,
            checker=checker,
            consumer=consumer,
            default=default,
            description=description,
        )
        self._check_name(argument)
        self._check_last_defaults()

        self._commit(argument, self._arguments)
        return argument

    def add_option(
            self,
            name,
            prefix,
            /,
            *prefixes,
            checker=Unset,
            consumer=Unset,
            default=Unset,
            required=False,
            max_values=1,
            description=Unset,
    ):
        option = Option(
            name,
            (prefix, *prefixes),
            checker=checker,
            consumer=consumer,
            default=default,
            required=required,
            max_values=max_values,
            description=description,
        )
        self._check_name(option)
        self._check_prefixes(option)

        self._commit(option, self._options)
        self._options_by_prefix.update(dict.fromkeys(option.prefixes, option))
        return option

    def add_flag(
            self,
            name,
            prefix,
            /,
            *prefixes,
            consumer=Unset,
            required=False,
            max_occurrences=1,
            description=Unset,
    ):
        flag = Flag(
            name,
            (prefix, *prefixes),
            consumer=consumer,
            required=required,
            max_occurrences=max_occurrences,
            description=description,
        )
        self._check_name(flag)
        self._check_prefixes(flag)

        self._commit(flag, self._flags)
        self._flags_by_prefix.update(dict.fromkeys(flag.prefixes, flag))
        return flag

    def add_validator(self, validator, /):
        """
        Register validator(arguments, options, flags, activations), run after the
        size checks in registration order. Returns the validator, so this can be
        used as a decorator.
        """
        if not callable(validator):
            raise TypeError("configuration validators must be callable")
        self._validators.append(validator)
        return validator

    # -- lookups -------------------------------------------------------------

    def option_by_prefix(self, prefix, /):
        return self._options_by_prefix.get(prefix)

    def flag_by_prefix(self, prefix, /):
        return self._flags_by_prefix.get(prefix)

    def has_flag_with_prefix(self, prefix, /):
        return prefix in self._flags_by_prefix

    def is_prefix_registered(self, prefix, /):
        return prefix in self._options_by_prefix or prefix in self._flags_by_prefix

    def kind_of(self, name, /):
        return self._names.get(name)

    # -- rendering -----------------------------------------------------------

    def help(self):
        return self._help_generator(self)

    def __str__(self):
        return self.help()

    # -- internals -----------------------------------------------------------

    def _check_name(self, entity, /):
        if (kind := self._names.get(entity.name)) is not None:
            raise DuplicateNameError(
                f"configuration already has {kind} <{entity.name}>",
            )

    def _check_last_defaults(self):
        if self._arguments and len(self._arguments[-1].default) > 1:
            raise ConfigurationError("Only the last argument can have more than one default value")

    def _check_prefixes(self, entity, /):
        for prefix in entity.prefixes:
            if self.is_prefix_registered(prefix):
                raise DuplicatePrefixError(f"configuration already has <{prefix}> option/flag with prefix")

        # in sorted order a long prefix is directly followed by the prefixes it begins
        prefixes = sorted(
            prefix
            for prefix in (*self._options_by_prefix, *self._flags_by_prefix, *entity.prefixes)
            if is_long_option(prefix)
        )
        for previous, prefix in zip(prefixes, prefixes[1:]):
            if prefix.startswith(previous):
                raise DuplicatePrefixError(f"Option {previous} is a prefix of option {prefix}")

    def _commit(self, entity, entities, /):
        entities.append(entity)
        self._names[entity.name] = entity.kind


__all__ = (
    "HELP_PREFIXES",
    "Configuration",
)
